"""
Client module - high-level API of the quote service.
"""

from raydium_client.client.builder import RaydiumClientBuilder
from raydium_client.client.core import (
    DEFAULT_BASE_URL,
    QUOTE_USER_AGENT,
    SWAP_BASE_IN_PATH,
    RaydiumClient,
)

__all__ = [
    "DEFAULT_BASE_URL",
    "QUOTE_USER_AGENT",
    "SWAP_BASE_IN_PATH",
    "RaydiumClient",
    "RaydiumClientBuilder",
]
