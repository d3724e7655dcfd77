"""raydium-client-python: async HTTP client for the Raydium trade API.

Generic GET/POST machinery over pooled httpx clients, decoding JSON
responses into typed result containers, plus a swap quote convenience call.
"""
from __future__ import annotations

from raydium_client.client import RaydiumClient, RaydiumClientBuilder
from raydium_client.errors import (
    DecodeError,
    ErrorKind,
    RaydiumError,
    SerializationError,
    TransportError,
)
from raydium_client.transport import (
    ClientPool,
    PoolConfig,
    RequestDescriptor,
    Result,
)
from raydium_client.types import (
    QuoteQuery,
    RoutePlanHop,
    SwapQuoteData,
    SwapQuoteResponse,
)

__version__ = "0.1.0"

__all__ = [
    # Client
    "RaydiumClient",
    "RaydiumClientBuilder",
    # Transport
    "ClientPool",
    "PoolConfig",
    "RequestDescriptor",
    "Result",
    # Errors
    "DecodeError",
    "ErrorKind",
    "RaydiumError",
    "SerializationError",
    "TransportError",
    # Types
    "QuoteQuery",
    "RoutePlanHop",
    "SwapQuoteData",
    "SwapQuoteResponse",
    # Version
    "__version__",
]
