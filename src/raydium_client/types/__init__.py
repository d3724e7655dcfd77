"""
Data contracts of the quote service.
"""

from raydium_client.types.quote import (
    QuoteQuery,
    RoutePlanHop,
    SwapQuoteData,
    SwapQuoteResponse,
)

__all__ = [
    "QuoteQuery",
    "RoutePlanHop",
    "SwapQuoteData",
    "SwapQuoteResponse",
]
