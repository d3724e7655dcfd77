"""Root pytest fixtures for raydium-client-python tests."""

from __future__ import annotations

from typing import Any

import pytest

from raydium_client.types import QuoteQuery


@pytest.fixture
def base_url() -> str:
    """Base URL of the mocked quote service."""
    return "https://api.example.com"


@pytest.fixture
def quote_query() -> QuoteQuery:
    """Quote query used across scenarios."""
    return QuoteQuery(
        input_mint="A",
        output_mint="B",
        amount=1_000_000,
        slippage_bps=50,
        tx_version="V0",
    )


@pytest.fixture
def quote_payload() -> dict[str, Any]:
    """Successful swap-base-in response body."""
    return {
        "id": "1",
        "success": True,
        "version": "V0",
        "data": {
            "swapType": "BaseIn",
            "inputMint": "A",
            "inputAmount": "1000000",
            "outputMint": "B",
            "outputAmount": "990000",
            "otherAmountThreshold": "985000",
            "slippageBps": 50,
            "priceImpactPct": 0.01,
            "referrerAmount": "0",
            "routePlan": [],
        },
    }
