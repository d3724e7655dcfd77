"""
Integration test helper utilities.

Shared payload builders and mock handlers for integration tests.
"""

from __future__ import annotations

import asyncio
from typing import Any

import httpx


def mock_route_hop(
    pool_id: str = "58oQChx4yWmvKdwLLZzBi4ChoCc2fqCUWBkwMihLYQo2",
    input_mint: str = "A",
    output_mint: str = "B",
) -> dict[str, Any]:
    """Create one route plan hop."""
    return {
        "poolId": pool_id,
        "inputMint": input_mint,
        "outputMint": output_mint,
        "feeMint": input_mint,
        "feeRate": 25,
        "feeAmount": "2500",
        "remainingAccounts": [],
        "lastPoolPriceX64": "7357845937267893412",
    }


def mock_quote_response(
    input_mint: str = "A",
    output_mint: str = "B",
    input_amount: str = "1000000",
    output_amount: str = "990000",
    route_plan: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """Create a mock swap-base-in response."""
    return {
        "id": "1",
        "success": True,
        "version": "V0",
        "data": {
            "swapType": "BaseIn",
            "inputMint": input_mint,
            "inputAmount": input_amount,
            "outputMint": output_mint,
            "outputAmount": output_amount,
            "otherAmountThreshold": output_amount,
            "slippageBps": 50,
            "priceImpactPct": 0.01,
            "referrerAmount": "0",
            "routePlan": route_plan if route_plan is not None else [mock_route_hop()],
        },
    }


def echo_quote_transport(delay: float = 0.0) -> httpx.MockTransport:
    """Transport answering quotes with outputAmount equal to the requested amount.

    The delay keeps requests in flight long enough to overlap.
    """

    async def handler(request: httpx.Request) -> httpx.Response:
        await asyncio.sleep(delay)
        params = request.url.params
        return httpx.Response(
            200,
            json=mock_quote_response(
                input_mint=params["inputMint"],
                output_mint=params["outputMint"],
                input_amount=params["amount"],
                output_amount=params["amount"],
            ),
        )

    return httpx.MockTransport(handler)
