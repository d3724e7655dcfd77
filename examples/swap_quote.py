#!/usr/bin/env python3
"""
Basic swap quote example.

Requests a SOL -> USDC quote from the public Raydium trade API.

Usage:
    python examples/swap_quote.py
"""

import asyncio

from raydium_client import (
    QuoteQuery,
    RaydiumClient,
    RaydiumError,
    Result,
    SwapQuoteResponse,
)
from raydium_client.telemetry import LogLevel, configure_logging

SOL_MINT = "So11111111111111111111111111111111111111112"
USDC_MINT = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"


async def main() -> None:
    """Run swap quote example."""
    configure_logging(level=LogLevel.DEBUG, format="text")

    async with RaydiumClient.create() as client:
        result = Result(SwapQuoteResponse)
        query = QuoteQuery(
            input_mint=SOL_MINT,
            output_mint=USDC_MINT,
            amount=100_000_000,
            slippage_bps=50,
        )

        try:
            await client.swap_quote(result, {}, query)
        except RaydiumError as e:
            print(f"Quote failed ({e.kind.value if e.kind else 'unknown'}): {e}")
            return

        quote = result.unwrap()
        if not quote.success or quote.data is None:
            print(f"Service rejected quote: {quote.msg}")
            return

        print(f"In:  {quote.data.input_amount} {quote.data.input_mint}")
        print(f"Out: {quote.data.output_amount} {quote.data.output_mint}")
        print(f"Price impact: {quote.data.price_impact_pct}%")
        for hop in quote.data.route_plan:
            print(f"  via pool {hop.pool_id} (fee {hop.fee_amount} of {hop.fee_mint})")


if __name__ == "__main__":
    asyncio.run(main())
