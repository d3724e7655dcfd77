#!/usr/bin/env python3
"""
Concurrent quote example.

Fires several quotes in parallel over one client pool and reports which
kind of error, if any, each one hit.

Usage:
    export RAYDIUM_HTTP_TIMEOUT_MS=3000
    python examples/concurrent_quotes.py
"""

import asyncio

from raydium_client import (
    ErrorKind,
    QuoteQuery,
    RaydiumClient,
    RaydiumError,
    Result,
    SwapQuoteResponse,
)

SOL_MINT = "So11111111111111111111111111111111111111112"
USDC_MINT = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"


async def quote(client: RaydiumClient, amount: int) -> str:
    result = Result(SwapQuoteResponse)
    query = QuoteQuery(
        input_mint=SOL_MINT,
        output_mint=USDC_MINT,
        amount=amount,
        slippage_bps=50,
    )
    try:
        await client.swap_quote(result, {}, query)
    except RaydiumError as e:
        if e.kind is ErrorKind.TRANSPORT:
            return f"{amount}: network problem, safe to retry"
        return f"{amount}: {e.kind.value if e.kind else 'error'} - {e.message}"

    data = result.unwrap().data
    return f"{amount}: {data.output_amount if data else 'no route'}"


async def main() -> None:
    """Run concurrent quote example."""
    async with RaydiumClient.create() as client:
        amounts = [10**k for k in range(6, 11)]
        lines = await asyncio.gather(*(quote(client, a) for a in amounts))
        for line in lines:
            print(line)
        print(f"Pool: {client.pool.stats.to_dict()}")


if __name__ == "__main__":
    asyncio.run(main())
