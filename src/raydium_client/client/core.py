"""
Core RaydiumClient implementation.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Any, TypeVar

import httpx

from raydium_client.transport import (
    ClientPool,
    HttpMethod,
    HttpTransport,
    PoolConfig,
    RequestDescriptor,
)

if TYPE_CHECKING:
    from raydium_client.client.builder import RaydiumClientBuilder
    from raydium_client.transport import Result
    from raydium_client.types.quote import QuoteQuery

T = TypeVar("T")

DEFAULT_BASE_URL = "https://transaction-v1.raydium.io"

SWAP_BASE_IN_PATH = "/compute/swap-base-in"

# Browser identity sent with quote requests
QUOTE_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/125.0.0.0 Safari/537.36"
)


class RaydiumClient:
    """Client for the Raydium trade API.

    ``get`` and ``post`` work against any path and decode into any type;
    ``swap_quote`` is the typed convenience call for swap price quotes.

    Example:
        >>> client = RaydiumClient.create()
        >>> result = Result(SwapQuoteResponse)
        >>> await client.swap_quote(result, {}, QuoteQuery(
        ...     input_mint="So11111111111111111111111111111111111111112",
        ...     output_mint="EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v",
        ...     amount=1_000_000,
        ...     slippage_bps=50,
        ... ))
        >>> result.data.data.output_amount
    """

    def __init__(
        self,
        base_url: str,
        *,
        pool: ClientPool | None = None,
        config: PoolConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Base URL of the service
            pool: Client pool to share; built from config/transport if omitted
            config: Pool configuration used when no pool is given
            transport: httpx transport used when no pool is given

        Raises:
            ValueError: If base_url is empty
        """
        self._pool = pool or ClientPool(config, transport=transport)
        self._transport = HttpTransport(base_url, self._pool)

    @classmethod
    def create(
        cls,
        base_url: str | None = None,
        *,
        timeout_ms: int | None = None,
    ) -> RaydiumClient:
        """Create a client, filling unset options from the environment.

        Args:
            base_url: Base URL (default: RAYDIUM_BASE_URL, then DEFAULT_BASE_URL)
            timeout_ms: Per-request timeout (default: RAYDIUM_HTTP_TIMEOUT_MS, then 5000)

        Returns:
            Configured RaydiumClient instance
        """
        resolved = base_url or os.getenv("RAYDIUM_BASE_URL") or DEFAULT_BASE_URL
        return cls(resolved, config=PoolConfig.from_env(timeout_ms))

    @classmethod
    def builder(cls) -> RaydiumClientBuilder:
        """Get a builder for advanced configuration."""
        from raydium_client.client.builder import RaydiumClientBuilder

        return RaydiumClientBuilder()

    @property
    def base_url(self) -> str:
        return self._transport.base_url

    @property
    def pool(self) -> ClientPool:
        return self._pool

    async def get(
        self,
        result: Result[T],
        path: str,
        descriptor: RequestDescriptor | None = None,
    ) -> T:
        """Send a GET request and decode the response into ``result``."""
        return await self._transport.execute(HttpMethod.GET, result, path, descriptor)

    async def post(
        self,
        result: Result[T],
        path: str,
        descriptor: RequestDescriptor | None = None,
    ) -> T:
        """Send a POST request and decode the response into ``result``."""
        return await self._transport.execute(HttpMethod.POST, result, path, descriptor)

    async def swap_quote(
        self,
        result: Result[T],
        headers: dict[str, str] | None,
        query: QuoteQuery,
    ) -> T:
        """Request a swap-base-in quote.

        The browser User-Agent and ``Cache-Content: no-cache`` are written
        into ``headers`` in place, replacing caller values for those keys.

        Args:
            result: Container receiving the decoded response
            headers: Extra request headers; mutated
            query: Quote parameters

        Returns:
            The decoded response

        Raises:
            SerializationError: If the query cannot be encoded (nothing is sent)
            TransportError: On network/connection errors
            DecodeError: If the response cannot be decoded
        """
        query_string = query.to_query_string()

        if headers is None:
            headers = {}
        headers["User-Agent"] = QUOTE_USER_AGENT
        headers["Cache-Content"] = "no-cache"

        return await self.get(
            result,
            SWAP_BASE_IN_PATH,
            RequestDescriptor(query=query_string, headers=headers),
        )

    async def close(self) -> None:
        """Close pooled clients."""
        await self._pool.close()

    async def __aenter__(self) -> RaydiumClient:
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()
