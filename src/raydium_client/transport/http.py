"""
HTTP transport: executes built requests on pooled httpx clients.
"""

from __future__ import annotations

import asyncio
import time
from typing import TypeVar

import httpx

from raydium_client.errors import TransportError
from raydium_client.telemetry import get_logger
from raydium_client.transport.decode import Result, decode_response
from raydium_client.transport.pool import ClientPool
from raydium_client.transport.request import (
    BuiltRequest,
    HttpMethod,
    RequestDescriptor,
    build_request,
)

T = TypeVar("T")

logger = get_logger("raydium_client.transport.http")


class HttpTransport:
    """Sends requests against one base URL through a client pool.

    Example:
        >>> transport = HttpTransport("https://transaction-v1.raydium.io", pool)
        >>> result = Result(dict)
        >>> await transport.execute(HttpMethod.GET, result, "/main/version")
    """

    def __init__(self, base_url: str, pool: ClientPool) -> None:
        """Initialize HTTP transport.

        Args:
            base_url: Base URL every path is appended to
            pool: Pool supplying clients

        Raises:
            ValueError: If base_url is empty
        """
        if not base_url:
            raise ValueError("base_url must not be empty")
        self._base_url = base_url
        self._pool = pool

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def pool(self) -> ClientPool:
        return self._pool

    def build(
        self,
        method: HttpMethod | str,
        path: str,
        descriptor: RequestDescriptor | None = None,
    ) -> BuiltRequest:
        """Build a request for this transport's base URL."""
        return build_request(method, self._base_url, path, descriptor)

    async def execute(
        self,
        method: HttpMethod | str,
        result: Result[T],
        path: str,
        descriptor: RequestDescriptor | None = None,
    ) -> T:
        """Build, send and decode one request.

        The send and the body read share one deadline of the pool's
        ``timeout_ms``.

        Args:
            method: GET or POST
            result: Container receiving the decoded body
            path: Request path (relative to base URL)
            descriptor: Body, query string and header overrides

        Returns:
            The decoded value

        Raises:
            SerializationError: If the request cannot be built
            TransportError: On network/connection errors or when the deadline
                passes
            DecodeError: If the response cannot be decoded
        """
        built = self.build(method, path, descriptor)

        deadline = self._pool.config.timeout_ms / 1000

        async with self._pool.lease() as client:
            try:
                return await asyncio.wait_for(
                    self._round_trip(client, built, result), timeout=deadline
                )
            except asyncio.TimeoutError as e:
                error = TransportError(
                    f"Request timed out after {self._pool.config.timeout_ms} ms",
                    url=built.url,
                    retryable=True,
                    cause=e,
                )
                _log_failure(built, error)
                raise error from e
            except TransportError as e:
                _log_failure(built, e)
                raise

    async def _round_trip(
        self, client: httpx.AsyncClient, built: BuiltRequest, result: Result[T]
    ) -> T:
        response = await self._send(client, built)
        return await decode_response(response, result)

    async def _send(self, client: httpx.AsyncClient, built: BuiltRequest) -> httpx.Response:
        request = client.build_request(
            built.method.value,
            built.url,
            headers=built.headers,
            content=built.content,
        )

        logger.debug("Sending request", method=built.method.value, url=built.url)
        start = time.perf_counter()

        try:
            response = await client.send(request, stream=True)
        except httpx.ConnectError as e:
            raise TransportError(
                f"Connection failed: {e}",
                url=built.url,
                retryable=True,
                cause=e,
            ) from e
        except httpx.TimeoutException as e:
            raise TransportError(
                f"Request timed out: {e}",
                url=built.url,
                retryable=True,
                cause=e,
            ) from e
        except httpx.HTTPError as e:
            raise TransportError(
                f"HTTP error: {e}",
                url=built.url,
                cause=e,
            ) from e

        logger.debug(
            "Received response",
            method=built.method.value,
            url=built.url,
            status_code=response.status_code,
            elapsed_ms=round((time.perf_counter() - start) * 1000, 2),
        )
        return response


def _log_failure(built: BuiltRequest, error: TransportError) -> None:
    logger.warning(
        "Request failed",
        method=built.method.value,
        url=built.url,
        reason=error.message,
        retryable=error.retryable,
    )
