"""
Client pool for HTTP transport.

Keeps a free-list of idle ``httpx.AsyncClient`` instances so that client
construction is amortized across calls. Each leased client serves exactly
one caller at a time and goes back to the free-list when released.
"""

from __future__ import annotations

import asyncio
import os
from contextlib import asynccontextmanager, suppress
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import httpx

from raydium_client.telemetry import get_logger

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

logger = get_logger("raydium_client.transport.pool")

# Per-request timeout of every pooled client
DEFAULT_TIMEOUT_MS = 5000


def _trust_env_enabled() -> bool:
    """Use env proxy settings only when explicitly enabled."""
    return os.getenv("RAYDIUM_HTTP_TRUST_ENV", "0") == "1"


@dataclass
class PoolConfig:
    """Configuration for pooled clients.

    Attributes:
        timeout_ms: Total per-request timeout in milliseconds
        connect_timeout_ms: Connect timeout, defaults to timeout_ms
        trust_env: Let httpx read proxy settings from the environment
        proxy: Explicit proxy URL
    """

    timeout_ms: int = DEFAULT_TIMEOUT_MS
    connect_timeout_ms: int | None = None
    trust_env: bool = False
    proxy: str | None = None

    @classmethod
    def default(cls) -> PoolConfig:
        """Create default configuration."""
        return cls()

    @classmethod
    def from_env(cls, timeout_ms: int | None = None) -> PoolConfig:
        """Create configuration from environment variables.

        Resolution order for the timeout: explicit argument,
        RAYDIUM_HTTP_TIMEOUT_MS, then the default.
        """
        if timeout_ms is None:
            env_timeout = os.getenv("RAYDIUM_HTTP_TIMEOUT_MS")
            if env_timeout:
                with suppress(ValueError):
                    timeout_ms = int(env_timeout)
        trust_env = _trust_env_enabled()
        return cls(
            timeout_ms=timeout_ms if timeout_ms is not None else DEFAULT_TIMEOUT_MS,
            trust_env=trust_env,
            proxy=os.getenv("RAYDIUM_PROXY_URL") if trust_env else None,
        )

    def to_httpx_timeout(self) -> httpx.Timeout:
        """Convert to httpx Timeout."""
        connect_ms = self.connect_timeout_ms or self.timeout_ms
        return httpx.Timeout(self.timeout_ms / 1000.0, connect=connect_ms / 1000.0)


@dataclass
class PoolStats:
    """Statistics for a client pool."""

    clients_created: int = 0
    clients_closed: int = 0
    acquisitions: int = 0
    releases: int = 0
    in_use: int = 0
    idle: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "clients_created": self.clients_created,
            "clients_closed": self.clients_closed,
            "acquisitions": self.acquisitions,
            "releases": self.releases,
            "in_use": self.in_use,
            "idle": self.idle,
        }


class ClientPool:
    """Self-replenishing pool of ``httpx.AsyncClient`` instances.

    ``acquire`` hands out an idle client or builds a new one when none is
    idle; ``release`` puts it back. Prefer ``lease`` which pairs the two on
    every exit path.

    Example:
        >>> pool = ClientPool(PoolConfig(timeout_ms=5000))
        >>> async with pool.lease() as client:
        ...     response = await client.send(request)
    """

    def __init__(
        self,
        config: PoolConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the pool.

        Args:
            config: Pool configuration
            transport: Optional transport shared by every created client
        """
        self._config = config or PoolConfig.default()
        self._transport = transport
        self._idle: list[httpx.AsyncClient] = []
        self._leased: set[int] = set()
        self._lock = asyncio.Lock()
        self._stats = PoolStats()
        self._closed = False

    def _create_client(self) -> httpx.AsyncClient:
        client = httpx.AsyncClient(
            timeout=self._config.to_httpx_timeout(),
            proxy=self._config.proxy,
            trust_env=self._config.trust_env,
            transport=self._transport,
        )
        self._stats.clients_created += 1
        logger.debug(
            "Created pooled client",
            timeout_ms=self._config.timeout_ms,
            clients_created=self._stats.clients_created,
        )
        return client

    async def acquire(self) -> httpx.AsyncClient:
        """Lease a client for one request/response cycle.

        Returns:
            A client no other caller currently holds

        Raises:
            RuntimeError: If the pool is closed
        """
        async with self._lock:
            if self._closed:
                raise RuntimeError("Client pool is closed")

            client = self._idle.pop() if self._idle else self._create_client()
            self._leased.add(id(client))
            self._stats.acquisitions += 1
            self._stats.in_use = len(self._leased)
            self._stats.idle = len(self._idle)
            return client

    async def release(self, client: httpx.AsyncClient) -> None:
        """Return a leased client to the pool.

        Args:
            client: Client previously returned by ``acquire``

        Raises:
            ValueError: If the client is not currently leased from this pool
        """
        async with self._lock:
            if id(client) not in self._leased:
                raise ValueError("Client was not leased from this pool")

            self._leased.discard(id(client))
            self._stats.releases += 1
            self._stats.in_use = len(self._leased)
            if self._closed:
                await client.aclose()
                self._stats.clients_closed += 1
            else:
                self._idle.append(client)
            self._stats.idle = len(self._idle)

    @asynccontextmanager
    async def lease(self) -> AsyncIterator[httpx.AsyncClient]:
        """Acquire a client and release it on exit, including on errors."""
        client = await self.acquire()
        try:
            yield client
        finally:
            await self.release(client)

    async def close(self) -> None:
        """Close idle clients; leased ones are closed when released."""
        async with self._lock:
            self._closed = True
            for client in self._idle:
                await client.aclose()
                self._stats.clients_closed += 1
            self._idle.clear()
            self._stats.idle = 0

    @property
    def config(self) -> PoolConfig:
        """Get pool configuration."""
        return self._config

    @property
    def stats(self) -> PoolStats:
        """Get pool statistics."""
        return self._stats

    @property
    def is_closed(self) -> bool:
        """Check if pool is closed."""
        return self._closed

    async def __aenter__(self) -> ClientPool:
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()
