"""
Builder for fluent client construction.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from raydium_client.transport import ClientPool, PoolConfig

if TYPE_CHECKING:
    import httpx

    from raydium_client.client.core import RaydiumClient


class RaydiumClientBuilder:
    """Builder for creating RaydiumClient instances with custom configuration.

    Example:
        >>> client = (
        ...     RaydiumClientBuilder()
        ...     .base_url("https://transaction-v1.raydium.io")
        ...     .timeout_ms(3000)
        ...     .build()
        ... )
    """

    def __init__(self) -> None:
        self._base_url: str | None = None
        self._timeout_ms: int | None = None
        self._proxy: str | None = None
        self._trust_env: bool | None = None
        self._pool: ClientPool | None = None
        self._transport: httpx.AsyncBaseTransport | None = None

    def base_url(self, url: str) -> RaydiumClientBuilder:
        """Set the base URL.

        Args:
            url: Base URL for API requests

        Returns:
            Self for chaining
        """
        self._base_url = url
        return self

    def timeout_ms(self, milliseconds: int) -> RaydiumClientBuilder:
        """Set the per-request timeout.

        Args:
            milliseconds: Timeout in milliseconds

        Returns:
            Self for chaining
        """
        self._timeout_ms = milliseconds
        return self

    def proxy(self, url: str) -> RaydiumClientBuilder:
        """Route requests through a proxy."""
        self._proxy = url
        return self

    def trust_env(self, enable: bool = True) -> RaydiumClientBuilder:
        """Let httpx read proxy settings from the environment."""
        self._trust_env = enable
        return self

    def pool(self, pool: ClientPool) -> RaydiumClientBuilder:
        """Share an existing client pool; other transport options are ignored."""
        self._pool = pool
        return self

    def transport(self, transport: httpx.AsyncBaseTransport) -> RaydiumClientBuilder:
        """Use a custom httpx transport for every pooled client."""
        self._transport = transport
        return self

    def build_config(self) -> PoolConfig:
        """Resolve the pool configuration: explicit values, then environment."""
        config = PoolConfig.from_env(self._timeout_ms)
        if self._trust_env is not None:
            config.trust_env = self._trust_env
        if self._proxy is not None:
            config.proxy = self._proxy
        return config

    def build(self) -> RaydiumClient:
        """Build the RaydiumClient instance.

        Raises:
            ValueError: If the resolved base URL is empty
        """
        from raydium_client.client.core import DEFAULT_BASE_URL, RaydiumClient

        base_url = self._base_url
        if base_url is None:
            base_url = os.getenv("RAYDIUM_BASE_URL") or DEFAULT_BASE_URL

        if self._pool is not None:
            return RaydiumClient(base_url, pool=self._pool)
        return RaydiumClient(
            base_url,
            config=self.build_config(),
            transport=self._transport,
        )
