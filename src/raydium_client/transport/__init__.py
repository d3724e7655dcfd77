"""
Transport layer - generic request/response machinery.

Provides:
- Pooled httpx clients with a fixed timeout
- Request descriptors and the request builder
- JSON response decoding into typed result containers
"""

from raydium_client.transport.decode import Result, decode_response
from raydium_client.transport.http import HttpTransport
from raydium_client.transport.pool import (
    DEFAULT_TIMEOUT_MS,
    ClientPool,
    PoolConfig,
    PoolStats,
)
from raydium_client.transport.request import (
    POST_DEFAULT_HEADERS,
    BuiltRequest,
    HttpMethod,
    RequestDescriptor,
    build_request,
)

__all__ = [
    "DEFAULT_TIMEOUT_MS",
    "POST_DEFAULT_HEADERS",
    "BuiltRequest",
    "ClientPool",
    "HttpMethod",
    "HttpTransport",
    "PoolConfig",
    "PoolStats",
    "RequestDescriptor",
    "Result",
    "build_request",
    "decode_response",
]
