"""
Request descriptors and the builder that turns them into outgoing requests.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

import httpx
from pydantic_core import PydanticSerializationError, to_json

from raydium_client.errors import SerializationError

# Headers set on every POST before caller headers are applied
POST_DEFAULT_HEADERS: dict[str, str] = {
    "content-type": "application/x-www-form-urlencoded",
    "Cache-Content": "no-cache",
}


class HttpMethod(str, Enum):
    """Supported HTTP verbs."""

    GET = "GET"
    POST = "POST"


@dataclass
class RequestDescriptor:
    """Description of one outgoing call.

    Attributes:
        body: Payload serialized as JSON when not None
        query: Pre-encoded query string, appended verbatim
        headers: Header overrides, applied in insertion order
    """

    body: Any | None = None
    query: str | None = None
    headers: dict[str, str] | None = None


@dataclass
class BuiltRequest:
    """A fully formed request, ready to be sent by a pooled client."""

    method: HttpMethod
    url: str
    headers: httpx.Headers
    content: bytes | None = None


def build_url(base_url: str, path: str, query: str | None = None) -> str:
    """Concatenate base URL, path and an already encoded query string."""
    url = f"{base_url}{path}"
    if query:
        url = f"{url}?{query}"
    return url


def serialize_body(body: Any) -> bytes:
    """Serialize a request body to JSON.

    Pydantic models are dumped by alias; plain containers as-is.

    Raises:
        SerializationError: If the body cannot be represented as JSON
    """
    try:
        return to_json(body, by_alias=True)
    except (PydanticSerializationError, TypeError, ValueError) as e:
        raise SerializationError(
            f"Failed to serialize request body: {e}",
            cause=e,
        ) from e


def build_headers(
    method: HttpMethod, overrides: dict[str, str] | None = None
) -> httpx.Headers:
    """Build request headers for a verb.

    GET carries only caller headers. POST starts from POST_DEFAULT_HEADERS and
    caller headers replace defaults of the same name.

    Raises:
        SerializationError: If a header value is not str or bytes
    """
    headers = httpx.Headers()
    if method is HttpMethod.POST:
        for key, value in POST_DEFAULT_HEADERS.items():
            headers[key] = value
    if overrides:
        for key, value in overrides.items():
            if not isinstance(value, (str, bytes)):
                raise SerializationError(
                    f"Header {key!r} must be str or bytes, got {type(value).__name__}"
                ).with_hint("Convert header values to str before sending")
            headers[key] = value
    return headers


def validate_url(url: str) -> str:
    """Check that a URL parses before a client is leased for it.

    Raises:
        SerializationError: If httpx rejects the URL
    """
    try:
        httpx.URL(url)
    except httpx.InvalidURL as e:
        raise SerializationError(
            f"Invalid request URL: {e}",
            cause=e,
        ).with_hint("Check the base URL and path") from e
    return url


def build_request(
    method: HttpMethod | str,
    base_url: str,
    path: str,
    descriptor: RequestDescriptor | None = None,
) -> BuiltRequest:
    """Build an outgoing request from a descriptor.

    Args:
        method: GET or POST
        base_url: Base URL of the service
        path: Path relative to the base URL
        descriptor: Body, query string and header overrides

    Returns:
        The built request

    Raises:
        ValueError: If the method is not GET or POST
        SerializationError: If the body, a header or the URL is invalid
    """
    try:
        verb = HttpMethod(method.upper() if isinstance(method, str) else method)
    except ValueError:
        raise ValueError(f"Unsupported HTTP method: {method!r}") from None

    descriptor = descriptor or RequestDescriptor()
    content = serialize_body(descriptor.body) if descriptor.body is not None else None

    return BuiltRequest(
        method=verb,
        url=validate_url(build_url(base_url, path, descriptor.query)),
        headers=build_headers(verb, descriptor.headers),
        content=content,
    )
