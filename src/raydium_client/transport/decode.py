"""
Response decoding into caller-owned result containers.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

import httpx
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from raydium_client.errors import DecodeError, TransportError

T = TypeVar("T")

# Bytes of an undecodable body kept on DecodeError for diagnostics
_BODY_PREVIEW_BYTES = 200


class Result(Generic[T]):
    """Caller-owned container that receives a decoded response.

    The target type is fixed at construction. Every successful decode stores
    a newly validated value in ``data``; a value held from an earlier decode
    is replaced, never mutated. A failed decode leaves ``data`` unchanged.

    Example:
        >>> result = Result(SwapQuoteResponse)
        >>> await client.swap_quote(result, {}, query)
        >>> result.data.success
        True
    """

    def __init__(self, target: type[T] | Any) -> None:
        """Initialize the container.

        Args:
            target: Type to decode into (pydantic model, dataclass, dict[...] ...)
        """
        self.target = target
        self.data: T | None = None
        self._adapter: TypeAdapter[T] = TypeAdapter(target)

    @property
    def is_set(self) -> bool:
        """Whether a value has been decoded into this container."""
        return self.data is not None

    def unwrap(self) -> T:
        """Return the decoded value.

        Raises:
            LookupError: If nothing has been decoded yet
        """
        if self.data is None:
            raise LookupError("Result container is empty")
        return self.data

    def clear(self) -> None:
        """Drop the decoded value."""
        self.data = None

    def validate_json(self, body: bytes | str) -> T:
        """Validate a JSON document against the target type."""
        return self._adapter.validate_json(body)

    def __repr__(self) -> str:
        name = getattr(self.target, "__name__", repr(self.target))
        return f"Result[{name}](data={self.data!r})"


def _is_syntax_error(error: PydanticValidationError) -> bool:
    return any(item.get("type") == "json_invalid" for item in error.errors())


def _request_url(response: httpx.Response) -> str | None:
    try:
        return str(response.request.url)
    except RuntimeError:
        return None


async def read_body(response: httpx.Response) -> bytes:
    """Read the full response body and close the response.

    Raises:
        TransportError: If the connection fails or times out mid-body
    """
    url = _request_url(response)
    try:
        return await response.aread()
    except httpx.TimeoutException as e:
        raise TransportError(
            f"Timed out reading response body: {e}",
            url=url,
            retryable=True,
            cause=e,
        ) from e
    except httpx.HTTPError as e:
        raise TransportError(
            f"Failed to read response body: {e}",
            url=url,
            cause=e,
        ) from e
    finally:
        await response.aclose()


async def decode_response(response: httpx.Response, result: Result[T]) -> T:
    """Decode a response body into a result container.

    Args:
        response: Response whose body has not been consumed yet
        result: Container to fill

    Returns:
        The decoded value, also stored in ``result.data``

    Raises:
        TransportError: If the body cannot be read
        DecodeError: If the body is not JSON or does not match the
            container's target type
    """
    body = await read_body(response)

    try:
        value = result.validate_json(body)
    except PydanticValidationError as e:
        syntax = _is_syntax_error(e)
        reason = "invalid JSON" if syntax else "unexpected payload shape"
        error = DecodeError(
            f"Failed to decode response: {reason}",
            status_code=response.status_code,
            syntax=syntax,
            cause=e,
        )
        error.context.details["body_preview"] = body[:_BODY_PREVIEW_BYTES].decode(
            "utf-8", errors="replace"
        )
        raise error from e

    result.data = value
    return value
