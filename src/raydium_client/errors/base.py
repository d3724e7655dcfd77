"""Base error classes for raydium-client-python.

Every failure surfaced by the client belongs to exactly one kind:
- SerializationError: request body/query could not be encoded (no network use)
- TransportError: the HTTP round trip did not complete
- DecodeError: the response body could not be read or decoded
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Origin of an error, for callers that branch on failure type."""

    SERIALIZATION = "serialization"
    TRANSPORT = "transport"
    DECODE = "decode"


@dataclass
class ErrorContext:
    """Structured error context for diagnostics."""

    details: dict[str, Any] = field(default_factory=dict)
    """Additional details about the error"""

    source: str | None = None
    """Error source (e.g., 'request', 'transport', 'decode')"""

    hint: str | None = None
    """Actionable hint for resolving the error"""

    def __str__(self) -> str:
        parts = []
        if self.source:
            parts.append(f"[{self.source}]")
        if self.hint:
            parts.append(f"(hint: {self.hint})")
        return " ".join(parts)


class RaydiumError(Exception):
    """Base class for all raydium-client errors.

    Attributes:
        message: Human-readable error message
        context: Structured error context
        kind: Error origin, None only for the abstract base
    """

    kind: ErrorKind | None = None

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
    ) -> None:
        self.message = message
        self.context = context or ErrorContext()
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        ctx_str = str(self.context)
        if ctx_str:
            return f"{self.message} {ctx_str}"
        return self.message

    def with_hint(self, hint: str) -> RaydiumError:
        """Add a hint to this error."""
        self.context.hint = hint
        return self


class SerializationError(RaydiumError):
    """Error while encoding an outgoing request.

    Raised before any network activity when:
    - The request body cannot be serialized to JSON
    - A query object cannot be encoded to a query string
    - The target URL cannot be parsed
    """

    kind = ErrorKind.SERIALIZATION

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
        *,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or ErrorContext(source="request")
        super().__init__(message, ctx)
        self.__cause__ = cause


class TransportError(RaydiumError):
    """Error during the HTTP round trip.

    Raised when:
    - Network connection failure
    - Timeout
    - Any other httpx transport failure
    """

    kind = ErrorKind.TRANSPORT

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
        *,
        url: str | None = None,
        retryable: bool = False,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or ErrorContext(source="transport")
        if url:
            ctx.details["url"] = url
        ctx.details["retryable"] = retryable
        super().__init__(message, ctx)
        self.url = url
        self.retryable = retryable
        self.__cause__ = cause


class DecodeError(RaydiumError):
    """Error while decoding a fully read response body.

    Attributes:
        status_code: HTTP status of the response, when one was received
        syntax: True when the body is not valid JSON, False when it is valid
            JSON that does not match the target type
    """

    kind = ErrorKind.DECODE

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
        *,
        status_code: int | None = None,
        syntax: bool = False,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or ErrorContext(source="decode")
        if status_code is not None:
            ctx.details["status_code"] = status_code
        ctx.details["syntax"] = syntax
        super().__init__(message, ctx)
        self.status_code = status_code
        self.syntax = syntax
        self.__cause__ = cause
