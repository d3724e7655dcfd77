"""Error hierarchy for raydium-client-python."""

from raydium_client.errors.base import (
    DecodeError,
    ErrorContext,
    ErrorKind,
    RaydiumError,
    SerializationError,
    TransportError,
)

__all__ = [
    "DecodeError",
    "ErrorContext",
    "ErrorKind",
    "RaydiumError",
    "SerializationError",
    "TransportError",
]
