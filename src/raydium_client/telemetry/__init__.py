"""
Telemetry - structured logging for the client.
"""

from raydium_client.telemetry.logger import (
    PACKAGE_LOGGER,
    JsonFormatter,
    LogLevel,
    RaydiumLogger,
    TextFormatter,
    configure_logging,
    get_logger,
)

__all__ = [
    "PACKAGE_LOGGER",
    "JsonFormatter",
    "LogLevel",
    "RaydiumLogger",
    "TextFormatter",
    "configure_logging",
    "get_logger",
]
