"""Custom exceptions raised by the thrifty-http transport."""

from __future__ import annotations

from typing import Any


class TransportError(Exception):
    """Base I/O error for all transport failures."""

    def __init__(self, message: str, *, context: Any | None = None) -> None:
        super().__init__(message)
        self.context = context


class ConfigurationError(TransportError, ValueError):
    """Raised when a transport configuration value is rejected."""


class NoResponseError(TransportError):
    """Raised when reading without a response from a successful flush."""


class EndOfStreamError(TransportError):
    """Raised when reading past the end of the current response body."""


class HttpStatusError(TransportError):
    """Raised when the server answers a flush with anything but 200 OK."""

    def __init__(self, status_code: int, *, context: Any | None = None) -> None:
        super().__init__(f"HTTP response code: {status_code}", context=context)
        self.status_code = status_code


class ExchangeError(TransportError):
    """Raised when the HTTP exchange itself fails (connect, send, timeout)."""


class StreamReadError(TransportError):
    """Raised when reading the response body fails below the transport."""


__all__ = [
    "ConfigurationError",
    "EndOfStreamError",
    "ExchangeError",
    "HttpStatusError",
    "NoResponseError",
    "StreamReadError",
    "TransportError",
]
