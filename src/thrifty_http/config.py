"""Immutable configuration for the HTTP transport."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

import httpx

from .errors import ConfigurationError

_EMPTY_HEADERS: Mapping[str, str] = MappingProxyType({})


@dataclass(frozen=True)
class HttpTransportConfig:
    """Validated settings for an :class:`~thrifty_http.transport.HttpTransport`.

    Build instances through :func:`http_transport_config`, which rejects bad
    values before any transport exists. Timeouts are in seconds; ``None``
    leaves the HTTP client's default for that phase in place.
    """

    url: str
    connect_timeout: float | None = None
    read_timeout: float | None = None
    custom_headers: Mapping[str, str] = field(default_factory=lambda: _EMPTY_HEADERS)


def http_transport_config(
    url: str | httpx.URL,
    *,
    connect_timeout: float | None = None,
    read_timeout: float | None = None,
    custom_headers: Mapping[str, str] | None = None,
) -> HttpTransportConfig:
    """Validate the arguments and return a frozen :class:`HttpTransportConfig`.

    A timeout of zero is treated like ``None``: the transport will not apply it.
    """
    return HttpTransportConfig(
        url=_validate_url(url),
        connect_timeout=_validate_timeout("connect_timeout", connect_timeout),
        read_timeout=_validate_timeout("read_timeout", read_timeout),
        custom_headers=_validate_headers(custom_headers),
    )


def _validate_url(url: str | httpx.URL) -> str:
    if not url:
        raise ConfigurationError("url is required")
    try:
        parsed = httpx.URL(str(url))
    except httpx.InvalidURL as exc:
        raise ConfigurationError(f"Invalid url {url!r}: {exc}") from exc
    if parsed.scheme not in {"http", "https"}:
        raise ConfigurationError(f"Unsupported scheme: {parsed.scheme or '(none)'}")
    if not parsed.host:
        raise ConfigurationError(f"url has no host: {url!r}")
    return str(parsed)


def _validate_timeout(name: str, value: float | None) -> float | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigurationError(f"{name} must be a number of seconds, got {value!r}")
    if value < 0:
        raise ConfigurationError(f"{name} can not be negative")
    if value == 0:
        return None
    return float(value)


def _validate_headers(headers: Mapping[str, str] | None) -> Mapping[str, str]:
    if not headers:
        return _EMPTY_HEADERS
    copied: dict[str, str] = {}
    for name, value in headers.items():
        if not isinstance(name, str) or not name.strip():
            raise ConfigurationError(f"Invalid header name: {name!r}")
        if not isinstance(value, str):
            raise ConfigurationError(f"Header {name!r} must have a string value")
        copied[name] = value
    return MappingProxyType(copied)


__all__ = ["HttpTransportConfig", "http_transport_config"]
