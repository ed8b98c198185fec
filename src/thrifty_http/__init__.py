"""Public surface for the thrifty-http transport."""

from .config import HttpTransportConfig, http_transport_config
from .errors import (
    ConfigurationError,
    EndOfStreamError,
    ExchangeError,
    HttpStatusError,
    NoResponseError,
    StreamReadError,
    TransportError,
)
from .logger import BoundLogger, LogLevel, create_logger
from .transport import THRIFT_CONTENT_TYPE, HttpTransport, ResponseStream, Transport
from .version import __version__

__all__ = [
    "__version__",
    "BoundLogger",
    "ConfigurationError",
    "EndOfStreamError",
    "ExchangeError",
    "HttpStatusError",
    "HttpTransport",
    "HttpTransportConfig",
    "LogLevel",
    "NoResponseError",
    "ResponseStream",
    "StreamReadError",
    "THRIFT_CONTENT_TYPE",
    "Transport",
    "TransportError",
    "create_logger",
    "http_transport_config",
]
