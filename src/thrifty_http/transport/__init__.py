"""Transport implementations exposed to users."""

from .base import Transport, TransportKind
from .http import THRIFT_CONTENT_TYPE, HasResponse, HttpTransport, NoResponse, ResponseState
from .stream import ResponseStream

__all__ = [
    "HasResponse",
    "HttpTransport",
    "NoResponse",
    "ResponseState",
    "ResponseStream",
    "THRIFT_CONTENT_TYPE",
    "Transport",
    "TransportKind",
]
