"""HTTP transport built on top of httpx."""

from __future__ import annotations

import io
from dataclasses import dataclass
from types import TracebackType
from typing import Mapping, Union

import httpx

from ..config import HttpTransportConfig, http_transport_config
from ..errors import (
    EndOfStreamError,
    ExchangeError,
    HttpStatusError,
    NoResponseError,
    TransportError,
)
from ..logger import BoundLogger, create_logger
from .base import TransportKind, byte_view, check_range
from .stream import ResponseStream

THRIFT_CONTENT_TYPE = "application/x-thrift"


@dataclass(frozen=True)
class NoResponse:
    reason: str


@dataclass(frozen=True)
class HasResponse:
    stream: ResponseStream


ResponseState = Union[NoResponse, HasResponse]


class HttpTransport:
    """Carries one RPC payload per flush as the body of an HTTP POST.

    Writes are buffered in memory. ``flush()`` sends the buffer and makes the
    response body readable through ``read()`` until the next flush or
    ``close()``. A failed flush leaves no readable response behind, including
    the one from an earlier successful flush.

    Instances are not safe for concurrent use.
    """

    kind: TransportKind = "http"

    def __init__(
        self,
        config: HttpTransportConfig,
        *,
        client: httpx.Client | None = None,
        logger: BoundLogger | None = None,
    ) -> None:
        self._config = config
        self._client = client or httpx.Client(limits=httpx.Limits(max_keepalive_connections=0))
        self._owns_client = client is None
        self._logger = (logger or create_logger()).child("http")
        self._buffer = io.BytesIO()
        self._state: ResponseState = NoResponse("no request has been flushed")
        self._closed = False

    @classmethod
    def from_url(
        cls,
        url: str | httpx.URL,
        *,
        connect_timeout: float | None = None,
        read_timeout: float | None = None,
        custom_headers: Mapping[str, str] | None = None,
        client: httpx.Client | None = None,
        logger: BoundLogger | None = None,
    ) -> "HttpTransport":
        config = http_transport_config(
            url,
            connect_timeout=connect_timeout,
            read_timeout=read_timeout,
            custom_headers=custom_headers,
        )
        return cls(config, client=client, logger=logger)

    @property
    def config(self) -> HttpTransportConfig:
        return self._config

    @property
    def has_response(self) -> bool:
        return isinstance(self._state, HasResponse)

    @property
    def closed(self) -> bool:
        return self._closed

    def write(self, data: bytes, offset: int = 0, count: int | None = None) -> None:
        self._ensure_open()
        try:
            view = byte_view(data)
            count = check_range(len(view), offset, count)
        except ValueError as exc:
            raise TransportError(f"Invalid write: {exc}") from exc
        try:
            self._buffer.write(view[offset:offset + count])
        except MemoryError as exc:
            raise TransportError("Write buffer could not grow") from exc

    def flush(self) -> None:
        self._ensure_open()
        payload = self._drain()
        self._discard_response("last flush did not complete")

        try:
            request = self._client.build_request(
                "POST",
                self._config.url,
                content=payload,
                headers=self._request_headers(),
                timeout=self._request_timeout(),
            )
            self._logger.debug("HTTP POST %s bytes=%d", self._config.url, len(payload))
            response = self._client.send(request, stream=True)
        except httpx.TimeoutException as exc:
            self._state = NoResponse("last flush timed out")
            raise ExchangeError(f"HTTP request to {self._config.url} timed out: {exc}") from exc
        except httpx.HTTPError as exc:
            self._state = NoResponse("last flush failed")
            raise ExchangeError(f"Cannot reach {self._config.url}: {exc}") from exc
        except (httpx.InvalidURL, RuntimeError) as exc:
            # e.g. an injected client its owner already closed
            self._state = NoResponse("last flush failed")
            raise ExchangeError(f"Cannot send request to {self._config.url}: {exc}") from exc

        self._logger.debug("HTTP <- %s status=%s", self._config.url, response.status_code)
        if response.status_code != httpx.codes.OK:
            response.close()
            self._state = NoResponse(f"last flush returned HTTP {response.status_code}")
            self._logger.warn("HTTP %s rejected request with status %s", self._config.url, response.status_code)
            raise HttpStatusError(response.status_code, context={"url": self._config.url})

        self._state = HasResponse(ResponseStream(response, logger=self._logger))

    def read(self, buffer: bytearray | memoryview, offset: int = 0, count: int | None = None) -> int:
        state = self._state
        if not isinstance(state, HasResponse):
            raise NoResponseError(f"No response available: {state.reason}")

        try:
            view = byte_view(buffer, writable=True)
            count = check_range(len(view), offset, count)
        except ValueError as exc:
            raise TransportError(f"Invalid read: {exc}") from exc
        if count == 0:
            return 0

        chunk = state.stream.read(count)
        if not chunk:
            raise EndOfStreamError("No more data available")
        view[offset:offset + len(chunk)] = chunk
        return len(chunk)

    def read_exactly(self, count: int) -> bytes:
        """Read exactly ``count`` bytes, failing with EndOfStreamError if the body is shorter."""
        if count < 0:
            raise TransportError(f"Invalid read: count={count}")
        buffer = bytearray(count)
        got = 0
        while got < count:
            got += self.read(buffer, got, count - got)
        return bytes(buffer)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        try:
            self._discard_response("transport is closed")
        finally:
            try:
                self._buffer.close()
            except Exception as exc:
                self._logger.warn("Ignoring error while releasing write buffer: %s", exc)
            if self._owns_client:
                try:
                    self._client.close()
                except Exception as exc:
                    self._logger.warn("Ignoring error while closing HTTP client: %s", exc)

    def __enter__(self) -> "HttpTransport":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _ensure_open(self) -> None:
        if self._closed:
            raise TransportError("Transport is closed")

    def _drain(self) -> bytes:
        payload = self._buffer.getvalue()
        self._buffer.seek(0)
        self._buffer.truncate()
        return payload

    def _discard_response(self, reason: str) -> None:
        state = self._state
        self._state = NoResponse(reason)
        if isinstance(state, HasResponse):
            try:
                state.stream.close()
            except Exception as exc:
                self._logger.warn("Ignoring error while closing response stream: %s", exc)

    def _request_headers(self) -> httpx.Headers:
        headers = httpx.Headers(
            {
                "Content-Type": THRIFT_CONTENT_TYPE,
                "Accept": THRIFT_CONTENT_TYPE,
            }
        )
        for name, value in self._config.custom_headers.items():
            headers[name] = value
        return headers

    def _request_timeout(self) -> httpx.Timeout:
        # Only configured phases replace the client's own defaults
        base = self._client.timeout
        return httpx.Timeout(
            connect=self._config.connect_timeout or base.connect,
            read=self._config.read_timeout or base.read,
            write=base.write,
            pool=base.pool,
        )

    def __repr__(self) -> str:
        state = "closed" if self._closed else type(self._state).__name__
        return f"HttpTransport(url={self._config.url!r}, state={state})"


__all__ = ["HasResponse", "HttpTransport", "NoResponse", "ResponseState", "THRIFT_CONTENT_TYPE"]
