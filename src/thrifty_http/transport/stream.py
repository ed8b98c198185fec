"""Readable view over a streamed httpx response body."""

from __future__ import annotations

from typing import Iterator

import httpx

from ..errors import StreamReadError
from ..logger import BoundLogger, create_logger


class ResponseStream:
    """Serves "up to N bytes" reads from the decoded body of ``response``.

    The response must have been sent with ``stream=True``; the body is pulled
    chunk by chunk as reads demand it.
    """

    def __init__(self, response: httpx.Response, *, logger: BoundLogger | None = None) -> None:
        self._response = response
        self._chunks: Iterator[bytes] = response.iter_bytes()
        self._pending = b""
        self._position = 0
        self._exhausted = False
        self._logger = logger or create_logger()

    @property
    def closed(self) -> bool:
        return self._response.is_closed

    @property
    def status_code(self) -> int:
        return self._response.status_code

    def read(self, count: int) -> bytes:
        """Return at most ``count`` bytes; ``b""`` means the body is exhausted."""
        if count <= 0:
            return b""
        if self._position >= len(self._pending) and not self._fill():
            return b""

        end = min(self._position + count, len(self._pending))
        chunk = self._pending[self._position:end]
        self._position = end
        return chunk

    def close(self) -> None:
        self._pending = b""
        self._position = 0
        self._exhausted = True
        self._response.close()

    def _fill(self) -> bool:
        while not self._exhausted:
            try:
                chunk = next(self._chunks)
            except StopIteration:
                self._exhausted = True
                break
            except (httpx.HTTPError, httpx.StreamError) as exc:
                raise StreamReadError(f"Failed to read response body: {exc}") from exc
            if chunk:
                self._logger.trace("Pulled response chunk bytes=%d", len(chunk))
                self._pending = chunk
                self._position = 0
                return True
        return False


__all__ = ["ResponseStream"]
