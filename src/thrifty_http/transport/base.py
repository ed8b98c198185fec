"""Common transport abstractions."""

from __future__ import annotations

from typing import Literal, Protocol, runtime_checkable


TransportKind = Literal["http"]


@runtime_checkable
class Transport(Protocol):
    """Byte-level contract a protocol codec writes to and reads from."""

    @property
    def kind(self) -> TransportKind: ...

    def write(self, data: bytes, offset: int = 0, count: int | None = None) -> None: ...

    def read(self, buffer: bytearray | memoryview, offset: int = 0, count: int | None = None) -> int: ...

    def flush(self) -> None: ...

    def close(self) -> None: ...


def byte_view(obj: object, *, writable: bool = False) -> memoryview:
    """Return a flat byte view of ``obj`` so offsets and counts are in bytes.

    Raises ``ValueError`` for objects that are not contiguous bytes-like
    buffers, or read-only ones when ``writable`` is set.
    """
    try:
        view = memoryview(obj).cast("B")  # type: ignore[arg-type]
    except TypeError as exc:
        raise ValueError(f"expected a contiguous bytes-like object, got {type(obj).__name__}") from exc
    if writable and view.readonly:
        raise ValueError(f"buffer of type {type(obj).__name__} is read-only")
    return view


def check_range(length: int, offset: int, count: int | None) -> int:
    """Return the effective count for ``[offset, offset + count)`` of ``length``.

    Raises ``ValueError`` when the range does not fit; callers translate it.
    """
    if count is None:
        count = length - offset
    if offset < 0 or count < 0 or offset > length or count > length - offset:
        raise ValueError(f"range offset={offset} count={count} outside buffer of {length} bytes")
    return count


__all__ = ["Transport", "TransportKind", "byte_view", "check_range"]
