"""Post a payload to a Thrift-over-HTTP endpoint and dump the reply."""

from __future__ import annotations

import os
import sys

from thrifty_http import EndOfStreamError, HttpStatusError, HttpTransport, TransportError, create_logger

ENDPOINT = os.getenv("THRIFTY_DEMO_URL", "http://localhost:9090/thrift")
LOG_LEVEL = os.getenv("THRIFTY_DEMO_LOG", "info")


def main() -> int:
    payload = sys.stdin.buffer.read() if not sys.stdin.isatty() else b"\x80\x01\x00\x01\x00\x00\x00\x04ping\x00\x00\x00\x01\x00"
    print(f"Posting {len(payload)} bytes to {ENDPOINT}")

    logger = create_logger(level=LOG_LEVEL)
    with HttpTransport.from_url(ENDPOINT, connect_timeout=2, read_timeout=10, logger=logger) as transport:
        transport.write(payload)
        try:
            transport.flush()
        except HttpStatusError as exc:
            print(f"Server rejected the request with HTTP {exc.status_code}")
            return 1
        except TransportError as exc:
            print(f"Exchange failed: {exc}")
            return 1

        reply = bytearray()
        buffer = bytearray(4096)
        while True:
            try:
                count = transport.read(buffer)
            except EndOfStreamError:
                break
            reply += buffer[:count]

    print(f"Received {len(reply)} bytes: {bytes(reply[:64])!r}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
