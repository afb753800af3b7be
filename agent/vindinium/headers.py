"""Inspection of response headers to pre-size the receive buffer."""

from __future__ import annotations

import structlog

from vindinium.buffer import GrowableBuffer
from vindinium.errors import AllocationError, TransportFailureError

logger = structlog.get_logger("vindinium.headers")

CONTENT_LENGTH = b"content-length"
DEFAULT_MAX_CONTENT_LENGTH = 65536
# Longest value accepted, enough for any 64-bit length.
MAX_LENGTH_DIGITS = 20


class ContentLengthInspector:
    """Header callback that reserves ``Content-Length + 1`` bytes in a buffer.

    Called once per header line with the raw name and value. Lines other than
    Content-Length are ignored. A bad value raises, which aborts the transfer.
    """

    def __init__(
        self,
        buffer: GrowableBuffer,
        max_content_length: int = DEFAULT_MAX_CONTENT_LENGTH,
    ) -> None:
        self.buffer = buffer
        self.max_content_length = max_content_length
        self.content_length: int | None = None

    def __call__(self, name: bytes, value: bytes) -> None:
        if name.strip().lower() != CONTENT_LENGTH:
            return
        digits = value.strip()
        if len(digits) > MAX_LENGTH_DIGITS:
            raise TransportFailureError(f"Content-Length value too long: {len(digits)} bytes")
        length = int(digits) if digits.isdigit() else 0
        if length == 0:
            raise TransportFailureError(f"Invalid Content-Length: {digits!r}")
        if length > self.max_content_length:
            raise AllocationError(
                f"Content-Length {length} exceeds maximum of {self.max_content_length}"
            )
        self.buffer.reserve(length + 1)
        self.content_length = length
        logger.debug("Reserved response buffer", content_length=length)
