"""Body callback accumulating streamed chunks."""

from __future__ import annotations

from vindinium.buffer import GrowableBuffer


class StreamingReceiver:
    """Append each body chunk to a buffer, growing it when headers under-promised."""

    def __init__(self, buffer: GrowableBuffer) -> None:
        self.buffer = buffer
        self.chunks = 0

    def __call__(self, chunk: bytes) -> None:
        # A failed reserve raises AllocationError before anything is written,
        # which aborts the transfer in the transport.
        self.buffer.reserve(self.buffer.size + len(chunk) + 1)
        self.buffer.append(chunk)
        self.chunks += 1
