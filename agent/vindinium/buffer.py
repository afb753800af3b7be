"""Growable, NUL-terminated byte buffer used to collect response bodies."""

from __future__ import annotations

import structlog

from vindinium.errors import AllocationError

logger = structlog.get_logger("vindinium.buffer")


class GrowableBuffer:
    """Owned byte region with explicit size and capacity.

    ``size`` counts bytes written; ``capacity`` counts bytes allocated. After
    every append the byte at ``size`` is a NUL terminator, so ``size`` is
    always strictly below ``capacity`` once anything has been written.
    Capacity only ever grows until :meth:`release` is called.
    """

    def __init__(self, limit: int | None = None) -> None:
        self._data = bytearray()
        self._size = 0
        self._limit = limit
        self.allocations = 0

    @property
    def size(self) -> int:
        return self._size

    @property
    def capacity(self) -> int:
        return len(self._data)

    @property
    def limit(self) -> int | None:
        return self._limit

    def __len__(self) -> int:
        return self._size

    def reserve(self, min_capacity: int) -> None:
        """Ensure capacity is at least ``min_capacity``, keeping existing bytes.

        Raises:
            AllocationError: If the request exceeds the buffer limit or memory
                cannot be obtained.
        """
        if min_capacity <= len(self._data):
            return
        if self._limit is not None and min_capacity > self._limit:
            raise AllocationError(
                f"Cannot grow buffer to {min_capacity} bytes (limit {self._limit})"
            )
        try:
            self._data.extend(bytes(min_capacity - len(self._data)))
        except MemoryError as exc:
            raise AllocationError(f"Out of memory growing buffer to {min_capacity} bytes") from exc
        self.allocations += 1
        logger.debug("Buffer grown", capacity=min_capacity, size=self._size)

    def append(self, chunk: bytes) -> None:
        """Write ``chunk`` after the current contents and re-terminate."""
        end = self._size + len(chunk)
        self.reserve(end + 1)
        self._data[self._size:end] = chunk
        self._data[end] = 0
        self._size = end

    def getvalue(self) -> bytes:
        """Return the written bytes without the terminator."""
        return bytes(self._data[: self._size])

    def raw(self) -> bytes:
        """Return the whole allocated region, terminator included."""
        return bytes(self._data)

    def release(self) -> None:
        """Drop the backing storage."""
        self._data = bytearray()
        self._size = 0
