"""Form payload construction with fixed upper bounds."""

from __future__ import annotations

from collections.abc import Iterable

import httpx

from vindinium.errors import BufferTooSmallError, VindiniumError
from vindinium.models import Status

DEFAULT_MAX_PAYLOAD_SIZE = 1024
TURNS_FIELD_SIZE = 16


def escape_field(name: str, value: str) -> str:
    """Percent-encode one ``name=value`` pair with httpx's form encoder."""
    try:
        return str(httpx.QueryParams({name: value}))
    except UnicodeEncodeError as exc:
        raise VindiniumError(f"Field {name!r} is not valid text", Status.BAD_CONFIG) from exc


class FormPayload:
    """A ``name=value&...`` body that refuses to grow past ``max_size`` bytes."""

    def __init__(self, max_size: int = DEFAULT_MAX_PAYLOAD_SIZE) -> None:
        self.max_size = max_size
        self._parts: list[str] = []
        self._length = 0

    def __len__(self) -> int:
        return self._length

    def add(self, name: str, value: str | None) -> bool:
        """Append a field, skipping empty values.

        Returns:
            True if the field was added, False if it was skipped.

        Raises:
            BufferTooSmallError: If this field would push the payload over
                ``max_size``. The payload is left unchanged.
        """
        if not value:
            return False
        encoded = escape_field(name, value)
        length = self._length + len(encoded) + (1 if self._parts else 0)
        if length > self.max_size:
            raise BufferTooSmallError(
                f"Field {name!r} overflows payload ({length} > {self.max_size} bytes)"
            )
        self._parts.append(encoded)
        self._length = length
        return True

    def encode(self) -> bytes:
        return "&".join(self._parts).encode("ascii")

    def __str__(self) -> str:
        return "&".join(self._parts)


def encode_fields(
    fields: Iterable[tuple[str, str | None]],
    max_size: int = DEFAULT_MAX_PAYLOAD_SIZE,
) -> bytes:
    """Encode ordered ``(name, value)`` pairs into a bounded form body."""
    payload = FormPayload(max_size)
    for name, value in fields:
        payload.add(name, value)
    return payload.encode()


def format_turns(turns: int, size: int = TURNS_FIELD_SIZE) -> str:
    """Render a turn count into a field of ``size`` bytes (terminator included)."""
    text = str(turns)
    if len(text) >= size:
        raise BufferTooSmallError(f"Turn count {turns} does not fit in {size} bytes")
    return text
