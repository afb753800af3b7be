"""JSON decoding of a received response body."""

from __future__ import annotations

import json
from typing import Any


def parse_document(data: bytes) -> Any | None:
    """Decode ``data`` as JSON, returning None when it is not valid JSON."""
    try:
        return json.loads(data.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError):
        return None
