"""Environment-backed settings for the client."""

from __future__ import annotations

import os


def _int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


class Settings:
    """Accessors read the environment on every call so tests can monkeypatch it."""

    def endpoint(self) -> str | None:
        return os.environ.get("VINDINIUM_ENDPOINT") or None

    def key(self) -> str | None:
        return os.environ.get("VINDINIUM_KEY") or None

    def timeout(self) -> float:
        return _float("VINDINIUM_TIMEOUT_SECONDS", 30.0)

    def max_content_length(self) -> int:
        return _int("VINDINIUM_MAX_CONTENT_LENGTH", 65536)

    def max_payload_size(self) -> int:
        return _int("VINDINIUM_MAX_PAYLOAD_SIZE", 1024)

    def log_level(self) -> str:
        return os.environ.get("VINDINIUM_LOG_LEVEL", "INFO").strip().upper()

    def log_format(self) -> str:
        return os.environ.get("VINDINIUM_LOG_FORMAT", "console").strip().lower()


settings = Settings()
