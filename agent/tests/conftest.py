"""Shared fixtures: a transport context backed by httpx.MockTransport."""

from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from vindinium.transport import TransportContext, TransportHandle

TRAINING_DOCUMENT = {
    "game": {"id": "s2xh3aig", "turn": 0, "maxTurns": 1200, "finished": False},
    "hero": {"id": 1, "name": "vjousse", "life": 100},
    "token": "lte0",
    "viewUrl": "http://vindinium.org/s2xh3aig",
    "playUrl": "http://vindinium.org/api/s2xh3aig/lte0/play",
}


class RecordingContext(TransportContext):
    """TransportContext that records every request and every handle it opens."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response], **options) -> None:
        self.requests: list[httpx.Request] = []
        self.handles: list[TransportHandle] = []

        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(transport=httpx.MockTransport(record), **options)

    def open_handle(self) -> TransportHandle:
        handle = super().open_handle()
        self.handles.append(handle)
        return handle


@pytest.fixture
def training_document() -> dict:
    return dict(TRAINING_DOCUMENT)


@pytest.fixture
def ok_context(training_document) -> RecordingContext:
    """Context whose server always starts a game."""
    return RecordingContext(lambda request: httpx.Response(200, json=training_document))


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    for name in (
        "VINDINIUM_ENDPOINT",
        "VINDINIUM_KEY",
        "VINDINIUM_TIMEOUT_SECONDS",
        "VINDINIUM_MAX_CONTENT_LENGTH",
        "VINDINIUM_MAX_PAYLOAD_SIZE",
        "VINDINIUM_LOG_LEVEL",
        "VINDINIUM_LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
