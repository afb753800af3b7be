"""httpx-backed transport: process-wide context and per-session handles."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import httpx
import structlog

from vindinium import __version__
from vindinium.encoding import DEFAULT_MAX_PAYLOAD_SIZE
from vindinium.errors import TransportFailureError
from vindinium.headers import DEFAULT_MAX_CONTENT_LENGTH
from vindinium.parsing import parse_document
from vindinium.settings import Settings, settings as default_settings

logger = structlog.get_logger("vindinium.transport")

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

HeaderCallback = Callable[[bytes, bytes], None]
BodyCallback = Callable[[bytes], None]


class TransportHandle:
    """One live HTTP client. Once closed it can never be used again."""

    def __init__(self, client: httpx.Client) -> None:
        self._client: httpx.Client | None = client

    @property
    def closed(self) -> bool:
        return self._client is None

    def perform(
        self,
        url: str,
        payload: bytes,
        on_header: HeaderCallback,
        on_body: BodyCallback,
    ) -> int:
        """POST ``payload`` to ``url`` and feed the response to the callbacks.

        Every header line is passed to ``on_header`` before the first body
        chunk reaches ``on_body``. A callback stops the transfer by raising;
        the error propagates after the response is closed.

        Returns:
            The HTTP status code of the response.

        Raises:
            TransportFailureError: On connection, protocol or URL errors, or if
                the handle has been closed.
        """
        if self._client is None:
            raise TransportFailureError("Transport handle has been released")
        try:
            with self._client.stream(
                "POST",
                url,
                content=payload,
                headers={"Content-Type": FORM_CONTENT_TYPE},
            ) as response:
                for name, value in response.headers.raw:
                    on_header(name, value)
                for chunk in response.iter_bytes():
                    on_body(chunk)
                return response.status_code
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise TransportFailureError(f"{type(exc).__name__}: {exc}") from exc

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None


class TransportContext:
    """Shared transport configuration, created once and passed to each session."""

    def __init__(
        self,
        *,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
        max_content_length: int = DEFAULT_MAX_CONTENT_LENGTH,
        max_payload_size: int = DEFAULT_MAX_PAYLOAD_SIZE,
        max_body_size: int | None = None,
        user_agent: str | None = None,
        parser: Callable[[bytes], Any | None] = parse_document,
    ) -> None:
        self.timeout = timeout
        self.transport = transport
        self.max_content_length = max_content_length
        self.max_payload_size = max_payload_size
        self.max_body_size = max_body_size
        self.user_agent = user_agent or f"vindinium-client/{__version__}"
        self.parser = parser

    @classmethod
    def from_settings(cls, settings: Settings | None = None, **overrides: Any) -> "TransportContext":
        settings = settings or default_settings
        options: dict[str, Any] = {
            "timeout": settings.timeout(),
            "max_content_length": settings.max_content_length(),
            "max_payload_size": settings.max_payload_size(),
        }
        options.update(overrides)
        return cls(**options)

    def open_handle(self) -> TransportHandle:
        client = httpx.Client(
            timeout=self.timeout,
            transport=self.transport,
            headers={"User-Agent": self.user_agent},
        )
        return TransportHandle(client)
