"""Training session creation and cleanup.

``create_training_session`` is the only place errors turn into Status values:
everything below it raises ``VindiniumError`` subclasses, and every exit path
releases the receive buffer and, unless a Session takes it over, the
transport handle.
"""

from __future__ import annotations

from typing import Any, Optional

import structlog
from pydantic import ValidationError

from vindinium.buffer import GrowableBuffer
from vindinium.encoding import encode_fields, format_turns
from vindinium.errors import (
    MalformedRequestError,
    ParseError,
    TransportFailureError,
    VindiniumError,
)
from vindinium.headers import ContentLengthInspector
from vindinium.models import Status, TrainingConfig, TrainingResponse
from vindinium.receiver import StreamingReceiver
from vindinium.transport import TransportContext, TransportHandle

logger = structlog.get_logger("vindinium.session")

DEFAULT_TRAINING_ENDPOINT = "http://vindinium.org/api/training"


class Session:
    """A started game, owning the transport handle it was created with."""

    def __init__(
        self,
        *,
        endpoint: str,
        key: str,
        current_turn: int,
        max_turns: int,
        handle: TransportHandle,
        game_id: Optional[str] = None,
        token: Optional[str] = None,
        view_url: Optional[str] = None,
        state: Optional[dict] = None,
    ) -> None:
        self.endpoint = endpoint
        self.key = key
        self.current_turn = current_turn
        self.max_turns = max_turns
        self.game_id = game_id
        self.token = token
        self.view_url = view_url
        self.state = state or {}
        self.handle: TransportHandle | None = handle

    @classmethod
    def from_document(
        cls, document: Any, *, endpoint: str, key: str, handle: TransportHandle
    ) -> "Session":
        """Build a Session from a decoded training response.

        Raises:
            ParseError: If the document is not a training response object.
        """
        if not isinstance(document, dict):
            raise ParseError("Training response is not a JSON object")
        try:
            response = TrainingResponse(**document)
        except ValidationError as exc:
            raise ParseError(f"Invalid training response: {exc.error_count()} error(s)") from exc
        return cls(
            endpoint=response.play_url or endpoint,
            key=key,
            current_turn=response.game.turn,
            max_turns=response.game.max_turns,
            handle=handle,
            game_id=response.game.id,
            token=response.token,
            view_url=response.view_url,
            state=document,
        )

    @property
    def released(self) -> bool:
        return self.handle is None

    def __repr__(self) -> str:
        return (
            f"Session(game_id={self.game_id!r}, turn={self.current_turn}/{self.max_turns}, "
            f"released={self.released})"
        )


def _exchange(
    context: TransportContext,
    handle: TransportHandle,
    buffer: GrowableBuffer,
    endpoint: str,
    config: TrainingConfig,
) -> Session:
    turns = format_turns(config.turns) if config.turns else None
    payload = encode_fields(
        [("key", config.key), ("turns", turns), ("map", config.map)],
        context.max_payload_size,
    )

    receiver = StreamingReceiver(buffer)
    status_code = handle.perform(
        endpoint,
        payload,
        on_header=ContentLengthInspector(buffer, context.max_content_length),
        on_body=receiver,
    )
    if not status_code:
        raise TransportFailureError("No HTTP status received")
    logger.info("Response received", status_code=status_code, size=buffer.size, chunks=receiver.chunks)
    if status_code != 200:
        raise MalformedRequestError(status_code)

    document = context.parser(buffer.getvalue())
    if document is None:
        raise ParseError("Response body is not valid JSON")
    return Session.from_document(document, endpoint=endpoint, key=config.key, handle=handle)


def create_training_session(
    config: TrainingConfig | None, context: TransportContext | None
) -> tuple[Status, Session | None]:
    """Start a training game on the server.

    Args:
        config: Key, optional endpoint override, turn count and map.
        context: Transport context shared by all sessions.

    Returns:
        ``(Status.OK, session)`` on success, otherwise ``(status, None)``.
    """
    if config is None or context is None:
        return Status.NULL_POINTER, None
    if not config.key or config.turns < 0:
        logger.warning("Rejected training config", has_key=bool(config.key), turns=config.turns)
        return Status.BAD_CONFIG, None

    handle = context.open_handle()
    endpoint = config.endpoint or DEFAULT_TRAINING_ENDPOINT
    buffer = GrowableBuffer(limit=context.max_body_size)
    log = logger.bind(endpoint=endpoint)
    log.info("Starting training session", turns=config.turns or None, has_map=bool(config.map))
    session = None
    try:
        session = _exchange(context, handle, buffer, endpoint, config)
    except VindiniumError as exc:
        log.warning("Training session failed", status=exc.status.value, error=exc.message)
        return exc.status, None
    finally:
        buffer.release()
        if session is None:
            handle.close()

    log.info(
        "Training session started",
        game_id=session.game_id,
        turn=session.current_turn,
        max_turns=session.max_turns,
    )
    return Status.OK, session


def cleanup_session(session: Session | None) -> Status:
    """Release the session's transport handle.

    Cleaning up an already released session returns NULL_POINTER.
    """
    if session is None or session.handle is None:
        return Status.NULL_POINTER
    session.handle.close()
    session.handle = None
    logger.debug("Session cleaned up", game_id=session.game_id)
    return Status.OK
