"""Command line entry point: start a training game and report it."""

from __future__ import annotations

import argparse
import json
import sys

from vindinium.logging import configure_logging
from vindinium.models import Status, TrainingConfig
from vindinium.session import cleanup_session, create_training_session
from vindinium.settings import settings
from vindinium.transport import TransportContext


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Start a Vindinium training game")
    parser.add_argument("--endpoint", default=None, help="Training endpoint URL")
    parser.add_argument("--key", default=None, help="API key (default: $VINDINIUM_KEY)")
    parser.add_argument("--turns", type=int, default=0, help="Turn count, 0 for server default")
    parser.add_argument("--map", default=None, help="Map identifier, e.g. m1")
    parser.add_argument("--timeout", type=float, default=None, help="Request timeout in seconds")
    return parser


def main(argv: list[str] | None = None, context: TransportContext | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging()

    config = TrainingConfig(
        endpoint=args.endpoint or settings.endpoint(),
        key=args.key or settings.key(),
        turns=args.turns,
        map=args.map,
    )
    if context is None:
        overrides = {"timeout": args.timeout} if args.timeout is not None else {}
        context = TransportContext.from_settings(**overrides)

    status, session = create_training_session(config, context)
    if status != Status.OK or session is None:
        print(f"Failed to start training session: {status.value}", file=sys.stderr)
        return 1

    try:
        print(
            json.dumps(
                {
                    "game_id": session.game_id,
                    "turn": session.current_turn,
                    "max_turns": session.max_turns,
                    "view_url": session.view_url,
                    "play_url": session.endpoint,
                }
            )
        )
    finally:
        cleanup_session(session)
    return 0
