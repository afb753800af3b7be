"""Client for starting Vindinium training games."""

__version__ = "0.1.0"

from vindinium.models import Status, TrainingConfig
from vindinium.session import (
    DEFAULT_TRAINING_ENDPOINT,
    Session,
    cleanup_session,
    create_training_session,
)
from vindinium.transport import TransportContext

__all__ = [
    "DEFAULT_TRAINING_ENDPOINT",
    "Session",
    "Status",
    "TrainingConfig",
    "TransportContext",
    "cleanup_session",
    "create_training_session",
]
