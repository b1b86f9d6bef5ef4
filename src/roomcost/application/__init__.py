"""Application layer - use cases and orchestration."""

from .commands import RoomSession
from .dtos import RoomDimensions, SceneSnapshot
from .factory import create_label_formatter, create_session

__all__ = [
    "RoomDimensions",
    "RoomSession",
    "SceneSnapshot",
    "create_label_formatter",
    "create_session",
]
