"""Service layer exports."""

from .errors import (
    DeadEndError,
    InvalidChoiceError,
    NavigationError,
    SessionFinishedError,
    UnknownRoomError,
)
from .play_session import Active, Finished, PlaySession, RoomView, StepResult

__all__ = [
    "Active",
    "DeadEndError",
    "Finished",
    "InvalidChoiceError",
    "NavigationError",
    "PlaySession",
    "RoomView",
    "SessionFinishedError",
    "StepResult",
    "UnknownRoomError",
]
