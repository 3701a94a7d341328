"""Domain definition exports."""

from .room_def import ChoiceTransition, Outcome, RoomDef, TerminalTransition, Transition

__all__ = [
    "ChoiceTransition",
    "Outcome",
    "RoomDef",
    "TerminalTransition",
    "Transition",
]
