"""Room and transition structures produced by the story parser."""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple, Union

_WEIGHT_PATTERN = re.compile(r"[+-]?\d+")


class Outcome(Enum):
    """How a story ends."""

    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True, slots=True)
class TerminalTransition:
    """Ends the story; must be the only transition of its room."""

    outcome: Outcome


@dataclass(frozen=True, slots=True)
class ChoiceTransition:
    """Moves to another room, either picked by the reader or drawn by weight."""

    description: str
    target_room_id: str
    raw_weight: str | None = None

    @property
    def is_weighted(self) -> bool:
        return self.raw_weight is not None

    @property
    def weight(self) -> int | None:
        """Return the weight as a non-negative int, or None when absent or malformed."""
        if self.raw_weight is None:
            return None
        if not _WEIGHT_PATTERN.fullmatch(self.raw_weight):
            return None
        value = int(self.raw_weight)
        if value < 0:
            return None
        return value


Transition = Union[TerminalTransition, ChoiceTransition]


@dataclass(frozen=True, slots=True)
class RoomDef:
    """Fully parsed room together with its outgoing transitions."""

    id: str
    title: str
    description: str = ""
    transitions: Tuple[Transition, ...] = field(default_factory=tuple)
