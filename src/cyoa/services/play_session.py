"""Play-through state machine that walks a story graph."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Union

from cyoa.core.rng import RNG
from cyoa.core.types import SessionStatus
from cyoa.data.bookmark_codec import Bookmark, BookmarkCodec
from cyoa.domain.defs import Outcome, RoomDef
from cyoa.domain.story_graph import StoryGraph
from cyoa.services import navigation
from cyoa.services.errors import (
    DeadEndError,
    InvalidChoiceError,
    SessionFinishedError,
    UnknownRoomError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Active:
    room_id: str


@dataclass(frozen=True, slots=True)
class Finished:
    outcome: Outcome


PlayState = Union[Active, Finished]


@dataclass(slots=True)
class RoomView:
    """Data returned to the presentation layer for rendering."""

    room_id: str
    title: str
    description: str
    choices: List[str] = field(default_factory=list)
    is_terminal: bool = False


@dataclass(slots=True)
class StepResult:
    """Outcome of one move through the graph."""

    from_room_id: str
    to_room_id: str | None = None
    outcome: Outcome | None = None
    automatic: bool = False


class PlaySession:
    """Application service that drives one play-through of a story."""

    def __init__(
        self,
        graph: StoryGraph,
        *,
        rng: RNG,
        story_path: str | None = None,
        start_room_id: str | None = None,
    ) -> None:
        self._graph = graph
        self._rng = rng
        self._story_path = story_path
        self._state: PlayState = Active(start_room_id or graph.initial_room_id)

    @property
    def state(self) -> PlayState:
        return self._state

    @property
    def status(self) -> SessionStatus:
        return "finished" if isinstance(self._state, Finished) else "active"

    @property
    def is_finished(self) -> bool:
        return isinstance(self._state, Finished)

    @property
    def outcome(self) -> Outcome | None:
        return self._state.outcome if isinstance(self._state, Finished) else None

    @property
    def current_room_id(self) -> str:
        return self._active().room_id

    def current_room(self) -> RoomDef:
        room_id = self.current_room_id
        room = self._graph.find(room_id)
        if room is None:
            raise UnknownRoomError(room_id)
        return room

    def get_current_room_view(self) -> RoomView:
        """Return the view model for the room the reader is standing in."""
        room = self.current_room()
        return RoomView(
            room_id=room.id,
            title=room.title,
            description=room.description,
            choices=[choice.description for choice in navigation.manual_choices(room.transitions)],
            is_terminal=navigation.is_terminal(room.transitions),
        )

    def advance(self) -> StepResult | None:
        """Take every step that needs no reader input.

        Finishes the session on a terminal room and follows a weighted draw
        when one is possible. Returns None when the reader must choose.
        """
        room = self.current_room()
        outcome = navigation.terminal_outcome(room.transitions)
        if outcome is not None:
            self._state = Finished(outcome)
            logger.debug("Room %r ends the story with %s", room.id, outcome.value)
            return StepResult(from_room_id=room.id, outcome=outcome, automatic=True)

        target = navigation.weighted_select(room.transitions, self._rng)
        if target is not None:
            logger.debug("Weighted draw in room %r leads to %r", room.id, target)
            return self._move(room.id, target, automatic=True)

        if not navigation.manual_choices(room.transitions):
            raise DeadEndError(room.id)
        return None

    def choose(self, choice_index: int) -> StepResult:
        """Follow the reader's pick among the room's unweighted choices."""
        room = self.current_room()
        choices = navigation.manual_choices(room.transitions)
        if not 0 <= choice_index < len(choices):
            raise InvalidChoiceError(
                f"Choice index {choice_index} is invalid for room '{room.id}'."
            )
        return self._move(room.id, choices[choice_index].target_room_id, automatic=False)

    def quit(self) -> StepResult:
        """Abandon the story, which counts as a failure."""
        room_id = self.current_room_id
        self._state = Finished(Outcome.FAILURE)
        return StepResult(from_room_id=room_id, outcome=Outcome.FAILURE)

    def bookmark(self, codec: BookmarkCodec, bookmark_path: Path | str) -> Bookmark:
        """Persist the current position through the bookmark codec."""
        if self._story_path is None:
            raise ValueError("Cannot bookmark a story that was not loaded from a file.")
        return codec.save(bookmark_path, self._story_path, self.current_room_id)

    def _move(self, from_room_id: str, target: str, *, automatic: bool) -> StepResult:
        self._state = Active(target)
        return StepResult(from_room_id=from_room_id, to_room_id=target, automatic=automatic)

    def _active(self) -> Active:
        if not isinstance(self._state, Active):
            raise SessionFinishedError("The story has already ended.")
        return self._state
