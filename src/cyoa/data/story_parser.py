"""Line-oriented parser for story files."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List

from cyoa.core.story_format import DEFAULT_STORY_FORMAT, StoryFormat
from cyoa.data.errors import DuplicateRoomError, GraphIncompleteError, StructuralError
from cyoa.domain.defs import ChoiceTransition, Outcome, RoomDef, TerminalTransition, Transition
from cyoa.domain.story_graph import StoryGraph

logger = logging.getLogger(__name__)


class ParseState(Enum):
    """Which line grammar the parser expects next."""

    DEFAULT = "default"
    DESCRIPTION = "description"
    TRANSITION = "transition"
    ERROR = "error"


@dataclass(slots=True)
class _RoomDraft:
    id: str
    title: str
    description_lines: List[str] = field(default_factory=list)
    transitions: List[Transition] | None = None

    def freeze(self) -> RoomDef:
        return RoomDef(
            id=self.id,
            title=self.title,
            description="\n".join(self.description_lines),
            transitions=tuple(self.transitions or ()),
        )


class StoryParser:
    """Turns the lines of a story file into a StoryGraph.

    The caller is expected to have consumed the magic line already; line
    numbers in diagnostics count from the first line handed to ``parse``,
    blank and comment lines included.
    """

    def __init__(self, story_format: StoryFormat = DEFAULT_STORY_FORMAT) -> None:
        self._format = story_format

    def parse(self, lines: Iterable[str]) -> StoryGraph:
        """Parse story lines and return the resulting graph."""
        fmt = self._format
        drafts: List[_RoomDraft] = []
        seen_ids: set[str] = set()
        state = ParseState.DEFAULT
        line_no = 0
        for raw_line in lines:
            line_no += 1
            line = raw_line.strip()
            outside_description = state is not ParseState.DESCRIPTION
            if outside_description and (not line or line.startswith(fmt.comment_prefix)):
                continue
            if outside_description and line.startswith(fmt.room_prefix):
                state = self._start_room(line, line_no, drafts, seen_ids)
            elif line == fmt.description_terminator:
                state = self._open_transitions(state, drafts)
            elif state is ParseState.DESCRIPTION:
                drafts[-1].description_lines.append(line)
            elif state is ParseState.TRANSITION:
                state = self._add_transition(line, drafts[-1])
            else:
                state = ParseState.ERROR

            if state is ParseState.ERROR:
                logger.debug("Rejected story line %d: %r", line_no, line)
                raise StructuralError(line_no, line)

        graph = self._finish(drafts)
        logger.debug(
            "Parsed %d rooms from %d lines; starting in room %r",
            len(graph),
            line_no,
            graph.initial_room_id,
        )
        return graph

    def _start_room(
        self,
        line: str,
        line_no: int,
        drafts: List[_RoomDraft],
        seen_ids: set[str],
    ) -> ParseState:
        fmt = self._format
        head, separator, title = line[len(fmt.room_prefix) :].partition(fmt.room_title_separator)
        room_id = head.strip()
        if not separator or not room_id:
            return ParseState.ERROR
        if room_id in seen_ids:
            raise DuplicateRoomError(line_no, line, room_id)
        seen_ids.add(room_id)
        drafts.append(_RoomDraft(id=room_id, title=title.strip()))
        return ParseState.DESCRIPTION

    @staticmethod
    def _open_transitions(state: ParseState, drafts: List[_RoomDraft]) -> ParseState:
        if state is not ParseState.DESCRIPTION:
            return ParseState.ERROR
        drafts[-1].transitions = []
        return ParseState.TRANSITION

    def _add_transition(self, line: str, draft: _RoomDraft) -> ParseState:
        fmt = self._format
        transitions = draft.transitions
        assert transitions is not None
        if any(isinstance(existing, TerminalTransition) for existing in transitions):
            return ParseState.ERROR

        if line.startswith(fmt.choice_prefix):
            choice = self._parse_choice(line)
            if choice is None:
                return ParseState.ERROR
            transitions.append(choice)
            return ParseState.TRANSITION

        if line in (fmt.success_marker, fmt.failure_marker):
            if transitions:
                return ParseState.ERROR
            outcome = Outcome.SUCCESS if line == fmt.success_marker else Outcome.FAILURE
            transitions.append(TerminalTransition(outcome=outcome))
            return ParseState.TRANSITION

        return ParseState.ERROR

    def _parse_choice(self, line: str) -> ChoiceTransition | None:
        fmt = self._format
        body = line[len(fmt.choice_prefix) :]
        description, separator, target_part = body.partition(fmt.choice_separator)
        if not separator:
            return None
        raw_weight = None
        if fmt.weight_marker in target_part:
            target_part, _, weight_text = target_part.rpartition(fmt.weight_marker)
            raw_weight = weight_text.strip()
        target_room_id = target_part.strip()
        if not target_room_id:
            return None
        return ChoiceTransition(
            description=description.strip(),
            target_room_id=target_room_id,
            raw_weight=raw_weight,
        )

    @staticmethod
    def _finish(drafts: List[_RoomDraft]) -> StoryGraph:
        if not drafts:
            raise GraphIncompleteError("story declares no rooms")
        for draft in drafts:
            if draft.transitions is None:
                raise GraphIncompleteError(f"room '{draft.id}' never closed its description")
            if not draft.transitions:
                raise GraphIncompleteError(f"room '{draft.id}' has no transitions")
        return StoryGraph(rooms=tuple(draft.freeze() for draft in drafts))


def parse_story(lines: Iterable[str], story_format: StoryFormat = DEFAULT_STORY_FORMAT) -> StoryGraph:
    """Parse story lines with a one-off parser."""
    return StoryParser(story_format).parse(lines)
