"""Static story graph validation utilities."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from cyoa.domain.defs import ChoiceTransition, RoomDef
from cyoa.domain.story_graph import StoryGraph
from cyoa.services import navigation


Severity = str


@dataclass(frozen=True, slots=True)
class Issue:
    severity: Severity
    code: str
    message: str
    context: dict[str, str]


@dataclass(frozen=True, slots=True)
class RoomInfo:
    room_id: str
    targets: list[tuple[int, str]]
    is_terminal: bool


def format_issue(issue: Issue) -> str:
    context = " ".join(f"{key}={value}" for key, value in issue.context.items())
    suffix = f" ({context})" if context else ""
    return f"[{issue.severity}] {issue.code}: {issue.message}{suffix}"


def has_errors(issues: list[Issue]) -> bool:
    return any(issue.severity == "ERROR" for issue in issues)


def validate_story_graph(graph: StoryGraph, *, start_room_id: str | None = None) -> list[Issue]:
    issues: list[Issue] = []
    room_infos: dict[str, RoomInfo] = {}
    for room in graph:
        room_infos[room.id] = _build_room_info(room)
        _validate_weights(room, issues)

    room_ids = set(room_infos.keys())
    root_id = start_room_id or graph.initial_room_id
    if root_id not in room_ids:
        issues.append(
            Issue(
                severity="ERROR",
                code="MISSING_START_ROOM",
                message="Start room is not declared in the story.",
                context={"room_id": root_id},
            )
        )

    for room_info in room_infos.values():
        _validate_room_references(room_info, room_ids, issues)

    reachable = _collect_reachable(room_infos, root_id)
    for room_id in graph.room_ids():
        if room_id not in reachable:
            issues.append(
                Issue(
                    severity="WARN",
                    code="UNREACHABLE_ROOM",
                    message="Room is unreachable from the start room.",
                    context={"room_id": room_id},
                )
            )
    if reachable and not any(room_infos[room_id].is_terminal for room_id in reachable):
        issues.append(
            Issue(
                severity="WARN",
                code="NO_TERMINAL_REACHABLE",
                message="No ending can be reached from the start room.",
                context={"room_id": root_id},
            )
        )
    return issues


def _build_room_info(room: RoomDef) -> RoomInfo:
    targets = [
        (index, transition.target_room_id)
        for index, transition in enumerate(room.transitions)
        if isinstance(transition, ChoiceTransition)
    ]
    return RoomInfo(
        room_id=room.id,
        targets=targets,
        is_terminal=navigation.is_terminal(room.transitions),
    )


def _validate_weights(room: RoomDef, issues: list[Issue]) -> None:
    weighted = navigation.weighted_choices(room.transitions)
    malformed = False
    for index, choice in enumerate(room.transitions):
        if not isinstance(choice, ChoiceTransition) or not choice.is_weighted:
            continue
        if choice.weight is None:
            malformed = True
            issues.append(
                Issue(
                    severity="ERROR",
                    code="INVALID_WEIGHT",
                    message="Weight must be a non-negative integer.",
                    context={
                        "room_id": room.id,
                        "field_path": f"transitions[{index}]",
                        "weight": choice.raw_weight or "",
                    },
                )
            )
    if navigation.manual_choices(room.transitions):
        return
    total = sum(choice.weight or 0 for choice in weighted)
    if weighted and (malformed or total < 1):
        issues.append(
            Issue(
                severity="ERROR",
                code="DEAD_END",
                message="Room offers no manual choice and its weights can never be drawn.",
                context={"room_id": room.id},
            )
        )


def _validate_room_references(
    room_info: RoomInfo, room_ids: set[str], issues: list[Issue]
) -> None:
    for index, target_id in room_info.targets:
        if target_id not in room_ids:
            issues.append(
                Issue(
                    severity="ERROR",
                    code="MISSING_ROOM_REF",
                    message="Transition references missing room.",
                    context={
                        "room_id": room_info.room_id,
                        "field_path": f"transitions[{index}]",
                        "referenced_id": target_id,
                    },
                )
            )


def _collect_reachable(room_infos: Mapping[str, RoomInfo], root_id: str) -> set[str]:
    reachable: set[str] = set()
    stack: list[str] = [root_id] if root_id in room_infos else []
    while stack:
        room_id = stack.pop()
        if room_id in reachable:
            continue
        reachable.add(room_id)
        for _, target_id in room_infos[room_id].targets:
            if target_id in room_infos:
                stack.append(target_id)
    return reachable
