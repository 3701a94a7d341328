"""Terminal detection and transition selection rules."""
from __future__ import annotations

from typing import List, Sequence

from cyoa.core.rng import RNG
from cyoa.domain.defs import ChoiceTransition, Outcome, TerminalTransition, Transition


def is_terminal(transitions: Sequence[Transition]) -> bool:
    """Return True when the only transition ends the story."""
    return len(transitions) == 1 and isinstance(transitions[0], TerminalTransition)


def terminal_outcome(transitions: Sequence[Transition]) -> Outcome | None:
    if not is_terminal(transitions):
        return None
    terminal = transitions[0]
    assert isinstance(terminal, TerminalTransition)
    return terminal.outcome


def manual_choices(transitions: Sequence[Transition]) -> List[ChoiceTransition]:
    """Return the unweighted choices, in story order, that a reader may pick."""
    return [
        transition
        for transition in transitions
        if isinstance(transition, ChoiceTransition) and not transition.is_weighted
    ]


def weighted_choices(transitions: Sequence[Transition]) -> List[ChoiceTransition]:
    return [
        transition
        for transition in transitions
        if isinstance(transition, ChoiceTransition) and transition.is_weighted
    ]


def weighted_select(transitions: Sequence[Transition], rng: RNG) -> str | None:
    """Draw a target room id among the weighted choices.

    Returns None when there is nothing to draw from: no weighted choices, a
    weight that is not a non-negative integer, or a total weight below 1.
    Otherwise a value is drawn uniformly from [0, total) and the first choice
    whose running weight sum exceeds it wins.
    """
    candidates = weighted_choices(transitions)
    if not candidates:
        return None
    weights: List[int] = []
    for choice in candidates:
        weight = choice.weight
        if weight is None:
            return None
        weights.append(weight)

    total = sum(weights)
    if total < 1:
        return None

    draw = rng.randbelow(total)
    running = 0
    for choice, weight in zip(candidates, weights):
        running += weight
        if running > draw:
            return choice.target_room_id
    return None
