from pathlib import Path

import pytest

from cyoa.core.rng import RNG
from cyoa.data.bookmark_codec import BookmarkCodec
from cyoa.data.story_parser import parse_story
from cyoa.domain.defs import Outcome
from cyoa.services.errors import (
    DeadEndError,
    InvalidChoiceError,
    SessionFinishedError,
    UnknownRoomError,
)
from cyoa.services.play_session import Active, Finished, PlaySession
from tests.helpers.story_fixtures import (
    BRANCHING_STORY,
    TWO_ROOM_STORY,
    FixedDrawRNG,
    build_graph,
    choice,
    room,
    story_lines,
    success,
)


def _session(text: str, *, rng=None, start_room_id: str | None = None) -> PlaySession:
    return PlaySession(
        parse_story(story_lines(text)),
        rng=rng or RNG(6),
        start_room_id=start_room_id,
    )


def test_two_room_story_plays_to_success() -> None:
    session = _session(TWO_ROOM_STORY)

    assert session.state == Active("1")
    assert session.advance() is None
    view = session.get_current_room_view()
    assert view.choices == ["Go"]
    assert not view.is_terminal

    step = session.choose(0)
    assert step.to_room_id == "2"
    assert not step.automatic
    assert session.current_room_id == "2"
    assert session.get_current_room_view().is_terminal

    final = session.advance()
    assert final is not None and final.outcome is Outcome.SUCCESS
    assert session.state == Finished(Outcome.SUCCESS)
    assert session.status == "finished"
    assert session.outcome is Outcome.SUCCESS


def test_view_lists_only_manual_choices() -> None:
    graph = build_graph(
        room("a", choice("b", "Walk"), choice("b", "Coin", weight="0"), choice("c", "Run")),
        room("b", success()),
        room("c", success()),
    )
    session = PlaySession(graph, rng=RNG(1))

    assert session.get_current_room_view().choices == ["Walk", "Run"]
    assert session.choose(1).to_room_id == "c"


def test_weighted_room_advances_automatically() -> None:
    session = _session(BRANCHING_STORY, rng=FixedDrawRNG(1))

    step = session.advance()

    assert step is not None
    assert step.automatic
    assert step.to_room_id == "right"
    assert session.current_room_id == "right"


def test_start_room_override() -> None:
    session = _session(TWO_ROOM_STORY, start_room_id="2")
    assert session.current_room_id == "2"


def test_invalid_manual_index_raises() -> None:
    session = _session(TWO_ROOM_STORY)
    with pytest.raises(InvalidChoiceError):
        session.choose(1)
    with pytest.raises(InvalidChoiceError):
        session.choose(-1)


def test_quit_finishes_with_failure() -> None:
    session = _session(TWO_ROOM_STORY)

    step = session.quit()

    assert step.outcome is Outcome.FAILURE
    assert session.is_finished
    with pytest.raises(SessionFinishedError):
        session.advance()
    with pytest.raises(SessionFinishedError):
        _ = session.current_room_id


def test_unknown_target_is_reported_when_entered() -> None:
    graph = build_graph(room("a", choice("ghost")))
    session = PlaySession(graph, rng=RNG(1))

    session.choose(0)

    with pytest.raises(UnknownRoomError) as excinfo:
        session.get_current_room_view()
    assert excinfo.value.room_id == "ghost"


def test_room_without_usable_transitions_is_a_dead_end() -> None:
    graph = build_graph(room("a", choice("b", weight="0")), room("b", success()))
    session = PlaySession(graph, rng=RNG(1))

    with pytest.raises(DeadEndError):
        session.advance()


def test_bookmark_saves_current_room(tmp_path: Path) -> None:
    story = tmp_path / "two.story"
    story.write_text(TWO_ROOM_STORY, encoding="utf-8")
    codec = BookmarkCodec()
    loaded = codec.load_or_dispatch(story)
    session = PlaySession(loaded.graph, rng=RNG(6), story_path=loaded.story_path)
    session.choose(0)

    session.bookmark(codec, tmp_path / "save.bm")

    restored = codec.load_or_dispatch(tmp_path / "save.bm")
    assert restored.room_id == "2"


def test_bookmark_requires_story_path() -> None:
    session = _session(TWO_ROOM_STORY)
    with pytest.raises(ValueError):
        session.bookmark(BookmarkCodec(), "unused.bm")


def test_same_seed_gives_same_play_through() -> None:
    def play(seed: int) -> list[str]:
        graph = build_graph(
            room("hub", choice("hub", weight="1"), choice("end", weight="1")),
            room("end", success()),
        )
        session = PlaySession(graph, rng=RNG(seed))
        visited = []
        while not session.is_finished:
            visited.append(session.current_room_id)
            session.advance()
        return visited

    assert play(99) == play(99)
