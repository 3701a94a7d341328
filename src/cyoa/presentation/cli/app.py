"""Console-driven UI loops for cyoa."""
from __future__ import annotations

import logging
from typing import Union

from cyoa.core.rng import RNG
from cyoa.core.types import ManualAction
from cyoa.data.bookmark_codec import BookmarkCodec, LoadedStory
from cyoa.data.errors import BookmarkSaveError, StoryDataError
from cyoa.data.paths import resolve_story_path
from cyoa.domain.defs import Outcome
from cyoa.presentation.cli.config import CliConfig, load_config
from cyoa.presentation.cli.render import render_choices, render_room
from cyoa.services.errors import DeadEndError, UnknownRoomError
from cyoa.services.play_session import PlaySession

logger = logging.getLogger(__name__)

ChoiceInput = Union[int, ManualAction]

_QUIT_INDEX = -1
_BOOKMARK_INDEX = -2


def main(config: CliConfig | None = None, codec: BookmarkCodec | None = None) -> None:
    """Start the interactive CLI session."""
    config = config or load_config()
    codec = codec or BookmarkCodec()
    print("Welcome to this choose your own adventure system!")
    try:
        playing = True
        while playing:
            file_name = prompt_string("Please enter the story filename: ")
            play_file(file_name, config=config, codec=codec)
            if prompt_char("Do you want to try again? ") == "n":
                playing = False
    except EOFError:
        print()
    print("Thank you for playing!")


def open_story(file_name: str, *, codec: BookmarkCodec) -> LoadedStory | None:
    """Load a story or bookmark file, printing the reason and returning None on failure."""
    try:
        return codec.load_or_dispatch(resolve_story_path(file_name))
    except StoryDataError as exc:
        print(exc)
        return None


def play_file(file_name: str, *, config: CliConfig, codec: BookmarkCodec) -> Outcome | None:
    """Load a story or bookmark file and play it through once."""
    loaded = open_story(file_name, codec=codec)
    if loaded is None:
        return None
    return play_loaded(loaded, config=config, codec=codec)


def play_loaded(loaded: LoadedStory, *, config: CliConfig, codec: BookmarkCodec) -> Outcome | None:
    session = PlaySession(
        loaded.graph,
        rng=RNG(config.seed),
        story_path=loaded.story_path,
        start_room_id=loaded.room_id,
    )
    return run_story_loop(session, codec=codec, config=config)


def run_story_loop(session: PlaySession, *, codec: BookmarkCodec, config: CliConfig) -> Outcome | None:
    """Walk the story until it ends, the reader quits, or a bookmark is saved."""
    while not session.is_finished:
        try:
            view = session.get_current_room_view()
            render_room(view, config)
            render_choices(view.choices)
            step = session.advance()
        except (UnknownRoomError, DeadEndError) as exc:
            print(exc)
            return None
        if step is not None:
            continue

        choice = prompt_choice(len(view.choices))
        if choice == "quit":
            if prompt_char("Are you sure you want to quit the adventure? ") == "y":
                session.quit()
            continue
        if choice == "bookmark":
            _save_bookmark(session, codec)
            return None
        session.choose(choice)

    if session.outcome is Outcome.SUCCESS:
        print("Congratulations! You successfully completed the adventure!")
    else:
        print("You failed to complete the adventure. Better luck next time!")
    return session.outcome


def _save_bookmark(session: PlaySession, codec: BookmarkCodec) -> None:
    bookmark_file = prompt_string(
        f"Bookmarking current location: {session.current_room_id}. Enter bookmark filename: "
    )
    try:
        session.bookmark(codec, bookmark_file)
    except BookmarkSaveError as exc:
        logger.debug("Bookmark write failed", exc_info=exc)
        print(exc)
        return
    print(f"Bookmark saved in {bookmark_file}")


def prompt_int(prompt: str, minimum: int, maximum: int) -> int:
    """Ask until the reader enters an integer within [minimum, maximum]."""
    while True:
        raw = input(prompt).strip()
        try:
            value = int(raw)
        except ValueError:
            print("Invalid value.")
            continue
        if minimum <= value <= maximum:
            return value
        print("Invalid value.")


def prompt_choice(choice_count: int) -> ChoiceInput:
    """Ask for a manual choice index or one of the reserved actions."""
    value = prompt_int("Choose: ", _BOOKMARK_INDEX, choice_count - 1)
    if value == _QUIT_INDEX:
        return "quit"
    if value == _BOOKMARK_INDEX:
        return "bookmark"
    return value


def prompt_char(prompt: str) -> str:
    """Return the first non-whitespace character typed, lower-cased, or ''."""
    raw = input(prompt).strip().lower()
    return raw[:1]


def prompt_string(prompt: str) -> str:
    return input(prompt).strip()
