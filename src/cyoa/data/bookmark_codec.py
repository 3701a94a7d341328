"""Bookmark persistence and first-line dispatch between story and bookmark files."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from cyoa.core.story_format import DEFAULT_STORY_FORMAT, StoryFormat
from cyoa.data.errors import (
    BookmarkCycleError,
    IncompleteBookmarkError,
    StoryDataError,
    UnreadableFirstLineError,
    UnrecognizedMagicError,
)
from cyoa.data.story_parser import StoryParser
from cyoa.data.text_io import read_all_lines, read_line_from, write_lines
from cyoa.domain.story_graph import StoryGraph

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Bookmark:
    """A saved position: which story file and which room."""

    story_path: str
    room_id: str


@dataclass(frozen=True, slots=True)
class LoadedStory:
    """Parsed story plus the room the reader should start in."""

    story_path: str
    graph: StoryGraph
    room_id: str


class BookmarkCodec:
    """Reads and writes bookmark files and dispatches on a file's first line."""

    def __init__(
        self,
        story_format: StoryFormat = DEFAULT_STORY_FORMAT,
        *,
        parser: StoryParser | None = None,
    ) -> None:
        self._format = story_format
        self._parser = parser or StoryParser(story_format)

    def encode(self, bookmark: Bookmark) -> list[str]:
        return [self._format.magic_bookmark, bookmark.story_path, bookmark.room_id]

    def save(self, bookmark_path: Path | str, story_path: str, room_id: str) -> Bookmark:
        """Write a bookmark file, overwriting whatever is at bookmark_path."""
        bookmark = Bookmark(story_path=story_path, room_id=room_id)
        write_lines(bookmark_path, self.encode(bookmark))
        logger.info("Saved bookmark %s -> %s @ %s", bookmark_path, story_path, room_id)
        return bookmark

    def load_or_dispatch(self, path: Path | str) -> LoadedStory:
        """Load a story file directly or through a bookmark pointing at one."""
        return self._dispatch(str(path), frozenset())

    def _dispatch(self, path: str, visited: frozenset[str]) -> LoadedStory:
        key = str(Path(path).resolve())
        if key in visited:
            raise BookmarkCycleError(path)

        lines: Iterator[str] = iter(read_all_lines(path))
        first_line = read_line_from(lines)
        if first_line is None:
            raise UnreadableFirstLineError(path)
        first_line = first_line.strip()

        if first_line == self._format.magic_story:
            logger.debug("Dispatching %s as a story file", path)
            graph = self._parser.parse(lines)
            return LoadedStory(story_path=path, graph=graph, room_id=graph.initial_room_id)

        if first_line == self._format.magic_bookmark:
            logger.debug("Dispatching %s as a bookmark file", path)
            bookmark = self._read_bookmark(path, lines)
            try:
                loaded = self._dispatch(bookmark.story_path, visited | {key})
            except StoryDataError as exc:
                if exc.bookmark_room_id is None:
                    exc.bookmark_room_id = bookmark.room_id
                logger.warning(
                    "Bookmark %s points at a story that failed to load: %s", path, exc
                )
                raise
            return LoadedStory(
                story_path=loaded.story_path,
                graph=loaded.graph,
                room_id=bookmark.room_id,
            )

        raise UnrecognizedMagicError(path, first_line)

    @staticmethod
    def _read_bookmark(path: str, lines: Iterator[str]) -> Bookmark:
        story_path = read_line_from(lines)
        if story_path is None or not story_path.strip():
            raise IncompleteBookmarkError(path, "story path")
        room_id = read_line_from(lines)
        if room_id is None or not room_id.strip():
            raise IncompleteBookmarkError(path, "room id")
        return Bookmark(story_path=story_path.strip(), room_id=room_id.strip())
