"""Data layer: story parsing, bookmark files and file dispatch."""

from .bookmark_codec import Bookmark, BookmarkCodec, LoadedStory
from .errors import (
    BookmarkCycleError,
    BookmarkSaveError,
    DuplicateRoomError,
    GraphIncompleteError,
    IncompleteBookmarkError,
    LoadError,
    StoryDataError,
    StoryIOError,
    StoryParseError,
    StructuralError,
    UnreadableFirstLineError,
    UnrecognizedMagicError,
)
from .paths import get_repo_root, get_stories_path, resolve_story_path
from .story_parser import ParseState, StoryParser, parse_story

__all__ = [
    "Bookmark",
    "BookmarkCodec",
    "BookmarkCycleError",
    "BookmarkSaveError",
    "DuplicateRoomError",
    "GraphIncompleteError",
    "IncompleteBookmarkError",
    "LoadError",
    "LoadedStory",
    "ParseState",
    "StoryDataError",
    "StoryIOError",
    "StoryParseError",
    "StoryParser",
    "StructuralError",
    "UnreadableFirstLineError",
    "UnrecognizedMagicError",
    "get_repo_root",
    "get_stories_path",
    "parse_story",
    "resolve_story_path",
]
