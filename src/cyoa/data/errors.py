"""Custom exceptions for story parsing and file dispatch."""
from __future__ import annotations


class StoryDataError(Exception):
    """Base exception for the data layer."""

    # Set when the failure happened while resolving a bookmark's story.
    bookmark_room_id: str | None = None


class StoryParseError(StoryDataError):
    """Raised when story text cannot be turned into a room graph."""


class StructuralError(StoryParseError):
    """Raised on the first line that violates the story grammar."""

    def __init__(self, line_no: int, line_text: str) -> None:
        super().__init__(f"Error parsing file on line: {line_no}: {line_text}")
        self.line_no = line_no
        self.line_text = line_text


class DuplicateRoomError(StructuralError):
    """Raised when a room id is declared twice in one story."""

    def __init__(self, line_no: int, line_text: str, room_id: str) -> None:
        super().__init__(line_no, line_text)
        self.room_id = room_id


class GraphIncompleteError(StoryParseError):
    """Raised when a clean pass still leaves rooms without transitions."""

    def __init__(self, reason: str) -> None:
        super().__init__("Error parsing file: rooms or transitions not properly parsed.")
        self.reason = reason


class LoadError(StoryDataError):
    """Base exception for failures while dispatching a story or bookmark file."""

    def __init__(self, message: str, path: str) -> None:
        super().__init__(message)
        self.path = path


class UnreadableFirstLineError(LoadError):
    """Raised when a file has no first line to dispatch on."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Unable to read first line from file: {path}", path)


class UnrecognizedMagicError(LoadError):
    """Raised when the first line is neither the story nor the bookmark marker."""

    def __init__(self, path: str, value: str) -> None:
        super().__init__(f"First line: {value} does not correspond to known value.", path)
        self.value = value


class StoryIOError(LoadError):
    """Raised when a file cannot be opened or read."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Error reading file: {path}", path)


class IncompleteBookmarkError(LoadError):
    """Raised when a bookmark lacks its story path or room id line."""

    def __init__(self, path: str, missing: str) -> None:
        super().__init__(f"Bookmark file {path} is missing its {missing} line.", path)
        self.missing = missing


class BookmarkCycleError(LoadError):
    """Raised when bookmarks point at each other in a loop."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Bookmark chain loops back to file: {path}", path)


class BookmarkSaveError(StoryDataError):
    """Raised when a bookmark file cannot be written."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Error saving bookmark in {path}")
        self.path = path
