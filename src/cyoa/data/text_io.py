"""Low-level line readers and writers for story and bookmark files."""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, List

from .errors import BookmarkSaveError, StoryIOError


def read_line_from(source: Iterator[str]) -> str | None:
    """Return the next line without its line terminator, or None at end of input."""
    line = next(source, None)
    if line is None:
        return None
    return line.rstrip("\r\n")


def read_all_lines(path: Path | str) -> List[str]:
    """Read every line of a text file and raise StoryIOError on failure."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise StoryIOError(str(path)) from exc
    return text.splitlines()


def write_lines(path: Path | str, lines: Iterable[str]) -> None:
    """Write lines to disk, replacing any existing file."""
    payload = "".join(f"{line}\n" for line in lines)
    try:
        Path(path).write_text(payload, encoding="utf-8")
    except OSError as exc:
        raise BookmarkSaveError(str(path)) from exc
