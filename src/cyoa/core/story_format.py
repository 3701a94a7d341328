"""Markers shared by the story and bookmark file formats."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class StoryFormat:
    """Literal markers recognised by the parser and the bookmark codec."""

    magic_story: str = "#!STORY"
    magic_bookmark: str = "#!BOOKMARK"
    comment_prefix: str = "#"
    room_prefix: str = "R"
    room_title_separator: str = ":"
    description_terminator: str = ";;;"
    choice_prefix: str = ":"
    choice_separator: str = " -> "
    weight_marker: str = "?"
    success_marker: str = "=)"
    failure_marker: str = "=("


DEFAULT_STORY_FORMAT = StoryFormat()
