"""Shared CLI rendering helpers."""
from __future__ import annotations

import textwrap
from typing import Sequence

from cyoa.presentation.cli.config import CliConfig, debug_enabled
from cyoa.services.play_session import RoomView


def wrap_text(text: str, width: int) -> list[str]:
    """
    Wrap text to fit within a fixed width, keeping the author's line breaks.

    Args:
        text: The text to wrap, possibly containing newlines
        width: Maximum width per line

    Returns:
        List of wrapped lines, each <= width characters
    """
    if width <= 0:
        return text.split("\n")
    lines: list[str] = []
    for paragraph in text.split("\n"):
        wrapped = textwrap.wrap(
            paragraph,
            width=width,
            break_long_words=True,
            break_on_hyphens=False,
        )
        lines.extend(wrapped or [""])
    return lines


def render_divider(config: CliConfig) -> None:
    print(config.line_char * config.display_width)


def render_wrapped(text: str, width: int) -> None:
    for line in wrap_text(text, width):
        print(line)


def render_room(view: RoomView, config: CliConfig) -> None:
    """Print the room title and description between two divider lines."""
    render_divider(config)
    if debug_enabled():
        print(f"[{view.room_id}]")
    render_wrapped(view.title, config.display_width)
    print()
    render_wrapped(view.description, config.display_width)
    render_divider(config)


def render_choices(choices: Sequence[str]) -> None:
    """Display indexed manual choices."""
    for idx, label in enumerate(choices):
        print(f"{idx}) {label}")
