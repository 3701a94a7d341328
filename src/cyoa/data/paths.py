"""Helpers for resolving story file locations."""
from __future__ import annotations

from pathlib import Path


def get_repo_root() -> Path:
    """Return the repository root."""
    return Path(__file__).resolve().parents[3]


def get_stories_path(base_path: Path | str | None = None) -> Path:
    """Return the directory containing the bundled sample stories."""
    if base_path is not None:
        return Path(base_path)
    return get_repo_root() / "stories"


def resolve_story_path(raw_path: str, base_path: Path | str | None = None) -> str:
    """Return raw_path, or the bundled story of that name when only that exists."""
    candidate = Path(raw_path).expanduser()
    if candidate.exists():
        return str(candidate)
    bundled = get_stories_path(base_path) / raw_path
    if bundled.is_file():
        return str(bundled)
    return raw_path
