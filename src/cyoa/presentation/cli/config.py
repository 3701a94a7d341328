"""CLI configuration helpers for options persistence."""
from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass
from pathlib import Path

from cyoa.core.rng import DEFAULT_SEED

logger = logging.getLogger(__name__)

_DEFAULT_DISPLAY_WIDTH = 80
_MIN_DISPLAY_WIDTH = 20
_DEFAULT_LINE_CHAR = "-"


@dataclass(frozen=True, slots=True)
class CliConfig:
    """Display and randomness options for the console player."""

    display_width: int = _DEFAULT_DISPLAY_WIDTH
    line_char: str = _DEFAULT_LINE_CHAR
    seed: int = DEFAULT_SEED


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "cyoa"
        return Path.home() / "cyoa"
    return Path.home() / ".config" / "cyoa"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def debug_enabled() -> bool:
    """Return True only when CYOA_DEBUG is explicitly set to '1'."""
    return os.getenv("CYOA_DEBUG") == "1"


def _normalize_display_width(value: object) -> int:
    if isinstance(value, int) and not isinstance(value, bool) and value >= _MIN_DISPLAY_WIDTH:
        return value
    return _DEFAULT_DISPLAY_WIDTH


def _normalize_line_char(value: object) -> str:
    return value if isinstance(value, str) and len(value) == 1 else _DEFAULT_LINE_CHAR


def _normalize_seed(value: object) -> int:
    return value if isinstance(value, int) and not isinstance(value, bool) else DEFAULT_SEED


def load_config(path: Path | None = None) -> CliConfig:
    """Load config from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return CliConfig()
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", config_path, exc)
        return CliConfig()
    if not isinstance(raw, dict):
        return CliConfig()
    return CliConfig(
        display_width=_normalize_display_width(raw.get("display_width")),
        line_char=_normalize_line_char(raw.get("line_char")),
        seed=_normalize_seed(raw.get("seed")),
    )


def save_config(config: CliConfig, path: Path | None = None) -> None:
    """Persist config to disk."""
    config_path = path or get_default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    payload = asdict(config)
    config_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
