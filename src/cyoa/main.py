"""Entry-point for launching the CLI application."""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from .data.bookmark_codec import BookmarkCodec
from .presentation.cli.app import main as cli_main
from .presentation.cli.app import open_story, play_loaded
from .presentation.cli.config import CliConfig, debug_enabled, load_config, save_config
from .services.story_graph_validator import format_issue, has_errors, validate_story_graph


def parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play a choose-your-own-adventure story file.")
    parser.add_argument(
        "path",
        nargs="?",
        help="Story or bookmark file to play once (prompts for one when omitted).",
    )
    parser.add_argument("--seed", type=int, help="Seed for weighted transitions.")
    parser.add_argument("--config", type=Path, help="Path to a JSON config file.")
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Check the story graph and exit instead of playing.",
    )
    parser.add_argument(
        "--save-config",
        action="store_true",
        help="Write the effective settings (including --seed) back to the config file.",
    )
    return parser.parse_args(argv)


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def validate(path: str, codec: BookmarkCodec) -> int:
    """Print graph issues for a story or bookmark file; non-zero on errors."""
    loaded = open_story(path, codec=codec)
    if loaded is None:
        return 1
    issues = validate_story_graph(loaded.graph, start_room_id=loaded.room_id)
    for issue in issues:
        print(format_issue(issue))
    print(f"Story graph validation summary: rooms={len(loaded.graph)} issues={len(issues)}")
    return 1 if has_errors(issues) else 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI presentation layer."""
    args = parse_args(argv)
    configure_logging(debug_enabled())
    config = load_config(args.config)
    if args.seed is not None:
        config = CliConfig(
            display_width=config.display_width,
            line_char=config.line_char,
            seed=args.seed,
        )
    if args.save_config:
        save_config(config, args.config)
    codec = BookmarkCodec()
    if args.validate:
        if not args.path:
            print("--validate needs a story or bookmark path.")
            return 2
        return validate(args.path, codec)
    if args.path:
        loaded = open_story(args.path, codec=codec)
        if loaded is None:
            return 1
        try:
            play_loaded(loaded, config=config, codec=codec)
        except EOFError:
            print()
        return 0
    cli_main(config=config, codec=codec)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
