"""CLI entrypoint for the cluegrid crossword solver."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from cluegrid.core.exceptions import CluegridError
from cluegrid.data.samples import sample_puzzle
from cluegrid.engine.controller import Controller
from cluegrid.engine.preferences import Preferences
from cluegrid.io.nyt import convert_nyt, load_nyt_source
from cluegrid.io.puzzles import load_puzzle, parse_puzzle, write_puzzle
from cluegrid.io.store import JsonFileStore
from cluegrid.io.terminal import TerminalSession
from cluegrid.utils.logger import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Solve crossword puzzles in the terminal",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    play = subparsers.add_parser("play", help="Solve a puzzle interactively")
    play.add_argument(
        "puzzle",
        type=Path,
        nargs="?",
        help="Puzzle definition JSON (defaults to the built-in sample)",
    )
    play.add_argument(
        "--store-dir",
        type=Path,
        default=None,
        help="Directory for saved sessions (default: $CLUEGRID_STORE_DIR or local_db/collections/sessions)",
    )
    play.add_argument(
        "--auto-check",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Enable or disable auto-check and remember the choice",
    )

    convert = subparsers.add_parser("convert", help="Convert an NYT puzzle JSON file or URL")
    convert.add_argument("source", type=str, help="Path or http(s) URL of the NYT JSON")
    convert.add_argument("--output", type=Path, help="Optional path to JSON output")
    return parser


def run_play(args: argparse.Namespace) -> None:
    puzzle = load_puzzle(args.puzzle) if args.puzzle else sample_puzzle()
    store = JsonFileStore.from_env(args.store_dir)
    preferences = Preferences.load(store)
    if args.auto_check is not None:
        preferences.auto_check = args.auto_check
    controller = Controller(puzzle, store=store, preferences=preferences)
    TerminalSession(controller).run(sys.stdin)


def run_convert(args: argparse.Namespace) -> None:
    puzzle = parse_puzzle(convert_nyt(load_nyt_source(args.source)))
    if args.output:
        write_puzzle(puzzle, args.output)
    else:
        print(json.dumps(puzzle.to_dict(), ensure_ascii=False, indent=2))


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.WARNING)
    configure_logging(level)

    try:
        if args.command == "play":
            run_play(args)
        else:
            run_convert(args)
    except CluegridError as exc:
        parser.exit(1, f"error: {exc}\n")


if __name__ == "__main__":  # pragma: no cover
    main()
