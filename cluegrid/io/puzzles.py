"""Loading puzzle definitions from JSON documents."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

from ..core.exceptions import PuzzleFormatError
from ..core.models import Puzzle
from ..engine.validator import PuzzleValidator
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


def parse_puzzle(payload: Mapping[str, Any]) -> Puzzle:
    """Build a :class:`Puzzle` and report (but tolerate) structural problems."""
    puzzle = Puzzle.from_dict(payload)
    result = PuzzleValidator().validate(puzzle)
    for message in result.messages:
        LOGGER.warning("Puzzle %s: %s", puzzle.id, message)
    return puzzle


def load_puzzle(path: Path | str) -> Puzzle:
    path = Path(path)
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise PuzzleFormatError(f"{path} is not valid JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise PuzzleFormatError(f"{path} does not contain a puzzle object")
    LOGGER.debug("Loaded puzzle definition from %s", path)
    return parse_puzzle(payload)


def write_puzzle(puzzle: Puzzle, path: Path | str) -> None:
    Path(path).write_text(json.dumps(puzzle.to_dict(), ensure_ascii=False, indent=2), encoding="utf-8")
