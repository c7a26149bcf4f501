"""Structural checks for puzzle definitions coming from outside."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from ..core.constants import Direction
from ..core.exceptions import ValidationError
from ..core.models import Clue, Puzzle
from ..utils.logger import get_logger
from . import navigation


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class PuzzleValidator:
    """Runs deterministic validation over a parsed puzzle.

    The controller tolerates puzzles that fail these checks (clue lookups
    fall back to the first clue), so callers usually log the result rather
    than refuse to play.
    """

    def validate(self, puzzle: Puzzle) -> ValidationResult:
        messages: List[str] = []
        try:
            for direction in Direction:
                clues = puzzle.clues_for(direction)
                self._check_ordering(clues, direction)
                for clue in clues:
                    self._check_span(puzzle, clue, direction)
                    self._check_start(puzzle, clue, direction)
                self._check_coverage(puzzle, clues, direction)
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Puzzle %s failed validation: %s", puzzle.id, exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    def _check_ordering(self, clues: tuple, direction: Direction) -> None:
        ids = [clue.id for clue in clues]
        if ids != sorted(set(ids)):
            raise ValidationError(f"{direction.value} clue ids are not unique and ascending: {ids}")

    def _check_span(self, puzzle: Puzzle, clue: Clue, direction: Direction) -> None:
        for cell in clue.cells:
            if not puzzle.is_valid_cell(cell):
                raise ValidationError(
                    f"{direction.value} clue {clue.id} covers blocked cell {cell}"
                )
        step = (0, 1) if direction is Direction.ACROSS else (1, 0)
        for previous, current in zip(clue.cells, clue.cells[1:]):
            if (current[0] - previous[0], current[1] - previous[1]) != step:
                raise ValidationError(
                    f"{direction.value} clue {clue.id} is not contiguous at {current}"
                )

    def _check_start(self, puzzle: Puzzle, clue: Clue, direction: Direction) -> None:
        start = navigation.clue_start(puzzle, clue.start, direction)
        if start != clue.start:
            raise ValidationError(
                f"{direction.value} clue {clue.id} starts at {clue.start}, expected {start}"
            )

    def _check_coverage(self, puzzle: Puzzle, clues: tuple, direction: Direction) -> None:
        owners = {}
        for clue in clues:
            for cell in clue.cells:
                if cell in owners:
                    raise ValidationError(
                        f"Cell {cell} belongs to {direction.value} clues {owners[cell]} and {clue.id}"
                    )
                owners[cell] = clue.id
        for cell in puzzle.playable_cells():
            if cell not in owners:
                raise ValidationError(f"Cell {cell} has no {direction.value} clue")
