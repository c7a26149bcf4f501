"""Mutable player fill state layered over a :class:`Puzzle`."""

from __future__ import annotations

import copy
from typing import List, Optional, Sequence

from ..core.exceptions import BlockedCellError
from ..core.models import CellValue, Coordinate, Puzzle


class Board:
    """Player entries for every cell of a puzzle.

    Blocked positions hold ``None`` and mirror the puzzle forever; every
    other position holds ``""`` (empty) or the string the player typed.
    """

    def __init__(self, puzzle: Puzzle, rows: Optional[Sequence[Sequence[CellValue]]] = None) -> None:
        self.puzzle = puzzle
        if rows is None:
            self._cells: List[List[CellValue]] = [
                [None if value is None else "" for value in row] for row in puzzle.cells
            ]
        else:
            if not self.matches(puzzle, rows):
                raise ValueError(f"Board rows do not match the shape of puzzle {puzzle.id}")
            self._cells = [list(row) for row in rows]

    @staticmethod
    def matches(puzzle: Puzzle, rows: Sequence[Sequence[CellValue]]) -> bool:
        """True when ``rows`` has the puzzle's shape and blocked cells."""
        if len(rows) != puzzle.height:
            return False
        for solution_row, row in zip(puzzle.cells, rows):
            if len(row) != puzzle.width:
                return False
            for solution, value in zip(solution_row, row):
                if (solution is None) != (value is None):
                    return False
        return True

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------

    def get(self, coord: Coordinate) -> CellValue:
        row, col = coord
        return self._cells[row][col]

    def set(self, coord: Coordinate, value: str) -> None:
        if value is None:
            raise BlockedCellError(f"Cannot write the blocked marker into {coord}")
        if self.puzzle.is_blocked(coord):
            raise BlockedCellError(f"Cell {coord} is blocked")
        row, col = coord
        self._cells[row][col] = value

    def is_empty(self, coord: Coordinate) -> bool:
        return self.get(coord) == ""

    def rows(self) -> List[List[CellValue]]:
        """Return a snapshot copy of the grid."""
        return copy.deepcopy(self._cells)

    # ------------------------------------------------------------------
    # Completion predicates
    # ------------------------------------------------------------------

    def is_filled(self) -> bool:
        return all(value != "" for row in self._cells for value in row)

    def is_filled_correctly(self) -> bool:
        return all(
            solution is None or value == solution
            for solution_row, row in zip(self.puzzle.cells, self._cells)
            for solution, value in zip(solution_row, row)
        )

    def is_cell_correct(self, coord: Coordinate) -> bool:
        value = self.get(coord)
        solution = self.puzzle.solution(coord)
        if not value or solution is None:
            return False
        return value.lower() == solution.lower()
