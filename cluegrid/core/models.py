"""Data models for puzzles, clues and saved sessions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from .constants import Bounds, Direction, PuzzleStatus
from .exceptions import PuzzleFormatError, SessionFormatError

Coordinate = Tuple[int, int]
# ``None`` marks a blocked cell, ``""`` an empty one, anything else is a fill.
CellValue = Optional[str]


@dataclass(frozen=True)
class Clue:
    """A numbered span of cells in one direction."""

    id: int
    text: str
    cells: Tuple[Coordinate, ...]

    @property
    def start(self) -> Coordinate:
        return self.cells[0]

    @property
    def end(self) -> Coordinate:
        return self.cells[-1]

    def contains(self, coord: Coordinate) -> bool:
        return tuple(coord) in self.cells

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Clue":
        try:
            cells = tuple((int(row), int(col)) for row, col in payload["cells"])
            clue = cls(id=int(payload["id"]), text=str(payload.get("text", "")), cells=cells)
        except (KeyError, TypeError, ValueError) as exc:
            raise PuzzleFormatError(f"Malformed clue entry {payload!r}: {exc}") from exc
        if not clue.cells:
            raise PuzzleFormatError(f"Clue {clue.id} spans no cells")
        return clue

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "text": self.text, "cells": [list(cell) for cell in self.cells]}


@dataclass(frozen=True)
class Puzzle:
    """Immutable puzzle definition: solution grid plus both clue lists."""

    id: int
    width: int
    height: int
    cells: Tuple[Tuple[CellValue, ...], ...]
    across_clues: Tuple[Clue, ...]
    down_clues: Tuple[Clue, ...]

    @property
    def bounds(self) -> Bounds:
        return Bounds(rows=self.height, cols=self.width)

    def clues_for(self, direction: Direction) -> Tuple[Clue, ...]:
        return self.across_clues if direction is Direction.ACROSS else self.down_clues

    def solution(self, coord: Coordinate) -> CellValue:
        row, col = coord
        return self.cells[row][col]

    def is_blocked(self, coord: Coordinate) -> bool:
        return self.solution(coord) is None

    def is_valid_cell(self, coord: Coordinate) -> bool:
        """True for in-bounds, non-blocked coordinates."""
        row, col = coord
        return self.bounds.contains(row, col) and self.cells[row][col] is not None

    def playable_cells(self) -> List[Coordinate]:
        return [
            (row, col)
            for row in range(self.height)
            for col in range(self.width)
            if self.cells[row][col] is not None
        ]

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Puzzle":
        """Build a puzzle from the JSON definition format.

        Only shape problems are rejected here; structural rules such as clue
        coverage are left to :class:`~cluegrid.engine.validator.PuzzleValidator`.
        """
        try:
            puzzle_id = int(payload["id"])
            width = int(payload["width"])
            height = int(payload["height"])
            raw_cells = payload["cells"]
            raw_across = payload.get("acrossClues", [])
            raw_down = payload.get("downClues", [])
        except (KeyError, TypeError, ValueError) as exc:
            raise PuzzleFormatError(f"Malformed puzzle definition: {exc}") from exc

        if width <= 0 or height <= 0:
            raise PuzzleFormatError(f"Invalid puzzle dimensions {height}x{width}")
        if not isinstance(raw_cells, Sequence) or len(raw_cells) != height:
            raise PuzzleFormatError(f"Expected {height} rows of cells")

        rows: List[Tuple[CellValue, ...]] = []
        for index, raw_row in enumerate(raw_cells):
            if not isinstance(raw_row, Sequence) or isinstance(raw_row, str) or len(raw_row) != width:
                raise PuzzleFormatError(f"Row {index} does not have {width} cells")
            rows.append(tuple(_solution_value(value) for value in raw_row))

        across = tuple(sorted((Clue.from_dict(c) for c in raw_across), key=lambda c: c.id))
        down = tuple(sorted((Clue.from_dict(c) for c in raw_down), key=lambda c: c.id))

        puzzle = cls(
            id=puzzle_id,
            width=width,
            height=height,
            cells=tuple(rows),
            across_clues=across,
            down_clues=down,
        )
        if not puzzle.playable_cells():
            raise PuzzleFormatError(f"Puzzle {puzzle_id} has no playable cells")
        for clue in across + down:
            for row, col in clue.cells:
                if not puzzle.bounds.contains(row, col):
                    raise PuzzleFormatError(
                        f"Clue {clue.id} references cell ({row},{col}) outside the grid"
                    )
        if not across or not down:
            raise PuzzleFormatError(f"Puzzle {puzzle_id} needs both across and down clues")
        return puzzle

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "width": self.width,
            "height": self.height,
            "cells": [list(row) for row in self.cells],
            "acrossClues": [clue.to_dict() for clue in self.across_clues],
            "downClues": [clue.to_dict() for clue in self.down_clues],
        }


def _solution_value(value: Any) -> CellValue:
    if value is None:
        return None
    if not isinstance(value, str) or not value:
        raise PuzzleFormatError(f"Invalid solution cell {value!r}")
    return value


@dataclass
class Session:
    """A saved solving session for one puzzle."""

    id: int
    board: List[List[CellValue]]
    selected_cell: Coordinate
    direction: Direction = Direction.ACROSS
    status: PuzzleStatus = PuzzleStatus.NOT_STARTED

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "board": [list(row) for row in self.board],
            "selectedCell": list(self.selected_cell),
            "direction": self.direction.value,
            "status": self.status.value,
        }

    @classmethod
    def from_jsonable(cls, payload: Any) -> "Session":
        """Decode a stored session, raising :class:`SessionFormatError` on bad data."""
        if not isinstance(payload, dict):
            raise SessionFormatError(f"Session payload is not an object: {type(payload).__name__}")
        try:
            board = [
                [_board_value(value) for value in _board_row(row)]
                for row in payload["board"]
            ]
            row, col = payload["selectedCell"]
            return cls(
                id=int(payload["id"]),
                board=board,
                selected_cell=(int(row), int(col)),
                direction=Direction(payload["direction"]),
                status=PuzzleStatus(payload["status"]),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise SessionFormatError(f"Malformed session payload: {exc}") from exc


def _board_row(row: Any) -> list:
    if not isinstance(row, list):
        raise TypeError(f"board row must be a list, got {type(row).__name__}")
    return row


def _board_value(value: Any) -> CellValue:
    if value is None or isinstance(value, str):
        return value
    raise ValueError(f"invalid board cell {value!r}")
