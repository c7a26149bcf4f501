"""Geometric helpers used by the controller to walk the grid."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from ..core.constants import Direction, Movement
from ..core.models import Clue, Coordinate, Puzzle


def step(coord: Coordinate, movement: Movement) -> Coordinate:
    dr, dc = movement.delta
    return coord[0] + dr, coord[1] + dc


def clue_start(puzzle: Puzzle, coord: Coordinate, direction: Direction) -> Coordinate:
    """Scan backwards along ``direction`` to the first cell of the span."""
    backward = Movement.along(direction, forward=False)
    current = coord
    while puzzle.is_valid_cell(current):
        current = step(current, backward)
    # One step forward again: the scan stops on the first invalid cell.
    return step(current, Movement.along(direction))


def find_clue_starting_at(clues: Iterable[Clue], start: Coordinate) -> Optional[Clue]:
    return next((clue for clue in clues if clue.start == start), None)


def find_clue_containing(clues: Iterable[Clue], coord: Coordinate) -> Optional[Clue]:
    return next((clue for clue in clues if clue.contains(coord)), None)


def find_clue_by_id(clues: Iterable[Clue], clue_id: int) -> Optional[Clue]:
    return next((clue for clue in clues if clue.id == clue_id), None)


def shares_axis(first: Clue, second: Clue, direction: Direction) -> bool:
    """Across clues share a row, down clues share a column."""
    index = 0 if direction is Direction.ACROSS else 1
    return first.start[index] == second.start[index]


def nearest_clue(
    clues: Sequence[Clue],
    current: Clue,
    forward: bool,
    direction: Optional[Direction] = None,
) -> Optional[Clue]:
    """Pick the clue whose id is closest to ``current`` on the requested side.

    When ``direction`` is given only clues on the same row (across) or the
    same column (down) as ``current`` qualify.
    """
    if forward:
        candidates = [clue for clue in clues if clue.id > current.id]
    else:
        candidates = [clue for clue in clues if clue.id < current.id]
    if direction is not None:
        candidates = [clue for clue in candidates if shares_axis(clue, current, direction)]
    if not candidates:
        return None
    return min(candidates, key=lambda clue: abs(clue.id - current.id))


def wrapped_after(cells: Sequence[Coordinate], coord: Coordinate) -> List[Coordinate]:
    """Cells following ``coord`` in ``cells``, wrapping round, ``coord`` excluded."""
    ordered = list(cells)
    if coord not in ordered:
        return ordered
    index = ordered.index(coord)
    return ordered[index + 1:] + ordered[:index]
