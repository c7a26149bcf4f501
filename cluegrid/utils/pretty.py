"""Plain-text rendering of a solving session."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, List

from ..core.constants import Direction

if TYPE_CHECKING:
    from ..engine.controller import Controller


BLOCKED_SYMBOL = "#"
EMPTY_SYMBOL = "."


def cell_symbol(value) -> str:
    if value is None:
        return BLOCKED_SYMBOL
    return value or EMPTY_SYMBOL


def format_board(controller: Controller) -> str:
    """Grid with the selected cell in ``[ ]`` and the current clue in ``( )``."""
    puzzle = controller.puzzle
    board = controller.board
    highlighted = set(controller.current_clue.cells)
    header_cells = [f"{c:^3}" for c in range(puzzle.width)]
    lines = ["    " + "".join(header_cells)]
    lines.append("    " + "-" * (3 * puzzle.width))
    for r in range(puzzle.height):
        row_cells = []
        for c in range(puzzle.width):
            symbol = cell_symbol(board[r][c])
            if (r, c) == controller.selected_cell:
                row_cells.append(f"[{symbol}]")
            elif (r, c) in highlighted:
                row_cells.append(f"({symbol})")
            else:
                row_cells.append(f" {symbol} ")
        lines.append(f"{r:>2} |" + "".join(row_cells))
    return "\n".join(lines)


def format_clues(controller: Controller, direction: Direction) -> str:
    """One line per clue; ``>`` marks the current clue, ``~`` the crossing one."""
    current = controller.current_clue
    inverse = controller.inverse_current_clue
    lines: List[str] = [direction.value.upper()]
    for clue in controller.clues_for_direction(direction):
        if direction is controller.direction and clue.id == current.id:
            marker = ">"
        elif direction is not controller.direction and clue.id == inverse.id:
            marker = "~"
        else:
            marker = " "
        filled = "*" if controller.is_clue_filled(clue.id, direction) else " "
        lines.append(f"{marker}{filled}{clue.id:>3}. {clue.text}")
    return "\n".join(lines)


def format_session(controller: Controller) -> str:
    parts = [
        format_board(controller),
        "",
        format_clues(controller, Direction.ACROSS),
        "",
        format_clues(controller, Direction.DOWN),
        "",
        f"Status: {controller.status.value}  Direction: {controller.direction.value}"
        f"  Auto-check: {'on' if controller.preferences.auto_check else 'off'}",
    ]
    return "\n".join(parts)


def pretty_print_session(controller: Controller, *, stream=None) -> None:
    """Print the grid, both clue lists and the status line."""

    stream = stream or sys.stdout
    print(format_session(controller), file=stream)
