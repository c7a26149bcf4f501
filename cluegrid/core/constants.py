"""Shared constants and enumerations for the puzzle engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class Direction(str, Enum):
    """Clue directions; also the cursor's active direction."""

    ACROSS = "across"
    DOWN = "down"

    def opposite(self) -> "Direction":
        return Direction.DOWN if self is Direction.ACROSS else Direction.ACROSS


class PuzzleStatus(str, Enum):
    """Lifecycle of a solving session."""

    NOT_STARTED = "not-started"
    IN_PROGRESS = "in-progress"
    FILLED = "filled"
    COMPLETED = "completed"


class MovementMode(str, Enum):
    """How the cursor reacts when a single step is not enough."""

    PLAIN = "plain"
    FORCE = "force"
    SKIP_FILLED = "skip-filled"
    SKIP_ERROR_OR_EMPTY = "skip-error-or-empty"


class Movement(Enum):
    """A single-cell step on the grid as ``(row delta, col delta)``."""

    LEFT = (0, -1)
    RIGHT = (0, 1)
    UP = (-1, 0)
    DOWN = (1, 0)

    @property
    def delta(self) -> Tuple[int, int]:
        return self.value

    @property
    def axis(self) -> Direction:
        return Direction.ACROSS if self in (Movement.LEFT, Movement.RIGHT) else Direction.DOWN

    @property
    def forward(self) -> bool:
        return self in (Movement.RIGHT, Movement.DOWN)

    @classmethod
    def along(cls, direction: Direction, forward: bool = True) -> "Movement":
        if direction is Direction.ACROSS:
            return cls.RIGHT if forward else cls.LEFT
        return cls.DOWN if forward else cls.UP


class Key(str, Enum):
    """Symbolic names of the non-character keys the controller understands."""

    BACKSPACE = "backspace"
    ENTER = "enter"
    TAB = "tab"
    ARROW_LEFT = "arrowleft"
    ARROW_RIGHT = "arrowright"
    ARROW_UP = "arrowup"
    ARROW_DOWN = "arrowdown"
    SPACE = "space"

    @classmethod
    def parse(cls, raw: str) -> Optional["Key"]:
        """Map a raw key name to a :class:`Key`, or ``None`` if unknown."""
        if raw == " ":
            return cls.SPACE
        name = raw.lower()
        return _KEY_ALIASES.get(name) or next((key for key in cls if key.value == name), None)


_KEY_ALIASES = {
    "left": Key.ARROW_LEFT,
    "right": Key.ARROW_RIGHT,
    "up": Key.ARROW_UP,
    "down": Key.ARROW_DOWN,
}

ARROW_MOVEMENTS = {
    Key.ARROW_LEFT: Movement.LEFT,
    Key.ARROW_RIGHT: Movement.RIGHT,
    Key.ARROW_UP: Movement.UP,
    Key.ARROW_DOWN: Movement.DOWN,
}


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols
