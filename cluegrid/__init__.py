"""Interaction engine for a grid-based crossword solver.

This package exposes the public API surface via:

- ``cluegrid.engine.controller.Controller``: cursor, direction and fill state machine.
- ``cluegrid.core.models.Puzzle``: the immutable puzzle definition.
- ``cluegrid.engine.preferences.Preferences``: the persisted auto-check flag.
- ``cluegrid.io.store`` stores: session and preference persistence.
"""

from .core.constants import Direction, PuzzleStatus
from .core.models import Clue, Puzzle
from .engine.controller import Controller
from .engine.preferences import Preferences
from .io.store import JsonFileStore, MemoryStore, SessionStore

__all__ = [
    "Clue",
    "Controller",
    "Direction",
    "JsonFileStore",
    "MemoryStore",
    "Preferences",
    "Puzzle",
    "PuzzleStatus",
    "SessionStore",
]

__version__ = "0.1.0"
