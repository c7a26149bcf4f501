"""Cursor, direction and fill state machine for a solving session.

The controller owns the :class:`Board`, the selected cell, the active
direction and the puzzle status. Presentation code reads its properties and
feeds input through :meth:`Controller.handle_key_press`,
:meth:`Controller.handle_click_cell` and :meth:`Controller.jump_to_clue`;
nothing else mutates the board.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Optional, Tuple

from ..core.constants import ARROW_MOVEMENTS, Direction, Key, Movement, MovementMode, PuzzleStatus
from ..core.models import CellValue, Clue, Coordinate, Puzzle, Session
from ..utils.logger import get_logger
from . import navigation
from .board import Board
from .preferences import Preferences

if TYPE_CHECKING:
    from ..io.store import SessionStore


LOGGER = get_logger(__name__)


class Controller:
    """Translate input events into board, cursor and status transitions."""

    def __init__(
        self,
        puzzle: Puzzle,
        store: Optional["SessionStore"] = None,
        preferences: Optional[Preferences] = None,
    ) -> None:
        self._puzzle = puzzle
        self._store = store
        self._preferences = preferences if preferences is not None else Preferences()

        session = self._restore_session(store.load_session(puzzle.id) if store is not None else None)
        if session is None:
            self._board = Board(puzzle)
            self._selected_cell = self._default_cell()
            self._direction = Direction.ACROSS
            self._status = PuzzleStatus.NOT_STARTED
        else:
            LOGGER.info("Restored session for puzzle %s (%s)", puzzle.id, session.status.value)
            self._board = Board(puzzle, session.board)
            self._selected_cell = session.selected_cell
            self._direction = session.direction
            self._status = session.status

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def puzzle(self) -> Puzzle:
        return self._puzzle

    @property
    def board(self) -> List[List[CellValue]]:
        return self._board.rows()

    @property
    def selected_cell(self) -> Coordinate:
        return self._selected_cell

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def status(self) -> PuzzleStatus:
        return self._status

    @property
    def preferences(self) -> Preferences:
        return self._preferences

    @property
    def clues(self) -> Dict[Direction, Tuple[Clue, ...]]:
        return {direction: self._puzzle.clues_for(direction) for direction in Direction}

    def clues_for_direction(self, direction: Direction) -> Tuple[Clue, ...]:
        return self._puzzle.clues_for(direction)

    @property
    def current_clue(self) -> Clue:
        """The clue in the active direction that spans the selected cell."""
        start = navigation.clue_start(self._puzzle, self._selected_cell, self._direction)
        clues = self.clues_for_direction(self._direction)
        clue = navigation.find_clue_starting_at(clues, start)
        if clue is None:
            LOGGER.error(
                "Could not find clue at %s, direction: %s", start, self._direction.value
            )
            return clues[0]
        return clue

    @property
    def inverse_current_clue(self) -> Clue:
        """The clue in the other direction that contains the selected cell."""
        direction = self._direction.opposite()
        clues = self.clues_for_direction(direction)
        clue = navigation.find_clue_containing(clues, self._selected_cell)
        if clue is None:
            LOGGER.error(
                "Could not find clue containing %s, direction: %s",
                self._selected_cell,
                direction.value,
            )
            return clues[0]
        return clue

    def is_clue_filled(self, clue_id: int, direction: Direction) -> bool:
        clue = navigation.find_clue_by_id(self.clues_for_direction(direction), clue_id)
        if clue is None:
            LOGGER.warning("Unknown clue %s %s", clue_id, direction.value)
            return False
        return all(not self._board.is_empty(cell) for cell in clue.cells)

    def is_cell_correct(self, coord: Coordinate) -> bool:
        return self._board.is_cell_correct(coord)

    def is_filled(self) -> bool:
        return self._board.is_filled()

    def is_filled_correctly(self) -> bool:
        return self._board.is_filled_correctly()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> None:
        self._status = PuzzleStatus.IN_PROGRESS

    def save(self) -> None:
        """Hand a snapshot of the session to the store, if one is attached."""
        if self._store is None:
            return
        self._store.save_session(
            self._puzzle.id,
            self._board.rows(),
            self._selected_cell,
            self._direction,
            self._status,
        )

    # ------------------------------------------------------------------
    # Input handling
    # ------------------------------------------------------------------

    def handle_key_press(self, key: str) -> None:
        parsed = Key.parse(key)
        if parsed is Key.BACKSPACE:
            self._update_selected_cell("")
            self._move(Movement.along(self._direction, forward=False), MovementMode.PLAIN)
        elif parsed in (Key.ENTER, Key.TAB):
            self._advance_clue()
        elif parsed in ARROW_MOVEMENTS:
            movement = ARROW_MOVEMENTS[parsed]
            # An arrow across the active axis only re-aims the cursor.
            if self._change_direction(movement.axis):
                return
            self._move(movement, MovementMode.FORCE, same_axis=True)
        elif parsed is Key.SPACE:
            self._update_selected_cell("")
            self._move(Movement.along(self._direction), MovementMode.PLAIN)
        elif parsed is None and len(key) == 1 and key.isprintable():
            self._type_character(key)
        else:
            LOGGER.debug("Ignoring key %r", key)

    def handle_click_cell(self, coord: Coordinate) -> None:
        coord = (int(coord[0]), int(coord[1]))
        if not self._puzzle.is_valid_cell(coord):
            LOGGER.debug("Ignoring click on invalid cell %s", coord)
            return
        if coord == self._selected_cell:
            self._direction = self._direction.opposite()
        else:
            self._selected_cell = coord

    def jump_to_clue(self, clue_id: int, direction: Direction) -> None:
        clue = navigation.find_clue_by_id(self.clues_for_direction(direction), clue_id)
        if clue is None:
            LOGGER.warning("Cannot jump to unknown clue %s %s", clue_id, direction.value)
            return
        self._direction = direction
        self._selected_cell = clue.start

    # ------------------------------------------------------------------
    # Internal transitions
    # ------------------------------------------------------------------

    def _type_character(self, char: str) -> None:
        clue = self.current_clue
        self._update_selected_cell(char)
        forward = Movement.along(self._direction)
        if self._preferences.auto_check:
            self._move(forward, MovementMode.SKIP_ERROR_OR_EMPTY, clue=clue)
        elif self._selected_cell != clue.end:
            self._move(forward, MovementMode.SKIP_FILLED, clue=clue)

    def _advance_clue(self) -> None:
        current = self.current_clue
        clues = self.clues_for_direction(self._direction)
        following = next((clue for clue in clues if clue.id > current.id), None)
        if following is None:
            direction = self._direction.opposite()
            clues = self.clues_for_direction(direction)
            if not clues:
                LOGGER.warning("No %s clues to wrap to", direction.value)
                return
            self._direction = direction
            following = clues[0]
        self._selected_cell = following.start

    def _change_direction(self, direction: Direction) -> bool:
        if self._direction is not direction:
            self._direction = direction
            return True
        return False

    def _update_selected_cell(self, value: str) -> None:
        self._board.set(self._selected_cell, value)
        self._refresh_status()

    def _refresh_status(self) -> None:
        if self._board.is_filled_correctly():
            status = PuzzleStatus.COMPLETED
        elif self._board.is_filled():
            status = PuzzleStatus.FILLED
        elif self._status in (PuzzleStatus.FILLED, PuzzleStatus.COMPLETED):
            status = PuzzleStatus.IN_PROGRESS
        else:
            status = self._status
        if status is not self._status:
            LOGGER.info("Puzzle %s status: %s -> %s", self._puzzle.id, self._status.value, status.value)
            self._status = status

    def _move(
        self,
        movement: Movement,
        mode: MovementMode,
        same_axis: bool = False,
        clue: Optional[Clue] = None,
    ) -> None:
        """Move the cursor one step in ``movement`` according to ``mode``."""
        target = navigation.step(self._selected_cell, movement)

        if mode is MovementMode.SKIP_ERROR_OR_EMPTY:
            clue = clue or self.current_clue
            target = next(
                (
                    cell
                    for cell in navigation.wrapped_after(clue.cells, self._selected_cell)
                    if self._board.is_empty(cell) or not self._board.is_cell_correct(cell)
                ),
                self._selected_cell,
            )
        elif mode is MovementMode.SKIP_FILLED:
            target = self._next_empty(target, movement, clue or self.current_clue)

        if self._puzzle.is_valid_cell(target):
            self._selected_cell = target
        elif mode is MovementMode.FORCE:
            self._force_to_neighbouring_clue(movement, same_axis)
        else:
            LOGGER.debug("Rejected move %s from %s", movement.name, self._selected_cell)

    def _next_empty(self, intended: Coordinate, movement: Movement, clue: Clue) -> Coordinate:
        cell = intended
        while self._puzzle.is_valid_cell(cell) and clue.contains(cell):
            if self._board.is_empty(cell):
                return cell
            cell = navigation.step(cell, movement)
        return intended

    def _force_to_neighbouring_clue(self, movement: Movement, same_axis: bool) -> None:
        current = self.current_clue
        neighbour = navigation.nearest_clue(
            self.clues_for_direction(self._direction),
            current,
            forward=movement.forward,
            direction=self._direction if same_axis else None,
        )
        if neighbour is None:
            LOGGER.debug("No clue %s of %s %s", movement.name, current.id, self._direction.value)
            return
        self._selected_cell = neighbour.start if movement.forward else neighbour.end

    # ------------------------------------------------------------------
    # Session restore
    # ------------------------------------------------------------------

    def _restore_session(self, session: Optional[Session]) -> Optional[Session]:
        if session is None:
            return None
        if not Board.matches(self._puzzle, session.board):
            LOGGER.warning("Stored board does not fit puzzle %s; starting fresh", self._puzzle.id)
            return None
        if not self._puzzle.is_valid_cell(session.selected_cell):
            LOGGER.warning(
                "Stored selection %s is not a playable cell; starting fresh", session.selected_cell
            )
            return None
        return session

    def _default_cell(self) -> Coordinate:
        return self._puzzle.playable_cells()[0]
