"""Line-oriented terminal front end for a :class:`Controller`.

Each input line is either a command starting with ``:`` or text that is
typed into the grid one character at a time (a space acts as the Space
key)::

    :key Backspace      press a named key (Enter, Tab, ArrowUp, ...)
    :click 2 3          click the cell at row 2, column 3
    :clue 5 down        jump to a clue
    :autocheck on       toggle the auto-check preference
    :quit               leave the session
"""

from __future__ import annotations

import sys
from typing import Iterable, Optional, TextIO

from ..core.constants import Direction, PuzzleStatus
from ..engine.controller import Controller
from ..utils.logger import get_logger
from ..utils.pretty import pretty_print_session

LOGGER = get_logger(__name__)

LOCKED_STATUSES = (PuzzleStatus.NOT_STARTED, PuzzleStatus.COMPLETED)


class TerminalSession:
    """Route text input into the controller and redraw after each line."""

    def __init__(self, controller: Controller, stream: Optional[TextIO] = None) -> None:
        self.controller = controller
        self.stream = stream or sys.stdout

    def refresh(self) -> None:
        pretty_print_session(self.controller, stream=self.stream)
        self.controller.save()

    def handle_line(self, line: str) -> bool:
        """Apply one line of input; return ``False`` when the session should end."""
        line = line.rstrip("\r\n")
        if line.startswith(":"):
            return self._handle_command(line[1:].split())
        for char in line:
            if self.controller.status in LOCKED_STATUSES:
                LOGGER.debug("Ignoring input while %s", self.controller.status.value)
                break
            self.controller.handle_key_press(char)
        return True

    def run(self, lines: Iterable[str]) -> None:
        controller = self.controller
        if controller.status is PuzzleStatus.NOT_STARTED:
            controller.start()
        self.refresh()
        for line in lines:
            if not self.handle_line(line):
                break
            self.refresh()
            if controller.status is PuzzleStatus.COMPLETED:
                print("Puzzle completed!", file=self.stream)
                break

    def _handle_command(self, parts: list) -> bool:
        if not parts:
            return True
        command, args = parts[0].lower(), parts[1:]
        if command in ("quit", "q"):
            return False
        if command == "autocheck" and args:
            self.controller.preferences.auto_check = args[0].lower() in ("on", "true", "1", "yes")
            return True
        if self.controller.status in LOCKED_STATUSES:
            LOGGER.debug("Ignoring %s while %s", command, self.controller.status.value)
            return True
        try:
            if command == "key" and len(args) == 1:
                self.controller.handle_key_press(args[0])
            elif command == "click" and len(args) == 2:
                self.controller.handle_click_cell((int(args[0]), int(args[1])))
            elif command == "clue" and len(args) == 2:
                self.controller.jump_to_clue(int(args[0]), Direction(args[1].lower()))
            else:
                print(f"Unknown command: :{' '.join(parts)}", file=self.stream)
        except ValueError as exc:
            print(f"Invalid arguments for :{command}: {exc}", file=self.stream)
        return True
