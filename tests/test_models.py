import unittest

from cluegrid.core.constants import Direction, Key, Movement, PuzzleStatus
from cluegrid.core.exceptions import PuzzleFormatError, SessionFormatError
from cluegrid.core.models import Puzzle, Session
from cluegrid.data.samples import SAMPLE_PUZZLE


class ConstantsTests(unittest.TestCase):
    def test_direction_opposite(self) -> None:
        self.assertIs(Direction.ACROSS.opposite(), Direction.DOWN)
        self.assertIs(Direction.DOWN.opposite(), Direction.ACROSS)

    def test_movement_axis_and_orientation(self) -> None:
        self.assertIs(Movement.LEFT.axis, Direction.ACROSS)
        self.assertIs(Movement.UP.axis, Direction.DOWN)
        self.assertTrue(Movement.DOWN.forward)
        self.assertFalse(Movement.LEFT.forward)
        self.assertIs(Movement.along(Direction.DOWN, forward=False), Movement.UP)

    def test_key_parsing(self) -> None:
        self.assertIs(Key.parse("Backspace"), Key.BACKSPACE)
        self.assertIs(Key.parse("ARROWDOWN"), Key.ARROW_DOWN)
        self.assertIs(Key.parse("up"), Key.ARROW_UP)
        self.assertIs(Key.parse(" "), Key.SPACE)
        self.assertIsNone(Key.parse("a"))
        self.assertIsNone(Key.parse("Escape"))


class PuzzleTests(unittest.TestCase):
    def test_parse_sample(self) -> None:
        puzzle = Puzzle.from_dict(SAMPLE_PUZZLE)
        self.assertEqual((puzzle.height, puzzle.width), (5, 6))
        self.assertEqual([c.id for c in puzzle.clues_for(Direction.ACROSS)], [1, 5, 8, 9, 10])
        self.assertEqual([c.id for c in puzzle.clues_for(Direction.DOWN)], [1, 2, 3, 4, 6, 7])
        self.assertTrue(puzzle.is_blocked((4, 0)))
        self.assertFalse(puzzle.is_valid_cell((5, 0)))
        self.assertEqual(puzzle.solution((2, 4)), "L")
        self.assertEqual(len(puzzle.playable_cells()), 26)

    def test_clue_lists_are_sorted_by_id(self) -> None:
        payload = dict(SAMPLE_PUZZLE)
        payload["downClues"] = list(reversed(SAMPLE_PUZZLE["downClues"]))
        puzzle = Puzzle.from_dict(payload)
        self.assertEqual([c.id for c in puzzle.down_clues], [1, 2, 3, 4, 6, 7])

    def test_to_dict_round_trip(self) -> None:
        puzzle = Puzzle.from_dict(SAMPLE_PUZZLE)
        self.assertEqual(Puzzle.from_dict(puzzle.to_dict()), puzzle)

    def test_rejects_wrong_row_count(self) -> None:
        payload = dict(SAMPLE_PUZZLE, height=6)
        with self.assertRaises(PuzzleFormatError):
            Puzzle.from_dict(payload)

    def test_rejects_clue_outside_grid(self) -> None:
        payload = dict(SAMPLE_PUZZLE)
        payload["acrossClues"] = [{"id": 1, "text": "x", "cells": [[0, 6]]}]
        with self.assertRaises(PuzzleFormatError):
            Puzzle.from_dict(payload)

    def test_rejects_bad_solution_cell(self) -> None:
        payload = dict(SAMPLE_PUZZLE)
        payload["cells"] = [list(row) for row in SAMPLE_PUZZLE["cells"]]
        payload["cells"][0][0] = 3
        with self.assertRaises(PuzzleFormatError):
            Puzzle.from_dict(payload)

    def test_rejects_missing_direction(self) -> None:
        payload = dict(SAMPLE_PUZZLE, downClues=[])
        with self.assertRaises(PuzzleFormatError):
            Puzzle.from_dict(payload)

    def test_rejects_missing_fields(self) -> None:
        with self.assertRaises(PuzzleFormatError):
            Puzzle.from_dict({"id": 1})


class SessionTests(unittest.TestCase):
    def test_jsonable_round_trip(self) -> None:
        session = Session(
            id=3,
            board=[["A", None], ["", "b"]],
            selected_cell=(1, 1),
            direction=Direction.DOWN,
            status=PuzzleStatus.FILLED,
        )
        self.assertEqual(Session.from_jsonable(session.to_jsonable()), session)
        self.assertEqual(session.to_jsonable()["status"], "filled")

    def test_malformed_payloads(self) -> None:
        good = {
            "id": 1,
            "board": [["A"]],
            "selectedCell": [0, 0],
            "direction": "across",
            "status": "in-progress",
        }
        bad_payloads = [
            [],
            dict(good, direction="diagonal"),
            dict(good, status="won"),
            dict(good, board=[[1]]),
            dict(good, board=["AB"]),
            dict(good, selectedCell=[0]),
            {k: v for k, v in good.items() if k != "board"},
        ]
        for payload in bad_payloads:
            with self.assertRaises(SessionFormatError, msg=repr(payload)):
                Session.from_jsonable(payload)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
