import unittest

from cluegrid.core.constants import Direction, Movement
from cluegrid.data.samples import sample_puzzle
from cluegrid.engine import navigation

from helpers import split_rows_puzzle


class NavigationTests(unittest.TestCase):
    def test_step(self) -> None:
        self.assertEqual(navigation.step((2, 2), Movement.UP), (1, 2))
        self.assertEqual(navigation.step((2, 2), Movement.RIGHT), (2, 3))

    def test_clue_start_scans_back_to_boundary(self) -> None:
        puzzle = sample_puzzle()
        self.assertEqual(navigation.clue_start(puzzle, (4, 4), Direction.ACROSS), (4, 2))
        self.assertEqual(navigation.clue_start(puzzle, (3, 4), Direction.DOWN), (1, 4))
        self.assertEqual(navigation.clue_start(puzzle, (0, 0), Direction.DOWN), (0, 0))

    def test_nearest_clue_prefers_closest_id(self) -> None:
        puzzle = split_rows_puzzle()
        across = puzzle.across_clues
        top_right = navigation.find_clue_by_id(across, 3)
        self.assertEqual(navigation.nearest_clue(across, top_right, forward=True).id, 5)
        self.assertEqual(navigation.nearest_clue(across, top_right, forward=False).id, 1)
        self.assertIsNone(
            navigation.nearest_clue(across, top_right, forward=True, direction=Direction.ACROSS)
        )

    def test_nearest_clue_same_column(self) -> None:
        puzzle = sample_puzzle()
        down = puzzle.down_clues
        third = navigation.find_clue_by_id(down, 3)
        self.assertEqual(navigation.nearest_clue(down, third, forward=True).id, 4)
        self.assertIsNone(
            navigation.nearest_clue(down, third, forward=True, direction=Direction.DOWN)
        )

    def test_find_clue_containing(self) -> None:
        puzzle = sample_puzzle()
        clue = navigation.find_clue_containing(puzzle.down_clues, (3, 5))
        self.assertEqual(clue.id, 7)
        self.assertIsNone(navigation.find_clue_containing(puzzle.down_clues, (4, 0)))

    def test_wrapped_after(self) -> None:
        cells = [(0, 0), (0, 1), (0, 2), (0, 3)]
        self.assertEqual(navigation.wrapped_after(cells, (0, 2)), [(0, 3), (0, 0), (0, 1)])
        self.assertEqual(navigation.wrapped_after(cells, (0, 3)), [(0, 0), (0, 1), (0, 2)])
        self.assertEqual(navigation.wrapped_after(cells, (5, 5)), cells)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
