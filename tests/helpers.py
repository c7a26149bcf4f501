"""Shared puzzle fixtures for the test suite."""

from cluegrid.core.constants import Direction
from cluegrid.core.models import Puzzle

# 3x5 grid with two across clues on the top and bottom rows:
#
#   A B # C D
#   E F G H I
#   J K # L M
SPLIT_ROWS_PUZZLE = {
    "id": 7,
    "width": 5,
    "height": 3,
    "cells": [
        ["A", "B", None, "C", "D"],
        ["E", "F", "G", "H", "I"],
        ["J", "K", None, "L", "M"],
    ],
    "acrossClues": [
        {"id": 1, "text": "Top left", "cells": [[0, 0], [0, 1]]},
        {"id": 3, "text": "Top right", "cells": [[0, 3], [0, 4]]},
        {"id": 5, "text": "Middle", "cells": [[1, 0], [1, 1], [1, 2], [1, 3], [1, 4]]},
        {"id": 7, "text": "Bottom left", "cells": [[2, 0], [2, 1]]},
        {"id": 8, "text": "Bottom right", "cells": [[2, 3], [2, 4]]},
    ],
    "downClues": [
        {"id": 1, "text": "First column", "cells": [[0, 0], [1, 0], [2, 0]]},
        {"id": 2, "text": "Second column", "cells": [[0, 1], [1, 1], [2, 1]]},
        {"id": 3, "text": "Fourth column", "cells": [[0, 3], [1, 3], [2, 3]]},
        {"id": 4, "text": "Fifth column", "cells": [[0, 4], [1, 4], [2, 4]]},
        {"id": 6, "text": "Lone centre", "cells": [[1, 2]]},
    ],
}


def split_rows_puzzle() -> Puzzle:
    return Puzzle.from_dict(SPLIT_ROWS_PUZZLE)


def place(controller, coord, direction=Direction.ACROSS) -> None:
    """Put the cursor somewhere without going through click semantics."""
    controller._selected_cell = coord
    controller._direction = direction


# A B
# C #
NYT_PAYLOAD = {
    "id": 21000,
    "body": [
        {
            "dimensions": {"width": 2, "height": 2},
            "cells": [{"answer": "A"}, {"answer": "B"}, {"answer": "C"}, {}],
            "clues": [
                {"label": "3", "direction": "Across", "cells": [2], "text": [{"plain": "Third"}]},
                {"label": "1", "direction": "Across", "cells": [0, 1], "text": [{"plain": "First"}]},
                {"label": "1", "direction": "Down", "cells": [0, 2], "text": [{"plain": "Down one"}]},
                {"label": "2", "direction": "Down", "cells": [1], "text": [{"plain": "Down two"}]},
            ],
        }
    ],
}
