"""Built-in sample puzzle used by the CLI and the tests."""

from __future__ import annotations

from typing import Any, Dict

from ..core.models import Puzzle


def _across(row: int, start: int, end: int) -> list:
    return [[row, col] for col in range(start, end + 1)]


def _down(col: int, start: int, end: int) -> list:
    return [[row, col] for row in range(start, end + 1)]


SAMPLE_PUZZLE: Dict[str, Any] = {
    "id": 1,
    "width": 6,
    "height": 5,
    "cells": [
        ["C", "A", "B", "S", None, None],
        ["A", "T", "O", "N", "C", "E"],
        ["P", "U", "P", "I", "L", "S"],
        ["S", "L", "I", "P", "U", "P"],
        [None, None, "T", "E", "E", "N"],
    ],
    "acrossClues": [
        {"id": 1, "text": "Wines that Napa Valley is renowned for, informally", "cells": _across(0, 0, 3)},
        {"id": 5, "text": '"Right away!"', "cells": _across(1, 0, 5)},
        {"id": 8, "text": "School students", "cells": _across(2, 0, 5)},
        {"id": 9, "text": "Make a mistake ... or maybe 8-Across backward", "cells": _across(3, 0, 5)},
        {"id": 10, "text": "Many a new driver", "cells": _across(4, 2, 5)},
    ],
    "downClues": [
        {"id": 1, "text": "Items of clothing that may be worn backwards", "cells": _down(0, 0, 3)},
        {"id": 2, "text": "___ Gawande, surgeon and author of \"Being Mortal\"", "cells": _down(1, 0, 3)},
        {"id": 3, "text": "Hasbro toy with a pull handle and twistable crank", "cells": _down(2, 0, 4)},
        {"id": 4, "text": 'Criticize snarkily, with "at"', "cells": _down(3, 0, 4)},
        {"id": 6, "text": "You're reading it", "cells": _down(4, 1, 4)},
        {"id": 7, "text": 'Channel with "2" and "U" spinoffs', "cells": _down(5, 1, 4)},
    ],
}


def sample_puzzle() -> Puzzle:
    return Puzzle.from_dict(SAMPLE_PUZZLE)
