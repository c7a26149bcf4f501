"""Conversion of NYT crossword JSON into the puzzle definition format."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import requests

from ..core.exceptions import PuzzleSourceError
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)


@dataclass
class NytClientConfig:
    """Settings for :class:`NytPuzzleClient`."""

    timeout_seconds: float = 30.0
    cookie_env: str = "NYT_S"
    user_agent: str = "cluegrid/0.1"


class NytPuzzleClient:
    """Fetch raw NYT puzzle JSON over HTTP.

    Subscriber puzzles need the ``NYT-S`` cookie; it is read from the
    environment variable named in the config and simply omitted when unset.
    """

    def __init__(self, config: Optional[NytClientConfig] = None) -> None:
        self.config = config or NytClientConfig()
        self._cookie = os.environ.get(self.config.cookie_env)

    def fetch(self, url: str) -> Dict[str, Any]:
        headers = {"User-Agent": self.config.user_agent}
        cookies = {"NYT-S": self._cookie} if self._cookie else None
        try:
            response = requests.get(
                url,
                headers=headers,
                cookies=cookies,
                timeout=self.config.timeout_seconds,
            )
            response.raise_for_status()
        except requests.RequestException as exc:  # pragma: no cover - network failure
            raise PuzzleSourceError(f"NYT request failed: {exc}") from exc

        try:
            data = response.json()
        except ValueError as exc:
            raise PuzzleSourceError(f"NYT response from {url} is not JSON") from exc
        LOGGER.info("Fetched NYT puzzle payload from %s", url)
        return data


def load_nyt_source(source: str, client: Optional[NytPuzzleClient] = None) -> Dict[str, Any]:
    """Read raw NYT JSON from an http(s) URL or a local file path."""
    if source.startswith(("http://", "https://")):
        return (client or NytPuzzleClient()).fetch(source)
    try:
        return json.loads(Path(source).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise PuzzleSourceError(f"Cannot read NYT puzzle from {source}: {exc}") from exc


def convert_nyt(payload: Mapping[str, Any]) -> Dict[str, Any]:
    """Return the puzzle definition dict for a raw NYT puzzle payload.

    Cells are listed row-major in ``body[0].cells``; an empty object is a
    blocked square, otherwise ``answer`` holds the solution. Clue cells are
    the same flat indexes.
    """
    try:
        body = payload["body"][0]
        width = int(body["dimensions"]["width"])
        height = int(body["dimensions"]["height"])
        raw_cells = body["cells"]
        raw_clues = body["clues"]
    except (KeyError, IndexError, TypeError, ValueError) as exc:
        raise PuzzleSourceError(f"Unrecognised NYT payload: {exc}") from exc

    if not isinstance(raw_cells, list) or len(raw_cells) != width * height:
        count = len(raw_cells) if isinstance(raw_cells, list) else type(raw_cells).__name__
        raise PuzzleSourceError(f"NYT payload has {count} cells for a {height}x{width} grid")

    def to_coordinate(index: int) -> List[int]:
        return [index // width, index % width]

    cells: List[List[Optional[str]]] = [[None] * width for _ in range(height)]
    for index, cell in enumerate(raw_cells):
        if cell and not isinstance(cell, dict):
            raise PuzzleSourceError(f"Unrecognised NYT cell {index}: {cell!r}")
        row, col = to_coordinate(index)
        cells[row][col] = cell.get("answer") if cell else None

    across: List[Dict[str, Any]] = []
    down: List[Dict[str, Any]] = []
    for clue in raw_clues:
        try:
            entry = {
                "id": int(clue["label"]),
                "text": clue["text"][0].get("plain", ""),
                "cells": [to_coordinate(int(index)) for index in clue["cells"]],
            }
            direction = clue["direction"]
        except (KeyError, IndexError, TypeError, ValueError) as exc:
            raise PuzzleSourceError(f"Unrecognised NYT clue {clue!r}: {exc}") from exc
        if direction == "Across":
            across.append(entry)
        elif direction == "Down":
            down.append(entry)
        else:
            LOGGER.warning("Skipping NYT clue %s with direction %r", entry["id"], direction)

    return {
        "id": payload.get("id"),
        "width": width,
        "height": height,
        "cells": cells,
        "acrossClues": sorted(across, key=lambda c: c["id"]),
        "downClues": sorted(down, key=lambda c: c["id"]),
    }
