"""Session and preference persistence.

Sessions are keyed by puzzle id. :class:`JsonFileStore` writes one JSON
document per puzzle under ``local_db/collections/sessions/`` plus a single
``preferences.json``; :class:`MemoryStore` keeps the same serialised documents
in a dict. Unreadable or malformed documents are reported and treated as
missing, so a broken save never prevents a fresh session from starting.
"""

from __future__ import annotations

import json
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..core.constants import Direction, PuzzleStatus
from ..core.exceptions import SessionFormatError
from ..core.models import CellValue, Coordinate, Session
from ..engine.preferences import Preferences
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

DEFAULT_STORE_DIR = Path("local_db/collections/sessions")
STORE_DIR_ENV = "CLUEGRID_STORE_DIR"


class SessionStore(ABC):
    """Persistence port used by the controller and preferences."""

    # ------------------------------------------------------------------
    # Raw document access
    # ------------------------------------------------------------------

    @abstractmethod
    def _read(self, key: str) -> Optional[str]:
        """Return the stored text for ``key`` or ``None``."""

    @abstractmethod
    def _write(self, key: str, text: str) -> None:
        """Store ``text`` under ``key``."""

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    def load_session(self, puzzle_id: int) -> Optional[Session]:
        doc = self._load_document(self._session_key(puzzle_id))
        if doc is None:
            LOGGER.debug("No stored session for puzzle %s", puzzle_id)
            return None
        try:
            session = Session.from_jsonable(doc)
        except SessionFormatError as exc:
            LOGGER.warning("Ignoring stored session for puzzle %s: %s", puzzle_id, exc)
            return None
        if session.id != puzzle_id:
            LOGGER.warning(
                "Stored session id %s does not match puzzle %s; ignoring", session.id, puzzle_id
            )
            return None
        return session

    def save_session(
        self,
        puzzle_id: int,
        board: List[List[CellValue]],
        selected_cell: Coordinate,
        direction: Direction,
        status: PuzzleStatus,
    ) -> None:
        session = Session(
            id=puzzle_id,
            board=board,
            selected_cell=selected_cell,
            direction=direction,
            status=status,
        )
        self._save_document(self._session_key(puzzle_id), session.to_jsonable())

    def load_preferences(self) -> Optional[Preferences]:
        doc = self._load_document(self._preferences_key())
        if doc is None:
            return None
        if not isinstance(doc, dict) or not isinstance(doc.get("autoCheck"), bool):
            LOGGER.warning("Ignoring malformed preferences document: %r", doc)
            return None
        return Preferences(auto_check=doc["autoCheck"], store=self)

    def save_preferences(self, preferences: Preferences) -> None:
        self._save_document(self._preferences_key(), preferences.to_jsonable())

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _load_document(self, key: str) -> Optional[Any]:
        try:
            text = self._read(key)
        except (OSError, UnicodeDecodeError) as exc:
            LOGGER.warning("Store read error (%s): %s", key, exc)
            return None
        if text is None:
            return None
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            LOGGER.warning("Store document %s is not valid JSON: %s", key, exc)
            return None

    def _save_document(self, key: str, doc: Dict[str, Any]) -> None:
        try:
            self._write(key, json.dumps(doc, ensure_ascii=False, indent=2))
        except OSError as exc:
            LOGGER.warning("Store write failed (%s): %s", key, exc)
            return
        LOGGER.debug("Stored %s", key)

    @staticmethod
    def _session_key(puzzle_id: int) -> str:
        return f"puzzle_{puzzle_id}"

    @staticmethod
    def _preferences_key() -> str:
        return "preferences"


class JsonFileStore(SessionStore):
    """Keep each document as ``<store_dir>/<key>.json``."""

    def __init__(self, store_dir: Path | str = DEFAULT_STORE_DIR) -> None:
        self.store_dir = Path(store_dir)
        self.store_dir.mkdir(parents=True, exist_ok=True)

    @classmethod
    def from_env(cls, store_dir: Path | str | None = None) -> "JsonFileStore":
        """Build a store from an explicit path, ``$CLUEGRID_STORE_DIR`` or the default."""
        return cls(store_dir or os.environ.get(STORE_DIR_ENV) or DEFAULT_STORE_DIR)

    def path_for(self, key: str) -> Path:
        return self.store_dir / f"{key}.json"

    def _read(self, key: str) -> Optional[str]:
        path = self.path_for(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def _write(self, key: str, text: str) -> None:
        self.path_for(key).write_text(text, encoding="utf-8")


class MemoryStore(SessionStore):
    """In-process store holding serialised documents."""

    def __init__(self, documents: Optional[Dict[str, str]] = None) -> None:
        self.documents: Dict[str, str] = dict(documents or {})

    def _read(self, key: str) -> Optional[str]:
        return self.documents.get(key)

    def _write(self, key: str, text: str) -> None:
        self.documents[key] = text
