"""Player preferences that outlive a single puzzle session."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from ..utils.logger import get_logger

if TYPE_CHECKING:
    from ..io.store import SessionStore


LOGGER = get_logger(__name__)


class Preferences:
    """Holds the auto-check flag and persists it on every change."""

    def __init__(self, auto_check: bool = False, store: Optional["SessionStore"] = None) -> None:
        self._auto_check = auto_check
        self._store = store

    @classmethod
    def load(cls, store: Optional["SessionStore"] = None) -> "Preferences":
        """Restore stored preferences, defaulting to auto-check off."""
        stored = store.load_preferences() if store is not None else None
        auto_check = stored.auto_check if stored is not None else False
        return cls(auto_check=auto_check, store=store)

    @property
    def auto_check(self) -> bool:
        return self._auto_check

    @auto_check.setter
    def auto_check(self, value: bool) -> None:
        self._auto_check = bool(value)
        LOGGER.debug("Auto-check set to %s", self._auto_check)
        self.save()

    def save(self) -> None:
        if self._store is not None:
            self._store.save_preferences(self)

    def to_jsonable(self) -> dict:
        return {"autoCheck": self._auto_check}
