"""Best-effort persistence of the challenge snapshot."""

from __future__ import annotations

from typing import Optional

from .. import config
from ..db import Database
from ..errors import ImportFormatError, PersistenceError
from ..logger import configure_logging
from .models import Snapshot, parse_snapshot

_LOG = configure_logging()


class SnapshotStorage:
    """Stores the full snapshot as one JSON value under a single key.

    The database is opened on first use. Failures are logged and reported
    through return values, never raised.
    """

    def __init__(self, database: Optional[Database] = None, key: str = config.STORAGE_KEY) -> None:
        self.db = database or Database()
        self.key = key
        self._ready = False

    def initialise(self) -> bool:
        if self._ready:
            return True
        try:
            self._ensure_ready()
        except PersistenceError as exc:
            _LOG.error("Storage unavailable, continuing without persistence: %s", exc)
            return False
        return True

    def _ensure_ready(self) -> None:
        if not self._ready:
            self.db.initialise()
            self._ready = True

    def save(self, snapshot: Snapshot) -> bool:
        try:
            self._ensure_ready()
            self.db.set_value(self.key, snapshot.to_json())
        except (PersistenceError, TypeError, ValueError) as exc:
            _LOG.error("Failed to save snapshot under %s: %s", self.key, exc)
            return False
        _LOG.debug("Saved %s challenges under %s", len(snapshot.challenges), self.key)
        return True

    def load(self) -> Optional[Snapshot]:
        try:
            self._ensure_ready()
            raw = self.db.get_value(self.key)
        except PersistenceError as exc:
            _LOG.error("Failed to read snapshot under %s: %s", self.key, exc)
            return None
        if raw is None:
            return None
        try:
            snapshot = parse_snapshot(raw)
        except ImportFormatError as exc:
            _LOG.warning("Ignoring malformed snapshot under %s: %s", self.key, exc)
            return None
        _LOG.info("Loaded %s challenges from storage", len(snapshot.challenges))
        return snapshot

    def clear(self) -> bool:
        try:
            self._ensure_ready()
            self.db.delete_value(self.key)
        except PersistenceError as exc:
            _LOG.error("Failed to clear snapshot under %s: %s", self.key, exc)
            return False
        _LOG.info("Cleared stored snapshot %s", self.key)
        return True
