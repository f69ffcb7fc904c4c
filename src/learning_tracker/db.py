"""SQLite-backed key-value store for the application."""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from datetime import UTC, datetime
from pathlib import Path
from typing import Iterator, Optional, Union

from .data_paths import db_path
from .errors import PersistenceError
from .logger import configure_logging

_LOG = configure_logging()

SCHEMA_VERSION = 1
MEMORY = ":memory:"

BASE_SQL = """
CREATE TABLE IF NOT EXISTS meta (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS kv (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL,
    updated_at TEXT NOT NULL
);
"""


class Database:
    """Lightweight SQLite manager exposing a flat key-value table."""

    def __init__(self, path: Optional[Union[Path, str]] = None) -> None:
        self.path = Path(path) if path is not None else db_path()
        self._connection: Optional[sqlite3.Connection] = None

    @property
    def in_memory(self) -> bool:
        return str(self.path) == MEMORY

    def connect(self) -> sqlite3.Connection:
        if self._connection is None:
            _LOG.info("Opening database at %s", self.path)
            try:
                if not self.in_memory:
                    self.path.parent.mkdir(parents=True, exist_ok=True)
                self._connection = sqlite3.connect(str(self.path))
            except (sqlite3.Error, OSError) as exc:
                msg = f"Unable to open database at {self.path}: {exc}"
                raise PersistenceError(msg) from exc
            self._connection.row_factory = sqlite3.Row
        return self._connection

    @contextmanager
    def cursor(self) -> Iterator[sqlite3.Cursor]:
        conn = self.connect()
        cur = conn.cursor()
        try:
            yield cur
            conn.commit()
        except sqlite3.Error as exc:
            conn.rollback()
            raise PersistenceError(str(exc)) from exc
        except Exception:
            conn.rollback()
            raise
        finally:
            cur.close()

    def initialise(self) -> None:
        with self.cursor() as cur:
            cur.executescript(BASE_SQL)
            cur.execute(
                "INSERT OR REPLACE INTO meta (key, value) VALUES (?, ?)",
                ("schema_version", str(SCHEMA_VERSION)),
            )

    def schema_version(self) -> Optional[int]:
        with self.cursor() as cur:
            cur.execute("SELECT value FROM meta WHERE key = 'schema_version'")
            row = cur.fetchone()
        if row is None:
            return None
        try:
            return int(row["value"])
        except (TypeError, ValueError):
            return None

    # ------------------------------------------------------------------
    # Key-value access
    # ------------------------------------------------------------------
    def get_value(self, key: str) -> Optional[str]:
        with self.cursor() as cur:
            cur.execute("SELECT value FROM kv WHERE key = ?", (key,))
            row = cur.fetchone()
        return None if row is None else row["value"]

    def set_value(self, key: str, value: str) -> None:
        with self.cursor() as cur:
            cur.execute(
                "INSERT OR REPLACE INTO kv (key, value, updated_at) VALUES (?, ?, ?)",
                (key, value, datetime.now(UTC).isoformat()),
            )

    def delete_value(self, key: str) -> None:
        with self.cursor() as cur:
            cur.execute("DELETE FROM kv WHERE key = ?", (key,))

    def clear(self) -> None:
        with self.cursor() as cur:
            cur.execute("DELETE FROM kv")

    def close(self) -> None:
        if self._connection is not None:
            _LOG.info("Closing database")
            self._connection.close()
            self._connection = None
