"""Headless wiring of the tracker components."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from .db import Database
from .dev_seed import seed_if_requested
from .logger import configure_logging
from .manager.challenge_manager import ChallengeManager, Clock
from .manager.export_import import ExportImportManager
from .manager.storage import SnapshotStorage
from .notes.manager import NoteManager

_LOG = configure_logging()


class TrackerApplication:
    """Builds the store, its gateway and the helpers a front end needs."""

    def __init__(
        self,
        database_path: Optional[Union[Path, str]] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self.database = Database(database_path)
        self.storage = SnapshotStorage(self.database)
        self.challenges = ChallengeManager(storage=self.storage, clock=clock)
        self.exporter = ExportImportManager(self.challenges)
        self.notes = NoteManager(self.challenges)

    def startup(self) -> None:
        self.storage.initialise()
        if self.challenges.load_from_storage():
            _LOG.info("Restored %s challenges", len(self.challenges.list_challenges()))
        else:
            _LOG.info("No stored challenges found; starting empty")
        seed_if_requested(self.challenges, self.notes)

    def shutdown(self) -> None:
        self.database.close()
