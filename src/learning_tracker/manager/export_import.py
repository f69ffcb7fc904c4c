"""Local export/import of the challenge collection as JSON backups."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .. import config
from ..data_paths import exports_dir
from ..errors import ImportFormatError
from ..logger import configure_logging
from .challenge_manager import ChallengeManager
from .models import Snapshot, parse_snapshot

_LOG = configure_logging()


def backup_file_name(manager: ChallengeManager) -> str:
    return f"{config.EXPORT_PREFIX}{manager.today().isoformat()}.json"


class ExportImportManager:
    """Writes and restores ``learning-tracker-backup-<date>.json`` files."""

    def __init__(self, challenge_manager: ChallengeManager) -> None:
        self.challenge_manager = challenge_manager

    def export_to_path(self, destination: Optional[Path] = None) -> Path:
        target = Path(destination) if destination is not None else exports_dir()
        if target.is_dir():
            target = target / backup_file_name(self.challenge_manager)
        snapshot = self.challenge_manager.snapshot()
        target.write_text(snapshot.to_json(indent=2), encoding="utf-8")
        _LOG.info("Exported %s challenges to %s", len(snapshot.challenges), target)
        return target

    def import_from_path(self, source: Path) -> Snapshot:
        try:
            text = Path(source).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            msg = f"Unable to read backup {source}: {exc}"
            raise ImportFormatError(msg) from exc
        snapshot = parse_snapshot(text)
        self.challenge_manager.restore(snapshot)
        _LOG.info("Imported %s challenges from %s", len(snapshot.challenges), source)
        return snapshot
