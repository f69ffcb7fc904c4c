"""Challenge management module."""
from .challenge_manager import ChallengeManager
from .export_import import ExportImportManager
from .models import Challenge, DayStatus, Snapshot
from .storage import SnapshotStorage

__all__ = ['ChallengeManager', 'Challenge', 'DayStatus', 'ExportImportManager', 'Snapshot', 'SnapshotStorage']
