"""Runtime configuration read from the environment.

Values are resolved once at import time. Tests that need a different
profile reload this module after adjusting the environment.
"""

from __future__ import annotations

import os


def _truthy_env(name: str, default: str = "0") -> bool:
    value = os.getenv(name, default)
    return value not in {"0", "false", "False", ""}


DEV_PROFILE_ENABLED: bool = _truthy_env("LEARNING_TRACKER_DEV_PROFILE", "0")
LOG_LEVEL: str = os.getenv("LEARNING_TRACKER_LOG_LEVEL", "INFO").upper()

APP_ID = "org.example.LearningTracker"
APP_NAME = "Learning Tracker"
APP_VERSION = "0.1.0"

STORAGE_KEY = "learningTrackerData"
SNAPSHOT_VERSION = "1.0"
EXPORT_PREFIX = "learning-tracker-backup-"

DURATION_PRESETS = (7, 15, 30, 45, 60, 90, 100)
DEFAULT_DURATION = 30
