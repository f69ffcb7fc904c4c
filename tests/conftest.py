from __future__ import annotations

import os
import sys
import tempfile
from datetime import UTC, datetime
from pathlib import Path
from typing import List, Optional

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

# keep logs and data files out of the real home directory
_SANDBOX = Path(tempfile.mkdtemp(prefix="learning-tracker-tests-"))
for _var, _name in (("XDG_DATA_HOME", "data"), ("XDG_CONFIG_HOME", "config"), ("XDG_CACHE_HOME", "cache")):
    os.environ[_var] = str(_SANDBOX / _name)

FIXED_NOW = datetime(2024, 3, 10, 9, 30, tzinfo=UTC)


class MemoryGateway:
    """In-memory stand-in for the snapshot storage."""

    def __init__(self, fail: bool = False) -> None:
        self.saved: List = []
        self.cleared = 0
        self.stored = None
        self.fail = fail

    def save(self, snapshot) -> bool:
        if self.fail:
            return False
        self.saved.append(snapshot)
        self.stored = snapshot
        return True

    def load(self):
        return self.stored

    def clear(self) -> bool:
        self.cleared += 1
        self.stored = None
        return True


class MutableClock:
    def __init__(self, now: datetime = FIXED_NOW) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def clock() -> MutableClock:
    return MutableClock()


@pytest.fixture
def gateway() -> MemoryGateway:
    return MemoryGateway()


@pytest.fixture
def manager(gateway: MemoryGateway, clock: MutableClock):
    from learning_tracker.manager.challenge_manager import ChallengeManager

    return ChallengeManager(storage=gateway, clock=clock)


@pytest.fixture
def db_file(tmp_path: Path) -> Path:
    return tmp_path / "tracker.sqlite3"


def make_challenge(
    challenge_id: int = 1,
    *,
    title: str = "Daily Practice",
    total_days: int = 7,
    start: str = "2024-03-01",
    days: Optional[List[int]] = None,
    completed: bool = False,
):
    from learning_tracker.dates import parse_date
    from learning_tracker.manager.models import Challenge

    return Challenge(
        id=challenge_id,
        title=title,
        total_days=total_days,
        start_date=parse_date(start),
        created_at=FIXED_NOW,
        entries={day: f"note {day}" for day in (days or [])},
        completed=completed,
    )
