"""Development fixtures for offline UI testing."""

from __future__ import annotations

from datetime import timedelta

from . import config
from .logger import configure_logging
from .manager.challenge_manager import ChallengeManager
from .notes.manager import NoteManager

_LOG = configure_logging()


def seed_if_requested(challenges: ChallengeManager, notes: NoteManager) -> bool:
    if not config.DEV_PROFILE_ENABLED:
        return False
    if challenges.list_challenges():
        _LOG.info("Dev profile requested but collection already populated; skipping seed")
        return False

    today = challenges.today()
    sample = challenges.create_challenge(
        title="Daily Algorithm Practice",
        total_days=config.DEFAULT_DURATION,
        description="Solve one problem a day and write down what you learned.",
        start_date=today - timedelta(days=4),
    )
    notes.save_entry(sample.id, 1, "Two-pointer warmup.\n\n- [x] reverse a list in place")
    notes.save_entry(sample.id, 2, "Sliding window maximum with a `deque`.")
    notes.save_entry(sample.id, 4, "Binary search on the answer.")
    _LOG.info("Seeded development challenge %s starting %s", sample.id, sample.start_date.isoformat())
    return True
