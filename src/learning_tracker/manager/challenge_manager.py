"""Challenge collection state and mutations."""

from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from typing import Callable, Iterable, List, Optional, Protocol, Union

from ..dates import DateLike, parse_date
from ..errors import NotFoundError, ValidationError
from ..logger import configure_logging
from .models import Challenge, Snapshot

_LOG = configure_logging()

Clock = Callable[[], datetime]
Listener = Callable[["ChallengeManager"], None]


class SnapshotGateway(Protocol):
    def save(self, snapshot: Snapshot) -> bool:
        ...

    def load(self) -> Optional[Snapshot]:
        ...

    def clear(self) -> bool:
        ...


def _local_now() -> datetime:
    return datetime.now().astimezone()


def select_default(challenges: List[Challenge]) -> Optional[Challenge]:
    """First incomplete challenge, else the last one, else ``None``."""
    for challenge in challenges:
        if not challenge.completed:
            return challenge
    return challenges[-1] if challenges else None


class ChallengeManager:
    """Owns the challenge collection and the active selection.

    Every successful mutation is followed by a best-effort save through the
    injected gateway and a change notification to subscribers. Validation
    happens before any state is touched, so a raised error leaves the
    collection as it was.
    """

    def __init__(self, storage: Optional[SnapshotGateway] = None, clock: Optional[Clock] = None) -> None:
        self.storage = storage
        self.clock: Clock = clock or _local_now
        self._challenges: List[Challenge] = []
        self._active_id: Optional[int] = None
        self._listeners: List[Listener] = []

    # ------------------------------------------------------------------
    # Change notification
    # ------------------------------------------------------------------
    def subscribe(self, callback: Listener) -> Callable[[], None]:
        self._listeners.append(callback)

        def unsubscribe() -> None:
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe

    def _commit(self, persist: bool = True, snapshot: Optional[Snapshot] = None) -> None:
        if persist and self.storage is not None:
            try:
                self.storage.save(snapshot if snapshot is not None else self.snapshot())
            except Exception:
                _LOG.exception("Saving challenges failed; keeping in-memory state")
        for listener in list(self._listeners):
            listener(self)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def today(self) -> date:
        return self.clock().date()

    def list_challenges(self) -> List[Challenge]:
        return [_copy(challenge) for challenge in self._challenges]

    def get_challenge(self, challenge_id: int) -> Challenge:
        return _copy(self._require(challenge_id))

    @property
    def active_id(self) -> Optional[int]:
        return self._active_id

    @property
    def active_challenge(self) -> Optional[Challenge]:
        if self._active_id is None:
            return None
        return self.get_challenge(self._active_id)

    def snapshot(self) -> Snapshot:
        return Snapshot(
            challenges=self.list_challenges(),
            last_updated=self.clock().isoformat(),
        )

    # ------------------------------------------------------------------
    # Challenge operations
    # ------------------------------------------------------------------
    def create_challenge(
        self,
        title: str,
        total_days: Union[int, str],
        description: str = "",
        start_date: Optional[DateLike] = None,
    ) -> Challenge:
        clean_title = (title or "").strip()
        if not clean_title:
            raise ValidationError("Challenge title must not be empty")
        days = _positive_int(total_days, "total_days")
        if start_date is None:
            start = self.today()
        else:
            try:
                start = parse_date(start_date)
            except ValueError as exc:
                raise ValidationError(str(exc)) from exc

        challenge = Challenge(
            id=max((item.id for item in self._challenges), default=0) + 1,
            title=clean_title,
            total_days=days,
            start_date=start,
            created_at=self.clock(),
            description=(description or "").strip(),
        )
        self._challenges.append(challenge)
        self._active_id = challenge.id
        _LOG.info("Created challenge %s (%s days from %s)", challenge.id, days, start.isoformat())
        self._commit()
        return _copy(challenge)

    def add_entry(self, challenge_id: int, day_number: int, text: str) -> None:
        challenge = self._require(challenge_id)
        day = _positive_int(day_number, "day_number")
        note = (text or "").strip()
        if not note:
            raise ValidationError("Entry text must not be empty")
        challenge.entries[day] = note
        _LOG.debug("Saved entry for challenge %s day %s", challenge_id, day)
        self._commit()

    def delete_entry(self, challenge_id: int, day_number: int) -> None:
        challenge = self._require(challenge_id)
        if challenge.entries.pop(day_number, None) is not None:
            _LOG.debug("Deleted entry for challenge %s day %s", challenge_id, day_number)
        self._commit()

    def delete_challenge(self, challenge_id: int) -> None:
        challenge = self._require(challenge_id)
        self._challenges.remove(challenge)
        if self._active_id == challenge_id:
            self._active_id = self._challenges[-1].id if self._challenges else None
        _LOG.info("Deleted challenge %s", challenge_id)
        self._commit()

    def mark_complete(self, challenge_id: int) -> None:
        challenge = self._require(challenge_id)
        if not challenge.completed:
            challenge.completed = True
            challenge.completed_date = self.clock()
            _LOG.info("Marked challenge %s complete", challenge_id)
        self._commit()

    def select_active(self, challenge_id: int) -> None:
        self._require(challenge_id)
        self._active_id = challenge_id
        self._commit(persist=False)

    def replace_all(self, challenges: Iterable[Challenge]) -> None:
        self._install(challenges)
        _LOG.info("Replaced collection with %s challenges", len(self._challenges))
        self._commit()

    def restore(self, snapshot: Snapshot) -> None:
        """Replace the collection with a backup and store the backup unchanged."""
        self._install(snapshot.challenges)
        _LOG.info("Restored %s challenges from backup", len(self._challenges))
        self._commit(snapshot=snapshot)

    def load_from_storage(self) -> bool:
        if self.storage is None:
            return False
        try:
            snapshot = self.storage.load()
        except Exception:
            _LOG.exception("Loading challenges failed; starting empty")
            return False
        if snapshot is None:
            return False
        self._install(snapshot.challenges)
        self._commit(persist=False)
        return True

    def clear_all(self) -> None:
        if self.storage is not None:
            try:
                self.storage.clear()
            except Exception:
                _LOG.exception("Clearing stored challenges failed")
        self._challenges = []
        self._active_id = None
        _LOG.warning("Cleared all challenge data")
        self._commit(persist=False)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _install(self, challenges: Iterable[Challenge]) -> None:
        self._challenges = [_copy(challenge) for challenge in challenges]
        chosen = select_default(self._challenges)
        self._active_id = chosen.id if chosen else None

    def _require(self, challenge_id: int) -> Challenge:
        for challenge in self._challenges:
            if challenge.id == challenge_id:
                return challenge
        raise NotFoundError(challenge_id)


def _copy(challenge: Challenge) -> Challenge:
    return replace(challenge, entries=dict(challenge.entries))


def _positive_int(value: Union[int, str], name: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"{name} must be a positive integer")
    if isinstance(value, str):
        if not value.strip().isdigit():
            raise ValidationError(f"{name} must be a positive integer")
        value = int(value.strip())
    if not isinstance(value, int) or value <= 0:
        raise ValidationError(f"{name} must be a positive integer")
    return value


__all__ = [
    "ChallengeManager",
    "SnapshotGateway",
    "select_default",
]
