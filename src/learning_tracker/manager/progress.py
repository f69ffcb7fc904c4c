"""Derived progress values for a challenge.

All functions are pure: they read a :class:`Challenge` and, where dates
matter, an explicit ``today``. Nothing here mutates a challenge or reads the
system clock.
"""

from __future__ import annotations

from datetime import date
from typing import Iterable, List

from ..dates import DayClass, DateLike, classify, date_for_day, format_full_date
from .models import Challenge, CollectionSummary, DayCell, DayStatus

_STATUS_FOR_CLASS = {
    DayClass.PAST: DayStatus.MISSED,
    DayClass.TODAY: DayStatus.TODAY,
    DayClass.FUTURE: DayStatus.UPCOMING,
}


def completed_day_count(challenge: Challenge) -> int:
    return len(challenge.entries)


def progress_percentage(challenge: Challenge) -> int:
    """Whole-number completion percentage.

    Halves round up. Not clamped: entries logged beyond ``total_days`` push
    the value past 100.
    """
    ratio = completed_day_count(challenge) / challenge.total_days * 100
    return int(ratio + 0.5)


def current_streak(challenge: Challenge) -> int:
    """Consecutive logged days ending at the latest logged day."""
    days = sorted(challenge.entries, reverse=True)
    if not days:
        return 0
    streak = 1
    for previous, current in zip(days, days[1:]):
        if previous - current != 1:
            break
        streak += 1
    return streak


def day_status(challenge: Challenge, day_number: int, today: DateLike) -> DayStatus:
    if day_number in challenge.entries:
        return DayStatus.COMPLETED
    target = date_for_day(challenge.start_date, day_number)
    return _STATUS_FOR_CLASS[classify(target, today)]


def is_fully_complete(challenge: Challenge) -> bool:
    return completed_day_count(challenge) >= challenge.total_days


def days_remaining(challenge: Challenge) -> int:
    return challenge.total_days - completed_day_count(challenge)


def can_mark_complete(challenge: Challenge) -> bool:
    # advisory; the store itself never gates mark_complete on this
    return not challenge.completed and progress_percentage(challenge) == 100


def progress_grid(challenge: Challenge, today: DateLike) -> List[DayCell]:
    cells: List[DayCell] = []
    for day in range(1, challenge.total_days + 1):
        day_date: date = date_for_day(challenge.start_date, day)
        status = day_status(challenge, day, today)
        cells.append(
            DayCell(
                day=day,
                date=day_date,
                status=status,
                entry=challenge.entries.get(day),
                label=f"{format_full_date(day_date)} - {status.label}",
            )
        )
    return cells


def collection_summary(challenges: Iterable[Challenge]) -> CollectionSummary:
    items = list(challenges)
    completed = sum(1 for challenge in items if challenge.completed)
    return CollectionSummary(total=len(items), completed=completed, active=len(items) - completed)


__all__ = [
    "can_mark_complete",
    "collection_summary",
    "completed_day_count",
    "current_streak",
    "day_status",
    "days_remaining",
    "is_fully_complete",
    "progress_grid",
    "progress_percentage",
]
