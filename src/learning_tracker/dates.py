"""Calendar arithmetic for challenge day numbers.

Every function here works on calendar dates only. Time components are
truncated before any arithmetic, and "today" is always passed in by the
caller so results never depend on the wall clock.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from enum import Enum
from typing import Union

DateLike = Union[date, datetime, str]

_MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
_WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


class DayClass(str, Enum):
    PAST = "past"
    TODAY = "today"
    FUTURE = "future"


def parse_date(value: DateLike) -> date:
    """Return ``value`` as a plain :class:`date`.

    Accepts dates, datetimes (time component dropped) and ISO strings, either
    ``YYYY-MM-DD`` or a full timestamp whose date part is used as written.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip()[:10])
        except ValueError as exc:
            msg = f"invalid calendar date: {value!r}"
            raise ValueError(msg) from exc
    msg = f"unsupported date value: {value!r}"
    raise ValueError(msg)


def date_for_day(start_date: DateLike, day_number: int) -> date:
    return parse_date(start_date) + timedelta(days=day_number - 1)


def day_number_for_date(start_date: DateLike, target: DateLike) -> int:
    return (parse_date(target) - parse_date(start_date)).days + 1


def classify(target: DateLike, today: DateLike) -> DayClass:
    current = parse_date(today)
    value = parse_date(target)
    if value < current:
        return DayClass.PAST
    if value > current:
        return DayClass.FUTURE
    return DayClass.TODAY


def format_short_date(value: DateLike) -> str:
    """``Mar 1`` style label used on grid cells."""
    d = parse_date(value)
    return f"{_MONTHS[d.month - 1][:3]} {d.day}"


def format_full_date(value: DateLike) -> str:
    """``Friday, March 1, 2024`` style label."""
    d = parse_date(value)
    return f"{_WEEKDAYS[d.weekday()]}, {_MONTHS[d.month - 1]} {d.day}, {d.year}"


__all__ = [
    "DayClass",
    "classify",
    "date_for_day",
    "day_number_for_date",
    "format_full_date",
    "format_short_date",
    "parse_date",
]
