"""Data models for challenges, entries and snapshots."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from .. import config
from ..dates import parse_date
from ..errors import ImportFormatError


class DayStatus(str, Enum):
    COMPLETED = "completed"
    TODAY = "today"
    MISSED = "missed"
    UPCOMING = "upcoming"

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass(slots=True)
class Challenge:
    id: int
    title: str
    total_days: int
    start_date: date
    created_at: Optional[datetime] = None
    description: str = ""
    entries: Dict[int, str] = field(default_factory=dict)
    completed: bool = False
    completed_date: Optional[datetime] = None

    def sorted_days(self) -> List[int]:
        return sorted(self.entries)

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "totalDays": self.total_days,
            "startDate": self.start_date.isoformat(),
            "entries": {str(day): text for day, text in sorted(self.entries.items())},
            "completed": self.completed,
        }
        if self.completed_date is not None:
            payload["completedDate"] = self.completed_date.isoformat()
        if self.created_at is not None:
            payload["createdAt"] = self.created_at.isoformat()
        return payload

    @classmethod
    def from_dict(cls, data: Any) -> Challenge:
        if not isinstance(data, dict):
            raise ImportFormatError("Challenge record must be an object")
        entries = data.get("entries") or {}
        if not isinstance(entries, dict):
            raise ImportFormatError("Challenge entries must be an object")
        if not all(isinstance(text, str) for text in entries.values()):
            raise ImportFormatError("Challenge entries must be text")
        completed = data.get("completed")
        if completed is None:
            completed = False
        elif not isinstance(completed, bool):
            raise ImportFormatError(f"Challenge \"completed\" must be true or false, got {completed!r}")
        description = data.get("description")
        if description is not None and not isinstance(description, str):
            raise ImportFormatError("Challenge description must be text")
        missing = [name for name in ("id", "title", "totalDays", "startDate") if name not in data]
        if missing:
            raise ImportFormatError(f"Challenge record is missing field {missing[0]!r}")
        title = data["title"]
        if not isinstance(title, str) or not title.strip():
            raise ImportFormatError(f"Challenge title must be non-empty text, got {title!r}")
        total_days = data["totalDays"]
        if isinstance(total_days, bool) or not isinstance(total_days, int) or total_days <= 0:
            raise ImportFormatError(f"Challenge totalDays must be a positive integer, got {total_days!r}")
        try:
            return cls(
                id=int(data["id"]),
                title=title,
                total_days=total_days,
                start_date=parse_date(data["startDate"]),
                created_at=_parse_timestamp(data.get("createdAt")),
                description=description or "",
                entries={int(day): text for day, text in entries.items()},
                completed=completed,
                completed_date=_parse_timestamp(data.get("completedDate")),
            )
        except (TypeError, ValueError) as exc:
            msg = f"Challenge record is malformed: {exc}"
            raise ImportFormatError(msg) from exc


@dataclass(slots=True)
class Snapshot:
    """Full serialized state: every challenge plus metadata."""

    challenges: List[Challenge]
    last_updated: Optional[str] = None
    version: Any = config.SNAPSHOT_VERSION

    def to_dict(self) -> Dict[str, Any]:
        return {
            "challenges": [challenge.to_dict() for challenge in self.challenges],
            "lastUpdated": self.last_updated,
            "version": self.version,
        }

    def to_json(self, indent: Optional[int] = None) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    @classmethod
    def from_dict(cls, data: Any) -> Snapshot:
        if not isinstance(data, dict):
            raise ImportFormatError("Snapshot must be a JSON object")
        challenges = data.get("challenges")
        if not isinstance(challenges, list):
            raise ImportFormatError("Snapshot has no 'challenges' list")
        return cls(
            challenges=[Challenge.from_dict(item) for item in challenges],
            last_updated=data.get("lastUpdated"),
            version=data.get("version", config.SNAPSHOT_VERSION),
        )


def parse_snapshot(text: str) -> Snapshot:
    try:
        payload = json.loads(text)
    except (TypeError, ValueError) as exc:
        msg = f"Snapshot is not valid JSON: {exc}"
        raise ImportFormatError(msg) from exc
    return Snapshot.from_dict(payload)


@dataclass(slots=True)
class DayCell:
    day: int
    date: date
    status: DayStatus
    entry: Optional[str]
    label: str


@dataclass(slots=True)
class CollectionSummary:
    total: int
    completed: int
    active: int


def _parse_timestamp(value: Any) -> Optional[datetime]:
    if value in (None, ""):
        return None
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value))
