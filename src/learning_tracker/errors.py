"""Exceptions raised by the tracker."""

from __future__ import annotations

from typing import Any


class TrackerError(Exception):
    """Base class for all tracker errors."""


class ValidationError(TrackerError, ValueError):
    """Caller-supplied input violates a precondition."""


class NotFoundError(TrackerError, LookupError):
    """A referenced challenge does not exist in the collection."""

    def __init__(self, challenge_id: Any) -> None:
        super().__init__(f"Challenge {challenge_id} not found")
        self.challenge_id = challenge_id


class PersistenceError(TrackerError):
    """The storage layer could not read, write or parse data."""


class ImportFormatError(TrackerError, ValueError):
    """An imported file is not a valid serialized snapshot."""
