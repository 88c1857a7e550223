"""Capabilities the engine consumes from the surrounding service.

Implementations live with the persistence layer; the engine only reads.
"""

from collections.abc import Sequence
from datetime import date
from typing import Protocol

from fitcore.load.types import TrainingRecord
from fitcore.planner.types import Exercise, SessionHistoryEntry


class TrainingRecordSource(Protocol):
    def fetch_records(self, start: date, end: date) -> Sequence[TrainingRecord]:
        """Return training records dated within [start, end]."""
        ...


class SessionHistorySource(Protocol):
    def fetch_history(self, start: date, end: date) -> Sequence[SessionHistoryEntry]:
        """Return session history entries dated within [start, end]."""
        ...


class ExerciseCatalog(Protocol):
    def list_exercises(self) -> Sequence[Exercise]:
        """Return all exercise reference data."""
        ...
