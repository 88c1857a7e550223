"""Engine service: fetch once from injected sources, compute, log."""

from fitcore.services.engine import TrainingEngine
from fitcore.services.sources import ExerciseCatalog, SessionHistorySource, TrainingRecordSource

__all__ = [
    "ExerciseCatalog",
    "SessionHistorySource",
    "TrainingEngine",
    "TrainingRecordSource",
]
