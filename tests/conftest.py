"""Root conftest for all tests.

This file makes shared fixtures available across all test modules.
"""

from datetime import date, timedelta

import pytest

from fitcore.config.settings import DEFAULT_TEMPLATES_PATH, EngineSettings
from fitcore.load.types import TrainingRecord
from fitcore.planner.config import PlannerConfig, load_planner_config
from fitcore.planner.types import Exercise, SessionHistoryEntry, SetPerformed


@pytest.fixture
def as_of() -> date:
    """Stable reference date (a Wednesday)."""
    return date(2026, 3, 18)


@pytest.fixture
def engine_settings() -> EngineSettings:
    """Engine settings with out-of-the-box defaults."""
    return EngineSettings()


@pytest.fixture
def planner_config() -> PlannerConfig:
    """Planner config loaded from the bundled templates file."""
    return load_planner_config(DEFAULT_TEMPLATES_PATH)


@pytest.fixture
def exercises() -> list[Exercise]:
    """Exercise reference data mirroring the seeded catalog."""
    return [
        Exercise(name="Trap Bar Deadlift", category="strength", movement_pattern="hip_hinge", equipment=frozenset({"trap_bar"})),
        Exercise(name="RDL", category="strength", movement_pattern="hip_hinge", equipment=frozenset({"barbell", "dumbbell"})),
        Exercise(name="KB Swing", category="power", movement_pattern="hip_hinge", equipment=frozenset({"kettlebell"})),
        Exercise(name="Bulgarian Split Squat", category="strength", movement_pattern="squat"),
        Exercise(name="Goblet Squat", category="conditioning", movement_pattern="squat"),
        Exercise(name="DB Bench Press", category="strength", movement_pattern="push"),
        Exercise(name="DB Shoulder Press", category="strength", movement_pattern="push"),
        Exercise(name="DB Row", category="strength", movement_pattern="pull", primary_muscles=frozenset({"lats", "rhomboids"})),
        Exercise(name="Pull-up", category="strength", movement_pattern="pull", equipment=frozenset({"bodyweight"})),
        Exercise(name="Hip Thrust", category="strength", movement_pattern="hip_extension"),
        Exercise(name="Pallof Press", category="core", movement_pattern="anti_rotation"),
        Exercise(name="Dead Bug", category="core", movement_pattern="anti_extension"),
        Exercise(name="Farmers Carry", category="core", movement_pattern="carry"),
        Exercise(name="Side Plank", category="core", movement_pattern=None),
    ]


def make_entry(day: date, exercise: str, reps: list[int], load: float) -> SessionHistoryEntry:
    """Build a history entry with the same load on every set."""
    return SessionHistoryEntry(
        date=day,
        exercise=exercise,
        sets=tuple(SetPerformed(reps=r, load=load) for r in reps),
    )


def make_record(day: date, training_load: float, distance: float = 5.0, duration: int = 1800) -> TrainingRecord:
    return TrainingRecord(date=day, distance=distance, duration=duration, training_load=training_load)


@pytest.fixture
def weekly_records(as_of: date) -> list[TrainingRecord]:
    """One 100-load run per week over the last four weeks."""
    return [make_record(as_of - timedelta(days=offset), 100.0) for offset in (1, 8, 15, 22)]


@pytest.fixture(name="make_entry")
def make_entry_fixture():
    """Factory fixture for history entries."""
    return make_entry


@pytest.fixture(name="make_record")
def make_record_fixture():
    """Factory fixture for training records."""
    return make_record
