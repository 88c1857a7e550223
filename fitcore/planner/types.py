"""Planner input/output models.

This module defines the data structures for:
- Exercise reference data (read-only for the planner)
- Session history entries (one per exercise performed in a past session)
- Session and per-exercise suggestions
"""

from datetime import date
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from fitcore.errors import ConfigurationError


class WeekType(StrEnum):
    """Periodization toggle selecting the session template.

    Declaration order is the tie-break order when no week type is given.
    """

    NON_KID = "non-kid"
    KID = "kid"

    @classmethod
    def parse(cls, value: "WeekType | str") -> "WeekType":
        """Parse a week type, rejecting unknown labels.

        Raises:
            ConfigurationError: If the value is not a known week type
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as e:
            raise ConfigurationError(
                "UNKNOWN_WEEK_TYPE",
                [f"Unknown week type '{value}'. Expected one of: {', '.join(w.value for w in cls)}"],
            ) from e


class SuggestionRationale(StrEnum):
    PROGRESSION = "progression"
    HOLD = "hold"
    FATIGUE_DELOAD = "fatigue-deload"
    STARTING_LOAD = "starting-load"
    RE_ENTRY = "re-entry"


class Exercise(BaseModel):
    """Exercise reference data.

    Attributes:
        name: Unique exercise name
        category: Exercise category (power, strength, accessory, core, warmup, conditioning)
        movement_pattern: Movement pattern (hip_hinge, squat, push, pull, ...) or None
        equipment: Equipment required
        primary_muscles: Primary muscles worked
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    category: str
    movement_pattern: str | None = None
    equipment: frozenset[str] = frozenset()
    primary_muscles: frozenset[str] = frozenset()


class SetPerformed(BaseModel):
    model_config = ConfigDict(frozen=True)

    reps: int = Field(..., ge=0)
    load: float = Field(0.0, ge=0)


class SessionHistoryEntry(BaseModel):
    """One exercise performed in a past session.

    Attributes:
        date: Session date
        exercise: Name of the exercise (must exist in reference data)
        sets: Sets performed, in order, with reps and load per set
    """

    model_config = ConfigDict(frozen=True)

    date: date
    exercise: str
    sets: tuple[SetPerformed, ...] = ()

    @property
    def top_load(self) -> float:
        """Heaviest load used across the sets (0.0 when no sets)."""
        return max((s.load for s in self.sets), default=0.0)


class ExerciseSuggestion(BaseModel):
    model_config = ConfigDict(frozen=True)

    exercise: str
    movement_pattern: str
    suggested_load: float
    suggested_sets: int
    suggested_reps: int
    rationale: SuggestionRationale
    last_load: float | None = None


class SessionSuggestion(BaseModel):
    model_config = ConfigDict(frozen=True)

    week_type: WeekType
    template_name: str
    exercises: tuple[ExerciseSuggestion, ...]
