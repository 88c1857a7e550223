"""Training load input/output models.

This module defines the data structures for:
- Dated training records (running activities, already fetched by the caller)
- Trailing-window statistics and the load trend derived from them
- Acute:chronic load context
"""

from datetime import date
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class LoadTrend(StrEnum):
    INCREASING = "increasing"
    DECREASING = "decreasing"
    STABLE = "stable"


class LoadFactor(StrEnum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


class LoadRecommendation(StrEnum):
    SPIKE = "spike"
    RISING = "rising"
    UNDERTRAINING = "undertraining"
    SWEET_SPOT = "sweet-spot"
    MODERATE = "moderate"


class TrainingRecord(BaseModel):
    """A single dated training record.

    Attributes:
        date: Calendar date of the activity
        distance: Distance covered (unit is whatever the caller stores, typically km)
        duration: Duration in seconds
        training_load: Scalar load for the activity
    """

    model_config = ConfigDict(frozen=True)

    date: date
    distance: float = Field(0.0, ge=0)
    duration: int = Field(0, ge=0)
    training_load: float = Field(0.0, ge=0)


class WindowStats(BaseModel):
    """Aggregated statistics for one trailing window.

    Attributes:
        total_distance: Sum of distances, rounded to one decimal
        total_duration: Sum of durations in seconds
        total_load: Sum of training loads (not rounded)
        session_count: Number of records in the window
    """

    model_config = ConfigDict(frozen=True)

    total_distance: float = 0.0
    total_duration: int = 0
    total_load: float = 0.0
    session_count: int = 0


class LoadSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    last7: WindowStats
    last30: WindowStats
    trend: LoadTrend


class LoadContext(BaseModel):
    """Acute:chronic workload context for a reference date.

    Attributes:
        weekly_load: Total load over the acute window
        acwr: Acute:chronic workload ratio (0.0 when there is no chronic load)
        acute_load: Total load over the acute window
        chronic_load: Total load over the chronic window
        trend: Week-over-week load trend
        load_factor: Acute load relative to the personal weekly baseline
        recommendation: Recommendation code derived from ACWR
    """

    model_config = ConfigDict(frozen=True)

    weekly_load: float
    acwr: float
    acute_load: float
    chronic_load: float
    trend: LoadTrend
    load_factor: LoadFactor
    recommendation: LoadRecommendation
