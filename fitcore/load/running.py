"""Per-activity running metrics.

Turns a raw running activity (as returned by Strava/Garmin sync) into a
TrainingRecord. Training load is TRIMP-like: distance and time give the base,
heart rate scales it, elevation adds to it.
"""

from datetime import date
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from fitcore.load.types import TrainingRecord

RunType = Literal["easy", "intervals", "tempo", "hills", "long"]

DEFAULT_AVG_HR = 140

# Base load coefficients
LOAD_PER_KM = 10.0
LOAD_PER_MINUTE = 0.5
LOAD_PER_ELEVATION_M = 0.1

# HR intensity modifiers
HR_HARD_BPM = 160
HR_HARD_MODIFIER = 1.5
HR_MODERATE_BPM = 145
HR_MODERATE_MODIFIER = 1.2

# Run type classification thresholds
LONG_RUN_KM = 12.0
INTERVALS_HR_BPM = 165
INTERVALS_PACE_MIN_PER_KM = 4.5
TEMPO_HR_BPM = 150
TEMPO_PACE_MIN_PER_KM = 5.0
HILLS_ELEVATION_M = 100.0


class RunningActivity(BaseModel):
    """Running activity as synced from an external provider.

    Attributes:
        date: Activity date
        moving_time: Moving time in seconds
        distance: Distance in meters
        average_heartrate: Average HR in bpm, if recorded
        total_elevation_gain: Elevation gain in meters, if recorded
    """

    model_config = ConfigDict(frozen=True)

    date: date
    moving_time: int = Field(..., ge=0)
    distance: float = Field(..., ge=0)
    average_heartrate: float | None = None
    total_elevation_gain: float | None = None


def calculate_training_load(activity: RunningActivity) -> int:
    """Calculate training load for a running activity.

    Formula:
        load = (km * 10 + minutes * 0.5) * hr_modifier + elevation_m * 0.1

    Args:
        activity: Running activity

    Returns:
        Training load rounded to the nearest integer
    """
    duration_min = activity.moving_time / 60
    distance_km = activity.distance / 1000
    avg_hr = activity.average_heartrate or DEFAULT_AVG_HR
    elevation_gain = activity.total_elevation_gain or 0.0

    load = distance_km * LOAD_PER_KM + duration_min * LOAD_PER_MINUTE

    if avg_hr > HR_HARD_BPM:
        load *= HR_HARD_MODIFIER
    elif avg_hr > HR_MODERATE_BPM:
        load *= HR_MODERATE_MODIFIER

    load += elevation_gain * LOAD_PER_ELEVATION_M

    return round(load)


def calculate_pace(activity: RunningActivity) -> float:
    """Average pace in minutes per km, rounded to 2 decimals (0.0 for zero distance)."""
    distance_km = activity.distance / 1000
    if distance_km == 0:
        return 0.0
    duration_min = activity.moving_time / 60
    return round(duration_min / distance_km, 2)


def classify_run_type(activity: RunningActivity) -> RunType:
    """Classify a run by distance, HR, pace and elevation.

    Checks are ordered: long beats intervals beats tempo beats hills.
    """
    distance_km = activity.distance / 1000
    avg_hr = activity.average_heartrate or 0
    pace = calculate_pace(activity)
    # Zero distance has no meaningful pace
    has_pace = pace > 0

    if distance_km > LONG_RUN_KM:
        return "long"
    if avg_hr > INTERVALS_HR_BPM or (has_pace and pace < INTERVALS_PACE_MIN_PER_KM):
        return "intervals"
    if avg_hr > TEMPO_HR_BPM or (has_pace and pace < TEMPO_PACE_MIN_PER_KM):
        return "tempo"
    if (activity.total_elevation_gain or 0) > HILLS_ELEVATION_M:
        return "hills"
    return "easy"


def to_training_record(activity: RunningActivity) -> TrainingRecord:
    """Build a TrainingRecord (distance in km) from a running activity."""
    return TrainingRecord(
        date=activity.date,
        distance=activity.distance / 1000,
        duration=activity.moving_time,
        training_load=float(calculate_training_load(activity)),
    )
