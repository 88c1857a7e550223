"""Trailing-window load aggregation and trend classification.

Windows are closed on both ends: "last N days" as of a reference date covers
[as_of - N days, as_of]. The trend compares the current short window with the
non-overlapping window of equal length immediately before it,
[as_of - 2N days, as_of - N days).

Properties:
- Deterministic: Same records and reference date always produce the same output
- Pure: No I/O, no clock reads, no cached state
- Empty input yields all-zero stats and a stable trend
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, timedelta

from loguru import logger

from fitcore.config.settings import EngineSettings, settings as default_settings
from fitcore.load.types import LoadSummary, LoadTrend, TrainingRecord, WindowStats


def compute_window_stats(
    records: Iterable[TrainingRecord],
    start: date,
    end: date,
    *,
    include_end: bool = True,
) -> WindowStats:
    """Aggregate records whose date falls in the window starting at `start`.

    Args:
        records: Training records in any order
        start: First day of the window (inclusive)
        end: Last day of the window
        include_end: If False, `end` itself is excluded (half-open window)

    Returns:
        WindowStats with distance rounded to one decimal
    """
    total_distance = 0.0
    total_duration = 0
    total_load = 0.0
    session_count = 0

    for record in records:
        if record.date < start:
            continue
        if record.date > end or (not include_end and record.date == end):
            continue
        total_distance += record.distance
        total_duration += record.duration
        total_load += record.training_load
        session_count += 1

    return WindowStats(
        total_distance=round(total_distance, 1),
        total_duration=total_duration,
        total_load=total_load,
        session_count=session_count,
    )


def classify_trend(
    current_load: float,
    previous_load: float,
    settings: EngineSettings | None = None,
) -> LoadTrend:
    """Classify the load trend using hysteresis bands.

    A zero baseline never yields a direction. The current/previous ratio is
    compared strictly, so a ratio of exactly 1.15 or 0.85 stays stable.

    Args:
        current_load: Total load of the current window
        previous_load: Total load of the preceding window
        settings: Engine settings supplying the band ratios

    Returns:
        LoadTrend classification
    """
    settings = settings or default_settings

    if previous_load == 0:
        return LoadTrend.STABLE
    ratio = current_load / previous_load
    if ratio > settings.trend_increasing_ratio:
        return LoadTrend.INCREASING
    if ratio < settings.trend_decreasing_ratio:
        return LoadTrend.DECREASING
    return LoadTrend.STABLE


def compute_load_summary(
    records: Iterable[TrainingRecord],
    as_of: date,
    settings: EngineSettings | None = None,
) -> LoadSummary:
    """Compute short/long window stats and the week-over-week trend.

    Args:
        records: Training records (any order, any date range)
        as_of: Reference date; the windows end on this day
        settings: Engine settings (window lengths, trend bands)

    Returns:
        LoadSummary with last7, last30 and trend
    """
    settings = settings or default_settings
    records = list(records)

    short_start = as_of - timedelta(days=settings.short_window_days)
    long_start = as_of - timedelta(days=settings.long_window_days)
    previous_start = short_start - timedelta(days=settings.short_window_days)

    last_short = compute_window_stats(records, short_start, as_of)
    last_long = compute_window_stats(records, long_start, as_of)
    previous = compute_window_stats(records, previous_start, short_start, include_end=False)

    trend = classify_trend(last_short.total_load, previous.total_load, settings)

    logger.debug(
        f"[LOAD] as_of={as_of.isoformat()} records={len(records)} "
        f"current_load={last_short.total_load} previous_load={previous.total_load} trend={trend.value}"
    )

    return LoadSummary(last7=last_short, last30=last_long, trend=trend)
