"""Load aggregation module - trailing-window stats and load trend.

This module provides:
- Trailing-window stats (7-day, 30-day) and week-over-week trend
- Acute:chronic workload context
- Per-activity running metrics
"""

from fitcore.load.aggregator import classify_trend, compute_load_summary, compute_window_stats
from fitcore.load.context import classify_load_factor, compute_acwr, compute_load_context
from fitcore.load.running import (
    RunningActivity,
    calculate_pace,
    calculate_training_load,
    classify_run_type,
    to_training_record,
)
from fitcore.load.types import (
    LoadContext,
    LoadFactor,
    LoadRecommendation,
    LoadSummary,
    LoadTrend,
    TrainingRecord,
    WindowStats,
)

__all__ = [
    "LoadContext",
    "LoadFactor",
    "LoadRecommendation",
    "LoadSummary",
    "LoadTrend",
    "RunningActivity",
    "TrainingRecord",
    "WindowStats",
    "calculate_pace",
    "calculate_training_load",
    "classify_load_factor",
    "classify_run_type",
    "classify_trend",
    "compute_acwr",
    "compute_load_context",
    "compute_load_summary",
    "compute_window_stats",
    "to_training_record",
]
