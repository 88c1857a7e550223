"""Session suggestion planner.

This module provides:
- Week type templates loaded from YAML configuration
- Progressive overload load suggestions with a fatigue guard
- Progress summaries and the daily should-train decision
"""

from fitcore.planner.config import (
    PatternSlot,
    PlannerConfig,
    SessionTemplate,
    get_planner_config,
    load_planner_config,
    parse_planner_config,
)
from fitcore.planner.daily import DailyPlan, DailyPlanReason, build_daily_plan
from fitcore.planner.progress import PersonalRecord, ProgressSummary, summarize_progress
from fitcore.planner.suggest import suggest_session
from fitcore.planner.types import (
    Exercise,
    ExerciseSuggestion,
    SessionHistoryEntry,
    SessionSuggestion,
    SetPerformed,
    SuggestionRationale,
    WeekType,
)

__all__ = [
    "DailyPlan",
    "DailyPlanReason",
    "Exercise",
    "ExerciseSuggestion",
    "PatternSlot",
    "PersonalRecord",
    "PlannerConfig",
    "ProgressSummary",
    "SessionHistoryEntry",
    "SessionSuggestion",
    "SessionTemplate",
    "SetPerformed",
    "SuggestionRationale",
    "WeekType",
    "build_daily_plan",
    "get_planner_config",
    "load_planner_config",
    "parse_planner_config",
    "suggest_session",
    "summarize_progress",
]
