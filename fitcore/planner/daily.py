"""Daily plan: should I train today, and if so, what.

Combines the readiness check-in, the acute:chronic load context and recent
training frequency with a session suggestion driven by the load trend.
"""

from collections.abc import Iterable
from datetime import date, timedelta
from enum import StrEnum

from loguru import logger
from pydantic import BaseModel, ConfigDict

from fitcore.config.settings import EngineSettings, settings as default_settings
from fitcore.load.context import compute_load_context
from fitcore.load.types import LoadContext, TrainingRecord
from fitcore.planner.config import PlannerConfig
from fitcore.planner.suggest import suggest_session
from fitcore.planner.types import Exercise, SessionHistoryEntry, SessionSuggestion, WeekType


class DailyPlanReason(StrEnum):
    LOW_READINESS = "low-readiness"
    ACWR_SPIKE = "acwr-spike"
    HIGH_FREQUENCY = "high-frequency"


class DailyPlan(BaseModel):
    """Daily training decision.

    Attributes:
        should_train: False when readiness is low or ACWR spiked
        reasons: Reasons behind the decision; high-frequency is informational only
        readiness_score: Readiness check-in score (1-5), if any
        sessions_last_7_days: Distinct training dates in the last 7 days
        load_context: Acute:chronic load context
        suggestion: Suggested session for today
    """

    model_config = ConfigDict(frozen=True)

    should_train: bool
    reasons: tuple[DailyPlanReason, ...]
    readiness_score: float | None
    sessions_last_7_days: int
    load_context: LoadContext
    suggestion: SessionSuggestion


def build_daily_plan(
    history: Iterable[SessionHistoryEntry],
    exercises: Iterable[Exercise],
    records: Iterable[TrainingRecord],
    as_of: date,
    week_type: WeekType | str | None = None,
    readiness_score: float | None = None,
    *,
    config: PlannerConfig | None = None,
    settings: EngineSettings | None = None,
) -> DailyPlan:
    settings = settings or default_settings
    history = list(history)

    load_context = compute_load_context(records, as_of, settings)
    suggestion = suggest_session(
        history,
        exercises,
        week_type,
        load_context.trend,
        config=config,
        as_of=as_of,
    )

    week_ago = as_of - timedelta(days=7)
    sessions_last_7_days = len({entry.date for entry in history if week_ago <= entry.date <= as_of})

    should_train = True
    reasons: list[DailyPlanReason] = []

    if readiness_score is not None and readiness_score < settings.min_readiness_score:
        should_train = False
        reasons.append(DailyPlanReason.LOW_READINESS)
    if load_context.acwr > settings.acwr_spike:
        should_train = False
        reasons.append(DailyPlanReason.ACWR_SPIKE)
    if sessions_last_7_days >= settings.high_frequency_sessions:
        reasons.append(DailyPlanReason.HIGH_FREQUENCY)

    logger.debug(
        f"[PLANNER] Daily plan as_of={as_of.isoformat()} should_train={should_train} "
        f"reasons={[r.value for r in reasons]}"
    )

    return DailyPlan(
        should_train=should_train,
        reasons=tuple(reasons),
        readiness_score=readiness_score,
        sessions_last_7_days=sessions_last_7_days,
        load_context=load_context,
        suggestion=suggestion,
    )
