"""Training engine service.

Thin facade over the pure load and planner functions. Each call fetches its
inputs once from the injected sources, then computes. No state is kept
between calls apart from the injected collaborators and configuration.
"""

from datetime import date, timedelta

from loguru import logger

import fitcore.core.logger  # noqa: F401  # configures loguru sinks
from fitcore.config.settings import EngineSettings, settings as default_settings
from fitcore.errors import FitcoreError
from fitcore.load.aggregator import compute_load_summary
from fitcore.load.context import compute_load_context
from fitcore.load.types import LoadContext, LoadSummary, TrainingRecord
from fitcore.planner.config import PlannerConfig, get_planner_config
from fitcore.planner.daily import DailyPlan, build_daily_plan
from fitcore.planner.progress import ProgressSummary, summarize_progress
from fitcore.planner.suggest import suggest_session
from fitcore.planner.types import SessionHistoryEntry, SessionSuggestion, WeekType
from fitcore.services.sources import ExerciseCatalog, SessionHistorySource, TrainingRecordSource


class TrainingEngine:
    """Per-request entry point for load summaries and session suggestions."""

    def __init__(
        self,
        record_source: TrainingRecordSource,
        history_source: SessionHistorySource,
        catalog: ExerciseCatalog,
        *,
        settings: EngineSettings | None = None,
        planner_config: PlannerConfig | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            record_source: Fetches training records for a date range
            history_source: Fetches session history for a date range
            catalog: Supplies exercise reference data
            settings: Engine settings (defaults to environment settings)
            planner_config: Planner templates (defaults to the configured templates file)
        """
        self.record_source = record_source
        self.history_source = history_source
        self.catalog = catalog
        self.settings = settings or default_settings
        self._planner_config = planner_config

    @property
    def planner_config(self) -> PlannerConfig:
        if self._planner_config is None:
            self._planner_config = get_planner_config()
        return self._planner_config

    def _record_lookback_days(self) -> int:
        s = self.settings
        return max(s.long_window_days, 2 * s.short_window_days, s.chronic_window_days, 2 * s.acute_window_days)

    def _fetch_records(self, as_of: date) -> list[TrainingRecord]:
        start = as_of - timedelta(days=self._record_lookback_days())
        records = list(self.record_source.fetch_records(start, as_of))
        logger.info(f"[ENGINE] Fetched {len(records)} training records from {start.isoformat()} to {as_of.isoformat()}")
        return records

    def _fetch_history(self, as_of: date) -> list[SessionHistoryEntry]:
        start = as_of - timedelta(days=self.settings.history_lookback_days)
        history = list(self.history_source.fetch_history(start, as_of))
        logger.info(f"[ENGINE] Fetched {len(history)} history entries from {start.isoformat()} to {as_of.isoformat()}")
        return history

    def load_summary(self, as_of: date) -> LoadSummary:
        summary = compute_load_summary(self._fetch_records(as_of), as_of, self.settings)
        logger.info(
            f"[ENGINE] Load summary as_of={as_of.isoformat()}: last7_load={summary.last7.total_load} "
            f"last30_load={summary.last30.total_load} trend={summary.trend.value}"
        )
        return summary

    def load_context(self, as_of: date) -> LoadContext:
        return compute_load_context(self._fetch_records(as_of), as_of, self.settings)

    def suggest(self, as_of: date, week_type: WeekType | str | None = None) -> SessionSuggestion:
        """Suggest the next session using the current load trend as the fatigue signal.

        Raises:
            ConfigurationError: Missing or unknown template configuration
            DataIntegrityError: History references unknown exercises
        """
        trend = self.load_summary(as_of).trend
        history = self._fetch_history(as_of)
        try:
            suggestion = suggest_session(
                history,
                self.catalog.list_exercises(),
                week_type,
                trend,
                config=self.planner_config,
                as_of=as_of,
            )
        except FitcoreError as e:
            logger.error(f"[ENGINE] Session suggestion failed as_of={as_of.isoformat()}: {e}")
            raise

        logger.info(
            f"[ENGINE] Suggested '{suggestion.template_name}' ({suggestion.week_type.value}) "
            f"with {len(suggestion.exercises)} exercises, trend={trend.value}"
        )
        return suggestion

    def daily_plan(
        self,
        as_of: date,
        week_type: WeekType | str | None = None,
        readiness_score: float | None = None,
    ) -> DailyPlan:
        try:
            plan = build_daily_plan(
                self._fetch_history(as_of),
                self.catalog.list_exercises(),
                self._fetch_records(as_of),
                as_of,
                week_type,
                readiness_score,
                config=self.planner_config,
                settings=self.settings,
            )
        except FitcoreError as e:
            logger.error(f"[ENGINE] Daily plan failed as_of={as_of.isoformat()}: {e}")
            raise

        logger.info(f"[ENGINE] Daily plan as_of={as_of.isoformat()}: should_train={plan.should_train}")
        return plan

    def progress(self, as_of: date) -> ProgressSummary:
        return summarize_progress(self._fetch_history(as_of), as_of)
