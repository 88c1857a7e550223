"""Tests for the daily training decision."""

from datetime import timedelta

from fitcore.load.types import LoadTrend
from fitcore.planner.daily import DailyPlanReason, build_daily_plan
from fitcore.planner.types import SuggestionRationale, WeekType


class TestBuildDailyPlan:
    """Tests for build_daily_plan."""

    def test_ready_to_train(self, as_of, exercises, planner_config, weekly_records) -> None:
        """Test steady load and good readiness gives a plain go."""
        plan = build_daily_plan([], exercises, weekly_records, as_of, WeekType.NON_KID, 4.0, config=planner_config)

        assert plan.should_train is True
        assert plan.reasons == ()
        assert plan.load_context.acwr == 1.0
        assert plan.suggestion.template_name == "Strength + Power"

    def test_low_readiness(self, as_of, exercises, planner_config, weekly_records) -> None:
        """Test readiness below the threshold says rest."""
        plan = build_daily_plan([], exercises, weekly_records, as_of, readiness_score=2.0, config=planner_config)

        assert plan.should_train is False
        assert plan.reasons == (DailyPlanReason.LOW_READINESS,)
        assert plan.readiness_score == 2.0

    def test_acwr_spike(self, as_of, exercises, planner_config, make_record) -> None:
        """Test a load spike says rest."""
        records = [make_record(as_of - timedelta(days=1), 100.0)]

        plan = build_daily_plan([], exercises, records, as_of, config=planner_config)

        assert plan.should_train is False
        assert plan.reasons == (DailyPlanReason.ACWR_SPIKE,)

    def test_high_frequency_is_informational(self, as_of, exercises, planner_config, weekly_records, make_entry) -> None:
        """Test four sessions in the last week is flagged without blocking training."""
        history = [make_entry(as_of - timedelta(days=offset), "DB Row", [8, 8, 8], 30.0) for offset in (1, 2, 4, 7)]

        plan = build_daily_plan(history, exercises, weekly_records, as_of, WeekType.KID, config=planner_config)

        assert plan.should_train is True
        assert plan.sessions_last_7_days == 4
        assert plan.reasons == (DailyPlanReason.HIGH_FREQUENCY,)

    def test_decreasing_trend_drives_fatigue_deload(self, as_of, exercises, planner_config, make_record, make_entry) -> None:
        """Test the load trend from records reaches the suggestion."""
        records = [make_record(as_of - timedelta(days=10), 200.0), make_record(as_of - timedelta(days=2), 100.0)]
        history = [make_entry(as_of - timedelta(days=2), "RDL", [5, 5, 5, 5], 100.0)]

        plan = build_daily_plan(history, exercises, records, as_of, WeekType.NON_KID, config=planner_config)

        assert plan.load_context.trend == LoadTrend.DECREASING
        hinge = plan.suggestion.exercises[0]
        assert hinge.exercise == "RDL"
        assert hinge.suggested_load == 100.0
        assert hinge.rationale == SuggestionRationale.FATIGUE_DELOAD

    def test_fatigue_deload_survives_training_gap(self, as_of, exercises, planner_config, make_record, make_entry) -> None:
        """Test a decreasing trend after a six-day gap still holds the last load."""
        records = [make_record(as_of - timedelta(days=10), 200.0), make_record(as_of - timedelta(days=6), 100.0)]
        history = [make_entry(as_of - timedelta(days=6), "RDL", [5, 5, 5, 5], 100.0)]

        plan = build_daily_plan(history, exercises, records, as_of, WeekType.NON_KID, config=planner_config)

        hinge = plan.suggestion.exercises[0]
        assert plan.load_context.trend == LoadTrend.DECREASING
        assert (hinge.suggested_load, hinge.rationale) == (100.0, SuggestionRationale.FATIGUE_DELOAD)
