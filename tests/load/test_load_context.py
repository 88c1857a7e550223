"""Tests for the acute:chronic workload context."""

from datetime import timedelta

import pytest

from fitcore.load.context import (
    classify_load_factor,
    compute_acwr,
    compute_load_context,
    recommend_from_acwr,
)
from fitcore.load.types import LoadFactor, LoadRecommendation, LoadTrend


class TestComputeAcwr:
    """Tests for ACWR."""

    def test_balanced_load(self) -> None:
        """Test equal daily averages give a ratio of 1."""
        assert compute_acwr(70.0, 280.0) == 1.0

    def test_spike(self) -> None:
        """Test double the daily average gives 2."""
        assert compute_acwr(140.0, 280.0) == 2.0

    def test_no_chronic_load(self) -> None:
        """Test zero chronic load gives 0 instead of dividing by zero."""
        assert compute_acwr(100.0, 0.0) == 0.0


class TestClassifyLoadFactor:
    """Tests for load factor classification."""

    @pytest.mark.parametrize(
        ("load", "baseline", "expected"),
        [
            (140.0, 100.0, LoadFactor.HIGH),
            (100.0, 100.0, LoadFactor.MODERATE),
            (50.0, 100.0, LoadFactor.LOW),
            (600.0, None, LoadFactor.HIGH),
            (500.0, None, LoadFactor.MODERATE),
            (400.0, 0.0, LoadFactor.MODERATE),
            (100.0, None, LoadFactor.LOW),
        ],
    )
    def test_classification(self, load: float, baseline: float | None, expected: LoadFactor) -> None:
        """Test baseline-relative and absolute fallback thresholds."""
        assert classify_load_factor(load, baseline) == expected


class TestRecommendFromAcwr:
    """Tests for ACWR recommendation codes."""

    @pytest.mark.parametrize(
        ("acwr", "chronic", "expected"),
        [
            (1.6, 100.0, LoadRecommendation.SPIKE),
            (1.4, 100.0, LoadRecommendation.RISING),
            (1.3, 100.0, LoadRecommendation.SWEET_SPOT),
            (0.8, 100.0, LoadRecommendation.SWEET_SPOT),
            (0.6, 100.0, LoadRecommendation.MODERATE),
            (0.3, 100.0, LoadRecommendation.UNDERTRAINING),
            (0.0, 0.0, LoadRecommendation.MODERATE),
        ],
    )
    def test_recommendation(self, acwr: float, chronic: float, expected: LoadRecommendation) -> None:
        """Test each recommendation band."""
        assert recommend_from_acwr(acwr, chronic) == expected


class TestComputeLoadContext:
    """Tests for compute_load_context."""

    def test_steady_weekly_load(self, as_of, weekly_records) -> None:
        """Test one equal run per week lands in the sweet spot."""
        context = compute_load_context(weekly_records, as_of)

        assert context.acute_load == 100.0
        assert context.weekly_load == 100.0
        assert context.chronic_load == 400.0
        assert context.acwr == 1.0
        assert context.load_factor == LoadFactor.MODERATE
        assert context.recommendation == LoadRecommendation.SWEET_SPOT
        assert context.trend == LoadTrend.STABLE

    def test_spike_from_nothing(self, as_of, make_record) -> None:
        """Test a single recent session after nothing is a spike."""
        context = compute_load_context([make_record(as_of - timedelta(days=1), 100.0)], as_of)

        assert context.acwr == 4.0
        assert context.load_factor == LoadFactor.HIGH
        assert context.recommendation == LoadRecommendation.SPIKE

    def test_undertraining(self, as_of, make_record) -> None:
        """Test a light week after a heavy block is undertraining."""
        records = [make_record(as_of - timedelta(days=1), 10.0), make_record(as_of - timedelta(days=20), 300.0)]

        context = compute_load_context(records, as_of)

        assert context.recommendation == LoadRecommendation.UNDERTRAINING
        assert context.load_factor == LoadFactor.LOW

    def test_empty_records(self, as_of) -> None:
        """Test no records gives a zero, low, stable context."""
        context = compute_load_context([], as_of)

        assert context.acwr == 0.0
        assert context.load_factor == LoadFactor.LOW
        assert context.recommendation == LoadRecommendation.MODERATE
        assert context.trend == LoadTrend.STABLE
