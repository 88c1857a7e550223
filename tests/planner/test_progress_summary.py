"""Tests for the training progress summary."""

from datetime import date

from fitcore.planner.progress import (
    PersonalRecord,
    count_current_streak,
    find_personal_records,
    summarize_progress,
    week_start,
)


def _history(make_entry):
    return [
        make_entry(date(2026, 3, 17), "DB Row", [8, 8, 8], 30.0),
        make_entry(date(2026, 3, 16), "RDL", [5, 5, 5, 5], 100.0),
        make_entry(date(2026, 3, 10), "RDL", [5, 5, 5, 5], 105.0),
        make_entry(date(2026, 3, 3), "Trap Bar Deadlift", [5, 5, 5, 5], 120.0),
        make_entry(date(2026, 3, 3), "DB Row", [8, 8, 8], 32.0),
        make_entry(date(2026, 2, 20), "DB Row", [8, 8, 8], 32.0),
        make_entry(date(2026, 3, 16), "Pallof Press", [10, 10, 10], 0.0),
        # After as_of, ignored
        make_entry(date(2026, 3, 20), "RDL", [5, 5, 5, 5], 200.0),
    ]


class TestSummarizeProgress:
    """Tests for summarize_progress."""

    def test_summary(self, as_of, make_entry) -> None:
        """Test counts, streak and records for a realistic history."""
        summary = summarize_progress(_history(make_entry), as_of)

        assert summary.total_sessions == 5
        assert summary.weekly_rate == 0.4
        assert summary.current_streak == 3
        assert summary.sessions_this_week == 2
        assert summary.sessions_this_month == 4
        assert summary.personal_records == (
            PersonalRecord(exercise="Trap Bar Deadlift", load=120.0, date=date(2026, 3, 3)),
            PersonalRecord(exercise="RDL", load=105.0, date=date(2026, 3, 10)),
            PersonalRecord(exercise="DB Row", load=32.0, date=date(2026, 2, 20)),
        )

    def test_empty_history(self, as_of) -> None:
        """Test no history gives an all-zero summary."""
        summary = summarize_progress([], as_of)

        assert summary.total_sessions == 0
        assert summary.weekly_rate == 0.0
        assert summary.current_streak == 0
        assert summary.personal_records == ()


class TestCurrentStreak:
    """Tests for the weekly streak."""

    def test_streak_broken_by_empty_current_week(self, as_of) -> None:
        """Test the streak is zero when the current week has no session."""
        assert count_current_streak({date(2026, 3, 12), date(2026, 3, 5)}, as_of) == 0

    def test_week_starts_monday(self, as_of) -> None:
        """Test weeks start on Monday."""
        assert week_start(as_of) == date(2026, 3, 16)
        assert week_start(date(2026, 3, 16)) == date(2026, 3, 16)


def test_bodyweight_only_has_no_record(make_entry) -> None:
    """Test exercises never loaded have no personal record."""
    history = [make_entry(date(2026, 3, 16), "Dead Bug", [10, 10], 0.0)]

    assert find_personal_records(history) == ()
