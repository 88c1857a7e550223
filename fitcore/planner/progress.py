"""Training progress summary: frequency, streaks and personal records.

A session is a distinct history date. Weeks start on Monday.
"""

from collections.abc import Iterable
from datetime import date, timedelta

from pydantic import BaseModel, ConfigDict

from fitcore.planner.types import SessionHistoryEntry

RATE_WINDOW_DAYS = 90
MAX_STREAK_WEEKS = 52
MAX_PERSONAL_RECORDS = 10


class PersonalRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    exercise: str
    load: float
    date: date


class ProgressSummary(BaseModel):
    """Progress summary as of a reference date.

    Attributes:
        total_sessions: Distinct training dates up to as_of
        weekly_rate: Average sessions per week over the last 90 days (one decimal)
        current_streak: Consecutive weeks, ending with the current week, with at least one session
        personal_records: Heaviest load per exercise, heaviest first
        sessions_this_week: Sessions since Monday of the current week
        sessions_this_month: Sessions since the first of the current month
    """

    model_config = ConfigDict(frozen=True)

    total_sessions: int
    weekly_rate: float
    current_streak: int
    personal_records: tuple[PersonalRecord, ...]
    sessions_this_week: int
    sessions_this_month: int


def week_start(day: date) -> date:
    return day - timedelta(days=day.weekday())


def count_current_streak(session_dates: set[date], as_of: date) -> int:
    """Count consecutive weeks with at least one session, walking back from the current week."""
    streak = 0
    check_week = week_start(as_of)
    for _ in range(MAX_STREAK_WEEKS):
        week_end = check_week + timedelta(days=7)
        if not any(check_week <= d < week_end for d in session_dates):
            break
        streak += 1
        check_week -= timedelta(days=7)
    return streak


def find_personal_records(history: Iterable[SessionHistoryEntry]) -> tuple[PersonalRecord, ...]:
    """Heaviest load per exercise with the first date it was lifted.

    Exercises never loaded (bodyweight only) have no record.
    """
    best: dict[str, PersonalRecord] = {}
    for entry in history:
        load = entry.top_load
        if load <= 0:
            continue
        current = best.get(entry.exercise)
        if current is None or load > current.load or (load == current.load and entry.date < current.date):
            best[entry.exercise] = PersonalRecord(exercise=entry.exercise, load=load, date=entry.date)

    ranked = sorted(best.values(), key=lambda r: (-r.load, r.exercise))
    return tuple(ranked[:MAX_PERSONAL_RECORDS])


def summarize_progress(history: Iterable[SessionHistoryEntry], as_of: date) -> ProgressSummary:
    """Summarize training frequency, streak and personal records as of a date.

    Entries dated after as_of are ignored.
    """
    history = [entry for entry in history if entry.date <= as_of]
    session_dates = {entry.date for entry in history}

    rate_start = as_of - timedelta(days=RATE_WINDOW_DAYS)
    recent_sessions = sum(1 for d in session_dates if d >= rate_start)
    weekly_rate = round(recent_sessions / (RATE_WINDOW_DAYS / 7), 1)

    this_week_start = week_start(as_of)
    this_month_start = as_of.replace(day=1)

    return ProgressSummary(
        total_sessions=len(session_dates),
        weekly_rate=weekly_rate,
        current_streak=count_current_streak(session_dates, as_of),
        personal_records=find_personal_records(history),
        sessions_this_week=sum(1 for d in session_dates if d >= this_week_start),
        sessions_this_month=sum(1 for d in session_dates if d >= this_month_start),
    )
