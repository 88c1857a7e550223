"""Session suggestion planner.

Picks the next session for a week type and suggests a load for every
exercise in it. Pure function of (history, reference exercises, week type,
trend, config, as_of): no randomness, no clock reads, no I/O.

Selection rules:
- Template: the configured template for the week type. Without a week type,
  the least-recently-used template wins (see select_default_week_type).
- Exercise per slot: most recently performed exercise with the slot's
  movement pattern, else the configured default exercise, else the
  alphabetically first reference exercise with that pattern.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from loguru import logger

from fitcore.errors import ConfigurationError, DataIntegrityError
from fitcore.load.types import LoadTrend
from fitcore.planner.config import PatternSlot, PlannerConfig, get_planner_config
from fitcore.planner.progression import apply_reentry, suggest_exercise_load
from fitcore.planner.types import Exercise, SessionHistoryEntry, SessionSuggestion, WeekType


def index_exercises(exercises: Iterable[Exercise]) -> dict[str, Exercise]:
    """Index reference exercises by name.

    Raises:
        DataIntegrityError: If two exercises share a name
    """
    catalog: dict[str, Exercise] = {}
    for exercise in exercises:
        if exercise.name in catalog:
            raise DataIntegrityError("DUPLICATE_EXERCISE", [f"Exercise '{exercise.name}' appears more than once in reference data"])
        catalog[exercise.name] = exercise
    return catalog


def validate_history(history: Iterable[SessionHistoryEntry], catalog: dict[str, Exercise]) -> None:
    """Ensure every history entry references a known exercise.

    Raises:
        DataIntegrityError: Listing every unknown exercise name
    """
    unknown = sorted({entry.exercise for entry in history if entry.exercise not in catalog})
    if unknown:
        logger.error(f"[PLANNER] History references unknown exercises: {unknown}")
        raise DataIntegrityError("UNKNOWN_EXERCISE", [f"Exercise '{name}' not found in reference data" for name in unknown])


def latest_entries(history: Iterable[SessionHistoryEntry]) -> dict[str, SessionHistoryEntry]:
    """Most recent entry per exercise; on the same date the later entry in the sequence wins."""
    latest: dict[str, SessionHistoryEntry] = {}
    for entry in history:
        current = latest.get(entry.exercise)
        if current is None or entry.date >= current.date:
            latest[entry.exercise] = entry
    return latest


def select_default_week_type(
    history: list[SessionHistoryEntry],
    catalog: dict[str, Exercise],
    config: PlannerConfig,
) -> WeekType:
    """Pick the least-recently-used template when no week type is given.

    A template's recency is the latest history date of any exercise whose
    movement pattern belongs only to that template. Patterns shared with another
    template (push, pull) say nothing about which one was trained, so they
    count only when a template has no patterns of its own. A template never
    trained is oldest. The oldest template wins. Ties go to WeekType
    declaration order.

    Raises:
        ConfigurationError: If no templates are configured
    """
    candidates = [week_type for week_type in WeekType if week_type in config.templates]
    if not candidates:
        raise ConfigurationError("MISSING_TEMPLATE", ["No session templates configured"])

    def distinct_patterns(week_type: WeekType) -> frozenset[str]:
        own = config.templates[week_type].movement_patterns
        others = frozenset().union(
            *(config.templates[other].movement_patterns for other in candidates if other != week_type)
        )
        return (own - others) or own

    def recency(week_type: WeekType) -> date:
        patterns = distinct_patterns(week_type)
        dates = [entry.date for entry in history if catalog[entry.exercise].movement_pattern in patterns]
        return max(dates, default=date.min)

    return min(candidates, key=recency)


def select_exercise(
    slot: PatternSlot,
    latest: dict[str, SessionHistoryEntry],
    catalog: dict[str, Exercise],
    config: PlannerConfig,
) -> Exercise:
    """Choose the exercise that fills a movement pattern slot.

    Raises:
        ConfigurationError: If the configured default exercise is not in reference
            data, or no exercise has the slot's movement pattern
    """
    performed = [
        entry
        for name, entry in latest.items()
        if catalog[name].movement_pattern == slot.movement_pattern
    ]
    if performed:
        # Latest date first, then alphabetical name
        chosen = min(performed, key=lambda e: (-e.date.toordinal(), e.exercise))
        return catalog[chosen.exercise]

    default_name = config.default_exercises.get(slot.movement_pattern)
    if default_name is not None:
        if default_name not in catalog:
            raise ConfigurationError(
                "MISSING_DEFAULT_EXERCISE",
                [f"Default exercise '{default_name}' for pattern '{slot.movement_pattern}' is not in reference data"],
            )
        return catalog[default_name]

    matching = sorted(name for name, exercise in catalog.items() if exercise.movement_pattern == slot.movement_pattern)
    if not matching:
        raise ConfigurationError(
            "MISSING_DEFAULT_EXERCISE",
            [f"No exercise available for movement pattern '{slot.movement_pattern}'"],
        )
    return catalog[matching[0]]


def suggest_session(
    history: Iterable[SessionHistoryEntry],
    exercises: Iterable[Exercise],
    week_type: WeekType | str | None = None,
    trend: LoadTrend | None = None,
    *,
    config: PlannerConfig | None = None,
    as_of: date | None = None,
) -> SessionSuggestion:
    """Recommend the next session with a load suggestion per exercise.

    Args:
        history: Past session entries, one per exercise performed
        exercises: Exercise reference data
        week_type: Periodization week type (None selects the least-recently-used template)
        trend: Current load trend from the load aggregator; decreasing suppresses increments
        config: Planner configuration (defaults to the configured templates file)
        as_of: Reference date; when given, a long gap since the last session eases loads back

    Returns:
        SessionSuggestion

    Raises:
        ConfigurationError: Unknown week type, missing template, starting load or default exercise
        DataIntegrityError: History references an exercise missing from reference data
    """
    history = list(history)
    catalog = index_exercises(exercises)
    validate_history(history, catalog)
    config = config or get_planner_config()

    if week_type is None:
        resolved = select_default_week_type(history, catalog, config)
        logger.debug(f"[PLANNER] No week type given, selected least-recently-used template for '{resolved.value}'")
    else:
        resolved = WeekType.parse(week_type)

    template = config.template_for(resolved)
    latest = latest_entries(history)

    suggestions = []
    for slot in template.slots:
        exercise = select_exercise(slot, latest, catalog, config)
        suggestions.append(suggest_exercise_load(exercise, slot, latest.get(exercise.name), trend, config))

    if as_of is not None and history:
        days_since_last = (as_of - max(entry.date for entry in history)).days
        if days_since_last >= config.reentry_gap_days:
            logger.debug(f"[PLANNER] {days_since_last} days since last session, easing loads back in")
            suggestions = [apply_reentry(s, config) for s in suggestions]

    logger.debug(
        f"[PLANNER] Suggested '{template.name}' ({resolved.value}) with "
        f"{[s.exercise for s in suggestions]}"
    )

    return SessionSuggestion(
        week_type=resolved,
        template_name=template.name,
        exercises=tuple(suggestions),
    )
