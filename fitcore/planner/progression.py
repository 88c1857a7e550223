"""Progressive overload rule with fatigue guard.

Rules (explicit, no guessing):
1. No history for the exercise -> configured starting load
2. All prescribed reps completed last time -> last load x increment factor,
   otherwise hold the last load (no regression)
3. Decreasing load trend -> never increment (fatigue deload)
4. Long gap since the last session -> ease back in by one fixed step,
   except where the fatigue guard already held the load
"""

from loguru import logger

from fitcore.load.types import LoadTrend
from fitcore.planner.config import PatternSlot, PlannerConfig
from fitcore.planner.types import Exercise, ExerciseSuggestion, SessionHistoryEntry, SuggestionRationale


def completed_prescription(entry: SessionHistoryEntry, slot: PatternSlot) -> bool:
    """Whether the entry reached the prescribed sets and every set reached the prescribed reps."""
    if len(entry.sets) < slot.target_sets:
        return False
    return all(s.reps >= slot.target_reps for s in entry.sets)


def suggest_exercise_load(
    exercise: Exercise,
    slot: PatternSlot,
    last_entry: SessionHistoryEntry | None,
    trend: LoadTrend | None,
    config: PlannerConfig,
) -> ExerciseSuggestion:
    """Suggest the working load for one exercise.

    Args:
        exercise: Exercise filling the slot
        slot: Template slot (prescribed sets and reps)
        last_entry: Most recent history entry for this exercise, if any
        trend: Current load trend (None is treated like stable)
        config: Planner configuration

    Returns:
        ExerciseSuggestion

    Raises:
        ConfigurationError: If there is no history and no starting load is configured
    """
    if last_entry is None:
        return ExerciseSuggestion(
            exercise=exercise.name,
            movement_pattern=slot.movement_pattern,
            suggested_load=config.starting_load_for(exercise),
            suggested_sets=slot.target_sets,
            suggested_reps=slot.target_reps,
            rationale=SuggestionRationale.STARTING_LOAD,
        )

    last_load = last_entry.top_load

    if trend == LoadTrend.DECREASING:
        suggested_load = last_load
        rationale = SuggestionRationale.FATIGUE_DELOAD
    elif completed_prescription(last_entry, slot):
        suggested_load = last_load * config.increment_factor
        rationale = SuggestionRationale.PROGRESSION
    else:
        suggested_load = last_load
        rationale = SuggestionRationale.HOLD

    logger.debug(
        f"[PLANNER] {exercise.name}: last_load={last_load} suggested={suggested_load} "
        f"trend={trend.value if trend else None} rationale={rationale.value}"
    )

    return ExerciseSuggestion(
        exercise=exercise.name,
        movement_pattern=slot.movement_pattern,
        suggested_load=suggested_load,
        suggested_sets=slot.target_sets,
        suggested_reps=slot.target_reps,
        rationale=rationale,
        last_load=last_load,
    )


def apply_reentry(suggestion: ExerciseSuggestion, config: PlannerConfig) -> ExerciseSuggestion:
    """Reduce a history-based suggestion by one step after a training gap.

    Starting loads and fatigue-deload holds are returned unchanged.
    """
    if suggestion.last_load is None or suggestion.rationale == SuggestionRationale.FATIGUE_DELOAD:
        return suggestion

    if suggestion.movement_pattern in config.lower_body_patterns:
        reduction = config.lower_body_reduction
    else:
        reduction = config.upper_body_reduction

    return suggestion.model_copy(
        update={
            "suggested_load": max(0.0, suggestion.suggested_load - reduction),
            "rationale": SuggestionRationale.RE_ENTRY,
        }
    )
