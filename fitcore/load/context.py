"""Acute:chronic workload context.

Acute load is the total over the acute window (default 7 days), chronic load
the total over the chronic window (default 28 days). ACWR compares their
average daily loads. The load factor compares the acute load with the
personal weekly baseline (chronic load spread over its weeks) and falls back
to absolute thresholds when there is no baseline yet.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, timedelta

from loguru import logger

from fitcore.config.settings import EngineSettings, settings as default_settings
from fitcore.load.aggregator import classify_trend, compute_window_stats
from fitcore.load.types import LoadContext, LoadFactor, LoadRecommendation, TrainingRecord


def compute_acwr(acute_load: float, chronic_load: float, settings: EngineSettings | None = None) -> float:
    """Acute:chronic workload ratio rounded to 2 decimals; 0.0 without chronic load."""
    settings = settings or default_settings
    acute_avg = acute_load / settings.acute_window_days
    chronic_avg = chronic_load / settings.chronic_window_days
    if chronic_avg <= 0:
        return 0.0
    return round(acute_avg / chronic_avg, 2)


def classify_load_factor(
    load: float,
    baseline: float | None = None,
    settings: EngineSettings | None = None,
) -> LoadFactor:
    """Classify weekly load relative to the personal baseline.

    Args:
        load: Weekly load to classify
        baseline: Personal weekly baseline (None or 0 falls back to absolute thresholds)
        settings: Engine settings supplying the thresholds

    Returns:
        LoadFactor classification
    """
    settings = settings or default_settings

    if baseline and baseline > 0:
        ratio = load / baseline
        if ratio > settings.load_factor_high_ratio:
            return LoadFactor.HIGH
        if ratio > settings.load_factor_moderate_ratio:
            return LoadFactor.MODERATE
        return LoadFactor.LOW

    if load > settings.load_factor_high_absolute:
        return LoadFactor.HIGH
    if load > settings.load_factor_moderate_absolute:
        return LoadFactor.MODERATE
    return LoadFactor.LOW


def recommend_from_acwr(
    acwr: float,
    chronic_load: float,
    settings: EngineSettings | None = None,
) -> LoadRecommendation:
    settings = settings or default_settings

    if acwr > settings.acwr_spike:
        return LoadRecommendation.SPIKE
    if acwr > settings.acwr_rising:
        return LoadRecommendation.RISING
    if acwr < settings.acwr_undertraining and chronic_load > 0:
        return LoadRecommendation.UNDERTRAINING
    if settings.acwr_sweet_spot_low <= acwr <= settings.acwr_rising:
        return LoadRecommendation.SWEET_SPOT
    return LoadRecommendation.MODERATE


def compute_load_context(
    records: Iterable[TrainingRecord],
    as_of: date,
    settings: EngineSettings | None = None,
) -> LoadContext:
    """Compute ACWR, load factor, trend and a recommendation as of a date.

    Args:
        records: Training records
        as_of: Reference date
        settings: Engine settings

    Returns:
        LoadContext
    """
    settings = settings or default_settings
    records = list(records)

    acute_start = as_of - timedelta(days=settings.acute_window_days)
    chronic_start = as_of - timedelta(days=settings.chronic_window_days)
    previous_start = acute_start - timedelta(days=settings.acute_window_days)

    acute_load = compute_window_stats(records, acute_start, as_of).total_load
    chronic_load = compute_window_stats(records, chronic_start, as_of).total_load
    previous_load = compute_window_stats(records, previous_start, acute_start, include_end=False).total_load

    acwr = compute_acwr(acute_load, chronic_load, settings)
    weekly_baseline = chronic_load / (settings.chronic_window_days / 7)
    load_factor = classify_load_factor(acute_load, weekly_baseline or None, settings)
    recommendation = recommend_from_acwr(acwr, chronic_load, settings)
    trend = classify_trend(acute_load, previous_load, settings)

    logger.debug(
        f"[LOAD] Context as_of={as_of.isoformat()} acute={acute_load} chronic={chronic_load} "
        f"acwr={acwr} factor={load_factor.value} recommendation={recommendation.value}"
    )

    return LoadContext(
        weekly_load=acute_load,
        acwr=acwr,
        acute_load=acute_load,
        chronic_load=chronic_load,
        trend=trend,
        load_factor=load_factor,
        recommendation=recommendation,
    )
