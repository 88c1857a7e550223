"""Planner configuration: week type templates, default exercises, starting loads.

The mapping from week type to a concrete template is configuration, not
logic. It is loaded from a YAML file (see planner/data/templates.yaml for the
bundled defaults).

Fails fast on:
- Unreadable or non-mapping YAML
- Unknown week type keys
- Slots without a movement pattern or with non-positive sets/reps
- A non-positive increment factor
"""

from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from loguru import logger

from fitcore.config.settings import settings
from fitcore.errors import ConfigurationError
from fitcore.planner.types import Exercise, WeekType

DEFAULT_INCREMENT_FACTOR = 1.025
DEFAULT_REENTRY_GAP_DAYS = 5
DEFAULT_LOWER_BODY_PATTERNS = frozenset({"hip_hinge", "squat", "hip_extension"})
DEFAULT_LOWER_BODY_REDUCTION = 2.5
DEFAULT_UPPER_BODY_REDUCTION = 1.25


@dataclass(frozen=True)
class PatternSlot:
    """One movement pattern slot in a session template.

    Attributes:
        movement_pattern: Movement pattern to fill (e.g., "hip_hinge")
        target_sets: Prescribed number of working sets
        target_reps: Prescribed reps per set
    """

    movement_pattern: str
    target_sets: int
    target_reps: int


@dataclass(frozen=True)
class SessionTemplate:
    name: str
    slots: tuple[PatternSlot, ...]

    @property
    def movement_patterns(self) -> frozenset[str]:
        return frozenset(slot.movement_pattern for slot in self.slots)


@dataclass(frozen=True)
class PlannerConfig:
    """Immutable planner configuration.

    Attributes:
        templates: Session template per week type
        default_exercises: Exercise name used for a movement pattern without history
        starting_loads_by_category: Starting load per exercise category
        starting_loads_by_exercise: Per-exercise starting load overrides
        increment_factor: Multiplier applied to the last load on progression
        reentry_gap_days: Days without training after which loads are eased back
        lower_body_patterns: Patterns that use the lower-body re-entry reduction
        lower_body_reduction: Load removed on re-entry for lower-body patterns
        upper_body_reduction: Load removed on re-entry for all other patterns
    """

    templates: dict[WeekType, SessionTemplate]
    default_exercises: dict[str, str] = field(default_factory=dict)
    starting_loads_by_category: dict[str, float] = field(default_factory=dict)
    starting_loads_by_exercise: dict[str, float] = field(default_factory=dict)
    increment_factor: float = DEFAULT_INCREMENT_FACTOR
    reentry_gap_days: int = DEFAULT_REENTRY_GAP_DAYS
    lower_body_patterns: frozenset[str] = DEFAULT_LOWER_BODY_PATTERNS
    lower_body_reduction: float = DEFAULT_LOWER_BODY_REDUCTION
    upper_body_reduction: float = DEFAULT_UPPER_BODY_REDUCTION

    def template_for(self, week_type: WeekType) -> SessionTemplate:
        """Return the template for a week type.

        Raises:
            ConfigurationError: If no template is configured for the week type
        """
        template = self.templates.get(week_type)
        if template is None:
            raise ConfigurationError(
                "MISSING_TEMPLATE",
                [f"No session template configured for week type '{week_type.value}'"],
            )
        return template

    def starting_load_for(self, exercise: Exercise) -> float:
        """Return the starting load for an exercise (exercise override, else category).

        Raises:
            ConfigurationError: If neither the exercise nor its category has a starting load
        """
        if exercise.name in self.starting_loads_by_exercise:
            return self.starting_loads_by_exercise[exercise.name]
        if exercise.category in self.starting_loads_by_category:
            return self.starting_loads_by_category[exercise.category]
        raise ConfigurationError(
            "MISSING_STARTING_LOAD",
            [f"No starting load configured for exercise '{exercise.name}' or category '{exercise.category}'"],
        )


def _require_mapping(value: Any, what: str, source: Path | str) -> dict:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigurationError("INVALID_TEMPLATE_CONFIG", [f"'{what}' must be a mapping in {source}"])
    return value


def _parse_slot(raw: Any, template_key: str, source: Path | str) -> PatternSlot:
    if not isinstance(raw, dict) or not raw.get("pattern"):
        raise ConfigurationError(
            "INVALID_TEMPLATE_CONFIG",
            [f"Template '{template_key}' has a slot without a movement pattern in {source}"],
        )
    try:
        sets = int(raw.get("sets", 3))
        reps = int(raw.get("reps", 8))
    except (TypeError, ValueError) as e:
        raise ConfigurationError(
            "INVALID_TEMPLATE_CONFIG",
            [f"Template '{template_key}' slot '{raw['pattern']}' has non-integer sets/reps in {source}"],
        ) from e
    if sets <= 0 or reps <= 0:
        raise ConfigurationError(
            "INVALID_TEMPLATE_CONFIG",
            [f"Template '{template_key}' slot '{raw['pattern']}' must have positive sets and reps in {source}"],
        )
    return PatternSlot(movement_pattern=str(raw["pattern"]), target_sets=sets, target_reps=reps)


def parse_planner_config(data: dict[str, Any], source: Path | str = "<dict>") -> PlannerConfig:
    """Build a PlannerConfig from a parsed YAML mapping.

    Args:
        data: Parsed configuration mapping
        source: Where the mapping came from (for error messages)

    Returns:
        PlannerConfig

    Raises:
        ConfigurationError: If the mapping is malformed
    """
    templates: dict[WeekType, SessionTemplate] = {}
    for key, raw_template in _require_mapping(data.get("templates"), "templates", source).items():
        week_type = WeekType.parse(key)
        raw_template = _require_mapping(raw_template, f"templates.{key}", source)
        raw_slots = raw_template.get("slots") or []
        if not isinstance(raw_slots, list) or not raw_slots:
            raise ConfigurationError(
                "INVALID_TEMPLATE_CONFIG",
                [f"Template '{key}' must define a non-empty list of slots in {source}"],
            )
        templates[week_type] = SessionTemplate(
            name=str(raw_template.get("name") or key),
            slots=tuple(_parse_slot(raw, key, source) for raw in raw_slots),
        )

    starting_loads = _require_mapping(data.get("starting_loads"), "starting_loads", source)
    reentry = _require_mapping(data.get("reentry"), "reentry", source)

    try:
        increment_factor = float(data.get("increment_factor", DEFAULT_INCREMENT_FACTOR))
        config = PlannerConfig(
            templates=templates,
            default_exercises={
                str(k): str(v) for k, v in _require_mapping(data.get("default_exercises"), "default_exercises", source).items()
            },
            starting_loads_by_category={
                str(k): float(v) for k, v in _require_mapping(starting_loads.get("categories"), "starting_loads.categories", source).items()
            },
            starting_loads_by_exercise={
                str(k): float(v) for k, v in _require_mapping(starting_loads.get("exercises"), "starting_loads.exercises", source).items()
            },
            increment_factor=increment_factor,
            reentry_gap_days=int(reentry.get("gap_days", DEFAULT_REENTRY_GAP_DAYS)),
            lower_body_patterns=frozenset(reentry.get("lower_body_patterns") or DEFAULT_LOWER_BODY_PATTERNS),
            lower_body_reduction=float(reentry.get("lower_body_reduction", DEFAULT_LOWER_BODY_REDUCTION)),
            upper_body_reduction=float(reentry.get("upper_body_reduction", DEFAULT_UPPER_BODY_REDUCTION)),
        )
    except (TypeError, ValueError) as e:
        raise ConfigurationError("INVALID_TEMPLATE_CONFIG", [f"Invalid numeric value in {source}: {e}"]) from e

    if config.increment_factor <= 0:
        raise ConfigurationError(
            "INVALID_TEMPLATE_CONFIG",
            [f"increment_factor must be positive, got {config.increment_factor} in {source}"],
        )

    return config


def load_planner_config(path: Path | str) -> PlannerConfig:
    """Load planner configuration from a YAML file.

    Args:
        path: Path to the YAML file

    Returns:
        PlannerConfig

    Raises:
        ConfigurationError: If the file is missing, unreadable or malformed
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationError("INVALID_TEMPLATE_CONFIG", [f"Cannot read planner config {path}: {e}"]) from e
    except yaml.YAMLError as e:
        raise ConfigurationError("INVALID_TEMPLATE_CONFIG", [f"Invalid YAML in {path}: {e}"]) from e

    if not isinstance(data, dict):
        raise ConfigurationError("INVALID_TEMPLATE_CONFIG", [f"Planner config must be a YAML mapping in {path}"])

    config = parse_planner_config(data, source=path)
    logger.info(
        f"[CONFIG] Loaded planner config from {path}: "
        f"templates={sorted(w.value for w in config.templates)} increment_factor={config.increment_factor}"
    )
    return config


@lru_cache(maxsize=1)
def get_planner_config() -> PlannerConfig:
    """Planner config from the configured templates path, loaded once per process."""
    return load_planner_config(settings.planner_templates_path)
