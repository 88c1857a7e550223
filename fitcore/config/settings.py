from pathlib import Path

from loguru import logger
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_TEMPLATES_PATH = Path(__file__).parent.parent / "planner" / "data" / "templates.yaml"


class EngineSettings(BaseSettings):
    # Trailing windows (days)
    short_window_days: int = Field(default=7, gt=0, validation_alias="FITCORE_SHORT_WINDOW_DAYS")
    long_window_days: int = Field(default=30, gt=0, validation_alias="FITCORE_LONG_WINDOW_DAYS")

    # Trend hysteresis bands (ratio of current to previous window load)
    trend_increasing_ratio: float = Field(
        default=1.15,
        validation_alias="FITCORE_TREND_INCREASING_RATIO",
        description="Current load must exceed previous x this ratio to count as increasing",
    )
    trend_decreasing_ratio: float = Field(
        default=0.85,
        validation_alias="FITCORE_TREND_DECREASING_RATIO",
        description="Current load must fall below previous x this ratio to count as decreasing",
    )

    # Acute:chronic workload ratio
    acute_window_days: int = Field(default=7, gt=0, validation_alias="FITCORE_ACUTE_WINDOW_DAYS")
    chronic_window_days: int = Field(default=28, gt=0, validation_alias="FITCORE_CHRONIC_WINDOW_DAYS")
    acwr_spike: float = Field(default=1.5, validation_alias="FITCORE_ACWR_SPIKE")
    acwr_rising: float = Field(default=1.3, validation_alias="FITCORE_ACWR_RISING")
    acwr_sweet_spot_low: float = Field(default=0.8, validation_alias="FITCORE_ACWR_SWEET_SPOT_LOW")
    acwr_undertraining: float = Field(default=0.5, validation_alias="FITCORE_ACWR_UNDERTRAINING")

    # Load factor relative to weekly baseline, with absolute fallbacks when no baseline exists
    load_factor_high_ratio: float = Field(default=1.3, validation_alias="FITCORE_LOAD_FACTOR_HIGH_RATIO")
    load_factor_moderate_ratio: float = Field(default=0.8, validation_alias="FITCORE_LOAD_FACTOR_MODERATE_RATIO")
    load_factor_high_absolute: float = Field(default=500.0, validation_alias="FITCORE_LOAD_FACTOR_HIGH_ABSOLUTE")
    load_factor_moderate_absolute: float = Field(default=300.0, validation_alias="FITCORE_LOAD_FACTOR_MODERATE_ABSOLUTE")

    # Daily plan
    min_readiness_score: float = Field(default=2.5, validation_alias="FITCORE_MIN_READINESS_SCORE")
    high_frequency_sessions: int = Field(default=4, gt=0, validation_alias="FITCORE_HIGH_FREQUENCY_SESSIONS")

    # Engine service
    history_lookback_days: int = Field(default=90, gt=0, validation_alias="FITCORE_HISTORY_LOOKBACK_DAYS")

    planner_templates_path: Path = Field(
        default=DEFAULT_TEMPLATES_PATH,
        validation_alias="FITCORE_PLANNER_TEMPLATES_PATH",
        description="YAML file with week type templates, default exercises and starting loads",
    )
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_file: str | None = Field(default=None, validation_alias="LOG_FILE")
    log_rotation: str = Field(default="10 MB", validation_alias="FITCORE_LOG_ROTATION")
    log_retention: str = Field(default="7 days", validation_alias="FITCORE_LOG_RETENTION")
    log_serialize: bool = Field(default=False, validation_alias="FITCORE_LOG_SERIALIZE")

    model_config = SettingsConfigDict(
        env_file=".env",
        populate_by_name=True,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that log level is one of the standard logging levels."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            logger.warning(f"Invalid LOG_LEVEL '{value}'. Valid levels are: {', '.join(sorted(valid_levels))}. Defaulting to INFO.")
            return "INFO"
        return upper_value

    @field_validator("planner_templates_path")
    @classmethod
    def validate_templates_path(cls, value: Path) -> Path:
        if not value.exists():
            logger.warning(f"[CONFIG] Planner templates file does not exist: {value}. Session suggestions will fail until it is provided.")
        return value

    @model_validator(mode="after")
    def validate_bands(self) -> "EngineSettings":
        """Validate that trend, ACWR and load factor bands are ordered."""
        if not self.trend_decreasing_ratio < 1.0 < self.trend_increasing_ratio:
            raise ValueError(
                f"Trend ratios must satisfy decreasing < 1 < increasing, "
                f"got decreasing={self.trend_decreasing_ratio}, increasing={self.trend_increasing_ratio}"
            )
        if not self.acwr_undertraining < self.acwr_sweet_spot_low <= self.acwr_rising < self.acwr_spike:
            raise ValueError("ACWR bands must satisfy undertraining < sweet_spot_low <= rising < spike")
        if self.load_factor_moderate_absolute >= self.load_factor_high_absolute:
            raise ValueError("load_factor_moderate_absolute must be below load_factor_high_absolute")
        if self.long_window_days < self.short_window_days:
            logger.warning(
                f"[CONFIG] long_window_days={self.long_window_days} is shorter than short_window_days={self.short_window_days}"
            )
        return self


settings = EngineSettings()
