"""Domain-specific errors for the training load and suggestion engine.

Empty inputs (no records, no history) are never errors. Errors are raised
only when configuration is missing or when input data references something
that does not exist.

Standard error codes:
- UNKNOWN_WEEK_TYPE: Week type string is not a known periodization label
- MISSING_TEMPLATE: No session template configured for the week type
- MISSING_STARTING_LOAD: No starting load configured for an exercise category
- MISSING_DEFAULT_EXERCISE: No exercise can fill a movement pattern slot
- INVALID_TEMPLATE_CONFIG: Template file is unreadable or malformed
- UNKNOWN_EXERCISE: History references an exercise absent from reference data
- DUPLICATE_EXERCISE: Reference data contains the same exercise name twice
"""


class FitcoreError(Exception):
    """Base exception for all engine errors.

    Attributes:
        code: Error code (e.g., "MISSING_TEMPLATE", "UNKNOWN_EXERCISE")
        details: List of error detail strings
    """

    def __init__(self, code: str, details: list[str] | None = None) -> None:
        self.code = code
        self.details = details or []
        super().__init__(f"{code}: {self.details}")


class ConfigurationError(FitcoreError):
    """Raised when required template or threshold configuration is missing (fatal, no retry)."""

    pass


class DataIntegrityError(FitcoreError):
    """Raised when history references reference data that does not exist."""

    pass
