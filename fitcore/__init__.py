"""fitcore - training load aggregation and session suggestion engine.

Two pure entry points:
- compute_load_summary: trailing-window stats and load trend
- suggest_session: next session with per-exercise load suggestions
"""

from fitcore.errors import ConfigurationError, DataIntegrityError, FitcoreError
from fitcore.load.aggregator import compute_load_summary
from fitcore.planner.suggest import suggest_session

__all__ = [
    "ConfigurationError",
    "DataIntegrityError",
    "FitcoreError",
    "compute_load_summary",
    "suggest_session",
]
