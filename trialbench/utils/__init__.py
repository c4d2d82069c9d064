"""Shared utilities: errors and statistics."""

from .errors import ConfigError, InvalidArgumentError, ResourceReleaseError, TrialBenchError
from .stats import per_rep, stats_from_values

__all__ = [
    "TrialBenchError",
    "InvalidArgumentError",
    "ResourceReleaseError",
    "ConfigError",
    "stats_from_values",
    "per_rep",
]
