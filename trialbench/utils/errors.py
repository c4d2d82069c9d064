"""Custom exceptions for trialbench.

Workload exceptions raised by ``do_rep``/``end_trial`` are never wrapped;
these cover argument, configuration and resource-lifecycle failures.
"""


class TrialBenchError(Exception):
    """Base exception for all trialbench errors."""

    pass


class InvalidArgumentError(TrialBenchError, ValueError):
    """Raised when trials or reps is not a positive integer."""

    pass


class ResourceReleaseError(TrialBenchError):
    """Raised when a resource cannot be released, or is released twice."""

    pass


class ConfigError(TrialBenchError):
    """Raised when configuration is invalid or names an unknown workload."""

    pass
