"""Trial runner module for trialbench.

Provides TrialRunner and helpers for timing warm-up plus measured trials.
"""

from .trial_runner import (
    Resource,
    ResourceSet,
    TrialRunner,
    run_trials,
    run_trials_sync,
)

__all__ = [
    "TrialRunner",
    "Resource",
    "ResourceSet",
    "run_trials",
    "run_trials_sync",
]
