"""trialbench: warm-up/measure trial engine for asynchronously-completing workloads.

Provides:
- runners (TrialRunner, ResourceSet, run_trials, run_trials_sync)
- schema (TrialSummary)
- reporters (TerminalReporter, format_ms)
- configs (Config, ConfigManager, defaults)
- workloads (MatMulWorkload, get_workload)
"""

from trialbench.configs import DEFAULT_CONFIG, Config, ConfigManager
from trialbench.reporters import TerminalReporter, format_ms
from trialbench.runners import Resource, ResourceSet, TrialRunner, run_trials, run_trials_sync
from trialbench.schema import TrialSummary
from trialbench.utils.errors import (
    ConfigError,
    InvalidArgumentError,
    ResourceReleaseError,
    TrialBenchError,
)
from trialbench.workloads import MatMulWorkload, get_workload

__all__ = [
    # Runners
    "TrialRunner",
    "Resource",
    "ResourceSet",
    "run_trials",
    "run_trials_sync",
    "TrialSummary",
    # Reporting
    "TerminalReporter",
    "format_ms",
    # Config
    "Config",
    "ConfigManager",
    "DEFAULT_CONFIG",
    # Workloads
    "MatMulWorkload",
    "get_workload",
    # Errors
    "TrialBenchError",
    "InvalidArgumentError",
    "ResourceReleaseError",
    "ConfigError",
]
