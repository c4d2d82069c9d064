"""Configuration loading and defaults for trialbench."""

from .config import Config, ConfigManager
from .defaults import (
    DEFAULT_CONFIG,
    BenchmarkConfig,
    WorkloadConfig,
    benchmark_config_from,
    resolved_config,
)

__all__ = [
    "Config",
    "ConfigManager",
    "BenchmarkConfig",
    "WorkloadConfig",
    "DEFAULT_CONFIG",
    "benchmark_config_from",
    "resolved_config",
]
