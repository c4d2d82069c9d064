"""Default configuration for trialbench."""

from dataclasses import dataclass
from typing import Any

from trialbench.configs.config import Config
from trialbench.utils.errors import ConfigError


@dataclass
class BenchmarkConfig:
    """Configuration for the trial engine."""

    trials: int = 5
    reps: int = 50
    timeout_seconds: float = 60.0


@dataclass
class WorkloadConfig:
    """Configuration for the benchmarked workload."""

    name: str = "matmul"
    size: int = 500
    seed: int = 0


DEFAULT_CONFIG: dict[str, Any] = {
    "benchmark": {"trials": 5, "reps": 50, "timeout_seconds": 60.0},
    "workload": {"name": "matmul", "size": 500, "seed": 0},
    "logging": {"level": "WARNING"},
}


def _typed(config: Config, key: str, kind: type) -> Any:
    value = config.get(key)
    if kind is float and isinstance(value, int) and not isinstance(value, bool):
        value = float(value)
    if isinstance(value, bool) or not isinstance(value, kind):
        raise ConfigError(f"{key} must be {kind.__name__}, got {value!r}")
    return value

def benchmark_config_from(config: Config) -> tuple[BenchmarkConfig, WorkloadConfig]:
    """Build typed benchmark/workload settings from a Config.

    Range checks on trials/reps are left to TrialRunner.

    Raises:
        ConfigError: If a value is missing, has the wrong type, or the
            timeout is not positive
    """
    benchmark = BenchmarkConfig(
        trials=_typed(config, "benchmark.trials", int),
        reps=_typed(config, "benchmark.reps", int),
        timeout_seconds=_typed(config, "benchmark.timeout_seconds", float),
    )
    if not benchmark.timeout_seconds > 0:
        raise ConfigError(
            f"benchmark.timeout_seconds must be positive, got {benchmark.timeout_seconds!r}"
        )
    workload = WorkloadConfig(
        name=_typed(config, "workload.name", str),
        size=_typed(config, "workload.size", int),
        seed=_typed(config, "workload.seed", int),
    )
    return benchmark, workload


def resolved_config(
    benchmark: BenchmarkConfig, workload: WorkloadConfig, log_level: str = "WARNING"
) -> Config:
    """Config holding the typed settings a run actually used."""
    return Config({"benchmark": benchmark, "workload": workload, "logging": {"level": log_level}})
