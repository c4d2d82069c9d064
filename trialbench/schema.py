"""Result schema for trialbench runs.

``TrialSummary`` is what the trial engine hands to a reporting sink: the
per-trial measurements plus their mean/min and per-repetition equivalents.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Sequence, Tuple

from trialbench.utils.stats import per_rep, stats_from_values


@dataclass(frozen=True)
class TrialSummary:
    """Mean/min summary of one benchmark run (warm-up excluded)."""

    trials: int
    reps: int
    measurements_ms: Tuple[float, ...]
    mean_ms: float
    min_ms: float
    mean_per_rep_ms: float
    min_per_rep_ms: float

    @classmethod
    def from_measurements(cls, measurements_ms: Sequence[float], reps: int) -> "TrialSummary":
        """Build a summary from a non-empty series of per-trial times."""
        series = tuple(float(m) for m in measurements_ms)
        stats = stats_from_values(list(series))
        if not stats:
            raise ValueError("cannot summarize an empty measurement series")
        return cls(
            trials=len(series),
            reps=reps,
            measurements_ms=series,
            mean_ms=stats["mean"],
            min_ms=stats["min"],
            mean_per_rep_ms=per_rep(stats["mean"], reps),
            min_per_rep_ms=per_rep(stats["min"], reps),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        payload = asdict(self)
        payload["measurements_ms"] = list(self.measurements_ms)
        return payload
