"""Shared statistics utilities (mean/min from numeric lists)."""


def stats_from_values(values: list[float]) -> dict[str, float]:
    """Calculate mean and min for a list of values.

    Args:
        values: List of numeric values (None entries are skipped)

    Returns:
        Dict with keys mean, min; or empty dict if no valid values
    """
    valid = [v for v in values if v is not None]
    if not valid:
        return {}
    return {
        "mean": sum(valid) / len(valid),
        "min": min(valid),
    }


def per_rep(value_ms: float, reps: int) -> float:
    """Normalize a per-trial duration to a per-repetition duration."""
    return value_ms / reps
