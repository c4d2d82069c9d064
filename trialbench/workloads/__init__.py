"""Workload providers: objects exposing ``do_rep()`` and ``end_trial()``."""

from typing import Any

from trialbench.utils.errors import ConfigError

from .matmul import ArrayHandle, MatMulWorkload

WORKLOADS = {
    "matmul": MatMulWorkload,
}


def get_workload(name: str, **params: Any) -> Any:
    """Instantiate a registered workload by name.

    Raises:
        ConfigError: If no workload is registered under name
    """
    try:
        factory = WORKLOADS[name]
    except KeyError:
        raise ConfigError(
            f"Unknown workload {name!r}; available: {', '.join(sorted(WORKLOADS))}"
        ) from None
    return factory(**params)


__all__ = ["ArrayHandle", "MatMulWorkload", "WORKLOADS", "get_workload"]
