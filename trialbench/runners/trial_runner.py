"""Trial runner for trialbench.

Times repeated executions of a workload whose results complete
asynchronously. Each trial runs ``reps`` repetitions back-to-back and then
awaits ``end_trial()`` once, so a fixed synchronization latency (e.g. a
readback) is amortized across the whole trial instead of dominating it.

Usage
-----
```python
runner = TrialRunner(trials=5, reps=50)
summary = await runner.run(workload.do_rep, workload.end_trial)
TerminalReporter().render(summary)
```
"""

from __future__ import annotations

import asyncio
import inspect
import logging
import time
from collections.abc import Awaitable, Callable, Iterable
from typing import Any, List, Optional, Protocol

from trialbench.schema import TrialSummary
from trialbench.utils.errors import InvalidArgumentError, ResourceReleaseError


LOGGER = logging.getLogger(__name__)


class Resource(Protocol):
    """Externally-owned allocation that must be released exactly once."""

    def dispose(self) -> None:
        """Release the underlying allocation."""


DoRep = Callable[[], Optional[Iterable[Resource]]]
EndTrial = Callable[[], Optional[Awaitable[Any]]]


class ResourceSet:
    """Ordered collection of resources produced during one trial."""

    def __init__(self) -> None:
        self._resources: List[Resource] = []

    def __len__(self) -> int:
        return len(self._resources)

    def extend(self, resources: Optional[Iterable[Resource]]) -> None:
        """Take ownership of the resources returned by one repetition."""
        if resources is None:
            return
        self._resources.extend(resources)

    def release(self) -> None:
        """Dispose every member once and clear the set.

        Every member is attempted even if an earlier one fails; the first
        failure is then raised as ResourceReleaseError.
        """
        resources, self._resources = self._resources, []
        failures: List[BaseException] = []
        for resource in resources:
            try:
                resource.dispose()
            except Exception as exc:
                failures.append(exc)
        if failures:
            raise ResourceReleaseError(
                f"{len(failures)} of {len(resources)} resources failed to release"
            ) from failures[0]


def _require_positive_int(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise InvalidArgumentError(f"{name} must be a positive integer, got {value!r}")
    return value


class TrialRunner:
    """Run one warm-up trial and ``trials`` measured trials of ``reps`` repetitions."""

    def __init__(
        self,
        trials: int,
        reps: int,
        clock: Callable[[], float] = time.perf_counter,
    ):
        """Initialize trial runner.

        Args:
            trials: Number of measured trials (warm-up not included)
            reps: Number of repetitions per trial
            clock: Monotonic clock returning seconds

        Raises:
            InvalidArgumentError: If trials or reps is not a positive integer
        """
        self.trials = _require_positive_int("trials", trials)
        self.reps = _require_positive_int("reps", reps)
        self.clock = clock

    async def run(self, do_rep: DoRep, end_trial: EndTrial) -> TrialSummary:
        """Warm up, measure every trial, and summarize.

        Exceptions from ``do_rep`` or ``end_trial`` propagate unchanged and
        no summary is produced.

        Returns:
            TrialSummary over the measured trials
        """
        LOGGER.info("Starting run: %d trials x %d reps (+1 warm-up trial)", self.trials, self.reps)

        await self._run_released_trial(do_rep, end_trial, timed=False)
        LOGGER.debug("Warm-up trial complete")

        measurements_ms: List[float] = []
        for t in range(self.trials):
            elapsed_ms = await self._run_released_trial(do_rep, end_trial, timed=True)
            measurements_ms.append(elapsed_ms)
            LOGGER.debug("Trial %d/%d: %.3f ms", t + 1, self.trials, elapsed_ms)

        return TrialSummary.from_measurements(measurements_ms, self.reps)

    async def _trial(self, resources: ResourceSet, do_rep: DoRep, end_trial: EndTrial) -> None:
        for _ in range(self.reps):
            resources.extend(do_rep())
        result = end_trial()
        if inspect.isawaitable(result):
            await result

    async def _run_released_trial(self, do_rep: DoRep, end_trial: EndTrial, timed: bool) -> float:
        """Run one trial and release its resources after the clock stops."""
        resources = ResourceSet()
        try:
            start = self.clock()
            await self._trial(resources, do_rep, end_trial)
            elapsed_ms = (self.clock() - start) * 1000.0
        except BaseException:
            try:
                resources.release()
            except ResourceReleaseError:
                LOGGER.error("Releasing resources of a failed trial also failed", exc_info=True)
            raise
        resources.release()
        return elapsed_ms if timed else 0.0


async def run_trials(trials: int, reps: int, do_rep: DoRep, end_trial: EndTrial) -> TrialSummary:
    """Run a benchmark with a fresh TrialRunner."""
    return await TrialRunner(trials, reps).run(do_rep, end_trial)


def run_trials_sync(
    trials: int,
    reps: int,
    do_rep: DoRep,
    end_trial: EndTrial,
    timeout_seconds: Optional[float] = None,
) -> TrialSummary:
    """Blocking wrapper around run_trials with an optional overall timeout.

    Raises:
        asyncio.TimeoutError: If the whole run exceeds timeout_seconds
    """
    runner = TrialRunner(trials, reps)

    async def _main() -> TrialSummary:
        return await asyncio.wait_for(runner.run(do_rep, end_trial), timeout=timeout_seconds)

    return asyncio.run(_main())
