"""Pytest configuration and fixtures."""

import pytest

from trialbench.utils.errors import ResourceReleaseError


class FakeResource:
    """Resource that records its disposal in a shared event log."""

    def __init__(self, label, events, on_dispose=None, fail=False):
        self.label = label
        self.events = events
        self.on_dispose = on_dispose
        self.fail = fail
        self.dispose_count = 0

    def dispose(self):
        if self.dispose_count:
            raise ResourceReleaseError(f"{self.label} disposed twice")
        self.dispose_count += 1
        self.events.append(("dispose", self.label))
        if self.on_dispose is not None:
            self.on_dispose()
        if self.fail:
            raise RuntimeError(f"cannot free {self.label}")


class FakeClock:
    """Manually-advanced clock in seconds."""

    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


class RecordingWorkload:
    """do_rep/end_trial pair that records every call and produced resource."""

    def __init__(self, resources_per_rep=1, clock=None, trial_durations=None, dispose_cost=0.0):
        self.events = []
        self.resources = []
        self.resources_per_rep = resources_per_rep
        self.clock = clock
        self.trial_durations = list(trial_durations or [])
        self.dispose_cost = dispose_cost
        self.rep_calls = 0
        self.end_calls = 0

    def do_rep(self):
        self.rep_calls += 1
        self.events.append(("rep", self.end_calls))
        produced = []
        for i in range(self.resources_per_rep):
            resource = FakeResource(
                (self.end_calls, self.rep_calls, i),
                self.events,
                on_dispose=self._charge_dispose if self.dispose_cost else None,
            )
            produced.append(resource)
        self.resources.extend(produced)
        return produced

    async def end_trial(self):
        if self.clock is not None and self.trial_durations:
            self.clock.advance(self.trial_durations.pop(0))
        self.events.append(("end", self.end_calls))
        self.end_calls += 1

    def _charge_dispose(self):
        self.clock.advance(self.dispose_cost)


@pytest.fixture
def events():
    return []


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def workload():
    return RecordingWorkload()


@pytest.fixture
def make_workload():
    """Factory for RecordingWorkload with custom settings."""
    return RecordingWorkload


@pytest.fixture
def make_resource():
    """Factory for FakeResource."""
    return FakeResource
