"""Fixtures for the pytest-benchmark suite.

The ``routing_state`` fixture is the iteration scope: it sets up a fresh
catalog and matchers before the benchmark and releases them afterwards.
"""

import random
from collections.abc import Iterator

import pytest

from pathbench.harness.state import RoutingState


@pytest.fixture
def routing_state() -> Iterator[RoutingState]:
    state = RoutingState(random.Random())
    state.setup_iteration()
    yield state
    state.teardown_iteration()
