"""Test utilities for pathbench.

Provides a recording sink for correctness tests and an adapter that runs
a variant under pytest-benchmark with the invocation-scope setup hook::

    def test_bench_ant(benchmark, routing_state):
        bench_variant(benchmark, routing_state, "ant_path_matcher")
"""

from typing import Any

from pathbench.harness.operations import VARIANTS
from pathbench.harness.sink import Blackhole
from pathbench.harness.state import RoutingState


class RecordingSink:
    """Sink that keeps every consumed value, in order."""

    __slots__ = ("values",)

    def __init__(self) -> None:
        self.values: list[Any] = []

    def consume(self, value: Any) -> None:
        self.values.append(value)

    @property
    def last(self) -> Any:
        if not self.values:
            raise IndexError("Nothing was consumed")
        return self.values[-1]


def bench_variant(
    benchmark: Any,
    state: RoutingState,
    variant: str,
    *,
    rounds: int = 2_000,
    warmup_rounds: int = 20,
) -> Blackhole:
    """Time ``variant`` with ``benchmark.pedantic``.

    ``state`` must already be set up for the iteration. Each round is
    primed by ``setup_invocation()`` outside the timed region. Returns the
    sink so callers can check that every round consumed a result.
    """
    operation = VARIANTS[variant]
    sink = Blackhole()

    def setup() -> None:
        state.setup_invocation()

    benchmark.pedantic(
        operation,
        args=(state, sink),
        setup=setup,
        rounds=rounds,
        warmup_rounds=warmup_rounds,
        iterations=1,
    )
    return sink
