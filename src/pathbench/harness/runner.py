"""Minimal timing loop around the lifecycle hooks.

Every measured iteration runs ``setup_iteration()``, then for each
invocation an untimed ``setup_invocation()`` followed by the timed
operation, then ``teardown_iteration()``. Warm-up iterations run the
same loop and are discarded.

Usage::

    config = BenchConfig(seed=42, iterations=3, invocations=500)
    results = run_all(config)
    baseline = results[0]
    for result in results[1:]:
        print(result.variant, net_cost(result, baseline))
"""

import logging
import statistics
import time
from concurrent.futures import ThreadPoolExecutor, wait
from dataclasses import dataclass

from pathbench.config import BenchConfig
from pathbench.harness.operations import VARIANTS, Operation
from pathbench.harness.sink import Blackhole
from pathbench.harness.state import RoutingState

logger = logging.getLogger("pathbench.runner")


@dataclass(frozen=True, slots=True)
class BenchmarkResult:
    """Per-variant timings. ``samples_ns`` holds mean ns/op per iteration."""

    variant: str
    iterations: int
    invocations: int
    threads: int
    samples_ns: tuple[float, ...]

    @property
    def median_ns(self) -> float:
        return statistics.median(self.samples_ns)

    @property
    def min_ns(self) -> float:
        return min(self.samples_ns)

    @property
    def mean_ns(self) -> float:
        return statistics.mean(self.samples_ns)

    @property
    def ops_per_sec(self) -> float:
        median = self.median_ns
        return 1e9 / median if median > 0 else float("inf")


def net_cost(result: BenchmarkResult, baseline: BenchmarkResult) -> float:
    """Median ns/op of ``result`` with the baseline's fixed overhead removed."""
    return result.median_ns - baseline.median_ns


def time_invocations(
    operation: Operation,
    state: RoutingState,
    invocations: int,
    sink: Blackhole,
) -> int:
    """Run ``invocations`` primed calls on a ready state. Returns timed ns."""
    elapsed = 0
    for _ in range(invocations):
        state.setup_invocation()
        start = time.perf_counter_ns()
        operation(state, sink)
        elapsed += time.perf_counter_ns() - start
    return elapsed


def _time_shared(
    operation: Operation,
    state: RoutingState,
    invocations: int,
    sink: Blackhole,
) -> int:
    # The lock spans priming and the call so workers never see each other's path
    elapsed = 0
    for _ in range(invocations):
        with state.lock:
            state.setup_invocation()
            start = time.perf_counter_ns()
            operation(state, sink)
            elapsed += time.perf_counter_ns() - start
    return elapsed


def run_iteration(operation: Operation, state: RoutingState, invocations: int) -> int:
    """One full iteration on a private state. Returns timed ns."""
    state.setup_iteration()
    try:
        return time_invocations(operation, state, invocations, Blackhole())
    finally:
        state.teardown_iteration()


def _run_threaded_iteration(
    operation: Operation,
    states: list[RoutingState],
    config: BenchConfig,
    executor: ThreadPoolExecutor,
) -> int:
    if config.shared_state:
        (state,) = states
        state.setup_iteration()
        try:
            futures = [
                executor.submit(_time_shared, operation, state, config.invocations, Blackhole())
                for _ in range(config.threads)
            ]
            # Every worker finishes before teardown releases the matchers
            wait(futures)
            return sum(future.result() for future in futures)
        finally:
            state.teardown_iteration()

    futures = [
        executor.submit(run_iteration, operation, state, config.invocations) for state in states
    ]
    return sum(future.result() for future in futures)


def run_variant(name: str, config: BenchConfig) -> BenchmarkResult:
    """Measure one variant. Matcher errors propagate and abort the run."""
    operation = VARIANTS[name]
    if config.shared_state:
        states = [RoutingState(config.make_rng())]
    else:
        states = [RoutingState(config.make_rng(worker)) for worker in range(config.threads)]

    per_iteration = config.invocations * config.threads
    samples: list[float] = []
    logger.info(
        "Running %s: %d warm-up + %d iterations x %d invocations on %d thread(s)",
        name,
        config.warmup_iterations,
        config.iterations,
        config.invocations,
        config.threads,
    )

    total = config.warmup_iterations + config.iterations
    if config.threads == 1:
        for index in range(total):
            elapsed = run_iteration(operation, states[0], config.invocations)
            if index >= config.warmup_iterations:
                samples.append(elapsed / per_iteration)
    else:
        with ThreadPoolExecutor(max_workers=config.threads) as executor:
            for index in range(total):
                elapsed = _run_threaded_iteration(operation, states, config, executor)
                if index >= config.warmup_iterations:
                    samples.append(elapsed / per_iteration)

    result = BenchmarkResult(
        variant=name,
        iterations=config.iterations,
        invocations=config.invocations,
        threads=config.threads,
        samples_ns=tuple(samples),
    )
    logger.info("%s: median=%.1f ns/op (%.0f ops/sec)", name, result.median_ns, result.ops_per_sec)
    return result


def run_all(config: BenchConfig) -> list[BenchmarkResult]:
    """Measure every configured variant, in order."""
    return [run_variant(name, config) for name in config.variants]
