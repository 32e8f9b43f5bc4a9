"""Tests for pathbench.harness.runner — timing loop and results."""

import random
import time

import pytest

from pathbench.config import BenchConfig
from pathbench.errors import PatternSyntaxError
from pathbench.harness.operations import (
    VARIANTS,
    ant_path_matcher_benchmark,
    baseline_benchmark,
)
from pathbench.harness.runner import (
    BenchmarkResult,
    net_cost,
    run_all,
    run_iteration,
    run_variant,
    time_invocations,
)
from pathbench.harness.sink import Blackhole
from pathbench.harness.state import Phase, RoutingState


def _small(**overrides: object) -> BenchConfig:
    defaults: dict[str, object] = {
        "seed": 1,
        "iterations": 2,
        "warmup_iterations": 1,
        "invocations": 25,
    }
    defaults.update(overrides)
    return BenchConfig(**defaults)  # type: ignore[arg-type]


def _failing(state: RoutingState, sink: Blackhole) -> None:
    raise PatternSyntaxError("/bad/{", 5, "unclosed '{'")


def _noop(state: RoutingState, sink: Blackhole) -> None:
    pass


class _SlowSetupState(RoutingState):
    def setup_invocation(self) -> str:
        time.sleep(0.005)
        return super().setup_invocation()


class TestBenchmarkResult:
    def test_statistics(self) -> None:
        result = BenchmarkResult("ant_path_matcher", 3, 10, 1, (10.0, 20.0, 30.0))
        assert result.median_ns == 20.0
        assert result.min_ns == 10.0
        assert result.mean_ns == 20.0
        assert result.ops_per_sec == pytest.approx(5e7)

    def test_net_cost(self) -> None:
        base = BenchmarkResult("baseline", 1, 10, 1, (100.0,))
        ant = BenchmarkResult("ant_path_matcher", 1, 10, 1, (350.0,))
        assert net_cost(ant, base) == 250.0

    def test_frozen(self) -> None:
        result = BenchmarkResult("baseline", 1, 1, 1, (1.0,))
        with pytest.raises(AttributeError):
            result.variant = "other"  # type: ignore[misc]


class TestTimeInvocations:
    def test_one_result_per_invocation(self) -> None:
        state = RoutingState(random.Random(1))
        state.setup_iteration()
        sink = Blackhole()
        elapsed = time_invocations(ant_path_matcher_benchmark, state, 40, sink)
        assert elapsed > 0
        assert sink.consumed == 40

    def test_baseline_consumption(self) -> None:
        state = RoutingState(random.Random(1))
        state.setup_iteration()
        sink = Blackhole()
        time_invocations(baseline_benchmark, state, 3, sink)
        assert sink.consumed == 3 * (2 * len(state.routes) + 1)

    def test_setup_not_timed(self) -> None:
        state = _SlowSetupState(random.Random(1))
        state.setup_iteration()
        elapsed = time_invocations(_noop, state, 5, Blackhole())
        # Five setups sleep 25ms in total
        assert elapsed < 5_000_000


class TestRunIteration:
    def test_tears_down(self) -> None:
        state = RoutingState(random.Random(1))
        run_iteration(ant_path_matcher_benchmark, state, 10)
        assert state.phase is Phase.TORN_DOWN
        assert state.ant_matcher is None

    def test_tears_down_on_error(self) -> None:
        state = RoutingState(random.Random(1))
        with pytest.raises(PatternSyntaxError):
            run_iteration(_failing, state, 10)
        assert state.phase is Phase.TORN_DOWN

    def test_repeatable(self) -> None:
        state = RoutingState(random.Random(1))
        run_iteration(baseline_benchmark, state, 5)
        run_iteration(baseline_benchmark, state, 5)
        assert state.phase is Phase.TORN_DOWN


class TestRunVariant:
    def test_samples_exclude_warmup(self) -> None:
        result = run_variant("ant_path_matcher", _small(iterations=3, warmup_iterations=2))
        assert result.variant == "ant_path_matcher"
        assert result.iterations == 3
        assert len(result.samples_ns) == 3
        assert result.median_ns > 0

    def test_threaded_private_states(self) -> None:
        result = run_variant("parsing_path_matcher", _small(threads=3))
        assert result.threads == 3
        assert len(result.samples_ns) == 2

    def test_threaded_shared_state(self) -> None:
        result = run_variant("ant_path_matcher", _small(threads=2, shared_state=True))
        assert result.threads == 2
        assert all(sample > 0 for sample in result.samples_ns)

    def test_shared_state_path_stable_during_call(self, monkeypatch: pytest.MonkeyPatch) -> None:
        mismatches: list[tuple[str, str]] = []

        def check_path(state: RoutingState, sink: Blackhole) -> None:
            before = state.require_primed()
            time.sleep(0.001)
            after = state.require_primed()
            if before != after:
                mismatches.append((before, after))
            sink.consume(after)

        monkeypatch.setitem(VARIANTS, "ant_path_matcher", check_path)
        run_variant(
            "ant_path_matcher", _small(threads=3, shared_state=True, invocations=20)
        )
        assert mismatches == []

    def test_matcher_error_aborts(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setitem(VARIANTS, "ant_path_matcher", _failing)
        with pytest.raises(PatternSyntaxError):
            run_variant("ant_path_matcher", _small())

    def test_matcher_error_aborts_threaded(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setitem(VARIANTS, "ant_path_matcher", _failing)
        with pytest.raises(PatternSyntaxError):
            run_variant("ant_path_matcher", _small(threads=2))


class TestRunAll:
    def test_variants_in_order(self) -> None:
        results = run_all(_small(iterations=1, warmup_iterations=0))
        assert [r.variant for r in results] == [
            "baseline",
            "ant_path_matcher",
            "parsing_path_matcher",
        ]

    def test_subset(self) -> None:
        results = run_all(_small(variants=("parsing_path_matcher",)))
        assert [r.variant for r in results] == ["parsing_path_matcher"]
