"""Tests for pathbench.testing — recording sink and pytest-benchmark adapter."""

import random
from collections.abc import Callable
from typing import Any

import pytest

from pathbench.harness.state import RoutingState
from pathbench.testing import RecordingSink, bench_variant


class _FakeBenchmark:
    """Mimics ``benchmark.pedantic``: setup, then target, once per round."""

    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []

    def pedantic(
        self,
        target: Callable[..., Any],
        args: tuple[Any, ...] = (),
        setup: Callable[[], Any] | None = None,
        rounds: int = 1,
        warmup_rounds: int = 0,
        iterations: int = 1,
    ) -> Any:
        self.calls.append(
            {"rounds": rounds, "warmup_rounds": warmup_rounds, "iterations": iterations}
        )
        result = None
        for _ in range(warmup_rounds + rounds):
            if setup is not None:
                setup()
            result = target(*args)
        return result


class TestRecordingSink:
    def test_records_in_order(self) -> None:
        sink = RecordingSink()
        sink.consume("a")
        sink.consume(["b"])
        assert sink.values == ["a", ["b"]]
        assert sink.last == ["b"]

    def test_last_when_empty(self) -> None:
        with pytest.raises(IndexError, match="Nothing was consumed"):
            _ = RecordingSink().last


class TestBenchVariant:
    def test_primes_every_round(self) -> None:
        state = RoutingState(random.Random(4))
        state.setup_iteration()
        benchmark = _FakeBenchmark()
        sink = bench_variant(benchmark, state, "ant_path_matcher", rounds=30, warmup_rounds=5)
        assert sink.consumed == 35
        assert benchmark.calls == [{"rounds": 30, "warmup_rounds": 5, "iterations": 1}]

    def test_unknown_variant(self) -> None:
        state = RoutingState(random.Random(4))
        state.setup_iteration()
        with pytest.raises(KeyError):
            bench_variant(_FakeBenchmark(), state, "trie_matcher")
