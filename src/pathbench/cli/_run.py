"""``pathbench run`` — measure the variants and print a summary table.

CLI flags override the ``BenchConfig`` defaults.
"""

import argparse
import dataclasses
import logging
import sys

from pathbench.config import BenchConfig
from pathbench.errors import PathBenchError
from pathbench.harness.runner import BenchmarkResult, net_cost, run_all

logger = logging.getLogger("pathbench.cli")


def build_config(args: argparse.Namespace) -> BenchConfig:
    """Apply the CLI flags that were given on top of the defaults."""
    overrides: dict[str, object] = {}
    if args.variant:
        overrides["variants"] = tuple(dict.fromkeys(args.variant))
    for flag, field_name in (
        ("seed", "seed"),
        ("iterations", "iterations"),
        ("warmup", "warmup_iterations"),
        ("invocations", "invocations"),
        ("threads", "threads"),
        ("log_level", "log_level"),
    ):
        value = getattr(args, flag)
        if value is not None:
            overrides[field_name] = value
    if args.shared_state:
        overrides["shared_state"] = True
    return dataclasses.replace(BenchConfig(), **overrides)


def format_results(results: list[BenchmarkResult]) -> list[str]:
    """Render the summary table. Net cost is shown once a baseline ran."""
    baseline = next((r for r in results if r.variant == "baseline"), None)
    lines = [
        f"  {'Benchmark':<24s} {'Median (ns/op)':>15s} {'Min (ns/op)':>12s} "
        f"{'Ops/sec':>14s} {'Net (ns/op)':>12s}",
        f"  {'-' * 24} {'-' * 15} {'-' * 12} {'-' * 14} {'-' * 12}",
    ]
    for result in results:
        if baseline is None or result is baseline:
            net = "-"
        else:
            net = f"{net_cost(result, baseline):.1f}"
        lines.append(
            f"  {result.variant:<24s} {result.median_ns:>15.1f} {result.min_ns:>12.1f} "
            f"{result.ops_per_sec:>14,.0f} {net:>12s}"
        )
    return lines


def run_benchmark(args: argparse.Namespace) -> None:
    """Run the configured variants and print the summary table.

    Configuration and matcher errors are reported on stderr with exit
    status 1.
    """
    try:
        config = build_config(args)
    except PathBenchError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        results = run_all(config)
    except PathBenchError as exc:
        logger.error("Benchmark aborted: %s", exc)
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print("=" * 82)
    print(
        f"  Path matcher benchmark: {config.iterations} iterations x "
        f"{config.invocations} invocations, {config.threads} thread(s)"
    )
    print("=" * 82)
    for line in format_results(results):
        print(line)
