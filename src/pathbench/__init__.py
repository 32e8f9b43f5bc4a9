"""Pathbench — micro-benchmark for URL path matching and specificity ranking.

Builds a fixed catalog of literal and templated routes, draws a realistic
lookup path before every timed call, and measures a match-and-sort
workload against interchangeable path matchers.

Basic usage::

    from pathbench import BenchConfig, run_all

    for result in run_all(BenchConfig(seed=42)):
        print(result.variant, result.median_ns)

Correctness checks::

    from pathbench import AntPathMatcher, generate_routes, match_and_sort
    from pathbench.testing import RecordingSink

    match_and_sort(generate_routes(), "/team/alice", AntPathMatcher(), RecordingSink())
    # ['/team/{username}', '/**']
"""

__version__ = "0.1.0"
__all__ = [
    "AntPathMatcher",
    "BenchConfig",
    "BenchmarkResult",
    "Blackhole",
    "ConfigurationError",
    "LiteralRoute",
    "ParsingPathMatcher",
    "PathBenchError",
    "PathMatcher",
    "PatternSyntaxError",
    "Phase",
    "PreconditionError",
    "RoutingState",
    "TemplatedRoute",
    "baseline",
    "concrete_path",
    "generate_routes",
    "match_and_sort",
    "net_cost",
    "run_all",
    "run_variant",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import pathbench`` fast while providing a clean top-level API.
    """
    if name == "BenchConfig":
        from pathbench.config import BenchConfig

        return BenchConfig

    if name in ("LiteralRoute", "TemplatedRoute", "concrete_path"):
        from pathbench.routing import route as _route

        return getattr(_route, name)

    if name == "generate_routes":
        from pathbench.routing.catalog import generate_routes

        return generate_routes

    if name == "AntPathMatcher":
        from pathbench.matching.ant import AntPathMatcher

        return AntPathMatcher

    if name == "ParsingPathMatcher":
        from pathbench.matching.parsing import ParsingPathMatcher

        return ParsingPathMatcher

    if name == "PathMatcher":
        from pathbench.matching.protocol import PathMatcher

        return PathMatcher

    if name == "Blackhole":
        from pathbench.harness.sink import Blackhole

        return Blackhole

    if name in ("Phase", "RoutingState"):
        from pathbench.harness import state as _state

        return getattr(_state, name)

    if name in ("baseline", "match_and_sort"):
        from pathbench.harness import operations as _ops

        return getattr(_ops, name)

    if name in ("BenchmarkResult", "net_cost", "run_all", "run_variant"):
        from pathbench.harness import runner as _runner

        return getattr(_runner, name)

    if name in ("ConfigurationError", "PathBenchError", "PatternSyntaxError", "PreconditionError"):
        from pathbench import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
