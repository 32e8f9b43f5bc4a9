"""Measured operations.

``match_and_sort`` is the workload: filter the catalog by match, rank the
matches with the matcher's own specificity comparator, and hand the
result to a sink. ``baseline`` touches the same inputs without matching
so its cost can be subtracted from the matcher variants.

Matcher errors are not caught here. A malformed pattern aborts the
measurement.
"""

from collections.abc import Callable, Sequence
from functools import cmp_to_key

from pathbench.errors import PreconditionError
from pathbench.harness.sink import Sink
from pathbench.harness.state import RoutingState
from pathbench.matching.protocol import PathMatcher
from pathbench.routing.route import Route

# A measured entry point: reads the primed state, feeds the sink
type Operation = Callable[[RoutingState, Sink], None]


def match_and_sort(
    routes: Sequence[Route],
    lookup_path: str,
    matcher: PathMatcher,
    sink: Sink,
) -> list[str]:
    """Return the patterns matching ``lookup_path``, most specific first.

    Matches keep catalog order until the stable sort; patterns the
    comparator treats as equal stay in catalog order.
    """
    matching: list[str] = []
    for route in routes:
        if matcher.match(route.pattern, lookup_path):
            matching.append(route.pattern)
    comparator = matcher.comparator_for(lookup_path)
    matching.sort(key=cmp_to_key(comparator))
    sink.consume(matching)
    return matching


def baseline(routes: Sequence[Route], lookup_path: str, sink: Sink) -> None:
    """Iterate the catalog and feed the sink, without matching."""
    matching: list[str] = []
    for route in routes:
        sink.consume(route.pattern)
        sink.consume(lookup_path)
    sink.consume(matching)


def _require_matcher(matcher: PathMatcher | None) -> PathMatcher:
    if matcher is None:
        msg = "Matcher has been released; call setup_iteration() first."
        raise PreconditionError(msg)
    return matcher


def baseline_benchmark(state: RoutingState, sink: Sink) -> None:
    baseline(state.routes, state.require_primed(), sink)


def ant_path_matcher_benchmark(state: RoutingState, sink: Sink) -> None:
    lookup_path = state.require_primed()
    match_and_sort(state.routes, lookup_path, _require_matcher(state.ant_matcher), sink)


def parsing_path_matcher_benchmark(state: RoutingState, sink: Sink) -> None:
    lookup_path = state.require_primed()
    match_and_sort(state.routes, lookup_path, _require_matcher(state.parsing_matcher), sink)


# Variant name -> measured entry point
VARIANTS: dict[str, Operation] = {
    "baseline": baseline_benchmark,
    "ant_path_matcher": ant_path_matcher_benchmark,
    "parsing_path_matcher": parsing_path_matcher_benchmark,
}
