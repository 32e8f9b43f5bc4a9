"""``pathbench routes`` — list the benchmark route catalog.

Prints every route with its kind, pattern, candidate count, and one
sample concrete path.
"""

import argparse

from pathbench.config import BenchConfig
from pathbench.routing.catalog import generate_routes
from pathbench.routing.route import LiteralRoute, TemplatedRoute, concrete_path


def run_routes(args: argparse.Namespace) -> None:
    """Print a table of KIND, PATTERN, CANDIDATES, and SAMPLE."""
    rng = BenchConfig(seed=args.seed).make_rng()
    routes = generate_routes()

    # Build rows: (kind, pattern, candidate count, sample path)
    rows: list[tuple[str, str, str, str]] = []
    for route in routes:
        match route:
            case LiteralRoute():
                kind, count = "literal", "-"
            case TemplatedRoute(candidates=candidates):
                kind, count = "templated", str(len(candidates))
        rows.append((kind, route.pattern, count, concrete_path(route, rng)))

    # Column widths
    max_kind = max(max(len(r[0]) for r in rows), 4)  # "KIND" header
    max_pattern = max(max(len(r[1]) for r in rows), 7)  # "PATTERN" header

    fmt = f"{{:<{max_kind}}}  {{:<{max_pattern}}}  {{:>10}}  {{}}"
    print(fmt.format("KIND", "PATTERN", "CANDIDATES", "SAMPLE"))
    print("-" * min(max_kind + max_pattern + 14 + max(len(r[3]) for r in rows), 100))
    for kind, pattern, count, sample in rows:
        print(fmt.format(kind, pattern, count, sample))
    print(f"\n{len(routes)} routes")
