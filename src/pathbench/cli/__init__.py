"""Pathbench CLI — run the benchmark and inspect the route catalog.

Entry point registered as ``pathbench`` in ``pyproject.toml``::

    [project.scripts]
    pathbench = "pathbench.cli:main"
"""

import argparse
import sys

from pathbench.config import VARIANT_NAMES

LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``pathbench`` command."""
    parser = argparse.ArgumentParser(
        prog="pathbench",
        description="Pathbench — URL path matching micro-benchmark.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- pathbench run ----------------------------------------------------
    run_parser = subparsers.add_parser("run", help="Run the benchmark variants")
    run_parser.add_argument(
        "--variant",
        action="append",
        choices=VARIANT_NAMES,
        default=None,
        help="Variant to run (repeatable, default: all)",
    )
    run_parser.add_argument("--seed", type=int, default=None, help="Fixed random seed")
    run_parser.add_argument("--iterations", type=int, default=None, help="Measured iterations")
    run_parser.add_argument("--warmup", type=int, default=None, help="Warm-up iterations")
    run_parser.add_argument(
        "--invocations",
        type=int,
        default=None,
        help="Timed invocations per iteration",
    )
    run_parser.add_argument("--threads", type=int, default=None, help="Worker threads")
    run_parser.add_argument(
        "--shared-state",
        action="store_true",
        help="Share one state between workers (serialised invocations)",
    )
    run_parser.add_argument("--log-level", choices=LOG_LEVELS, default=None, help="Log level")

    # -- pathbench routes -------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List the route catalog")
    routes_parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Fixed random seed for the sample paths",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "run":
        from pathbench.cli._run import run_benchmark

        run_benchmark(args)
    elif args.command == "routes":
        from pathbench.cli._routes import run_routes

        run_routes(args)
