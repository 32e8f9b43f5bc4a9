"""Pathbench exception hierarchy.

Shared across the catalog, matchers, harness, and CLI so every module
raises and catches the same types.
"""

from dataclasses import dataclass


class PathBenchError(Exception):
    """Base for all pathbench-specific errors."""


class ConfigurationError(PathBenchError):
    """Raised when the route catalog or benchmark configuration is invalid.

    Detected at generation or setup time and never retried.
    """


class PreconditionError(PathBenchError):
    """Raised when the benchmark lifecycle is driven out of order.

    Examples: priming an invocation before ``setup_iteration()``, or
    drawing a lookup path from an empty catalog.
    """


@dataclass(frozen=True, slots=True)
class PatternSyntaxError(PathBenchError):
    """A routing pattern that a matcher cannot parse.

    Raised by the matchers and propagated unchanged through the harness:
    a malformed pattern aborts the measurement.
    """

    pattern: str
    position: int
    detail: str = ""

    def __str__(self) -> str:
        if self.detail:
            return f"{self.pattern!r} at {self.position}: {self.detail}"
        return f"{self.pattern!r} at {self.position}"
