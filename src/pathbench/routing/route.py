"""LiteralRoute and TemplatedRoute frozen dataclasses."""

import random
from dataclasses import dataclass

from pathbench.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class LiteralRoute:
    """A route without path variables.

    Its concrete path is the pattern itself: ``/team`` -> ``/team``.
    """

    pattern: str


@dataclass(frozen=True, slots=True)
class TemplatedRoute:
    """A route with one or more path variables.

    ``candidates`` are concrete paths known to satisfy ``pattern``::

        TemplatedRoute("/team/{username}", ("/team/alice", "/team/bob"))
    """

    pattern: str
    candidates: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.candidates:
            msg = f"Templated route {self.pattern!r} has no candidate paths."
            raise ConfigurationError(msg)


type Route = LiteralRoute | TemplatedRoute


def concrete_path(route: Route, rng: random.Random) -> str:
    """Return a concrete path that matches ``route.pattern``.

    Templated routes draw uniformly from their candidates on every call,
    so repeated invocations probe different values.
    """
    match route:
        case LiteralRoute(pattern=pattern):
            return pattern
        case TemplatedRoute(candidates=candidates):
            return rng.choice(candidates)
    msg = f"Not a route: {route!r}"
    raise TypeError(msg)
