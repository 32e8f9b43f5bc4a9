"""Benchmark state with an explicit setup/teardown lifecycle.

Phases::

    UNINITIALIZED --setup_iteration--> READY --setup_invocation--> PRIMED
    PRIMED --setup_invocation--> PRIMED      (next invocation)
    READY/PRIMED --teardown_iteration--> TORN_DOWN --setup_iteration--> READY

Concurrency: ``setup_invocation()`` is the single mutation point between
invocations. A state owned by one worker needs no locking. If a state is
shared between workers, each worker must hold ``state.lock`` across
``setup_invocation()`` and the measured call, otherwise workers race and
measure each other's lookup path.
"""

import logging
import random
import threading
from enum import Enum

from pathbench.errors import PreconditionError
from pathbench.matching.ant import AntPathMatcher
from pathbench.matching.parsing import ParsingPathMatcher
from pathbench.matching.protocol import MatcherFactory, PathMatcher
from pathbench.routing.catalog import generate_routes
from pathbench.routing.route import Route, concrete_path

logger = logging.getLogger("pathbench.harness")


class Phase(Enum):
    """Lifecycle phase of a ``RoutingState``."""

    UNINITIALIZED = "uninitialized"
    READY = "ready"
    PRIMED = "primed"
    TORN_DOWN = "torn_down"


class RoutingState:
    """Catalog, two matchers, and the current lookup path.

    Usage::

        state = RoutingState(random.Random(42))
        state.setup_iteration()
        state.setup_invocation()
        match_and_sort(state.routes, state.lookup_path, state.ant_matcher, sink)
        state.teardown_iteration()

    The measured operations only read ``routes`` and ``lookup_path``.
    """

    __slots__ = (
        "_ant_factory",
        "_parsing_factory",
        "_rng",
        "ant_matcher",
        "lock",
        "lookup_path",
        "parsing_matcher",
        "phase",
        "routes",
    )

    def __init__(
        self,
        rng: random.Random,
        *,
        ant_factory: MatcherFactory = AntPathMatcher,
        parsing_factory: MatcherFactory = ParsingPathMatcher,
    ) -> None:
        self._rng = rng
        self._ant_factory = ant_factory
        self._parsing_factory = parsing_factory
        self.routes: list[Route] = []
        self.ant_matcher: PathMatcher | None = None
        self.parsing_matcher: PathMatcher | None = None
        self.lookup_path: str | None = None
        self.phase = Phase.UNINITIALIZED
        self.lock = threading.Lock()

    def setup_iteration(self) -> None:
        """Build a fresh catalog and fresh matchers."""
        if self.phase not in (Phase.UNINITIALIZED, Phase.TORN_DOWN):
            msg = f"setup_iteration() called in phase {self.phase.value!r}."
            raise PreconditionError(msg)

        self.routes = generate_routes()
        self.ant_matcher = self._ant_factory()
        self.parsing_matcher = self._parsing_factory()
        self.lookup_path = None
        self.phase = Phase.READY
        logger.debug("Iteration ready: %d routes", len(self.routes))

    def setup_invocation(self) -> str:
        """Draw a random route, then a random concrete path for it.

        Runs before every timed call and is never part of the measurement.
        Returns the new lookup path.
        """
        if self.phase not in (Phase.READY, Phase.PRIMED):
            msg = f"setup_invocation() called in phase {self.phase.value!r}."
            raise PreconditionError(msg)
        if not self.routes:
            msg = "Cannot draw a lookup path from an empty route catalog."
            raise PreconditionError(msg)

        route = self._rng.choice(self.routes)
        self.lookup_path = concrete_path(route, self._rng)
        self.phase = Phase.PRIMED
        return self.lookup_path

    def teardown_iteration(self) -> None:
        """Release both matchers so no cache state crosses iterations."""
        if self.phase not in (Phase.READY, Phase.PRIMED):
            msg = f"teardown_iteration() called in phase {self.phase.value!r}."
            raise PreconditionError(msg)

        self.ant_matcher = None
        self.parsing_matcher = None
        self.phase = Phase.TORN_DOWN
        logger.debug("Iteration torn down")

    def require_primed(self) -> str:
        """Return the lookup path, or raise if no invocation is primed."""
        if self.phase is not Phase.PRIMED or self.lookup_path is None:
            msg = f"Measured operation requires a primed state, got {self.phase.value!r}."
            raise PreconditionError(msg)
        return self.lookup_path
