"""PathMatcher protocol and Comparator type alias.

A matcher is any object with this shape::

    matcher.match("/team/{username}", "/team/alice")  # -> True
    compare = matcher.comparator_for("/team/alice")
    compare("/team/{username}", "/**")                # -> negative

No base class required. The harness checks the shape, not the lineage.
"""

from collections.abc import Callable
from typing import Protocol, runtime_checkable

# Orders two patterns relative to a fixed lookup path:
# negative = first is more specific, 0 = tie, positive = second is more specific
type Comparator = Callable[[str, str], int]


@runtime_checkable
class PathMatcher(Protocol):
    """Protocol for path matchers.

    Implementations may keep internal caches; they are not required to be
    thread-safe and are owned by a single benchmark state at a time.
    """

    def match(self, pattern: str, path: str) -> bool: ...

    def comparator_for(self, path: str) -> Comparator: ...


# Builds a fresh matcher for each iteration
type MatcherFactory = Callable[[], PathMatcher]
