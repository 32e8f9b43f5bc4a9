"""Sink protocol and Blackhole.

A sink consumes the result of a measured operation so the work that
produced it is never skipped.
"""

from typing import Any, Protocol


class Sink(Protocol):
    """Anything with ``consume(value)``."""

    def consume(self, value: Any) -> None: ...


class Blackhole:
    """Consumes values and keeps only the most recent one."""

    __slots__ = ("_last", "consumed")

    def __init__(self) -> None:
        self._last: Any = None
        self.consumed = 0

    def consume(self, value: Any) -> None:
        self._last = value
        self.consumed += 1
