"""Parse-once path matcher.

Each pattern is parsed a single time into an immutable chain of
segment elements, then matched against the split lookup path::

    "/blog/{year:\\d+}/{slug}"
        -> [Literal("blog"), Capture("year", \\d+), Capture("slug")]
    "/badges/{projectId}.svg"
        -> [Literal("badges"), Regex("{projectId}.svg")]
    "/docs/**"
        -> [Literal("docs"), WildcardTheRest()]

``**`` is only valid as the last segment. A trailing separator on the
lookup path is tolerated. Parsed patterns are cached on the instance;
the cache is not thread-safe.
"""

import re
from dataclasses import dataclass

from pathbench.errors import PatternSyntaxError
from pathbench.matching.patterns import (
    SEPARATOR,
    TokenKind,
    compile_constraint,
    normalized_length,
    segment_regex,
    split_path,
    tokenize_segment,
)
from pathbench.matching.protocol import Comparator


@dataclass(frozen=True, slots=True)
class LiteralElement:
    """Matches one segment by exact text."""

    text: str

    def matches(self, part: str) -> bool:
        return part == self.text


@dataclass(frozen=True, slots=True)
class CaptureElement:
    """``{name}`` or ``{name:regex}`` spanning a whole segment."""

    name: str
    constraint: re.Pattern[str] | None = None

    def matches(self, part: str) -> bool:
        return self.constraint is None or self.constraint.fullmatch(part) is not None


@dataclass(frozen=True, slots=True)
class WildcardElement:
    """``*`` spanning a whole segment: any non-empty segment."""

    def matches(self, part: str) -> bool:
        return bool(part)


@dataclass(frozen=True, slots=True)
class RegexElement:
    """A segment mixing literals with variables or wildcards."""

    source: str
    regex: re.Pattern[str]

    def matches(self, part: str) -> bool:
        return self.regex.fullmatch(part) is not None


@dataclass(frozen=True, slots=True)
class WildcardTheRestElement:
    """Trailing ``**``: zero or more remaining segments."""

    def matches(self, part: str) -> bool:
        return True


type PathElement = (
    LiteralElement | CaptureElement | WildcardElement | RegexElement | WildcardTheRestElement
)


@dataclass(frozen=True, slots=True)
class ParsedPattern:
    """A pattern parsed into segment elements plus specificity counters."""

    text: str
    elements: tuple[PathElement, ...]
    leading_slash: bool
    trailing_slash: bool
    captures: int
    wildcards: int
    length: int

    @property
    def catch_all(self) -> bool:
        return self.elements == (WildcardTheRestElement(),)

    @property
    def score(self) -> int:
        return self.captures + 100 * self.wildcards


def parse_pattern(pattern: str) -> ParsedPattern:
    """Parse ``pattern`` into a ``ParsedPattern``.

    Raises ``PatternSyntaxError`` for malformed variables or a ``**``
    that is not the last segment.
    """
    segments = split_path(pattern)
    elements: list[PathElement] = []
    captures = wildcards = 0

    for index, segment in enumerate(segments):
        if segment == "**":
            if index != len(segments) - 1:
                raise PatternSyntaxError(
                    pattern, pattern.find("**"), "'**' is only allowed as the last segment"
                )
            elements.append(WildcardTheRestElement())
            wildcards += 1
            continue
        if segment == "*":
            elements.append(WildcardElement())
            wildcards += 1
            continue

        tokens = tokenize_segment(segment, pattern)
        if all(token.kind is TokenKind.LITERAL for token in tokens):
            elements.append(LiteralElement(segment))
        elif len(tokens) == 1 and tokens[0].kind is TokenKind.VARIABLE:
            token = tokens[0]
            constraint = (
                compile_constraint(token.constraint, pattern) if token.constraint else None
            )
            elements.append(CaptureElement(token.text, constraint))
            captures += 1
        else:
            elements.append(RegexElement(segment, segment_regex(tokens, pattern)))
            for token in tokens:
                if token.kind is TokenKind.VARIABLE:
                    captures += 1
                elif token.kind in (TokenKind.WILDCARD, TokenKind.SINGLE_CHAR):
                    wildcards += 1

    return ParsedPattern(
        text=pattern,
        elements=tuple(elements),
        leading_slash=pattern.startswith(SEPARATOR),
        trailing_slash=len(pattern) > 1 and pattern.endswith(SEPARATOR),
        captures=captures,
        wildcards=wildcards,
        length=normalized_length(pattern),
    )


class ParsingPathMatcher:
    """Matcher that parses each pattern once and walks its element chain."""

    __slots__ = ("_parsed",)

    def __init__(self) -> None:
        self._parsed: dict[str, ParsedPattern] = {}

    def parse(self, pattern: str) -> ParsedPattern:
        """Return the cached parse of ``pattern``, parsing it on first use."""
        parsed = self._parsed.get(pattern)
        if parsed is None:
            parsed = parse_pattern(pattern)
            self._parsed[pattern] = parsed
        return parsed

    def match(self, pattern: str, path: str) -> bool:
        """Return True if ``path`` matches ``pattern`` in full."""
        parsed = self.parse(pattern)
        if parsed.leading_slash != path.startswith(SEPARATOR):
            return False
        if parsed.trailing_slash and not path.endswith(SEPARATOR):
            return False

        parts = split_path(path)
        elements = parsed.elements
        for index, element in enumerate(elements):
            if isinstance(element, WildcardTheRestElement):
                return True
            if index >= len(parts) or not element.matches(parts[index]):
                return False
        return len(parts) == len(elements)

    def comparator_for(self, path: str) -> Comparator:
        """Order patterns from most to least specific for ``path``.

        1. the catch-all ``/**`` goes last
        2. a pattern equal to ``path`` goes first
        3. lower score first (captures + 100 per wildcard)
        4. longer pattern first (variables count as one character)
        """

        def compare(pattern1: str, pattern2: str) -> int:
            parsed1 = self.parse(pattern1)
            parsed2 = self.parse(pattern2)

            if parsed1.catch_all and parsed2.catch_all:
                return 0
            if parsed1.catch_all:
                return 1
            if parsed2.catch_all:
                return -1

            if pattern1 == path and pattern2 == path:
                return 0
            if pattern1 == path:
                return -1
            if pattern2 == path:
                return 1

            if parsed1.score != parsed2.score:
                return parsed1.score - parsed2.score
            return parsed2.length - parsed1.length

        return compare
