"""Glob-style path matcher.

Patterns are tokenized on ``/`` and matched segment by segment on every
call. ``**`` matches zero or more whole segments anywhere in a pattern::

    matcher = AntPathMatcher()
    matcher.match("/blog/**", "/blog/2017/02")           # True
    matcher.match("/tools/*/all", "/tools/sts/all")      # True
    matcher.match(r"/blog/{year:\\d+}", "/blog/latest")  # False

Tokenized patterns and compiled segment regexes are cached on the
instance. The caches are not thread-safe.
"""

import re
from dataclasses import dataclass

from pathbench.matching.patterns import (
    SEPARATOR,
    TokenKind,
    normalized_length,
    segment_regex,
    split_path,
    tokenize_segment,
)
from pathbench.matching.protocol import Comparator

_DOUBLE_WILDCARD = "**"
_CATCH_ALL = "/**"


@dataclass(frozen=True, slots=True)
class _PatternInfo:
    """Specificity counters for one pattern."""

    uri_vars: int
    single_wildcards: int
    double_wildcards: int
    length: int
    catch_all: bool
    prefix: bool

    @property
    def total(self) -> int:
        return self.uri_vars + self.single_wildcards + 2 * self.double_wildcards


class AntPathMatcher:
    """Glob-style matcher with ``*``, ``?``, ``**`` and ``{name[:regex]}``."""

    __slots__ = ("_info_cache", "_segment_cache", "_token_cache")

    def __init__(self) -> None:
        # Pattern -> its segments
        self._token_cache: dict[str, tuple[str, ...]] = {}
        # Segment -> compiled regex, or None for a plain literal
        self._segment_cache: dict[str, re.Pattern[str] | None] = {}
        # Pattern -> specificity counters
        self._info_cache: dict[str, _PatternInfo] = {}

    def match(self, pattern: str, path: str) -> bool:
        """Return True if ``path`` matches ``pattern`` in full."""
        if pattern.startswith(SEPARATOR) != path.startswith(SEPARATOR):
            return False

        segments = self._tokenize(pattern)
        parts = split_path(path)
        if not self._match_from(pattern, segments, 0, parts, 0):
            return False

        # A trailing separator must be present on both or neither,
        # unless the pattern ends in "**"
        if segments and segments[-1] == _DOUBLE_WILDCARD:
            return True
        return pattern.endswith(SEPARATOR) == path.endswith(SEPARATOR)

    def comparator_for(self, path: str) -> Comparator:
        """Order patterns from most to least specific for ``path``.

        1. the catch-all ``/**`` goes last
        2. a pattern equal to ``path`` goes first
        3. fewer variables and wildcards first
        4. prefix patterns (``.../**``) after other patterns of equal weight
        5. longer pattern first (variables count as one character)
        6. fewer single wildcards, then fewer variables

        Each pattern maps to a sort key compared field by field, so the
        order is transitive for any set of patterns.
        """

        def key(pattern: str) -> tuple[bool, bool, int, bool, int, int, int]:
            info = self._info(pattern)
            return (
                info.catch_all,
                pattern != path,
                info.total,
                info.prefix,
                -info.length,
                info.single_wildcards,
                info.uri_vars,
            )

        def compare(pattern1: str, pattern2: str) -> int:
            key1 = key(pattern1)
            key2 = key(pattern2)
            return (key1 > key2) - (key1 < key2)

        return compare

    # -- internals ---------------------------------------------------------

    def _tokenize(self, pattern: str) -> tuple[str, ...]:
        segments = self._token_cache.get(pattern)
        if segments is None:
            segments = tuple(split_path(pattern))
            # Lex every segment up front so malformed patterns fail on first use
            for segment in segments:
                self._segment(pattern, segment)
            self._token_cache[pattern] = segments
        return segments

    def _segment(self, pattern: str, segment: str) -> re.Pattern[str] | None:
        if segment in self._segment_cache:
            return self._segment_cache[segment]
        tokens = tokenize_segment(segment, pattern)
        if all(token.kind is TokenKind.LITERAL for token in tokens):
            compiled = None
        else:
            compiled = segment_regex(tokens, pattern)
        self._segment_cache[segment] = compiled
        return compiled

    def _match_segment(self, pattern: str, segment: str, part: str) -> bool:
        compiled = self._segment(pattern, segment)
        if compiled is None:
            return segment == part
        return compiled.fullmatch(part) is not None

    def _match_from(
        self,
        pattern: str,
        segments: tuple[str, ...],
        seg_index: int,
        parts: list[str],
        part_index: int,
    ) -> bool:
        """Match ``segments[seg_index:]`` against ``parts[part_index:]``."""
        while seg_index < len(segments) and part_index < len(parts):
            segment = segments[seg_index]
            if segment == _DOUBLE_WILDCARD:
                break
            if not self._match_segment(pattern, segment, parts[part_index]):
                return False
            seg_index += 1
            part_index += 1

        if seg_index == len(segments):
            return part_index == len(parts)

        if segments[seg_index] != _DOUBLE_WILDCARD:
            # Path exhausted while literal segments remain
            return False

        # Collapse consecutive "**"
        while seg_index < len(segments) and segments[seg_index] == _DOUBLE_WILDCARD:
            seg_index += 1
        if seg_index == len(segments):
            return True

        return any(
            self._match_from(pattern, segments, seg_index, parts, start)
            for start in range(part_index, len(parts) + 1)
        )

    def _info(self, pattern: str) -> _PatternInfo:
        info = self._info_cache.get(pattern)
        if info is not None:
            return info

        uri_vars = single_wildcards = double_wildcards = 0
        for segment in self._tokenize(pattern):
            if segment == _DOUBLE_WILDCARD:
                double_wildcards += 1
                continue
            for token in tokenize_segment(segment, pattern):
                if token.kind is TokenKind.VARIABLE:
                    uri_vars += 1
                elif token.kind is TokenKind.WILDCARD:
                    single_wildcards += 1

        info = _PatternInfo(
            uri_vars=uri_vars,
            single_wildcards=single_wildcards,
            double_wildcards=double_wildcards,
            length=normalized_length(pattern),
            catch_all=pattern == _CATCH_ALL,
            prefix=pattern.endswith(_CATCH_ALL),
        )
        self._info_cache[pattern] = info
        return info
