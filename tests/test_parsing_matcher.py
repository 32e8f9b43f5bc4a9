"""Tests for pathbench.matching.parsing — parse-once matcher and comparator."""

from functools import cmp_to_key

import pytest

from pathbench.errors import PatternSyntaxError
from pathbench.matching.parsing import (
    CaptureElement,
    LiteralElement,
    ParsingPathMatcher,
    RegexElement,
    WildcardElement,
    WildcardTheRestElement,
    parse_pattern,
)
from pathbench.matching.protocol import PathMatcher


def _sorted(matcher: ParsingPathMatcher, path: str, patterns: list[str]) -> list[str]:
    return sorted(patterns, key=cmp_to_key(matcher.comparator_for(path)))


class TestParsePattern:
    def test_literal_and_captures(self) -> None:
        parsed = parse_pattern(r"/blog/{year:\d+}/{slug}")
        first, year, slug = parsed.elements
        assert first == LiteralElement("blog")
        assert isinstance(year, CaptureElement)
        assert year.name == "year"
        assert year.constraint is not None
        assert year.constraint.pattern == r"\d+"
        assert slug == CaptureElement("slug")
        assert parsed.captures == 2
        assert parsed.wildcards == 0

    def test_regex_segment(self) -> None:
        parsed = parse_pattern("/badges/{projectId}.svg")
        assert isinstance(parsed.elements[1], RegexElement)
        assert parsed.captures == 1

    def test_wildcard_segment(self) -> None:
        parsed = parse_pattern("/tools/*")
        assert parsed.elements[1] == WildcardElement()
        assert parsed.wildcards == 1

    def test_wildcard_the_rest(self) -> None:
        parsed = parse_pattern("/docs/**")
        assert parsed.elements[-1] == WildcardTheRestElement()
        assert not parsed.catch_all

    def test_catch_all(self) -> None:
        assert parse_pattern("/**").catch_all

    def test_score(self) -> None:
        assert parse_pattern("/a/{x}/*").score == 101

    def test_double_wildcard_must_be_last(self) -> None:
        with pytest.raises(PatternSyntaxError, match="last segment"):
            parse_pattern("/**/docs")

    def test_malformed_variable(self) -> None:
        with pytest.raises(PatternSyntaxError):
            parse_pattern("/team/{username")

    def test_frozen(self) -> None:
        parsed = parse_pattern("/team")
        with pytest.raises(AttributeError):
            parsed.text = "/other"  # type: ignore[misc]


class TestMatching:
    def test_satisfies_path_matcher(self) -> None:
        assert isinstance(ParsingPathMatcher(), PathMatcher)

    @pytest.mark.parametrize(
        ("pattern", "path", "expected"),
        [
            ("/team", "/team", True),
            ("/team", "/teams", False),
            ("/team", "/team/", True),
            ("/team/", "/team", False),
            ("team", "/team", False),
            ("/team/{username}", "/team/alice", True),
            ("/team/{username}", "/team", False),
            ("/team/{username}", "/team/alice/repos", False),
            ("/blog/{year}/{month}", "/blog/2017/02", True),
            (r"/blog/{year:\d+}/{month:\d+}", "/blog/2017/feb", False),
            ("/badges/{projectId}.svg", "/badges/reactor.svg", True),
            ("/badges/{projectId}.svg", "/badges/reactor", False),
            ("/tools/*", "/tools/sts", True),
            ("/tools/*", "/tools", False),
            ("/blog/**", "/blog", True),
            ("/blog/**", "/blog/2017/02", True),
            ("/**", "/**", True),
            ("/**", "/", True),
            ("/", "/", True),
        ],
    )
    def test_match(self, pattern: str, path: str, expected: bool) -> None:
        assert ParsingPathMatcher().match(pattern, path) is expected

    def test_parse_is_cached(self) -> None:
        matcher = ParsingPathMatcher()
        assert matcher.parse("/team/{username}") is matcher.parse("/team/{username}")

    def test_instances_do_not_share_cache(self) -> None:
        first = ParsingPathMatcher()
        second = ParsingPathMatcher()
        assert first.parse("/team") is not second.parse("/team")


class TestComparator:
    def test_catch_all_last(self) -> None:
        result = _sorted(ParsingPathMatcher(), "/team/alice", ["/**", "/team/{username}"])
        assert result == ["/team/{username}", "/**"]

    def test_exact_path_first(self) -> None:
        result = _sorted(ParsingPathMatcher(), "/blog", ["/**", "/blog"])
        assert result == ["/blog", "/**"]

    def test_capture_before_wildcard(self) -> None:
        result = _sorted(ParsingPathMatcher(), "/tools/sts", ["/tools/*", "/tools/{name}"])
        assert result == ["/tools/{name}", "/tools/*"]

    def test_capture_before_rest(self) -> None:
        result = _sorted(ParsingPathMatcher(), "/docs/ref", ["/docs/**", "/docs/{page}"])
        assert result == ["/docs/{page}", "/docs/**"]

    def test_longer_pattern_first(self) -> None:
        result = _sorted(
            ParsingPathMatcher(), "/blog/news.atom", ["/blog/{slug}", "/blog/{slug}.atom"]
        )
        assert result == ["/blog/{slug}.atom", "/blog/{slug}"]

    def test_equal_patterns_tie(self) -> None:
        compare = ParsingPathMatcher().comparator_for("/x")
        assert compare("/a/{x}", "/b/{y}") == 0
