"""Pattern lexing shared by both matchers.

A pattern segment is split into tokens::

    "releases.atom"        -> [LITERAL "releases.atom"]
    "{category}.atom"      -> [VARIABLE "category", LITERAL ".atom"]
    r"{year:\\d+}"         -> [VARIABLE "year" constraint=r"\\d+"]
    "*.html"               -> [WILDCARD, LITERAL ".html"]
    "file?.txt"            -> [LITERAL "file", SINGLE_CHAR, LITERAL ".txt"]
"""

import re
from dataclasses import dataclass
from enum import Enum

from pathbench.errors import PatternSyntaxError

SEPARATOR = "/"


class TokenKind(Enum):
    """Kind of a token inside one pattern segment."""

    LITERAL = "literal"
    VARIABLE = "variable"
    WILDCARD = "wildcard"
    SINGLE_CHAR = "single_char"


@dataclass(frozen=True, slots=True)
class Token:
    """A lexed piece of a pattern segment."""

    kind: TokenKind
    text: str = ""
    constraint: str | None = None


def _variable_end(text: str, start: int) -> int:
    """Index just past the brace that closes the variable opened at ``start``.

    Constraints may contain their own braces, e.g. ``{id:\\d{4}}``.
    Returns -1 when the brace is never closed.
    """
    depth = 0
    for index in range(start, len(text)):
        if text[index] == "{":
            depth += 1
        elif text[index] == "}":
            depth -= 1
            if not depth:
                return index + 1
    return -1


def split_path(path: str) -> list[str]:
    """Split a path or pattern on ``/``, dropping empty segments."""
    return [part for part in path.split(SEPARATOR) if part]


def tokenize_segment(segment: str, pattern: str = "") -> tuple[Token, ...]:
    """Lex one segment of ``pattern`` into tokens.

    Raises ``PatternSyntaxError`` for unbalanced braces or an empty
    variable name. ``pattern`` is only used in error messages.
    """
    source = pattern or segment
    base = max(source.find(segment), 0)
    tokens: list[Token] = []
    literal: list[str] = []
    i = 0
    n = len(segment)

    def flush() -> None:
        if literal:
            tokens.append(Token(TokenKind.LITERAL, "".join(literal)))
            literal.clear()

    while i < n:
        char = segment[i]
        if char == "{":
            j = _variable_end(segment, i)
            if j < 0:
                raise PatternSyntaxError(source, base + i, "unclosed '{'")
            inner = segment[i + 1 : j - 1]
            name, _, constraint = inner.partition(":")
            if not name:
                raise PatternSyntaxError(source, base + i, "empty variable name")
            if ":" in inner and not constraint:
                raise PatternSyntaxError(source, base + i, f"empty constraint for {name!r}")
            flush()
            tokens.append(Token(TokenKind.VARIABLE, name, constraint or None))
            i = j
        elif char == "}":
            raise PatternSyntaxError(source, base + i, "unmatched '}'")
        elif char == "*":
            flush()
            tokens.append(Token(TokenKind.WILDCARD))
            i += 1
        elif char == "?":
            flush()
            tokens.append(Token(TokenKind.SINGLE_CHAR))
            i += 1
        else:
            literal.append(char)
            i += 1

    flush()
    return tuple(tokens)


def segment_regex(tokens: tuple[Token, ...], pattern: str) -> re.Pattern[str]:
    """Compile segment tokens into a full-match regex.

    Unconstrained variables and ``*`` match any run of characters,
    ``?`` matches exactly one.
    """
    parts: list[str] = []
    for token in tokens:
        match token.kind:
            case TokenKind.LITERAL:
                parts.append(re.escape(token.text))
            case TokenKind.VARIABLE:
                parts.append(f"(?:{token.constraint})" if token.constraint else ".*")
            case TokenKind.WILDCARD:
                parts.append(".*")
            case TokenKind.SINGLE_CHAR:
                parts.append(".")
    try:
        return re.compile("".join(parts), re.DOTALL)
    except re.error as exc:
        raise PatternSyntaxError(pattern, exc.pos or 0, f"invalid constraint: {exc.msg}") from exc


def compile_constraint(constraint: str, pattern: str) -> re.Pattern[str]:
    """Compile a variable constraint such as ``\\d+``."""
    try:
        return re.compile(constraint)
    except re.error as exc:
        raise PatternSyntaxError(pattern, exc.pos or 0, f"invalid constraint: {exc.msg}") from exc


def normalized_length(pattern: str) -> int:
    """Length of ``pattern`` with every variable counted as one character."""
    length = 0
    i = 0
    while i < len(pattern):
        end = _variable_end(pattern, i) if pattern[i] == "{" else -1
        i = end if end > 0 else i + 1
        length += 1
    return length
