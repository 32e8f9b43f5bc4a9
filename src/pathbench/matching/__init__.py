"""Matching — path matchers that satisfy the ``PathMatcher`` protocol.

Two implementations share one pattern syntax:

- ``AntPathMatcher`` tokenizes and matches glob-style on every call.
- ``ParsingPathMatcher`` parses each pattern once into an element chain.
"""
