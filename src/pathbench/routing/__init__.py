"""Routing — the route model and the benchmark route catalog.

The catalog is built once per iteration and is read-only afterwards.
"""
