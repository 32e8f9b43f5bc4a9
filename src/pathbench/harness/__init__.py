"""Harness — benchmark state lifecycle, measured operations, and timing loop.

Lifecycle per iteration::

    state.setup_iteration()          # fresh catalog + matchers
    for each invocation:
        state.setup_invocation()     # untimed: draw the lookup path
        operation(state, sink)       # timed
    state.teardown_iteration()       # drop matchers
"""
