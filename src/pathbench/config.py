"""Benchmark configuration.

BenchConfig is frozen: build one per run and pass it down. CLI flags are
applied with ``dataclasses.replace``, which re-runs validation.
"""

import random
import time
from dataclasses import dataclass

from pathbench.errors import ConfigurationError

# Measured variants, in report order
VARIANT_NAMES: tuple[str, ...] = ("baseline", "ant_path_matcher", "parsing_path_matcher")


@dataclass(frozen=True, slots=True)
class BenchConfig:
    """Benchmark configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = BenchConfig(seed=42, iterations=3, invocations=500)
    """

    # Random source (None = seeded from the clock)
    seed: int | None = None

    # Iteration shape
    iterations: int = 5
    warmup_iterations: int = 1
    invocations: int = 2_000

    # Variants to run, in order
    variants: tuple[str, ...] = VARIANT_NAMES

    # Workers
    threads: int = 1
    shared_state: bool = False  # One RoutingState for all workers (serialised)

    # Logging
    log_level: str = "info"

    def __post_init__(self) -> None:
        if self.iterations < 1:
            msg = f"iterations must be >= 1, got {self.iterations}"
            raise ConfigurationError(msg)
        if self.warmup_iterations < 0:
            msg = f"warmup_iterations must be >= 0, got {self.warmup_iterations}"
            raise ConfigurationError(msg)
        if self.invocations < 1:
            msg = f"invocations must be >= 1, got {self.invocations}"
            raise ConfigurationError(msg)
        if self.threads < 1:
            msg = f"threads must be >= 1, got {self.threads}"
            raise ConfigurationError(msg)
        if not self.variants:
            msg = "at least one variant is required"
            raise ConfigurationError(msg)
        unknown = [name for name in self.variants if name not in VARIANT_NAMES]
        if unknown:
            msg = f"Unknown variant(s): {', '.join(unknown)}. Known: {', '.join(VARIANT_NAMES)}"
            raise ConfigurationError(msg)

    def make_rng(self, offset: int = 0) -> random.Random:
        """Build the random source for one state instance.

        A fixed ``seed`` gives reproducible selection sequences; worker
        ``offset`` keeps per-thread sequences distinct.
        """
        if self.seed is None:
            return random.Random(time.time_ns() + offset)
        return random.Random(self.seed + offset)
