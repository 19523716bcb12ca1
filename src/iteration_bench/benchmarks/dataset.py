"""Random input data for the benchmarks.

The sequence is generated once per process and shared by every variant, so
their timings are measured over identical input.
"""

from __future__ import annotations

import random

from iteration_bench.shared.config import ONE_MILLION


def generate_numbers(count: int = ONE_MILLION, *, upper: int = ONE_MILLION, seed: int | None = None) -> tuple[int, ...]:
    """Returns `count` integers drawn uniformly from `[1, upper]`.

    Without a seed the generator is seeded from system entropy.
    """

    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    if upper < 1:
        raise ValueError(f"upper must be >= 1, got {upper}")

    rng = random.Random(seed)
    return tuple(rng.randrange(upper) + 1 for _ in range(int(count)))
