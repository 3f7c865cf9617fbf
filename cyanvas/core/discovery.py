"""Discovery Sampling — pure random selection behind the discovery feed.

Invariants:
    - sample_pool never returns more than cap ids, never duplicates
    - pick_random draws uniformly without replacement across all pools;
      pool order does not bias the result
    - The random source is injected; results are intentionally not reproducible
      unless the caller seeds it
"""

import random
from typing import Iterable, Sequence, TypeVar

T = TypeVar("T")


def sample_pool(ids: Sequence[T], cap: int, rng: random.Random) -> list[T]:
    """Uniform sample of up to cap ids; the whole set (shuffled) when smaller."""
    return rng.sample(list(ids), min(cap, len(ids)))


def pick_random(pools: Iterable[Sequence[T]], count: int, rng: random.Random) -> list[T]:
    """Sample count items from the concatenation of pools, no replacement."""
    combined = [item for pool in pools for item in pool]
    return rng.sample(combined, max(0, min(count, len(combined))))
