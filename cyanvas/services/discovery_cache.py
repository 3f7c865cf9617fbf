"""Discovery Cache — randomized, cache-backed feed of public root charts per genre.

Invariants:
    - Per genre, the pool holds at most random_pool_size ids sampled uniformly
      from the eligible set and is refreshed at most once per pool TTL
    - Per genre, the eligible count is cached separately with a shorter TTL
    - random_chart_ids() only returns ids from the requested genres' pools,
      never more than count, never duplicates
    - Store and cache errors propagate; there is no degraded fallback mode
    - Concurrent misses may recompute the same key; last writer wins
"""

import logging
import random
from typing import Iterable

from cyanvas.config import Settings
from cyanvas.core.discovery import pick_random, sample_pool
from cyanvas.core.domain_types import ChartId, Genre
from cyanvas.core.repository_protocols import CacheStore, ChartCriteria, ChartStore

logger = logging.getLogger(__name__)

POOL_KEY = "sonolus:random_charts:{genre}"
COUNT_KEY = "sonolus:num_charts:{genre}"


def _unique_genres(genres: Iterable[Genre | str] | None) -> list[Genre]:
    if genres is None:
        return list(Genre)
    return list(dict.fromkeys(Genre(g) for g in genres))


class DiscoveryCache:
    """Samples random chart ids across genres without scanning the table per request."""

    def __init__(
        self,
        store: ChartStore,
        cache: CacheStore,
        settings: Settings,
        rng: random.Random | None = None,
    ):
        self.store = store
        self.cache = cache
        self.pool_size = settings.random_pool_size
        self.pool_ttl = settings.random_pool_ttl_seconds
        self.count_ttl = settings.chart_count_ttl_seconds
        self.rng = rng or random.SystemRandom()

    async def pool_for(self, genre: Genre) -> list[ChartId]:
        """Copy of the cached sampled pool of eligible ids for one genre."""
        async def compute() -> list[ChartId]:
            ids = await self.store.list_ids_where(ChartCriteria.listed(genre))
            pool = sample_pool(ids, self.pool_size, self.rng)
            logger.debug(
                f"Rebuilt discovery pool: {len(pool)} of {len(ids)} eligible",
                extra={"genre": genre.value},
            )
            return pool

        pool = await self.cache.get_or_compute(
            POOL_KEY.format(genre=genre.value), self.pool_ttl, compute,
        )
        return list(pool)

    async def count_for(self, genre: Genre) -> int:
        async def compute() -> int:
            return await self.store.count_where(ChartCriteria.listed(genre))

        return await self.cache.get_or_compute(
            COUNT_KEY.format(genre=genre.value), self.count_ttl, compute,
        )

    async def random_chart_ids(
        self, count: int, genres: Iterable[Genre | str] | None = None,
    ) -> list[ChartId]:
        """Up to count random ids drawn from the pools of the requested genres."""
        pools = [await self.pool_for(g) for g in _unique_genres(genres)]
        return pick_random(pools, count, self.rng)

    async def count_charts(self, genres: Iterable[Genre | str] | None = None) -> int:
        """Sum of the cached eligible counts of the requested genres."""
        total = 0
        for genre in _unique_genres(genres):
            total += await self.count_for(genre)
        return total
