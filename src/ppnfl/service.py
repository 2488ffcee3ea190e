"""Cache-first pipeline: select strategy, fetch with backoff, normalize, store."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, List, Optional

from ppnfl.cache import ResultCache
from ppnfl.config import Settings
from ppnfl.fetch import StrategyChoice, build_fetcher, call_with_backoff, select_strategy
from ppnfl.fetch.strategies import Fetcher
from ppnfl.ingest import parse_projections
from ppnfl.models import ProjectionRecord


logger = logging.getLogger("uvicorn.error")
logger.setLevel(logging.INFO)


class ProjectionService:
    """Owns the cache and the strategy chosen for this process."""

    def __init__(
        self,
        settings: Settings,
        *,
        cache: Optional[ResultCache] = None,
        fetcher: Optional[Fetcher] = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ) -> None:
        self.settings = settings
        self.cache = cache if cache is not None else ResultCache(settings.cache_ttl)
        self.strategy: StrategyChoice = select_strategy(settings.credentials)
        self._fetch = fetcher if fetcher is not None else build_fetcher(self.strategy, settings.credentials)
        self._sleep = sleep
        logger.info("Using %s fetch strategy (cache ttl %ss)", self.strategy.value, settings.cache_ttl)

    async def get_projections(self) -> List[ProjectionRecord]:
        cached = self.cache.get()
        if cached is not None:
            logger.debug("Serving %s cached projections", len(cached))
            return cached

        # No coalescing: concurrent misses each run their own fetch.
        raw = await call_with_backoff(
            self._fetch,
            max_attempts=self.settings.backoff_attempts,
            sleep=self._sleep,
        )
        records = parse_projections(raw)
        self.cache.set(records)
        logger.info("Cached %s projections via %s", len(records), self.strategy.value)
        return records
