"""
Limits Rate Limiter - Implements RateLimiter with the `limits` library.

`limits` is the engine slowapi is built on; using it directly lets the
endpoints decide what a rejection looks like (error envelope, reset time)
instead of slowapi's decorator response.

Storage:
    async+memory://              single process (default, tests)
    async+redis://host:6379      shared across workers (redis-py client)

Every admit() hits every configured window ("500 per day", "20 per minute"),
so a request consumes quota in each of them.
"""

import logging
from typing import Iterable

from limits import RateLimitItem, parse_many
from limits.aio.strategies import MovingWindowRateLimiter
from limits.storage import storage_from_string

from org_api.domain.ports import Admission, RateLimiter

logger = logging.getLogger(__name__)


class LimitsRateLimiter(RateLimiter):
    def __init__(
        self,
        storage_uri: str,
        rate_limits: Iterable[str],
        namespace: str = "org_api",
        **storage_options,
    ):
        self._storage = storage_from_string(storage_uri, **storage_options)
        self._strategy = MovingWindowRateLimiter(self._storage)
        self._items: list[RateLimitItem] = [
            item for limit in rate_limits if limit.strip() for item in parse_many(limit)
        ]
        if not self._items:
            raise ValueError("At least one rate limit must be configured")
        self._namespace = namespace

    async def admit(self, identity: str) -> Admission:
        allowed = True
        exhausted_resets: list[float] = []
        resets: list[float] = []

        for item in self._items:
            hit = await self._strategy.hit(item, self._namespace, identity)
            stats = await self._strategy.get_window_stats(item, self._namespace, identity)
            resets.append(stats.reset_time)
            if not hit:
                allowed = False
                exhausted_resets.append(stats.reset_time)

        # Rejected: wait for the longest exhausted window. Admitted: next window to roll over.
        reset_time = max(exhausted_resets) if exhausted_resets else min(resets)
        if not allowed:
            logger.info("Rate limit exceeded for %s", identity)
        return Admission(allowed=allowed, reset_at=int(reset_time * 1000))
