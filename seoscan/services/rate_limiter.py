"""
Rate Limiter Service

Redis-based sliding window rate limiting for the analyze endpoint, keyed per
client address.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

import redis.asyncio as redis

from seoscan.config import settings

logger = logging.getLogger(__name__)


@dataclass
class RateLimitResult:
    """Result of a rate limit check."""
    allowed: bool
    limit: int
    remaining: int
    reset_at: int  # Unix timestamp
    retry_after: Optional[int] = None  # Seconds until retry


class RateLimiter:
    """
    Redis-based rate limiter using sliding window algorithm.

    Uses a sorted set per client to track request timestamps.
    """

    def __init__(self, redis_url: str = None, window_seconds: int = None):
        self.redis_url = redis_url or settings.REDIS_URL
        self.window_seconds = window_seconds or settings.RATE_LIMIT_WINDOW_SECONDS
        self._redis: Optional[redis.Redis] = None

    async def get_redis(self) -> redis.Redis:
        """Get or create Redis connection."""
        if self._redis is None:
            self._redis = redis.from_url(
                self.redis_url,
                encoding="utf-8",
                decode_responses=True,
            )
        return self._redis

    async def close(self):
        """Close Redis connection."""
        if self._redis:
            await self._redis.aclose()
            self._redis = None

    def _rate_limit_key(self, client_id: str, endpoint: str = "default") -> str:
        return f"ratelimit:{endpoint}:{client_id}"

    async def check_rate_limit(
        self,
        client_id: str,
        limit: int,
        endpoint: str = "default",
    ) -> RateLimitResult:
        """
        Check if request is within rate limit using sliding window.

        Args:
            client_id: Client identifier (usually the IP address)
            limit: Maximum requests per window
            endpoint: Endpoint name used to scope the counter

        Returns:
            RateLimitResult with allowed status and metadata
        """
        r = await self.get_redis()
        key = self._rate_limit_key(client_id, endpoint)
        now = datetime.now(timezone.utc).timestamp()
        window_start = now - self.window_seconds

        pipe = r.pipeline()

        # Remove old entries outside the window
        pipe.zremrangebyscore(key, 0, window_start)

        # Count current requests in window
        pipe.zcard(key)

        # Add current request
        pipe.zadd(key, {str(now): now})

        # Set expiry on key
        pipe.expire(key, self.window_seconds * 2)

        results = await pipe.execute()
        current_count = results[1]

        remaining = max(0, limit - current_count - 1)
        reset_at = int(now + self.window_seconds)

        if current_count >= limit:
            # Over limit - remove the request we just added
            await r.zrem(key, str(now))

            oldest = await r.zrange(key, 0, 0, withscores=True)
            retry_after = int(oldest[0][1] + self.window_seconds - now) if oldest else self.window_seconds

            return RateLimitResult(
                allowed=False,
                limit=limit,
                remaining=0,
                reset_at=reset_at,
                retry_after=max(1, retry_after),
            )

        return RateLimitResult(
            allowed=True,
            limit=limit,
            remaining=remaining,
            reset_at=reset_at,
        )


# Global rate limiter instance
_rate_limiter: Optional[RateLimiter] = None


def get_rate_limiter() -> RateLimiter:
    """Get the global rate limiter instance."""
    global _rate_limiter
    if _rate_limiter is None:
        _rate_limiter = RateLimiter()
    return _rate_limiter


async def close_rate_limiter():
    """Close the global rate limiter."""
    global _rate_limiter
    if _rate_limiter:
        await _rate_limiter.close()
        _rate_limiter = None
