"""
Rate Limiting Middleware

FastAPI middleware limiting analyze requests per client using Redis.
"""

import logging
from typing import Callable

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from seoscan.config import settings
from seoscan.services.rate_limiter import get_rate_limiter, RateLimiter

logger = logging.getLogger(__name__)

# Only the analyze endpoint triggers outbound fetches
LIMITED_PATH_PREFIXES = (f"{settings.API_V1_STR}/analyze",)


def get_client_ip(request: Request) -> str:
    """First X-Forwarded-For hop, falling back to the socket peer."""
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "anonymous"


class RateLimitMiddleware(BaseHTTPMiddleware):
    """
    Middleware for rate limiting analyze requests.

    Uses Redis sliding window rate limiting per client IP.
    Adds rate limit headers to limited responses.
    """

    def __init__(self, app, rate_limiter: RateLimiter = None, limit: int = None):
        super().__init__(app)
        self.rate_limiter = rate_limiter or get_rate_limiter()
        self.limit = limit or settings.RATE_LIMIT_ANALYZE_PER_MINUTE

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if not request.url.path.startswith(LIMITED_PATH_PREFIXES):
            return await call_next(request)

        client_ip = get_client_ip(request)
        result = await self.rate_limiter.check_rate_limit(
            client_id=client_ip,
            limit=self.limit,
            endpoint="analyze",
        )

        if not result.allowed:
            logger.warning(f"Rate limit exceeded for {client_ip} on {request.url.path}")
            return JSONResponse(
                status_code=429,
                content={"error": "Too many requests"},
                headers={
                    "X-RateLimit-Limit": str(result.limit),
                    "X-RateLimit-Remaining": "0",
                    "X-RateLimit-Reset": str(result.reset_at),
                    "Retry-After": str(result.retry_after or 60),
                },
            )

        response = await call_next(request)

        response.headers["X-RateLimit-Limit"] = str(result.limit)
        response.headers["X-RateLimit-Remaining"] = str(result.remaining)
        response.headers["X-RateLimit-Reset"] = str(result.reset_at)

        return response
