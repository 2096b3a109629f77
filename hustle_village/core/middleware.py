"""Custom middleware for the application."""

import logging
import time

import redis.asyncio as redis
from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from hustle_village.config import settings
from hustle_village.core.exceptions import RateLimitExceeded

logger = logging.getLogger(__name__)

RATE_LIMIT_WINDOW_SECONDS = 60
UNLIMITED_PATHS = ("/health", "/docs", "/redoc", "/openapi.json")


def _client_ip(request: Request) -> str:
    """Extract client IP, honouring proxy headers."""
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()

    real_ip = request.headers.get("X-Real-IP")
    if real_ip:
        return real_ip

    return request.client.host if request.client else "unknown"


async def _hit_window(client: redis.Redis, key: str, now: int) -> int:
    """Record a hit in the sliding window and return the prior hit count."""
    async with client.pipeline(transaction=True) as pipe:
        pipe.zremrangebyscore(key, 0, now - RATE_LIMIT_WINDOW_SECONDS)
        pipe.zcard(key)
        pipe.zadd(key, {str(time.time_ns()): now})
        pipe.expire(key, RATE_LIMIT_WINDOW_SECONDS)
        results = await pipe.execute()
    return results[1]


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Per-IP rate limiting using a Redis sliding window."""

    def __init__(
        self,
        app,
        requests_per_minute: int = 100,
        redis_url: str | None = None,
    ):
        super().__init__(app)
        self.requests_per_minute = requests_per_minute
        self.redis_url = redis_url or settings.redis_url
        self._redis: redis.Redis | None = None

    async def get_redis(self) -> redis.Redis:
        """Get Redis connection."""
        if self._redis is None:
            self._redis = redis.from_url(
                self.redis_url,
                encoding="utf-8",
                decode_responses=True,
            )
        return self._redis

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        if request.url.path in UNLIMITED_PATHS or settings.debug:
            return await call_next(request)

        now = int(time.time())
        try:
            client = await self.get_redis()
            request_count = await _hit_window(client, f"rate_limit:{_client_ip(request)}", now)
        except redis.RedisError as e:
            logger.warning(f"Rate limiter unavailable, allowing request: {e}")
            return await call_next(request)

        reset_at = str(now + RATE_LIMIT_WINDOW_SECONDS)
        if request_count >= self.requests_per_minute:
            return JSONResponse(
                status_code=429,
                content={
                    "status": 429,
                    "msg": "Too many requests. Please try again later.",
                    "data": None,
                },
                headers={
                    "Retry-After": str(RATE_LIMIT_WINDOW_SECONDS),
                    "X-RateLimit-Limit": str(self.requests_per_minute),
                    "X-RateLimit-Remaining": "0",
                    "X-RateLimit-Reset": reset_at,
                },
            )

        response = await call_next(request)
        response.headers["X-RateLimit-Limit"] = str(self.requests_per_minute)
        response.headers["X-RateLimit-Remaining"] = str(
            max(0, self.requests_per_minute - request_count - 1)
        )
        response.headers["X-RateLimit-Reset"] = reset_at
        return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Attach a request id and response time to every response."""

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        start_time = time.time()

        request_id = request.headers.get("X-Request-ID") or str(time.time_ns())
        request.state.request_id = request_id

        response = await call_next(request)

        duration = time.time() - start_time
        response.headers["X-Request-ID"] = request_id
        response.headers["X-Response-Time"] = f"{duration:.3f}s"

        if duration > 1.0:
            logger.warning(
                f"Slow request {request_id}: {request.method} {request.url.path} "
                f"took {duration:.3f}s"
            )

        return response


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add security headers to responses."""

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        response = await call_next(request)

        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"

        if not settings.debug:
            response.headers["Strict-Transport-Security"] = (
                "max-age=31536000; includeSubDomains"
            )

        return response


class RateLimiter:
    """Endpoint-level rate limiter used as a FastAPI dependency."""

    def __init__(
        self,
        requests_per_minute: int = 10,
        key_prefix: str = "api",
        redis_url: str | None = None,
    ):
        self.requests_per_minute = requests_per_minute
        self.key_prefix = key_prefix
        self.redis_url = redis_url or settings.redis_url
        self._redis: redis.Redis | None = None

    async def get_redis(self) -> redis.Redis:
        """Get Redis connection."""
        if self._redis is None:
            self._redis = redis.from_url(
                self.redis_url,
                encoding="utf-8",
                decode_responses=True,
            )
        return self._redis

    async def __call__(self, request: Request) -> None:
        """Raise RateLimitExceeded when the caller is over its budget."""
        key = f"rate:{self.key_prefix}:{_client_ip(request)}"
        try:
            client = await self.get_redis()
            request_count = await _hit_window(client, key, int(time.time()))
        except redis.RedisError as e:
            logger.warning(f"Rate limiter '{self.key_prefix}' unavailable: {e}")
            return

        if request_count >= self.requests_per_minute:
            raise RateLimitExceeded()


booking_limiter = RateLimiter(
    requests_per_minute=settings.booking_rate_limit_per_minute,
    key_prefix="booking",
)
