import os
import time
import logging
from typing import Dict, List
from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

WINDOW_SECONDS = 60

_counters: Dict[str, List[float]] = {}


def _client_key(request: Request) -> str:
    # Forwarded headers are applied upstream by ProxyHeadersMiddleware, and
    # only for TRUSTED_PROXIES; a raw X-Forwarded-For is never read here.
    return request.client.host if request.client else "anonymous"


def _prune(cutoff: float) -> None:
    for key in [k for k, stamps in _counters.items() if not stamps or stamps[-1] <= cutoff]:
        del _counters[key]


class RateLimitMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        if os.getenv("RATE_LIMIT_ENABLED", "false").lower() != "true":
            return await call_next(request)

        key = _client_key(request)
        limit = int(os.getenv("RATE_LIMIT_PER_MINUTE", "10"))
        now = time.time()
        cutoff = now - WINDOW_SECONDS

        _prune(cutoff)
        window = [t for t in _counters.get(key, ()) if t > cutoff]
        window.append(now)
        _counters[key] = window

        if len(window) > limit:
            logger.warning("rate_limit_exceeded", extra={"client": key, "limit": limit})
            return JSONResponse(
                {"detail": "Rate limit exceeded"},
                status_code=429,
                headers={"Retry-After": str(WINDOW_SECONDS)},
            )

        return await call_next(request)
