"""
Per-client request limiter for the generation endpoints.

Each client gets a sliding window of recent request times; clients whose
window empties are forgotten.
"""
import logging
import threading
import time
from typing import Dict, List, Optional
from fastapi import Request, HTTPException, status

from app.core import config

logger = logging.getLogger(__name__)


class SlidingWindowLimiter:
    """Allows at most `max_requests` per `window_seconds` for each key."""

    def __init__(self, max_requests: int, window_seconds: int, clock=time.monotonic):
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self.clock = clock
        self._hits: Dict[str, List[float]] = {}
        self._lock = threading.Lock()

    def _prune(self, now: float) -> None:
        cutoff = now - self.window_seconds
        for key in list(self._hits):
            recent = [t for t in self._hits[key] if t > cutoff]
            if recent:
                self._hits[key] = recent
            else:
                self._hits.pop(key)

    def hit(self, key: str) -> bool:
        """Record a request for `key`; False when it is over the limit."""
        with self._lock:
            now = self.clock()
            self._prune(now)
            hits = self._hits.setdefault(key, [])
            if len(hits) >= self.max_requests:
                return False
            hits.append(now)
            return True

    def tracked_clients(self) -> int:
        with self._lock:
            return len(self._hits)

    def reset(self) -> None:
        with self._lock:
            self._hits.clear()


limiter = SlidingWindowLimiter(config.RATE_LIMIT_MAX_REQUESTS, config.RATE_LIMIT_WINDOW_SECONDS)


def get_client_ip(request: Request, trust_proxy: Optional[bool] = None) -> str:
    """Client address; the forwarded header counts only behind a trusted proxy."""
    if trust_proxy is None:
        trust_proxy = config.TRUST_PROXY_HEADERS

    if trust_proxy:
        forwarded = request.headers.get("X-Forwarded-For")
        if forwarded:
            return forwarded.split(",")[0].strip()

    return request.client.host if request.client else "unknown"


def generation_rate_limit(request: Request) -> None:
    """
    FastAPI dependency applying the configured limit to generation routes.

    Raises:
        HTTPException: 429 if the client is over the limit
    """
    ip = get_client_ip(request)
    if not limiter.hit(ip):
        logger.warning(f"Rate limit exceeded for IP: {ip}")
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail=(
                f"Rate limit exceeded. Maximum {limiter.max_requests} requests "
                f"per {limiter.window_seconds} seconds."
            )
        )


def reset_rate_limits() -> None:
    """Forget all recorded requests."""
    limiter.reset()
