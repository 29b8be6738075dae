import logging
import math
import threading
import time
from collections import defaultdict, deque

from fastapi import HTTPException, Request

from ..config import RL_ANALYZE_LIMIT, RL_WINDOW_SECONDS


logger = logging.getLogger(__name__)


class SlidingWindowLimiter:
    """Per-client request cap over a trailing time window, kept in process memory."""

    def __init__(self, limit: int, window_seconds: int) -> None:
        self.limit = limit
        self.window_seconds = window_seconds
        self._hits: dict[str, deque[float]] = defaultdict(deque)
        self._lock = threading.Lock()

    def acquire(self, client: str) -> int:
        """Record one request. Returns 0 when allowed, else seconds until a slot frees."""
        now = time.monotonic()
        with self._lock:
            hits = self._hits[client]
            while hits and now - hits[0] >= self.window_seconds:
                hits.popleft()
            if len(hits) >= self.limit:
                return max(1, math.ceil(hits[0] + self.window_seconds - now))
            hits.append(now)
            return 0

    def reset(self) -> None:
        with self._lock:
            self._hits.clear()


analyze_limiter = SlidingWindowLimiter(RL_ANALYZE_LIMIT, RL_WINDOW_SECONDS)


def client_key(request: Request) -> str:
    forwarded = request.headers.get("x-forwarded-for", "")
    if forwarded.strip():
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


def enforce_analyze_limit(request: Request) -> None:
    client = client_key(request)
    wait = analyze_limiter.acquire(client)
    if wait:
        logger.warning("analyze rate limit hit client=%s retry_after=%s", client, wait)
        raise HTTPException(
            status_code=429,
            detail=f"Too many analysis requests. Retry in {wait}s",
            headers={"Retry-After": str(wait)},
        )
