# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import math
import time
from collections import deque
from collections.abc import Callable
from functools import wraps
from threading import Lock

from flask import jsonify, request

from bloglist.shared.config import load_config
from bloglist.shared.logging import logger


class SlidingWindowLimiter:
    """Allows ``limit`` hits per key within any ``window_seconds`` span."""

    def __init__(self, limit: int, window_seconds: float) -> None:
        self.limit = max(1, int(limit))
        self.window = max(0.1, float(window_seconds))
        self._hits: dict[str, deque[float]] = {}
        self._lock = Lock()

    def hit(self, key: str, now: float | None = None) -> float:
        """Record a hit. Returns 0 when allowed, else seconds until the next slot frees."""

        now = time.monotonic() if now is None else now
        with self._lock:
            hits = self._hits.setdefault(key, deque())
            while hits and now - hits[0] >= self.window:
                hits.popleft()
            if len(hits) >= self.limit:
                return self.window - (now - hits[0])
            hits.append(now)
            return 0.0

    def reset(self) -> None:
        with self._lock:
            self._hits.clear()


_LIMITERS: list[SlidingWindowLimiter] = []


def reset_rate_limits() -> None:
    for limiter in _LIMITERS:
        limiter.reset()


def _client_key() -> str:
    forwarded = request.headers.get("X-Forwarded-For", "").split(",")[0].strip()
    return f"{request.path}:{forwarded or request.remote_addr or 'unknown'}"


def rate_limit(
    limit: int | None = None,
    window_seconds: float | None = None,
    *,
    enabled: bool | None = None,
):
    security = load_config().security
    if enabled is None:
        enabled = security.enable_rate_limit
    limiter = SlidingWindowLimiter(
        limit or security.rate_limit_requests,
        window_seconds or security.rate_limit_window,
    )
    _LIMITERS.append(limiter)

    def decorator(f: Callable):
        if not enabled:
            return f

        @wraps(f)
        def wrapper(*args, **kwargs):
            key = _client_key()
            retry_after = limiter.hit(key)
            if retry_after:
                logger.warning(f"rate_limit: rejected {request.method} key={key}")
                response = jsonify({"error": "rate_limited"})
                response.headers["Retry-After"] = str(max(1, math.ceil(retry_after)))
                return response, 429
            return f(*args, **kwargs)

        return wrapper

    return decorator


__all__ = ["SlidingWindowLimiter", "rate_limit", "reset_rate_limits"]
