from __future__ import annotations

import time
from dataclasses import dataclass
from threading import Lock
from typing import Callable, Dict


@dataclass
class _Window:
    count: int
    reset_at: float


class RateLimiter:
    """Fixed-window request counter keyed by caller identity."""

    def __init__(
        self,
        max_requests: int,
        window_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._lock = Lock()
        self._windows: Dict[str, _Window] = {}
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock

    def hit(self, key: str) -> bool:
        """Count one request for ``key``; return False once it is over the limit."""
        now = self._clock()
        with self._lock:
            window = self._windows.get(key)
            if window is None or now > window.reset_at:
                window = _Window(count=1, reset_at=now + self.window_seconds)
                self._windows[key] = window
            else:
                window.count += 1
            return window.count <= self.max_requests
