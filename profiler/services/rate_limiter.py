import time
from typing import Callable, Dict, Tuple


class FixedWindowRateLimiter:
    """
    Per-key fixed-window request counter.

    The first request for a key opens a window of `window_seconds`; up to
    `max_requests` are allowed inside it. Rejections never block or queue.
    Expired windows are dropped as requests come in, so only keys seen within
    the last window are kept.
    """

    def __init__(self, window_seconds: float, max_requests: int, clock: Callable[[], float] = time.monotonic):
        self.window_seconds = window_seconds
        self.max_requests = max_requests
        self.clock = clock
        # key -> (count, window reset time)
        self._windows: Dict[str, Tuple[int, float]] = {}

    def _evict_expired(self, now: float) -> None:
        expired = [key for key, (_, reset_at) in self._windows.items() if now > reset_at]
        for key in expired:
            del self._windows[key]

    def allow(self, key: str) -> bool:
        """
        Records one request for `key` and reports whether it is within the limit.

        Args:
            key (str): Subject being limited, e.g. "opinion_<username>".
        Returns:
            bool: False once the window's quota is used up.
        """
        now = self.clock()
        self._evict_expired(now)
        window = self._windows.get(key)

        if window is None:
            self._windows[key] = (1, now + self.window_seconds)
            return True

        count, reset_at = window
        if count >= self.max_requests:
            return False

        self._windows[key] = (count + 1, reset_at)
        return True
