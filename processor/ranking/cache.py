"""
Time-boxed cache for computed leaderboards.
"""
import time
from typing import Any, Callable, Dict, Optional, Tuple

from loguru import logger


class TTLCache:
    """
    In-process key -> (value, expiry) cache.

    Expired values are not returned by `get` but stay available through
    `get_stale` until overwritten, so callers can fall back to them when a
    fresh computation fails.
    """

    def __init__(self, ttl_seconds: float, clock: Callable[[], float] = time.monotonic):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: Dict[str, Tuple[Any, float]] = {}

    def get(self, key: str) -> Optional[Any]:
        """Return the live value for `key`, or None if missing or expired."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if self._clock() >= expires_at:
            logger.debug(f"Cache expired for {key}")
            return None
        return value

    def get_stale(self, key: str) -> Optional[Any]:
        """Return the last stored value for `key`, expired or not."""
        entry = self._entries.get(key)
        return entry[0] if entry is not None else None

    def set(self, key: str, value: Any) -> None:
        self._entries[key] = (value, self._clock() + self.ttl_seconds)

    def invalidate(self, key: str) -> None:
        self._entries.pop(key, None)

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None
