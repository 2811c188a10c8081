"""Monotonic identifiers for posts."""
from __future__ import annotations

import time
from collections.abc import Callable
from threading import Lock

__all__ = ["PostIdGenerator", "get_post_id_generator"]


class PostIdGenerator:
    """Issue millisecond-timestamp ids that never repeat.

    Two requests inside the same millisecond would collide on a raw clock
    value; the generator hands out ``last + 1`` instead whenever the clock has
    not moved past the previous id.
    """

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self._last = 0
        self._lock = Lock()

    @property
    def last_issued(self) -> int:
        return self._last

    def next_id(self, floor: int = 0) -> int:
        """Return a new id strictly greater than every id issued so far.

        Args:
            floor: Highest id already persisted; the result is also strictly
                greater than this, which keeps ids unique across restarts.
        """
        now_ms = int(self._clock() * 1000)
        with self._lock:
            candidate = max(now_ms, self._last + 1, floor + 1)
            self._last = candidate
            return candidate


_GENERATOR = PostIdGenerator()


def get_post_id_generator() -> PostIdGenerator:
    """Return the process-wide post id generator."""
    return _GENERATOR
