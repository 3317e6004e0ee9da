"""
Debounced dispatch of fetch requests.

Only one invocation can be pending at a time: scheduling a new one cancels
the previous one. Fetches that already ran are not affected.
"""

from __future__ import annotations

import asyncio
from typing import Callable, Optional

from livesuggest.domain.protocols import CallLater, Cancellable
from livesuggest.logger import get_logger

logger = get_logger("scheduler")


def asyncio_call_later(delay: float, callback: Callable[[], None]) -> Cancellable:
    """Schedule ``callback`` on the running asyncio loop."""
    return asyncio.get_running_loop().call_later(delay, callback)


class DebouncedFetchScheduler:
    """Turns search term changes into at most one fetch per quiet period."""

    def __init__(self, call_later: Optional[CallLater] = None) -> None:
        """
        Args:
            call_later: Timer factory ``(delay_seconds, callback) -> handle``.
                Defaults to the running asyncio loop.
        """
        self._call_later = call_later or asyncio_call_later
        self._pending: Optional[Cancellable] = None

    @property
    def pending(self) -> bool:
        """``True`` while a delayed invocation is armed."""
        return self._pending is not None

    def schedule(self, search_term: str, fetch_fn: Callable[[str], None], debounce_ms: int) -> None:
        """
        Arrange for ``fetch_fn(search_term)`` to run once input went quiet.

        Args:
            search_term: Term passed to ``fetch_fn``
            fetch_fn: Dispatch function
            debounce_ms: Quiet period in milliseconds; 0 runs ``fetch_fn`` now
        """
        self.cancel()

        if debounce_ms <= 0:
            logger.debug(f"Dispatching fetch for {search_term!r} synchronously")
            fetch_fn(search_term)
            return

        def fire() -> None:
            self._pending = None
            fetch_fn(search_term)

        self._pending = self._call_later(debounce_ms / 1000, fire)
        logger.debug(f"Fetch for {search_term!r} armed in {debounce_ms}ms")

    def cancel(self) -> bool:
        """Drop the pending invocation. Returns whether one was pending."""
        if self._pending is None:
            return False

        self._pending.cancel()
        self._pending = None
        return True
