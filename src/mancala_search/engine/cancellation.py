"""
Cooperative cancellation for the search.

The search polls a token at the top of every recursive call. The token is
set from outside the search (a signal handler, another thread) or expires on
its own once an optional time budget runs out.
"""

import threading
import time


class CancellationToken:
    """Cancellation flag with an optional wall-clock deadline."""

    def __init__(self, time_limit_ms: int = 0):
        """
        Args:
            time_limit_ms: Budget after which the token counts as cancelled (0 = no limit)
        """
        self._event = threading.Event()
        self.time_limit_ms = time_limit_ms
        self.deadline = time.monotonic() + time_limit_ms / 1000 if time_limit_ms > 0 else None

    def cancel(self):
        self._event.set()

    def is_cancelled(self) -> bool:
        if self._event.is_set():
            return True
        if self.deadline is not None and time.monotonic() >= self.deadline:
            self._event.set()
            return True
        return False

    def __repr__(self):
        return f"CancellationToken(cancelled={self._event.is_set()}, time_limit_ms={self.time_limit_ms})"
