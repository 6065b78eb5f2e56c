# storefront/layout/autosave.py
from __future__ import annotations

import logging
import threading
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class Debouncer:
    """
    Runs ``callback`` once ``delay`` seconds after the last ``trigger()``.

    Each trigger cancels the pending timer and starts a new one, so a
    burst of triggers yields a single call at the end of the burst.
    Timers are non-daemon threads: a pending save still runs when the
    interpreter exits.
    ``timer_factory`` must build a ``threading.Timer``-compatible object
    (``factory(interval, function, args=...)`` with ``start``/``cancel``).
    """

    def __init__(
        self,
        delay: float,
        callback: Callable[[], None],
        timer_factory: Callable[..., threading.Timer] = threading.Timer,
    ) -> None:
        self.delay = delay
        self.callback = callback
        self.timer_factory = timer_factory
        self._timer: Optional[threading.Timer] = None
        self._generation = 0
        self._lock = threading.Lock()

    @property
    def pending(self) -> bool:
        return self._timer is not None

    def trigger(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._generation += 1
            timer = self.timer_factory(self.delay, self._fire, args=(self._generation,))
            self._timer = timer
        timer.start()

    def cancel(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    def flush(self) -> bool:
        """Run a pending callback now. Returns False when nothing was pending."""
        with self._lock:
            timer, self._timer = self._timer, None
        if timer is None:
            return False
        timer.cancel()
        self.callback()
        return True

    def _fire(self, generation: int) -> None:
        with self._lock:
            # a newer trigger superseded this timer after it had started running
            if generation != self._generation or self._timer is None:
                return
            self._timer = None
        try:
            self.callback()
        except Exception:
            logger.exception("Debounced callback failed")
