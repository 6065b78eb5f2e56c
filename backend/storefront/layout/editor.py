# storefront/layout/editor.py
from __future__ import annotations

import logging
import threading
from typing import Callable, Optional

from storefront.domain.exceptions import PersistenceError

from .activity import ActivityLog
from .autosave import Debouncer
from .history import CommandHistory
from .store import LayoutStore

logger = logging.getLogger(__name__)


class LayoutEditor:
    """
    One editing session over a store's layout: the Layout Store, its
    undo/redo history, the activity log and the debounced autosave.
    """

    def __init__(
        self,
        store: LayoutStore,
        *,
        undo_depth: int = 10,
        activity_limit: int = 50,
        autosave: bool = True,
        autosave_delay: float = 1.0,
        timer_factory: Callable[..., threading.Timer] = threading.Timer,
    ) -> None:
        self.store = store
        self.history = CommandHistory(store, depth=undo_depth)
        self.activity = ActivityLog(limit=activity_limit)
        self.save_error: Optional[str] = None

        self.autosave: Optional[Debouncer] = None
        if autosave:
            self.autosave = Debouncer(autosave_delay, self._autosave, timer_factory=timer_factory)
            store.subscribe(self.autosave.trigger)

    def open(self) -> "LayoutEditor":
        self.store.load()
        return self

    def save(self) -> None:
        """
        Explicit save, bypassing the debounce. A pending autosave still
        fires later and writes the same state again.
        """
        try:
            self.store.save()
        except PersistenceError as exc:
            self.save_error = str(exc)
            raise
        self.save_error = None

    def flush(self) -> bool:
        if self.autosave is None:
            return False
        return self.autosave.flush()

    def _autosave(self) -> None:
        try:
            self.store.save()
        except PersistenceError as exc:
            # surfaced through save_error; the next change retries
            self.save_error = str(exc)
            return
        self.save_error = None
