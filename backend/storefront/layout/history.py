# storefront/layout/history.py
from __future__ import annotations

from collections import deque
from typing import Tuple

from storefront.utils.versioning import restore_sections, snapshot_sections

from .store import LayoutStore


class CommandHistory:
    """
    Linear undo/redo over whole-collection snapshots.

    The caller decides which mutations are reversible by calling
    ``record()`` right before them; nothing is wrapped automatically.
    """

    def __init__(self, store: LayoutStore, depth: int = 10) -> None:
        self.store = store
        self.depth = depth
        self._undo: deque[Tuple] = deque(maxlen=depth)
        self._redo: deque[Tuple] = deque(maxlen=depth)

    @property
    def can_undo(self) -> bool:
        return bool(self._undo)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo)

    def record(self) -> None:
        # deque(maxlen) drops the oldest snapshot when full
        self._undo.append(snapshot_sections(self.store.sections))
        self._redo.clear()

    def undo(self) -> bool:
        if not self._undo:
            return False

        previous = self._undo.pop()
        self._redo.append(snapshot_sections(self.store.sections))
        self.store.replace_all(restore_sections(previous))
        return True

    def redo(self) -> bool:
        if not self._redo:
            return False

        following = self._redo.pop()
        self._undo.append(snapshot_sections(self.store.sections))
        self.store.replace_all(restore_sections(following))
        return True

    def clear(self) -> None:
        self._undo.clear()
        self._redo.clear()
