# storefront/layout/sessions.py
from __future__ import annotations

import atexit
import threading
from typing import Any, Callable, Dict, Optional

from .editor import LayoutEditor
from .storage import LocalStorage, RemoteSync
from .store import DEFAULT_STORAGE_KEY, LayoutStore


class LayoutEditors:
    """
    Per-store registry of editor sessions, Flask-extension style.

    A store's editor is created and loaded on first use and then kept for
    the life of the process (one editor per store).
    """

    def __init__(self, app=None) -> None:
        self._editors: Dict[str, LayoutEditor] = {}
        self._lock = threading.Lock()
        self.storage_factory: Optional[Callable[[str], LocalStorage]] = None
        self.remote_factory: Optional[Callable[[str], RemoteSync]] = None
        self.options: Dict[str, Any] = {}
        self._flush_registered = False
        if app is not None:
            self.init_app(app)

    def init_app(
        self,
        app,
        storage_factory: Optional[Callable[[str], LocalStorage]] = None,
        remote_factory: Optional[Callable[[str], RemoteSync]] = None,
    ) -> None:
        self.storage_factory = storage_factory
        self.remote_factory = remote_factory

        self.options = {
            "storage_key": app.config.get("LAYOUT_STORAGE_KEY", DEFAULT_STORAGE_KEY),
            "undo_depth": app.config.get("LAYOUT_UNDO_DEPTH", 10),
            "activity_limit": app.config.get("LAYOUT_ACTIVITY_LIMIT", 50),
            "autosave": app.config.get("LAYOUT_AUTOSAVE_ENABLED", True),
            "autosave_delay": app.config.get("LAYOUT_AUTOSAVE_DELAY", 1.0),
        }
        self._editors.clear()
        app.extensions["layout_editors"] = self

        # pending autosaves are written before the process exits
        if not self._flush_registered:
            atexit.register(self.flush_all)
            self._flush_registered = True

    def get(self, store_id: str) -> LayoutEditor:
        with self._lock:
            editor = self._editors.get(store_id)
            if editor is None:
                editor = self._create(store_id).open()
                self._editors[store_id] = editor
            return editor

    def flush_all(self) -> None:
        with self._lock:
            editors = list(self._editors.values())
        for editor in editors:
            editor.flush()

    def _create(self, store_id: str) -> LayoutEditor:
        if self.storage_factory is None:
            raise RuntimeError("LayoutEditors has no storage_factory configured")

        options = dict(self.options)
        store = LayoutStore(
            self.storage_factory(store_id),
            storage_key=options.pop("storage_key"),
            remote=self.remote_factory(store_id) if self.remote_factory else None,
        )
        return LayoutEditor(store, **options)
