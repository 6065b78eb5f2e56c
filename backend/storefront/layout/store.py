# storefront/layout/store.py
from __future__ import annotations

import copy
import json
import logging
import threading
from datetime import datetime
from typing import Any, Callable, Iterable, List, Mapping, Optional

from storefront.domain.exceptions import PersistenceError
from storefront.domain.section import Section, hydrate_section
from storefront.domain.templates import default_layout
from storefront.utils.order import compact_order
from storefront.utils.timestamps import utc_now

from .storage import LocalStorage, NullRemoteSync, RemoteSync

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "store-page-layout"


class LayoutStore:
    """
    Canonical ordered collection of page sections for one store.

    Mutations are synchronous and never raise for absent ids. Apart from
    ``reorder`` they do not touch ``order``: callers keep positions
    contiguous themselves or follow up with ``reorder``.

    Readers always receive deep copies, so the collection only changes
    through the methods below.
    """

    def __init__(
        self,
        storage: LocalStorage,
        *,
        storage_key: str = DEFAULT_STORAGE_KEY,
        remote: Optional[RemoteSync] = None,
    ) -> None:
        self.storage = storage
        self.storage_key = storage_key
        self.remote = remote or NullRemoteSync()
        self.is_loading = False
        self.last_saved_at: Optional[datetime] = None

        self._sections: List[Section] = []
        self._listeners: List[Callable[[], None]] = []
        self._lock = threading.RLock()
        self._save_lock = threading.RLock()

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    @property
    def sections(self) -> List[Section]:
        with self._lock:
            return copy.deepcopy(self._sections)

    def get(self, section_id: str) -> Optional[Section]:
        with self._lock:
            for section in self._sections:
                if section.get("id") == section_id:
                    return copy.deepcopy(section)
        return None

    def __len__(self) -> int:
        with self._lock:
            return len(self._sections)

    def __contains__(self, section_id: object) -> bool:
        return self.get(section_id) is not None  # type: ignore[arg-type]

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def replace_all(self, sections: Iterable[Section]) -> None:
        """Install ``sections`` verbatim; ``order`` is not renumbered."""
        with self._lock:
            self._sections = copy.deepcopy(list(sections))
        self._notify()

    def add(self, section: Section) -> None:
        # No duplicate-id check: ids come from new_section_id()
        with self._lock:
            self._sections.append(copy.deepcopy(section))
        self._notify()

    def update(self, section_id: str, fields: Mapping[str, Any]) -> bool:
        """
        Shallow-merge ``fields`` into the section. Nested objects given in
        ``fields`` replace the old value for that key only.
        Returns False when the id is absent.
        """
        changed = False
        with self._lock:
            for index, section in enumerate(self._sections):
                if section.get("id") != section_id:
                    continue
                merged = {**section, **copy.deepcopy(dict(fields))}
                if merged != section:
                    self._sections[index] = merged
                    changed = True
                break
            else:
                return False

        if changed:
            self._notify()
        return True

    def remove(self, section_id: str) -> bool:
        with self._lock:
            remaining = [s for s in self._sections if s.get("id") != section_id]
            if len(remaining) == len(self._sections):
                return False
            self._sections = remaining
        self._notify()
        return True

    def reorder(self, ordered: Iterable[Section]) -> None:
        """Install ``ordered`` and stamp each section's ``order`` with its index."""
        with self._lock:
            self._sections = compact_order(copy.deepcopy(list(ordered)))
        self._notify()

    # ------------------------------------------------------------------
    # Change listeners
    # ------------------------------------------------------------------

    def subscribe(self, listener: Callable[[], None]) -> None:
        self._listeners.append(listener)

    def _notify(self) -> None:
        if self.is_loading:
            return
        for listener in list(self._listeners):
            listener()

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def load(self) -> List[Section]:
        """
        Install the persisted layout, or the default layout when the store
        has none yet (which is persisted right away).
        """
        self.is_loading = True
        try:
            try:
                raw = self.storage.get_item(self.storage_key)
            except Exception as exc:
                logger.error(f"Failed to read page layout '{self.storage_key}': {exc}")
                self._install(default_layout())
                return self.sections

            if raw is None:
                self._install(default_layout())
                try:
                    self._persist(self.sections)
                except PersistenceError:
                    pass  # already logged; the next save retries
                return self.sections

            self._install(self._decode(raw))
            logger.info(f"Loaded page layout '{self.storage_key}' ({len(self)} sections)")
            return self.sections
        finally:
            self.is_loading = False

    def save(self) -> datetime:
        """
        Write the current collection to local storage, then push it to the
        remote target. Local failures raise PersistenceError; remote
        failures are only logged.
        """
        # snapshot, write and push under one lock
        with self._save_lock:
            sections = self.sections
            self._persist(sections)

            try:
                self.remote.push(sections)
            except Exception as exc:
                logger.warning(f"Remote layout sync failed: {exc}")

            return self.last_saved_at  # type: ignore[return-value]

    def _persist(self, sections: List[Section]) -> None:
        with self._save_lock:
            try:
                payload = json.dumps(sections)
                self.storage.set_item(self.storage_key, payload)
            except Exception as exc:
                logger.error(f"Failed to save page layout '{self.storage_key}': {exc}")
                raise PersistenceError(f"Failed to save page layout: {exc}") from exc

            self.last_saved_at = utc_now()
        logger.info(f"Saved page layout '{self.storage_key}' ({len(sections)} sections)")

    def _install(self, sections: List[Section]) -> None:
        with self._lock:
            self._sections = sections

    def _decode(self, raw: str) -> List[Section]:
        try:
            parsed = json.loads(raw)
        except ValueError as exc:
            logger.warning(f"Stored page layout is not valid JSON, using default: {exc}")
            return default_layout()

        if not isinstance(parsed, list):
            logger.warning("Stored page layout is not a list, using default")
            return default_layout()

        return [hydrate_section(item) for item in parsed if isinstance(item, dict)]
