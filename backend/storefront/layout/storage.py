# storefront/layout/storage.py
from __future__ import annotations

import threading
from typing import Any, Dict, List, Optional, Protocol

import httpx


class LocalStorage(Protocol):
    """Key/value string storage with localStorage semantics."""

    def get_item(self, key: str) -> Optional[str]: ...

    def set_item(self, key: str, value: str) -> None: ...


class RemoteSync(Protocol):
    """Secondary, best-effort persistence target behind ``save()``."""

    def push(self, sections: List[Dict[str, Any]]) -> None: ...


class MemoryStorage:
    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._items: Dict[str, str] = dict(initial or {})
        self._lock = threading.Lock()
        self.writes: List[str] = []

    def get_item(self, key: str) -> Optional[str]:
        with self._lock:
            return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        with self._lock:
            self._items[key] = value
            self.writes.append(key)


class NullRemoteSync:
    def push(self, sections: List[Dict[str, Any]]) -> None:
        return None


class HttpRemoteSync:
    """
    Pushes the layout as JSON to ``url`` (PUT), tagged with the store id.

    Errors propagate; ``LayoutStore.save`` treats them as best-effort and
    only logs them.
    """

    def __init__(
        self,
        url: str,
        store_id: str,
        *,
        timeout: float = 10.0,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self.url = url
        self.store_id = store_id
        self.timeout = timeout
        self._client = client

    def push(self, sections: List[Dict[str, Any]]) -> None:
        headers = {"X-Store-ID": self.store_id}

        if self._client is not None:
            resp = self._client.put(self.url, json=sections, headers=headers, timeout=self.timeout)
        else:
            with httpx.Client() as client:
                resp = client.put(self.url, json=sections, headers=headers, timeout=self.timeout)
        resp.raise_for_status()
