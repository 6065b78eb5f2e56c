# storefront/layout/activity.py
from __future__ import annotations

import threading
import uuid
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from storefront.utils.timestamps import utc_now


@dataclass(frozen=True)
class ActivityEntry:
    action: str
    section_id: Optional[str]
    details: Dict[str, Any] = field(default_factory=dict)
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    timestamp: datetime = field(default_factory=utc_now)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "action": self.action,
            "section_id": self.section_id,
            "timestamp": self.timestamp.isoformat(),
            "details": self.details,
        }


class ActivityLog:
    """
    Append-only record of builder actions, ring-buffered to the most
    recent ``limit`` entries. Display only; nothing in the engine reads it.
    """

    def __init__(self, limit: int = 50) -> None:
        self._entries: deque[ActivityEntry] = deque(maxlen=limit)
        self._lock = threading.Lock()

    def record(
        self,
        action: str,
        section_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> ActivityEntry:
        entry = ActivityEntry(action=action, section_id=section_id, details=details or {})
        with self._lock:
            self._entries.append(entry)
        return entry

    def recent(
        self,
        limit: Optional[int] = None,
        since: Optional[datetime] = None,
    ) -> List[ActivityEntry]:
        """Most recent first."""
        with self._lock:
            entries = list(reversed(self._entries))

        if since is not None:
            entries = [e for e in entries if e.timestamp > since]
        if limit is not None:
            entries = entries[:limit]
        return entries

    def __len__(self) -> int:
        return len(self._entries)
