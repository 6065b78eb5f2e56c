# storefront/normalizers/activity.py
from __future__ import annotations

from typing import Any, Dict, List


def normalize_activity(entries) -> Dict[str, Any]:
    """
    Normalizes activity entries into API-safe JSON, newest first.

    Notes:
    - section_id is null for layout-wide actions (reorder, undo, templates)
    """
    items: List[Dict[str, Any]] = [entry.to_dict() for entry in entries]
    return {
        "items": items,
        "count": len(items),
    }
