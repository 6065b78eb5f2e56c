# storefront/domain/section.py
from __future__ import annotations

import copy
import time
import uuid
from typing import Any, Dict, Optional

from .registry import describe, type_label

Section = Dict[str, Any]

COPY_SUFFIX = " (Copy)"


def new_section_id(prefix: Any = "section") -> str:
    """
    Collision-free section id: type prefix, millisecond timestamp and a
    random suffix so ids minted in the same millisecond still differ.
    """
    return f"{prefix}-{int(time.time() * 1000)}-{uuid.uuid4().hex[:8]}"


def build_section(
    section_type: str,
    *,
    order: int,
    title: Optional[str] = None,
    settings: Optional[Dict[str, Any]] = None,
) -> Section:
    defaults = describe(section_type)

    return {
        "id": new_section_id(section_type),
        "type": section_type,
        "title": title or f"New {type_label(section_type)}",
        "enabled": True,
        "order": order,
        "settings": settings if settings is not None else defaults["default_settings"],
        "animations": defaults["default_animations"],
    }


def copy_section(section: Section, *, order: int, title_suffix: str = COPY_SUFFIX) -> Section:
    duplicate = copy.deepcopy(section)
    duplicate["id"] = new_section_id(section.get("type", "section"))
    duplicate["title"] = f"{section.get('title', '')}{title_suffix}"
    duplicate["order"] = order
    return duplicate


def hydrate_section(section: Section) -> Section:
    """
    Fill the registry-defined fields (settings, animations) that older
    persisted documents may lack. Present fields are never touched and
    ``enabled`` is left absent, so an unflagged section stays hidden.
    """
    defaults = describe(section.get("type"))
    hydrated = dict(section)

    hydrated.setdefault("settings", defaults["default_settings"])
    hydrated.setdefault("animations", defaults["default_animations"])
    return hydrated
