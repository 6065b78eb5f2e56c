import json
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional
from storefront.domain.section import Section
from storefront.utils.timestamps import utc_now

EXPORT_VERSION = "1.0"


def select_sections(
    sections: List[Section],
    section_ids: Optional[Iterable[str]] = None,
) -> List[Section]:
    """The selected subset in layout order, or everything without a selection."""
    if not section_ids:
        return sections
    wanted = set(section_ids)
    return [s for s in sections if s.get("id") in wanted]


def export_sections(
    sections: List[Section],
    section_ids: Optional[Iterable[str]] = None,
) -> str:
    """Bare JSON array of sections (multi-select or full export)."""
    return json.dumps(select_sections(sections, section_ids), indent=2)


def export_theme(
    sections: List[Section],
    *,
    name: str = "Custom Store Theme",
    now: Optional[datetime] = None,
) -> str:
    """Whole-layout export wrapped with a metadata envelope."""
    created = now or utc_now()
    document: Dict[str, Any] = {
        "sections": sections,
        "metadata": {
            "name": name,
            "created": created.isoformat(),
            "version": EXPORT_VERSION,
            "componentsCount": len(sections),
            "enabledComponents": sum(1 for s in sections if s.get("enabled")),
        },
    }
    return json.dumps(document, indent=2)


def export_filename(prefix: str = "components-export", now: Optional[datetime] = None) -> str:
    return f"{prefix}-{(now or utc_now()).date().isoformat()}.json"
