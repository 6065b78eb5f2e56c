from collections import Counter
from typing import Any, Dict, List, Optional
from storefront.domain.section import Section


def search_sections(
    sections: List[Section],
    *,
    term: Optional[str] = None,
    filter_by: str = "all",
) -> List[Section]:
    """
    Case-insensitive match of ``term`` on title or type, then one filter:
    all | enabled | disabled | <section type>.
    """
    needle = (term or "").strip().lower()

    def matches(section: Section) -> bool:
        if needle:
            title = str(section.get("title") or "").lower()
            kind = str(section.get("type") or "").lower()
            if needle not in title and needle not in kind:
                return False

        if filter_by == "all":
            return True
        if filter_by == "enabled":
            return bool(section.get("enabled"))
        if filter_by == "disabled":
            return not section.get("enabled")
        return section.get("type") == filter_by

    return [s for s in sections if matches(s)]


def summarize_layout(sections: List[Section]) -> Dict[str, Any]:
    counts = Counter(s.get("type") for s in sections)
    enabled = sum(1 for s in sections if s.get("enabled"))

    return {
        "total": len(sections),
        "enabled": enabled,
        "disabled": len(sections) - enabled,
        "types": len(counts),
        "type_distribution": [
            {"type": section_type, "count": count}
            for section_type, count in counts.items()
        ],
    }
