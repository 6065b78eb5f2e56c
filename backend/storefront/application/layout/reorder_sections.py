from typing import Iterable, List
from storefront.domain.section import Section
from storefront.layout.editor import LayoutEditor
from storefront.utils.audit import log_action


def reorder_sections(
    *,
    editor: LayoutEditor,
    section_ids: Iterable[str],
    record: bool = True,
) -> List[Section]:
    """
    Reorder the layout by a list of ids and re-stamp ``order``.

    Ids not in the layout are ignored; sections missing from the list
    keep their relative order after the listed ones, so a stale client
    list can never drop a section.
    """
    store = editor.store
    current = store.sections
    by_id = {s.get("id"): s for s in current}

    ordered: List[Section] = []
    seen = set()
    for section_id in section_ids:
        if section_id in by_id and section_id not in seen:
            ordered.append(by_id[section_id])
            seen.add(section_id)

    ordered.extend(s for s in current if s.get("id") not in seen)

    if record:
        editor.history.record()
    store.reorder(ordered)

    log_action(
        editor.activity,
        action="reorder",
        section_id=None,
        details={"order": [s.get("id") for s in ordered]},
    )
    return store.sections
