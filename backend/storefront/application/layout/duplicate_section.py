from typing import Optional
from storefront.domain.section import Section, copy_section
from storefront.layout.editor import LayoutEditor
from storefront.utils.audit import log_action


def duplicate_section(
    *,
    editor: LayoutEditor,
    section_id: str,
    record: bool = True,
) -> Optional[Section]:
    """Append a copy of one section (fresh id, " (Copy)" title, order = length)."""
    store = editor.store
    section = store.get(section_id)
    if section is None:
        return None

    duplicate = copy_section(section, order=len(store))

    if record:
        editor.history.record()
    store.add(duplicate)

    log_action(
        editor.activity,
        action="duplicate",
        section_id=section_id,
        details={"new_section_id": duplicate["id"]},
    )
    return duplicate
