from typing import List
from storefront.domain.section import Section, new_section_id
from storefront.domain.templates import get_component_template, get_layout_template
from storefront.layout.editor import LayoutEditor
from storefront.utils.audit import log_action


def apply_layout_template(
    *,
    editor: LayoutEditor,
    template_id: str,
    record: bool = True,
) -> List[Section]:
    """
    Replace the whole layout with a template's sections.

    The template's sections are installed verbatim (ids and order as
    authored); the previous layout is only reachable through undo.
    """
    template = get_layout_template(template_id)

    if record:
        editor.history.record()
    editor.store.replace_all(template["sections"])

    log_action(
        editor.activity,
        action="template_applied",
        section_id=None,
        details={"template_id": template_id, "mode": "replace"},
    )
    return editor.store.sections


def append_component_template(
    *,
    editor: LayoutEditor,
    template_id: str,
    record: bool = True,
) -> Section:
    """Build one section from a component template and append it."""
    template = get_component_template(template_id)
    entry = template["section"]
    store = editor.store

    section = {
        "id": new_section_id(template["type"]),
        "type": template["type"],
        "title": entry.get("title") or template["name"],
        "order": len(store),
        "enabled": True,
        "settings": entry.get("settings") or {},
    }
    for optional in ("animations", "responsive"):
        if entry.get(optional) is not None:
            section[optional] = entry[optional]

    if record:
        editor.history.record()
    store.add(section)

    log_action(
        editor.activity,
        action="template_applied",
        section_id=section["id"],
        details={"template_id": template_id, "mode": "append"},
    )
    return section
