from storefront.layout.editor import LayoutEditor
from storefront.utils.audit import log_action


def delete_section(
    *,
    editor: LayoutEditor,
    section_id: str,
    record: bool = True,
) -> bool:
    """
    Remove a section. Deleting an absent id is a no-op so a double
    click or a delete racing a duplicate never fails.
    """
    section = editor.store.get(section_id)
    if section is None:
        return False

    if record:
        editor.history.record()
    editor.store.remove(section_id)

    log_action(
        editor.activity,
        action="delete",
        section_id=section_id,
        details={"title": section.get("title")},
    )
    return True
