from storefront.layout.editor import LayoutEditor
from storefront.utils.audit import log_action

ALLOWED_DIRECTIONS = {"up", "down"}


def move_section(
    *,
    editor: LayoutEditor,
    section_id: str,
    direction: str,
    record: bool = True,
) -> bool:
    """
    Swap a section with its neighbour and re-stamp ``order``.
    Moving the first section up or the last one down does nothing.
    """
    if direction not in ALLOWED_DIRECTIONS:
        raise ValueError(f"Invalid direction: {direction}")

    store = editor.store
    sections = store.sections
    index = next(
        (i for i, s in enumerate(sections) if s.get("id") == section_id),
        None,
    )
    if index is None:
        return False

    target = index - 1 if direction == "up" else index + 1
    if target < 0 or target >= len(sections):
        return False

    sections[index], sections[target] = sections[target], sections[index]

    if record:
        editor.history.record()
    store.reorder(sections)

    log_action(editor.activity, action=f"move_{direction}", section_id=section_id)
    return True
