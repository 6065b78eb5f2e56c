from storefront.layout.editor import LayoutEditor
from storefront.utils.audit import log_action


def undo(*, editor: LayoutEditor) -> bool:
    if not editor.history.undo():
        return False
    log_action(editor.activity, action="undo", section_id=None)
    return True


def redo(*, editor: LayoutEditor) -> bool:
    if not editor.history.redo():
        return False
    log_action(editor.activity, action="redo", section_id=None)
    return True
