from storefront.application.layout.query_sections import summarize_layout
from .section import normalize_section


def normalize_layout(editor, admin=True):
    sections = editor.store.sections
    last_saved_at = editor.store.last_saved_at

    return {
        "sections": [normalize_section(s, admin=admin) for s in sections],
        "can_undo": editor.history.can_undo,
        "can_redo": editor.history.can_redo,
        "last_saved_at": last_saved_at.isoformat() if last_saved_at else None,
        "save_error": editor.save_error,
        "summary": summarize_layout(sections),
    }
