import json
from typing import Any, Dict, List
from storefront.domain.exceptions import LayoutImportError
from storefront.domain.section import Section, new_section_id
from storefront.layout.editor import LayoutEditor
from storefront.utils.audit import log_action


def parse_import_document(raw: str | bytes) -> List[Dict[str, Any]]:
    """
    Parse an import file into section-shaped dicts.

    Accepts a bare array or an object with a ``sections`` array. Entries
    must be JSON objects; their fields are not checked otherwise.
    Raises LayoutImportError before anything is applied.
    """
    try:
        document = json.loads(raw)
    except (ValueError, TypeError) as exc:
        raise LayoutImportError(
            "Failed to import components. Please check the file format."
        ) from exc

    if isinstance(document, dict) and "sections" in document:
        document = document["sections"]

    if not isinstance(document, list):
        raise LayoutImportError("Import file must contain a list of sections")

    for index, item in enumerate(document):
        if not isinstance(item, dict):
            raise LayoutImportError(f"Import entry {index} is not a section object")

    return document


def import_sections(
    *,
    editor: LayoutEditor,
    raw: str | bytes,
    replace: bool = False,
    record: bool = True,
) -> List[Section]:
    """
    Append (or, with ``replace``, substitute) imported sections.

    Imported ids are never trusted: each section gets a fresh id and an
    ``order`` equal to the layout length when it is appended, one at a
    time. Unknown fields and types pass through untouched.
    """
    entries = parse_import_document(raw)
    store = editor.store

    if record:
        editor.history.record()

    if replace:
        store.replace_all([])

    imported: List[Section] = []
    for entry in entries:
        section = {
            **entry,
            "id": new_section_id(entry.get("type") or "section"),
            "order": len(store),
        }
        store.add(section)
        imported.append(section)
        log_action(editor.activity, action="import", section_id=section["id"])

    return imported
