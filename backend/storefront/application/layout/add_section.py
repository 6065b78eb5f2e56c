from typing import Any, Dict, Optional
from storefront.domain.invariants.section import assert_unique_ids
from storefront.domain.section import Section, build_section, new_section_id
from storefront.layout.editor import LayoutEditor
from storefront.utils.audit import log_action


def add_section(
    *,
    editor: LayoutEditor,
    section_type: Optional[str] = None,
    section: Optional[Dict[str, Any]] = None,
    title: Optional[str] = None,
    record: bool = True,
) -> Section:
    """
    Append a section to the layout.

    Either builds one from the registry defaults for ``section_type`` or
    appends a caller-built ``section`` as is (an id is minted only when it
    has none; ``order`` defaults to the current length). A caller-built
    section reusing an existing id raises InvariantViolation.
    """
    store = editor.store

    if section is None:
        if not section_type:
            raise ValueError("Either section_type or section is required")
        new = build_section(section_type, order=len(store), title=title)
    else:
        new = dict(section)
        if not new.get("type"):
            raise ValueError("Section type is required")
        new.setdefault("id", new_section_id(new["type"]))
        new.setdefault("order", len(store))
        assert_unique_ids([*store.sections, new])

    if record:
        editor.history.record()
    store.add(new)

    log_action(
        editor.activity,
        action="add",
        section_id=new["id"],
        details={"type": new["type"]},
    )
    return new
