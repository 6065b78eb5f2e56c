from typing import Any, Dict, Iterable, List
from storefront.domain.section import copy_section
from storefront.layout.editor import LayoutEditor
from storefront.utils.audit import log_action

ALLOWED_ACTIONS = {"enable", "disable", "delete", "duplicate"}


def bulk_action(
    *,
    editor: LayoutEditor,
    section_ids: Iterable[str],
    action: str,
    confirmed: bool = False,
    record: bool = True,
) -> Dict[str, Any]:
    """
    Apply one action to a selection of sections.

    Responsibilities:
    - enable/disable only touch sections not already in the target state
    - delete needs ``confirmed`` (the UI asks first) and tolerates ids
      that are already gone
    - duplicate appends copies one at a time, each copy's ``order`` being
      the layout length at that moment
    - one history snapshot for the whole batch, none when nothing changes

    The caller's selection is always cleared afterwards, so ``selection``
    in the result is empty.
    """
    if action not in ALLOWED_ACTIONS:
        raise ValueError(f"Invalid action: {action}")

    if action == "delete" and not confirmed:
        raise ValueError("Bulk delete requires confirmation")

    store = editor.store
    selected_ids = list(dict.fromkeys(section_ids))
    wanted = set(selected_ids)
    selected = [s for s in store.sections if s.get("id") in wanted]

    if action in ("enable", "disable"):
        target = action == "enable"
        selected = [s for s in selected if s.get("enabled") is not target]

    affected: List[str] = []
    created: List[str] = []

    if record and selected:
        editor.history.record()

    if action in ("enable", "disable"):
        for section in selected:
            store.update(section["id"], {"enabled": action == "enable"})
            affected.append(section["id"])
            log_action(editor.activity, action=f"bulk_{action}", section_id=section["id"])

    elif action == "delete":
        for section_id in selected_ids:
            if store.remove(section_id):
                affected.append(section_id)
            log_action(editor.activity, action="bulk_delete", section_id=section_id)

    elif action == "duplicate":
        for section in selected:
            duplicate = copy_section(section, order=len(store))
            store.add(duplicate)
            affected.append(section["id"])
            created.append(duplicate["id"])
            log_action(
                editor.activity,
                action="bulk_duplicate",
                section_id=section["id"],
                details={"new_id": duplicate["id"]},
            )

    return {
        "action": action,
        "count": len(affected),
        "affected": affected,
        "created": created,
        "selection": [],
    }
