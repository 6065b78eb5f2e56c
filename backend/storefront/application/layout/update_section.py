from typing import Any, Dict
from storefront.domain.registry import describe
from storefront.layout.editor import LayoutEditor
from storefront.utils.audit import log_action

IMMUTABLE_FIELDS = {"id"}


def update_section(
    *,
    editor: LayoutEditor,
    section_id: str,
    data: Dict[str, Any],
    record: bool = True,
) -> bool:
    """
    Shallow-merge top-level fields into one section.

    Design rules:
    - ``id`` never changes
    - an absent id is a no-op, not an error (returns False)
    - changing ``type`` without new ``settings`` resets settings to the
      new type's defaults
    - an update that changes nothing records no undo step
    """
    store = editor.store
    current = store.get(section_id)
    if current is None:
        return False

    fields = {k: v for k, v in data.items() if k not in IMMUTABLE_FIELDS}
    if not fields:
        return True

    new_type = fields.get("type")
    if new_type is not None and new_type != current.get("type") and "settings" not in fields:
        fields["settings"] = describe(new_type)["default_settings"]

    if all(k in current and current[k] == v for k, v in fields.items()):
        return True

    if record:
        editor.history.record()
    store.update(section_id, fields)

    log_action(
        editor.activity,
        action="update",
        section_id=section_id,
        details={"fields": sorted(fields)},
    )
    return True
