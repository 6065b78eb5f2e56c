import logging
from typing import Optional

logger = logging.getLogger("storefront.activity")


def log_action(
    activity,
    *,
    action: str,
    section_id: Optional[str],
    details: dict | None = None
):
    """Append to the editor's activity log and mirror it to the logger."""
    entry = activity.record(action, section_id, details or {})
    logger.debug(f"{action} section={section_id} details={entry.details}")
    return entry
