from datetime import datetime, timezone
from dateutil.parser import parse


def utc_now():
    return datetime.now(timezone.utc)


def normalize_ts(ts):
    """
    Ensure datetime is timezone-aware.
    Defaults to UTC if naive.
    """
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts


def parse_timestamp(raw):
    """
    Parse a client supplied timestamp (ISO-8601 or any dateutil format).
    Raises ValueError on garbage.
    """
    try:
        return normalize_ts(parse(raw))
    except (TypeError, OverflowError, ValueError) as exc:
        raise ValueError(f"Invalid timestamp: {raw!r}") from exc
