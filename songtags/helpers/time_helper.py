"""Time utility helpers."""

from datetime import datetime, timezone


def parse_iso8601_epoch(text: str) -> int:
    """
    Convert an ISO-8601 UTC timestamp to seconds since epoch.

    Accepts the server's "2021-03-04T05:06:07Z" form as well as explicit
    offsets. Naive timestamps are treated as UTC.

    Args:
        text: Timestamp string

    Returns:
        Integer seconds since epoch, or 0 if the text cannot be parsed
    """
    value = text.strip()
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return 0
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return int(parsed.timestamp())
