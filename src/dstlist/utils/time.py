"""Time helpers for service timestamps."""

from datetime import datetime, timezone
from typing import Optional

SERVICE_TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S"


def utc_timestamp(dt: Optional[datetime] = None) -> str:
    """
    Format a UTC timestamp the way the service expects it for signing.

    Args:
        dt: Timezone-aware datetime. Defaults to the current UTC time.

    Returns:
        Timestamp without fractional seconds or offset (e.g. '2014-03-30T01:00:00')

    Raises:
        ValueError: If datetime is naive (not timezone-aware)
    """
    if dt is None:
        dt = datetime.now(timezone.utc)
    if dt.tzinfo is None:
        raise ValueError(
            f"Naive datetime not allowed. Got {dt}. "
            "Use datetime.now(timezone.utc) or dt.replace(tzinfo=timezone.utc)"
        )
    return dt.astimezone(timezone.utc).strftime(SERVICE_TIMESTAMP_FORMAT)


def parse_service_time(value: str) -> datetime:
    """
    Parse an ISO 8601 timestamp as returned by the service.

    Local times come back without an offset and are returned naive; a
    trailing 'Z' or explicit offset yields an aware datetime.

    Raises:
        ValueError: If the value is empty or not ISO 8601
    """
    text = (value or "").strip()
    if not text:
        raise ValueError("Empty timestamp")
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)
