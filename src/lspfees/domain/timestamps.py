"""Shared UTC timestamp layout used for ``valid_until``.

Producer and consumer must agree byte for byte, so both sides go through
``format_timestamp``/``parse_timestamp`` and never through ``isoformat``.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone

# ISO-8601 UTC with millisecond precision, trailing zeros trimmed.
TIME_FORMAT = "%Y-%m-%dT%H:%M:%S"

_TIMESTAMP_RE = re.compile(
    r"([0-9]{4})-([0-9]{2})-([0-9]{2})T([0-9]{2}):([0-9]{2}):([0-9]{2})(?:\.([0-9]+))?Z"
)


def format_timestamp(value: datetime) -> str:
    """Render ``value`` in the shared layout, e.g. ``2024-05-01T12:00:00.5Z``."""
    if value.tzinfo is None:
        raise ValueError("Timestamp must be timezone-aware")
    value = value.astimezone(timezone.utc)
    text = value.strftime(TIME_FORMAT)
    millis = value.microsecond // 1000
    if millis:
        text += "." + f"{millis:03d}".rstrip("0")
    return text + "Z"


def parse_timestamp(text: str) -> datetime:
    """Parse a timestamp in the shared layout. Raises ValueError when it does not match."""
    match = _TIMESTAMP_RE.fullmatch(text)
    if not match:
        raise ValueError(f"Timestamp {text!r} does not match the expected layout")
    year, month, day, hour, minute, second, fraction = match.groups()
    microsecond = int((fraction or "0")[:6].ljust(6, "0"))
    return datetime(
        int(year),
        int(month),
        int(day),
        int(hour),
        int(minute),
        int(second),
        microsecond,
        tzinfo=timezone.utc,
    )
