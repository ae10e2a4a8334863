# timeslots.py
from __future__ import annotations
from datetime import datetime, timedelta, timezone
from typing import Any, List

from dateutil.parser import isoparse

from errors import ValidationError

SLOT = timedelta(hours=1)
SUGGESTION_COUNT = 24


def parse_instant(value: Any) -> datetime:
    """Parse an ISO-8601 string (or datetime) into an aware UTC datetime.

    Naive values are read as UTC. Raises ValidationError when the value
    cannot be parsed or has no UTC equivalent (e.g. year 1 at +01:00).
    """
    if not isinstance(value, datetime) and (not isinstance(value, str) or not value):
        raise ValidationError(f"Invalid timestamp: {value!r}")
    try:
        dt = value if isinstance(value, datetime) else isoparse(value)
        if dt.tzinfo is None:
            return dt.replace(tzinfo=timezone.utc)
        return dt.astimezone(timezone.utc)
    except (ValueError, OverflowError):
        raise ValidationError(f"Invalid timestamp: {value!r}") from None


def is_hour_aligned(value: Any) -> bool:
    try:
        dt = parse_instant(value)
    except ValidationError:
        return False
    return dt.minute == 0 and dt.second == 0 and dt.microsecond == 0


def format_instant(dt: datetime) -> str:
    dt = parse_instant(dt)
    return dt.replace(tzinfo=None).isoformat(timespec="milliseconds") + "Z"


def floor_to_hour(dt: datetime) -> datetime:
    return parse_instant(dt).replace(minute=0, second=0, microsecond=0)


def hourly_slots(anchor: datetime, count: int = SUGGESTION_COUNT) -> List[datetime]:
    # first candidate is the anchor's own hour; stops early at datetime.max
    start = floor_to_hour(anchor)
    slots = []
    for i in range(count):
        try:
            slots.append(start + i * SLOT)
        except OverflowError:
            break
    return slots
