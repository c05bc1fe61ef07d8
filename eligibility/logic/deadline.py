"""
Deadline Gate

A unit that auto-closes after its deadline is excluded once the deadline
has passed, regardless of its requirement rules.
"""

from datetime import datetime, timezone
from typing import Optional

from .contracts import AdmissionUnit


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Naive datetimes are taken to be UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def is_closed(unit: AdmissionUnit, now: datetime) -> bool:
    """
    True if the unit auto-closes and its deadline lies before `now`.
    A deadline equal to `now` is still open.
    """
    if not unit.auto_close_after_deadline or unit.application_deadline is None:
        return False
    return as_utc(unit.application_deadline) < as_utc(now)
