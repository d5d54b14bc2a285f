"""Relative age rendering for resource creation timestamps."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

_DAY = timedelta(days=1)
_HOUR = timedelta(hours=1)
_MINUTE = timedelta(minutes=1)

UNKNOWN_AGE = "Unknown"


def _as_aware(value: datetime) -> datetime:
    """Treat naive datetimes as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def format_age(created: datetime | None, now: datetime) -> str:
    """Render the time since ``created`` as a coarse duration.

    Buckets are checked from largest to smallest and always truncate:
    ``"{n}d"`` from one day, ``"{n}h"`` from one hour, ``"{n}m"`` from one
    minute, otherwise ``"{n}s"``.

    Args:
        created: Creation instant of the resource.
        now: Reference instant, usually sampled once per refresh.

    Returns:
        Age string such as ``"3d"`` or ``"45s"``.
    """
    if created is None:
        return UNKNOWN_AGE

    delta = _as_aware(now) - _as_aware(created)
    if delta >= _DAY:
        return f"{delta // _DAY}d"
    if delta >= _HOUR:
        return f"{delta // _HOUR}h"
    if delta >= _MINUTE:
        return f"{delta // _MINUTE}m"
    return f"{int(delta.total_seconds())}s"
