"""Domain primitives: scalar aliases + small date helpers."""

from __future__ import annotations

from datetime import UTC, date, datetime
from typing import TypeAlias

RecordId: TypeAlias = str
SourceId: TypeAlias = str
StayDate: TypeAlias = date | datetime


def calendar_day(value: StayDate) -> date:
    """Reduce a stay boundary to its calendar day.

    Aware datetimes are converted to UTC first; naive datetimes are taken as UTC.
    """

    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(UTC)
        return value.date()
    return value


def ensure_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)
