"""Public domain model surface."""

from __future__ import annotations

from echoguard.domain.model.calendar import EchoMatchResult, ExistingRecord, IncomingEvent
from echoguard.domain.model.enums import PlatformType, RecommendedAction, RecordType
from echoguard.domain.model.primitives import (
    RecordId,
    SourceId,
    StayDate,
    calendar_day,
    ensure_utc,
)

__all__ = [
    "EchoMatchResult",
    "ExistingRecord",
    "IncomingEvent",
    "PlatformType",
    "RecommendedAction",
    "RecordId",
    "RecordType",
    "SourceId",
    "StayDate",
    "calendar_day",
    "ensure_utc",
]
