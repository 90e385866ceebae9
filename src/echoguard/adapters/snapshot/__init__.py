"""Public interface for the unit snapshot adapter."""

from __future__ import annotations

from .schema import EventPayload, RecordPayload, UnitSnapshot
from .translator import (
    SnapshotError,
    load_snapshot,
    parse_existing_record,
    parse_incoming_event,
    parse_snapshot,
)

__all__ = [
    "EventPayload",
    "RecordPayload",
    "SnapshotError",
    "UnitSnapshot",
    "load_snapshot",
    "parse_existing_record",
    "parse_incoming_event",
    "parse_snapshot",
]
