"""Translate snapshot payloads into domain records."""

from __future__ import annotations

import json
from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import ValidationError

from echoguard.domain.model import ExistingRecord, IncomingEvent, RecordType, ensure_utc

from .schema import UnitSnapshot

if TYPE_CHECKING:
    from pathlib import Path

    from .schema import EventPayload, RecordPayload

log = getLogger(__name__)


class SnapshotError(ValueError):
    """Raised when a snapshot cannot be read or does not validate."""


def parse_incoming_event(payload: EventPayload) -> IncomingEvent:
    return IncomingEvent(
        check_in=payload.check_in,
        check_out=payload.check_out,
        source=payload.source,
        imported_at=ensure_utc(payload.imported_at),
    )


def parse_existing_record(payload: RecordPayload) -> ExistingRecord:
    return ExistingRecord(
        id=payload.id,
        type=RecordType(payload.type),
        check_in=payload.check_in,
        check_out=payload.check_out,
        source=payload.source,
        imported_at=ensure_utc(payload.imported_at),
    )


def parse_snapshot(data: object) -> tuple[list[IncomingEvent], list[ExistingRecord]]:
    """Validate a decoded snapshot and return its incoming events and known records."""

    try:
        snapshot = UnitSnapshot.model_validate(data)
    except ValidationError as exc:
        raise SnapshotError(f"Invalid snapshot: {exc}") from exc

    events = [parse_incoming_event(payload) for payload in snapshot.incoming]
    records = [parse_existing_record(payload) for payload in snapshot.existing]
    return events, records


def load_snapshot(path: Path) -> tuple[list[IncomingEvent], list[ExistingRecord]]:
    try:
        with path.open(encoding="utf-8") as handle:
            data = json.load(handle)
    except OSError as exc:
        raise SnapshotError(f"Cannot read snapshot {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise SnapshotError(f"Snapshot {path} is not valid JSON: {exc}") from exc

    events, records = parse_snapshot(data)
    log.debug("Loaded snapshot %s: events=%s, records=%s", path, len(events), len(records))
    return events, records
