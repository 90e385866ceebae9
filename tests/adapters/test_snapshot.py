from __future__ import annotations

import json
from datetime import UTC, date, datetime
from typing import TYPE_CHECKING

import pytest

from echoguard.adapters.snapshot import SnapshotError, load_snapshot, parse_snapshot
from echoguard.domain.model import RecordType

if TYPE_CHECKING:
    from pathlib import Path


def _snapshot() -> dict[str, object]:
    return {
        "event": {
            "checkIn": "2025-07-10",
            "checkOut": "2025-07-17",
            "source": "holiday-home",
            "importedAt": "2025-06-11T15:00:00Z",
        },
        "existing": [
            {
                "id": "b1",
                "type": "booking",
                "check_in": "2025-06-11",
                "check_out": "2025-06-18",
                "source": "direct",
                "imported_at": "2025-06-11T12:00:00",
            }
        ],
    }


def test_parse_snapshot_accepts_both_spellings() -> None:
    events, records = parse_snapshot(_snapshot())

    assert len(events) == 1
    event = events[0]
    assert event.check_in == date(2025, 7, 10)
    assert event.source == "holiday-home"
    assert event.imported_at == datetime(2025, 6, 11, 15, tzinfo=UTC)
    assert event.nights == 7

    assert len(records) == 1
    record = records[0]
    assert record.id == "b1"
    assert record.type is RecordType.BOOKING
    assert record.imported_at == datetime(2025, 6, 11, 12, tzinfo=UTC)


def test_parse_snapshot_combines_event_and_events() -> None:
    data = _snapshot()
    data["events"] = [
        {
            "check_in": "2025-08-01",
            "check_out": "2025-08-03",
            "source": "atraveo",
            "imported_at": "2025-06-11T18:00:00Z",
        }
    ]

    events, _ = parse_snapshot(data)

    assert [event.source for event in events] == ["holiday-home", "atraveo"]


def test_inverted_stay_is_rejected() -> None:
    data = _snapshot()
    data["event"] = {
        "checkIn": "2025-07-17",
        "checkOut": "2025-07-17",
        "source": "adriagate",
        "importedAt": "2025-06-11T15:00:00Z",
    }

    with pytest.raises(SnapshotError, match="must be after check_in"):
        parse_snapshot(data)


def test_unknown_record_type_is_rejected() -> None:
    data = _snapshot()
    data["existing"] = [
        {
            "id": "x",
            "type": "blocked_dates",
            "check_in": "2025-06-11",
            "check_out": "2025-06-18",
            "source": "direct",
            "imported_at": "2025-06-11T12:00:00Z",
        }
    ]

    with pytest.raises(SnapshotError):
        parse_snapshot(data)


def test_snapshot_without_events_is_rejected() -> None:
    with pytest.raises(SnapshotError, match="must contain"):
        parse_snapshot({"existing": []})


def test_load_snapshot_reads_file(tmp_path: Path) -> None:
    path = tmp_path / "unit.json"
    path.write_text(json.dumps(_snapshot()), encoding="utf-8")

    events, records = load_snapshot(path)

    assert len(events) == 1
    assert len(records) == 1


def test_load_snapshot_rejects_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(SnapshotError, match="not valid JSON"):
        load_snapshot(path)


def test_load_snapshot_reports_missing_file(tmp_path: Path) -> None:
    with pytest.raises(SnapshotError, match="Cannot read snapshot"):
        load_snapshot(tmp_path / "missing.json")
