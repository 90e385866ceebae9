from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from echoguard.config import (
    ENV_AUTO_SKIP_THRESHOLD,
    ENV_ECHO_WINDOW_HOURS,
    ENV_FLAG_REVIEW_THRESHOLD,
    ENV_RACE_WINDOW_MINUTES,
)

if TYPE_CHECKING:
    from pathlib import Path

UNIT_SNAPSHOT: dict[str, object] = {
    "event": {
        "checkIn": "2025-07-10",
        "checkOut": "2025-07-17",
        "source": "holiday-home",
        "importedAt": "2025-06-11T15:00:00Z",
    },
    "events": [
        {
            "check_in": "2025-09-01",
            "check_out": "2025-09-05",
            "source": "atraveo",
            "imported_at": "2025-06-11T15:00:00Z",
        }
    ],
    "existing": [
        {
            "id": "b1",
            "type": "booking",
            "check_in": "2025-06-11",
            "check_out": "2025-06-18",
            "source": "direct",
            "imported_at": "2025-06-11T12:00:00Z",
        },
        {
            "id": "e1",
            "type": "ical_event",
            "check_in": "2025-10-01",
            "check_out": "2025-10-05",
            "source": "airbnb",
            "imported_at": "2025-06-10T08:00:00Z",
        },
    ],
}


@pytest.fixture(autouse=True)
def _isolate_policy_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        ENV_AUTO_SKIP_THRESHOLD,
        ENV_FLAG_REVIEW_THRESHOLD,
        ENV_ECHO_WINDOW_HOURS,
        ENV_RACE_WINDOW_MINUTES,
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def unit_snapshot_path(tmp_path: Path) -> Path:
    path = tmp_path / "unit.json"
    path.write_text(json.dumps(UNIT_SNAPSHOT), encoding="utf-8")
    return path
