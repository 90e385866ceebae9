"""Calendar records exchanged with the echo analyzer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from echoguard.domain.model.enums import RecommendedAction, RecordType
from echoguard.domain.model.primitives import calendar_day

if TYPE_CHECKING:
    from datetime import datetime

    from echoguard.domain.model.primitives import RecordId, SourceId, StayDate


@dataclass(frozen=True, slots=True)
class IncomingEvent:
    """A stay parsed from an external calendar feed during one sync cycle."""

    check_in: StayDate
    check_out: StayDate
    source: SourceId
    imported_at: datetime

    @property
    def nights(self) -> int:
        return (calendar_day(self.check_out) - calendar_day(self.check_in)).days


@dataclass(frozen=True, slots=True)
class ExistingRecord:
    """A booking or previously imported event already known for the unit."""

    id: RecordId
    type: RecordType
    check_in: StayDate
    check_out: StayDate
    source: SourceId
    imported_at: datetime

    @property
    def nights(self) -> int:
        return (calendar_day(self.check_out) - calendar_day(self.check_in)).days

    @property
    def is_native_booking(self) -> bool:
        return self.type == RecordType.BOOKING


@dataclass(frozen=True, slots=True)
class EchoMatchResult:
    """Verdict for one incoming event. The caller decides how to act on it."""

    is_probable_echo: bool
    confidence: float
    recommended_action: RecommendedAction
    reasons: tuple[str, ...] = field(default_factory=tuple)
    matched_event_id: RecordId | None = None
    matched_booking_id: RecordId | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "is_probable_echo": self.is_probable_echo,
            "confidence": self.confidence,
            "recommended_action": self.recommended_action.value,
            "reasons": list(self.reasons),
            "matched_event_id": self.matched_event_id,
            "matched_booking_id": self.matched_booking_id,
        }
