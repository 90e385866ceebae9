"""Pydantic models describing a unit snapshot handed over by the sync layer."""

from __future__ import annotations

from datetime import date, datetime
from typing import Literal, Self

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

from echoguard.domain.model import calendar_day


def _to_calendar_day(value: object) -> object:
    if isinstance(value, str) and "T" in value:
        normalized = value.strip()
        if normalized.endswith("Z"):
            normalized = normalized[:-1] + "+00:00"
        try:
            value = datetime.fromisoformat(normalized)
        except ValueError:
            return value
    if isinstance(value, datetime):
        return calendar_day(value)
    return value


class SnapshotBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class _StayPayload(SnapshotBaseModel):
    check_in: date = Field(validation_alias=AliasChoices("check_in", "checkIn"))
    check_out: date = Field(validation_alias=AliasChoices("check_out", "checkOut"))
    source: str
    imported_at: datetime = Field(validation_alias=AliasChoices("imported_at", "importedAt"))

    _normalize_days = field_validator("check_in", "check_out", mode="before")(_to_calendar_day)

    @model_validator(mode="after")
    def _check_range(self) -> Self:
        if self.check_out <= self.check_in:
            raise ValueError(
                f"check_out ({self.check_out}) must be after check_in ({self.check_in})"
            )
        return self


class EventPayload(_StayPayload):
    pass


class RecordPayload(_StayPayload):
    id: str
    type: Literal["booking", "ical_event"]


class UnitSnapshot(SnapshotBaseModel):
    event: EventPayload | None = None
    events: list[EventPayload] = Field(default_factory=list["EventPayload"])
    existing: list[RecordPayload] = Field(
        default_factory=list["RecordPayload"],
        validation_alias=AliasChoices("existing", "existingBookings", "existing_records"),
    )

    @model_validator(mode="after")
    def _require_event(self) -> Self:
        if self.event is None and not self.events:
            raise ValueError("snapshot must contain 'event' or a non-empty 'events' list")
        return self

    @property
    def incoming(self) -> list[EventPayload]:
        if self.event is None:
            return list(self.events)
        return [self.event, *self.events]
