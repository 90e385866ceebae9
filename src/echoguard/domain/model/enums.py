"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class PlatformType(StrEnum):
    """How a calendar platform treats data it imported from elsewhere."""

    # Exports only its own native bookings.
    AUTHORITATIVE = "authoritative"
    # May republish calendar data it imported.
    AGGREGATOR = "aggregator"


class RecordType(StrEnum):
    """Discriminator for records already known for a unit."""

    BOOKING = "booking"
    ICAL_EVENT = "ical_event"


class RecommendedAction(StrEnum):
    AUTO_SKIP = "auto_skip"
    FLAG_REVIEW = "flag_review"
    SAVE_UNIQUE = "save_unique"
