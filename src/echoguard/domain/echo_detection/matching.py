"""Candidate filtering: which existing records could the incoming event echo?"""

from __future__ import annotations

from typing import TYPE_CHECKING

from echoguard.domain.echo_detection.dates import days_between
from echoguard.domain.echo_detection.policy import DEFAULT_POLICY

if TYPE_CHECKING:
    from collections.abc import Iterable

    from echoguard.domain.echo_detection.policy import DetectionPolicy
    from echoguard.domain.model import ExistingRecord, IncomingEvent
    from echoguard.domain.platforms import PlatformConfig


def boundary_diffs(new_event: IncomingEvent, existing: ExistingRecord) -> tuple[int, int]:
    """Absolute check-in and check-out differences in days."""

    return (
        abs(days_between(new_event.check_in, existing.check_in)),
        abs(days_between(new_event.check_out, existing.check_out)),
    )


def shift_corrected(diffs: tuple[int, int], platform: PlatformConfig) -> tuple[int, int]:
    """Residual differences once the platform's known date shift is subtracted."""

    checkin_diff, checkout_diff = diffs
    shift = platform.date_shift_days
    return abs(checkin_diff - shift), abs(checkout_diff - shift)


def find_matching_records(
    new_event: IncomingEvent,
    existing_records: Iterable[ExistingRecord],
    platform: PlatformConfig,
    *,
    policy: DetectionPolicy = DEFAULT_POLICY,
) -> list[ExistingRecord]:
    """Return the records close enough in time to be scored as 1:1 echo candidates.

    Records from the incoming feed itself are never candidates.
    """

    tolerance = platform.date_shift_days + policy.base_date_tolerance_days
    matches: list[ExistingRecord] = []

    for existing in existing_records:
        if existing.source == new_event.source:
            continue

        diffs = boundary_diffs(new_event, existing)
        if max(diffs) <= tolerance:
            matches.append(existing)
            continue

        # Only widens the window when the corrected tolerance exceeds the base one.
        if platform.shifts_dates:
            if max(shift_corrected(diffs, platform)) <= policy.corrected_match_tolerance_days:
                matches.append(existing)

    return matches


__all__ = ["boundary_diffs", "find_matching_records", "shift_corrected"]
