"""The five independent signals combined into an echo confidence.

Each scorer returns a ``FactorResult`` with a score in [0, 1] and the reasons
that explain it. Weighting happens in ``analyzer.analyze_match``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from echoguard.domain.echo_detection.matching import boundary_diffs, shift_corrected
from echoguard.domain.echo_detection.policy import DEFAULT_POLICY
from echoguard.domain.model import ensure_utc
from echoguard.domain.platforms import get_platform_config

if TYPE_CHECKING:
    from datetime import datetime

    from echoguard.domain.echo_detection.policy import DetectionPolicy
    from echoguard.domain.model import ExistingRecord, IncomingEvent
    from echoguard.domain.platforms import PlatformConfig


@dataclass(frozen=True, slots=True)
class FactorResult:
    score: float
    reasons: tuple[str, ...] = field(default_factory=tuple)


def score_date_match(
    new_event: IncomingEvent,
    existing: ExistingRecord,
    platform: PlatformConfig,
) -> FactorResult:
    """Compare stay boundaries, tolerating the platform's known date shift."""

    diffs = boundary_diffs(new_event, existing)
    if diffs == (0, 0):
        return FactorResult(1.0, ("Exact date match",))

    if platform.shifts_dates and max(shift_corrected(diffs, platform)) <= 1:
        return FactorResult(
            0.95,
            (f"Matches with {platform.date_shift_days}-day correction (known platform bug)",),
        )

    total_diff = sum(diffs)
    if total_diff <= 2:
        return FactorResult(0.9, (f"Close date match ({total_diff} day total diff)",))
    if total_diff <= 4:
        return FactorResult(0.7, (f"Fuzzy date match ({total_diff} day total diff)",))
    return FactorResult(0.0, ("Dates do not match",))


def score_duration_match(new_event: IncomingEvent, existing: ExistingRecord) -> FactorResult:
    """Compare night counts, which survive a platform shifting both dates together."""

    new_nights = new_event.nights
    existing_nights = existing.nights

    if new_nights == existing_nights:
        return FactorResult(1.0, (f"Same duration ({new_nights} nights)",))
    if abs(new_nights - existing_nights) == 1:
        return FactorResult(
            0.7, (f"Similar duration ({new_nights} vs {existing_nights} nights)",)
        )
    return FactorResult(
        0.0, (f"Different durations ({new_nights} vs {existing_nights} nights)",)
    )


def score_export_correlation(incoming_source: str, existing: ExistingRecord) -> FactorResult:
    """Infer whether ``existing`` was exported to the incoming platform.

    Every native booking is published in every outbound feed, so a native
    booking matched from a platform that re-exports was certainly sent there.
    """

    platform = get_platform_config(incoming_source)

    if existing.is_native_booking and platform.re_exports is True:
        return FactorResult(
            1.0,
            (f"Native booking was exported to {incoming_source} (all bookings are exported)",),
        )
    if existing.is_native_booking and platform.is_aggregator:
        return FactorResult(0.8, (f"Native booking likely exported to {incoming_source}",))
    if not existing.is_native_booking and platform.re_exports is True:
        return FactorResult(0.9, (f"Imported event was re-exported via {incoming_source}",))
    return FactorResult(0.5, ("Export correlation unclear",))


def score_platform_reexport(incoming_source: str, existing_source: str) -> FactorResult:
    """Score the platform pair.

    Two authoritative platforms agreeing on dates is a real overbooking and
    must score zero here so it is never suppressed as an echo.
    """

    incoming = get_platform_config(incoming_source)
    existing_is_authoritative = get_platform_config(existing_source).is_authoritative

    if incoming.is_aggregator and existing_is_authoritative:
        if incoming.re_exports is True:
            return FactorResult(1.0, (f"{incoming_source} is KNOWN to re-export imported data",))
        return FactorResult(0.7, (f"{incoming_source} is aggregator — may re-export",))

    if incoming.is_authoritative and existing_is_authoritative:
        return FactorResult(0.0, ("Both sources are authoritative — likely REAL overbooking",))

    return FactorResult(0.5, ("Platform profile unclear",))


def score_temporal_gap(
    new_imported_at: datetime,
    existing_imported_at: datetime,
    *,
    policy: DetectionPolicy = DEFAULT_POLICY,
) -> FactorResult:
    """Score the delay between the two imports.

    Echoes arrive after a platform re-sync (hours); real race conditions
    arrive within minutes of each other.
    """

    gap = abs(ensure_utc(new_imported_at) - ensure_utc(existing_imported_at))
    minutes = gap.total_seconds() / 60
    hours = minutes / 60
    echo_window_minutes = policy.echo_window_hours * 60

    if minutes <= policy.race_window_minutes:
        return FactorResult(
            0.0, (f"Arrived {minutes:.0f} min apart — likely REAL race condition",)
        )
    if minutes >= echo_window_minutes:
        return FactorResult(
            1.0, (f"Arrived {hours:.1f}h after original — consistent with echo delay",)
        )

    span = echo_window_minutes - policy.race_window_minutes
    score = (minutes - policy.race_window_minutes) / span
    return FactorResult(min(max(score, 0.0), 1.0), (f"Moderate time gap ({hours:.1f}h)",))


__all__ = [
    "FactorResult",
    "score_date_match",
    "score_duration_match",
    "score_export_correlation",
    "score_platform_reexport",
    "score_temporal_gap",
]
