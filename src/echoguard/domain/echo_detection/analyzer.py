"""Echo detection for imported calendar events.

Decides whether an event imported from an external calendar is an "echo" of a
booking we exported earlier, a new booking, or a suspected real double booking.

Per candidate, five factors are weighted into one confidence:

- date match (25%), tolerant of a platform's known date shift
- duration match (25%), invariant when both dates are shifted together
- export correlation (25%), inferred from record type and platform profile
- platform re-export profile (15%)
- temporal gap between the two imports (10%)

Aggregator events that match no single record are additionally checked for
containment in the union of existing records (merged echoes).

Decision thresholds:

- ``>= 0.95`` auto skip (log only, do not import)
- ``0.85 - 0.95`` flag for review (import with a review marker)
- ``< 0.85`` save as unique (import normally)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from echoguard.domain.echo_detection.containment import check_containment
from echoguard.domain.echo_detection.factors import (
    FactorResult,
    score_date_match,
    score_duration_match,
    score_export_correlation,
    score_platform_reexport,
    score_temporal_gap,
)
from echoguard.domain.echo_detection.matching import find_matching_records
from echoguard.domain.echo_detection.policy import DEFAULT_POLICY
from echoguard.domain.model import EchoMatchResult, RecommendedAction, RecordType
from echoguard.domain.platforms import get_platform_config

if TYPE_CHECKING:
    from collections.abc import Iterable

    from echoguard.domain.echo_detection.containment import ContainmentResult
    from echoguard.domain.echo_detection.policy import DetectionPolicy
    from echoguard.domain.model import ExistingRecord, IncomingEvent
    from echoguard.domain.platforms import PlatformConfig

log = getLogger(__name__)

# Scores are rounded so policy boundaries are compared on decimal values.
CONFIDENCE_PRECISION = 6


@dataclass(frozen=True, slots=True)
class MatchAnalysis:
    """Weighted score of one 1:1 candidate."""

    record: ExistingRecord
    confidence: float
    date: FactorResult
    duration: FactorResult
    export: FactorResult
    platform: FactorResult
    temporal: FactorResult

    @property
    def reasons(self) -> tuple[str, ...]:
        return (
            *self.date.reasons,
            *self.duration.reasons,
            *self.export.reasons,
            *self.platform.reasons,
            *self.temporal.reasons,
        )


@dataclass(slots=True)
class _Verdict:
    confidence: float = 0.0
    reasons: tuple[str, ...] = field(default_factory=tuple)
    best: ExistingRecord | None = None


def analyze_event(
    new_event: IncomingEvent,
    existing_records: Iterable[ExistingRecord],
    *,
    policy: DetectionPolicy | None = None,
) -> EchoMatchResult:
    """Classify ``new_event`` against the records already known for its unit."""

    effective_policy = policy or DEFAULT_POLICY
    platform = get_platform_config(new_event.source)

    if platform.is_authoritative:
        log.debug("Skipping echo analysis for authoritative source %s", new_event.source)
        return EchoMatchResult(
            is_probable_echo=False,
            confidence=0.0,
            recommended_action=RecommendedAction.SAVE_UNIQUE,
            reasons=("Source is authoritative OTA — cannot be echo",),
        )

    records = list(existing_records)
    verdict = _Verdict()

    for candidate in find_matching_records(new_event, records, platform, policy=effective_policy):
        analysis = analyze_match(new_event, candidate, platform, policy=effective_policy)
        if analysis.confidence > verdict.confidence:
            verdict.confidence = analysis.confidence
            verdict.reasons = analysis.reasons
            verdict.best = candidate

    if verdict.confidence < effective_policy.auto_skip_threshold and platform.is_aggregator:
        _apply_containment(verdict, check_containment(new_event, records), effective_policy)

    if verdict.confidence == 0:
        log.debug("No echo candidates for %s event", new_event.source)
        return EchoMatchResult(
            is_probable_echo=False,
            confidence=0.0,
            recommended_action=RecommendedAction.SAVE_UNIQUE,
            reasons=("No matching bookings found",),
        )

    action = recommend_action(verdict.confidence, policy=effective_policy)
    best = verdict.best
    best_type = best.type if best is not None else None
    best_id = best.id if best is not None else None
    log.debug(
        "Echo analysis for %s event: confidence=%s, action=%s, match=%s",
        new_event.source,
        verdict.confidence,
        action,
        best_id,
    )
    return EchoMatchResult(
        is_probable_echo=verdict.confidence >= effective_policy.flag_review_threshold,
        confidence=verdict.confidence,
        recommended_action=action,
        reasons=verdict.reasons,
        matched_event_id=best_id if best_type == RecordType.ICAL_EVENT else None,
        matched_booking_id=best_id if best_type == RecordType.BOOKING else None,
    )


def analyze_match(
    new_event: IncomingEvent,
    existing: ExistingRecord,
    platform: PlatformConfig | None = None,
    *,
    policy: DetectionPolicy = DEFAULT_POLICY,
) -> MatchAnalysis:
    """Score one candidate with the weighted five-factor model."""

    platform = platform or get_platform_config(new_event.source)
    weights = policy.weights

    date = score_date_match(new_event, existing, platform)
    duration = score_duration_match(new_event, existing)
    export = score_export_correlation(new_event.source, existing)
    platform_profile = score_platform_reexport(new_event.source, existing.source)
    temporal = score_temporal_gap(new_event.imported_at, existing.imported_at, policy=policy)

    confidence = (
        date.score * weights.date
        + duration.score * weights.duration
        + export.score * weights.export
        + platform_profile.score * weights.platform
        + temporal.score * weights.temporal
    )
    return MatchAnalysis(
        record=existing,
        confidence=round(min(confidence, 1.0), CONFIDENCE_PRECISION),
        date=date,
        duration=duration,
        export=export,
        platform=platform_profile,
        temporal=temporal,
    )


def recommend_action(
    confidence: float,
    *,
    policy: DetectionPolicy = DEFAULT_POLICY,
) -> RecommendedAction:
    if confidence >= policy.auto_skip_threshold:
        return RecommendedAction.AUTO_SKIP
    if confidence >= policy.flag_review_threshold:
        return RecommendedAction.FLAG_REVIEW
    return RecommendedAction.SAVE_UNIQUE


def _apply_containment(
    verdict: _Verdict,
    containment: ContainmentResult,
    policy: DetectionPolicy,
) -> None:
    nights = containment.total_nights
    covering = len(containment.covering_record_ids)

    if containment.containment_ratio == 1.0 and containment.is_exact_union:
        confidence = policy.containment_exact_confidence
        reasons = (
            f"Merged echo: all {nights} nights already blocked",
            f"Exact union of {covering} existing bookings",
        )
        # An exact tiling is decisive even against a strong 1:1 candidate.
        verdict.confidence = confidence
        verdict.reasons = reasons
        log.debug("Merged echo detected: %s nights, %s covering records", nights, covering)
        return

    if containment.containment_ratio == 1.0:
        confidence = policy.containment_overlap_confidence
        reasons = (
            f"Merged echo: all {nights} nights already blocked",
            f"Covered by {covering} existing bookings (overlapping)",
        )
    elif containment.containment_ratio >= policy.containment_near_ratio:
        confidence = policy.containment_near_confidence
        reasons = (
            f"Probable merged echo: {containment.blocked_nights}/{nights} nights blocked "
            f"({containment.containment_ratio * 100:.0f}%)",
            f"{containment.unblocked_nights} unblocked nights may be rounding",
        )
    else:
        # Too many free nights to call it a merged echo.
        return

    if confidence > verdict.confidence:
        log.debug("Containment raised confidence %s -> %s", verdict.confidence, confidence)
        verdict.confidence = confidence
        verdict.reasons = reasons


__all__ = ["MatchAnalysis", "analyze_event", "analyze_match", "recommend_action"]
