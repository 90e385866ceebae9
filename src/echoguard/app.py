"""Application orchestration entry points."""

from __future__ import annotations

from collections import Counter
from logging import getLogger
from typing import TYPE_CHECKING

from echoguard.adapters.snapshot import load_snapshot
from echoguard.config import get_detection_policy
from echoguard.domain.echo_detection import analyze_event
from echoguard.domain.model import RecommendedAction

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from pathlib import Path

    from echoguard.domain.echo_detection import DetectionPolicy
    from echoguard.domain.model import EchoMatchResult, ExistingRecord, IncomingEvent


log = getLogger(__name__)


def analyze_events(
    events: Iterable[IncomingEvent],
    existing_records: Sequence[ExistingRecord],
    *,
    policy: DetectionPolicy | None = None,
) -> list[EchoMatchResult]:
    """Classify each incoming event against the same snapshot of known records."""

    effective_policy = policy or get_detection_policy()
    return [
        analyze_event(event, existing_records, policy=effective_policy) for event in events
    ]


def analyze_snapshot(
    path: Path,
    *,
    policy: DetectionPolicy | None = None,
) -> list[EchoMatchResult]:
    """Load a unit snapshot from ``path`` and classify its incoming events."""

    events, records = load_snapshot(path)
    log.info("Analyzing %s incoming events against %s known records", len(events), len(records))

    results = analyze_events(events, records, policy=policy)

    counts = summarize(results)
    log.info(
        "Finished echo analysis: auto_skip=%s, flag_review=%s, save_unique=%s",
        counts[RecommendedAction.AUTO_SKIP],
        counts[RecommendedAction.FLAG_REVIEW],
        counts[RecommendedAction.SAVE_UNIQUE],
    )
    return results


def summarize(results: Iterable[EchoMatchResult]) -> dict[RecommendedAction, int]:
    counts = Counter(result.recommended_action for result in results)
    return {action: counts.get(action, 0) for action in RecommendedAction}
