"""Echo detection for imported calendar events."""

from __future__ import annotations

from .analyzer import MatchAnalysis, analyze_event, analyze_match, recommend_action
from .containment import ContainmentResult, check_containment, is_exact_union
from .dates import days_between, night_set
from .factors import (
    FactorResult,
    score_date_match,
    score_duration_match,
    score_export_correlation,
    score_platform_reexport,
    score_temporal_gap,
)
from .matching import find_matching_records
from .policy import DEFAULT_POLICY, DetectionPolicy, FactorWeights, InvalidPolicyError

__all__ = [
    "DEFAULT_POLICY",
    "ContainmentResult",
    "DetectionPolicy",
    "FactorResult",
    "FactorWeights",
    "InvalidPolicyError",
    "MatchAnalysis",
    "analyze_event",
    "analyze_match",
    "check_containment",
    "days_between",
    "find_matching_records",
    "is_exact_union",
    "night_set",
    "recommend_action",
    "score_date_match",
    "score_duration_match",
    "score_export_correlation",
    "score_platform_reexport",
    "score_temporal_gap",
]
