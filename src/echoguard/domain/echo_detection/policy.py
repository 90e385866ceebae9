"""Scoring weights and decision thresholds for echo detection.

The values are policy constants chosen from observed platform behaviour, not
derived. They are grouped here so a deployment seeing a different aggregator
mix can tune them without touching the analyzer.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Final

AUTO_SKIP_THRESHOLD: Final[float] = 0.95
FLAG_REVIEW_THRESHOLD: Final[float] = 0.85

# Imports this close together look like two real bookings racing each other.
RACE_WINDOW_MINUTES: Final[float] = 10.0
# Aggregators typically re-publish our export a couple of hours later.
ECHO_WINDOW_HOURS: Final[float] = 2.0


class InvalidPolicyError(ValueError):
    """Raised when a detection policy is internally inconsistent."""


@dataclass(frozen=True, slots=True)
class FactorWeights:
    date: float = 0.25
    duration: float = 0.25
    export: float = 0.25
    platform: float = 0.15
    temporal: float = 0.10

    @property
    def total(self) -> float:
        return self.date + self.duration + self.export + self.platform + self.temporal


@dataclass(frozen=True, slots=True)
class DetectionPolicy:
    weights: FactorWeights = field(default_factory=FactorWeights)
    auto_skip_threshold: float = AUTO_SKIP_THRESHOLD
    flag_review_threshold: float = FLAG_REVIEW_THRESHOLD
    race_window_minutes: float = RACE_WINDOW_MINUTES
    echo_window_hours: float = ECHO_WINDOW_HOURS
    # Candidate window on top of the platform's known shift.
    base_date_tolerance_days: int = 3
    # Residual allowed once a known shift has been subtracted.
    corrected_match_tolerance_days: int = 2
    containment_near_ratio: float = 0.95
    containment_exact_confidence: float = 1.0
    containment_overlap_confidence: float = 0.96
    containment_near_confidence: float = 0.90

    def validate(self) -> DetectionPolicy:
        """Return ``self`` or raise ``InvalidPolicyError`` describing the first problem."""

        for name in ("auto_skip_threshold", "flag_review_threshold", "containment_near_ratio"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise InvalidPolicyError(f"{name} must be within [0, 1], got {value}")
        if self.flag_review_threshold > self.auto_skip_threshold:
            raise InvalidPolicyError(
                "flag_review_threshold must not exceed auto_skip_threshold "
                f"({self.flag_review_threshold} > {self.auto_skip_threshold})"
            )
        if not math.isclose(self.weights.total, 1.0, abs_tol=1e-9):
            raise InvalidPolicyError(f"Factor weights must sum to 1.0, got {self.weights.total}")
        if self.race_window_minutes < 0 or self.echo_window_hours * 60 <= self.race_window_minutes:
            raise InvalidPolicyError("echo window must be longer than the race window")
        return self


DEFAULT_POLICY: Final[DetectionPolicy] = DetectionPolicy()


__all__ = [
    "AUTO_SKIP_THRESHOLD",
    "DEFAULT_POLICY",
    "ECHO_WINDOW_HOURS",
    "FLAG_REVIEW_THRESHOLD",
    "RACE_WINDOW_MINUTES",
    "DetectionPolicy",
    "FactorWeights",
    "InvalidPolicyError",
]
