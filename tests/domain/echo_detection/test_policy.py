from __future__ import annotations

import pytest

from echoguard.domain.echo_detection import (
    DEFAULT_POLICY,
    DetectionPolicy,
    FactorWeights,
    InvalidPolicyError,
)


def test_default_policy_is_valid() -> None:
    assert DEFAULT_POLICY.validate() is DEFAULT_POLICY
    assert DEFAULT_POLICY.weights.total == pytest.approx(1.0)
    assert DEFAULT_POLICY.auto_skip_threshold == 0.95
    assert DEFAULT_POLICY.flag_review_threshold == 0.85


def test_weights_must_sum_to_one() -> None:
    policy = DetectionPolicy(weights=FactorWeights(temporal=0.2))

    with pytest.raises(InvalidPolicyError, match="sum to 1.0"):
        policy.validate()


def test_review_threshold_cannot_exceed_skip_threshold() -> None:
    policy = DetectionPolicy(auto_skip_threshold=0.8, flag_review_threshold=0.9)

    with pytest.raises(InvalidPolicyError, match="must not exceed"):
        policy.validate()


def test_thresholds_must_be_probabilities() -> None:
    with pytest.raises(InvalidPolicyError, match="within"):
        DetectionPolicy(auto_skip_threshold=1.5).validate()


def test_echo_window_must_exceed_race_window() -> None:
    with pytest.raises(InvalidPolicyError, match="race window"):
        DetectionPolicy(echo_window_hours=0.1).validate()
