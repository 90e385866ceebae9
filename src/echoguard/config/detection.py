"""Echo detection policy loaded from the environment."""

from __future__ import annotations

from dataclasses import replace
from typing import Final

from echoguard.domain.echo_detection.policy import (
    DEFAULT_POLICY,
    DetectionPolicy,
    InvalidPolicyError,
)

from .env import optional_float
from .errors import ConfigurationError

ENV_AUTO_SKIP_THRESHOLD: Final[str] = "ECHOGUARD_AUTO_SKIP_THRESHOLD"
ENV_FLAG_REVIEW_THRESHOLD: Final[str] = "ECHOGUARD_FLAG_REVIEW_THRESHOLD"
ENV_ECHO_WINDOW_HOURS: Final[str] = "ECHOGUARD_ECHO_WINDOW_HOURS"
ENV_RACE_WINDOW_MINUTES: Final[str] = "ECHOGUARD_RACE_WINDOW_MINUTES"

_OVERRIDES: Final[dict[str, str]] = {
    ENV_AUTO_SKIP_THRESHOLD: "auto_skip_threshold",
    ENV_FLAG_REVIEW_THRESHOLD: "flag_review_threshold",
    ENV_ECHO_WINDOW_HOURS: "echo_window_hours",
    ENV_RACE_WINDOW_MINUTES: "race_window_minutes",
}


def get_detection_policy(*, base: DetectionPolicy | None = None) -> DetectionPolicy:
    """Return the detection policy, applying any ``ECHOGUARD_*`` overrides."""

    changes: dict[str, float] = {}
    for env_name, attribute in _OVERRIDES.items():
        value = optional_float(env_name)
        if value is not None:
            changes[attribute] = value

    policy = replace(base or DEFAULT_POLICY, **changes)
    try:
        return policy.validate()
    except InvalidPolicyError as exc:
        raise ConfigurationError(f"Invalid echo detection policy: {exc}") from exc
