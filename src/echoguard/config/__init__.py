"""Application configuration helpers."""

from __future__ import annotations

from .detection import (
    ENV_AUTO_SKIP_THRESHOLD,
    ENV_ECHO_WINDOW_HOURS,
    ENV_FLAG_REVIEW_THRESHOLD,
    ENV_RACE_WINDOW_MINUTES,
    get_detection_policy,
)
from .env import optional_float
from .errors import ConfigurationError
from .logging import configure_logging

__all__ = [
    "ENV_AUTO_SKIP_THRESHOLD",
    "ENV_ECHO_WINDOW_HOURS",
    "ENV_FLAG_REVIEW_THRESHOLD",
    "ENV_RACE_WINDOW_MINUTES",
    "ConfigurationError",
    "configure_logging",
    "get_detection_policy",
    "optional_float",
]
