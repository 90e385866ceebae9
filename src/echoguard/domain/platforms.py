"""Behavioural profiles of the calendar platforms a unit syncs with.

Authoritative platforms only ever export their own native bookings, so an event
coming from them is ground truth. Aggregators may republish calendar data they
imported from us, which is where echo loops come from.

Profiles are based on observed platform behaviour:

- Booking.com, Airbnb: export native bookings only.
- Adriagate: re-exports imported data verbatim, no date corruption.
- Holiday-Home: re-exports imported data and shifts dates by ~29 days
  (month-index bug in their export).
- Atraveo: re-exports by default, offers an opt-out query parameter.

Onboarding a newly observed platform is a change to ``_PLATFORMS`` only.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from echoguard.domain.model.enums import PlatformType

if TYPE_CHECKING:
    from collections.abc import Mapping

FALLBACK_SOURCE: Final[str] = "other"


@dataclass(frozen=True, slots=True)
class PlatformConfig:
    type: PlatformType
    # Lower is more trusted: 0 = native bookings, 1 = major OTAs.
    priority: int
    # None means re-export behaviour has not been established yet.
    re_exports: bool | None
    has_date_corruption: bool = False
    date_shift_days: int = 0
    has_opt_out: bool | None = None
    opt_out_param: str | None = None

    @property
    def is_aggregator(self) -> bool:
        return self.type == PlatformType.AGGREGATOR

    @property
    def is_authoritative(self) -> bool:
        return self.type == PlatformType.AUTHORITATIVE

    @property
    def shifts_dates(self) -> bool:
        return self.has_date_corruption and self.date_shift_days > 0


_PLATFORMS: Final[dict[str, PlatformConfig]] = {
    # Major OTAs
    "booking_com": PlatformConfig(type=PlatformType.AUTHORITATIVE, priority=1, re_exports=False),
    "airbnb": PlatformConfig(type=PlatformType.AUTHORITATIVE, priority=1, re_exports=False),
    # Native bookings
    "direct": PlatformConfig(type=PlatformType.AUTHORITATIVE, priority=0, re_exports=False),
    "widget": PlatformConfig(type=PlatformType.AUTHORITATIVE, priority=0, re_exports=False),
    # Aggregators
    "adriagate": PlatformConfig(type=PlatformType.AGGREGATOR, priority=3, re_exports=True),
    "holiday-home": PlatformConfig(
        type=PlatformType.AGGREGATOR,
        priority=10,
        re_exports=True,
        has_date_corruption=True,
        date_shift_days=29,
        has_opt_out=False,
    ),
    "atraveo": PlatformConfig(
        type=PlatformType.AGGREGATOR,
        priority=10,
        re_exports=True,
        has_opt_out=True,
        opt_out_param="dontincludeimported=1",
    ),
    # Anything we have not classified yet
    FALLBACK_SOURCE: PlatformConfig(type=PlatformType.AGGREGATOR, priority=5, re_exports=None),
}

PLATFORM_REGISTRY: Final[Mapping[str, PlatformConfig]] = MappingProxyType(_PLATFORMS)


def get_platform_config(source: object) -> PlatformConfig:
    """Return the profile for ``source``, falling back to ``other`` for anything unknown."""

    if isinstance(source, str):
        config = PLATFORM_REGISTRY.get(source)
        if config is not None:
            return config
    return PLATFORM_REGISTRY[FALLBACK_SOURCE]


def is_aggregator(source: object) -> bool:
    return get_platform_config(source).is_aggregator


def is_authoritative(source: object) -> bool:
    return get_platform_config(source).is_authoritative


def registered_platforms() -> Mapping[str, PlatformConfig]:
    return PLATFORM_REGISTRY


__all__ = [
    "FALLBACK_SOURCE",
    "PLATFORM_REGISTRY",
    "PlatformConfig",
    "get_platform_config",
    "is_aggregator",
    "is_authoritative",
    "registered_platforms",
]
