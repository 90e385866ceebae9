"""Day arithmetic shared by the matching, scoring and containment stages."""

from __future__ import annotations

from datetime import date, timedelta
from typing import TYPE_CHECKING, Final

from echoguard.domain.model import calendar_day

if TYPE_CHECKING:
    from echoguard.domain.model import StayDate

# Upper bound on nights enumerated for one stay.
MAX_STAY_NIGHTS: Final[int] = 365


def days_between(later: StayDate, earlier: StayDate) -> int:
    """Signed number of calendar days from ``earlier`` to ``later``."""

    return (calendar_day(later) - calendar_day(earlier)).days


def night_set(check_in: StayDate, check_out: StayDate) -> frozenset[date]:
    """Nights occupied by a stay: check-in inclusive, check-out exclusive.

    >>> sorted(night_set(date(2026, 5, 1), date(2026, 5, 4)))
    [datetime.date(2026, 5, 1), datetime.date(2026, 5, 2), datetime.date(2026, 5, 3)]
    """

    start = calendar_day(check_in)
    count = min(days_between(check_out, start), MAX_STAY_NIGHTS)
    return frozenset(start + timedelta(days=offset) for offset in range(max(count, 0)))
