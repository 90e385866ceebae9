"""N:1 containment analysis for merged echoes.

Some aggregators collapse adjacent bookings into one large calendar entry on
re-export. Such an entry matches no single booking, but every one of its
nights is already blocked by the union of existing records.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from echoguard.domain.echo_detection.dates import days_between, night_set
from echoguard.domain.model import calendar_day

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from datetime import date

    from echoguard.domain.model import ExistingRecord, IncomingEvent


@dataclass(frozen=True, slots=True)
class ContainmentResult:
    containment_ratio: float
    blocked_nights: int
    total_nights: int
    covering_record_ids: tuple[str, ...] = field(default_factory=tuple)
    is_exact_union: bool = False

    @property
    def unblocked_nights(self) -> int:
        return self.total_nights - self.blocked_nights


EMPTY_CONTAINMENT = ContainmentResult(containment_ratio=0.0, blocked_nights=0, total_nights=0)


def check_containment(
    new_event: IncomingEvent,
    existing_records: Iterable[ExistingRecord],
) -> ContainmentResult:
    """Measure how much of ``new_event`` is already blocked by records from other feeds."""

    incoming_nights = night_set(new_event.check_in, new_event.check_out)
    if not incoming_nights:
        return EMPTY_CONTAINMENT

    others = [record for record in existing_records if record.source != new_event.source]

    blocked: set[date] = set()
    covering: list[ExistingRecord] = []
    for record in others:
        overlap = incoming_nights & night_set(record.check_in, record.check_out)
        if overlap:
            blocked |= overlap
            covering.append(record)

    return ContainmentResult(
        containment_ratio=len(blocked) / len(incoming_nights),
        blocked_nights=len(blocked),
        total_nights=len(incoming_nights),
        covering_record_ids=tuple(record.id for record in covering),
        is_exact_union=is_exact_union(new_event, covering),
    )


def is_exact_union(new_event: IncomingEvent, covering: Sequence[ExistingRecord]) -> bool:
    """True when ``covering`` tiles the incoming stay exactly.

    The chain must start on the incoming check-in, end on the incoming
    check-out, and each stay must begin on the day the previous one ends
    (same-day turnover). Any gap, overlap or overhang breaks exactness.
    """

    if not covering:
        return False

    chain = sorted(covering, key=lambda record: calendar_day(record.check_in))
    if days_between(chain[0].check_in, new_event.check_in) != 0:
        return False

    for previous, current in zip(chain, chain[1:], strict=False):
        if days_between(current.check_in, previous.check_out) != 0:
            return False

    return days_between(chain[-1].check_out, new_event.check_out) == 0


__all__ = ["EMPTY_CONTAINMENT", "ContainmentResult", "check_containment", "is_exact_union"]
