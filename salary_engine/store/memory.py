"""In-memory posting store, used for tests and as the base of file-backed stores."""
from __future__ import annotations

from collections import Counter
from typing import Iterable

from salary_engine.log import get_logger
from salary_engine.models import LEADERSHIP_LEVEL, JobPosting
from salary_engine.store.base import (
    LocationCounts,
    PostingAggregate,
    PostingCriteria,
    PostingStore,
)

log = get_logger(__name__)


def _same(a: str | None, b: str) -> bool:
    return a is not None and a.lower() == b.lower()


def _mean(values: list[float | None]) -> float | None:
    present = [v for v in values if v is not None]
    if not present:
        return None
    return sum(present) / len(present)


def matches(posting: JobPosting, criteria: PostingCriteria) -> bool:
    if not posting.is_active:
        return False
    if posting.experience_level == LEADERSHIP_LEVEL:
        return False
    if posting.salary_max_annual is None:
        return False
    if criteria.require_min_annual and posting.salary_min_annual is None:
        return False
    if not _same(posting.specialty, criteria.specialty):
        return False
    if criteria.city is not None and not _same(posting.city, criteria.city):
        return False
    if criteria.state is not None and posting.state != criteria.state:
        return False
    if criteria.job_type is not None and not _same(posting.job_type, criteria.job_type):
        return False
    if criteria.shift_type is not None and not _same(posting.shift_type, criteria.shift_type):
        return False
    return True


class InMemoryPostingStore(PostingStore):
    def __init__(self, postings: Iterable[JobPosting] = ()) -> None:
        self.postings: tuple[JobPosting, ...] = tuple(postings)

    def aggregate(self, criteria: PostingCriteria) -> PostingAggregate:
        hits = [p for p in self.postings if matches(p, criteria)]
        log.debug("Aggregate %s matched %d of %d postings", criteria, len(hits), len(self.postings))
        return PostingAggregate(
            count=len(hits),
            avg_min_annual=_mean([p.salary_min_annual for p in hits]),
            avg_max_annual=_mean([p.salary_max_annual for p in hits]),
            avg_min_hourly=_mean([p.salary_min_hourly for p in hits]),
            avg_max_hourly=_mean([p.salary_max_hourly for p in hits]),
        )

    def location_counts(self) -> LocationCounts:
        active = [p for p in self.postings if p.is_active]
        # Counter keeps first-seen order, so equal counts sort deterministically
        cities = Counter((p.city, p.state) for p in active)
        states = Counter(p.state for p in active)
        return LocationCounts(
            cities=[(city, state, n) for (city, state), n in cities.items()],
            states=list(states.items()),
        )
