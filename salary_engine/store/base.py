from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass(frozen=True)
class PostingCriteria:
    """Predicates for one aggregate query.

    Active, non-leadership postings with a max annual salary are always
    required; ``require_min_annual`` adds the min annual column.
    """

    specialty: str
    city: str | None = None
    state: str | None = None
    job_type: str | None = None
    shift_type: str | None = None
    require_min_annual: bool = True


@dataclass(frozen=True)
class PostingAggregate:
    count: int
    avg_min_annual: float | None = None
    avg_max_annual: float | None = None
    avg_min_hourly: float | None = None
    avg_max_hourly: float | None = None


@dataclass(frozen=True)
class LocationCounts:
    cities: list[tuple[str | None, str | None, int]] = field(default_factory=list)
    states: list[tuple[str | None, int]] = field(default_factory=list)


class PostingStore(ABC):
    """Read-only aggregate queries over job postings."""

    @abstractmethod
    def aggregate(self, criteria: PostingCriteria) -> PostingAggregate:
        pass

    @abstractmethod
    def location_counts(self) -> LocationCounts:
        pass
