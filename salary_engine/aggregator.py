"""Base salary aggregation with a tiered fallback ladder.

Postings are sparse, so an exact query (city + job type + shift) often has
too few rows to average. The ladder relaxes the query one step at a time:

    Tier 0  requested location scope, requested filters
    Tier 1  same scope, shift filter dropped      (only if a shift was requested)
    Tier 2  same scope, no filters                (only if a job type was requested)
    Tier 3  state only, requested filters again   (only if the scope had a city and state)
    Tier 4  state only, no filters                (only after Tier 3, if any filter was requested)

The first tier reaching ``min_sample_size`` wins; otherwise the last tier
evaluated is returned as-is, possibly with ``sample_count == 0``.
"""
from __future__ import annotations

from dataclasses import dataclass

from salary_engine.config import MIN_SAMPLE_SIZE
from salary_engine.log import get_logger
from salary_engine.models import AggregationResult, FiltersApplied, LocationFilter, normalize_filter
from salary_engine.store.base import PostingCriteria, PostingStore

log = get_logger(__name__)


@dataclass(frozen=True)
class Tier:
    name: str
    city: str | None
    state: str | None
    job_type: str | None
    shift_type: str | None
    fallback_to_state: bool

    @property
    def filters_applied(self) -> FiltersApplied:
        return FiltersApplied(job_type=self.job_type is not None,
                              shift_type=self.shift_type is not None)

    def criteria(self, specialty: str) -> PostingCriteria:
        return PostingCriteria(
            specialty=specialty,
            city=self.city,
            state=self.state,
            job_type=self.job_type,
            shift_type=self.shift_type,
        )


def build_tiers(
    location: LocationFilter,
    job_type: str | None,
    shift_type: str | None,
) -> list[Tier]:
    city, state = location.city, location.state
    tiers = [Tier("exact", city, state, job_type, shift_type, False)]
    if shift_type:
        tiers.append(Tier("no-shift", city, state, job_type, None, False))
    if job_type:
        tiers.append(Tier("no-filters", city, state, None, None, False))
    if city and state:
        tiers.append(Tier("state", None, state, job_type, shift_type, True))
        if job_type or shift_type:
            tiers.append(Tier("state-no-filters", None, state, None, None, True))
    return tiers


class SalaryAggregator:
    def __init__(self, store: PostingStore, min_sample_size: int = MIN_SAMPLE_SIZE) -> None:
        self.store = store
        self.min_sample_size = min_sample_size

    def run_tier(self, specialty: str, tier: Tier) -> AggregationResult:
        agg = self.store.aggregate(tier.criteria(specialty))
        return AggregationResult(
            avg_min_annual=agg.avg_min_annual,
            avg_max_annual=agg.avg_max_annual,
            avg_min_hourly=agg.avg_min_hourly,
            avg_max_hourly=agg.avg_max_hourly,
            sample_count=agg.count,
            fallback_to_state=tier.fallback_to_state,
            filters_applied=tier.filters_applied,
        )

    def _run_logged(self, specialty: str, location: LocationFilter, tier: Tier) -> AggregationResult:
        result = self.run_tier(specialty, tier)
        log.debug("Tier %s for %s @ %s: %d postings",
                  tier.name, specialty, location, result.sample_count)
        return result

    def aggregate(
        self,
        specialty: str,
        location: LocationFilter,
        job_type: str | None = None,
        shift_type: str | None = None,
    ) -> AggregationResult:
        tiers = build_tiers(location, normalize_filter(job_type), normalize_filter(shift_type))

        result = self._run_logged(specialty, location, tiers[0])
        for tier in tiers[1:]:
            if result.sample_count >= self.min_sample_size:
                return result
            result = self._run_logged(specialty, location, tier)
            if result.sample_count >= self.min_sample_size:
                log.info("Salary data for %s @ %s came from fallback tier %s (%d postings)",
                         specialty, location, tier.name, result.sample_count)

        if result.sample_count < self.min_sample_size:
            log.info("No tier reached %d postings for %s @ %s; using %s (%d postings)",
                     self.min_sample_size, specialty, location, tiers[-1].name, result.sample_count)
        return result
