"""
Salary estimation.

Runs: validate → parse location → tiered aggregation → experience adjustment,
with state/national comparisons computed alongside → assembled estimate.
"""
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Any

from salary_engine.aggregator import SalaryAggregator
from salary_engine.comparisons import ComparisonCalculator
from salary_engine.config import HOURS_PER_YEAR, MIN_SAMPLE_SIZE, Settings
from salary_engine.errors import InsufficientDataError, MissingFieldsError
from salary_engine.experience import adjust, annual_to_hourly
from salary_engine.locations import parse_location
from salary_engine.log import get_logger
from salary_engine.models import (
    Baseline,
    EstimateMetadata,
    PayRange,
    SalaryEstimate,
    SalaryQuery,
)
from salary_engine.store.base import PostingStore

log = get_logger(__name__)


def _as_years(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float):
        # JSON bodies may carry 7.0 for 7
        if not value.is_integer():
            return None
        years = int(value)
    else:
        try:
            years = int(str(value).strip())
        except ValueError:
            return None
    return years if years >= 0 else None


def build_query(
    specialty: str | None,
    location: str | None,
    years_experience: Any,
    job_type: str | None = None,
    shift_type: str | None = None,
) -> SalaryQuery:
    """Validate raw request fields into a SalaryQuery.

    A years value that isn't a non-negative whole number (ints, numeric
    strings and integral floats are accepted) counts as missing.
    """
    specialty = (specialty or "").strip()
    location = (location or "").strip()
    years = _as_years(years_experience)

    missing = []
    if not specialty:
        missing.append("specialty")
    if not location:
        missing.append("location")
    if years is None:
        missing.append("yearsExperience")
    if missing:
        raise MissingFieldsError(missing)

    return SalaryQuery(
        specialty=specialty,
        location=location,
        years_experience=years,
        job_type=job_type,
        shift_type=shift_type,
    )


class SalaryEstimator:
    def __init__(
        self,
        store: PostingStore,
        *,
        min_sample_size: int = MIN_SAMPLE_SIZE,
        hours_per_year: int = HOURS_PER_YEAR,
    ) -> None:
        self.aggregator = SalaryAggregator(store, min_sample_size=min_sample_size)
        self.comparisons = ComparisonCalculator(store)
        self.hours_per_year = hours_per_year

    @classmethod
    def from_settings(cls, store: PostingStore, settings: Settings) -> "SalaryEstimator":
        return cls(
            store,
            min_sample_size=settings.min_sample_size,
            hours_per_year=settings.hours_per_year,
        )

    def _baseline(self, annual: int | None) -> Baseline | None:
        if annual is None:
            return None
        return Baseline(annual=annual, hourly=annual_to_hourly(annual, self.hours_per_year))

    def estimate(
        self,
        specialty: str | None,
        location: str | None,
        years_experience: Any,
        job_type: str | None = None,
        shift_type: str | None = None,
    ) -> SalaryEstimate:
        query = build_query(specialty, location, years_experience, job_type, shift_type)
        return self.estimate_query(query)

    def estimate_query(self, query: SalaryQuery) -> SalaryEstimate:
        loc = parse_location(query.location)

        # comparisons only need specialty + state, so they run beside the cascade
        with ThreadPoolExecutor(max_workers=1) as pool:
            compare_future = pool.submit(self.comparisons.compare, query.specialty, loc.state)
            base = self.aggregator.aggregate(
                query.specialty, loc, query.job_type, query.shift_type
            )
            if base.sample_count == 0:
                log.info("No salary data for %s in %s", query.specialty, query.location)
                raise InsufficientDataError(query.specialty, query.location)
            comparisons = compare_future.result()

        adjusted = adjust(base, query.years_experience, self.hours_per_year)

        estimate = SalaryEstimate(
            annual=PayRange(min=adjusted.min_annual, max=adjusted.max_annual),
            hourly=PayRange(min=adjusted.min_hourly, max=adjusted.max_hourly),
            state=self._baseline(comparisons.state_avg),
            national=self._baseline(comparisons.national_avg),
            metadata=EstimateMetadata(
                specialty=query.specialty,
                location=query.location,
                years_experience=query.years_experience,
                sample_count=base.sample_count,
                experience_multiplier=adjusted.multiplier,
                fallback_to_state=base.fallback_to_state,
                filters_applied=base.filters_applied,
                requested_job_type=query.job_type,
                requested_shift_type=query.shift_type,
            ),
        )
        log.info(
            "Estimate for %s in %s (%dy): $%s-$%s from %d postings%s",
            query.specialty, query.location, query.years_experience,
            f"{adjusted.min_annual:,}", f"{adjusted.max_annual:,}", base.sample_count,
            " [state fallback]" if base.fallback_to_state else "",
        )
        return estimate
