"""Experience-based adjustment of aggregated salary figures."""
from __future__ import annotations

import math

from salary_engine.config import HOURS_PER_YEAR
from salary_engine.models import AdjustedSalary, AggregationResult

# (max years in bucket, multiplier); anything above the last bucket is clamped
EXPERIENCE_BUCKETS: list[tuple[int, float]] = [
    (1, 0.90),
    (3, 1.00),
    (5, 1.05),
    (10, 1.12),
    (20, 1.18),
]
MAX_YEARS = EXPERIENCE_BUCKETS[-1][0]


def round_half_up(value: float, places: int = 0) -> float:
    """Round like a cash register, not like ``round()`` (which rounds half to even)."""
    factor = 10 ** places
    return math.floor(value * factor + 0.5) / factor


def experience_multiplier(years: int) -> float:
    years = min(max(years, 0), MAX_YEARS)
    for upper, multiplier in EXPERIENCE_BUCKETS:
        if years <= upper:
            return multiplier
    return EXPERIENCE_BUCKETS[-1][1]


def annual_to_hourly(annual: float, hours_per_year: int = HOURS_PER_YEAR) -> float:
    return round_half_up(annual / hours_per_year, 2)


def adjust(
    result: AggregationResult,
    years_experience: int,
    hours_per_year: int = HOURS_PER_YEAR,
) -> AdjustedSalary:
    multiplier = experience_multiplier(years_experience)

    min_annual = int(round_half_up((result.avg_min_annual or 0) * multiplier))
    max_annual = int(round_half_up((result.avg_max_annual or 0) * multiplier))

    # hourly is derived from the already-adjusted annual figure when missing
    if result.avg_min_hourly is not None:
        min_hourly = round_half_up(result.avg_min_hourly * multiplier, 2)
    else:
        min_hourly = annual_to_hourly(min_annual, hours_per_year)
    if result.avg_max_hourly is not None:
        max_hourly = round_half_up(result.avg_max_hourly * multiplier, 2)
    else:
        max_hourly = annual_to_hourly(max_annual, hours_per_year)

    return AdjustedSalary(
        min_annual=min_annual,
        max_annual=max_annual,
        min_hourly=min_hourly,
        max_hourly=max_hourly,
        multiplier=multiplier,
    )
