"""Data models for postings, queries and salary estimates."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

LEADERSHIP_LEVEL = "Leadership"
ANY_FILTER = "any"


def normalize_filter(value: str | None) -> str | None:
    """Blank strings and the ``"any"`` sentinel both mean "no filter"."""
    if value is None:
        return None
    value = value.strip()
    if not value or value.lower() == ANY_FILTER:
        return None
    return value


@dataclass(frozen=True)
class JobPosting:
    specialty: str
    city: str | None = None
    state: str | None = None
    job_type: str | None = None
    shift_type: str | None = None
    experience_level: str | None = None
    salary_min_annual: float | None = None
    salary_max_annual: float | None = None
    salary_min_hourly: float | None = None
    salary_max_hourly: float | None = None
    is_active: bool = True


@dataclass(frozen=True)
class LocationFilter:
    city: str | None = None
    state: str | None = None


@dataclass(frozen=True)
class SalaryQuery:
    specialty: str
    location: str
    years_experience: int
    job_type: str | None = None
    shift_type: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "job_type", normalize_filter(self.job_type))
        object.__setattr__(self, "shift_type", normalize_filter(self.shift_type))


@dataclass(frozen=True)
class FiltersApplied:
    job_type: bool = False
    shift_type: bool = False

    def to_dict(self) -> dict[str, bool]:
        return {"jobType": self.job_type, "shiftType": self.shift_type}


@dataclass(frozen=True)
class AggregationResult:
    avg_min_annual: float | None
    avg_max_annual: float | None
    avg_min_hourly: float | None
    avg_max_hourly: float | None
    sample_count: int
    fallback_to_state: bool = False
    filters_applied: FiltersApplied = field(default_factory=FiltersApplied)


@dataclass(frozen=True)
class AdjustedSalary:
    min_annual: int
    max_annual: int
    min_hourly: float
    max_hourly: float
    multiplier: float


@dataclass(frozen=True)
class Comparisons:
    state_avg: int | None = None
    national_avg: int | None = None


@dataclass(frozen=True)
class PayRange:
    min: float
    max: float

    def to_dict(self) -> dict[str, float]:
        return {"min": self.min, "max": self.max}


@dataclass(frozen=True)
class Baseline:
    annual: int
    hourly: float

    def to_dict(self) -> dict[str, float]:
        return {"annual": self.annual, "hourly": self.hourly}


@dataclass(frozen=True)
class EstimateMetadata:
    specialty: str
    location: str
    years_experience: int
    sample_count: int
    experience_multiplier: float
    fallback_to_state: bool
    filters_applied: FiltersApplied
    requested_job_type: str | None = None
    requested_shift_type: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "specialty": self.specialty,
            "location": self.location,
            "yearsExperience": self.years_experience,
            "sampleCount": self.sample_count,
            "experienceMultiplier": self.experience_multiplier,
            "fallbackToState": self.fallback_to_state,
            "filtersApplied": self.filters_applied.to_dict(),
            "requestedFilters": {
                "jobType": self.requested_job_type,
                "shiftType": self.requested_shift_type,
            },
        }


@dataclass(frozen=True)
class SalaryEstimate:
    annual: PayRange
    hourly: PayRange
    state: Baseline | None
    national: Baseline | None
    metadata: EstimateMetadata

    def to_dict(self) -> dict[str, Any]:
        """Response shape: annual, hourly, comparisons, metadata."""
        return {
            "annual": self.annual.to_dict(),
            "hourly": self.hourly.to_dict(),
            "comparisons": {
                "state": self.state.to_dict() if self.state else None,
                "national": self.national.to_dict() if self.national else None,
            },
            "metadata": self.metadata.to_dict(),
        }


@dataclass(frozen=True)
class LocationSuggestion:
    value: str
    label: str
    kind: str
    job_count: int
