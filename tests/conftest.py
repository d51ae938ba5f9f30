from __future__ import annotations

import pytest

from salary_engine.models import JobPosting
from salary_engine.store.memory import InMemoryPostingStore


def posting(**overrides) -> JobPosting:
    fields = {
        "specialty": "ICU",
        "city": "Cleveland",
        "state": "OH",
        "job_type": None,
        "shift_type": None,
        "experience_level": None,
        "salary_min_annual": 70000.0,
        "salary_max_annual": 85000.0,
        "salary_min_hourly": None,
        "salary_max_hourly": None,
        "is_active": True,
    }
    fields.update(overrides)
    return JobPosting(**fields)


@pytest.fixture
def make_store():
    def _make(*postings: JobPosting) -> InMemoryPostingStore:
        return InMemoryPostingStore(postings)

    return _make


@pytest.fixture
def cleveland_icu_store() -> InMemoryPostingStore:
    """Four eligible Cleveland ICU postings averaging 70k-85k, no hourly data."""
    return InMemoryPostingStore([
        posting(salary_min_annual=68000, salary_max_annual=83000),
        posting(salary_min_annual=72000, salary_max_annual=87000),
        posting(salary_min_annual=69000, salary_max_annual=84000),
        posting(salary_min_annual=71000, salary_max_annual=86000),
    ])
