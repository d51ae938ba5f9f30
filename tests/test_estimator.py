import pytest

from salary_engine.errors import InsufficientDataError, MissingFieldsError
from salary_engine.estimator import SalaryEstimator, build_query
from salary_engine.models import FiltersApplied
from tests.conftest import posting


def test_cleveland_icu_end_to_end(cleveland_icu_store):
    result = SalaryEstimator(cleveland_icu_store).estimate("ICU", "Cleveland, OH", 7)

    assert result.metadata.sample_count == 4
    assert result.metadata.fallback_to_state is False
    assert result.metadata.experience_multiplier == 1.12
    assert result.annual.min == 78400
    assert result.annual.max == 95200
    assert result.hourly.min == pytest.approx(37.69)
    assert result.hourly.max == pytest.approx(45.77)
    # comparisons are raw, not multiplied
    assert result.state.annual == 85000
    assert result.state.hourly == pytest.approx(40.87)
    assert result.national.annual == 85000


def test_estimate_is_idempotent(cleveland_icu_store):
    estimator = SalaryEstimator(cleveland_icu_store)
    first = estimator.estimate("ICU", "Cleveland, OH", 7, "any", None)
    second = estimator.estimate("ICU", "Cleveland, OH", 7, "any", None)
    assert first == second
    assert first.to_dict() == second.to_dict()


def test_to_dict_shape(cleveland_icu_store):
    data = SalaryEstimator(cleveland_icu_store).estimate("ICU", "Cleveland, OH", "3").to_dict()

    assert data["annual"] == {"min": 70000, "max": 85000}
    assert data["comparisons"]["state"] == {"annual": 85000, "hourly": 40.87}
    assert data["metadata"]["yearsExperience"] == 3
    assert data["metadata"]["filtersApplied"] == {"jobType": False, "shiftType": False}
    assert data["metadata"]["requestedFilters"] == {"jobType": None, "shiftType": None}


@pytest.mark.parametrize(
    "args, missing",
    [
        ((None, "Cleveland, OH", 3), ["specialty"]),
        (("ICU", "  ", 3), ["location"]),
        (("ICU", "Cleveland, OH", None), ["yearsExperience"]),
        (("ICU", "Cleveland, OH", -1), ["yearsExperience"]),
        (("ICU", "Cleveland, OH", "lots"), ["yearsExperience"]),
        (("", None, None), ["specialty", "location", "yearsExperience"]),
    ],
)
def test_missing_fields(cleveland_icu_store, args, missing):
    with pytest.raises(MissingFieldsError) as exc_info:
        SalaryEstimator(cleveland_icu_store).estimate(*args)
    assert exc_info.value.fields == missing


def test_zero_years_is_not_missing():
    assert build_query("ICU", "OH", 0).years_experience == 0


def test_insufficient_data(make_store):
    store = make_store(posting(experience_level="Leadership"))
    with pytest.raises(InsufficientDataError) as exc_info:
        SalaryEstimator(store).estimate("ICU", "Cleveland, OH", 5)
    assert exc_info.value.specialty == "ICU"
    assert exc_info.value.location == "Cleveland, OH"
    assert "different location or specialty" in exc_info.value.suggestion


def test_metadata_reports_relaxed_filters(make_store):
    store = make_store(
        *[posting(job_type="PRN", shift_type="Day") for _ in range(2)],
        *[posting(city="Columbus", job_type="Full-Time", shift_type="Night") for _ in range(3)],
    )
    result = SalaryEstimator(store).estimate("ICU", "Cleveland, Ohio", 1, "Full-Time", "Night")

    meta = result.metadata
    assert meta.fallback_to_state is True
    assert meta.filters_applied == FiltersApplied(True, True)
    assert meta.requested_job_type == "Full-Time"
    assert meta.requested_shift_type == "Night"
    assert meta.sample_count == 3
    assert meta.experience_multiplier == 0.90


def test_small_sample_still_estimates(make_store):
    store = make_store(posting(salary_min_hourly=30.0, salary_max_hourly=40.0))
    result = SalaryEstimator(store).estimate("ICU", "Ohio", 2)
    assert result.metadata.sample_count == 1
    assert result.hourly.min == 30.0
    assert result.hourly.max == 40.0


def test_store_errors_propagate(cleveland_icu_store):
    class BrokenStore:
        def aggregate(self, criteria):
            raise ConnectionError("store down")

        def location_counts(self):
            raise ConnectionError("store down")

    with pytest.raises(ConnectionError):
        SalaryEstimator(BrokenStore()).estimate("ICU", "Cleveland, OH", 3)


@pytest.mark.parametrize("value, expected", [(7.0, 7), ("7", 7), (0.0, 0)])
def test_integral_years_are_accepted(value, expected):
    assert build_query("ICU", "OH", value).years_experience == expected


def test_fractional_years_are_rejected():
    with pytest.raises(MissingFieldsError) as exc_info:
        build_query("ICU", "OH", 7.5)
    assert exc_info.value.fields == ["yearsExperience"]
