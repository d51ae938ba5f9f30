from salary_engine.estimator import SalaryEstimator
from salary_engine.locations import list_locations
from salary_engine.report import build_estimate_report, build_locations_report
from tests.conftest import posting


def test_report_mentions_fallback_and_relaxed_filters(make_store):
    store = make_store(*[posting(city="Columbus", job_type="PRN") for _ in range(3)])
    estimate = SalaryEstimator(store).estimate("ICU", "Cleveland, OH", 4, "Full-Time", None)

    text = build_estimate_report(estimate)

    assert "statewide postings" in text
    assert "job type 'Full-Time'" in text
    assert "x1.05" in text


def test_report_handles_missing_state_baseline(make_store):
    store = make_store(*[posting(city="Nowhereville", state=None) for _ in range(3)])
    estimate = SalaryEstimator(store).estimate("ICU", "Nowhereville", 2)

    text = build_estimate_report(estimate)

    assert "State average: not enough data" in text
    assert "National average: $85,000" in text


def test_locations_report_limit(make_store):
    store = make_store(posting(), posting(city="Tampa", state="FL"))
    text = build_locations_report(list_locations(store), limit=1)
    assert text.count("\n") == 2


def test_locations_report_empty(make_store):
    assert build_locations_report(list_locations(make_store())) == "No active postings with a location."
