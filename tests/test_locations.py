import pytest

from salary_engine.locations import list_locations, parse_location, state_code, state_name
from salary_engine.models import LocationFilter
from tests.conftest import posting


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Cleveland, OH", LocationFilter(city="Cleveland", state="OH")),
        ("Ohio", LocationFilter(city=None, state="OH")),
        ("OH", LocationFilter(city=None, state="OH")),
        ("oh", LocationFilter(city=None, state="OH")),
        ("Cleveland, Ohio", LocationFilter(city="Cleveland", state="OH")),
        ("  Cleveland ,  oh ", LocationFilter(city="Cleveland", state="OH")),
        ("Nowhereville", LocationFilter(city="Nowhereville", state=None)),
        ("new york", LocationFilter(city=None, state="NY")),
        ("Washington, District of Columbia", LocationFilter(city="Washington", state="DC")),
    ],
)
def test_parse_location(text, expected):
    assert parse_location(text) == expected


def test_unknown_state_name_after_comma_is_uppercased():
    assert parse_location("Springfield, Ohioo") == LocationFilter(city="Springfield", state="OHIOO")


def test_unknown_location_logs_warning(caplog):
    with caplog.at_level("WARNING"):
        result = parse_location("Nowhereville")
    assert result.city == "Nowhereville"
    assert "not a known state" in caplog.text


def test_state_lookups_are_case_insensitive():
    assert state_code("north carolina") == "NC"
    assert state_code("Atlantis") is None
    assert state_name("oh") == "Ohio"
    assert state_name(None) is None


def test_list_locations_sorted_by_job_count(make_store):
    store = make_store(
        posting(city="Cleveland", state="OH"),
        posting(city="Cleveland", state="OH"),
        posting(city="Columbus", state="OH"),
        posting(city="Tampa", state="FL"),
        posting(city=None, state="TX"),
        posting(city="Akron", state="OH", is_active=False),
    )

    suggestions = list_locations(store)

    assert suggestions[0].value == "Ohio"
    assert suggestions[0].label == "Ohio (statewide)"
    assert suggestions[0].job_count == 3
    assert suggestions[1].value == "Cleveland, OH"
    assert suggestions[1].kind == "city"
    values = [s.value for s in suggestions]
    assert "Akron, OH" not in values
    assert "Texas" in values
    assert not any(v.startswith("None") for v in values)
