"""Parse free-form location strings and build location suggestions."""
from __future__ import annotations

from typing import TYPE_CHECKING

from salary_engine.log import get_logger
from salary_engine.models import LocationFilter, LocationSuggestion

if TYPE_CHECKING:
    from salary_engine.store.base import PostingStore

log = get_logger(__name__)

STATE_NAMES: dict[str, str] = {
    "AL": "Alabama", "AK": "Alaska", "AZ": "Arizona", "AR": "Arkansas",
    "CA": "California", "CO": "Colorado", "CT": "Connecticut", "DE": "Delaware",
    "FL": "Florida", "GA": "Georgia", "HI": "Hawaii", "ID": "Idaho",
    "IL": "Illinois", "IN": "Indiana", "IA": "Iowa", "KS": "Kansas",
    "KY": "Kentucky", "LA": "Louisiana", "ME": "Maine", "MD": "Maryland",
    "MA": "Massachusetts", "MI": "Michigan", "MN": "Minnesota", "MS": "Mississippi",
    "MO": "Missouri", "MT": "Montana", "NE": "Nebraska", "NV": "Nevada",
    "NH": "New Hampshire", "NJ": "New Jersey", "NM": "New Mexico", "NY": "New York",
    "NC": "North Carolina", "ND": "North Dakota", "OH": "Ohio", "OK": "Oklahoma",
    "OR": "Oregon", "PA": "Pennsylvania", "RI": "Rhode Island", "SC": "South Carolina",
    "SD": "South Dakota", "TN": "Tennessee", "TX": "Texas", "UT": "Utah",
    "VT": "Vermont", "VA": "Virginia", "WA": "Washington", "WV": "West Virginia",
    "WI": "Wisconsin", "WY": "Wyoming", "DC": "District of Columbia",
}

_NAME_TO_CODE: dict[str, str] = {name.lower(): code for code, name in STATE_NAMES.items()}


def state_code(name: str | None) -> str | None:
    """Full state name -> 2-letter code, case-insensitive."""
    if not name:
        return None
    return _NAME_TO_CODE.get(name.strip().lower())


def state_name(code: str | None) -> str | None:
    if not code:
        return None
    return STATE_NAMES.get(code.strip().upper())


def parse_location(location_input: str) -> LocationFilter:
    """Best-effort split of "City, ST", "City, State", "ST", "State" or "City".

    Never raises: an unrecognised string is taken as a city name so the
    aggregator can fall back instead of failing.
    """
    text = (location_input or "").strip()

    if "," in text:
        parts = [p.strip() for p in text.split(",")]
        city, state_part = parts[0], parts[1]
        if len(state_part) == 2:
            code = state_part.upper()
        else:
            code = state_code(state_part) or state_part.upper()
        return LocationFilter(city=city or None, state=code or None)

    if len(text) == 2:
        return LocationFilter(city=None, state=text.upper())

    code = state_code(text)
    if code:
        return LocationFilter(city=None, state=code)

    if text:
        log.warning("Location %r is not a known state; treating it as a city", text)
    return LocationFilter(city=text or None, state=None)


def list_locations(store: PostingStore) -> list[LocationSuggestion]:
    """City and statewide suggestions for active postings, busiest first."""
    counts = store.location_counts()

    cities = [
        LocationSuggestion(
            value=f"{city}, {state}",
            label=f"{city}, {state}",
            kind="city",
            job_count=n,
        )
        for city, state, n in counts.cities
        if city and state
    ]

    states: list[LocationSuggestion] = []
    for state, n in counts.states:
        if not state:
            continue
        full = state_name(state) or state
        states.append(
            LocationSuggestion(value=full, label=f"{full} (statewide)", kind="state", job_count=n)
        )

    suggestions = sorted(cities + states, key=lambda s: s.job_count, reverse=True)
    log.debug("Built %d location suggestions (%d cities, %d states)",
              len(suggestions), len(cities), len(states))
    return suggestions
