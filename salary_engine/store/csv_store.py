"""Posting store backed by a CSV export of the postings table."""
from __future__ import annotations

import csv
import fcntl
from pathlib import Path

from salary_engine.log import get_logger
from salary_engine.models import JobPosting
from salary_engine.retry import retry
from salary_engine.store.memory import InMemoryPostingStore

log = get_logger(__name__)

HEADERS: list[str] = [
    "specialty", "city", "state", "job_type", "shift_type", "experience_level",
    "salary_min_annual", "salary_max_annual", "salary_min_hourly", "salary_max_hourly",
    "is_active",
]

_TRUTHY = {"1", "true", "yes", "y", "t"}


def _lock_shared(f) -> None:
    """Advisory shared lock so a concurrent export can't be read half-written."""
    try:
        fcntl.flock(f.fileno(), fcntl.LOCK_SH)
    except (OSError, AttributeError):
        pass


def _unlock(f) -> None:
    try:
        fcntl.flock(f.fileno(), fcntl.LOCK_UN)
    except (OSError, AttributeError):
        pass


def _text(raw: str | None) -> str | None:
    raw = (raw or "").strip()
    return raw or None


def _number(raw: str | None) -> float | None:
    raw = (raw or "").strip().replace(",", "")
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        log.debug("Unparseable salary value %r treated as missing", raw)
        return None


def row_to_posting(row: dict[str, str]) -> JobPosting:
    state = _text(row.get("state"))
    return JobPosting(
        specialty=_text(row.get("specialty")) or "",
        city=_text(row.get("city")),
        state=state.upper() if state else None,
        job_type=_text(row.get("job_type")),
        shift_type=_text(row.get("shift_type")),
        experience_level=_text(row.get("experience_level")),
        salary_min_annual=_number(row.get("salary_min_annual")),
        salary_max_annual=_number(row.get("salary_max_annual")),
        salary_min_hourly=_number(row.get("salary_min_hourly")),
        salary_max_hourly=_number(row.get("salary_max_hourly")),
        is_active=(row.get("is_active") or "true").strip().lower() in _TRUTHY,
    )


@retry(max_attempts=3, base_delay=0.5, retryable=(OSError,))
def read_postings(path: Path) -> list[JobPosting]:
    with open(path, "r", newline="", encoding="utf-8") as f:
        _lock_shared(f)
        try:
            rows = list(csv.DictReader(f))
        finally:
            _unlock(f)
    return [row_to_posting(r) for r in rows]


class CsvPostingStore(InMemoryPostingStore):
    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        postings = read_postings(self.path)
        log.info("Loaded %d postings from %s", len(postings), self.path.name)
        super().__init__(postings)
