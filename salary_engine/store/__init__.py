from .base import LocationCounts, PostingAggregate, PostingCriteria, PostingStore
from .csv_store import CsvPostingStore
from .memory import InMemoryPostingStore

from salary_engine.config import Settings
from salary_engine.log import get_logger

log = get_logger(__name__)

__all__ = [
    "PostingStore", "PostingCriteria", "PostingAggregate", "LocationCounts",
    "InMemoryPostingStore", "CsvPostingStore", "get_store",
]


def get_store(settings: Settings) -> PostingStore:
    path = settings.postings_path
    if path is not None and path.exists():
        log.info("Using CSV posting store: %s", path)
        return CsvPostingStore(path)

    if path is not None:
        log.warning("Postings file %s not found — using an empty store", path)
    else:
        log.warning("No postings_path configured — using an empty store")
    return InMemoryPostingStore()
