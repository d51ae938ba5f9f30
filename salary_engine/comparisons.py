"""Unadjusted state and national salary baselines."""
from __future__ import annotations

from salary_engine.experience import round_half_up
from salary_engine.log import get_logger
from salary_engine.models import Comparisons
from salary_engine.store.base import PostingCriteria, PostingStore

log = get_logger(__name__)


class ComparisonCalculator:
    """Mean max annual salary for a specialty, statewide and nationwide.

    No minimum sample size and no experience multiplier: these are market
    context, not a personalised estimate.
    """

    def __init__(self, store: PostingStore) -> None:
        self.store = store

    def _avg_max_annual(self, specialty: str, state: str | None = None) -> int | None:
        agg = self.store.aggregate(
            PostingCriteria(specialty=specialty, state=state, require_min_annual=False)
        )
        if not agg.count or agg.avg_max_annual is None:
            return None
        return int(round_half_up(agg.avg_max_annual))

    def compare(self, specialty: str, state: str | None) -> Comparisons:
        state_avg = self._avg_max_annual(specialty, state) if state else None
        national_avg = self._avg_max_annual(specialty)
        log.debug("Comparisons for %s (%s): state=%s national=%s",
                  specialty, state, state_avg, national_avg)
        return Comparisons(state_avg=state_avg, national_avg=national_avg)
