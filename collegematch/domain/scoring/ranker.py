"""
Ranker

Orders scored colleges and keeps the top set.
"""

from typing import List, Tuple

from collegematch.domain.scoring.interfaces import MatchResult


class Ranker:
    """
    Deterministic ranking of match results.

    Sort key:
    1. match_score descending
    2. college ranking ascending (unranked colleges last)
    3. college_id ascending
    """

    DEFAULT_LIMIT = 15

    def __init__(self, limit: int = DEFAULT_LIMIT):
        if limit < 0:
            raise ValueError("limit must be non-negative")
        self._limit = limit

    @property
    def limit(self) -> int:
        return self._limit

    def rank(self, results: List[MatchResult]) -> List[MatchResult]:
        """Return at most `limit` results, best first."""
        return sorted(results, key=self._sort_key)[:self._limit]

    @staticmethod
    def _sort_key(result: MatchResult) -> Tuple[int, int, int, str]:
        ranking = result.ai_insights.ranking
        unranked = ranking is None
        if unranked:
            ranking = 0
        return (-result.match_score, int(unranked), ranking, result.college_id)
