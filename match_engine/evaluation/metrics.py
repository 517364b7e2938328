"""Offline metrics for recommendation runs

Ranking metrics compare recommended job ids with a set of jobs known to be
relevant. Engine metrics describe the items the engine actually produced:
which path surfaced them, which match tier they landed in and how often
scoring fell back to a degraded result.
"""
from typing import Dict, Optional, Sequence, Set
import numpy as np

from ..matching.models import MatchTier
from ..recommendation.models import RecommendationItem, RecommendationSource

UNSCORED = "unscored"


def relevance_vector(recommended: Sequence[str], relevant: Set[str], k: Optional[int] = None) -> np.ndarray:
    """1.0 at each rank holding a relevant job, for the top ``k`` ranks"""
    top = recommended if k is None else recommended[:k]
    return np.array([job_id in relevant for job_id in top], dtype=float)


def _discounts(n: int) -> np.ndarray:
    return 1.0 / np.log2(np.arange(2, n + 2))


class RankingMetrics:
    """Ranking quality against known-relevant job ids"""

    @staticmethod
    def precision_at_k(recommended: Sequence[str], relevant: Set[str], k: int) -> float:
        if not recommended or k <= 0:
            return 0.0
        return float(relevance_vector(recommended, relevant, k).sum() / k)

    @staticmethod
    def recall_at_k(recommended: Sequence[str], relevant: Set[str], k: int) -> float:
        if not relevant:
            return 0.0
        return float(relevance_vector(recommended, relevant, k).sum() / len(relevant))

    @staticmethod
    def f1_score(precision: float, recall: float) -> float:
        if precision + recall == 0:
            return 0.0
        return 2 * (precision * recall) / (precision + recall)

    @staticmethod
    def reciprocal_rank(recommended: Sequence[str], relevant: Set[str]) -> float:
        """1 / rank of the first relevant job, 0 when none is recommended"""
        hits = np.flatnonzero(relevance_vector(recommended, relevant))
        return 1.0 / (hits[0] + 1) if hits.size else 0.0

    @staticmethod
    def ndcg_at_k(recommended: Sequence[str], relevant: Set[str], k: int) -> float:
        """Binary-gain nDCG over the top ``k`` ranks"""
        gains = relevance_vector(recommended, relevant, k)
        ideal = _discounts(min(k, len(relevant))).sum()
        if ideal == 0:
            return 0.0
        return float(gains @ _discounts(gains.size) / ideal)


class EngineMetrics:
    """Shape of a list of recommendation items; every share is in [0, 1]"""

    @staticmethod
    def source_mix(items: Sequence[RecommendationItem]) -> Dict[str, float]:
        """Share of items per source; every source is listed"""
        mix = {source.value: 0.0 for source in RecommendationSource}
        for item in items:
            mix[item.source.value] += 1
        return {key: count / len(items) for key, count in mix.items()} if items else mix

    @staticmethod
    def tier_mix(items: Sequence[RecommendationItem]) -> Dict[str, float]:
        """Share of items per match tier; trending items count as unscored"""
        mix = {tier.value: 0.0 for tier in MatchTier}
        mix[UNSCORED] = 0.0
        for item in items:
            mix[item.match_tier.value if item.match_tier else UNSCORED] += 1
        return {key: count / len(items) for key, count in mix.items()} if items else mix

    @staticmethod
    def degraded_rate(items: Sequence[RecommendationItem]) -> float:
        """Share of items whose match score fell back to the error tier"""
        if not items:
            return 0.0
        return sum(1 for item in items if item.match_tier == MatchTier.ERROR) / len(items)

    @staticmethod
    def mean_breakdown(items: Sequence[RecommendationItem]) -> Dict[str, float]:
        """Average of each score component"""
        parts = np.array(
            [[i.score_breakdown.content, i.score_breakdown.collaborative, i.score_breakdown.recency] for i in items],
            dtype=float,
        ).reshape(-1, 3)
        means = parts.mean(axis=0) if len(items) else np.zeros(3)
        return {name: round(float(value), 2) for name, value in zip(("content", "collaborative", "recency"), means)}
