"""Evaluation pipeline"""
import time
from typing import Dict, List, Set
from dataclasses import dataclass
import pandas as pd

from .metrics import EngineMetrics, RankingMetrics
from .synthetic import SyntheticCorpus
from ..profiles.models import CandidateProfile
from ..recommendation.models import RecommendationItem, RecommendationOptions
from ..recommendation.recommender import JobRecommender
from ..utils import logger


def _rounded(shares: Dict[str, float]) -> Dict[str, float]:
    return {key: round(value, 4) for key, value in shares.items()}


@dataclass
class EvalResult:
    """Single evaluation result"""
    candidate_id: str
    latency: float
    precision: float
    recall: float
    f1: float
    mrr: float
    ndcg: float
    num_recommendations: int
    cold_start: bool
    degraded_rate: float


class RecommendationEvaluator:
    """Evaluate the recommender against known-relevant jobs"""

    def __init__(self, recommender: JobRecommender, options: RecommendationOptions = None):
        self.recommender = recommender
        self.options = options or RecommendationOptions(min_score=0)
        self.results: List[EvalResult] = []
        self.items: List[RecommendationItem] = []

    def evaluate_single(
        self,
        candidate: CandidateProfile,
        corpus: SyntheticCorpus,
        ground_truth: Set[str],
        k: int = 5
    ) -> EvalResult:
        """Evaluate single candidate"""
        start = time.perf_counter()
        output = self.recommender.recommend(
            candidate,
            corpus.jobs,
            applications=corpus.applications,
            options=self.options,
        )
        latency = time.perf_counter() - start

        self.items.extend(output.recommendations)
        recommended_ids = [item.job.job_id for item in output.recommendations]

        calc = RankingMetrics()
        precision = calc.precision_at_k(recommended_ids, ground_truth, k)
        recall = calc.recall_at_k(recommended_ids, ground_truth, k)

        return EvalResult(
            candidate_id=candidate.candidate_id,
            latency=latency,
            precision=precision,
            recall=recall,
            f1=calc.f1_score(precision, recall),
            mrr=calc.reciprocal_rank(recommended_ids, ground_truth),
            ndcg=calc.ndcg_at_k(recommended_ids, ground_truth, k),
            num_recommendations=len(recommended_ids),
            cold_start=output.stats.cold_start,
            degraded_rate=EngineMetrics.degraded_rate(output.recommendations),
        )

    def run_evaluation(self, corpus: SyntheticCorpus, k: int = 5) -> Dict:
        """Run full evaluation"""
        logger.info(f"Starting evaluation on {len(corpus.candidates)} candidates")

        self.items = []
        start_time = time.perf_counter()
        self.results = [
            self.evaluate_single(candidate, corpus, corpus.ground_truth.get(candidate.candidate_id, set()), k)
            for candidate in corpus.candidates
        ]
        total_time = time.perf_counter() - start_time

        return self.generate_report(total_time, k)

    def generate_report(self, total_time: float, k: int = 5) -> Dict:
        """Generate evaluation report"""
        df = pd.DataFrame([vars(r) for r in self.results])
        if df.empty:
            return {"total_samples": 0, "total_time_sec": round(total_time, 2)}

        def summary(column: str) -> Dict:
            return {
                "mean": round(float(df[column].mean()), 4),
                "std": round(float(df[column].std(ddof=0)), 4)
            }

        return {
            "total_samples": len(df),
            "total_time_sec": round(total_time, 2),
            "quality_metrics": {
                f"precision@{k}": summary("precision"),
                f"recall@{k}": summary("recall"),
                "f1_score": summary("f1"),
                "mrr": summary("mrr"),
                f"ndcg@{k}": summary("ndcg")
            },
            "coverage": {
                "avg_recommendations": round(float(df["num_recommendations"].mean()), 2),
                "cold_start_rate": round(float(df["cold_start"].mean()), 4)
            },
            "engine_metrics": {
                "source_mix": _rounded(EngineMetrics.source_mix(self.items)),
                "tier_mix": _rounded(EngineMetrics.tier_mix(self.items)),
                "degraded_rate": round(EngineMetrics.degraded_rate(self.items), 4),
                "mean_breakdown": EngineMetrics.mean_breakdown(self.items)
            },
            "performance_metrics": {
                "avg_latency_sec": round(float(df["latency"].mean()), 4),
                "p50_latency_sec": round(float(df["latency"].quantile(0.50)), 4),
                "p95_latency_sec": round(float(df["latency"].quantile(0.95)), 4),
                "throughput_req_per_sec": round(len(df) / total_time, 2) if total_time > 0 else 0.0
            }
        }
