"""Evaluation package"""
from .evaluator import RecommendationEvaluator, EvalResult
from .metrics import EngineMetrics, RankingMetrics
from .synthetic import SyntheticCorpus, SyntheticDataGenerator

__all__ = ["RecommendationEvaluator", "EvalResult", "RankingMetrics", "EngineMetrics", "SyntheticCorpus", "SyntheticDataGenerator"]
