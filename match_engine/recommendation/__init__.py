"""Recommendation package"""
from .behavior import analyze_history, analyze_searches, build_preferences
from .collaborative import applied_job_ids, collaborative_score_for, collaborative_scores, find_similar_candidates
from .fusion import recency_boost, recommend, select_candidate_jobs, trending_jobs
from .models import (
    PreferenceProfile,
    RecommendationItem,
    RecommendationOptions,
    RecommendationOutput,
    RecommendationSource,
    RecommendationStats,
    ScoreBreakdown,
    SimilarityEdge,
)
from .recommender import JobRecommender
from .similar_jobs import SimilarJob, find_similar_jobs

__all__ = [
    "analyze_history",
    "analyze_searches",
    "build_preferences",
    "applied_job_ids",
    "collaborative_score_for",
    "collaborative_scores",
    "find_similar_candidates",
    "recency_boost",
    "recommend",
    "select_candidate_jobs",
    "trending_jobs",
    "PreferenceProfile",
    "RecommendationItem",
    "RecommendationOptions",
    "RecommendationOutput",
    "RecommendationSource",
    "RecommendationStats",
    "ScoreBreakdown",
    "SimilarityEdge",
    "JobRecommender",
    "SimilarJob",
    "find_similar_jobs",
]
