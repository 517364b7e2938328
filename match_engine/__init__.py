"""Candidate-job matching and recommendation engine"""
from .exceptions import ComputationError, InputError, MatchEngineError
from .matching import MatchResult, MatchScorer, MatchTier, rank_candidates, rank_jobs, score_match
from .profiles import ApplicationRecord, AssessmentResult, CandidateProfile, JobPosting, SearchRecord
from .recommendation import JobRecommender, RecommendationItem, RecommendationOutput, recommend

__version__ = "0.1.0"

__all__ = [
    "ComputationError",
    "InputError",
    "MatchEngineError",
    "MatchResult",
    "MatchScorer",
    "MatchTier",
    "rank_candidates",
    "rank_jobs",
    "score_match",
    "ApplicationRecord",
    "AssessmentResult",
    "CandidateProfile",
    "JobPosting",
    "SearchRecord",
    "JobRecommender",
    "RecommendationItem",
    "RecommendationOutput",
    "recommend",
]
