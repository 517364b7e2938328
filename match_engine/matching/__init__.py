"""Candidate/job matching package"""
from .dimensions import (
    DIMENSION_MAX_SCORES,
    score_assessments,
    score_compensation,
    score_education,
    score_experience,
    score_location,
    score_skills,
)
from .models import Dimension, DimensionResult, MatchResult, MatchStatus, MatchTier
from .normalizer import IdentityResolver, SkillSynonymResolver, SynonymTableResolver, normalize_skills, skills_match
from .ranker import MatchStats, Page, RankedCandidate, RankedJob, paginate, rank_candidates, rank_jobs, summarize_matches
from .scorer import MatchScorer, match_tier_for, score_match

__all__ = [
    "DIMENSION_MAX_SCORES",
    "score_assessments",
    "score_compensation",
    "score_education",
    "score_experience",
    "score_location",
    "score_skills",
    "Dimension",
    "DimensionResult",
    "MatchResult",
    "MatchStatus",
    "MatchTier",
    "IdentityResolver",
    "SkillSynonymResolver",
    "SynonymTableResolver",
    "normalize_skills",
    "skills_match",
    "MatchStats",
    "Page",
    "RankedCandidate",
    "RankedJob",
    "paginate",
    "rank_candidates",
    "rank_jobs",
    "summarize_matches",
    "MatchScorer",
    "match_tier_for",
    "score_match",
]
