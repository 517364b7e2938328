"""Match scorer: composes the dimension scorers into one weighted score"""
from typing import Optional

from .dimensions import (
    RELOCATION_RADIUS,
    score_assessments,
    score_compensation,
    score_education,
    score_experience,
    score_location,
    score_skills,
)
from .explain import generate_strengths, generate_weaknesses
from .models import Dimension, MatchResult, MatchTier
from .normalizer import SkillSynonymResolver, SynonymTableResolver
from ..profiles.models import CandidateProfile, JobPosting
from ..utils import config, logger
from ..utils.numbers import round_half_up

TIER_THRESHOLDS = (
    (85, MatchTier.EXCELLENT),
    (70, MatchTier.VERY_GOOD),
    (55, MatchTier.GOOD),
    (40, MatchTier.FAIR),
)


def match_tier_for(total_score: int) -> MatchTier:
    for threshold, tier in TIER_THRESHOLDS:
        if total_score >= threshold:
            return tier
    return MatchTier.POOR


class MatchScorer:
    """Scores (candidate, job) pairs.

    Holds only the skill synonym resolver, so one instance can be shared
    across threads.
    """

    def __init__(self, resolver: Optional[SkillSynonymResolver] = None):
        self.resolver = resolver if resolver is not None else SynonymTableResolver(config.skill_synonyms)

    def score(self, candidate: CandidateProfile, job: JobPosting) -> MatchResult:
        """
        Score one candidate against one job

        Args:
            candidate: Candidate profile
            job: Job posting

        Returns:
            MatchResult; on an internal fault a degraded result with
            total_score=0, match_tier="error" and the message in ``error``
        """
        try:
            return self._score(candidate, job)
        except Exception as e:
            logger.error(
                f"Error scoring candidate {getattr(candidate, 'candidate_id', '?')} "
                f"for job {getattr(job, 'job_id', '?')}: {e}"
            )
            return MatchResult(total_score=0, match_tier=MatchTier.ERROR, error=str(e))

    def _score(self, candidate: CandidateProfile, job: JobPosting) -> MatchResult:
        dimensions = {
            Dimension.SKILLS: score_skills(candidate.skills, job.skills_required, self.resolver),
            Dimension.EXPERIENCE: score_experience(candidate.experience_years, job.experience_range),
            Dimension.EDUCATION: score_education(candidate.highest_degree, job.required_degree),
            Dimension.LOCATION: score_location(
                candidate.location,
                job.location,
                job.job_type,
                RELOCATION_RADIUS if candidate.willing_to_relocate else 0,
            ),
            Dimension.COMPENSATION: score_compensation(candidate.expected_salary, job.salary_range),
            Dimension.ASSESSMENTS: score_assessments(
                candidate.completed_assessments, job.skills_required, self.resolver
            ),
        }

        total = round_half_up(sum(d.score for d in dimensions.values()))
        result = MatchResult(total_score=total, match_tier=match_tier_for(total), dimensions=dimensions)
        result.strengths = generate_strengths(result)
        result.weaknesses = generate_weaknesses(result)
        return result


def score_match(candidate: CandidateProfile, job: JobPosting, resolver: Optional[SkillSynonymResolver] = None) -> MatchResult:
    """Convenience wrapper around MatchScorer.score"""
    return MatchScorer(resolver).score(candidate, job)
