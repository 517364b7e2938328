"""Recommendation fusion: content score + collaborative score + recency boost"""
from datetime import datetime, timezone
from typing import Collection, Iterable, List, Optional, Sequence

from .collaborative import applied_job_ids, collaborative_scores
from .models import (
    PreferenceProfile,
    RecommendationItem,
    RecommendationOptions,
    RecommendationSource,
    ScoreBreakdown,
    SimilarityEdge,
)
from ..exceptions import ComputationError
from ..matching.explain import days_since, generate_recommendation_reasons
from ..matching.scorer import MatchScorer
from ..profiles.models import ApplicationRecord, CandidateProfile, JobPosting
from ..utils import logger
from ..utils.dates import as_utc

RECENCY_STEPS = (
    (1, 10),
    (3, 7),
    (7, 5),
    (14, 3),
    (30, 1),
)

TRENDING_REASONS = ["Recently posted", "Popular among job seekers"]


def recency_boost(posted_at: datetime, now: Optional[datetime] = None) -> int:
    """Step boost by days since posting: <=1d 10, <=3d 7, <=7d 5, <=14d 3, <=30d 1"""
    days = days_since(posted_at, now)
    for max_days, boost in RECENCY_STEPS:
        if days <= max_days:
            return boost
    return 0


def _newest_first(jobs: Iterable[JobPosting]) -> List[JobPosting]:
    return sorted(jobs, key=lambda job: as_utc(job.posted_at), reverse=True)


def select_candidate_jobs(
    jobs: Iterable[JobPosting],
    preferences: PreferenceProfile,
    applied: Collection[str] = (),
    include_applied: bool = False,
    cap: int = 200,
) -> List[JobPosting]:
    """Pre-select jobs worth scoring.

    Active jobs only, already-applied jobs dropped unless ``include_applied``.
    When the candidate has preferred or searched skills, a job must require
    at least one skill containing one of them (case-insensitive).
    """
    filter_skills = [s.lower() for s in preferences.filter_skills if s]
    selected = []
    for job in jobs:
        if not job.is_active:
            continue
        if not include_applied and job.job_id in applied:
            continue
        if filter_skills:
            required = [s.lower() for s in job.skills_required]
            if not any(pref in skill for pref in filter_skills for skill in required):
                continue
        selected.append(job)
    return _newest_first(selected)[:cap]


def trending_jobs(jobs: Iterable[JobPosting], limit: int = 20) -> List[RecommendationItem]:
    """Cold-start fallback: the most recently posted active jobs"""
    recent = _newest_first(job for job in jobs if job.is_active)[:limit]
    return [
        RecommendationItem(
            rank=index,
            job=job,
            score_breakdown=ScoreBreakdown(),
            reasons=list(TRENDING_REASONS),
            source=RecommendationSource.TRENDING,
        )
        for index, job in enumerate(recent, 1)
    ]


def _source(content: int, collaborative: int) -> RecommendationSource:
    if content > 0 and collaborative > 0:
        return RecommendationSource.HYBRID
    if collaborative > 0:
        return RecommendationSource.COLLABORATIVE
    return RecommendationSource.CONTENT_BASED


def _score_job(
    scorer: MatchScorer,
    candidate: CandidateProfile,
    job: JobPosting,
    collaborative: int,
    now: Optional[datetime],
) -> RecommendationItem:
    try:
        match = scorer.score(candidate, job)
        content = match.total_score
        recency = recency_boost(job.posted_at, now)
        return RecommendationItem(
            job=job,
            score_breakdown=ScoreBreakdown(
                content=content,
                collaborative=collaborative,
                recency=recency,
                total=content + collaborative + recency,
            ),
            match_tier=match.match_tier,
            reasons=generate_recommendation_reasons(match, job, collaborative, now),
            source=_source(content, collaborative),
        )
    except Exception as e:
        raise ComputationError(str(e), candidate_id=candidate.candidate_id, job_id=job.job_id) from e


def recommend(
    candidate: CandidateProfile,
    preferences: PreferenceProfile,
    similar_candidates: List[SimilarityEdge],
    candidate_jobs: Sequence[JobPosting],
    applications: Sequence[ApplicationRecord] = (),
    options: Optional[RecommendationOptions] = None,
    now: Optional[datetime] = None,
    scorer: Optional[MatchScorer] = None,
) -> List[RecommendationItem]:
    """
    Rank jobs for a candidate by content, collaborative and recency scores

    Args:
        candidate: Candidate profile
        preferences: Output of the behavior analyzer (may be empty)
        similar_candidates: Output of find_similar_candidates (may be empty)
        candidate_jobs: Job corpus supplied by the caller
        applications: Raw application records used for collaborative counts
        options: limit, min_score, include_applied, candidate_job_cap
        now: Reference time for recency (defaults to the current UTC time)
        scorer: Shared MatchScorer

    Returns:
        Recommendations sorted by total score, or trending jobs on cold start
    """
    options = options or RecommendationOptions()
    scorer = scorer or MatchScorer()
    now = now or datetime.now(timezone.utc)

    applied = applied_job_ids(candidate.candidate_id, applications)
    selected = select_candidate_jobs(
        candidate_jobs, preferences, applied, options.include_applied, options.candidate_job_cap
    )
    collaborative = collaborative_scores(candidate.candidate_id, similar_candidates, applications)

    items = []
    for job in selected:
        try:
            items.append(_score_job(scorer, candidate, job, collaborative.get(job.job_id, 0), now))
        except ComputationError as e:
            logger.warning(f"Skipping job {e.job_id} for candidate {e.candidate_id}: {e}")

    kept = [item for item in items if item.score_breakdown.total >= options.min_score]
    ranked = sorted(kept, key=lambda item: item.score_breakdown.total, reverse=True)[:options.limit]
    for index, item in enumerate(ranked, 1):
        item.rank = index

    if not ranked and not preferences.has_history:
        logger.warning(f"No qualifying jobs for candidate {candidate.candidate_id} without history, showing trending jobs")
        return trending_jobs(candidate_jobs, options.limit)

    logger.info(
        f"Generated {len(ranked)} recommendations for {candidate.candidate_id}. "
        f"Top score: {ranked[0].score_breakdown.total if ranked else 0}"
    )
    return ranked
