"""Batch ranking of candidates for a job and jobs for a candidate"""
import math
from typing import Generic, List, Optional, Sequence, TypeVar
from pydantic import BaseModel, Field

from .models import MatchResult, MatchTier
from .scorer import MatchScorer
from ..profiles.models import CandidateProfile, JobPosting
from ..utils import logger
from ..utils.numbers import round_half_up

T = TypeVar("T")


class RankedCandidate(BaseModel):
    """Recruiter view: one candidate and how well they fit the job"""
    rank: int = 0
    candidate: CandidateProfile
    match_result: MatchResult


class RankedJob(BaseModel):
    """Seeker view: one job and how well the candidate fits it"""
    rank: int = 0
    job: JobPosting
    match_result: MatchResult


class Page(BaseModel, Generic[T]):
    """One page of a ranked list"""
    items: List[T] = Field(default_factory=list)
    page: int
    total_pages: int
    total: int
    has_more: bool


class MatchStats(BaseModel):
    """Aggregate figures for a ranking run"""
    total: int = Field(..., description="Records scored")
    filtered: int = Field(..., description="Records at or above the minimum score")
    avg_score: int = 0
    distribution: dict = Field(default_factory=dict, description="Count of results per match tier")


def _rank(pairs, min_score):
    kept = [p for p in pairs if p.match_result.total_score >= min_score]
    # sorted() is stable, so equal scores keep their input order
    ranked = sorted(kept, key=lambda p: p.match_result.total_score, reverse=True)
    for index, item in enumerate(ranked, 1):
        item.rank = index
    return ranked


def rank_candidates(
    candidates: Sequence[CandidateProfile],
    job: JobPosting,
    min_score: float = 40,
    scorer: Optional[MatchScorer] = None,
) -> List[RankedCandidate]:
    """
    Score every candidate for one job and rank them

    Args:
        candidates: Candidate profiles
        job: Job posting
        min_score: Results below this total score are dropped
        scorer: Shared MatchScorer (a default one is built if omitted)

    Returns:
        Candidates sorted by total score, descending, ties in input order
    """
    scorer = scorer or MatchScorer()
    pairs = [RankedCandidate(candidate=c, match_result=scorer.score(c, job)) for c in candidates]
    ranked = _rank(pairs, min_score)

    degraded = sum(1 for p in pairs if p.match_result.degraded)
    if degraded:
        logger.warning(f"{degraded} of {len(pairs)} candidates could not be scored for job {job.job_id}")
    logger.info(f"Matched {len(ranked)}/{len(pairs)} candidates for job {job.job_id}")
    return ranked


def rank_jobs(
    candidate: CandidateProfile,
    jobs: Sequence[JobPosting],
    min_score: float = 40,
    scorer: Optional[MatchScorer] = None,
) -> List[RankedJob]:
    """Seeker-facing counterpart of rank_candidates"""
    scorer = scorer or MatchScorer()
    pairs = [RankedJob(job=j, match_result=scorer.score(candidate, j)) for j in jobs]
    ranked = _rank(pairs, min_score)
    logger.info(f"Matched {len(ranked)}/{len(pairs)} jobs for candidate {candidate.candidate_id}")
    return ranked


def paginate(items: Sequence[T], page: int = 1, limit: int = 20) -> Page[T]:
    """Slice a ranked list; pages are 1-based and out-of-range pages are empty"""
    page = max(int(page), 1)
    limit = max(int(limit), 1)
    skip = (page - 1) * limit
    chunk = list(items[skip:skip + limit])
    return Page(
        items=chunk,
        page=page,
        total_pages=math.ceil(len(items) / limit),
        total=len(items),
        has_more=skip + limit < len(items),
    )


def summarize_matches(total: int, ranked: Sequence) -> MatchStats:
    """Statistics for the recruiter view; ``total`` is the number of records scored"""
    scores = [r.match_result.total_score for r in ranked]
    distribution = {tier.value: 0 for tier in MatchTier if tier != MatchTier.ERROR}
    for r in ranked:
        if r.match_result.match_tier.value in distribution:
            distribution[r.match_result.match_tier.value] += 1
    return MatchStats(
        total=total,
        filtered=len(ranked),
        avg_score=round_half_up(sum(scores) / len(scores)) if scores else 0,
        distribution=distribution,
    )
