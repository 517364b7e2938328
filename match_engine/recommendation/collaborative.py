"""Collaborative filtering over raw application records.

The candidate/job relation is rebuilt from the flat application list on every
call and discarded afterwards; no similarity graph is kept.
"""
from collections import Counter, defaultdict
from typing import Dict, Iterable, List, Optional, Set

from .models import SimilarityEdge
from ..exceptions import InputError
from ..profiles.models import ApplicationRecord
from ..utils import config


def _jobs_by_candidate(applications: Iterable[ApplicationRecord]) -> Dict[str, Set[str]]:
    adjacency = defaultdict(set)
    for application in applications:
        adjacency[application.candidate_id].add(application.job_id)
    return adjacency


def applied_job_ids(candidate_id: str, applications: Iterable[ApplicationRecord]) -> Set[str]:
    return {a.job_id for a in applications if a.candidate_id == candidate_id}


def find_similar_candidates(
    candidate_id: str,
    applications: Iterable[ApplicationRecord],
    limit: Optional[int] = None,
) -> List[SimilarityEdge]:
    """
    Rank other candidates by how many jobs they share with ``candidate_id``

    Args:
        candidate_id: Target candidate
        applications: Every application record the caller can supply
        limit: Maximum number of similar candidates

    Returns:
        Edges sorted by overlap count, descending
    """
    if not candidate_id:
        raise InputError("candidate_id is required to find similar candidates")
    limit = limit or config.similar_candidates_limit

    adjacency = _jobs_by_candidate(applications)
    own_jobs = adjacency.get(candidate_id, set())
    if not own_jobs:
        return []

    overlap = Counter()
    for other_id, jobs in adjacency.items():
        if other_id == candidate_id:
            continue
        shared = len(own_jobs & jobs)
        if shared:
            overlap[other_id] = shared

    return [
        SimilarityEdge(other_candidate_id=other_id, overlap_count=count)
        for other_id, count in overlap.most_common(limit)
    ]


def collaborative_scores(
    candidate_id: str,
    similar_candidates: List[SimilarityEdge],
    applications: Iterable[ApplicationRecord],
    limit: Optional[int] = None,
) -> Dict[str, int]:
    """Job id -> number of similar candidates who applied, for the top ``limit`` jobs.

    Jobs the target candidate already applied to are never included. Counts
    are raw, not divided by the number of similar candidates.
    """
    limit = limit or config.collaborative_job_limit
    if not similar_candidates:
        return {}

    adjacency = _jobs_by_candidate(applications)
    already_applied = adjacency.get(candidate_id, set())

    frequency = Counter()
    for edge in similar_candidates:
        for job_id in adjacency.get(edge.other_candidate_id, set()):
            if job_id not in already_applied:
                frequency[job_id] += 1

    # Ties at the cut-off go to the smaller job id
    ranked = sorted(frequency.items(), key=lambda pair: (-pair[1], pair[0]))
    return dict(ranked[:limit])


def collaborative_score_for(
    job_id: str,
    similar_candidates: List[SimilarityEdge],
    applications: Iterable[ApplicationRecord],
    candidate_id: Optional[str] = None,
) -> int:
    """Number of similar candidates who applied to ``job_id``; 0 if the target already applied"""
    applications = list(applications)
    if candidate_id and job_id in applied_job_ids(candidate_id, applications):
        return 0

    adjacency = _jobs_by_candidate(applications)
    return sum(1 for edge in similar_candidates if job_id in adjacency.get(edge.other_candidate_id, set()))
