"""Jobs similar to a given job"""
from typing import List, Sequence

from pydantic import BaseModel

from ..matching.normalizer import normalize_skills
from ..profiles.models import JobPosting

SAME_LOCATION_POINTS = 5
SAME_JOB_TYPE_POINTS = 3


class SimilarJob(BaseModel):
    job: JobPosting
    similarity_score: int


def find_similar_jobs(job: JobPosting, jobs: Sequence[JobPosting], limit: int = 10) -> List[SimilarJob]:
    """Active jobs sharing a skill, location, job type or experience range with ``job``.

    Similarity is one point per shared skill, plus 5 for the same location and
    3 for the same job type.
    """
    own_skills = set(normalize_skills(job.skills_required))
    similar = []
    for other in jobs:
        if other.job_id == job.job_id or not other.is_active:
            continue
        shared = len(own_skills & set(normalize_skills(other.skills_required)))
        same_location = bool(job.location) and other.location == job.location
        same_type = job.job_type is not None and other.job_type == job.job_type
        same_experience = job.experience_range is not None and other.experience_range == job.experience_range
        if not (shared or same_location or same_type or same_experience):
            continue
        score = shared + (SAME_LOCATION_POINTS if same_location else 0) + (SAME_JOB_TYPE_POINTS if same_type else 0)
        similar.append(SimilarJob(job=other, similarity_score=score))

    similar.sort(key=lambda s: s.similarity_score, reverse=True)
    return similar[:limit]
