"""
Shared fixtures for the matching engine tests

Fixtures:
---------
- now: Fixed reference time so recency boosts are deterministic
- make_candidate: Factory for CandidateProfile with sensible defaults
- make_job: Factory for JobPosting with sensible defaults
- make_application: Factory for ApplicationRecord relative to ``now``
"""
from datetime import datetime, timedelta, timezone

import pytest

from match_engine.matching import IdentityResolver, MatchScorer
from match_engine.profiles import ApplicationRecord, CandidateProfile, JobPosting

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def scorer():
    """Scorer without synonyms, independent of config/config.yaml"""
    return MatchScorer(IdentityResolver())


@pytest.fixture
def make_candidate():
    def _make(candidate_id="cand_1", **overrides):
        data = {
            "candidate_id": candidate_id,
            "name": f"Candidate {candidate_id}",
            "skills": ["Python", "SQL"],
            "experience_years": 4,
            "highest_degree": "bachelor",
            "location": "Pune",
            "expected_salary": 10,
            "completed_assessments": [
                {"title": "Python Fundamentals", "skills_covered": ["Python"], "score": 90, "passed": True}
            ],
        }
        data.update(overrides)
        return CandidateProfile(**data)
    return _make


@pytest.fixture
def make_job():
    def _make(job_id="job_1", days_ago=0, **overrides):
        data = {
            "job_id": job_id,
            "title": f"Job {job_id}",
            "company": "Acme",
            "industry": "technology",
            "skills_required": ["Python", "SQL", "Docker"],
            "experience_range": {"min_years": 3, "max_years": 6},
            "required_degree": "bachelor",
            "location": "Pune",
            "job_type": "onsite",
            "salary_range": {"min_salary": 8, "max_salary": 12},
            "posted_at": NOW - timedelta(days=days_ago),
        }
        data.update(overrides)
        return JobPosting(**data)
    return _make


@pytest.fixture
def make_application():
    def _make(candidate_id, job_id, days_ago=1):
        return ApplicationRecord(
            candidate_id=candidate_id,
            job_id=job_id,
            applied_at=NOW - timedelta(days=days_ago),
        )
    return _make
