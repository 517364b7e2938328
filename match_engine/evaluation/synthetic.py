"""Seeded synthetic corpora for evaluation and load tests"""
import random
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Set

from ..profiles.models import ApplicationRecord, CandidateProfile, JobPosting

PROFILE_FAMILIES = {
    "ml_engineer": ["Python", "TensorFlow", "PyTorch", "AWS", "Docker"],
    "full_stack": ["JavaScript", "React", "Node.js", "MongoDB", "CSS"],
    "data_scientist": ["Python", "SQL", "Pandas", "Statistics", "Tableau"],
    "devops": ["AWS", "Kubernetes", "Terraform", "Docker", "Jenkins"],
    "backend": ["Java", "Spring Boot", "PostgreSQL", "Redis", "Microservices"],
}
CITIES = ["Pune", "Bangalore", "Mumbai", "Delhi", "Hyderabad"]
DEGREES = ["bachelor", "master", "bachelor", "diploma", "phd"]
JOB_TYPES = ["onsite", "hybrid", "remote"]


@dataclass
class SyntheticCorpus:
    """Candidates, jobs and applications plus the jobs each candidate should get"""
    candidates: List[CandidateProfile] = field(default_factory=list)
    jobs: List[JobPosting] = field(default_factory=list)
    applications: List[ApplicationRecord] = field(default_factory=list)
    ground_truth: Dict[str, Set[str]] = field(default_factory=dict)


class SyntheticDataGenerator:
    """Generate synthetic corpora with family-based ground truth.

    Candidate ``i`` and job ``j`` belong to family ``i % 5`` / ``j % 5``; a job
    is relevant to a candidate when the families agree.
    """

    def __init__(self, seed: int = 42):
        self.rng = random.Random(seed)
        self.families = list(PROFILE_FAMILIES)

    def generate(
        self,
        num_candidates: int,
        num_jobs: int,
        applications_per_candidate: int = 3,
        now: datetime = None,
    ) -> SyntheticCorpus:
        now = now or datetime.now(timezone.utc)
        corpus = SyntheticCorpus()

        for j in range(num_jobs):
            family = self.families[j % len(self.families)]
            skills = PROFILE_FAMILIES[family]
            min_years = self.rng.randint(0, 5)
            min_salary = self.rng.randint(6, 20)
            corpus.jobs.append(JobPosting(
                job_id=f"job_{str(j + 1).zfill(3)}",
                title=f"{family.replace('_', ' ').title()} #{j + 1}",
                company=f"Company {j % 17}",
                industry="technology",
                skills_required=self.rng.sample(skills, 3),
                experience_range={"min_years": min_years, "max_years": min_years + 4},
                required_degree=self.rng.choice(DEGREES[:2]),
                location=self.rng.choice(CITIES),
                job_type=self.rng.choice(JOB_TYPES),
                salary_range={"min_salary": min_salary, "max_salary": min_salary + 6},
                posted_at=now - timedelta(days=self.rng.randint(0, 45)),
                company_verified=self.rng.random() < 0.5,
            ))

        for i in range(num_candidates):
            family_index = i % len(self.families)
            candidate_id = f"candidate_{i}"
            corpus.candidates.append(CandidateProfile(
                candidate_id=candidate_id,
                name=f"{self.families[family_index].replace('_', ' ').title()} {i}",
                skills=self.rng.sample(PROFILE_FAMILIES[self.families[family_index]], 4),
                experience_years=self.rng.randint(0, 10),
                highest_degree=self.rng.choice(DEGREES),
                location=self.rng.choice(CITIES),
                expected_salary=self.rng.randint(6, 26),
                willing_to_relocate=self.rng.random() < 0.3,
            ))

            family_jobs = [job for j, job in enumerate(corpus.jobs) if j % len(self.families) == family_index]
            picks = self.rng.sample(family_jobs, min(applications_per_candidate, len(family_jobs)))
            # Applied jobs are never recommended
            corpus.ground_truth[candidate_id] = {job.job_id for job in family_jobs} - {job.job_id for job in picks}
            for job in picks:
                corpus.applications.append(ApplicationRecord(
                    candidate_id=candidate_id,
                    job_id=job.job_id,
                    applied_at=now - timedelta(days=self.rng.randint(0, 30)),
                ))

        return corpus
