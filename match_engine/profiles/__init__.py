"""Engine input models"""
from .models import (
    ApplicationRecord,
    AppliedJob,
    AssessmentResult,
    CandidateProfile,
    DegreeLevel,
    ExperienceRange,
    JobPosting,
    JobType,
    SalaryRange,
    SearchRecord,
)
from .loader import Dataset, load_dataset, parse_applications, parse_candidate, parse_job, parse_searches

__all__ = [
    "ApplicationRecord",
    "AppliedJob",
    "AssessmentResult",
    "CandidateProfile",
    "DegreeLevel",
    "ExperienceRange",
    "JobPosting",
    "JobType",
    "SalaryRange",
    "SearchRecord",
    "Dataset",
    "load_dataset",
    "parse_applications",
    "parse_candidate",
    "parse_job",
    "parse_searches",
]
