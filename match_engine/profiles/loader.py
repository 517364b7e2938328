"""Build engine inputs from plain records handed over by the stores"""
import json
from pathlib import Path
from typing import Any, Dict, Iterable, List

from pydantic import BaseModel, Field, ValidationError

from .models import ApplicationRecord, CandidateProfile, JobPosting, SearchRecord
from ..exceptions import InputError


def _validate(model: type, data: Dict[str, Any]) -> BaseModel:
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise InputError(f"Invalid {model.__name__}: {e}") from e


def parse_candidate(data: Dict[str, Any]) -> CandidateProfile:
    """Validate a candidate record; a missing candidate_id raises InputError"""
    return _validate(CandidateProfile, data)


def parse_job(data: Dict[str, Any]) -> JobPosting:
    """Validate a job record; a missing job_id raises InputError"""
    return _validate(JobPosting, data)


def parse_applications(records: Iterable[Dict[str, Any]]) -> List[ApplicationRecord]:
    return [_validate(ApplicationRecord, record) for record in records]


def parse_searches(records: Iterable[Dict[str, Any]]) -> List[SearchRecord]:
    return [_validate(SearchRecord, record) for record in records]


class Dataset(BaseModel):
    """Everything one engine run needs, as fetched by the caller"""
    candidates: List[CandidateProfile] = Field(default_factory=list)
    jobs: List[JobPosting] = Field(default_factory=list)
    applications: List[ApplicationRecord] = Field(default_factory=list)
    searches: Dict[str, List[SearchRecord]] = Field(default_factory=dict)

    def candidate(self, candidate_id: str) -> CandidateProfile:
        for candidate in self.candidates:
            if candidate.candidate_id == candidate_id:
                return candidate
        raise InputError(f"Unknown candidate: {candidate_id}")

    def job(self, job_id: str) -> JobPosting:
        for job in self.jobs:
            if job.job_id == job_id:
                return job
        raise InputError(f"Unknown job: {job_id}")


def load_dataset(path: str) -> Dataset:
    """Load a dataset JSON file (used by scripts, never by the engine itself)"""
    with open(Path(path), "r") as f:
        raw = json.load(f)

    return Dataset(
        candidates=[parse_candidate(c) for c in raw.get("candidates", [])],
        jobs=[parse_job(j) for j in raw.get("jobs", [])],
        applications=parse_applications(raw.get("applications", [])),
        searches={
            candidate_id: parse_searches(records)
            for candidate_id, records in raw.get("searches", {}).items()
        },
    )
