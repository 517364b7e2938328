"""Input data models supplied by the profile, job and application stores"""
from datetime import datetime
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator, model_validator


class DegreeLevel(str, Enum):
    """Education levels, in ascending order"""
    HIGH_SCHOOL = "high-school"
    DIPLOMA = "diploma"
    ASSOCIATE = "associate"
    BACHELOR = "bachelor"
    MASTER = "master"
    PHD = "phd"
    ANY = "any"


_DEGREE_ALIASES = {
    "bachelors": DegreeLevel.BACHELOR,
    "masters": DegreeLevel.MASTER,
    "doctorate": DegreeLevel.PHD,
    "high school": DegreeLevel.HIGH_SCHOOL,
}


class JobType(str, Enum):
    """Work arrangement of a job posting"""
    REMOTE = "remote"
    HYBRID = "hybrid"
    ONSITE = "onsite"


_JOB_TYPE_ALIASES = {
    "work-from-home": JobType.REMOTE,
    "on-site": JobType.ONSITE,
}


def _coerce_enum(value, enum_cls, aliases):
    """Map free text onto an enum member, or None when it is not recognised"""
    if value is None or isinstance(value, enum_cls):
        return value
    text = str(value).strip().lower()
    if text in aliases:
        return aliases[text]
    try:
        return enum_cls(text)
    except ValueError:
        return None


def _require_id(value: str) -> str:
    if value is None or not str(value).strip():
        raise ValueError("identifier must not be empty")
    return str(value).strip()


class AssessmentResult(BaseModel):
    """Completed skill assessment"""
    title: str = Field("", description="Assessment title")
    skills_covered: List[str] = Field(default_factory=list, description="Skills the assessment tests")
    score: float = Field(0, description="Percentage score (0-100)")
    passed: bool = Field(False, description="Whether the passing score was reached")

    @field_validator("score", mode="before")
    @classmethod
    def clamp_score(cls, value):
        if value is None:
            return 0
        return min(max(float(value), 0.0), 100.0)


class CandidateProfile(BaseModel):
    """Job seeker profile"""
    candidate_id: str = Field(..., description="Unique candidate identifier")
    name: Optional[str] = Field(None, description="Display name")
    skills: List[str] = Field(default_factory=list, description="Free-text skills")
    experience_years: Optional[float] = Field(None, description="Total years of experience")
    highest_degree: Optional[DegreeLevel] = Field(None, description="Highest completed degree")
    location: Optional[str] = Field(None, description="Current city")
    expected_salary: Optional[float] = Field(None, description="Expected salary")
    willing_to_relocate: bool = Field(False, description="Open to relocating for a job")
    completed_assessments: List[AssessmentResult] = Field(default_factory=list)

    @field_validator("candidate_id", mode="before")
    @classmethod
    def check_id(cls, value):
        return _require_id(value)

    @field_validator("highest_degree", mode="before")
    @classmethod
    def coerce_degree(cls, value):
        return _coerce_enum(value, DegreeLevel, _DEGREE_ALIASES)

    @field_validator("experience_years", mode="before")
    @classmethod
    def clamp_experience(cls, value):
        if value is None:
            return None
        return max(float(value), 0.0)

    @field_validator("expected_salary", mode="before")
    @classmethod
    def drop_negative_salary(cls, value):
        if value is None or float(value) < 0:
            return None
        return float(value)


class ExperienceRange(BaseModel):
    """Required years of experience"""
    min_years: Optional[float] = Field(None, ge=0)
    max_years: Optional[float] = Field(None, ge=0)

    @field_validator("min_years", "max_years", mode="before")
    @classmethod
    def clamp_negative(cls, value):
        return None if value is None else max(float(value), 0.0)

    @model_validator(mode="after")
    def order_bounds(self):
        if self.min_years is not None and self.max_years is not None and self.min_years > self.max_years:
            self.min_years, self.max_years = self.max_years, self.min_years
        return self


class SalaryRange(BaseModel):
    """Offered salary band"""
    min_salary: Optional[float] = Field(None, ge=0)
    max_salary: Optional[float] = Field(None, ge=0)

    @field_validator("min_salary", "max_salary", mode="before")
    @classmethod
    def clamp_negative(cls, value):
        return None if value is None else max(float(value), 0.0)

    @model_validator(mode="after")
    def order_bounds(self):
        if self.min_salary and self.max_salary and self.min_salary > self.max_salary:
            self.min_salary, self.max_salary = self.max_salary, self.min_salary
        return self


class JobPosting(BaseModel):
    """Job posting as returned by the job store"""
    job_id: str = Field(..., description="Unique job identifier")
    title: str = Field("", description="Job title")
    company: Optional[str] = Field(None, description="Company name")
    industry: Optional[str] = Field(None, description="Industry of the hiring company")
    skills_required: List[str] = Field(default_factory=list, description="Required skills")
    experience_range: Optional[ExperienceRange] = Field(None, description="Required years of experience")
    required_degree: Optional[DegreeLevel] = Field(None, description="Minimum degree")
    location: Optional[str] = Field(None, description="Job city")
    job_type: Optional[JobType] = Field(None, description="Remote, hybrid or onsite")
    salary_range: Optional[SalaryRange] = Field(None, description="Offered salary band")
    posted_at: datetime = Field(..., description="When the job was posted")
    company_verified: bool = Field(False, description="Company passed verification")
    is_active: bool = Field(True, description="Job is open for applications")

    @field_validator("job_id", mode="before")
    @classmethod
    def check_id(cls, value):
        return _require_id(value)

    @field_validator("required_degree", mode="before")
    @classmethod
    def coerce_degree(cls, value):
        return _coerce_enum(value, DegreeLevel, _DEGREE_ALIASES)

    @field_validator("job_type", mode="before")
    @classmethod
    def coerce_job_type(cls, value):
        return _coerce_enum(value, JobType, _JOB_TYPE_ALIASES)

    @property
    def reference_salary(self) -> Optional[float]:
        """Single salary figure used for preference statistics"""
        if not self.salary_range:
            return None
        return self.salary_range.min_salary or self.salary_range.max_salary


class ApplicationRecord(BaseModel):
    """One application edge: candidate applied to job"""
    candidate_id: str
    job_id: str
    applied_at: datetime

    @field_validator("candidate_id", "job_id", mode="before")
    @classmethod
    def check_ids(cls, value):
        return _require_id(value)


class AppliedJob(BaseModel):
    """Application joined with the job it targets"""
    job: JobPosting
    applied_at: datetime


class SearchRecord(BaseModel):
    """Saved search or search-history entry"""
    keywords: Optional[str] = None
    skills: List[str] = Field(default_factory=list)
    location: Optional[str] = None
    job_type: Optional[str] = None
    searched_at: datetime
    saved: bool = Field(False, description="Saved search rather than a one-off query")
    is_active: bool = Field(True, description="Saved search is still enabled")
