"""Recommendation models"""
from enum import Enum
from typing import Dict, List, Optional
from pydantic import BaseModel, Field, model_validator

from ..matching.models import MatchTier
from ..profiles.models import JobPosting
from ..utils import config


class SalaryBand(BaseModel):
    """Salary statistics over applied jobs"""
    min: Optional[float] = None
    max: Optional[float] = None
    avg: Optional[int] = None


class ExperienceBand(BaseModel):
    """Minimum experience asked by applied jobs"""
    min: Optional[float] = None
    max: Optional[float] = None


class PreferenceProfile(BaseModel):
    """Implicit preferences mined from history; rebuilt on every request"""
    preferred_skills: List[str] = Field(default_factory=list, description="Most frequent skills, most frequent first")
    preferred_locations: List[str] = Field(default_factory=list)
    preferred_job_types: List[str] = Field(default_factory=list)
    preferred_industries: List[str] = Field(default_factory=list)
    salary_band: SalaryBand = Field(default_factory=SalaryBand)
    experience_band: ExperienceBand = Field(default_factory=ExperienceBand)
    total_applications: int = 0
    search_keywords: List[str] = Field(default_factory=list)
    search_skills: List[str] = Field(default_factory=list)
    search_locations: List[str] = Field(default_factory=list)
    search_job_types: List[str] = Field(default_factory=list)

    @property
    def has_history(self) -> bool:
        return self.total_applications > 0

    @property
    def filter_skills(self) -> List[str]:
        """Skills used to pre-select candidate jobs, deduplicated in priority order"""
        return list(dict.fromkeys(self.preferred_skills + self.search_skills))


class SearchSignals(BaseModel):
    """Intent extracted from saved searches and recent search history"""
    keywords: List[str] = Field(default_factory=list)
    skills: List[str] = Field(default_factory=list)
    locations: List[str] = Field(default_factory=list)
    job_types: List[str] = Field(default_factory=list)


class SimilarityEdge(BaseModel):
    """Another candidate who applied to some of the same jobs"""
    other_candidate_id: str
    overlap_count: int = Field(..., ge=1, description="Jobs both candidates applied to")


class RecommendationSource(str, Enum):
    CONTENT_BASED = "content-based"
    COLLABORATIVE = "collaborative"
    HYBRID = "hybrid"
    TRENDING = "trending"


class ScoreBreakdown(BaseModel):
    """Components of a recommendation score, kept separate so callers can re-weight"""
    content: int = Field(0, ge=0, le=100, description="Match score")
    collaborative: int = Field(0, ge=0, description="Similar candidates who applied (unbounded)")
    recency: int = Field(0, ge=0, le=10, description="Boost for recently posted jobs")
    total: int = 0

    @model_validator(mode="after")
    def check_total(self):
        if self.total != self.content + self.collaborative + self.recency:
            raise ValueError("total must equal content + collaborative + recency")
        return self


class RecommendationItem(BaseModel):
    """Single job recommendation"""
    rank: int = 0
    job: JobPosting
    score_breakdown: ScoreBreakdown
    match_tier: Optional[MatchTier] = Field(None, description="Unset for trending fallback items")
    reasons: List[str] = Field(default_factory=list, description="Why this job is recommended")
    source: RecommendationSource


class RecommendationOptions(BaseModel):
    """Per-call knobs; defaults come from config"""
    limit: int = Field(default_factory=lambda: config.recommendation_limit, ge=1)
    min_score: int = Field(default_factory=lambda: config.recommendation_min_score)
    include_applied: bool = False
    candidate_job_cap: int = Field(default_factory=lambda: config.candidate_job_cap, ge=1)


class RecommendationStats(BaseModel):
    total: int = 0
    sources: Dict[str, int] = Field(default_factory=dict)
    avg_score: int = 0
    cold_start: bool = False
    total_applications: int = 0


class RecommendationOutput(BaseModel):
    """Complete recommendation output"""
    candidate_id: str
    candidate_name: Optional[str] = None
    recommendations: List[RecommendationItem]
    stats: RecommendationStats = Field(default_factory=RecommendationStats)
