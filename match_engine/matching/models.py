"""Match result models"""
from enum import Enum
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field, computed_field, model_validator


class Dimension(str, Enum):
    """Scored matching dimensions"""
    SKILLS = "skills"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    LOCATION = "location"
    COMPENSATION = "compensation"
    ASSESSMENTS = "assessments"


class MatchStatus(str, Enum):
    """Outcome of a single dimension; strength/weakness text switches on these"""
    NOT_SPECIFIED = "not-specified"
    # skills
    ALL_SKILLS_MATCHED = "all-skills-matched"
    PARTIAL_SKILLS_MATCH = "partial-skills-match"
    NO_SKILLS_MATCHED = "no-skills-matched"
    # experience / education
    PERFECT_MATCH = "perfect-match"
    EXCEEDS_REQUIREMENT = "exceeds-requirement"
    SLIGHTLY_UNDER_QUALIFIED = "slightly-under-qualified"
    UNDER_QUALIFIED = "under-qualified"
    SIGNIFICANTLY_UNDER_QUALIFIED = "significantly-under-qualified"
    OVER_QUALIFIED = "over-qualified"
    SIGNIFICANTLY_OVER_QUALIFIED = "significantly-over-qualified"
    # location
    REMOTE_JOB = "remote-job"
    SAME_CITY = "same-city"
    HYBRID_DIFFERENT_CITY = "hybrid-different-city"
    WILLING_TO_RELOCATE = "willing-to-relocate"
    LOCATION_MISMATCH = "location-mismatch"
    LOCATION_NOT_SPECIFIED = "location-not-specified"
    # compensation
    WITHIN_RANGE = "within-range"
    BELOW_RANGE = "below-range"
    SLIGHTLY_ABOVE_RANGE = "slightly-above-range"
    ABOVE_RANGE = "above-range"
    SIGNIFICANTLY_ABOVE_RANGE = "significantly-above-range"
    # assessments
    NOT_REQUIRED = "not-required"
    NO_ASSESSMENTS = "no-assessments"
    NO_RELEVANT_ASSESSMENTS = "no-relevant-assessments"
    ATTEMPTED_BUT_NOT_PASSED = "attempted-but-not-passed"
    EXCELLENT_ASSESSMENT_SCORES = "excellent-assessment-scores"
    GOOD_ASSESSMENT_SCORES = "good-assessment-scores"
    PASSED_ASSESSMENTS = "passed-assessments"

    @property
    def is_under_qualified(self) -> bool:
        return self.value.endswith("under-qualified")


class MatchTier(str, Enum):
    """Qualitative band of a total score"""
    POOR = "poor"
    FAIR = "fair"
    GOOD = "good"
    VERY_GOOD = "very-good"
    EXCELLENT = "excellent"
    ERROR = "error"


class DimensionResult(BaseModel):
    """Sub-score for one dimension"""
    score: int = Field(..., description="Points awarded")
    max_score: int = Field(..., description="Points available for this dimension")
    status: MatchStatus
    detail: Dict[str, Any] = Field(default_factory=dict, description="Dimension-specific explanation data")

    @model_validator(mode="after")
    def check_bounds(self):
        if not 0 <= self.score <= self.max_score:
            raise ValueError(f"score {self.score} outside [0, {self.max_score}]")
        return self

    @computed_field
    @property
    def percentage(self) -> int:
        if not self.max_score:
            return 0
        return int(self.score * 100 / self.max_score + 0.5)


class MatchResult(BaseModel):
    """Weighted fit of one candidate for one job"""
    total_score: int = Field(..., ge=0, le=100, description="Sum of dimension scores")
    match_tier: MatchTier
    dimensions: Dict[Dimension, DimensionResult] = Field(default_factory=dict)
    strengths: List[str] = Field(default_factory=list)
    weaknesses: List[str] = Field(default_factory=list)
    error: Optional[str] = Field(None, description="Failure message when scoring degraded")

    def dimension(self, name: Dimension) -> Optional[DimensionResult]:
        return self.dimensions.get(name)

    @property
    def degraded(self) -> bool:
        return self.error is not None
