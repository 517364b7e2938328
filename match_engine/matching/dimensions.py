"""Dimension scorers

Each scorer is total: missing data never raises, and a requirement the job
does not state is always full credit.
"""
import math
from typing import List, Optional, Sequence

from .models import Dimension, DimensionResult, MatchStatus
from .normalizer import SkillSynonymResolver, matches_any, normalize_skill, normalize_skills
from ..profiles.models import AssessmentResult, DegreeLevel, ExperienceRange, JobType, SalaryRange
from ..utils.numbers import round_half_up

DIMENSION_MAX_SCORES = {
    Dimension.SKILLS: 35,
    Dimension.EXPERIENCE: 20,
    Dimension.EDUCATION: 15,
    Dimension.LOCATION: 10,
    Dimension.COMPENSATION: 10,
    Dimension.ASSESSMENTS: 10,
}

EDUCATION_HIERARCHY = {
    DegreeLevel.HIGH_SCHOOL: 1,
    DegreeLevel.DIPLOMA: 2,
    DegreeLevel.ASSOCIATE: 3,
    DegreeLevel.BACHELOR: 4,
    DegreeLevel.MASTER: 5,
    DegreeLevel.PHD: 6,
}

# Radius (km) a relocating candidate is treated as covering, and the radius
# from which relocation earns credit.
RELOCATION_RADIUS = 200
RELOCATION_MIN_RADIUS = 100


def _result(dimension: Dimension, score: int, status: MatchStatus, **detail) -> DimensionResult:
    return DimensionResult(
        score=score,
        max_score=DIMENSION_MAX_SCORES[dimension],
        status=status,
        detail=detail,
    )


def score_skills(
    candidate_skills: Sequence[str],
    job_skills: Sequence[str],
    resolver: Optional[SkillSynonymResolver] = None,
) -> DimensionResult:
    """Share of required skills the candidate covers, out of 35"""
    max_score = DIMENSION_MAX_SCORES[Dimension.SKILLS]
    candidate_tokens = normalize_skills(candidate_skills, resolver)

    # Keep the job's own spelling next to each token for the explanation text
    required = []
    for raw in job_skills or []:
        token = normalize_skill(resolver.resolve(raw) if resolver else raw)
        if token:
            required.append((raw, token))

    if not required:
        return _result(Dimension.SKILLS, max_score, MatchStatus.NOT_SPECIFIED,
                       matched_skills=[], missing_skills=[], match_percentage=100)

    matched = [raw for raw, token in required if matches_any(token, candidate_tokens)]
    missing = [raw for raw, token in required if not matches_any(token, candidate_tokens)]
    ratio = len(matched) / len(required)

    if not missing:
        status = MatchStatus.ALL_SKILLS_MATCHED
    elif matched:
        status = MatchStatus.PARTIAL_SKILLS_MATCH
    else:
        status = MatchStatus.NO_SKILLS_MATCHED

    return _result(
        Dimension.SKILLS,
        round_half_up(max_score * ratio),
        status,
        matched_skills=matched,
        missing_skills=missing,
        match_percentage=round_half_up(ratio * 100),
    )


def score_experience(candidate_years: Optional[float], required: Optional[ExperienceRange]) -> DimensionResult:
    """Fit of years of experience against the required range, out of 20.

    A candidate without a stated experience counts as 0 years. A range with
    only a maximum starts at 0; one without a positive maximum extends 10 years
    past the minimum, so a "0-0 years" posting accepts up to 10.
    """
    if required is None or (required.min_years is None and required.max_years is None):
        return _result(Dimension.EXPERIENCE, 20, MatchStatus.NOT_SPECIFIED)

    years = candidate_years or 0
    min_required = required.min_years or 0
    max_required = required.max_years or min_required + 10

    if min_required <= years <= max_required:
        return _result(Dimension.EXPERIENCE, 20, MatchStatus.PERFECT_MATCH)

    if years < min_required:
        gap = min_required - years
        if gap >= 3:
            return _result(Dimension.EXPERIENCE, 0, MatchStatus.SIGNIFICANTLY_UNDER_QUALIFIED, gap=gap)
        if gap >= 2:
            return _result(Dimension.EXPERIENCE, 5, MatchStatus.UNDER_QUALIFIED, gap=gap)
        return _result(Dimension.EXPERIENCE, 12, MatchStatus.SLIGHTLY_UNDER_QUALIFIED, gap=gap)

    excess = years - max_required
    if excess >= 5:
        return _result(Dimension.EXPERIENCE, 10, MatchStatus.SIGNIFICANTLY_OVER_QUALIFIED, excess=excess)
    return _result(Dimension.EXPERIENCE, 15, MatchStatus.OVER_QUALIFIED, excess=excess)


def score_education(candidate_degree: Optional[DegreeLevel], required_degree: Optional[DegreeLevel]) -> DimensionResult:
    """Degree level against the required level, out of 15"""
    if required_degree is None or required_degree == DegreeLevel.ANY:
        return _result(Dimension.EDUCATION, 15, MatchStatus.NOT_SPECIFIED)

    candidate_level = EDUCATION_HIERARCHY.get(candidate_degree, 0)
    required_level = EDUCATION_HIERARCHY.get(required_degree, 0)

    if candidate_level >= required_level:
        status = MatchStatus.PERFECT_MATCH if candidate_level == required_level else MatchStatus.EXCEEDS_REQUIREMENT
        return _result(Dimension.EDUCATION, 15, status)

    gap = required_level - candidate_level
    if gap >= 3:
        return _result(Dimension.EDUCATION, 0, MatchStatus.SIGNIFICANTLY_UNDER_QUALIFIED, gap=gap)
    if gap == 2:
        return _result(Dimension.EDUCATION, 5, MatchStatus.UNDER_QUALIFIED, gap=gap)
    return _result(Dimension.EDUCATION, 10, MatchStatus.SLIGHTLY_UNDER_QUALIFIED, gap=gap)


def score_location(
    candidate_location: Optional[str],
    job_location: Optional[str],
    job_type: Optional[JobType],
    relocation_radius: float = 0,
) -> DimensionResult:
    """Location compatibility, out of 10"""
    if job_type == JobType.REMOTE:
        return _result(Dimension.LOCATION, 10, MatchStatus.REMOTE_JOB)

    if not candidate_location or not job_location:
        return _result(Dimension.LOCATION, 5, MatchStatus.LOCATION_NOT_SPECIFIED)

    if candidate_location.lower().strip() == job_location.lower().strip():
        return _result(Dimension.LOCATION, 10, MatchStatus.SAME_CITY)

    if job_type == JobType.HYBRID:
        return _result(Dimension.LOCATION, 7, MatchStatus.HYBRID_DIFFERENT_CITY)

    if relocation_radius and relocation_radius >= RELOCATION_MIN_RADIUS:
        return _result(Dimension.LOCATION, 6, MatchStatus.WILLING_TO_RELOCATE)

    return _result(Dimension.LOCATION, 2, MatchStatus.LOCATION_MISMATCH)


def score_compensation(expected_salary: Optional[float], offered: Optional[SalaryRange]) -> DimensionResult:
    """Expected salary against the offered band, out of 10"""
    job_min = offered.min_salary if offered else None
    job_max = offered.max_salary if offered else None
    if not expected_salary or (not job_min and not job_max):
        return _result(Dimension.COMPENSATION, 10, MatchStatus.NOT_SPECIFIED)

    min_salary = job_min or 0
    max_salary = job_max or job_min or math.inf

    if min_salary <= expected_salary <= max_salary:
        return _result(Dimension.COMPENSATION, 10, MatchStatus.WITHIN_RANGE)

    if expected_salary > max_salary:
        excess_pct = (expected_salary - max_salary) / max_salary * 100
        if excess_pct <= 10:
            return _result(Dimension.COMPENSATION, 7, MatchStatus.SLIGHTLY_ABOVE_RANGE, excess_pct=excess_pct)
        if excess_pct <= 20:
            return _result(Dimension.COMPENSATION, 4, MatchStatus.ABOVE_RANGE, excess_pct=excess_pct)
        return _result(Dimension.COMPENSATION, 0, MatchStatus.SIGNIFICANTLY_ABOVE_RANGE, excess_pct=excess_pct)

    return _result(Dimension.COMPENSATION, 8, MatchStatus.BELOW_RANGE)


def score_assessments(
    assessments: Sequence[AssessmentResult],
    job_skills: Sequence[str],
    resolver: Optional[SkillSynonymResolver] = None,
) -> DimensionResult:
    """Evidence from completed assessments that cover the job's skills, out of 10"""
    required = normalize_skills(job_skills, resolver)
    if not required:
        return _result(Dimension.ASSESSMENTS, 10, MatchStatus.NOT_REQUIRED, relevant_assessments=[])

    if not assessments:
        return _result(Dimension.ASSESSMENTS, 0, MatchStatus.NO_ASSESSMENTS, relevant_assessments=[])

    relevant: List[AssessmentResult] = [
        a for a in assessments
        if any(matches_any(skill, required) for skill in normalize_skills(a.skills_covered, resolver))
    ]
    if not relevant:
        return _result(Dimension.ASSESSMENTS, 2, MatchStatus.NO_RELEVANT_ASSESSMENTS, relevant_assessments=[])

    average = sum(a.score for a in relevant) / len(relevant)
    if not any(a.passed for a in relevant):
        score, status = 3, MatchStatus.ATTEMPTED_BUT_NOT_PASSED
    elif average >= 80:
        score, status = 10, MatchStatus.EXCELLENT_ASSESSMENT_SCORES
    elif average >= 60:
        score, status = 7, MatchStatus.GOOD_ASSESSMENT_SCORES
    else:
        score, status = 5, MatchStatus.PASSED_ASSESSMENTS

    return _result(
        Dimension.ASSESSMENTS,
        score,
        status,
        relevant_assessments=[a.model_dump() for a in relevant],
        average_score=average,
    )
