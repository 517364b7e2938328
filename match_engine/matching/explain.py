"""Human-readable strengths, weaknesses and recommendation reasons.

All text is derived from dimension statuses, never from raw scores alone.
"""
from datetime import datetime, timezone
from typing import List, Optional

from .models import Dimension, MatchResult, MatchStatus
from ..profiles.models import JobPosting
from ..utils.dates import as_utc


def days_since(posted_at: datetime, now: Optional[datetime] = None) -> int:
    """Whole days between posting and now; naive timestamps are read as UTC"""
    now = as_utc(now or datetime.now(timezone.utc))
    return (now - as_utc(posted_at)).days


def generate_strengths(result: MatchResult) -> List[str]:
    strengths = []
    skills = result.dimension(Dimension.SKILLS)
    if skills and skills.percentage >= 80:
        matched = skills.detail.get("matched_skills", [])
        strengths.append(f"Excellent skills match ({len(matched)} matching skills)")

    experience = result.dimension(Dimension.EXPERIENCE)
    if experience and experience.status == MatchStatus.PERFECT_MATCH:
        strengths.append("Experience level matches requirements")

    education = result.dimension(Dimension.EDUCATION)
    if education and education.status in (MatchStatus.PERFECT_MATCH, MatchStatus.EXCEEDS_REQUIREMENT):
        strengths.append("Meets or exceeds education requirements")

    assessments = result.dimension(Dimension.ASSESSMENTS)
    relevant = assessments.detail.get("relevant_assessments", []) if assessments else []
    if relevant:
        strengths.append(f"Completed {len(relevant)} relevant assessment(s)")

    location = result.dimension(Dimension.LOCATION)
    if location and location.status in (MatchStatus.SAME_CITY, MatchStatus.REMOTE_JOB):
        strengths.append("Location preference aligns")
    return strengths


def generate_weaknesses(result: MatchResult) -> List[str]:
    weaknesses = []
    skills = result.dimension(Dimension.SKILLS)
    missing = skills.detail.get("missing_skills", []) if skills else []
    if missing:
        weaknesses.append(f"Missing skills: {', '.join(missing[:3])}")

    experience = result.dimension(Dimension.EXPERIENCE)
    if experience and experience.status.is_under_qualified:
        gap = experience.detail.get("gap", 0)
        weaknesses.append(f"Under-qualified by {gap:g} years")

    education = result.dimension(Dimension.EDUCATION)
    if education and education.status.is_under_qualified:
        weaknesses.append("Does not meet minimum education requirement")

    compensation = result.dimension(Dimension.COMPENSATION)
    if compensation and compensation.status == MatchStatus.SIGNIFICANTLY_ABOVE_RANGE:
        weaknesses.append("Salary expectations significantly exceed budget")

    location = result.dimension(Dimension.LOCATION)
    if location and location.status == MatchStatus.LOCATION_MISMATCH:
        weaknesses.append("Location does not match job location")

    assessments = result.dimension(Dimension.ASSESSMENTS)
    if assessments and assessments.status == MatchStatus.NO_ASSESSMENTS:
        weaknesses.append("No assessments completed")
    return weaknesses


def generate_recommendation_reasons(
    result: MatchResult,
    job: JobPosting,
    collaborative_score: int = 0,
    now: Optional[datetime] = None,
) -> List[str]:
    """Seeker-facing reasons for recommending a job"""
    reasons = []

    skills = result.dimension(Dimension.SKILLS)
    matched = skills.detail.get("matched_skills", []) if skills else []
    if len(matched) >= 5:
        reasons.append(f"You have {len(matched)} matching skills including {', '.join(matched[:3])}")
    elif matched:
        reasons.append(f"Matches your skills: {', '.join(matched)}")

    experience = result.dimension(Dimension.EXPERIENCE)
    if experience and experience.status == MatchStatus.PERFECT_MATCH:
        reasons.append("Your experience level is perfect for this role")

    location = result.dimension(Dimension.LOCATION)
    if location and location.status == MatchStatus.SAME_CITY:
        reasons.append("Located in your preferred city")
    elif location and location.status == MatchStatus.REMOTE_JOB:
        reasons.append("Remote work opportunity")

    compensation = result.dimension(Dimension.COMPENSATION)
    if compensation and compensation.status == MatchStatus.WITHIN_RANGE:
        reasons.append("Salary matches your expectations")

    assessments = result.dimension(Dimension.ASSESSMENTS)
    relevant = assessments.detail.get("relevant_assessments", []) if assessments else []
    if relevant:
        reasons.append(f"You completed relevant {relevant[0].get('title') or 'assessment'}")

    if collaborative_score > 0:
        reasons.append(f"{collaborative_score} similar candidates applied")

    if job.company_verified:
        reasons.append("Verified company")

    if days_since(job.posted_at, now) <= 3:
        reasons.append("Recently posted")

    return reasons
