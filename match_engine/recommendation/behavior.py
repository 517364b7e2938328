"""Behavior analysis: implicit preferences from application and search history"""
from collections import Counter
from typing import Iterable, List, Optional, Sequence

from .models import ExperienceBand, PreferenceProfile, SalaryBand, SearchSignals
from ..profiles.models import AppliedJob, SearchRecord
from ..utils import config
from ..utils.dates import as_utc
from ..utils.numbers import round_half_up

SAVED_SEARCH_LIMIT = 10
SEARCH_HISTORY_LIMIT = 20
RECENT_KEYWORD_LIMIT = 5
RECENT_SKILL_LIMIT = 10


def _ranked(counter: Counter, limit: Optional[int] = None) -> List[str]:
    # most_common keeps first-seen order among equal counts
    return [value for value, _ in counter.most_common(limit)]


def analyze_history(
    applications: Sequence[AppliedJob],
    history_limit: Optional[int] = None,
    top_skills: Optional[int] = None,
) -> PreferenceProfile:
    """
    Build frequency tables over the jobs a candidate applied to

    Args:
        applications: Applied jobs with application timestamps
        history_limit: Only the most recent N applications are analyzed
        top_skills: Number of preferred skills to keep

    Returns:
        PreferenceProfile; empty history gives an empty profile
    """
    history_limit = history_limit or config.history_limit
    top_skills = top_skills or config.top_skills
    if not applications:
        return PreferenceProfile()

    recent = sorted(applications, key=lambda a: as_utc(a.applied_at), reverse=True)[:history_limit]

    skills, locations, job_types, industries = Counter(), Counter(), Counter(), Counter()
    salaries, experiences = [], []
    for application in recent:
        job = application.job
        skills.update(skill.lower().strip() for skill in job.skills_required if skill and skill.strip())
        if job.location:
            locations[job.location] += 1
        if job.job_type:
            job_types[job.job_type.value] += 1
        if job.industry:
            industries[job.industry] += 1
        if job.reference_salary:
            salaries.append(job.reference_salary)
        if job.experience_range and job.experience_range.min_years:
            experiences.append(job.experience_range.min_years)

    return PreferenceProfile(
        preferred_skills=_ranked(skills, top_skills),
        preferred_locations=_ranked(locations),
        preferred_job_types=_ranked(job_types),
        preferred_industries=_ranked(industries),
        salary_band=SalaryBand(
            min=min(salaries) if salaries else None,
            max=max(salaries) if salaries else None,
            avg=round_half_up(sum(salaries) / len(salaries)) if salaries else None,
        ),
        experience_band=ExperienceBand(
            min=min(experiences) if experiences else None,
            max=max(experiences) if experiences else None,
        ),
        total_applications=len(recent),
    )


def analyze_searches(searches: Iterable[SearchRecord]) -> SearchSignals:
    """Combine active saved searches with the most recent one-off searches"""
    searches = list(searches or [])
    saved = sorted(
        (s for s in searches if s.saved and s.is_active),
        key=lambda s: as_utc(s.searched_at),
        reverse=True,
    )[:SAVED_SEARCH_LIMIT]
    history = sorted(
        (s for s in searches if not s.saved),
        key=lambda s: as_utc(s.searched_at),
        reverse=True,
    )[:SEARCH_HISTORY_LIMIT]

    keywords, skills, locations, job_types = {}, {}, {}, {}
    for search in saved:
        if search.keywords:
            keywords[search.keywords.lower()] = None
        for skill in search.skills:
            skills[skill.lower()] = None
        if search.location:
            locations[search.location] = None
        if search.job_type:
            job_types[search.job_type] = None

    recent_keywords = list(dict.fromkeys(s.keywords.lower() for s in history if s.keywords))
    recent_skills = list(dict.fromkeys(skill.lower() for s in history for skill in s.skills))

    for keyword in recent_keywords[:RECENT_KEYWORD_LIMIT]:
        keywords[keyword] = None
    for skill in recent_skills[:RECENT_SKILL_LIMIT]:
        skills[skill] = None

    return SearchSignals(
        keywords=list(keywords),
        skills=list(skills),
        locations=list(locations),
        job_types=list(job_types),
    )


def build_preferences(
    applications: Sequence[AppliedJob],
    searches: Iterable[SearchRecord] = (),
    history_limit: Optional[int] = None,
) -> PreferenceProfile:
    """Application-history preferences enriched with search intent"""
    profile = analyze_history(applications, history_limit=history_limit)
    signals = analyze_searches(searches)
    profile.search_keywords = signals.keywords
    profile.search_skills = signals.skills
    profile.search_locations = signals.locations
    profile.search_job_types = signals.job_types
    return profile
