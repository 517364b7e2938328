"""Recommendation pipeline with LangGraph"""
from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence
from typing_extensions import TypedDict
from langgraph.graph import StateGraph, END

from .behavior import build_preferences
from .collaborative import find_similar_candidates
from .fusion import recommend
from .models import (
    PreferenceProfile,
    RecommendationItem,
    RecommendationOptions,
    RecommendationOutput,
    RecommendationSource,
    RecommendationStats,
    SimilarityEdge,
)
from ..exceptions import InputError
from ..matching.scorer import MatchScorer
from ..profiles.models import ApplicationRecord, AppliedJob, CandidateProfile, JobPosting, SearchRecord
from ..utils import config, logger
from ..utils.numbers import round_half_up


# --- State Definition ---

class RecommendationState(TypedDict):
    """State for the recommendation graph"""
    candidate: CandidateProfile
    jobs: List[JobPosting]
    applied_jobs: List[JobPosting]
    applications: List[ApplicationRecord]
    searches: List[SearchRecord]
    options: RecommendationOptions
    now: datetime
    preferences: PreferenceProfile
    similar_candidates: List[SimilarityEdge]
    recommendations: List[RecommendationItem]


def _history(applications: Sequence[ApplicationRecord], jobs: Sequence[JobPosting]) -> List[AppliedJob]:
    """Join applications with the jobs they target; jobs not supplied are skipped"""
    jobs_by_id = {job.job_id: job for job in jobs}
    return [
        AppliedJob(job=jobs_by_id[a.job_id], applied_at=a.applied_at)
        for a in applications
        if a.job_id in jobs_by_id
    ]


# --- Graph Construction ---

def build_recommendation_graph(scorer: MatchScorer):
    """Build recommendation workflow graph"""

    def analyze_behavior_node(state: RecommendationState) -> Dict:
        candidate_id = state["candidate"].candidate_id
        own = [a for a in state["applications"] if a.candidate_id == candidate_id]
        history = _history(own, state["applied_jobs"] + state["jobs"])
        preferences = build_preferences(history, state["searches"])
        # Applied jobs are often left out of the corpus; the records still count as history
        preferences.total_applications = min(len(own), config.history_limit)
        logger.info(
            f"Analyzed {preferences.total_applications} applications for {candidate_id}; "
            f"top skills: {preferences.preferred_skills[:3]}"
        )
        return {"preferences": preferences}

    def find_similar_node(state: RecommendationState) -> Dict:
        similar = find_similar_candidates(
            state["candidate"].candidate_id,
            state["applications"],
            limit=config.similar_candidates_limit,
        )
        logger.info(f"Found {len(similar)} similar candidates")
        return {"similar_candidates": similar}

    def fuse_node(state: RecommendationState) -> Dict:
        items = recommend(
            state["candidate"],
            state["preferences"],
            state["similar_candidates"],
            state["jobs"],
            applications=state["applications"],
            options=state["options"],
            now=state["now"],
            scorer=scorer,
        )
        return {"recommendations": items}

    workflow = StateGraph(RecommendationState)

    workflow.add_node("analyze_behavior", analyze_behavior_node)
    workflow.add_node("find_similar", find_similar_node)
    workflow.add_node("fuse", fuse_node)

    workflow.set_entry_point("analyze_behavior")
    workflow.add_edge("analyze_behavior", "find_similar")
    workflow.add_edge("find_similar", "fuse")
    workflow.add_edge("fuse", END)

    return workflow.compile()


def build_stats(items: List[RecommendationItem], preferences: PreferenceProfile) -> RecommendationStats:
    sources = {source.value: 0 for source in RecommendationSource}
    for item in items:
        sources[item.source.value] += 1
    totals = [item.score_breakdown.total for item in items]
    return RecommendationStats(
        total=len(items),
        sources=sources,
        avg_score=round_half_up(sum(totals) / len(totals)) if totals else 0,
        cold_start=bool(items) and all(item.source == RecommendationSource.TRENDING for item in items),
        total_applications=preferences.total_applications,
    )


# --- Public API ---

class JobRecommender:
    """Job recommendation API"""

    def __init__(self, scorer: Optional[MatchScorer] = None):
        self.scorer = scorer or MatchScorer()
        self.graph = build_recommendation_graph(self.scorer)

    def recommend(
        self,
        candidate: CandidateProfile,
        jobs: Sequence[JobPosting],
        applications: Sequence[ApplicationRecord] = (),
        searches: Sequence[SearchRecord] = (),
        options: Optional[RecommendationOptions] = None,
        now: Optional[datetime] = None,
        applied_jobs: Sequence[JobPosting] = (),
    ) -> RecommendationOutput:
        """
        Recommend jobs to a candidate

        Args:
            candidate: Candidate profile (candidate_id is required)
            jobs: Job corpus, pre-filtered by the caller
            applications: Application records of all candidates
            searches: The candidate's saved searches and search history
            options: limit, min_score, include_applied, candidate_job_cap
            now: Reference time for recency
            applied_jobs: Jobs the candidate applied to, when the corpus excludes them

        Returns:
            RecommendationOutput with ranked recommendations and stats
        """
        if candidate is None or not getattr(candidate, "candidate_id", None):
            raise InputError("candidate_id is required for recommendations")

        initial_state = {
            "candidate": candidate,
            "jobs": list(jobs),
            "applied_jobs": list(applied_jobs),
            "applications": list(applications),
            "searches": list(searches),
            "options": options or RecommendationOptions(),
            "now": now or datetime.now(timezone.utc),
            "preferences": PreferenceProfile(),
            "similar_candidates": [],
            "recommendations": [],
        }

        logger.info(f"Starting job recommendation for {candidate.candidate_id} over {len(initial_state['jobs'])} jobs")

        final_state = self.graph.invoke(initial_state)
        items = final_state["recommendations"]

        return RecommendationOutput(
            candidate_id=candidate.candidate_id,
            candidate_name=candidate.name,
            recommendations=items,
            stats=build_stats(items, final_state["preferences"]),
        )
