"""Tests for the LangGraph recommendation pipeline."""
import pytest

from match_engine.exceptions import InputError
from match_engine.profiles import SearchRecord
from match_engine.recommendation import JobRecommender, RecommendationOptions, RecommendationSource


@pytest.fixture
def recommender(scorer):
    return JobRecommender(scorer=scorer)


@pytest.fixture
def corpus(make_job):
    return [
        make_job("applied_job", days_ago=5),
        make_job("peer_pick", days_ago=2, skills_required=["Python", "Pandas"]),
        make_job("fresh", days_ago=0),
        make_job("unrelated", days_ago=0, skills_required=["Rust"]),
    ]


class TestJobRecommender:
    """Tests for JobRecommender.recommend."""

    def test_hybrid_recommendations(self, recommender, corpus, make_candidate, make_application, now):
        applications = [
            make_application("cand_1", "applied_job"),
            make_application("peer", "applied_job"),
            make_application("peer", "peer_pick"),
        ]
        output = recommender.recommend(
            make_candidate(), corpus, applications=applications,
            options=RecommendationOptions(limit=10, min_score=0), now=now,
        )

        ids = [item.job.job_id for item in output.recommendations]
        assert "applied_job" not in ids
        # Only jobs sharing a skill with the application history are considered
        assert "unrelated" not in ids
        assert set(ids) == {"peer_pick", "fresh"}

        peer_pick = next(item for item in output.recommendations if item.job.job_id == "peer_pick")
        assert peer_pick.score_breakdown.collaborative == 1
        assert peer_pick.source == RecommendationSource.HYBRID

        assert output.candidate_id == "cand_1"
        assert output.stats.total == 2
        assert output.stats.total_applications == 1
        assert output.stats.sources["hybrid"] == 1
        assert not output.stats.cold_start

    def test_cold_start(self, recommender, corpus, make_candidate, now):
        output = recommender.recommend(
            make_candidate("newcomer"), corpus,
            options=RecommendationOptions(limit=2, min_score=1000), now=now,
        )

        assert output.stats.cold_start
        assert output.stats.sources["trending"] == 2
        assert all(item.source == RecommendationSource.TRENDING for item in output.recommendations)

    def test_search_skills_narrow_candidate_jobs(self, recommender, corpus, make_candidate, now):
        searches = [SearchRecord(skills=["Rust"], searched_at=now, saved=True)]
        output = recommender.recommend(
            make_candidate(), corpus, searches=searches,
            options=RecommendationOptions(limit=10, min_score=0), now=now,
        )
        assert [item.job.job_id for item in output.recommendations] == ["unrelated"]

    def test_missing_candidate(self, recommender, corpus):
        with pytest.raises(InputError):
            recommender.recommend(None, corpus)

    def test_applications_outside_the_corpus_still_count_as_history(self, recommender, corpus, make_candidate,
                                                                     make_application, now):
        output = recommender.recommend(
            make_candidate(), corpus, applications=[make_application("cand_1", "gone")],
            options=RecommendationOptions(limit=10, min_score=0), now=now,
        )
        assert output.stats.total_applications == 1
        # The missing job contributes no skills, so nothing narrows the corpus
        assert len(output.recommendations) == 4

    def test_no_trending_for_history_outside_the_corpus(self, recommender, make_candidate, make_job,
                                                        make_application, now):
        output = recommender.recommend(
            make_candidate(), [make_job("j2")], applications=[make_application("cand_1", "j_old")],
            options=RecommendationOptions(limit=10, min_score=1000), now=now,
        )
        assert output.recommendations == []
        assert output.stats.total_applications == 1
        assert not output.stats.cold_start

    def test_applied_jobs_drive_preferences(self, recommender, corpus, make_candidate, make_job,
                                            make_application, now):
        output = recommender.recommend(
            make_candidate(), corpus, applications=[make_application("cand_1", "j_old")],
            options=RecommendationOptions(limit=10, min_score=0), now=now,
            applied_jobs=[make_job("j_old", days_ago=40, skills_required=["Rust"])],
        )
        assert [item.job.job_id for item in output.recommendations] == ["unrelated"]
        assert output.stats.total_applications == 1
