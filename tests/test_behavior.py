"""Tests for behavior analysis over application and search history."""
from datetime import timedelta

from match_engine.profiles import AppliedJob, SearchRecord
from match_engine.recommendation.behavior import analyze_history, analyze_searches, build_preferences


def _applied(job, now, days_ago=1):
    return AppliedJob(job=job, applied_at=now - timedelta(days=days_ago))


class TestAnalyzeHistory:
    """Tests for analyze_history."""

    def test_empty_history_gives_empty_profile(self):
        profile = analyze_history([])

        assert not profile.has_history
        assert profile.preferred_skills == []
        assert profile.salary_band.avg is None

    def test_most_frequent_skills_first(self, make_job, now):
        history = [
            _applied(make_job("a", skills_required=["Python", "SQL"]), now),
            _applied(make_job("b", skills_required=["Python", "Docker"]), now),
            _applied(make_job("c", skills_required=["python"]), now),
        ]
        profile = analyze_history(history, history_limit=50, top_skills=10)

        assert profile.preferred_skills[0] == "python"
        assert set(profile.preferred_skills) == {"python", "sql", "docker"}
        assert profile.total_applications == 3

    def test_top_skills_cap(self, make_job, now):
        job = make_job(skills_required=[f"skill {i}" for i in range(15)])
        profile = analyze_history([_applied(job, now)], history_limit=50, top_skills=10)
        assert len(profile.preferred_skills) == 10

    def test_history_limit_keeps_most_recent(self, make_job, now):
        history = [
            _applied(make_job("old", location="Delhi"), now, days_ago=30),
            _applied(make_job("new", location="Mumbai"), now, days_ago=1),
        ]
        profile = analyze_history(history, history_limit=1, top_skills=10)

        assert profile.total_applications == 1
        assert profile.preferred_locations == ["Mumbai"]

    def test_caps_long_history(self, make_job, now):
        history = [_applied(make_job(f"job_{i}"), now, days_ago=i) for i in range(60)]
        assert analyze_history(history, history_limit=50, top_skills=10).total_applications == 50

    def test_naive_and_aware_timestamps_sort_together(self, make_job, now):
        naive_recent = AppliedJob(job=make_job("new", location="Mumbai"),
                                  applied_at=(now - timedelta(hours=1)).replace(tzinfo=None))
        history = [_applied(make_job("old", location="Delhi"), now, days_ago=3), naive_recent]
        profile = analyze_history(history, history_limit=1, top_skills=10)

        assert profile.preferred_locations == ["Mumbai"]

    def test_salary_and_experience_bands(self, make_job, now):
        history = [
            _applied(make_job("a", salary_range={"min_salary": 8, "max_salary": 9},
                              experience_range={"min_years": 1}), now),
            _applied(make_job("b", salary_range={"min_salary": 10, "max_salary": 12},
                              experience_range={"min_years": 4}), now),
            _applied(make_job("c", salary_range={"max_salary": 15}, experience_range=None), now),
        ]
        profile = analyze_history(history, history_limit=50, top_skills=10)

        assert profile.salary_band.min == 8
        assert profile.salary_band.max == 15
        assert profile.salary_band.avg == 11
        assert profile.experience_band.min == 1
        assert profile.experience_band.max == 4

    def test_job_types_and_industries(self, make_job, now):
        history = [
            _applied(make_job("a", job_type="remote", industry="fintech"), now),
            _applied(make_job("b", job_type="remote", industry="health"), now),
            _applied(make_job("c", job_type="hybrid", industry="fintech"), now),
        ]
        profile = analyze_history(history, history_limit=50, top_skills=10)

        assert profile.preferred_job_types == ["remote", "hybrid"]
        assert profile.preferred_industries == ["fintech", "health"]


class TestAnalyzeSearches:
    """Tests for analyze_searches."""

    def test_saved_and_recent_searches(self, now):
        searches = [
            SearchRecord(keywords="Data Engineer", skills=["Airflow"], location="Pune",
                         searched_at=now, saved=True),
            SearchRecord(keywords="Old Saved", skills=["Cobol"], searched_at=now,
                         saved=True, is_active=False),
            SearchRecord(keywords="ML", skills=["PyTorch"], searched_at=now - timedelta(days=1)),
        ]
        signals = analyze_searches(searches)

        assert signals.keywords == ["data engineer", "ml"]
        assert signals.skills == ["airflow", "pytorch"]
        assert signals.locations == ["Pune"]

    def test_naive_and_aware_timestamps_sort_together(self, now):
        searches = [
            SearchRecord(keywords="aware", searched_at=now - timedelta(days=1)),
            SearchRecord(keywords="naive", searched_at=now.replace(tzinfo=None)),
            SearchRecord(keywords="saved aware", searched_at=now - timedelta(days=1), saved=True),
            SearchRecord(keywords="saved naive", searched_at=now.replace(tzinfo=None), saved=True),
        ]
        signals = analyze_searches(searches)
        assert signals.keywords == ["saved naive", "saved aware", "naive", "aware"]

    def test_recent_keywords_capped_newest_first(self, now):
        searches = [
            SearchRecord(keywords=f"query {i}", searched_at=now - timedelta(hours=i))
            for i in range(8)
        ]
        signals = analyze_searches(searches)
        assert signals.keywords == [f"query {i}" for i in range(5)]

    def test_no_searches(self):
        assert analyze_searches([]).skills == []


class TestBuildPreferences:
    """Tests for build_preferences."""

    def test_search_skills_extend_filter(self, make_job, now):
        history = [_applied(make_job(skills_required=["Python"]), now)]
        searches = [SearchRecord(skills=["Airflow", "Python"], searched_at=now, saved=True)]

        profile = build_preferences(history, searches, history_limit=50)

        assert profile.search_skills == ["airflow", "python"]
        assert profile.filter_skills == ["python", "airflow"]

    def test_searches_without_history(self, now):
        profile = build_preferences([], [SearchRecord(skills=["Go"], searched_at=now)])
        assert not profile.has_history
        assert profile.filter_skills == ["go"]
