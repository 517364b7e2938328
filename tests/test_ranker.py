"""Tests for batch ranking and pagination."""
from match_engine.matching import MatchScorer, MatchTier, paginate, rank_candidates, rank_jobs, summarize_matches


class ExplodingResolver:
    def resolve(self, skill):
        raise RuntimeError("boom")


class TestRankCandidates:
    """Tests for rank_candidates."""

    def test_sorted_and_filtered(self, scorer, make_candidate, make_job):
        strong = make_candidate("strong")
        partial = make_candidate("partial", skills=["Python"], completed_assessments=[])
        weak = make_candidate(
            "weak", skills=["Excel"], experience_years=0, highest_degree="high-school",
            location="Delhi", expected_salary=50, completed_assessments=[],
        )

        ranked = rank_candidates([weak, partial, strong], make_job(), min_score=40, scorer=scorer)

        assert [r.candidate.candidate_id for r in ranked] == ["strong", "partial"]
        assert [r.rank for r in ranked] == [1, 2]
        scores = [r.match_result.total_score for r in ranked]
        assert scores == sorted(scores, reverse=True)

    def test_ties_keep_input_order(self, scorer, make_candidate, make_job):
        candidates = [make_candidate(f"cand_{i}") for i in range(4)]
        ranked = rank_candidates(candidates, make_job(), min_score=0, scorer=scorer)
        assert [r.candidate.candidate_id for r in ranked] == ["cand_0", "cand_1", "cand_2", "cand_3"]

    def test_failures_do_not_abort_batch(self, make_candidate, make_job):
        candidates = [make_candidate(f"cand_{i}") for i in range(3)]
        ranked = rank_candidates(candidates, make_job(), min_score=0, scorer=MatchScorer(ExplodingResolver()))

        assert len(ranked) == 3
        assert all(r.match_result.match_tier == MatchTier.ERROR for r in ranked)

    def test_rank_jobs(self, scorer, make_candidate, make_job):
        jobs = [
            make_job("far", location="Delhi"),
            make_job("near"),
        ]
        ranked = rank_jobs(make_candidate(), jobs, min_score=0, scorer=scorer)
        assert [r.job.job_id for r in ranked] == ["near", "far"]


class TestPaginate:
    """Tests for paginate."""

    def test_middle_page(self):
        page = paginate(list(range(45)), page=2, limit=20)
        assert page.items == list(range(20, 40))
        assert page.total_pages == 3
        assert page.total == 45
        assert page.has_more

    def test_last_page(self):
        page = paginate(list(range(45)), page=3, limit=20)
        assert page.items == list(range(40, 45))
        assert not page.has_more

    def test_out_of_range_page_is_empty(self):
        assert paginate(list(range(5)), page=4, limit=20).items == []

    def test_page_below_one_is_first_page(self):
        assert paginate([1, 2, 3], page=0, limit=2).items == [1, 2]

    def test_empty(self):
        page = paginate([], page=1, limit=20)
        assert page.total_pages == 0
        assert not page.has_more


class TestSummarizeMatches:
    """Tests for summarize_matches."""

    def test_distribution_and_average(self, scorer, make_candidate, make_job):
        candidates = [make_candidate("a"), make_candidate("b", skills=["Python"])]
        ranked = rank_candidates(candidates, make_job(), min_score=0, scorer=scorer)

        stats = summarize_matches(5, ranked)

        assert stats.total == 5
        assert stats.filtered == 2
        assert sum(stats.distribution.values()) == 2
        assert stats.distribution["excellent"] == 1
        assert "error" not in stats.distribution

    def test_empty_ranking(self):
        stats = summarize_matches(3, [])
        assert stats.avg_score == 0
        assert stats.filtered == 0
