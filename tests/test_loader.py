"""Tests for input validation and dataset loading."""
import json

import pytest

from match_engine.exceptions import InputError
from match_engine.profiles import (
    DegreeLevel,
    JobType,
    load_dataset,
    parse_applications,
    parse_candidate,
    parse_job,
)


class TestParseCandidate:
    """Tests for candidate validation."""

    def test_missing_id_is_input_error(self):
        with pytest.raises(InputError):
            parse_candidate({"name": "No Id"})

    def test_blank_id_is_input_error(self):
        with pytest.raises(InputError):
            parse_candidate({"candidate_id": "   "})

    def test_input_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_candidate({})

    def test_clamps_bad_numbers(self):
        candidate = parse_candidate({"candidate_id": "c1", "experience_years": -3, "expected_salary": -100})
        assert candidate.experience_years == 0
        assert candidate.expected_salary is None

    def test_degree_aliases(self):
        assert parse_candidate({"candidate_id": "c1", "highest_degree": "Masters"}).highest_degree == DegreeLevel.MASTER
        assert parse_candidate({"candidate_id": "c1", "highest_degree": "wizard"}).highest_degree is None

    def test_assessment_score_clamped(self):
        candidate = parse_candidate({
            "candidate_id": "c1",
            "completed_assessments": [{"title": "x", "score": 140, "passed": True}],
        })
        assert candidate.completed_assessments[0].score == 100


class TestParseJob:
    """Tests for job validation."""

    def test_missing_job_id(self):
        with pytest.raises(InputError):
            parse_job({"title": "Engineer", "posted_at": "2026-10-01T00:00:00Z"})

    def test_reversed_ranges_are_swapped(self):
        job = parse_job({
            "job_id": "j1",
            "posted_at": "2026-10-01T00:00:00Z",
            "experience_range": {"min_years": 6, "max_years": 2},
            "salary_range": {"min_salary": 20, "max_salary": 10},
        })
        assert (job.experience_range.min_years, job.experience_range.max_years) == (2, 6)
        assert (job.salary_range.min_salary, job.salary_range.max_salary) == (10, 20)

    def test_job_type_aliases(self):
        job = parse_job({"job_id": "j1", "posted_at": "2026-10-01T00:00:00Z", "job_type": "Work-From-Home"})
        assert job.job_type == JobType.REMOTE
        assert job.is_active

    def test_reference_salary(self):
        job = parse_job({"job_id": "j1", "posted_at": "2026-10-01T00:00:00Z",
                         "salary_range": {"max_salary": 15}})
        assert job.reference_salary == 15


class TestParseApplications:
    """Tests for application records."""

    def test_missing_job_id(self):
        with pytest.raises(InputError):
            parse_applications([{"candidate_id": "c1", "applied_at": "2026-10-01T00:00:00Z"}])


class TestLoadDataset:
    """Tests for load_dataset."""

    def test_load(self, tmp_path):
        path = tmp_path / "dataset.json"
        path.write_text(json.dumps({
            "candidates": [{"candidate_id": "c1", "skills": ["Python"]}],
            "jobs": [{"job_id": "j1", "posted_at": "2026-10-01T00:00:00Z"}],
            "applications": [{"candidate_id": "c1", "job_id": "j1", "applied_at": "2026-10-02T00:00:00Z"}],
            "searches": {"c1": [{"keywords": "python", "searched_at": "2026-10-03T00:00:00Z"}]},
        }))

        dataset = load_dataset(str(path))

        assert dataset.candidate("c1").skills == ["Python"]
        assert dataset.job("j1").job_id == "j1"
        assert len(dataset.applications) == 1
        assert dataset.searches["c1"][0].keywords == "python"

    def test_unknown_ids(self, tmp_path):
        path = tmp_path / "empty.json"
        path.write_text("{}")
        dataset = load_dataset(str(path))

        with pytest.raises(InputError):
            dataset.candidate("missing")
        with pytest.raises(InputError):
            dataset.job("missing")
