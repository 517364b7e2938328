"""Tests for assessment grading."""
import pytest

from match_engine.assessments import (
    Assessment,
    BooleanAnswer,
    ChoiceAnswer,
    Question,
    QuestionType,
    TextAnswer,
    coerce_answer,
    grade_submission,
)
from match_engine.matching.dimensions import score_assessments
from match_engine.matching.models import MatchStatus


@pytest.fixture
def assessment():
    return Assessment(
        assessment_id="py-101",
        title="Python Fundamentals",
        skills=["Python"],
        questions=[
            Question(question_id="q1", question_type=QuestionType.MULTIPLE_CHOICE,
                     correct_answer={"kind": "choice", "values": ["a", "c"]}, skills_tested=["Python"]),
            Question(question_id="q2", question_type=QuestionType.TRUE_FALSE,
                     correct_answer=BooleanAnswer(value=True), skills_tested=["Python"]),
            Question(question_id="q3", question_type=QuestionType.TEXT,
                     correct_answer=TextAnswer(value="List Comprehension"), points=2,
                     skills_tested=["Python", "Idioms"]),
        ],
    )


class TestCoerceAnswer:
    """Tests for coerce_answer."""

    def test_choice_from_list_or_scalar(self):
        assert coerce_answer(QuestionType.MULTIPLE_CHOICE, ["b", "a"]) == ChoiceAnswer(values=frozenset({"a", "b"}))
        assert coerce_answer(QuestionType.SINGLE_CHOICE, 2) == ChoiceAnswer(values=frozenset({"2"}))

    def test_boolean_strings(self):
        assert coerce_answer(QuestionType.TRUE_FALSE, "Yes") == BooleanAnswer(value=True)
        assert coerce_answer(QuestionType.TRUE_FALSE, "0") == BooleanAnswer(value=False)
        assert coerce_answer(QuestionType.TRUE_FALSE, "maybe") is None

    def test_text_from_number(self):
        assert coerce_answer(QuestionType.CODE, 42) == TextAnswer(value="42")

    def test_incompatible_values(self):
        assert coerce_answer(QuestionType.SINGLE_CHOICE, {"a": 1}) is None
        assert coerce_answer(QuestionType.TEXT, ["a"]) is None
        assert coerce_answer(QuestionType.TEXT, None) is None


class TestGradeSubmission:
    """Tests for grade_submission."""

    def test_all_correct(self, assessment):
        graded = grade_submission(assessment, {"q1": ["c", "a"], "q2": "true", "q3": "  list comprehension "})

        assert graded.score == 100
        assert graded.passed
        assert graded.points_earned == 4

    def test_multiple_choice_needs_exact_set(self, assessment):
        graded = grade_submission(assessment, {"q1": ["a"]})
        assert graded.score == 0
        assert not graded.answers[0].is_correct

    def test_partial_score_rounds_half_up(self, assessment):
        graded = grade_submission(assessment, {"q1": ["a", "c"], "q2": False, "q3": "generator"})

        # 1 of 4 points
        assert graded.score == 25
        assert not graded.passed

    def test_only_answered_questions_count(self, assessment):
        graded = grade_submission(assessment, {"q2": True, "unknown": "x"})

        assert graded.total_points == 1
        assert graded.score == 100
        assert [a.question_id for a in graded.answers] == ["q2"]

    def test_empty_submission(self, assessment):
        graded = grade_submission(assessment, {})
        assert graded.score == 0
        assert not graded.passed

    def test_skill_breakdown(self, assessment):
        graded = grade_submission(assessment, {"q1": ["a", "c"], "q2": False, "q3": "list comprehension"})
        breakdown = {entry.skill: entry for entry in graded.skill_breakdown}

        assert breakdown["Python"].questions_attempted == 3
        assert breakdown["Python"].questions_correct == 2
        assert breakdown["Python"].accuracy == 67
        assert breakdown["Idioms"].accuracy == 100

    def test_result_feeds_assessment_dimension(self, assessment):
        graded = grade_submission(assessment, {"q1": ["a", "c"], "q2": True, "q3": "list comprehension"})

        result = score_assessments([graded.to_result()], ["Python", "SQL"])

        assert result.score == 10
        assert result.status == MatchStatus.EXCELLENT_ASSESSMENT_SCORES
