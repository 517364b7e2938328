"""Grading of assessment submissions"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .models import (
    AnswerValue,
    Assessment,
    BooleanAnswer,
    ChoiceAnswer,
    GradedAnswer,
    QuestionType,
    SkillBreakdown,
    TextAnswer,
)
from ..profiles.models import AssessmentResult
from ..utils.numbers import round_half_up

_CHOICE_TYPES = (QuestionType.MULTIPLE_CHOICE, QuestionType.SINGLE_CHOICE)
_TRUE_STRINGS = {"true", "yes", "1"}
_FALSE_STRINGS = {"false", "no", "0"}


def coerce_answer(question_type: QuestionType, raw: Any) -> Optional[AnswerValue]:
    """Turn an untyped stored answer into the variant the question type expects.

    Returns None when the raw value cannot represent that variant.
    """
    if raw is None:
        return None
    if isinstance(raw, (TextAnswer, ChoiceAnswer, BooleanAnswer)):
        return raw

    if question_type in _CHOICE_TYPES:
        if isinstance(raw, (list, tuple, set, frozenset)):
            return ChoiceAnswer(values=frozenset(str(v) for v in raw))
        if isinstance(raw, (str, int)) and not isinstance(raw, bool):
            return ChoiceAnswer(values=frozenset([str(raw)]))
        return None

    if question_type == QuestionType.TRUE_FALSE:
        if isinstance(raw, bool):
            return BooleanAnswer(value=raw)
        text = str(raw).strip().lower()
        if text in _TRUE_STRINGS:
            return BooleanAnswer(value=True)
        if text in _FALSE_STRINGS:
            return BooleanAnswer(value=False)
        return None

    if isinstance(raw, (str, int, float)) and not isinstance(raw, bool):
        return TextAnswer(value=str(raw))
    return None


class GradedAssessment(BaseModel):
    """Outcome of grading one submission"""
    assessment_id: str
    title: str
    skills: List[str] = Field(default_factory=list)
    points_earned: float = 0
    total_points: float = 0
    score: int = Field(0, ge=0, le=100)
    passed: bool = False
    answers: List[GradedAnswer] = Field(default_factory=list)
    skill_breakdown: List[SkillBreakdown] = Field(default_factory=list)

    def to_result(self) -> AssessmentResult:
        """AssessmentResult consumed by the assessments matching dimension"""
        return AssessmentResult(title=self.title, skills_covered=self.skills, score=self.score, passed=self.passed)


def grade_submission(assessment: Assessment, answers: Dict[str, Any]) -> GradedAssessment:
    """
    Grade answers keyed by question id

    Only answered questions count towards the total, so a partial submission
    is graded on what was attempted.
    """
    questions = {q.question_id: q for q in assessment.questions}
    skills: Dict[str, SkillBreakdown] = {}
    graded = []
    earned = total = 0.0

    for question_id, raw in answers.items():
        question = questions.get(question_id)
        if question is None:
            continue

        total += question.points
        answer = coerce_answer(question.question_type, raw)
        expected = coerce_answer(question.question_type, question.correct_answer)
        is_correct = answer is not None and expected is not None and answer.matches(expected)
        points = question.points if is_correct else 0
        earned += points
        graded.append(GradedAnswer(question_id=question_id, answer=answer, is_correct=is_correct, points_earned=points))

        for skill in question.skills_tested:
            entry = skills.setdefault(skill, SkillBreakdown(skill=skill))
            entry.questions_attempted += 1
            entry.total_points += question.points
            if is_correct:
                entry.questions_correct += 1
                entry.points_earned += question.points

    score = round_half_up(earned / total * 100) if total > 0 else 0
    return GradedAssessment(
        assessment_id=assessment.assessment_id,
        title=assessment.title,
        skills=assessment.skills,
        points_earned=earned,
        total_points=total,
        score=score,
        passed=score >= assessment.passing_score,
        answers=graded,
        skill_breakdown=list(skills.values()),
    )
