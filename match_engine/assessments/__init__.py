"""Assessment grading package"""
from .grading import GradedAssessment, coerce_answer, grade_submission
from .models import (
    AnswerValue,
    Assessment,
    BooleanAnswer,
    ChoiceAnswer,
    GradedAnswer,
    Question,
    QuestionType,
    SkillBreakdown,
    TextAnswer,
)

__all__ = [
    "GradedAssessment",
    "coerce_answer",
    "grade_submission",
    "AnswerValue",
    "Assessment",
    "BooleanAnswer",
    "ChoiceAnswer",
    "GradedAnswer",
    "Question",
    "QuestionType",
    "SkillBreakdown",
    "TextAnswer",
]
