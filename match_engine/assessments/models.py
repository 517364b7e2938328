"""Assessment models with typed answers"""
from enum import Enum
from typing import FrozenSet, List, Literal, Optional, Union
from pydantic import BaseModel, Field
from typing_extensions import Annotated


class QuestionType(str, Enum):
    MULTIPLE_CHOICE = "multiple-choice"
    SINGLE_CHOICE = "single-choice"
    TRUE_FALSE = "true-false"
    TEXT = "text"
    CODE = "code"


class TextAnswer(BaseModel):
    """Free-text answer, compared trimmed and case-insensitively"""
    kind: Literal["text"] = "text"
    value: str

    def matches(self, expected: "AnswerValue") -> bool:
        if not isinstance(expected, TextAnswer):
            return False
        return self.value.strip().lower() == expected.value.strip().lower()


class ChoiceAnswer(BaseModel):
    """Selected option ids; single-choice is a one-element set"""
    kind: Literal["choice"] = "choice"
    values: FrozenSet[str]

    def matches(self, expected: "AnswerValue") -> bool:
        return isinstance(expected, ChoiceAnswer) and self.values == expected.values


class BooleanAnswer(BaseModel):
    kind: Literal["boolean"] = "boolean"
    value: bool

    def matches(self, expected: "AnswerValue") -> bool:
        return isinstance(expected, BooleanAnswer) and self.value == expected.value


AnswerValue = Annotated[Union[TextAnswer, ChoiceAnswer, BooleanAnswer], Field(discriminator="kind")]


class Question(BaseModel):
    question_id: str
    question_type: QuestionType
    correct_answer: AnswerValue
    points: float = Field(1, ge=0)
    skills_tested: List[str] = Field(default_factory=list)


class Assessment(BaseModel):
    """Skill assessment definition"""
    assessment_id: str
    title: str
    skills: List[str] = Field(default_factory=list, description="Skills the assessment covers")
    passing_score: float = Field(70, ge=0, le=100)
    questions: List[Question] = Field(default_factory=list)

    @property
    def total_points(self) -> float:
        return sum(q.points for q in self.questions)


class GradedAnswer(BaseModel):
    question_id: str
    answer: Optional[AnswerValue] = None
    is_correct: bool
    points_earned: float


class SkillBreakdown(BaseModel):
    skill: str
    questions_attempted: int = 0
    questions_correct: int = 0
    points_earned: float = 0
    total_points: float = 0

    @property
    def accuracy(self) -> int:
        if not self.questions_attempted:
            return 0
        return int(self.questions_correct * 100 / self.questions_attempted + 0.5)
