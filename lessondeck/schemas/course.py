"""
Course content schemas for LessonDeck.

Defines Pydantic models for loaded course data:
- Quiz questions with their options and explanation
- Lessons with raw markdown body and quiz
- Courses and catalog summaries
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Optional


class QuizQuestion(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    question: str
    options: list[str] = Field(..., min_length=1)
    correct_answer_index: int = Field(..., ge=0)
    explanation: str = ""

    @model_validator(mode="after")
    def check_correct_answer_index(self) -> "QuizQuestion":
        if self.correct_answer_index >= len(self.options):
            raise ValueError(
                f"correct_answer_index {self.correct_answer_index} out of range "
                f"for {len(self.options)} options"
            )
        return self


class Lesson(BaseModel):
    """
    One unit of course content.

    `content` is the raw markdown body; slides are derived from it at view
    time and never stored.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    content: str = ""
    lesson_order: int = 0
    duration_minutes: int = Field(default=0, ge=0)
    quizzes: list[QuizQuestion] = []

    @field_validator("content", mode="before")
    @classmethod
    def none_content_as_empty(cls, v):
        return "" if v is None else v

    @field_validator("quizzes", mode="before")
    @classmethod
    def none_quizzes_as_empty(cls, v):
        return [] if v is None else v

    @property
    def has_quiz(self) -> bool:
        return len(self.quizzes) > 0


class Course(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str = ""
    subject: Optional[str] = None
    lessons: list[Lesson] = []

    @field_validator("lessons")
    @classmethod
    def order_lessons(cls, v: list[Lesson]) -> list[Lesson]:
        # Stable sort: lessons sharing an order keep their source order
        return sorted(v, key=lambda lesson: lesson.lesson_order)

    @property
    def lesson_count(self) -> int:
        return len(self.lessons)

    def summary(self) -> "CourseSummary":
        return CourseSummary(
            id=self.id,
            title=self.title,
            description=self.description,
            subject=self.subject,
            lesson_count=self.lesson_count,
        )


class CourseSummary(BaseModel):
    """Lightweight course info for the catalog (without lesson bodies)."""
    id: str
    title: str
    description: str = ""
    subject: Optional[str] = None
    lesson_count: int = Field(default=0, ge=0)
