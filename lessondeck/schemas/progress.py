"""
Progress tracking schemas for LessonDeck.

Defines Pydantic models for student progress including:
- Lesson status tracking
- Progress submissions sent to a persistence sink
- Non-fatal notices raised when a submission fails
"""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
from enum import Enum


class LessonStatus(str, Enum):
    NOT_STARTED = "not_started"
    COMPLETED = "completed"


class ProgressSubmission(BaseModel):
    """One completed-lesson result handed to a persistence sink."""
    course_id: str
    lesson_id: str
    quiz_score: Optional[int] = Field(default=None, ge=0)
    submitted_at: datetime = Field(default_factory=datetime.now)

    def to_payload(self) -> dict:
        """Request body accepted by the course API progress endpoint."""
        payload = {"lessonId": self.lesson_id}
        if self.quiz_score is not None:
            payload["quizScore"] = self.quiz_score
        return payload


class ProgressNotice(BaseModel):
    lesson_id: str
    message: str
    created_at: datetime = Field(default_factory=datetime.now)
