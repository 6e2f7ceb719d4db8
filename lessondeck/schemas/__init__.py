"""
LessonDeck Schemas - Pydantic models for the course viewer.

This module exports all schema classes for:
- Course: courses, lessons, quiz questions, catalog summaries
- Progress: lesson status, progress submissions, failure notices
"""

# Course schemas
from .course import (
    QuizQuestion,
    Lesson,
    Course,
    CourseSummary,
)

# Progress schemas
from .progress import (
    LessonStatus,
    ProgressSubmission,
    ProgressNotice,
)

__all__ = [
    # Course
    'QuizQuestion',
    'Lesson',
    'Course',
    'CourseSummary',
    # Progress
    'LessonStatus',
    'ProgressSubmission',
    'ProgressNotice',
]
