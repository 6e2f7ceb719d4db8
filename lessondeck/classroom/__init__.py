"""
LessonDeck Classroom - Runtime components for reading courses.

This module provides:
- segment_lesson: Split lesson bodies into slides
- Navigator: Lesson and slide cursor
- QuizSession: Quiz state machine and scoring
- ProgressTracker: Session completion and sink forwarding
- CourseSession: Coordinator with deferred auto-advance
- Course sources and progress sinks
"""

from .segmenter import (
    segment_lesson,
    is_heading_line,
    PLACEHOLDER_SLIDE,
)

from .navigator import (
    Navigator,
    NavigationCursor,
)

from .quiz import (
    QuizSession,
    QuizPhase,
    QuizRejection,
    QuizScore,
)

from .store import (
    ProgressSink,
    ProgressSubmissionError,
    SqliteProgressStore,
    HttpProgressSink,
    BackgroundSubmitter,
)

from .progress import ProgressTracker

from .loader import (
    CourseSource,
    CourseLoadError,
    CourseFileLoader,
    HttpCourseSource,
)

from .session import (
    CourseSession,
    PendingAdvance,
)

__all__ = [
    # Segmenter
    "segment_lesson",
    "is_heading_line",
    "PLACEHOLDER_SLIDE",
    # Navigator
    "Navigator",
    "NavigationCursor",
    # Quiz
    "QuizSession",
    "QuizPhase",
    "QuizRejection",
    "QuizScore",
    # Sinks
    "ProgressSink",
    "ProgressSubmissionError",
    "SqliteProgressStore",
    "HttpProgressSink",
    "BackgroundSubmitter",
    # Progress
    "ProgressTracker",
    # Loader
    "CourseSource",
    "CourseLoadError",
    "CourseFileLoader",
    "HttpCourseSource",
    # Session
    "CourseSession",
    "PendingAdvance",
]
