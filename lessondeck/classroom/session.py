"""
CourseSession - Wire navigator, quiz and progress for one open course.

Provides:
- Quiz entry/exit on the last slide of a lesson
- Lesson completion (by quiz or by reading a quiz-less lesson)
- Deferred auto-advance to the next lesson, canceled by any other navigation
"""

import logging
import time
from concurrent.futures import Executor
from dataclasses import dataclass
from functools import partial
from typing import Callable, Optional

from lessondeck.config import DEFAULT_AUTO_ADVANCE_DELAY, DEFAULT_HEADING_MARKER
from lessondeck.schemas import Course

from .navigator import Navigator
from .progress import ProgressTracker
from .quiz import QuizScore, QuizSession
from .segmenter import segment_lesson
from .store import ProgressSink


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PendingAdvance:
    """Advance from from_lesson to to_lesson once the clock reaches due_at."""
    from_lesson: int
    to_lesson: int
    due_at: float


class CourseSession:
    """
    One user viewing one course.

    All state changes happen on the caller's thread in response to user
    actions or tick(). Only the sink submission may run elsewhere.
    """

    def __init__(
        self,
        course: Course,
        sink: Optional[ProgressSink] = None,
        *,
        executor: Optional[Executor] = None,
        auto_advance_delay: float = DEFAULT_AUTO_ADVANCE_DELAY,
        heading_marker: str = DEFAULT_HEADING_MARKER,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Open a course at its first lesson.

        Args:
            course: Loaded course
            sink: Persistence sink for completed lessons
            executor: Background executor for submissions (None submits inline)
            auto_advance_delay: Seconds between completion and moving on
            heading_marker: Line prefix that starts a new slide
            clock: Monotonic time source in seconds
        """
        self.course = course
        self.auto_advance_delay = auto_advance_delay
        self.clock = clock
        self.navigator = Navigator(course, partial(segment_lesson, marker=heading_marker))
        self.progress = ProgressTracker(course, sink=sink, executor=executor)
        self.quiz: Optional[QuizSession] = None
        self.last_quiz_score: Optional[QuizScore] = None
        self.pending_advance: Optional[PendingAdvance] = None
        self.navigator.add_listener(self._on_lesson_change)

    @property
    def is_empty(self) -> bool:
        return self.navigator.is_empty

    def _on_lesson_change(self, old_index: int, new_index: int):
        if self.quiz is not None:
            logger.debug(f"Leaving quiz of lesson {old_index}")
        self.quiz = None
        self.last_quiz_score = None
        self.pending_advance = None

    # -------------------------------------------------------------------------
    # Quiz
    # -------------------------------------------------------------------------

    def is_quiz_available(self) -> bool:
        """True if "Take Quiz" should be offered."""
        return self.quiz is None and self.navigator.is_quiz_available()

    def start_quiz(self) -> bool:
        """
        Enter a fresh quiz for the current lesson.

        Returns False unless on the last slide of a lesson with questions.
        """
        if not self.is_quiz_available():
            return False
        lesson_index = self.navigator.lesson_index
        self.quiz = QuizSession(
            self.navigator.current_lesson.quizzes,
            on_complete=partial(self._on_quiz_complete, lesson_index),
        )
        return True

    def exit_quiz(self):
        """Discard the active quiz without scoring."""
        self.quiz = None

    def _on_quiz_complete(self, lesson_index: int, score: int):
        self.last_quiz_score = self.quiz.get_score() if self.quiz else None
        self.quiz = None
        self._complete_lesson(lesson_index, score)

    # -------------------------------------------------------------------------
    # Completion
    # -------------------------------------------------------------------------

    def can_complete_reading(self) -> bool:
        """Lessons without questions complete once their last slide is reached."""
        return (
            not self.navigator.is_empty
            and not self.navigator.has_quiz()
            and self.navigator.is_on_last_slide()
        )

    def complete_reading(self) -> bool:
        """Mark a quiz-less lesson complete. Returns False if not allowed yet."""
        if not self.can_complete_reading():
            return False
        self._complete_lesson(self.navigator.lesson_index, None)
        return True

    def _complete_lesson(self, lesson_index: int, score: Optional[int]):
        # Local commit and submission never block the advance
        self.progress.mark_lesson_complete(lesson_index, score)

        if lesson_index < self.navigator.lesson_count - 1:
            self.pending_advance = PendingAdvance(
                from_lesson=lesson_index,
                to_lesson=lesson_index + 1,
                due_at=self.clock() + self.auto_advance_delay,
            )
        else:
            self.pending_advance = None
            logger.info(f"Course {self.course.id} reached its last lesson")

    # -------------------------------------------------------------------------
    # Auto-advance
    # -------------------------------------------------------------------------

    def pending_advance_remaining(self) -> Optional[float]:
        """Seconds until the pending advance fires, or None."""
        if self.pending_advance is None:
            return None
        return max(0.0, self.pending_advance.due_at - self.clock())

    def cancel_pending_advance(self):
        self.pending_advance = None

    def tick(self) -> bool:
        """
        Fire the pending advance if it is due.

        Returns True if the cursor moved to the next lesson.
        """
        pending = self.pending_advance
        if pending is None or self.clock() < pending.due_at:
            return False

        self.pending_advance = None
        if self.navigator.lesson_index != pending.from_lesson:
            logger.debug(f"Dropping stale advance from lesson {pending.from_lesson}")
            return False
        return self.navigator.go_to_lesson(pending.to_lesson)
