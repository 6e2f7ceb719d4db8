"""
ProgressTracker - Track lesson completion for the current viewing session.

Completion is a two-step protocol:
1. Local commit: the lesson index joins the completed set (always).
2. Remote submission: the result goes to the persistence sink once.
   Its outcome is reported as a notice and never rolls back step 1.
"""

import logging
import threading
from concurrent.futures import Executor, Future
from functools import partial
from typing import Optional

from lessondeck.schemas import Course, ProgressNotice, ProgressSubmission

from .store import ProgressSink


logger = logging.getLogger(__name__)


class ProgressTracker:
    """
    Completed-lesson set for one course, plus forwarding to a sink.

    The completed set only grows, so completion_percentage() never decreases
    within a session. Cross-session persistence belongs to the sink.
    """

    def __init__(
        self,
        course: Course,
        sink: Optional[ProgressSink] = None,
        executor: Optional[Executor] = None,
    ):
        """
        Initialize progress tracker.

        Args:
            course: Course whose lessons are tracked
            sink: Persistence sink receiving each completion (None to skip)
            executor: Runs submissions in the background; None submits inline
        """
        self.course = course
        self.sink = sink
        self.executor = executor
        self._completed: set[int] = set()
        self._scores: dict[int, Optional[int]] = {}
        self._notices: list[ProgressNotice] = []
        self._notice_lock = threading.Lock()

    @property
    def lesson_count(self) -> int:
        return self.course.lesson_count

    # -------------------------------------------------------------------------
    # Completion
    # -------------------------------------------------------------------------

    def mark_lesson_complete(self, lesson_index: int, score: Optional[int] = None) -> Optional[Future]:
        """
        Mark a lesson complete and forward the result to the sink.

        Repeated calls leave the completed set unchanged but submit again.

        Args:
            lesson_index: Zero-based lesson index
            score: Quiz score (correct answers), None for lessons without a quiz

        Returns:
            Future of the submission, or None if nothing was submitted
        """
        if not 0 <= lesson_index < self.lesson_count:
            logger.warning(f"Cannot complete lesson index {lesson_index} of {self.lesson_count}")
            return None

        self.commit(lesson_index, score)
        return self.submit(lesson_index, score)

    def commit(self, lesson_index: int, score: Optional[int] = None) -> bool:
        """
        Record completion locally.

        Returns True if the lesson was not completed before.
        """
        is_new = lesson_index not in self._completed
        self._completed.add(lesson_index)
        if score is not None or lesson_index not in self._scores:
            self._scores[lesson_index] = score
        if is_new:
            logger.info(
                f"Lesson {self.course.lessons[lesson_index].id} completed "
                f"({len(self._completed)}/{self.lesson_count})"
            )
        return is_new

    def submit(self, lesson_index: int, score: Optional[int] = None) -> Optional[Future]:
        """Send one completion to the sink without waiting for the outcome."""
        if self.sink is None:
            return None

        submission = ProgressSubmission(
            course_id=self.course.id,
            lesson_id=self.course.lessons[lesson_index].id,
            quiz_score=score,
        )

        if self.executor is not None:
            future = self.executor.submit(self.sink.submit_progress, submission)
        else:
            future = Future()
            try:
                self.sink.submit_progress(submission)
                future.set_result(None)
            except Exception as e:
                future.set_exception(e)

        future.add_done_callback(partial(self._on_submitted, submission))
        return future

    def _on_submitted(self, submission: ProgressSubmission, future: Future):
        error = future.exception()
        if error is None:
            logger.debug(f"Progress saved for lesson {submission.lesson_id}")
            return

        logger.warning(f"Error saving progress for lesson {submission.lesson_id}: {error}")
        notice = ProgressNotice(
            lesson_id=submission.lesson_id,
            message=f"Progress for this lesson could not be saved: {error}",
        )
        with self._notice_lock:
            self._notices.append(notice)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def is_lesson_completed(self, lesson_index: int) -> bool:
        return lesson_index in self._completed

    def get_completed_lesson_indices(self) -> frozenset[int]:
        return frozenset(self._completed)

    def get_score(self, lesson_index: int) -> Optional[int]:
        """Latest quiz score recorded for a lesson."""
        return self._scores.get(lesson_index)

    def completion_percentage(self) -> float:
        """Fraction of lessons completed, 0.0 to 1.0 (0.0 for an empty course)."""
        if self.lesson_count == 0:
            return 0.0
        return len(self._completed) / self.lesson_count

    def is_course_finished(self) -> bool:
        return self.lesson_count > 0 and len(self._completed) == self.lesson_count

    def get_completion_stats(self) -> dict:
        """Get completion statistics for display."""
        completed = len(self._completed)
        return {
            "total_lessons": self.lesson_count,
            "completed": completed,
            "not_started": self.lesson_count - completed,
            "completion_percent": round(self.completion_percentage() * 100, 1),
        }

    def pop_notices(self) -> list[ProgressNotice]:
        """Return and clear pending failure notices."""
        with self._notice_lock:
            notices = self._notices
            self._notices = []
        return notices
