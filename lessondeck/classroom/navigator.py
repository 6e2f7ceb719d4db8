"""
Navigator - Lesson and slide cursor for one course.

Provides:
- Next/previous slide and lesson navigation with clamping
- Direct lesson selection with bounds checking
- Last-slide detection and quiz availability
- Lesson change listeners (used to drop stale quiz and auto-advance state)
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from lessondeck.schemas import Course, Lesson

from .segmenter import segment_lesson


logger = logging.getLogger(__name__)

LessonChangeListener = Callable[[int, int], None]


@dataclass(frozen=True)
class NavigationCursor:
    """Zero-based (lesson, slide) position."""
    lesson_index: int
    slide_index: int


class Navigator:
    """
    Navigate slides and lessons of a loaded course.

    Slides are recomputed from the current lesson body on every access, so
    the cursor is always validated against the current lesson's slides.
    A course without lessons is a terminal empty state: every move is a
    no-op and there is no current lesson.
    """

    def __init__(
        self,
        course: Course,
        segmenter: Callable[[str], list[str]] = segment_lesson,
    ):
        """
        Initialize navigator at the first slide of the first lesson.

        Args:
            course: Fully loaded course
            segmenter: Function turning a lesson body into slides
        """
        self.course = course
        self.segmenter = segmenter
        self._lesson_index = 0
        self._slide_index = 0
        self._listeners: list[LessonChangeListener] = []

    @property
    def lesson_count(self) -> int:
        """Total number of lessons."""
        return self.course.lesson_count

    @property
    def is_empty(self) -> bool:
        """True when the course has nothing to display."""
        return self.lesson_count == 0

    @property
    def lesson_index(self) -> int:
        return self._lesson_index

    @property
    def slide_index(self) -> int:
        return self._slide_index

    @property
    def cursor(self) -> NavigationCursor:
        return NavigationCursor(self._lesson_index, self._slide_index)

    def add_listener(self, listener: LessonChangeListener):
        """Register a callback invoked as listener(old_index, new_index) on lesson selection."""
        self._listeners.append(listener)

    # -------------------------------------------------------------------------
    # Current Content
    # -------------------------------------------------------------------------

    @property
    def current_lesson(self) -> Optional[Lesson]:
        if self.is_empty:
            return None
        return self.course.lessons[self._lesson_index]

    def get_slides(self) -> list[str]:
        """Slides of the current lesson (empty list for an empty course)."""
        lesson = self.current_lesson
        if lesson is None:
            return []
        return self.segmenter(lesson.content)

    @property
    def slide_count(self) -> int:
        return len(self.get_slides())

    @property
    def current_slide(self) -> Optional[str]:
        """Raw text of the slide under the cursor."""
        slides = self.get_slides()
        if not slides:
            return None
        return slides[self._slide_index]

    def get_lesson_position(self) -> tuple[int, int]:
        """
        Get lesson position as (current, total), one-based.

        Returns (0, 0) for an empty course.
        """
        if self.is_empty:
            return (0, 0)
        return (self._lesson_index + 1, self.lesson_count)

    def get_slide_position(self) -> tuple[int, int]:
        """Get slide position as (current, total), one-based."""
        count = self.slide_count
        if count == 0:
            return (0, 0)
        return (self._slide_index + 1, count)

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def go_to_lesson(self, index: int) -> bool:
        """
        Select a lesson and rewind to its first slide.

        Returns True if the lesson was selected, False if index is out of range.
        """
        if not 0 <= index < self.lesson_count:
            logger.debug(f"Ignoring lesson index {index} (course has {self.lesson_count} lessons)")
            return False

        previous = self._lesson_index
        self._lesson_index = index
        self._slide_index = 0  # segmenter never returns zero slides

        for listener in list(self._listeners):
            listener(previous, index)
        return True

    def next_lesson(self) -> bool:
        return self.go_to_lesson(self._lesson_index + 1)

    def previous_lesson(self) -> bool:
        return self.go_to_lesson(self._lesson_index - 1)

    def next_slide(self) -> bool:
        """Move one slide forward. Returns False at the last slide."""
        if self.is_empty or self.is_on_last_slide():
            return False
        self._slide_index += 1
        return True

    def previous_slide(self) -> bool:
        """Move one slide back. Returns False at the first slide."""
        if self.is_empty or self._slide_index == 0:
            return False
        self._slide_index -= 1
        return True

    def is_first_lesson(self) -> bool:
        return self._lesson_index == 0

    def is_last_lesson(self) -> bool:
        return self._lesson_index == self.lesson_count - 1

    def is_on_last_slide(self) -> bool:
        if self.is_empty:
            return False
        return self._slide_index == self.slide_count - 1

    # -------------------------------------------------------------------------
    # Quiz Availability
    # -------------------------------------------------------------------------

    def has_quiz(self) -> bool:
        """True if the current lesson has at least one question."""
        lesson = self.current_lesson
        return lesson is not None and lesson.has_quiz

    def is_quiz_available(self) -> bool:
        """Quiz is offered only on the last slide of a lesson with questions."""
        return self.has_quiz() and self.is_on_last_slide()
