"""
Lesson renderer - Labels and indicators for the slide view.

Slide text itself is markdown and is handed to Streamlit unchanged.
"""

from typing import Optional

from lessondeck.classroom import CourseSession
from lessondeck.schemas import CourseSummary


def get_lesson_position_label(session: CourseSession) -> str:
    current, total = session.navigator.get_lesson_position()
    return f"Lesson {current} of {total}"


def get_slide_position_label(session: CourseSession) -> str:
    current, total = session.navigator.get_slide_position()
    return f"Slide {current} of {total}"


def get_lesson_indicator(session: CourseSession, lesson_index: int) -> str:
    """
    Get status indicator for sidebar display.

    Returns:
        ✓ for completed
        → for current
        ○ for the rest
    """
    if session.progress.is_lesson_completed(lesson_index):
        return "✓"
    if lesson_index == session.navigator.lesson_index:
        return "→"
    return "○"


def get_lesson_button_label(session: CourseSession, lesson_index: int, max_len: int = 30) -> str:
    lesson = session.course.lessons[lesson_index]
    title = lesson.title[:max_len] + "..." if len(lesson.title) > max_len else lesson.title
    return f"{get_lesson_indicator(session, lesson_index)} {title} · {lesson.duration_minutes} min"


def get_completion_label(session: CourseSession) -> str:
    stats = session.progress.get_completion_stats()
    return f"{stats['completed']}/{stats['total_lessons']} lessons ({stats['completion_percent']}%)"


def get_catalog_label(summary: CourseSummary, completed_lesson_ids: Optional[set[str]] = None) -> str:
    """
    Catalog button label.

    Shows saved progress when a local store is available, else the lesson count.
    """
    if completed_lesson_ids is None:
        return f"{summary.title} ({summary.lesson_count} lessons)"
    done = min(len(completed_lesson_ids), summary.lesson_count)
    return f"{summary.title} ({done}/{summary.lesson_count} lessons done)"
