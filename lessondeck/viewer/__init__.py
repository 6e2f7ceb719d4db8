"""
LessonDeck Viewer - Display helpers for the Streamlit page.

Components:
- lesson: Slide and lesson labels, sidebar indicators, catalog labels
- quiz: Option states, explanation and score rendering
"""

from .lesson import (
    get_lesson_position_label,
    get_slide_position_label,
    get_lesson_indicator,
    get_lesson_button_label,
    get_completion_label,
    get_catalog_label,
)

from .quiz import (
    OptionState,
    get_quiz_css,
    get_option_state,
    get_option_label,
    get_quiz_progress_label,
    get_quiz_progress_fraction,
    get_advance_button_label,
    render_explanation,
    render_quiz_score,
)

__all__ = [
    # Lesson
    "get_lesson_position_label",
    "get_slide_position_label",
    "get_lesson_indicator",
    "get_lesson_button_label",
    "get_completion_label",
    "get_catalog_label",
    # Quiz
    "OptionState",
    "get_quiz_css",
    "get_option_state",
    "get_option_label",
    "get_quiz_progress_label",
    "get_quiz_progress_fraction",
    "get_advance_button_label",
    "render_explanation",
    "render_quiz_score",
]
