"""
LessonDeck - Course viewer for AI-generated lessons

Streamlit application for reading courses slide by slide and taking the
quiz at the end of each lesson.

Usage:
    streamlit run app.py
"""

import logging
import time

import streamlit as st

from lessondeck.classroom import (
    BackgroundSubmitter,
    CourseFileLoader,
    CourseLoadError,
    CourseSession,
    HttpCourseSource,
    HttpProgressSink,
    SqliteProgressStore,
)
from lessondeck.config import load_settings
from lessondeck.utils import ApiClient
from lessondeck.viewer import (
    get_advance_button_label,
    get_catalog_label,
    get_completion_label,
    get_lesson_button_label,
    get_lesson_position_label,
    get_option_label,
    get_quiz_css,
    get_quiz_progress_fraction,
    get_quiz_progress_label,
    get_slide_position_label,
    render_explanation,
    render_quiz_score,
)


# -----------------------------------------------------------------------------
# Configuration
# -----------------------------------------------------------------------------

SETTINGS = load_settings()

logging.basicConfig(
    level=getattr(logging, SETTINGS.log_level),
    format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

st.set_page_config(
    page_title="LessonDeck",
    page_icon="📘",
    layout="wide",
    initial_sidebar_state="expanded",
)


# -----------------------------------------------------------------------------
# Session State Initialization
# -----------------------------------------------------------------------------

def init_session_state():
    """Initialize session state variables."""
    if "source" not in st.session_state:
        if SETTINGS.course_source == "http":
            client = ApiClient(SETTINGS.api_base_url, SETTINGS.api_token)
            st.session_state.source = HttpCourseSource(client)
            st.session_state.sink = HttpProgressSink(client)
        else:
            st.session_state.source = CourseFileLoader(SETTINGS.courses_dir)
            st.session_state.sink = SqliteProgressStore(SETTINGS.progress_db)

    if "submitter" not in st.session_state:
        st.session_state.submitter = BackgroundSubmitter()

    if "course_session" not in st.session_state:
        st.session_state.course_session = None

    if "load_error" not in st.session_state:
        st.session_state.load_error = None


def get_saved_progress_store():
    """Local store that can be read back, or None for the HTTP sink."""
    sink = st.session_state.sink
    return sink if isinstance(sink, SqliteProgressStore) else None


def open_course(course_id: str):
    """Load a course once and start a fresh viewing session."""
    try:
        course = st.session_state.source.load_course(course_id)
    except CourseLoadError as e:
        logger.error(f"Error loading course: {e}")
        st.session_state.load_error = "Failed to load course"
        st.session_state.course_session = None
        return

    st.session_state.load_error = None
    st.session_state.course_session = CourseSession(
        course,
        st.session_state.sink,
        executor=st.session_state.submitter,
        auto_advance_delay=SETTINGS.auto_advance_delay,
        heading_marker=SETTINGS.heading_marker,
    )


# -----------------------------------------------------------------------------
# Sidebar: Catalog and Lessons
# -----------------------------------------------------------------------------

def render_sidebar():
    """Render the sidebar with the catalog and lesson list."""
    st.sidebar.title("📘 LessonDeck")

    try:
        courses = st.session_state.source.list_courses()
    except CourseLoadError as e:
        logger.error(f"Error listing courses: {e}")
        st.sidebar.error("Could not load the course catalog.")
        return

    if not courses:
        st.sidebar.info("No courses yet.")
        return

    store = get_saved_progress_store()
    st.sidebar.subheader("Courses")
    for summary in courses:
        completed = store.get_completed_lesson_ids(summary.id) if store else None
        label = get_catalog_label(summary, completed)
        if st.sidebar.button(label, key=f"course_{summary.id}", use_container_width=True):
            open_course(summary.id)
            st.rerun()

    session = st.session_state.course_session
    if session is None or session.is_empty:
        return

    st.sidebar.divider()
    st.sidebar.subheader("Lessons")
    st.sidebar.markdown(f"**Progress:** {get_completion_label(session)}")
    st.sidebar.progress(session.progress.completion_percentage())

    for index in range(session.navigator.lesson_count):
        if st.sidebar.button(
            get_lesson_button_label(session, index),
            key=f"lesson_{index}",
            use_container_width=True,
        ):
            session.navigator.go_to_lesson(index)
            st.rerun()

    if store is not None and st.sidebar.button("Reset saved progress", key="reset_progress", use_container_width=True):
        store.reset_course(session.course.id)
        open_course(session.course.id)
        st.rerun()


# -----------------------------------------------------------------------------
# Main Content: Course View
# -----------------------------------------------------------------------------

def render_course_view():
    """Render the open course: header, slide or quiz, notices."""
    if st.session_state.load_error:
        st.error(st.session_state.load_error)
        return

    session = st.session_state.course_session
    if session is None:
        st.info("Select a course from the sidebar to begin.")
        return

    session.tick()

    course = session.course
    st.title(course.title)
    if course.description:
        st.caption(course.description)

    if session.is_empty:
        st.warning("This course has no lessons yet.")
        return

    for notice in session.progress.pop_notices():
        st.warning(notice.message)

    if session.quiz is not None:
        render_quiz_view(session)
    else:
        render_slide_view(session)

    render_pending_advance(session)


def render_slide_view(session: CourseSession):
    """Render the current slide with navigation."""
    nav = session.navigator
    lesson = nav.current_lesson

    st.markdown(f"**{get_lesson_position_label(session)}** · {get_slide_position_label(session)}")
    st.subheader(lesson.title)
    st.markdown(nav.current_slide)

    if session.last_quiz_score is not None:
        st.markdown(get_quiz_css(), unsafe_allow_html=True)
        st.markdown(render_quiz_score(session.last_quiz_score), unsafe_allow_html=True)

    st.divider()
    col1, col2, col3, col4 = st.columns([1, 1, 2, 1])

    with col1:
        if st.button("← Previous lesson", disabled=nav.is_first_lesson(), use_container_width=True):
            nav.previous_lesson()
            st.rerun()

    with col2:
        if st.button("‹ Back", disabled=nav.slide_index == 0, use_container_width=True):
            nav.previous_slide()
            st.rerun()

    with col3:
        if session.is_quiz_available():
            if st.button("Take Quiz", type="primary", use_container_width=True):
                session.start_quiz()
                st.rerun()
        elif session.can_complete_reading() and not session.progress.is_lesson_completed(nav.lesson_index):
            if st.button("Mark lesson as complete", type="primary", use_container_width=True):
                session.complete_reading()
                st.rerun()
        elif not nav.is_on_last_slide():
            if st.button("Continue ›", use_container_width=True):
                nav.next_slide()
                st.rerun()

    with col4:
        if st.button("Next lesson →", disabled=nav.is_last_lesson(), use_container_width=True):
            nav.next_lesson()
            st.rerun()


def render_quiz_view(session: CourseSession):
    """Render the active quiz question."""
    quiz = session.quiz
    question = quiz.current_question

    st.subheader(f"Quiz: {session.navigator.current_lesson.title}")
    st.caption(get_quiz_progress_label(quiz))
    st.progress(get_quiz_progress_fraction(quiz))
    st.markdown(f"### {question.question}")

    for index in range(len(question.options)):
        if st.button(
            get_option_label(quiz, index),
            key=f"option_{quiz.question_index}_{index}",
            disabled=quiz.revealed,
            use_container_width=True,
        ):
            quiz.select_option(index)
            st.rerun()

    st.markdown(get_quiz_css(), unsafe_allow_html=True)
    st.markdown(render_explanation(quiz), unsafe_allow_html=True)

    col1, col2 = st.columns([3, 1])
    with col1:
        if not quiz.revealed:
            if st.button(
                "Submit Answer",
                type="primary",
                disabled=quiz.selected_option is None,
                use_container_width=True,
            ):
                quiz.submit_answer()
                st.rerun()
        else:
            if st.button(get_advance_button_label(quiz), type="primary", use_container_width=True):
                quiz.advance()
                st.rerun()
    with col2:
        if st.button("Leave quiz", use_container_width=True):
            session.exit_quiz()
            st.rerun()


def render_pending_advance(session: CourseSession):
    """Show the completion notice, then rerun once the advance is due."""
    remaining = session.pending_advance_remaining()
    if remaining is None:
        if session.progress.is_course_finished():
            st.success("Course completed!")
        return

    st.success("Lesson completed! Moving to the next lesson...")
    time.sleep(remaining)
    st.rerun()


# -----------------------------------------------------------------------------
# Main App
# -----------------------------------------------------------------------------

def main():
    """Main application entry point."""
    init_session_state()
    render_sidebar()
    render_course_view()


if __name__ == "__main__":
    main()
