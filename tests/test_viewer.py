"""Tests for Streamlit display helpers."""

from lessondeck.classroom import (
    CourseSession,
    ProgressTracker,
    QuizScore,
    QuizSession,
    SqliteProgressStore,
)
from lessondeck.viewer import (
    OptionState,
    get_advance_button_label,
    get_catalog_label,
    get_completion_label,
    get_lesson_button_label,
    get_lesson_indicator,
    get_lesson_position_label,
    get_option_label,
    get_option_state,
    get_quiz_css,
    get_quiz_progress_fraction,
    get_quiz_progress_label,
    get_slide_position_label,
    render_explanation,
    render_quiz_score,
)
from lessondeck.schemas import QuizQuestion

from conftest import make_question


class TestOptionState:

    def test_before_reveal(self):
        quiz = QuizSession([make_question("q1", correct=0)])
        assert get_option_state(quiz, 0) == OptionState.IDLE
        quiz.select_option(1)
        assert get_option_state(quiz, 1) == OptionState.SELECTED
        assert get_option_state(quiz, 0) == OptionState.IDLE

    def test_after_wrong_answer(self):
        quiz = QuizSession([make_question("q1", correct=0)])
        quiz.select_option(1)
        quiz.submit_answer()
        assert get_option_state(quiz, 0) == OptionState.CORRECT
        assert get_option_state(quiz, 1) == OptionState.INCORRECT
        assert get_option_state(quiz, 2) == OptionState.DIMMED
        assert get_option_label(quiz, 1) == "✗ Option 1"

    def test_after_right_answer(self):
        quiz = QuizSession([make_question("q1", correct=2)])
        quiz.select_option(2)
        quiz.submit_answer()
        assert get_option_state(quiz, 2) == OptionState.CORRECT
        assert get_option_state(quiz, 0) == OptionState.DIMMED


class TestQuizLabels:

    def test_progress(self):
        quiz = QuizSession([make_question("q1"), make_question("q2")])
        assert get_quiz_progress_label(quiz) == "Question 1 of 2 · Score: 0/2"
        assert get_quiz_progress_fraction(quiz) == 0.5
        assert get_advance_button_label(quiz) == "Next Question"

    def test_last_question_label(self):
        quiz = QuizSession([make_question("q1")])
        assert get_advance_button_label(quiz) == "Complete Quiz"

    def test_explanation_hidden_before_reveal(self):
        quiz = QuizSession([make_question("q1")])
        assert render_explanation(quiz) == ""

    def test_explanation_escaped(self):
        question = QuizQuestion(
            id="q",
            question="?",
            options=["a", "b"],
            correct_answer_index=0,
            explanation="Use <b> tags & entities",
        )
        quiz = QuizSession([question])
        quiz.select_option(0)
        quiz.submit_answer()
        rendered = render_explanation(quiz)
        assert "Correct!" in rendered
        assert "Use &lt;b&gt; tags &amp; entities" in rendered

    def test_score(self):
        rendered = render_quiz_score(QuizScore(correct=1, total=2))
        assert '<span class="quiz-result-percent">50%</span>' in rendered
        assert "1 of 2 correct" in rendered
        assert ".quiz-result-percent" in get_quiz_css()


class TestLessonLabels:

    def test_positions(self, two_lesson_course):
        session = CourseSession(two_lesson_course)
        assert get_lesson_position_label(session) == "Lesson 1 of 2"
        assert get_slide_position_label(session) == "Slide 1 of 3"

    def test_indicators(self, two_lesson_course):
        session = CourseSession(two_lesson_course)
        assert get_lesson_indicator(session, 0) == "→"
        assert get_lesson_indicator(session, 1) == "○"
        session.progress.mark_lesson_complete(1)
        assert get_lesson_indicator(session, 1) == "✓"
        assert get_lesson_button_label(session, 1) == "✓ Functions · 15 min"
        assert get_completion_label(session) == "1/2 lessons (50.0%)"

    def test_long_title_truncated(self, two_lesson_course):
        session = CourseSession(two_lesson_course)
        label = get_lesson_button_label(session, 0, max_len=4)
        assert label == "→ Vari... · 10 min"


class TestCatalogLabel:

    def test_without_saved_progress(self, two_lesson_course):
        summary = two_lesson_course.summary()
        assert get_catalog_label(summary) == "Intro to Python (2 lessons)"

    def test_with_saved_progress(self, two_lesson_course, tmp_path):
        store = SqliteProgressStore(tmp_path / "progress.db")
        ProgressTracker(two_lesson_course, sink=store).mark_lesson_complete(0, 1)
        summary = two_lesson_course.summary()
        label = get_catalog_label(summary, store.get_completed_lesson_ids(summary.id))
        assert label == "Intro to Python (1/2 lessons done)"

    def test_reset_clears_saved_progress(self, two_lesson_course, tmp_path):
        store = SqliteProgressStore(tmp_path / "progress.db")
        ProgressTracker(two_lesson_course, sink=store).mark_lesson_complete(0, 1)
        store.reset_course(two_lesson_course.id)
        summary = two_lesson_course.summary()
        label = get_catalog_label(summary, store.get_completed_lesson_ids(summary.id))
        assert label == "Intro to Python (0/2 lessons done)"
