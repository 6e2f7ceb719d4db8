"""Shared fixtures for LessonDeck tests."""

import pytest

from lessondeck.schemas import Course, Lesson, ProgressSubmission, QuizQuestion


THREE_SLIDE_BODY = (
    "# Welcome\n"
    "What this lesson covers.\n"
    "# Variables\n"
    "A variable names a value.\n"
    "# Recap\n"
    "Names point at values.\n"
)


def make_question(qid: str, correct: int = 0, options: int = 3) -> QuizQuestion:
    return QuizQuestion(
        id=qid,
        question=f"Question {qid}?",
        options=[f"Option {i}" for i in range(options)],
        correct_answer_index=correct,
        explanation=f"Because of {qid}.",
    )


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 100.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


class RecordingSink:
    def __init__(self):
        self.submissions: list[ProgressSubmission] = []

    def submit_progress(self, submission: ProgressSubmission) -> None:
        self.submissions.append(submission)


class FailingSink:
    def __init__(self):
        self.calls = 0

    def submit_progress(self, submission: ProgressSubmission) -> None:
        self.calls += 1
        raise ConnectionError("progress service unreachable")


@pytest.fixture
def two_lesson_course() -> Course:
    """Lesson 0: three slides and a two-question quiz. Lesson 1: no quiz."""
    return Course(
        id="course-py",
        title="Intro to Python",
        description="A short course",
        subject="programming",
        lessons=[
            Lesson(
                id="lesson-1",
                title="Variables",
                content=THREE_SLIDE_BODY,
                lesson_order=1,
                duration_minutes=10,
                quizzes=[make_question("q1", correct=0), make_question("q2", correct=2)],
            ),
            Lesson(
                id="lesson-2",
                title="Functions",
                content="Functions group statements.\n",
                lesson_order=2,
                duration_minutes=15,
            ),
        ],
    )


@pytest.fixture
def empty_course() -> Course:
    return Course(id="course-empty", title="Nothing here")


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def failing_sink() -> FailingSink:
    return FailingSink()
