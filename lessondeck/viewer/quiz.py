"""
Quiz renderer - Multiple-choice question display helpers.

Provides:
- Option state for styling (selected, correct, incorrect, dimmed)
- Question header and progress labels
- Explanation and score HTML fragments
"""

import html
from enum import Enum

from lessondeck.classroom import QuizScore, QuizSession


class OptionState(str, Enum):
    IDLE = "idle"
    SELECTED = "selected"
    CORRECT = "correct"
    INCORRECT = "incorrect"
    DIMMED = "dimmed"


def get_quiz_css() -> str:
    """Get CSS styles for quiz display."""
    return """
    <style>
    .quiz-explanation {
        background: #f5f7fa;
        padding: 0.8em 1em;
        margin: 0.8em 0;
        border-left: 3px solid #90A4AE;
    }
    .quiz-explanation-title {
        font-size: 0.85em;
        text-transform: uppercase;
        color: #546E7A;
    }
    .quiz-feedback-correct {
        color: #388E3C;
        font-weight: 600;
    }
    .quiz-feedback-incorrect {
        color: #C62828;
        font-weight: 600;
    }
    .quiz-result {
        display: flex;
        align-items: baseline;
        gap: 0.6em;
        border-top: 2px solid #388E3C;
        padding: 0.6em 0 0;
        margin-top: 1em;
    }
    .quiz-result-percent {
        font-size: 1.6em;
        font-weight: 700;
        color: #2E7D32;
    }
    </style>
    """


def get_option_state(quiz: QuizSession, index: int) -> OptionState:
    """
    Styling state of one option of the current question.

    Before reveal only the selection is marked. After reveal the correct
    option is marked, a wrong selection is marked incorrect, and the rest
    are dimmed.
    """
    if not quiz.revealed:
        return OptionState.SELECTED if quiz.selected_option == index else OptionState.IDLE

    if index == quiz.current_question.correct_answer_index:
        return OptionState.CORRECT
    if index == quiz.selected_option:
        return OptionState.INCORRECT
    return OptionState.DIMMED


def get_option_label(quiz: QuizSession, index: int) -> str:
    """Option text prefixed with a marker for its state."""
    markers = {
        OptionState.IDLE: "○",
        OptionState.SELECTED: "●",
        OptionState.CORRECT: "✓",
        OptionState.INCORRECT: "✗",
        OptionState.DIMMED: "○",
    }
    option = quiz.current_question.options[index]
    return f"{markers[get_option_state(quiz, index)]} {option}"


def get_quiz_progress_label(quiz: QuizSession) -> str:
    return f"Question {quiz.question_index + 1} of {quiz.total} · Score: {quiz.score}/{quiz.total}"


def get_quiz_progress_fraction(quiz: QuizSession) -> float:
    """Progress bar value, counting the current question as reached."""
    return (quiz.question_index + 1) / quiz.total


def get_advance_button_label(quiz: QuizSession) -> str:
    return "Complete Quiz" if quiz.is_last_question() else "Next Question"


def render_explanation(quiz: QuizSession) -> str:
    """
    Render the feedback shown after an answer is submitted.

    Returns an empty string before reveal.
    """
    if not quiz.revealed:
        return ""

    if quiz.last_answer_correct:
        feedback = '<div class="quiz-feedback-correct">Correct!</div>'
    else:
        feedback = '<div class="quiz-feedback-incorrect">Not quite.</div>'

    parts = [feedback]
    explanation = quiz.current_question.explanation
    if explanation:
        parts.append('<div class="quiz-explanation">')
        parts.append('<div class="quiz-explanation-title">Explanation</div>')
        parts.append(f'<div>{html.escape(explanation)}</div>')
        parts.append('</div>')
    return ''.join(parts)


def render_quiz_score(score: QuizScore) -> str:
    """One-line result shown on the slide view after a quiz."""
    return (
        f'<div class="quiz-result">'
        f'<span class="quiz-result-percent">{score.percent}%</span>'
        f'<span>{score.correct} of {score.total} correct</span>'
        f'</div>'
    )
