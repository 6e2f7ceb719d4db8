"""
Quiz - State machine for one attempt at a lesson's quiz.

Provides:
- Option selection, answer submission and reveal
- At-most-once scoring per question
- Completion callback reporting the final score
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from lessondeck.schemas import QuizQuestion


logger = logging.getLogger(__name__)


class QuizPhase(str, Enum):
    PRESENTING = "presenting"  # Question shown, answer may be selected
    REVEALED = "revealed"      # Answer submitted, correctness and explanation shown
    COMPLETED = "completed"    # All questions answered


class QuizRejection(str, Enum):
    """Why a quiz operation was refused. The session state is unchanged."""
    NO_SELECTION = "no_selection"
    NOT_PRESENTING = "not_presenting"
    NOT_REVEALED = "not_revealed"
    OPTION_OUT_OF_RANGE = "option_out_of_range"


@dataclass(frozen=True)
class QuizScore:
    correct: int
    total: int

    @property
    def fraction(self) -> float:
        if self.total == 0:
            return 1.0
        return self.correct / self.total

    @property
    def percent(self) -> int:
        return round(self.fraction * 100)


class QuizSession:
    """
    One attempt at a lesson's questions, in order.

    PRESENTING(q) -> REVEALED(q) -> PRESENTING(q + 1) | COMPLETED.
    Operations return None when accepted, or a QuizRejection.
    """

    def __init__(
        self,
        questions: list[QuizQuestion],
        on_complete: Optional[Callable[[int], None]] = None,
    ):
        """
        Start a quiz at the first question.

        Args:
            questions: Ordered questions, at least one
            on_complete: Called once with the final score on completion
        """
        if not questions:
            raise ValueError("A quiz needs at least one question")
        self.questions = list(questions)
        self.on_complete = on_complete
        self.phase = QuizPhase.PRESENTING
        self.question_index = 0
        self.selected_option: Optional[int] = None
        self.last_answer_correct: Optional[bool] = None
        self.score = 0
        self.scored: set[int] = set()

    @property
    def total(self) -> int:
        return len(self.questions)

    @property
    def current_question(self) -> QuizQuestion:
        return self.questions[self.question_index]

    @property
    def revealed(self) -> bool:
        return self.phase == QuizPhase.REVEALED

    @property
    def is_completed(self) -> bool:
        return self.phase == QuizPhase.COMPLETED

    def is_last_question(self) -> bool:
        return self.question_index == self.total - 1

    def get_score(self) -> QuizScore:
        return QuizScore(correct=self.score, total=self.total)

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def select_option(self, index: int) -> Optional[QuizRejection]:
        """Record a tentative answer, replacing any earlier one."""
        if self.phase != QuizPhase.PRESENTING:
            return self._reject(QuizRejection.NOT_PRESENTING)
        if not 0 <= index < len(self.current_question.options):
            return self._reject(QuizRejection.OPTION_OUT_OF_RANGE)
        self.selected_option = index
        return None

    def submit_answer(self) -> Optional[QuizRejection]:
        """Reveal the current question, scoring it if not scored before."""
        if self.phase != QuizPhase.PRESENTING:
            return self._reject(QuizRejection.NOT_PRESENTING)
        if self.selected_option is None:
            return self._reject(QuizRejection.NO_SELECTION)

        correct = self.selected_option == self.current_question.correct_answer_index
        if correct and self.question_index not in self.scored:
            self.score += 1
        self.scored.add(self.question_index)

        self.last_answer_correct = correct
        self.phase = QuizPhase.REVEALED
        return None

    def advance(self) -> Optional[QuizRejection]:
        """Move past a revealed question, completing the quiz after the last one."""
        if self.phase != QuizPhase.REVEALED:
            return self._reject(QuizRejection.NOT_REVEALED)

        if self.is_last_question():
            self.phase = QuizPhase.COMPLETED
            logger.info(f"Quiz completed: {self.score}/{self.total}")
            if self.on_complete is not None:
                self.on_complete(self.score)
            return None

        self.question_index += 1
        self.selected_option = None
        self.last_answer_correct = None
        self.phase = QuizPhase.PRESENTING
        return None

    def _reject(self, reason: QuizRejection) -> QuizRejection:
        logger.debug(f"Quiz rejected operation in {self.phase.value} state: {reason.value}")
        return reason
