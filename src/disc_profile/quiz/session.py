"""In-progress questionnaire attempt."""

import time
from typing import Callable, List, Optional, Tuple

from disc_profile.db.models import Answer
from disc_profile.quiz.bank import Question, QuestionBank, get_question_bank
from disc_profile.utils.logging import get_logger

logger = get_logger(__name__)


class QuizSession:
    """State of one questionnaire attempt: position, answers and timing."""

    def __init__(
        self,
        bank: Optional[QuestionBank] = None,
        limit: Optional[int] = 25,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize a quiz session.

        Args:
            bank: Question bank (uses default if None)
            limit: Number of questions to present (all if None)
            clock: Time source in seconds, used for per-question timing
        """
        self.bank = bank if bank is not None else get_question_bank()
        self.questions: List[Question] = self.bank.get_questions(limit)
        if not self.questions:
            raise ValueError("Question bank is empty")

        self._clock = clock
        self._answers: List[Answer] = []
        self._index = 0
        self._started_at = clock()

    @property
    def current_index(self) -> int:
        return self._index

    @property
    def total_questions(self) -> int:
        return len(self.questions)

    @property
    def is_complete(self) -> bool:
        return self._index >= len(self.questions)

    @property
    def current_question(self) -> Optional[Question]:
        """Question currently presented, or None when complete."""
        if self.is_complete:
            return None
        return self.questions[self._index]

    @property
    def progress(self) -> float:
        """Position of the current question as a percentage of the total."""
        if self.is_complete:
            return 100.0
        return (self._index + 1) / len(self.questions) * 100

    @property
    def answers(self) -> Tuple[Answer, ...]:
        return tuple(self._answers)

    def answer(self, letter: str) -> Answer:
        """
        Answer the current question and move to the next one.

        Args:
            letter: Chosen option letter

        Returns:
            The recorded Answer

        Raises:
            ValueError: If the session is complete or the letter is invalid
        """
        question = self.current_question
        if question is None:
            raise ValueError("All questions have already been answered")

        elapsed = max(0.0, self._clock() - self._started_at)
        answer = self.bank.build_answer(question.id, letter, elapsed_seconds=elapsed)

        self._answers.append(answer)
        self._index += 1
        self._started_at = self._clock()
        logger.debug(
            f"Question {question.id} answered {answer.choice} ({answer.trait.value}) "
            f"in {elapsed:.1f}s"
        )
        return answer

    def restart(self) -> None:
        """Discard all answers and start again from the first question."""
        self._answers = []
        self._index = 0
        self._started_at = self._clock()
