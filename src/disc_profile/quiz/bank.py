"""Question bank for the DISC questionnaire."""

import json
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import BaseModel

from disc_profile.db.models import Answer, OptionLetter, Trait
from disc_profile.utils.logging import get_logger

logger = get_logger(__name__)


class QuestionOption(BaseModel):
    """One selectable option and the trait it counts towards."""

    letter: OptionLetter
    trait: Trait
    text: str


class Question(BaseModel):
    """A forced-choice question."""

    id: int
    text: str
    options: List[QuestionOption]

    def get_option(self, letter: str) -> Optional[QuestionOption]:
        """Get the option for a letter (case insensitive)."""
        letter = letter.strip().upper()
        for option in self.options:
            if option.letter == letter:
                return option
        return None

    @property
    def letters(self) -> List[str]:
        return [option.letter for option in self.options]


class QuestionBank:
    """Ordered collection of questionnaire questions."""

    def __init__(self, questions: List[Question]):
        self.questions: Dict[int, Question] = {q.id: q for q in questions}
        self._order = [q.id for q in questions]

    @classmethod
    def load_from_file(cls, path: Optional[Path] = None) -> "QuestionBank":
        """Load question bank from JSON file."""
        if path is None:
            path = Path(__file__).parent / "questions.json"

        logger.debug(f"Loading question bank from: {path}")
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)

        questions = [Question(**q) for q in data["questions"]]
        logger.debug(f"Loaded {len(questions)} questions")
        return cls(questions)

    def __len__(self) -> int:
        return len(self._order)

    def get_question(self, question_id: int) -> Optional[Question]:
        """Get a question by ID."""
        return self.questions.get(question_id)

    def get_questions(self, limit: Optional[int] = None) -> List[Question]:
        """Get questions in presentation order, optionally only the first `limit`."""
        ids = self._order if limit is None else self._order[:limit]
        return [self.questions[qid] for qid in ids]

    def trait_for(self, question_id: int, letter: str) -> Trait:
        """
        Resolve the trait of an option letter for a question.

        Raises:
            ValueError: If the question or the letter is unknown
        """
        question = self.get_question(question_id)
        if question is None:
            raise ValueError(f"Unknown question: {question_id}")

        option = question.get_option(letter)
        if option is None:
            raise ValueError(
                f"Invalid choice {letter!r} for question {question_id}; "
                f"expected one of {', '.join(question.letters)}"
            )
        return option.trait

    def build_answer(self, question_id: int, letter: str, elapsed_seconds: float = 0.0) -> Answer:
        """Create an Answer with its trait looked up from the bank."""
        trait = self.trait_for(question_id, letter)
        return Answer(
            question_id=question_id,
            choice=letter.strip().upper(),
            trait=trait,
            elapsed_seconds=elapsed_seconds,
        )


@lru_cache()
def get_question_bank() -> QuestionBank:
    """Get cached question bank instance."""
    return QuestionBank.load_from_file()
