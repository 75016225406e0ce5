"""Question bank and questionnaire sessions."""

from disc_profile.quiz.bank import Question, QuestionBank, QuestionOption, get_question_bank
from disc_profile.quiz.session import QuizSession

__all__ = [
    "Question",
    "QuestionBank",
    "QuestionOption",
    "get_question_bank",
    "QuizSession",
]
