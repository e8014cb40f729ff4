"""
Practice quiz selection, sessions and grading.
"""
from typing import Literal
from stemedge.core.question_bank import QUESTION_BANK, QUIZ_TOPICS
from stemedge.models.schemas import Question
import logging
import random
import time

logger = logging.getLogger(__name__)

# Highest question difficulty included at each launcher level
DIFFICULTY_CEILING = {
    "Beginner": 1,
    "Intermediate": 3,
    "Advanced": 5,
}


def available_topics() -> list[dict]:
    return [
        {**topic, "question_count": len(QUESTION_BANK.get(topic["id"], []))}
        for topic in QUIZ_TOPICS
    ]


def select_questions(
    topic_id: str,
    limit: int | Literal["All"] | None = None,
    difficulty: str | None = None,
    rng: random.Random | None = None,
) -> list[Question]:
    """Shuffled questions for a topic, filtered by difficulty and truncated to ``limit``."""
    questions = QUESTION_BANK.get(topic_id)
    if not questions:
        logger.info(f"No questions for topic '{topic_id}'")
        return []

    if difficulty:
        ceiling = DIFFICULTY_CEILING.get(difficulty, 5)
        questions = [q for q in questions if q.difficulty <= ceiling]

    shuffled = list(questions)
    (rng or random).shuffle(shuffled)

    if limit is None or limit == "All":
        return shuffled
    return shuffled[:max(limit, 0)]


def grade_short_answer(answer: str, correct: str) -> bool:
    return answer.lower().strip() == correct.lower().strip()


def grade_true_false(answer: str, correct: str) -> bool:
    return answer.lower() == correct.lower()


def grade_mcq(answer: str, correct: str) -> bool:
    return answer == correct


class QuizSession:
    """One pass through a list of questions."""

    def __init__(self, questions: list[Question], clock=time.monotonic):
        if not questions:
            raise ValueError("A quiz needs at least one question")
        self.questions = questions
        self.clock = clock
        self.restart()

    def restart(self):
        self.current_index = 0
        self.answers: dict[str, str] = {}
        self.finished = False
        self.started_at = self.clock()

    @property
    def current_question(self) -> Question:
        return self.questions[self.current_index]

    @property
    def is_last_question(self) -> bool:
        return self.current_index == len(self.questions) - 1

    @property
    def has_answered_current(self) -> bool:
        return self.current_question.id in self.answers

    def select_answer(self, option: str) -> bool:
        """Record an answer; the first answer to a question is final."""
        if self.finished or self.has_answered_current:
            return False
        self.answers[self.current_question.id] = option
        return True

    def next_question(self):
        if self.is_last_question:
            self.finished = True
        else:
            self.current_index += 1

    def prev_question(self):
        if self.current_index > 0:
            self.current_index -= 1

    def results(self) -> dict:
        missed = [
            q.id for q in self.questions
            if not self._is_correct(q, self.answers.get(q.id))
        ]
        score = len(self.questions) - len(missed)
        return {
            "score": score,
            "percentage": round(score / len(self.questions) * 100),
            "missed_question_ids": missed,
            "time_spent": int(self.clock() - self.started_at),
        }

    @staticmethod
    def _is_correct(question: Question, answer: str | None) -> bool:
        if answer is None:
            return False
        if question.type == "true_false":
            return grade_true_false(answer, question.correct_answer)
        if question.type == "short_answer":
            return grade_short_answer(answer, question.correct_answer)
        return grade_mcq(answer, question.correct_answer)
