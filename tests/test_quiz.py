import random

import pytest

from stemedge.core.question_bank import QUESTION_BANK
from stemedge.models.schemas import Question
from stemedge.services.quiz import (
    QuizSession, available_topics, grade_mcq, grade_short_answer, grade_true_false,
    select_questions
)


def test_topics_report_question_counts():
    topics = {t["id"]: t for t in available_topics()}

    assert set(topics) == {"cell_biology", "plant_nutrition", "enzymes", "inheritance", "ecology"}
    assert topics["cell_biology"]["question_count"] == len(QUESTION_BANK["cell_biology"])
    assert topics["inheritance"]["difficulties"] == ["Advanced"]


def test_select_truncates_to_limit():
    questions = select_questions("cell_biology", 3, rng=random.Random(1))

    assert len(questions) == 3
    assert len({q.id for q in questions}) == 3


def test_select_all_returns_every_question():
    assert len(select_questions("cell_biology", "All")) == len(QUESTION_BANK["cell_biology"])


def test_limit_larger_than_bank():
    assert len(select_questions("enzymes", 20)) == 2


def test_difficulty_filter_uses_ceiling():
    beginner = select_questions("ecology", "All", "Beginner")
    intermediate = select_questions("ecology", "All", "Intermediate")

    assert [q.id for q in beginner] == ["ecology_001"]
    assert {q.id for q in intermediate} == {"ecology_001", "ecology_002"}


def test_unknown_topic_is_empty():
    assert select_questions("astronomy", 5) == []


def test_shuffle_is_reproducible_with_seeded_rng():
    first = select_questions("cell_biology", "All", rng=random.Random(42))
    second = select_questions("cell_biology", "All", rng=random.Random(42))

    assert [q.id for q in first] == [q.id for q in second]


def test_grading_helpers():
    assert grade_short_answer("  Mitochondria ", "mitochondria")
    assert grade_true_false("TRUE", "True")
    assert grade_mcq("Neuron", "Neuron")
    assert not grade_mcq("neuron", "Neuron")


class Ticker:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def test_session_scores_answers():
    clock = Ticker()
    questions = QUESTION_BANK["ecology"]
    session = QuizSession(questions, clock=clock)

    assert session.select_answer("Producer")
    assert not session.select_answer("Decomposer")
    session.next_question()
    session.select_answer("Growth")
    session.next_question()
    clock.now = 42.7

    assert session.finished
    assert session.results() == {
        "score": 1,
        "percentage": 50,
        "missed_question_ids": ["ecology_002"],
        "time_spent": 42,
    }


def test_session_true_false_grading_ignores_case():
    question = next(q for q in QUESTION_BANK["cell_biology"] if q.type == "true_false")
    session = QuizSession([question])

    session.select_answer("true")

    assert session.results()["score"] == 1


def test_session_short_answer_grading_ignores_case_and_whitespace():
    question = Question(
        id="cells_short",
        text="Which organelle releases energy from glucose?",
        type="short_answer",
        correct_answer="Mitochondria",
        explanation="Aerobic respiration happens in the mitochondria.",
        difficulty=1,
    )
    session = QuizSession([question])

    session.select_answer("  mitochondria ")

    assert question.options == []
    assert session.results()["score"] == 1


def test_session_navigation_and_restart():
    session = QuizSession(QUESTION_BANK["cell_biology"])

    session.prev_question()
    assert session.current_index == 0

    session.next_question()
    session.next_question()
    assert session.current_index == 2

    session.select_answer("×100")
    session.restart()
    assert session.current_index == 0
    assert session.answers == {}
    assert not session.finished


def test_empty_session_is_rejected():
    with pytest.raises(ValueError):
        QuizSession([])
