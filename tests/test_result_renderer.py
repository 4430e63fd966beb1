from __future__ import annotations

from word_exam.core.models import ExamResult, MissedWord, RankingEntry
from word_exam.ui.result_renderer import (
    render_missed_word_labels,
    render_ranking_message,
    render_result_message,
)


def make_result(missed=()) -> ExamResult:
    return ExamResult(
        username="alice",
        score=10,
        total_possible=30,
        correct_count=1,
        question_count=3,
        missed=tuple(missed),
    )


def test_result_message_lists_totals_and_missed_words():
    result = make_result(
        [
            MissedWord("dog", "a domesticated canine", "a small domesticated feline"),
            MissedWord("sun", "the star at the centre of the solar system"),
        ]
    )

    message = render_result_message(result)

    assert "Total questions: 3" in message
    assert "Correct answers: 1" in message
    assert "Score: 10/30" in message
    assert "Word: dog" in message
    assert "Your answer: a small domesticated feline" in message
    assert "Your answer: Not answered" in message


def test_result_message_without_missed_words():
    message = render_result_message(make_result())

    assert "Missed words" not in message


def test_missed_word_labels():
    result = make_result([MissedWord("dog", "a domesticated canine")])

    assert render_missed_word_labels(result) == ["dog: a domesticated canine"]


def test_ranking_message():
    ranking = [RankingEntry("bob", 50), RankingEntry("alice", 30)]

    assert render_ranking_message(ranking) == "Exam ranking:\n1. bob: 50\n2. alice: 30"
