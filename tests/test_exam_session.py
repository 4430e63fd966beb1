from __future__ import annotations

from datetime import timedelta
import random

import pytest

from word_exam.core.exceptions import InvalidArgumentError
from word_exam.core.models import SessionStatus
from word_exam.core.services.exam_session import ExamSession


def make_session(library, clock, question_count=4, duration_minutes=15, seed=0):
    return ExamSession(
        library,
        duration_minutes,
        question_count,
        "alice",
        rng=random.Random(seed),
        clock=clock,
    )


def test_new_session_selects_distinct_words(small_library, clock):
    session = make_session(small_library, clock, question_count=3)

    assert session.question_count == 3
    assert len(set(session.questions)) == 3
    assert set(session.questions) <= set(small_library)
    assert session.current_index == 0
    assert session.answers == {}
    assert session.status is SessionStatus.IN_PROGRESS
    assert session.deadline == clock.now + timedelta(minutes=15)


def test_question_count_is_capped_by_library_size(small_library, clock):
    session = make_session(small_library, clock, question_count=10)

    assert session.question_count == 4


@pytest.mark.parametrize("duration, count", [(0, 5), (5, 0), (-1, 5)])
def test_non_positive_parameters_are_rejected(small_library, clock, duration, count):
    with pytest.raises(InvalidArgumentError):
        make_session(small_library, clock, question_count=count, duration_minutes=duration)


def test_current_question_reuses_cached_options(small_library, clock):
    session = make_session(small_library, clock)

    first = session.current_question()
    session.next()
    session.previous()
    again = session.current_question()

    assert first == again
    assert first.position == 0
    assert first.total == 4
    assert first.selected_index is None
    assert first.options == session.option_set_for(first.word).options


def test_select_answer_records_and_overwrites(small_library, clock):
    session = make_session(small_library, clock)
    word = session.current_question().word

    assert session.select_answer(1) is True
    assert session.select_answer(2) is True

    assert session.answers == {word: 2}
    assert session.current_question().selected_index == 2
    assert session.current_index == 0


@pytest.mark.parametrize("bad_index", [-1, 4, 99])
def test_select_answer_rejects_out_of_range_index(small_library, clock, bad_index):
    session = make_session(small_library, clock)

    with pytest.raises(InvalidArgumentError):
        session.select_answer(bad_index)
    assert session.answers == {}


def test_select_answer_rejects_non_integer(small_library, clock):
    session = make_session(small_library, clock)

    with pytest.raises(InvalidArgumentError):
        session.select_answer("1")
    with pytest.raises(InvalidArgumentError):
        session.select_answer(True)


def test_select_answer_is_bounded_by_available_options(clock):
    library = {"cat": "feline", "dog": "canine"}
    session = make_session(library, clock, question_count=2)

    with pytest.raises(InvalidArgumentError):
        session.select_answer(2)
    assert session.select_answer(1) is True


def test_navigation_stays_within_bounds(small_library, clock):
    session = make_session(small_library, clock, question_count=3)

    assert session.previous() is False
    assert session.current_index == 0
    assert session.next() is True
    assert session.next() is True
    assert session.next() is False
    assert session.current_index == 2
    assert session.current_question().is_last


def test_random_navigation_never_leaves_range(small_library, clock):
    session = make_session(small_library, clock)
    rng = random.Random(42)

    for _ in range(200):
        if rng.random() < 0.5:
            session.previous()
        else:
            session.next()
        assert 0 <= session.current_index < session.question_count


def test_answers_survive_navigation(small_library, clock):
    session = make_session(small_library, clock)
    session.select_answer(3)
    session.next()
    session.select_answer(0)
    session.previous()

    assert session.current_question().selected_index == 3
    session.next()
    assert session.current_question().selected_index == 0


def test_end_to_end_scoring_with_one_correct_and_one_wrong(small_library, clock):
    session = make_session(small_library, clock, question_count=2, seed=5)

    first_word = session.current_question().word
    first_set = session.option_set_for(first_word)
    session.select_answer(first_set.correct_index)

    session.next()
    second_word = session.current_question().word
    second_set = session.option_set_for(second_word)
    wrong_index = (second_set.correct_index + 1) % len(second_set.options)
    session.select_answer(wrong_index)

    result = session.submit()

    assert result.username == "alice"
    assert result.score == 10
    assert result.total_possible == 20
    assert result.correct_count == 1
    assert result.question_count == 2
    assert result.auto_submitted is False
    assert len(result.missed) == 1
    missed = result.missed[0]
    assert missed.word == second_word
    assert missed.correct_definition == small_library[second_word]
    assert missed.selected_definition == second_set.options[wrong_index]
    assert missed.was_answered


def test_unanswered_questions_are_missed_in_question_order(small_library, clock):
    session = make_session(small_library, clock)

    result = session.submit()

    assert result.score == 0
    assert result.total_possible == 40
    assert [missed.word for missed in result.missed] == session.questions
    assert all(missed.selected_definition is None for missed in result.missed)


def test_all_correct_scores_full_marks(small_library, clock):
    session = make_session(small_library, clock)
    for _ in range(session.question_count):
        word = session.current_question().word
        session.select_answer(session.option_set_for(word).correct_index)
        session.next()

    result = session.submit()

    assert result.score == result.total_possible == 40
    assert result.missed == ()


def test_submit_is_idempotent(small_library, clock):
    session = make_session(small_library, clock)

    first = session.submit(auto=True)
    clock.advance(minutes=1)
    second = session.submit()

    assert first is second
    assert second.auto_submitted is True
    assert session.status is SessionStatus.SUBMITTED


def test_mutations_after_submit_are_ignored(small_library, clock):
    session = make_session(small_library, clock)
    session.next()
    session.submit()

    assert session.select_answer(0) is False
    assert session.next() is False
    assert session.previous() is False
    assert session.current_index == 1
    assert session.answers == {}


def test_empty_library_gives_zero_question_session(clock):
    session = make_session({}, clock, question_count=5)

    assert session.question_count == 0
    assert session.current_question() is None
    assert session.next() is False
    assert session.previous() is False
    assert session.select_answer(0) is False

    result = session.submit()
    assert (result.score, result.total_possible, result.missed) == (0, 0, ())


def test_remaining_and_expiry_follow_the_clock(small_library, clock):
    session = make_session(small_library, clock, duration_minutes=1)

    assert session.remaining() == timedelta(minutes=1)
    assert not session.is_expired()

    clock.advance(seconds=61)

    assert session.remaining() == timedelta(0)
    assert session.is_expired()
