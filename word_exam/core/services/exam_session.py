"""State of one test-taker's timed exam attempt."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from datetime import datetime, timedelta
import logging
import random
from uuid import uuid4

from word_exam.constants.exam_constants import POINTS_PER_QUESTION
from word_exam.core.config import require_positive_int
from word_exam.core.exceptions import InvalidArgumentError
from word_exam.core.models import (
    ExamResult,
    MissedWord,
    OptionSet,
    QuestionView,
    SessionStatus,
)
from word_exam.core.services.option_generator import generate_options

logger = logging.getLogger(__name__)


class ExamSession:
    """Question sequence, navigation position, recorded answers and deadline.

    Every question's options are generated once when the session is built and
    reused for display and scoring, so the index a test-taker picked always
    refers to the definition they saw.

    The session is not thread-safe; callers serialize access to one session
    (the exam manager holds a lock around every call).
    """

    def __init__(
        self,
        library: Mapping[str, str],
        duration_minutes: int,
        question_count: int,
        username: str,
        *,
        rng: random.Random | None = None,
        clock: Callable[[], datetime] = datetime.now,
        session_id: str | None = None,
    ) -> None:
        require_positive_int("duration_minutes", duration_minutes)
        require_positive_int("question_count", question_count)

        self.session_id = session_id or uuid4().hex
        self.username = username
        self._library = library
        self._clock = clock
        self._rng = rng or random.Random()

        self.started_at = clock()
        self.deadline = self.started_at + timedelta(minutes=duration_minutes)

        all_words = list(library.keys())
        self._rng.shuffle(all_words)
        self._questions: list[str] = all_words[: min(question_count, len(all_words))]
        self._option_sets: dict[str, OptionSet] = {
            word: generate_options(word, library, self._rng) for word in self._questions
        }

        self._current_index: int = 0
        self._answers: dict[str, int] = {}
        self._status = SessionStatus.IN_PROGRESS
        self._result: ExamResult | None = None

    # --- Read access ---

    @property
    def questions(self) -> list[str]:
        return list(self._questions)

    @property
    def question_count(self) -> int:
        return len(self._questions)

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def answers(self) -> dict[str, int]:
        return dict(self._answers)

    @property
    def status(self) -> SessionStatus:
        return self._status

    @property
    def is_submitted(self) -> bool:
        return self._status is SessionStatus.SUBMITTED

    @property
    def result(self) -> ExamResult | None:
        return self._result

    def option_set_for(self, word: str) -> OptionSet:
        try:
            return self._option_sets[word]
        except KeyError:
            raise InvalidArgumentError(f"Word '{word}' is not part of this exam.") from None

    def current_question(self) -> QuestionView | None:
        if not self._questions:
            return None
        word = self._questions[self._current_index]
        return QuestionView(
            word=word,
            options=self._option_sets[word].options,
            selected_index=self._answers.get(word),
            position=self._current_index,
            total=len(self._questions),
        )

    def remaining(self, now: datetime | None = None) -> timedelta:
        now = now or self._clock()
        return max(self.deadline - now, timedelta(0))

    def is_expired(self, now: datetime | None = None) -> bool:
        now = now or self._clock()
        return now >= self.deadline

    # --- Mutation ---

    def select_answer(self, option_index: int) -> bool:
        """Record ``option_index`` for the current word. Returns True when recorded."""
        if self._reject_if_submitted("select_answer") or not self._questions:
            return False
        word = self._questions[self._current_index]
        option_count = len(self._option_sets[word].options)
        if isinstance(option_index, bool) or not isinstance(option_index, int):
            raise InvalidArgumentError(f"Option index must be an integer, got {type(option_index).__name__}.")
        if not 0 <= option_index < option_count:
            raise InvalidArgumentError(
                f"Option index {option_index} out of range for {option_count} options."
            )
        self._answers[word] = option_index
        return True

    def previous(self) -> bool:
        if self._reject_if_submitted("previous") or self._current_index == 0:
            return False
        self._current_index -= 1
        return True

    def next(self) -> bool:
        if self._reject_if_submitted("next") or self._current_index >= len(self._questions) - 1:
            return False
        self._current_index += 1
        return True

    def submit(self, auto: bool = False) -> ExamResult:
        """Score the exam and close it. Later calls return the same result."""
        if self._result is not None:
            return self._result

        correct_count = 0
        missed: list[MissedWord] = []
        for word in self._questions:
            option_set = self._option_sets[word]
            selected = self._answers.get(word)
            if selected is not None and selected == option_set.correct_index:
                correct_count += 1
                continue
            missed.append(
                MissedWord(
                    word=word,
                    correct_definition=option_set.correct_definition,
                    selected_definition=option_set.options[selected] if selected is not None else None,
                )
            )

        self._status = SessionStatus.SUBMITTED
        self._result = ExamResult(
            username=self.username,
            score=correct_count * POINTS_PER_QUESTION,
            total_possible=len(self._questions) * POINTS_PER_QUESTION,
            correct_count=correct_count,
            question_count=len(self._questions),
            missed=tuple(missed),
            auto_submitted=auto,
            submitted_at=self._clock(),
        )
        logger.info(
            "Session %s for %s submitted%s: %d/%d",
            self.session_id,
            self.username,
            " automatically" if auto else "",
            self._result.score,
            self._result.total_possible,
        )
        return self._result

    def _reject_if_submitted(self, operation: str) -> bool:
        if self._status is SessionStatus.SUBMITTED:
            logger.debug("Ignoring %s on submitted session %s", operation, self.session_id)
            return True
        return False
