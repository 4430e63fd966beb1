"""Business logic for exam sessions shared between the Qt windows and the API."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import datetime
import logging
import random
from threading import Lock

from word_exam.core.config import ExamConfig
from word_exam.core.exceptions import SessionNotFoundError
from word_exam.core.models import ExamResult, QuestionView, RankingEntry, SessionStatus
from word_exam.core.services.exam_session import ExamSession
from word_exam.core.services.ranking_aggregator import RankingAggregator
from word_exam.core.services.session_timer import SessionTimer, format_remaining

logger = logging.getLogger(__name__)

TickCallback = Callable[[str], None]
SubmittedCallback = Callable[[ExamResult], None]


@dataclass(slots=True)
class _SessionHandle:
    session: ExamSession
    timer: SessionTimer | None
    on_submitted: SubmittedCallback | None = None


class ExamManager:
    """Facade over exam sessions, their timers and the shared ranking.

    One lock serializes every operation on every session, so a deadline
    reached on a timer thread never races a user action on the same session.
    Reporting to the ranking and the ``on_submitted`` callback happen outside
    the lock, once per session.
    """

    def __init__(
        self,
        library: Mapping[str, str],
        config: ExamConfig | None = None,
        aggregator: RankingAggregator | None = None,
        *,
        rng: random.Random | None = None,
        clock: Callable[[], datetime] = datetime.now,
        start_timers: bool = True,
        timer_interval: float | None = None,
    ) -> None:
        self._lock = Lock()
        self._library = library
        self._config = config or ExamConfig()
        self._aggregator = aggregator or RankingAggregator(self._config.ranking_threshold)
        self._rng = rng
        self._clock = clock
        self._start_timers = start_timers
        self._timer_interval = timer_interval
        self._sessions: dict[str, _SessionHandle] = {}

    @property
    def config(self) -> ExamConfig:
        return self._config

    @property
    def aggregator(self) -> RankingAggregator:
        return self._aggregator

    @property
    def library(self) -> Mapping[str, str]:
        return self._library

    # --- Session lifecycle ---

    def start_session(
        self,
        username: str,
        *,
        on_tick: TickCallback | None = None,
        on_submitted: SubmittedCallback | None = None,
    ) -> str:
        session = ExamSession(
            self._library,
            self._config.duration_minutes,
            self._config.question_count,
            username,
            rng=self._rng,
            clock=self._clock,
        )
        session_id = session.session_id

        timer_kwargs: dict[str, object] = {"clock": self._clock, "name": f"SessionTimer-{session_id[:8]}"}
        if self._timer_interval is not None:
            timer_kwargs["interval"] = self._timer_interval
        timer = SessionTimer(
            session.deadline,
            on_tick=on_tick,
            on_expired=lambda: self._handle_deadline(session_id),
            **timer_kwargs,
        )

        with self._lock:
            self._sessions[session_id] = _SessionHandle(session=session, timer=timer, on_submitted=on_submitted)

        logger.info(
            "Started session %s for %s with %d questions, deadline %s",
            session_id,
            username,
            session.question_count,
            session.deadline.isoformat(timespec="seconds"),
        )
        if self._start_timers:
            timer.start()
        return session_id

    def submit(self, session_id: str, auto: bool = False) -> ExamResult:
        with self._lock:
            handle = self._get_handle(session_id)
            already_submitted = handle.session.is_submitted
            result = handle.session.submit(auto=auto)
            if handle.timer is not None:
                handle.timer.cancel()
                # A submitted session never ticks again.
                handle.timer = None
            on_submitted = handle.on_submitted
            handle.on_submitted = None

        if already_submitted:
            return result

        self._aggregator.add_score(result.username, result.score)
        if on_submitted is not None:
            try:
                on_submitted(result)
            except Exception:
                logger.exception("Submission callback for session %s failed", session_id)
        return result

    def tick_session(self, session_id: str) -> bool:
        """Run one deadline check for a session; used when timers are not started."""
        with self._lock:
            timer = self._get_handle(session_id).timer
        return timer.tick() if timer is not None else False

    def shutdown(self) -> None:
        with self._lock:
            timers = [handle.timer for handle in self._sessions.values() if handle.timer is not None]
        for timer in timers:
            timer.cancel()

    def _handle_deadline(self, session_id: str) -> None:
        logger.info("Deadline reached for session %s; submitting automatically", session_id)
        self.submit(session_id, auto=True)

    # --- Session delegation ---

    def get_current_question(self, session_id: str) -> QuestionView | None:
        with self._lock:
            return self._get_handle(session_id).session.current_question()

    def select_answer(self, session_id: str, option_index: int) -> bool:
        with self._lock:
            return self._get_handle(session_id).session.select_answer(option_index)

    def previous_question(self, session_id: str) -> QuestionView | None:
        with self._lock:
            session = self._get_handle(session_id).session
            session.previous()
            return session.current_question()

    def next_question(self, session_id: str) -> QuestionView | None:
        with self._lock:
            session = self._get_handle(session_id).session
            session.next()
            return session.current_question()

    def get_result(self, session_id: str) -> ExamResult | None:
        with self._lock:
            return self._get_handle(session_id).session.result

    def get_session_status(self, session_id: str) -> SessionStatus:
        with self._lock:
            return self._get_handle(session_id).session.status

    def get_username(self, session_id: str) -> str:
        with self._lock:
            return self._get_handle(session_id).session.username

    def get_deadline(self, session_id: str) -> datetime:
        with self._lock:
            return self._get_handle(session_id).session.deadline

    def get_remaining_text(self, session_id: str) -> str:
        with self._lock:
            return format_remaining(self._get_handle(session_id).session.remaining())

    def active_session_count(self) -> int:
        with self._lock:
            return sum(1 for handle in self._sessions.values() if not handle.session.is_submitted)

    # --- Ranking delegation ---

    def get_ranking(self) -> list[RankingEntry]:
        return self._aggregator.ranking()

    def _get_handle(self, session_id: str) -> _SessionHandle:
        handle = self._sessions.get(session_id)
        if handle is None:
            raise SessionNotFoundError(f"Unknown exam session '{session_id}'.")
        return handle
