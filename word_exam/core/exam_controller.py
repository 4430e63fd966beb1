"""Qt signal bridge between one exam window and the exam manager."""

from __future__ import annotations

from PySide6.QtCore import QObject, Signal

from word_exam.core.exam_manager import ExamManager
from word_exam.core.models import ExamResult, QuestionView, RankingEntry


class ExamController(QObject):
    """Drives one session and re-emits its state changes as Qt signals.

    Timer callbacks arrive on the session timer thread; emitting them as
    signals lets Qt queue the slots onto the thread that owns the window.
    """

    question_changed = Signal(object)  # QuestionView | None
    remaining_time_changed = Signal(str)
    session_submitted = Signal(object)  # ExamResult

    def __init__(self, exam_manager: ExamManager, username: str, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self.exam_manager = exam_manager
        self.username = username
        self._session_id: str | None = None

    @property
    def session_id(self) -> str | None:
        return self._session_id

    def start(self) -> str:
        if self._session_id is not None:
            raise RuntimeError("Exam already started for this window.")
        self._session_id = self.exam_manager.start_session(
            self.username,
            on_tick=self.remaining_time_changed.emit,
            on_submitted=self.session_submitted.emit,
        )
        self.question_changed.emit(self.exam_manager.get_current_question(self._session_id))
        return self._session_id

    def current_question(self) -> QuestionView | None:
        return self.exam_manager.get_current_question(self._require_session())

    def remaining_text(self) -> str:
        return self.exam_manager.get_remaining_text(self._require_session())

    def select_answer(self, option_index: int) -> bool:
        return self.exam_manager.select_answer(self._require_session(), option_index)

    def show_previous(self) -> None:
        self.question_changed.emit(self.exam_manager.previous_question(self._require_session()))

    def show_next(self) -> None:
        self.question_changed.emit(self.exam_manager.next_question(self._require_session()))

    def submit(self) -> ExamResult:
        return self.exam_manager.submit(self._require_session())

    def is_submitted(self) -> bool:
        return self._session_id is not None and self.exam_manager.get_result(self._session_id) is not None

    def _require_session(self) -> str:
        if self._session_id is None:
            raise RuntimeError("Exam has not been started.")
        return self._session_id


class RankingNotifier(QObject):
    """Announces the ranking on the GUI thread once the threshold is reached."""

    ranking_ready = Signal(object)  # list[RankingEntry]

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)

    def notify(self, ranking: list[RankingEntry]) -> None:
        self.ranking_ready.emit(list(ranking))
