"""Application entry point for the WordExam desktop app."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from word_exam.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from word_exam.constants.ui_constants import LOGIN_WINDOW_COUNT
from word_exam.core.config import load_data_paths, load_exam_config
from word_exam.core.credential_store import CredentialStore
from word_exam.core.exam_controller import RankingNotifier
from word_exam.core.exam_manager import ExamManager
from word_exam.core.word_library import load_word_library_or_fallback
from word_exam.server.api_server import start_api_server
from word_exam.ui.dialog_helpers import show_ranking
from word_exam.ui.login_window import LoginWindow
from word_exam.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging, start the API server, and open the login windows."""
    logger = configure_logging()
    logger.info("Starting WordExam…")

    paths = load_data_paths()
    config = load_exam_config()
    library = load_word_library_or_fallback(paths.library_file)
    credentials = CredentialStore.from_file(paths.user_file)
    logger.info(
        "Loaded %d words and %d users; %d questions in %d minutes",
        len(library),
        len(credentials),
        config.question_count,
        config.duration_minutes,
    )

    exam_manager = ExamManager(library, config)
    start_api_server(exam_manager=exam_manager, credentials=credentials, host=DEFAULT_HOST, port=DEFAULT_PORT)
    logger.info("Exam API available at http://%s:%d/", DEFAULT_HOST, DEFAULT_PORT)

    app = QApplication(sys.argv)
    app.aboutToQuit.connect(exam_manager.shutdown)

    ranking_notifier = RankingNotifier(app)
    ranking_notifier.ranking_ready.connect(lambda ranking: show_ranking(None, ranking))
    exam_manager.aggregator.add_listener(ranking_notifier.notify)

    windows = [LoginWindow(exam_manager, credentials) for _ in range(LOGIN_WINDOW_COUNT)]
    for window in windows:
        window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
