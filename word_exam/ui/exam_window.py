"""Qt window in which a single test-taker answers the exam."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import (
    QButtonGroup,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QRadioButton,
    QVBoxLayout,
    QWidget,
)

from word_exam.constants.exam_constants import OPTIONS_PER_QUESTION
from word_exam.constants.ui_constants import (
    EXAM_HEADING,
    EXAM_WINDOW_TITLE,
    FLOATING_WINDOW_TITLE,
    NEXT_BUTTON,
    NO_QUESTIONS_MESSAGE,
    PREV_BUTTON,
    QUESTION_TEMPLATE,
    REMAINING_TIME_TEMPLATE,
    RESULT_TITLE,
    SUBMIT_BUTTON,
    TIME_UP_MESSAGE,
    TIME_UP_TITLE,
)
from word_exam.core.exam_controller import ExamController
from word_exam.core.exam_manager import ExamManager
from word_exam.core.exceptions import InvalidArgumentError
from word_exam.core.models import ExamResult, QuestionView
from word_exam.styling.styles import Styles
from word_exam.ui.components.floating_text_panel import FloatingTextPanel
from word_exam.ui.dialog_helpers import confirm_submit, show_error, show_info
from word_exam.ui.result_renderer import render_missed_word_labels, render_result_message


class ExamWindow(QMainWindow):
    """Countdown, current question with four options, and navigation buttons."""

    def __init__(self, exam_manager: ExamManager, username: str, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle(EXAM_WINDOW_TITLE)
        self.resize(600, 400)

        self.controller = ExamController(exam_manager, username, self)
        self._floating_window: FloatingTextPanel | None = None
        self._finished = False

        self._build_ui()
        self.setStyleSheet(Styles.get_main_window_style())

        self.controller.question_changed.connect(self._display_question)
        self.controller.remaining_time_changed.connect(self._display_remaining_time)
        self.controller.session_submitted.connect(self._handle_submitted)

    def start(self) -> None:
        self.controller.start()
        self._display_remaining_time(self.controller.remaining_text())

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)
        layout = QVBoxLayout()
        central_widget.setLayout(layout)

        title_label = QLabel(EXAM_HEADING, self)
        title_label.setAlignment(Qt.AlignCenter)
        title_label.setStyleSheet(Styles.get_heading_style())
        layout.addWidget(title_label)

        self.time_label = QLabel("", self)
        self.time_label.setAlignment(Qt.AlignCenter)
        self.time_label.setStyleSheet(Styles.get_countdown_style())
        layout.addWidget(self.time_label)

        self.question_label = QLabel("", self)
        self.question_label.setWordWrap(True)
        self.question_label.setStyleSheet(Styles.get_question_style())
        layout.addWidget(self.question_label)

        self.option_group = QButtonGroup(self)
        self.option_buttons: list[QRadioButton] = []
        for idx in range(OPTIONS_PER_QUESTION):
            button = QRadioButton(self)
            self.option_group.addButton(button, idx)
            self.option_buttons.append(button)
            layout.addWidget(button)
        self.option_group.idClicked.connect(self._handle_option_selected)

        layout.addStretch()

        button_row = QHBoxLayout()
        self.prev_button = QPushButton(PREV_BUTTON, self)
        self.prev_button.clicked.connect(self.controller.show_previous)
        button_row.addWidget(self.prev_button)

        self.next_button = QPushButton(NEXT_BUTTON, self)
        self.next_button.clicked.connect(self.controller.show_next)
        button_row.addWidget(self.next_button)

        self.submit_button = QPushButton(SUBMIT_BUTTON, self)
        self.submit_button.clicked.connect(self._handle_submit_click)
        button_row.addWidget(self.submit_button)

        layout.addLayout(button_row)

    def _display_question(self, view: QuestionView | None) -> None:
        self._clear_selection()
        if view is None:
            self.question_label.setText(NO_QUESTIONS_MESSAGE)
            for button in self.option_buttons:
                button.setVisible(False)
            self.prev_button.setEnabled(False)
            self.next_button.setEnabled(False)
            return

        self.question_label.setText(QUESTION_TEMPLATE.format(number=view.position + 1, word=view.word))
        for idx, button in enumerate(self.option_buttons):
            has_option = idx < len(view.options)
            button.setVisible(has_option)
            button.setText(view.options[idx] if has_option else "")
        if view.selected_index is not None:
            self.option_buttons[view.selected_index].setChecked(True)
        self.prev_button.setEnabled(not view.is_first)
        self.next_button.setEnabled(not view.is_last)

    def _clear_selection(self) -> None:
        # An exclusive group refuses to uncheck its last checked button.
        self.option_group.setExclusive(False)
        for button in self.option_buttons:
            button.setChecked(False)
        self.option_group.setExclusive(True)

    def _display_remaining_time(self, remaining: str) -> None:
        self.time_label.setText(REMAINING_TIME_TEMPLATE.format(remaining=remaining))

    def _handle_option_selected(self, option_index: int) -> None:
        try:
            self.controller.select_answer(option_index)
        except InvalidArgumentError as exc:
            show_error(self, "Invalid answer", str(exc))

    def _handle_submit_click(self) -> None:
        if confirm_submit(self):
            self.controller.submit()

    def _handle_submitted(self, result: ExamResult) -> None:
        if self._finished:
            return
        self._finished = True
        if result.auto_submitted:
            self._display_remaining_time("00:00")
            show_info(self, TIME_UP_TITLE, TIME_UP_MESSAGE)
        show_info(self, RESULT_TITLE, render_result_message(result))
        self._show_missed_words(result)
        self.close()

    def _show_missed_words(self, result: ExamResult) -> None:
        labels = render_missed_word_labels(result)
        if not labels:
            return
        panel = FloatingTextPanel()
        panel.setWindowTitle(FLOATING_WINDOW_TITLE)
        panel.resize(800, 600)
        for label in labels:
            panel.add_text(label)
        panel.show()
        self._floating_window = panel

    def closeEvent(self, event: QCloseEvent) -> None:
        if not self._finished:
            # The exam window stays open until the exam has been submitted.
            event.ignore()
            return
        super().closeEvent(event)
