"""Qt login window; each one can start one exam."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QGridLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from word_exam.constants.about import APP_VERSION
from word_exam.constants.ui_constants import (
    LOGIN_BUTTON,
    LOGIN_FAILED_MESSAGE,
    LOGIN_HEADING,
    LOGIN_PASSWORD_LABEL,
    LOGIN_SUCCESS_MESSAGE,
    LOGIN_USERNAME_LABEL,
    LOGIN_WINDOW_TITLE,
)
from word_exam.core.credential_store import CredentialStore
from word_exam.core.exam_manager import ExamManager
from word_exam.styling.styles import Styles
from word_exam.ui.dialog_helpers import show_error, show_info
from word_exam.ui.exam_window import ExamWindow


class LoginWindow(QMainWindow):
    """Username/password form that hands over to an exam window."""

    def __init__(
        self,
        exam_manager: ExamManager,
        credentials: CredentialStore,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle(LOGIN_WINDOW_TITLE)
        self.resize(400, 300)

        self.exam_manager = exam_manager
        self.credentials = credentials
        self.exam_window: ExamWindow | None = None

        self._build_ui()
        self.setStyleSheet(Styles.get_main_window_style())

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)
        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        title_label = QLabel(LOGIN_HEADING, self)
        title_label.setAlignment(Qt.AlignCenter)
        title_label.setStyleSheet(Styles.get_heading_style())
        root_layout.addWidget(title_label)

        form_layout = QGridLayout()
        form_layout.setContentsMargins(40, 20, 40, 20)
        form_layout.setSpacing(10)

        form_layout.addWidget(QLabel(LOGIN_USERNAME_LABEL, self), 0, 0)
        self.username_field = QLineEdit(self)
        form_layout.addWidget(self.username_field, 0, 1)

        form_layout.addWidget(QLabel(LOGIN_PASSWORD_LABEL, self), 1, 0)
        self.password_field = QLineEdit(self)
        self.password_field.setEchoMode(QLineEdit.Password)
        self.password_field.returnPressed.connect(self._handle_login)
        form_layout.addWidget(self.password_field, 1, 1)

        self.login_button = QPushButton(LOGIN_BUTTON, self)
        self.login_button.setDefault(True)
        self.login_button.clicked.connect(self._handle_login)
        form_layout.addWidget(self.login_button, 2, 1)

        root_layout.addLayout(form_layout)

        version_label = QLabel(f"v{APP_VERSION}", self)
        version_label.setAlignment(Qt.AlignRight)
        version_label.setStyleSheet(Styles.get_version_label_style())
        root_layout.addWidget(version_label)

    def _handle_login(self) -> None:
        username = self.username_field.text().strip()
        password = self.password_field.text()
        if not self.credentials.verify(username, password):
            show_error(self, "Error", LOGIN_FAILED_MESSAGE)
            return

        show_info(self, "Notice", LOGIN_SUCCESS_MESSAGE)
        self.hide()
        self.exam_window = ExamWindow(self.exam_manager, username)
        self.exam_window.show()
        self.exam_window.start()
