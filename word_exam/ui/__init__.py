"""Qt UI components for the exam application."""

from .dialog_helpers import (
    confirm_submit,
    show_error,
    show_info,
    show_ranking,
)
from .exam_window import ExamWindow
from .login_window import LoginWindow
from .result_renderer import (
    render_missed_word_labels,
    render_ranking_message,
    render_result_message,
)

__all__ = [
    "ExamWindow",
    "LoginWindow",
    "confirm_submit",
    "show_error",
    "show_info",
    "show_ranking",
    "render_missed_word_labels",
    "render_ranking_message",
    "render_result_message",
]
