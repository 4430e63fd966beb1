"""Helper functions for common dialog patterns in the exam windows."""

from __future__ import annotations

from PySide6.QtWidgets import QMessageBox, QWidget

from word_exam.constants.ui_constants import (
    CONFIRM_SUBMIT_MESSAGE,
    CONFIRM_SUBMIT_TITLE,
    RANKING_TITLE,
)
from word_exam.core.models import RankingEntry
from word_exam.ui.result_renderer import render_ranking_message


def confirm_submit(parent: QWidget) -> bool:
    """Ask the test-taker to confirm submitting the exam.

    Args:
        parent: Parent widget for the dialog

    Returns:
        True if user confirmed, False otherwise
    """
    reply = QMessageBox.question(
        parent,
        CONFIRM_SUBMIT_TITLE,
        CONFIRM_SUBMIT_MESSAGE,
        QMessageBox.Yes | QMessageBox.No,
        QMessageBox.No
    )
    return reply == QMessageBox.Yes


def show_error(parent: QWidget | None, title: str, message: str) -> None:
    """Show error dialog.

    Args:
        parent: Parent widget for the dialog
        title: Dialog title
        message: Error message
    """
    QMessageBox.critical(parent, title, message)


def show_info(parent: QWidget | None, title: str, message: str) -> None:
    """Show information dialog.

    Args:
        parent: Parent widget for the dialog
        title: Dialog title
        message: Information message
    """
    QMessageBox.information(parent, title, message)


def show_ranking(parent: QWidget | None, ranking: list[RankingEntry]) -> None:
    """Show the leaderboard once enough exams have been submitted.

    Args:
        parent: Parent widget for the dialog, or None for a top-level dialog
        ranking: Entries already sorted from highest to lowest score
    """
    show_info(parent, RANKING_TITLE, render_ranking_message(ranking))
