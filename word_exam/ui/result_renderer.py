"""Text rendering for exam results and the ranking dialog."""

from __future__ import annotations

from collections.abc import Sequence

from word_exam.constants.ui_constants import NOT_ANSWERED_TEXT
from word_exam.core.models import ExamResult, RankingEntry
from word_exam.core.services.ranking_aggregator import format_ranking


def render_result_message(result: ExamResult) -> str:
    """Render the summary shown after an exam is submitted.

    Args:
        result: The submitted session's result

    Returns:
        Plain text with totals followed by an analysis of every missed word
    """
    lines = [
        "Exam complete!",
        "",
        f"Total questions: {result.question_count}",
        f"Correct answers: {result.correct_count}",
        f"Score: {result.score}/{result.total_possible}",
    ]
    if result.missed:
        lines.extend(["", "Missed words:"])
        for missed in result.missed:
            lines.extend(
                [
                    "",
                    f"Word: {missed.word}",
                    f"Correct definition: {missed.correct_definition}",
                    f"Your answer: {missed.selected_definition or NOT_ANSWERED_TEXT}",
                ]
            )
    return "\n".join(lines)


def render_missed_word_labels(result: ExamResult) -> list[str]:
    return [f"{missed.word}: {missed.correct_definition}" for missed in result.missed]


def render_ranking_message(ranking: Sequence[RankingEntry]) -> str:
    return "Exam ranking:\n" + format_ranking(ranking)
