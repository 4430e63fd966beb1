"""Exam-related constants shared across UI, server and core layers."""

DEFAULT_DURATION_MINUTES: int = 15
DEFAULT_QUESTION_COUNT: int = 10
DEFAULT_RANKING_THRESHOLD: int = 3

POINTS_PER_QUESTION: int = 10
OPTIONS_PER_QUESTION: int = 4
TIMER_INTERVAL_SECONDS: float = 1.0

LIBRARY_FILE_ENV: str = "WORD_EXAM_LIBRARY_FILE"
USER_FILE_ENV: str = "WORD_EXAM_USER_FILE"
DURATION_ENV: str = "WORD_EXAM_DURATION_MINUTES"
QUESTION_COUNT_ENV: str = "WORD_EXAM_QUESTION_COUNT"
RANKING_THRESHOLD_ENV: str = "WORD_EXAM_RANKING_THRESHOLD"
