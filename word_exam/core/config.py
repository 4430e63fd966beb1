"""Exam configuration with environment overrides."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import os
from pathlib import Path

from word_exam.constants.exam_constants import (
    DEFAULT_DURATION_MINUTES,
    DEFAULT_QUESTION_COUNT,
    DEFAULT_RANKING_THRESHOLD,
    DURATION_ENV,
    LIBRARY_FILE_ENV,
    QUESTION_COUNT_ENV,
    RANKING_THRESHOLD_ENV,
    USER_FILE_ENV,
)
from word_exam.core.credential_store import DEFAULT_USER_FILE
from word_exam.core.exceptions import InvalidArgumentError
from word_exam.core.word_library import DEFAULT_LIBRARY_PATH


def require_positive_int(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an integer, got {type(value).__name__}.")
    if value <= 0:
        raise InvalidArgumentError(f"{name} must be a positive integer, got {value}.")
    return value


@dataclass(frozen=True, slots=True)
class ExamConfig:
    """Settings applied to every session created by the exam manager."""

    duration_minutes: int = DEFAULT_DURATION_MINUTES
    question_count: int = DEFAULT_QUESTION_COUNT
    ranking_threshold: int = DEFAULT_RANKING_THRESHOLD

    def __post_init__(self) -> None:
        require_positive_int("duration_minutes", self.duration_minutes)
        require_positive_int("question_count", self.question_count)
        require_positive_int("ranking_threshold", self.ranking_threshold)


@dataclass(frozen=True, slots=True)
class DataPaths:
    library_file: Path
    user_file: Path


def load_exam_config(environ: Mapping[str, str] | None = None) -> ExamConfig:
    env = os.environ if environ is None else environ
    return ExamConfig(
        duration_minutes=_read_int(env, DURATION_ENV, DEFAULT_DURATION_MINUTES),
        question_count=_read_int(env, QUESTION_COUNT_ENV, DEFAULT_QUESTION_COUNT),
        ranking_threshold=_read_int(env, RANKING_THRESHOLD_ENV, DEFAULT_RANKING_THRESHOLD),
    )


def load_data_paths(environ: Mapping[str, str] | None = None) -> DataPaths:
    env = os.environ if environ is None else environ
    return DataPaths(
        library_file=Path(env.get(LIBRARY_FILE_ENV) or DEFAULT_LIBRARY_PATH),
        user_file=Path(env.get(USER_FILE_ENV) or DEFAULT_USER_FILE),
    )


def _read_int(env: Mapping[str, str], key: str, default: int) -> int:
    raw_value = env.get(key)
    if raw_value is None or not raw_value.strip():
        return default
    try:
        return int(raw_value.strip())
    except ValueError as exc:
        raise InvalidArgumentError(f"{key} must be an integer, got '{raw_value}'.") from exc
