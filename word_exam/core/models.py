"""Domain models for the word exam."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class SessionStatus(Enum):
    """Lifecycle of a single exam attempt."""

    IN_PROGRESS = "in_progress"
    SUBMITTED = "submitted"


@dataclass(frozen=True, slots=True)
class WordEntry:
    """A vocabulary word and its definition."""

    word: str
    definition: str


@dataclass(frozen=True, slots=True)
class OptionSet:
    """Multiple-choice definitions for one word; exactly one is correct."""

    word: str
    options: tuple[str, ...]
    correct_index: int

    @property
    def correct_definition(self) -> str:
        return self.options[self.correct_index]


@dataclass(frozen=True, slots=True)
class QuestionView:
    """Snapshot handed to the presentation layer when the question changes."""

    word: str
    options: tuple[str, ...]
    selected_index: int | None
    position: int  # zero-based
    total: int

    @property
    def is_first(self) -> bool:
        return self.position == 0

    @property
    def is_last(self) -> bool:
        return self.position == self.total - 1


@dataclass(frozen=True, slots=True)
class MissedWord:
    """A question answered wrongly or left unanswered."""

    word: str
    correct_definition: str
    selected_definition: str | None = None

    @property
    def was_answered(self) -> bool:
        return self.selected_definition is not None


@dataclass(frozen=True, slots=True)
class ExamResult:
    """Final outcome of a submitted session."""

    username: str
    score: int
    total_possible: int
    correct_count: int
    question_count: int
    missed: tuple[MissedWord, ...] = ()
    auto_submitted: bool = False
    submitted_at: datetime = field(default_factory=datetime.now)


@dataclass(frozen=True, slots=True)
class RankingEntry:
    """Score reported by one completed session."""

    username: str
    score: int
