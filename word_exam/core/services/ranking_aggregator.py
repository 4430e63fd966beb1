"""Shared ranking of completed exam scores."""

from __future__ import annotations

from collections.abc import Callable, Sequence
import logging
from threading import Lock

from word_exam.constants.exam_constants import DEFAULT_RANKING_THRESHOLD
from word_exam.core.config import require_positive_int
from word_exam.core.models import RankingEntry

logger = logging.getLogger(__name__)

RankingListener = Callable[[list[RankingEntry]], None]


def rank_entries(entries: Sequence[RankingEntry]) -> list[RankingEntry]:
    """Sort by score, highest first; equal scores keep completion order."""
    return sorted(entries, key=lambda entry: -entry.score)


def format_ranking(rows: Sequence[RankingEntry]) -> str:
    return "\n".join(f"{rank}. {row.username}: {row.score}" for rank, row in enumerate(rows, start=1))


class RankingAggregator:
    """Collects scores from every session and announces the ranking once.

    ``add_score`` appends and checks the threshold under one lock, so exactly
    one caller observes the crossing no matter how many sessions finish at the
    same time. That caller notifies the listeners after releasing the lock.
    """

    def __init__(self, threshold: int = DEFAULT_RANKING_THRESHOLD) -> None:
        self._threshold = require_positive_int("ranking_threshold", threshold)
        self._lock = Lock()
        self._entries: list[RankingEntry] = []
        self._triggered = False
        self._listeners: list[RankingListener] = []

    @property
    def threshold(self) -> int:
        return self._threshold

    @property
    def has_triggered(self) -> bool:
        with self._lock:
            return self._triggered

    def add_listener(self, listener: RankingListener) -> None:
        with self._lock:
            self._listeners.append(listener)

    def remove_listener(self, listener: RankingListener) -> None:
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    def add_score(self, username: str, score: int) -> RankingEntry:
        entry = RankingEntry(username=username, score=score)
        with self._lock:
            self._entries.append(entry)
            crossed = not self._triggered and len(self._entries) == self._threshold
            if crossed:
                self._triggered = True
                ranking = rank_entries(self._entries)
                listeners = list(self._listeners)

        logger.info("Recorded score %d for %s", score, username)
        if crossed:
            logger.info("Ranking threshold of %d reached", self._threshold)
            for listener in listeners:
                try:
                    listener(list(ranking))
                except Exception:
                    logger.exception("Ranking listener %r failed", listener)
        return entry

    def entries(self) -> list[RankingEntry]:
        """Entries in completion order."""
        with self._lock:
            return list(self._entries)

    def ranking(self) -> list[RankingEntry]:
        with self._lock:
            return rank_entries(self._entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
