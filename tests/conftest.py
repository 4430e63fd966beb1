"""Shared fixtures for the exam test suite."""

from __future__ import annotations

from datetime import datetime, timedelta
import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class FakeClock:
    """Manually advanced replacement for ``datetime.now``."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2024, 1, 1, 9, 0, 0)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def small_library() -> dict[str, str]:
    return {
        "cat": "a small domesticated feline",
        "dog": "a domesticated canine",
        "sun": "the star at the centre of the solar system",
        "moon": "the natural satellite of the earth",
    }


@pytest.fixture
def qt_app():
    from PySide6.QtCore import QCoreApplication

    app = QCoreApplication.instance() or QCoreApplication([])
    yield app
