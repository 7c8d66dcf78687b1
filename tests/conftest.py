"""Shared fixtures: a Qt application for widget tests and a manual ticker."""

from __future__ import annotations

import os
from typing import Callable, Optional

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication  # noqa: E402


class FakeTicker:
    """Records start/stop calls; ``fire`` stands in for one timer timeout."""

    def __init__(self) -> None:
        self.callback: Optional[Callable[[], None]] = None
        self.starts = 0
        self.stops = 0

    @property
    def is_active(self) -> bool:
        return self.callback is not None

    def start(self, callback: Callable[[], None]) -> None:
        self.stop()
        self.starts += 1
        self.callback = callback

    def stop(self) -> None:
        if self.callback is not None:
            self.stops += 1
        self.callback = None

    def fire(self, times: int = 1) -> None:
        for _ in range(times):
            if self.callback is not None:
                self.callback()


@pytest.fixture(scope="session")
def qapp() -> QApplication:
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app


@pytest.fixture()
def ticker() -> FakeTicker:
    return FakeTicker()
