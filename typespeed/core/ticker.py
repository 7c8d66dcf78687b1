"""Periodic tick driving the session clock."""

from __future__ import annotations

import logging
from typing import Callable, Optional, Protocol

from PySide6.QtCore import QObject, QTimer

logger = logging.getLogger(__name__)

# Each timeout adds one second to the session clock.
TICK_INTERVAL_MS = 1000


class Ticker(Protocol):
    """A repeating callback that can be started and cancelled."""

    @property
    def is_active(self) -> bool: ...

    def start(self, callback: Callable[[], None]) -> None: ...

    def stop(self) -> None: ...


class QtTicker:
    """Ticker backed by a ``QTimer`` on the Qt event loop.

    ``start`` cancels any running timer first, so at most one callback is ever
    connected. ``stop`` returns only after the timer is stopped and the callback
    disconnected; no further calls are delivered after that.
    """

    def __init__(self, interval_ms: int = TICK_INTERVAL_MS, parent: Optional[QObject] = None) -> None:
        self._timer = QTimer(parent)
        self._timer.setInterval(interval_ms)
        self._callback: Optional[Callable[[], None]] = None
        self._timer.timeout.connect(self._on_timeout)

    @property
    def interval_ms(self) -> int:
        return self._timer.interval()

    @property
    def is_active(self) -> bool:
        return self._timer.isActive()

    def start(self, callback: Callable[[], None]) -> None:
        self.stop()
        self._callback = callback
        self._timer.start()
        logger.debug("Ticker started (%d ms)", self._timer.interval())

    def stop(self) -> None:
        if self._timer.isActive():
            self._timer.stop()
            logger.debug("Ticker stopped")
        self._callback = None

    def _on_timeout(self) -> None:
        if self._callback is not None:
            self._callback()
