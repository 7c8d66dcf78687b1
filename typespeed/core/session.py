from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Tuple

from typespeed.core.config import Settings
from typespeed.core.scoring import FinalStats, count_mistakes, count_words, final_stats, live_wpm
from typespeed.core.sentences import TextBuffer
from typespeed.core.ticker import QtTicker, Ticker

logger = logging.getLogger(__name__)


class SessionState(Enum):
    IDLE = "idle"
    AWAITING_INPUT = "awaiting_input"
    RUNNING = "running"
    COMPLETED = "completed"


@dataclass
class Session:
    """Mutable state of one typing run over a fixed list of sentences."""

    sentences: List[str] = field(default_factory=list)
    current_index: int = 0
    typed_input: str = ""
    started_at: Optional[float] = None
    elapsed_seconds: int = 0
    mistake_count: int = 0
    total_words_typed: int = 0
    completed: bool = False
    practice_mode: bool = False
    text_opacity: int = 40

    @property
    def current_sentence(self) -> str:
        """Sentence being typed, or "" when the index is out of range."""
        if 0 <= self.current_index < len(self.sentences):
            return self.sentences[self.current_index]
        return ""

    @property
    def state(self) -> SessionState:
        if not self.sentences:
            return SessionState.IDLE
        if self.completed:
            return SessionState.COMPLETED
        if self.started_at is None:
            return SessionState.AWAITING_INPUT
        return SessionState.RUNNING

    def reset_progress(self, text_opacity: int) -> None:
        """Restore every field except ``sentences`` to its initial value."""
        self.current_index = 0
        self.typed_input = ""
        self.started_at = None
        self.elapsed_seconds = 0
        self.mistake_count = 0
        self.total_words_typed = 0
        self.completed = False
        self.practice_mode = False
        self.text_opacity = text_opacity


@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only view of the session handed to the presentation layer."""

    state: SessionState
    source_text: str
    sentences: Tuple[str, ...]
    current_index: int
    current_sentence: str
    typed_input: str
    elapsed_seconds: int
    mistake_count: int
    total_words_typed: int
    completed: bool
    practice_mode: bool
    text_opacity: int
    live_wpm: int
    final_stats: Optional[FinalStats] = None


Listener = Callable[[SessionSnapshot], None]


class SessionController:
    """Owns the typing session and handles every event the UI forwards.

    Each handler mutates the session synchronously, then notifies listeners
    with a fresh :class:`SessionSnapshot`. The ticker is started on the first
    non-empty keystroke and stopped on completion, reset, a new submission or
    :meth:`close`.
    """

    def __init__(
        self,
        ticker: Optional[Ticker] = None,
        settings: Optional[Settings] = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._settings = settings if settings is not None else Settings()
        self._ticker = ticker if ticker is not None else QtTicker()
        self._clock = clock
        self._buffer = TextBuffer()
        self._session = Session(text_opacity=self._settings.default_opacity)
        self._listeners: List[Listener] = []

    def __enter__(self) -> "SessionController":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def state(self) -> SessionState:
        return self._session.state

    @property
    def source_text(self) -> str:
        return self._buffer.text

    @property
    def ticker(self) -> Ticker:
        return self._ticker

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------

    def add_listener(self, listener: Listener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self) -> None:
        if not self._listeners:
            return
        snap = self.snapshot()
        for listener in list(self._listeners):
            listener(snap)

    # ------------------------------------------------------------------
    # Text ingestion
    # ------------------------------------------------------------------

    def set_source_text(self, raw: str) -> None:
        """Replace the paste buffer without submitting it."""
        self._buffer.set_text(raw)

    def submit_text(self, raw: Optional[str] = None) -> List[str]:
        """Split *raw* (or the paste buffer) into sentences and start a fresh run.

        Returns the sentences. With no sentence found nothing changes: the
        buffer keeps its text and the session stays where it was.
        """
        if raw is not None:
            self._buffer.set_text(raw)
        sentences = self._buffer.submit()
        if not sentences:
            logger.warning("Submitted text has no sentence terminators; nothing to type")
            return []

        self._ticker.stop()
        self._session.sentences = sentences
        self._session.reset_progress(self._settings.default_opacity)
        logger.info("Loaded %d sentences", len(sentences))
        self._notify()
        return list(sentences)

    # ------------------------------------------------------------------
    # Typing
    # ------------------------------------------------------------------

    def keystroke(self, value: str) -> None:
        """Handle the full contents of the input box after a keystroke."""
        s = self._session
        state = s.state
        if state in (SessionState.IDLE, SessionState.COMPLETED):
            logger.debug("Ignoring keystroke while %s", state.value)
            return

        s.typed_input = value

        if s.started_at is None and value:
            s.started_at = self._clock()
            s.elapsed_seconds = 0
            self._ticker.start(self.tick)
            logger.info("Session started")

        s.total_words_typed = count_words(value)

        target = s.current_sentence.strip()
        typed = value.strip()
        if typed == target:
            s.mistake_count += count_mistakes(typed, target)
            s.typed_input = ""
            logger.debug("Sentence %d of %d typed", s.current_index + 1, len(s.sentences))

            if not s.practice_mode:
                s.current_index += 1
                if s.current_index >= len(s.sentences):
                    self._ticker.stop()
                    s.completed = True
                    logger.info(
                        "Session completed in %ds with %d mistakes",
                        s.elapsed_seconds,
                        s.mistake_count,
                    )

        self._notify()

    def skip(self) -> None:
        """Move to the next sentence (wrapping) and switch to practice mode."""
        s = self._session
        if not s.sentences:
            logger.warning("Skip requested with no sentences loaded")
            return
        if s.completed:
            logger.debug("Ignoring skip after completion")
            return

        s.current_index = (s.current_index + 1) % len(s.sentences)
        s.typed_input = ""
        if not s.practice_mode:
            logger.info("Entering practice mode")
        s.practice_mode = True
        self._notify()

    def reset(self) -> None:
        """Restart from the first sentence, keeping the loaded text."""
        self._ticker.stop()
        self._session.reset_progress(self._settings.default_opacity)
        logger.info("Session reset")
        self._notify()

    def set_opacity(self, value: int) -> None:
        self._session.text_opacity = max(0, min(100, int(value)))
        self._notify()

    def tick(self) -> None:
        """Advance the clock by one second while the session is running."""
        s = self._session
        if s.started_at is None or s.completed:
            return
        s.elapsed_seconds += 1
        self._notify()

    def close(self) -> None:
        """Stop the ticker; safe to call more than once."""
        self._ticker.stop()

    # ------------------------------------------------------------------
    # Scores
    # ------------------------------------------------------------------

    def live_wpm(self) -> int:
        s = self._session
        return live_wpm(s.total_words_typed, s.elapsed_seconds)

    def final_stats(self) -> FinalStats:
        s = self._session
        return final_stats(s.total_words_typed, s.elapsed_seconds, s.mistake_count, s.sentences)

    def snapshot(self) -> SessionSnapshot:
        s = self._session
        return SessionSnapshot(
            state=s.state,
            source_text=self._buffer.text,
            sentences=tuple(s.sentences),
            current_index=s.current_index,
            current_sentence=s.current_sentence,
            typed_input=s.typed_input,
            elapsed_seconds=s.elapsed_seconds,
            mistake_count=s.mistake_count,
            total_words_typed=s.total_words_typed,
            completed=s.completed,
            practice_mode=s.practice_mode,
            text_opacity=s.text_opacity,
            live_wpm=self.live_wpm(),
            final_stats=self.final_stats() if s.completed else None,
        )
