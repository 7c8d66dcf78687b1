"""Splitting pasted text into practice sentences."""

from __future__ import annotations

import logging
import re
from typing import List

logger = logging.getLogger(__name__)

# A run of non-terminators followed by one or more terminators. Trailing text
# without a terminator never matches and is dropped.
SENTENCE_PATTERN = re.compile(r"[^.!?]+[.!?]+")


def split_sentences(raw: str) -> List[str]:
    """Return the trimmed sentences found in *raw*, in order."""
    if not raw:
        return []
    return [match.group(0).strip() for match in SENTENCE_PATTERN.finditer(raw)]


class TextBuffer:
    """Holds the raw pasted text until it is submitted."""

    def __init__(self, text: str = "") -> None:
        self._text = text

    @property
    def text(self) -> str:
        return self._text

    def set_text(self, text: str) -> None:
        self._text = text

    def clear(self) -> None:
        self._text = ""

    def submit(self) -> List[str]:
        """Split the buffered text; the buffer is cleared only when something was found."""
        sentences = split_sentences(self._text)
        if sentences:
            logger.debug("Split %d characters into %d sentences", len(self._text), len(sentences))
            self.clear()
        return sentences
