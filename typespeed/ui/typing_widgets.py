"""Typing practice UI: highlighted sentence and opacity slider."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QLabel, QSlider, QVBoxLayout, QWidget

from typespeed.ui.colors import DarkColors
from typespeed.ui.highlight import render_sentence_html


class SentenceDisplay(QLabel):
    """Rich-text label showing the target sentence coloured against the input."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._target = ""
        self._typed = ""
        self._opacity = 40
        self.setTextFormat(Qt.RichText)
        self.setWordWrap(True)
        self.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.setStyleSheet(f"QLabel {{ color: {DarkColors.TEXT}; background: transparent; }}")

    def set_sentence(self, target: str, typed: str, opacity: int) -> None:
        """Re-render only when something visible changed."""
        if (target, typed, opacity) == (self._target, self._typed, self._opacity):
            return
        self._target = target
        self._typed = typed
        self._opacity = opacity
        self.setText(render_sentence_html(target, typed, opacity))


class OpacitySlider(QWidget):
    """Labelled 0-100 slider for the opacity of text not yet typed."""

    valueChanged = Signal(int)

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(6)

        self._label = QLabel(self)
        self._label.setStyleSheet(f"color: {DarkColors.TEXT}; font-size: 12px;")
        self._slider = QSlider(Qt.Horizontal, self)
        self._slider.setRange(0, 100)
        self._slider.setSingleStep(1)
        self._slider.valueChanged.connect(self._on_value_changed)

        layout.addWidget(self._label)
        layout.addWidget(self._slider)
        self._update_label(self._slider.value())

    def value(self) -> int:
        return self._slider.value()

    def set_value(self, value: int) -> None:
        """Move the slider without emitting ``valueChanged``."""
        if self._slider.value() == value:
            return
        self._slider.blockSignals(True)
        self._slider.setValue(value)
        self._slider.blockSignals(False)
        self._update_label(value)

    def _on_value_changed(self, value: int) -> None:
        self._update_label(value)
        self.valueChanged.emit(value)

    def _update_label(self, value: int) -> None:
        self._label.setText(f"Text Opacity: {value}%")
