from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QCloseEvent, QFont, QShortcut
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QPlainTextEdit,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from typespeed.core.config import Settings
from typespeed.core.session import SessionController, SessionSnapshot, SessionState
from typespeed.ui.colors import DarkColors
from typespeed.ui.typing_widgets import OpacitySlider, SentenceDisplay


class MainWindow(QMainWindow):
    """Single-window typing practice: paste text, retype it, see the result.

    The window never holds session state of its own. Widget events are
    forwarded to the :class:`SessionController`, and every snapshot the
    controller publishes is rendered by :meth:`_render`.
    """

    def __init__(self, controller: SessionController, settings: Settings) -> None:
        super().__init__()
        self._controller = controller
        self._settings = settings
        self._last_index: Optional[int] = None

        self._stack: Optional[QStackedWidget] = None
        self._paste_screen: Optional[QWidget] = None
        self._typing_screen: Optional[QWidget] = None
        self._results_screen: Optional[QWidget] = None

        self._paste_edit: Optional[QPlainTextEdit] = None
        self._paste_status_label: Optional[QLabel] = None
        self._sentence_display: Optional[SentenceDisplay] = None
        self.input_box: Optional[QLineEdit] = None
        self._opacity_slider: Optional[OpacitySlider] = None
        self._skip_button: Optional[QPushButton] = None
        self._exit_practice_button: Optional[QPushButton] = None
        self._progress_label: Optional[QLabel] = None
        self._live_wpm_label: Optional[QLabel] = None
        self._wpm_result_label: Optional[QLabel] = None
        self._accuracy_result_label: Optional[QLabel] = None

        self.setWindowTitle(settings.window_title)
        self._build_ui()
        self._controller.add_listener(self._render)
        self._render(self._controller.snapshot())

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def _build_ui(self) -> None:
        root = QWidget(self)
        root.setObjectName("root")
        root.setStyleSheet(
            f"""
            QWidget#root {{ background: {DarkColors.BG}; }}
            QLabel {{ color: {DarkColors.TEXT}; }}
            QPlainTextEdit, QLineEdit {{
                background: {DarkColors.SURFACE};
                color: {DarkColors.TEXT_BRIGHT};
                border: 1px solid {DarkColors.BORDER};
                border-radius: 4px;
                padding: 8px;
            }}
            QPushButton {{
                background: {DarkColors.PRIMARY};
                color: {DarkColors.TEXT_BRIGHT};
                font-weight: bold;
                border: none;
                border-radius: 4px;
                padding: 8px 16px;
            }}
            QPushButton:hover {{ background: {DarkColors.PRIMARY_DARK}; }}
            """
        )
        outer = QVBoxLayout(root)
        outer.setContentsMargins(24, 24, 24, 24)

        title = QLabel(self._settings.window_title, root)
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet("font-size: 24px; font-weight: bold;")
        outer.addStretch(1)
        outer.addWidget(title)
        outer.addSpacing(24)

        self._stack = QStackedWidget(root)
        self._stack.setMinimumWidth(560)
        self._stack.setMaximumWidth(720)
        self._paste_screen = self._build_paste_screen()
        self._typing_screen = self._build_typing_screen()
        self._results_screen = self._build_results_screen()
        for screen in (self._paste_screen, self._typing_screen, self._results_screen):
            self._stack.addWidget(screen)
        outer.addWidget(self._stack, 0, Qt.AlignHCenter)
        outer.addStretch(1)

        self.setCentralWidget(root)
        self.resize(900, 600)

        self.submit_shortcut = QShortcut(Qt.CTRL | Qt.Key_Return, self)
        self.submit_shortcut.activated.connect(self._submit_text)

    def _monospace_font(self) -> QFont:
        font = QFont("monospace")
        font.setStyleHint(QFont.Monospace)
        font.setPointSize(self._settings.font_point_size)
        return font

    def _build_paste_screen(self) -> QWidget:
        screen = QWidget()
        layout = QVBoxLayout(screen)
        layout.setContentsMargins(0, 0, 0, 0)

        self._paste_edit = QPlainTextEdit(screen)
        self._paste_edit.setPlaceholderText("Paste your text here...")
        self._paste_edit.setFont(self._monospace_font())
        self._paste_edit.textChanged.connect(self._on_paste_text_changed)
        layout.addWidget(self._paste_edit)

        self._paste_status_label = QLabel("", screen)
        self._paste_status_label.setStyleSheet(f"color: {DarkColors.ERROR};")
        self._paste_status_label.setVisible(False)
        layout.addWidget(self._paste_status_label)

        submit = QPushButton("Submit Text", screen)
        submit.clicked.connect(self._submit_text)
        layout.addWidget(submit, 0, Qt.AlignLeft)
        return screen

    def _build_typing_screen(self) -> QWidget:
        screen = QWidget()
        layout = QVBoxLayout(screen)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(16)

        self._progress_label = QLabel("", screen)
        self._progress_label.setStyleSheet(f"color: {DarkColors.TEXT_MUTED}; font-size: 12px;")
        layout.addWidget(self._progress_label)

        self._sentence_display = SentenceDisplay(screen)
        self._sentence_display.setFont(self._monospace_font())
        layout.addWidget(self._sentence_display)

        self.input_box = QLineEdit(screen)
        self.input_box.setFont(self._monospace_font())
        # textEdited fires for user edits only, so rendering a snapshot never loops back.
        self.input_box.textEdited.connect(self._controller.keystroke)
        layout.addWidget(self.input_box)

        self._opacity_slider = OpacitySlider(screen)
        self._opacity_slider.valueChanged.connect(self._controller.set_opacity)
        layout.addWidget(self._opacity_slider)

        buttons = QHBoxLayout()
        self._skip_button = QPushButton("Skip to Next Sentence", screen)
        self._skip_button.clicked.connect(self._controller.skip)
        self._exit_practice_button = QPushButton("Exit Practice Mode", screen)
        self._exit_practice_button.clicked.connect(self._controller.reset)
        buttons.addWidget(self._skip_button)
        buttons.addWidget(self._exit_practice_button)
        buttons.addStretch(1)
        layout.addLayout(buttons)

        self._live_wpm_label = QLabel("", screen)
        self._live_wpm_label.setTextFormat(Qt.RichText)
        self._live_wpm_label.setStyleSheet("font-size: 18px;")
        layout.addWidget(self._live_wpm_label)
        return screen

    def _build_results_screen(self) -> QWidget:
        screen = QWidget()
        layout = QVBoxLayout(screen)
        layout.setContentsMargins(0, 0, 0, 0)

        card = QFrame(screen)
        card.setObjectName("resultsCard")
        card.setStyleSheet(
            f"""
            QFrame#resultsCard {{
                background: {DarkColors.SURFACE};
                border: 1px solid {DarkColors.BORDER};
                border-radius: 8px;
            }}
            """
        )
        card_layout = QVBoxLayout(card)
        card_layout.setContentsMargins(16, 16, 16, 16)
        heading = QLabel("Typing completed!", card)
        heading.setStyleSheet(f"color: {DarkColors.SUCCESS}; font-size: 18px; font-weight: bold;")
        self._wpm_result_label = QLabel("", card)
        self._accuracy_result_label = QLabel("", card)
        card_layout.addWidget(heading)
        card_layout.addWidget(self._wpm_result_label)
        card_layout.addWidget(self._accuracy_result_label)
        layout.addWidget(card)

        try_again = QPushButton("Try Again", screen)
        try_again.clicked.connect(self._controller.reset)
        layout.addWidget(try_again, 0, Qt.AlignLeft)
        return screen

    # ------------------------------------------------------------------
    # Events forwarded to the controller
    # ------------------------------------------------------------------

    def _on_paste_text_changed(self) -> None:
        if self._paste_edit is not None:
            self._controller.set_source_text(self._paste_edit.toPlainText())

    def _submit_text(self) -> None:
        if self._stack is None or self._stack.currentWidget() is not self._paste_screen:
            return
        sentences = self._controller.submit_text()
        if not sentences and self._paste_status_label is not None:
            self._paste_status_label.setText("No sentences found. End each sentence with . ! or ?")
            self._paste_status_label.setVisible(True)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _render(self, snap: SessionSnapshot) -> None:
        """Bring every widget in line with *snap*."""
        if self._paste_edit.toPlainText() != snap.source_text:
            self._paste_edit.blockSignals(True)
            self._paste_edit.setPlainText(snap.source_text)
            self._paste_edit.blockSignals(False)
        if snap.state is SessionState.IDLE:
            self._render_paste_screen(snap)
        elif snap.state is SessionState.COMPLETED:
            self._render_results_screen(snap)
        else:
            self._render_typing_screen(snap)

    def _render_paste_screen(self, snap: SessionSnapshot) -> None:
        self._stack.setCurrentWidget(self._paste_screen)
        self._last_index = None

    def _render_typing_screen(self, snap: SessionSnapshot) -> None:
        if self._stack.currentWidget() is not self._typing_screen:
            self._stack.setCurrentWidget(self._typing_screen)
            if self._paste_status_label is not None:
                self._paste_status_label.setVisible(False)

        self._sentence_display.set_sentence(snap.current_sentence, snap.typed_input, snap.text_opacity)
        if self.input_box.text() != snap.typed_input:
            self.input_box.setText(snap.typed_input)
        self._opacity_slider.set_value(snap.text_opacity)
        self._exit_practice_button.setVisible(snap.practice_mode)

        mode = "  (practice mode)" if snap.practice_mode else ""
        self._progress_label.setText(
            f"Sentence {snap.current_index + 1} of {len(snap.sentences)}{mode}"
        )
        self._live_wpm_label.setText(f"Live WPM: <b>{snap.live_wpm}</b>")

        if snap.current_index != self._last_index:
            self._last_index = snap.current_index
            # Defer so focus lands after the stack switch has been processed.
            QTimer.singleShot(0, self.input_box.setFocus)

    def _render_results_screen(self, snap: SessionSnapshot) -> None:
        self._stack.setCurrentWidget(self._results_screen)
        stats = snap.final_stats
        if stats is not None:
            self._wpm_result_label.setText(f"Words per minute: {stats.words_per_minute}")
            self._accuracy_result_label.setText(f"Accuracy: {stats.accuracy}%")
        self._last_index = None

    def closeEvent(self, event: QCloseEvent) -> None:
        """Stop the session clock before the window goes away."""
        self._controller.remove_listener(self._render)
        self._controller.close()
        super().closeEvent(event)
