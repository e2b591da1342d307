"""Main clock card.

Layout (top → bottom):
    - RadialIndicator (large, centred, digital readout inside)
    - Duration row: −10  −1  [seconds input]  +1  +10
    - Start / Pause button and Reset

The widget is also the engine's display and input-field sink: it has no
reference to the engine and only emits requests.
"""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout,
    QLabel, QPushButton, QLineEdit, QFrame, QSizePolicy,
)

from ..timer.engine import ClockState
from .radial_indicator import RadialIndicator


BUTTON_LABELS: dict[ClockState, str] = {
    ClockState.READY:   "Start",
    ClockState.RUNNING: "Pause",
    ClockState.PAUSED:  "Resume",
    ClockState.ENDED:   "Again",
}


class ClockWidget(QWidget):
    """Indicator, duration controls and the start/pause toggle."""

    toggle_requested = pyqtSignal()
    reset_requested = pyqtSignal()
    duration_text_entered = pyqtSignal(str)
    adjust_requested = pyqtSignal(float)

    def __init__(
        self,
        parent: QWidget | None = None,
        *,
        small_step: float = 1.0,
        large_step: float = 10.0,
    ) -> None:
        super().__init__(parent)
        self._small_step = small_step
        self._large_step = large_step
        self._build_ui()
        self._connect_signals()
        self.apply_state(ClockState.READY)

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)

        card = QFrame(self)
        card.setObjectName("card")
        root.addWidget(card)

        layout = QVBoxLayout(card)
        layout.setContentsMargins(24, 20, 24, 24)
        layout.setSpacing(12)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        # ── indicator ────────────────────────────────────────────────
        ring_row = QHBoxLayout()
        ring_row.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._indicator = RadialIndicator(card)
        self._indicator.setSizePolicy(
            QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed,
        )
        self._indicator.setFixedSize(320, 320)
        ring_row.addWidget(self._indicator)
        layout.addLayout(ring_row)

        # ── duration row ─────────────────────────────────────────────
        duration_row = QHBoxLayout()
        duration_row.setSpacing(6)
        duration_row.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._minus_large_btn = QPushButton(f"−{self._large_step:g}", card)
        self._minus_small_btn = QPushButton(f"−{self._small_step:g}", card)

        self._duration_input = QLineEdit(card)
        self._duration_input.setObjectName("durationInput")
        self._duration_input.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._duration_input.setFixedWidth(90)
        self._duration_input.setMaxLength(7)
        self._duration_input.setPlaceholderText("sec")

        self._plus_small_btn = QPushButton(f"+{self._small_step:g}", card)
        self._plus_large_btn = QPushButton(f"+{self._large_step:g}", card)

        for w in (
            self._minus_large_btn, self._minus_small_btn,
            self._duration_input,
            self._plus_small_btn, self._plus_large_btn,
        ):
            duration_row.addWidget(w)
        layout.addLayout(duration_row)

        hint = QLabel("seconds · Space to start/pause · Esc to quit", card)
        hint.setObjectName("mutedLabel")
        hint.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(hint)

        # ── main controls ────────────────────────────────────────────
        btn_row = QHBoxLayout()
        btn_row.setSpacing(12)
        btn_row.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._reset_btn = QPushButton("Reset", card)
        self._toggle_btn = QPushButton("Start", card)
        self._toggle_btn.setObjectName("primaryButton")

        btn_row.addWidget(self._reset_btn)
        btn_row.addWidget(self._toggle_btn)
        layout.addLayout(btn_row)

        # Space belongs to the window shortcut, not the focused button.
        for btn in (
            self._toggle_btn, self._reset_btn,
            self._minus_large_btn, self._minus_small_btn,
            self._plus_small_btn, self._plus_large_btn,
        ):
            btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)

    def _connect_signals(self) -> None:
        self._toggle_btn.clicked.connect(lambda: self.toggle_requested.emit())
        self._reset_btn.clicked.connect(lambda: self.reset_requested.emit())
        self._duration_input.editingFinished.connect(self._on_editing_finished)
        self._minus_large_btn.clicked.connect(
            lambda: self.adjust_requested.emit(-self._large_step)
        )
        self._minus_small_btn.clicked.connect(
            lambda: self.adjust_requested.emit(-self._small_step)
        )
        self._plus_small_btn.clicked.connect(
            lambda: self.adjust_requested.emit(self._small_step)
        )
        self._plus_large_btn.clicked.connect(
            lambda: self.adjust_requested.emit(self._large_step)
        )

    # ── display sink ──────────────────────────────────────────────────────

    def set_remaining_time_text(self, text: str) -> None:
        self._indicator.set_time_text(text)

    def set_indicator_fraction(self, fraction: float) -> None:
        self._indicator.set_fraction(fraction)

    # ── input-field sink ──────────────────────────────────────────────────

    def set_queued_duration_text(self, text: str) -> None:
        self._duration_input.setText(text)

    def current_input_text(self) -> str:
        return self._duration_input.text()

    # ── state ─────────────────────────────────────────────────────────────

    @property
    def indicator(self) -> RadialIndicator:
        return self._indicator

    @property
    def duration_input(self) -> QLineEdit:
        return self._duration_input

    def apply_state(self, state: ClockState) -> None:
        self._toggle_btn.setText(BUTTON_LABELS[state])
        self._reset_btn.setEnabled(state != ClockState.READY)
        self._indicator.apply_state(state)

    def _on_editing_finished(self) -> None:
        self.duration_text_entered.emit(self._duration_input.text())
        self._duration_input.clearFocus()
