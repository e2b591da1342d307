"""Radial fill indicator rendered with QPainter.

- Fills clockwise from 12 o'clock as the countdown is consumed.
- Shows the remaining whole seconds in bold at the centre plus a state
  label.
- Colour-coded by clock state, with an animated colour transition.
- Gentle pulse while READY, glow while RUNNING.
"""

from __future__ import annotations

import math

from PyQt6.QtCore import Qt, QRectF, QTimer, QVariantAnimation, QEasingCurve
from PyQt6.QtGui import QPainter, QPen, QColor, QConicalGradient, QFont
from PyQt6.QtWidgets import QWidget

from ..timer.curves import clamp01
from ..timer.engine import ClockState
from .styles import PALETTE, STATE_COLORS, STATE_LABELS


def _lerp_color(c1: QColor, c2: QColor, t: float) -> QColor:
    """Linearly interpolate between two QColors."""
    t = clamp01(t)
    return QColor(
        int(c1.red()   + (c2.red()   - c1.red())   * t),
        int(c1.green() + (c2.green() - c1.green()) * t),
        int(c1.blue()  + (c2.blue()  - c1.blue())  * t),
        int(c1.alpha() + (c2.alpha() - c1.alpha()) * t),
    )


class RadialIndicator(QWidget):
    """Custom-painted circular fill indicator with a digital readout."""

    RING_DIAMETER = 280
    RING_THICKNESS = 16
    GLOW_EXTRA = 6

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setMinimumSize(self.RING_DIAMETER + 40, self.RING_DIAMETER + 40)

        # ── state ──────────────────────────────────────────────────────
        self._fraction: float = 0.0
        self._time_text: str = "0"
        self._clock_state: ClockState = ClockState.READY
        self._state_label: str = STATE_LABELS[ClockState.READY]

        primary, secondary = STATE_COLORS[ClockState.READY]
        self._primary_color = QColor(primary)
        self._secondary_color = QColor(secondary)
        self._old_primary = QColor(primary)
        self._old_secondary = QColor(secondary)
        self._target_primary = QColor(primary)
        self._target_secondary = QColor(secondary)

        self._text_color = QColor(PALETTE["text"])

        # ── color transition animation ─────────────────────────────────
        self._color_anim = QVariantAnimation(self)
        self._color_anim.setDuration(400)
        self._color_anim.setStartValue(0.0)
        self._color_anim.setEndValue(1.0)
        self._color_anim.setEasingCurve(QEasingCurve.Type.InOutQuad)
        self._color_anim.valueChanged.connect(self._on_color_anim)

        # ── pulse (READY) / glow (RUNNING) ─────────────────────────────
        self._phase: float = 0.0
        self._phase_timer = QTimer(self)
        self._phase_timer.setInterval(33)  # ~30 fps
        self._phase_timer.timeout.connect(self._on_phase_tick)
        self._phase_timer.start()

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC API
    # ══════════════════════════════════════════════════════════════════

    @property
    def fraction(self) -> float:
        return self._fraction

    @property
    def time_text(self) -> str:
        return self._time_text

    @property
    def state_label(self) -> str:
        return self._state_label

    def set_fraction(self, fraction: float) -> None:
        """Arc fill, 0..1.  Applied immediately; callers update per frame."""
        fraction = clamp01(fraction)
        if fraction == self._fraction:
            return
        self._fraction = fraction
        self.update()

    def set_time_text(self, text: str) -> None:
        if text == self._time_text:
            return
        self._time_text = text
        self.update()

    def apply_state(self, state: ClockState) -> None:
        """Update colours, label and animations for a new clock state."""
        self._clock_state = state
        self._state_label = STATE_LABELS.get(state, "")

        primary_hex, secondary_hex = STATE_COLORS.get(
            state, STATE_COLORS[ClockState.READY]
        )
        self._old_primary = QColor(self._primary_color)
        self._old_secondary = QColor(self._secondary_color)
        self._target_primary = QColor(primary_hex)
        self._target_secondary = QColor(secondary_hex)
        self._color_anim.stop()
        self._color_anim.start()

        if state in (ClockState.READY, ClockState.RUNNING):
            if not self._phase_timer.isActive():
                self._phase_timer.start()
        else:
            self._phase_timer.stop()
            self._phase = 0.0
        self.update()

    # ══════════════════════════════════════════════════════════════════
    #  ANIMATION SLOTS
    # ══════════════════════════════════════════════════════════════════

    def _on_color_anim(self, value: object) -> None:
        t = float(value)  # type: ignore[arg-type]
        self._primary_color = _lerp_color(self._old_primary, self._target_primary, t)
        self._secondary_color = _lerp_color(self._old_secondary, self._target_secondary, t)
        self.update()

    def _on_phase_tick(self) -> None:
        step = 0.06 if self._clock_state == ClockState.RUNNING else 0.04
        self._phase = (self._phase + step) % (2 * math.pi)
        self.update()

    # ══════════════════════════════════════════════════════════════════
    #  PAINTING
    # ══════════════════════════════════════════════════════════════════

    def paintEvent(self, event) -> None:  # type: ignore[override]
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        w = self.width()
        h = self.height()
        cx, cy = w / 2, h / 2
        diameter = max(100, min(w, h) - 40)
        radius = diameter / 2
        thickness = self.RING_THICKNESS

        ring_rect = QRectF(cx - radius, cy - radius, diameter, diameter)

        # ── background track ─────────────────────────────────────────
        track_color = QColor(self._primary_color)
        track_color.setAlpha(35)
        track_pen = QPen(track_color, thickness, Qt.PenStyle.SolidLine)
        track_pen.setCapStyle(Qt.PenCapStyle.RoundCap)
        painter.setPen(track_pen)
        painter.drawEllipse(ring_rect)

        # ── ready pulse ──────────────────────────────────────────────
        if self._clock_state == ClockState.READY and self._phase > 0:
            glow_color = QColor(self._primary_color)
            glow_color.setAlpha(int(25 + 20 * math.sin(self._phase)))
            glow_pen = QPen(
                glow_color, thickness + 2 + 3 * math.sin(self._phase),
                Qt.PenStyle.SolidLine,
            )
            painter.setPen(glow_pen)
            painter.drawEllipse(ring_rect)

        # ── filled arc ───────────────────────────────────────────────
        if self._fraction > 0.001:
            gradient = QConicalGradient(cx, cy, 90)
            gradient.setColorAt(0.0, self._primary_color)
            gradient.setColorAt(0.5, self._secondary_color)
            gradient.setColorAt(1.0, self._primary_color)

            arc_pen = QPen(gradient, thickness, Qt.PenStyle.SolidLine)
            arc_pen.setCapStyle(Qt.PenCapStyle.RoundCap)
            painter.setPen(arc_pen)

            # Qt arcs: start at 12 o'clock (90*16), go clockwise (negative)
            start_angle = 90 * 16
            span_angle = -int(self._fraction * 360 * 16)
            painter.drawArc(ring_rect, start_angle, span_angle)

            if self._clock_state == ClockState.RUNNING:
                glow_color = QColor(self._primary_color)
                glow_color.setAlpha(int(20 + 15 * math.sin(self._phase)))
                glow_pen = QPen(
                    glow_color, thickness + self.GLOW_EXTRA, Qt.PenStyle.SolidLine,
                )
                glow_pen.setCapStyle(Qt.PenCapStyle.RoundCap)
                painter.setPen(glow_pen)
                painter.drawArc(ring_rect, start_angle, span_angle)

        # ── centre text: remaining seconds ───────────────────────────
        time_font = QFont()
        time_font.setPixelSize(64)
        time_font.setWeight(QFont.Weight.Bold)
        painter.setFont(time_font)
        painter.setPen(self._text_color)

        time_rect = QRectF(ring_rect)
        time_rect.moveTop(time_rect.top() - 14)
        painter.drawText(time_rect, Qt.AlignmentFlag.AlignCenter, self._time_text)

        # ── centre text: state label ─────────────────────────────────
        label_font = QFont()
        label_font.setPixelSize(13)
        label_font.setWeight(QFont.Weight.DemiBold)
        label_font.setLetterSpacing(QFont.SpacingType.AbsoluteSpacing, 3)
        painter.setFont(label_font)

        label_color = QColor(self._primary_color)
        label_color.setAlpha(200)
        painter.setPen(label_color)

        label_rect = QRectF(ring_rect)
        label_rect.moveTop(label_rect.top() + 42)
        painter.drawText(label_rect, Qt.AlignmentFlag.AlignCenter, self._state_label)

        painter.end()
