"""Countdown state machine for RadialClock.

States
------
READY     Waiting for the user; duration edits apply immediately.
RUNNING   Counting down; the ticking sound plays and ramps up in pitch.
PAUSED    Frozen mid-run; audio stopped.
ENDED     Time is up; the gong has played.

Transitions
-----------
READY   → RUNNING   (advance)
RUNNING → PAUSED    (advance)
PAUSED  → RUNNING   (advance)
RUNNING → ENDED     (tick reaches the full duration)
ENDED   → READY     (advance, via reset)
Any     → READY     (reset)

The engine is driven from outside: the host calls ``tick(delta)`` once
per rendered frame with the real time elapsed since the previous frame.
Side effects go to the display, input-field and audio sinks passed in
at construction (see ``sinks.py``).
"""

from __future__ import annotations

import logging
from enum import Enum

from PyQt6.QtCore import QObject, pyqtSignal

from .curves import (
    MAX_DURATION,
    MIN_DURATION,
    NEUTRAL_PITCH,
    clamp,
    clamp01,
    format_seconds,
    parse_duration_text,
    pitch_for,
    pitch_onset_fraction,
)
from .sinks import AudioClip, AudioSink, DisplaySink, InputFieldSink

logger = logging.getLogger(__name__)


# ── enums ─────────────────────────────────────────────────────────────────


class ClockState(Enum):
    READY = "ready"
    RUNNING = "running"
    PAUSED = "paused"
    ENDED = "ended"


# ── constants ─────────────────────────────────────────────────────────────

DEFAULT_DURATION = 90.0      # seconds
DEFAULT_WARN_WINDOW = 20.0   # seconds left when the pitch ramp starts
FALLBACK_DURATION = 1.0      # applied when the queued duration is 0

# Accumulating delta/duration every frame drifts by a few ULPs.
_COMPLETION_EPSILON = 1e-9


# ── engine ────────────────────────────────────────────────────────────────


class ClockEngine(QObject):
    """Single countdown with a fill indicator and a pitch-ramped tick.

    Signals
    -------
    state_changed(new_state: ClockState)
        Emitted on every state transition (and on every reset).
    time_up()
        Emitted exactly once per run, when the countdown completes.
    """

    state_changed = pyqtSignal(object)
    time_up = pyqtSignal()

    def __init__(
        self,
        display: DisplaySink,
        input_field: InputFieldSink,
        audio: AudioSink,
        parent: QObject | None = None,
        *,
        duration: float = DEFAULT_DURATION,
        warn_window: float = DEFAULT_WARN_WINDOW,
        max_indicator: float = 1.0,
    ) -> None:
        super().__init__(parent)

        # ── collaborators ─────────────────────────────────────────────
        self._display = display
        self._input = input_field
        self._audio = audio

        # ── configuration ─────────────────────────────────────────────
        self._warn_window: float = max(0.0, warn_window)
        self._max_indicator: float = clamp01(max_indicator)

        # ── session state ─────────────────────────────────────────────
        self._state: ClockState = ClockState.READY
        self._queued_duration: float = clamp(duration, MIN_DURATION, MAX_DURATION)
        self._duration: float = self._queued_duration or FALLBACK_DURATION
        self._elapsed: float = 0.0
        self._onset: float = pitch_onset_fraction(self._duration, self._warn_window)
        self._pitch: float = NEUTRAL_PITCH

        self._input.set_queued_duration_text(format_seconds(self._queued_duration))
        self.reset()

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def state(self) -> ClockState:
        return self._state

    @property
    def duration(self) -> float:
        """Length of the current run in seconds (never below 1)."""
        return self._duration

    @property
    def queued_duration(self) -> float:
        """Duration the next reset will apply.  May be 0."""
        return self._queued_duration

    @property
    def elapsed_fraction(self) -> float:
        """0.0 → 1.0 progress through the current run."""
        return self._elapsed

    @property
    def remaining_seconds(self) -> float:
        return max(0.0, (1.0 - self._elapsed) * self._duration)

    @property
    def pitch_onset_fraction(self) -> float:
        return self._onset

    @property
    def pitch(self) -> float:
        """Last pitch pushed to the audio sink."""
        return self._pitch

    @property
    def warn_window(self) -> float:
        return self._warn_window

    @property
    def max_indicator(self) -> float:
        return self._max_indicator

    @max_indicator.setter
    def max_indicator(self, value: float) -> None:
        self._max_indicator = clamp01(value)

    @property
    def is_running(self) -> bool:
        return self._state == ClockState.RUNNING

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def advance(self) -> None:
        """The one toggle: start, pause, resume, or clear a finished run."""
        if self._state == ClockState.RUNNING:
            self._pause()
        elif self._state in (ClockState.PAUSED, ClockState.READY):
            self._start()
        elif self._state == ClockState.ENDED:
            self.reset()
        else:
            raise AssertionError(f"unhandled clock state: {self._state!r}")

    def reset(self) -> None:
        """Return to READY with the queued duration applied."""
        self._apply_duration(self._queued_duration)
        self._elapsed = 0.0
        self._pitch = NEUTRAL_PITCH

        self._display.set_remaining_time_text(format_seconds(self._duration))
        self._display.set_indicator_fraction(0.0)

        self._audio.set_clip(AudioClip.TICKING)
        self._audio.set_loop(True)
        self._audio.set_pitch(NEUTRAL_PITCH)
        self._audio.stop()

        self._set_state(ClockState.READY)

    def tick(self, delta_seconds: float) -> None:
        """Advance the countdown by *delta_seconds* of real time."""
        if self._state == ClockState.READY:
            # Mirror live duration edits before the run starts.
            self._display.set_remaining_time_text(format_seconds(self._duration))
            return
        if self._state != ClockState.RUNNING:
            return

        self._elapsed += max(0.0, delta_seconds) / self._duration

        self._display.set_remaining_time_text(format_seconds(self.remaining_seconds))
        self._display.set_indicator_fraction(clamp01(self._elapsed))
        self._pitch = pitch_for(self._elapsed, self._onset)
        self._audio.set_pitch(self._pitch)

        if self._elapsed < 1.0 - _COMPLETION_EPSILON:
            return
        self._finish()

    # ══════════════════════════════════════════════════════════════════
    #  CONFIGURATION
    # ══════════════════════════════════════════════════════════════════

    def set_duration_from_text(self, text: str) -> None:
        """Queue a duration typed by the user.  Junk counts as 0."""
        self._update_queued(
            clamp(parse_duration_text(text), MIN_DURATION, MAX_DURATION)
        )

    def adjust_queued_duration(self, delta_seconds: float) -> None:
        """Nudge the value currently shown in the input field."""
        current = parse_duration_text(self._input.current_input_text())
        self._update_queued(
            clamp(current + delta_seconds, MIN_DURATION, MAX_DURATION)
        )

    def set_warn_window(self, seconds: float) -> None:
        """Seconds before the end at which the pitch starts to rise."""
        self._warn_window = max(0.0, seconds)
        self._onset = pitch_onset_fraction(self._duration, self._warn_window)

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL
    # ══════════════════════════════════════════════════════════════════

    def _start(self) -> None:
        self._set_state(ClockState.RUNNING)
        self._audio.play()

    def _pause(self) -> None:
        self._set_state(ClockState.PAUSED)
        self._audio.stop()

    def _finish(self) -> None:
        self._audio.set_clip(AudioClip.GONG)
        self._pitch = NEUTRAL_PITCH
        self._audio.set_pitch(NEUTRAL_PITCH)
        self._audio.set_loop(False)
        self._audio.play()

        self._display.set_indicator_fraction(self._max_indicator)

        self._set_state(ClockState.ENDED)
        logger.info("Countdown of %s s complete", format_seconds(self._duration))
        self.time_up.emit()

    def _update_queued(self, new_time: float) -> None:
        self._queued_duration = new_time
        self._input.set_queued_duration_text(format_seconds(new_time))

        # A running countdown keeps its duration until the next reset.
        if self._state == ClockState.RUNNING:
            return
        self._apply_duration(new_time)

    def _apply_duration(self, seconds: float) -> None:
        self._duration = seconds or FALLBACK_DURATION
        self._onset = pitch_onset_fraction(self._duration, self._warn_window)

    def _set_state(self, new_state: ClockState) -> None:
        logger.debug("Clock state %s → %s", self._state.value, new_state.value)
        self._state = new_state
        self.state_changed.emit(new_state)
