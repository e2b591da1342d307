"""Numeric helpers for the countdown: clamps, easing and the pitch ramp.

Everything here is a total function. Inputs are clamped, never
rejected, so the engine can feed it whatever the user typed.
"""

from __future__ import annotations

import math


# ── constants ─────────────────────────────────────────────────────────────

MIN_DURATION = 0.0
MAX_DURATION = 999.0

NEUTRAL_PITCH = 1.0
MAX_PITCH = 3.0


# ── basic math ────────────────────────────────────────────────────────────


def clamp(value: float, lo: float, hi: float) -> float:
    """Return *value* limited to ``[lo, hi]``.  NaN maps to *lo*."""
    if value != value:  # NaN
        return lo
    return max(lo, min(hi, value))


def clamp01(value: float) -> float:
    return clamp(value, 0.0, 1.0)


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def smootherstep(t: float) -> float:
    """Quintic ease ``6t⁵ − 15t⁴ + 10t³`` on a clamped *t*.

    First and second derivatives are zero at both ends, so a pitch
    driven by it starts and stops ramping without an audible jump.
    """
    t = clamp01(t)
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


# ── pitch ramp ────────────────────────────────────────────────────────────


def pitch_onset_fraction(duration: float, warn_window: float) -> float:
    """Elapsed fraction at which the pitch ramp starts.

    *warn_window* is the time remaining (seconds) when ramping begins.
    """
    if duration <= 0:
        return 0.0
    return clamp01((duration - warn_window) / duration)


def pitch_for(elapsed_fraction: float, onset_fraction: float) -> float:
    """Ticking pitch for a point in the run.

    Neutral up to *onset_fraction*, then eased up to ``MAX_PITCH`` at
    ``elapsed_fraction == 1``.
    """
    if elapsed_fraction <= onset_fraction:
        return NEUTRAL_PITCH
    span = 1.0 - onset_fraction
    if span <= 0:
        return MAX_PITCH
    t = clamp01((elapsed_fraction - onset_fraction) / span)
    return lerp(NEUTRAL_PITCH, MAX_PITCH, smootherstep(t))


# ── text in / text out ────────────────────────────────────────────────────


def parse_duration_text(text: str | None) -> float:
    """Parse user-typed seconds.  Anything unusable becomes ``0.0``."""
    if not text:
        return 0.0
    try:
        value = float(text.strip())
    except ValueError:
        return 0.0
    if math.isnan(value):
        return 0.0
    return value


def format_seconds(seconds: float) -> str:
    """Whole seconds, rounded half-up, with thousands separators."""
    return f"{math.floor(seconds + 0.5):,d}"
