"""Timer package."""

from .engine import (
    ClockEngine,
    ClockState,
    DEFAULT_DURATION,
    DEFAULT_WARN_WINDOW,
)
from .frame_clock import FrameClock
from .sinks import AudioClip, AudioSink, DisplaySink, InputFieldSink

__all__ = [
    "ClockEngine",
    "ClockState",
    "DEFAULT_DURATION",
    "DEFAULT_WARN_WINDOW",
    "FrameClock",
    "AudioClip",
    "AudioSink",
    "DisplaySink",
    "InputFieldSink",
]
