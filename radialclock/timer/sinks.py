"""Collaborator interfaces the clock engine drives.

The engine never touches widgets or audio devices directly; it calls
whatever objects satisfy these protocols.  The Qt layer provides the
real ones (``ui.clock_widget.ClockWidget``, ``audio.sounds.ClockAudio``)
and the tests provide fakes.
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class AudioClip(Enum):
    TICKING = "ticking"
    GONG = "gong"


class DisplaySink(Protocol):
    def set_remaining_time_text(self, text: str) -> None: ...

    def set_indicator_fraction(self, fraction: float) -> None: ...


class InputFieldSink(Protocol):
    def set_queued_duration_text(self, text: str) -> None: ...

    def current_input_text(self) -> str: ...


class AudioSink(Protocol):
    def set_clip(self, clip: AudioClip) -> None: ...

    def set_loop(self, loop: bool) -> None: ...

    def set_pitch(self, pitch: float) -> None: ...

    def play(self) -> None: ...

    def stop(self) -> None: ...
