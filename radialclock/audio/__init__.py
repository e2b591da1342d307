"""Audio package."""

from .sounds import ClockAudio

__all__ = ["ClockAudio"]
