"""Clock sounds: numpy synthesis plus a QMediaPlayer-backed audio sink.

Both clips are generated programmatically as WAV files (sine partials
shaped by envelopes) and cached to disk so later launches skip the
synthesis.

Clips
-----
- ``ticking``: one-second tick/tock loop played while the clock runs
- ``gong``:    inharmonic bell struck once when time is up

``ClockAudio`` is the engine's audio sink.  Pitch is applied as the
player's playback rate, so a faster tick also sounds higher.
"""

from __future__ import annotations

import io
import logging
import wave
from pathlib import Path

import numpy as np

from PyQt6.QtCore import QObject, QUrl
from PyQt6.QtMultimedia import QAudioOutput, QMediaPlayer

from ..timer.curves import NEUTRAL_PITCH, clamp
from ..timer.sinks import AudioClip

logger = logging.getLogger(__name__)


# ── paths ────────────────────────────────────────────────────────────────

APP_SUPPORT_DIR = Path.home() / "Library" / "Application Support" / "RadialClock"
SOUNDS_DIR = APP_SUPPORT_DIR / "sounds"

SAMPLE_RATE = 44100

_LOOP_FOREVER = QMediaPlayer.Loops.Infinite.value
_LOOP_ONCE = QMediaPlayer.Loops.Once.value


# ═══════════════════════════════════════════════════════════════════════════
#  WAV SYNTHESIS HELPERS
# ═══════════════════════════════════════════════════════════════════════════


def _sine(freq: float, duration_s: float) -> np.ndarray:
    """Pure sine wave at *freq* Hz for *duration_s* seconds."""
    t = np.linspace(0, duration_s, int(SAMPLE_RATE * duration_s), endpoint=False)
    return np.sin(2 * np.pi * freq * t)


def _decay(length: int, attack: int, time_constant_s: float) -> np.ndarray:
    """Linear attack of *attack* samples, then exponential decay."""
    env = np.exp(-np.arange(length) / (SAMPLE_RATE * time_constant_s))
    a = min(attack, length)
    if a > 0:
        env[:a] *= np.linspace(0.0, 1.0, a)
    return env


def _to_wav_bytes(samples: np.ndarray) -> bytes:
    """Convert a float64 numpy array (-1..1) to 16-bit PCM WAV bytes."""
    samples = np.clip(samples, -1.0, 1.0)
    int_samples = (samples * 32767).astype(np.int16)

    buf = io.BytesIO()
    with wave.open(buf, "wb") as wf:
        wf.setnchannels(1)
        wf.setsampwidth(2)
        wf.setframerate(SAMPLE_RATE)
        wf.writeframes(int_samples.tobytes())
    return buf.getvalue()


# ═══════════════════════════════════════════════════════════════════════════
#  SOUND GENERATORS
# ═══════════════════════════════════════════════════════════════════════════


def _click(freq: float, duration_s: float, level: float) -> np.ndarray:
    tone = _sine(freq, duration_s) + 0.3 * _sine(freq * 2.1, duration_s)
    return tone * _decay(len(tone), attack=30, time_constant_s=0.006) * level


def _generate_ticking() -> bytes:
    """Ticking loop: a bright tick and a duller tock, half a second apart.

    Exactly one second long so it loops in step with the countdown.
    """
    total = np.zeros(SAMPLE_RATE)
    tick = _click(2400.0, 0.04, 0.55)
    tock = _click(1700.0, 0.04, 0.45)
    half = SAMPLE_RATE // 2
    total[:len(tick)] += tick
    total[half:half + len(tock)] += tock
    return _to_wav_bytes(total)


def _generate_gong() -> bytes:
    """Time up: low bell with inharmonic partials and a long tail."""
    duration = 3.5
    fundamental = 110.0
    partials = (
        # ratio, level, decay (s)
        (1.00, 0.45, 1.40),
        (2.76, 0.25, 0.90),
        (5.40, 0.12, 0.45),
        (8.93, 0.06, 0.25),
    )
    out = np.zeros(int(SAMPLE_RATE * duration))
    for ratio, level, tau in partials:
        tone = _sine(fundamental * ratio, duration) * level
        out += tone * _decay(len(tone), attack=int(SAMPLE_RATE * 0.005), time_constant_s=tau)
    # Fade the last 100 ms so the file never ends on a click.
    fade = int(SAMPLE_RATE * 0.1)
    out[-fade:] *= np.linspace(1.0, 0.0, fade)
    return _to_wav_bytes(out)


_GENERATORS: dict[AudioClip, callable] = {
    AudioClip.TICKING: _generate_ticking,
    AudioClip.GONG: _generate_gong,
}


def clip_path(sounds_dir: Path, clip: AudioClip) -> Path:
    return sounds_dir / f"{clip.value}.wav"


# ═══════════════════════════════════════════════════════════════════════════
#  AUDIO SINK
# ═══════════════════════════════════════════════════════════════════════════


class ClockAudio(QObject):
    """Plays the clock's clips through a single ``QMediaPlayer``.

    Usage::

        audio = ClockAudio(parent=self)
        audio.set_volume(70)
        audio.set_clip(AudioClip.TICKING)
        audio.play()
    """

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        sounds_dir: Path | None = None,
    ) -> None:
        super().__init__(parent)
        self._enabled = True
        self._volume = 0.7  # 0.0–1.0
        self._sounds_dir = sounds_dir or SOUNDS_DIR

        # Last requested playback parameters.
        self._clip: AudioClip = AudioClip.TICKING
        self._loop = True
        self._pitch = NEUTRAL_PITCH
        self._playing = False

        self._ensure_wav_files()

        self._output = QAudioOutput(self)
        self._output.setVolume(self._volume)
        self._player = QMediaPlayer(self)
        self._player.setAudioOutput(self._output)
        self._player.errorOccurred.connect(self._on_player_error)

        self.set_clip(self._clip)
        self.set_loop(self._loop)

    # ── sink API ──────────────────────────────────────────────────────

    def set_clip(self, clip: AudioClip) -> None:
        self._clip = clip
        self._playing = False
        self._player.setSource(QUrl.fromLocalFile(str(clip_path(self._sounds_dir, clip))))

    def set_loop(self, loop: bool) -> None:
        self._loop = loop
        self._player.setLoops(_LOOP_FOREVER if loop else _LOOP_ONCE)

    def set_pitch(self, pitch: float) -> None:
        self._pitch = pitch
        self._player.setPlaybackRate(pitch)

    def play(self) -> None:
        """Start the current clip from the top.  Silent if disabled."""
        self._playing = True
        if self._enabled:
            self._player.play()

    def stop(self) -> None:
        self._playing = False
        self._player.stop()

    # ── preferences ───────────────────────────────────────────────────

    def set_volume(self, level: int) -> None:
        """Set volume (0-100)."""
        self._volume = clamp(level, 0, 100) / 100.0
        self._output.setVolume(self._volume)

    def set_enabled(self, enabled: bool) -> None:
        self._enabled = enabled
        if not enabled:
            self._player.stop()
        elif self._playing:
            self._player.play()

    @property
    def volume(self) -> int:
        """Current volume as 0-100 integer."""
        return round(self._volume * 100)

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def clip(self) -> AudioClip:
        return self._clip

    @property
    def loop(self) -> bool:
        return self._loop

    @property
    def pitch(self) -> float:
        return self._pitch

    @property
    def playing(self) -> bool:
        """Whether the engine last asked for playback (enabled or not)."""
        return self._playing

    # ── internal ──────────────────────────────────────────────────────

    def _ensure_wav_files(self) -> None:
        """Generate any missing WAV files to the cache directory."""
        self._sounds_dir.mkdir(parents=True, exist_ok=True)
        for clip, gen_fn in _GENERATORS.items():
            path = clip_path(self._sounds_dir, clip)
            if not path.exists():
                logger.info("Synthesizing %s", path.name)
                path.write_bytes(gen_fn())

    def _on_player_error(self, error: QMediaPlayer.Error, message: str) -> None:
        logger.warning("Audio playback error (%s): %s", error, message)
