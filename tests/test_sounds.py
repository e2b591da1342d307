"""Tests for settings persistence, clip synthesis and the audio sink.

Covers:
- Settings dataclass defaults and JSON round-trip
- Ticking / gong WAV generation
- ClockAudio cache generation and the sink/preferences API
"""

from __future__ import annotations

import io
import json
import wave

import pytest

from radialclock.settings import Settings, load_settings, save_settings
from radialclock.audio.sounds import (
    ClockAudio,
    SAMPLE_RATE,
    _generate_gong,
    _generate_ticking,
    clip_path,
)
from radialclock.timer.sinks import AudioClip


# ═══════════════════════════════════════════════════════════════════════
#  SETTINGS
# ═══════════════════════════════════════════════════════════════════════


class TestSettingsDefaults:
    def test_duration(self):
        assert Settings().default_duration == 90

    def test_warn_window(self):
        assert Settings().warn_window == 20

    def test_max_indicator(self):
        assert Settings().max_indicator == 1.0

    def test_steps(self):
        s = Settings()
        assert s.small_step == 1
        assert s.large_step == 10

    def test_sound(self):
        s = Settings()
        assert s.sound_enabled is True
        assert s.sound_volume == 70

    def test_always_on_top_default(self):
        assert Settings().always_on_top is False


class TestSettingsPersistence:
    def test_round_trip(self, tmp_path, monkeypatch):
        """save → load produces identical settings."""
        path = tmp_path / "nested" / "settings.json"
        monkeypatch.setattr("radialclock.settings.SETTINGS_PATH", path)
        original = Settings(default_duration=45, warn_window=5, sound_volume=42)
        save_settings(original)
        loaded = load_settings()
        assert loaded == original

    def test_missing_file_returns_defaults(self):
        assert load_settings() == Settings()

    def test_invalid_json_returns_defaults(self, tmp_path, monkeypatch):
        path = tmp_path / "settings.json"
        path.write_text("NOT VALID JSON", encoding="utf-8")
        monkeypatch.setattr("radialclock.settings.SETTINGS_PATH", path)
        assert load_settings().default_duration == 90

    def test_non_object_json_returns_defaults(self, tmp_path, monkeypatch):
        path = tmp_path / "settings.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")
        monkeypatch.setattr("radialclock.settings.SETTINGS_PATH", path)
        assert load_settings() == Settings()

    def test_extra_keys_ignored(self, tmp_path, monkeypatch):
        path = tmp_path / "settings.json"
        data = {"default_duration": 120, "unknown_future_key": True}
        path.write_text(json.dumps(data), encoding="utf-8")
        monkeypatch.setattr("radialclock.settings.SETTINGS_PATH", path)
        s = load_settings()
        assert s.default_duration == 120
        assert not hasattr(s, "unknown_future_key")


# ═══════════════════════════════════════════════════════════════════════
#  SOUND SYNTHESIS
# ═══════════════════════════════════════════════════════════════════════


class TestSoundGeneration:

    @pytest.mark.parametrize("gen_fn", [_generate_ticking, _generate_gong])
    def test_wav_is_parseable(self, gen_fn):
        data = gen_fn()
        assert data[:4] == b"RIFF"
        with wave.open(io.BytesIO(data), "rb") as wf:
            assert wf.getnchannels() == 1
            assert wf.getsampwidth() == 2
            assert wf.getframerate() == SAMPLE_RATE
            assert wf.getnframes() > 0

    def test_ticking_loop_is_one_second(self):
        with wave.open(io.BytesIO(_generate_ticking()), "rb") as wf:
            assert wf.getnframes() == SAMPLE_RATE

    def test_gong_rings_for_seconds(self):
        with wave.open(io.BytesIO(_generate_gong()), "rb") as wf:
            assert wf.getnframes() / SAMPLE_RATE == pytest.approx(3.5, abs=0.01)

    def test_gong_fades_to_silence(self):
        with wave.open(io.BytesIO(_generate_gong()), "rb") as wf:
            frames = wf.readframes(wf.getnframes())
        last = int.from_bytes(frames[-2:], "little", signed=True)
        assert abs(last) < 50


# ═══════════════════════════════════════════════════════════════════════
#  AUDIO SINK
# ═══════════════════════════════════════════════════════════════════════


@pytest.mark.usefixtures("qapp")
class TestClockAudio:
    def test_wav_files_generated(self, tmp_path):
        ClockAudio(parent=None, sounds_dir=tmp_path)
        for clip in AudioClip:
            path = clip_path(tmp_path, clip)
            assert path.exists(), f"Missing WAV: {clip.value}"
            assert path.stat().st_size > 100

    def test_existing_files_not_regenerated(self, tmp_path):
        ClockAudio(parent=None, sounds_dir=tmp_path)
        path = clip_path(tmp_path, AudioClip.GONG)
        mtime = path.stat().st_mtime_ns
        ClockAudio(parent=None, sounds_dir=tmp_path)
        assert path.stat().st_mtime_ns == mtime

    def test_starts_on_ticking_loop(self, tmp_path):
        audio = ClockAudio(parent=None, sounds_dir=tmp_path)
        assert audio.clip == AudioClip.TICKING
        assert audio.loop is True
        assert audio.pitch == 1.0
        assert audio.playing is False

    def test_sink_calls_are_recorded(self, tmp_path):
        audio = ClockAudio(parent=None, sounds_dir=tmp_path)
        audio.set_clip(AudioClip.GONG)
        audio.set_loop(False)
        audio.set_pitch(2.5)
        assert audio.clip == AudioClip.GONG
        assert audio.loop is False
        assert audio.pitch == 2.5

    def test_set_volume_clamps(self, tmp_path):
        audio = ClockAudio(parent=None, sounds_dir=tmp_path)
        audio.set_volume(30)
        assert audio.volume == 30
        audio.set_volume(200)
        assert audio.volume == 100
        audio.set_volume(-10)
        assert audio.volume == 0

    def test_play_while_disabled_only_records(self, tmp_path):
        audio = ClockAudio(parent=None, sounds_dir=tmp_path)
        audio.set_enabled(False)
        assert audio.enabled is False
        audio.play()
        assert audio.playing is True
        audio.stop()
        assert audio.playing is False
