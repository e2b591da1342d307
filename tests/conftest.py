"""Shared pytest fixtures for RadialClock tests."""

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication  # noqa: E402

from radialclock.timer.engine import ClockEngine  # noqa: E402

from helpers import FakeAudio, FakeDisplay, FakeInputField  # noqa: E402


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keep every test away from the real settings file."""
    monkeypatch.setattr(
        "radialclock.settings.SETTINGS_PATH", tmp_path / "settings.json",
    )
    monkeypatch.setattr(
        "radialclock.audio.sounds.SOUNDS_DIR", tmp_path / "sounds",
    )


@pytest.fixture
def display():
    return FakeDisplay()


@pytest.fixture
def input_field():
    return FakeInputField()


@pytest.fixture
def audio():
    return FakeAudio()


@pytest.fixture
def engine(qapp, display, input_field, audio):
    """Fresh 90 s ClockEngine with a 20 s warn window, wired to fakes."""
    return ClockEngine(display, input_field, audio, duration=90, warn_window=20)
