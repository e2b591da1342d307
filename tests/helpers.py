"""Shared test helpers for RadialClock."""

from radialclock.timer.engine import ClockEngine
from radialclock.timer.sinks import AudioClip


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


class FakeDisplay:
    def __init__(self):
        self.texts: list[str] = []
        self.fractions: list[float] = []

    def set_remaining_time_text(self, text: str) -> None:
        self.texts.append(text)

    def set_indicator_fraction(self, fraction: float) -> None:
        self.fractions.append(fraction)

    @property
    def text(self):
        return self.texts[-1] if self.texts else None

    @property
    def fraction(self):
        return self.fractions[-1] if self.fractions else None


class FakeInputField:
    """Behaves like a line edit: the last pushed text is what it shows."""

    def __init__(self, text: str = ""):
        self.text = text
        self.pushed: list[str] = []

    def set_queued_duration_text(self, text: str) -> None:
        self.text = text
        self.pushed.append(text)

    def current_input_text(self) -> str:
        return self.text


class FakeAudio:
    def __init__(self):
        self.calls: list[tuple] = []
        self.clip: AudioClip | None = None
        self.loop: bool | None = None
        self.pitch: float | None = None
        self.playing = False

    def set_clip(self, clip: AudioClip) -> None:
        self.calls.append(("set_clip", clip))
        self.clip = clip

    def set_loop(self, loop: bool) -> None:
        self.calls.append(("set_loop", loop))
        self.loop = loop

    def set_pitch(self, pitch: float) -> None:
        self.calls.append(("set_pitch", pitch))
        self.pitch = pitch

    def play(self) -> None:
        self.calls.append(("play",))
        self.playing = True

    def stop(self) -> None:
        self.calls.append(("stop",))
        self.playing = False

    def count(self, name: str) -> int:
        return sum(1 for c in self.calls if c[0] == name)


def run_to_completion(engine: ClockEngine) -> None:
    """Finish the current run with a single frame covering what's left."""
    engine.tick(engine.remaining_seconds)
