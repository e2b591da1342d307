"""Tests for clamps, easing, the pitch curve and duration text handling."""

import math

import pytest

from radialclock.timer.curves import (
    MAX_PITCH,
    NEUTRAL_PITCH,
    clamp,
    clamp01,
    format_seconds,
    lerp,
    parse_duration_text,
    pitch_for,
    pitch_onset_fraction,
    smootherstep,
)


class TestClamp:

    @pytest.mark.parametrize("value, expected", [
        (5, 5), (-1e300, 0), (1e300, 999), (0, 0), (999, 999),
        (float("inf"), 999), (float("-inf"), 0),
    ])
    def test_always_in_range(self, value, expected):
        assert clamp(value, 0, 999) == expected

    def test_nan_maps_to_low_bound(self):
        assert clamp(float("nan"), 0, 999) == 0

    def test_clamp01(self):
        assert clamp01(-0.5) == 0.0
        assert clamp01(0.25) == 0.25
        assert clamp01(7) == 1.0


class TestEasing:

    def test_lerp_endpoints(self):
        assert lerp(1, 3, 0) == 1
        assert lerp(1, 3, 1) == 3
        assert lerp(1, 3, 0.5) == 2

    def test_smootherstep_endpoints_and_midpoint(self):
        assert smootherstep(0.0) == 0.0
        assert smootherstep(1.0) == 1.0
        assert smootherstep(0.5) == pytest.approx(0.5)

    def test_smootherstep_clamps_input(self):
        assert smootherstep(-3) == 0.0
        assert smootherstep(4) == 1.0

    def test_smootherstep_flat_at_ends(self):
        h = 1e-4
        assert smootherstep(h) / h < 1e-6
        assert (1 - smootherstep(1 - h)) / h < 1e-6


class TestPitchCurve:

    def test_onset_scenario(self):
        assert pitch_onset_fraction(90, 20) == pytest.approx(0.7778, abs=1e-4)

    def test_onset_clamped(self):
        assert pitch_onset_fraction(10, 50) == 0.0
        assert pitch_onset_fraction(10, 0) == 1.0

    def test_onset_for_degenerate_duration(self):
        assert pitch_onset_fraction(0, 20) == 0.0

    def test_neutral_up_to_onset(self):
        onset = pitch_onset_fraction(90, 20)
        for f in (0.0, 0.25, 0.5, onset):
            assert pitch_for(f, onset) == NEUTRAL_PITCH

    def test_max_at_end(self):
        onset = pitch_onset_fraction(90, 20)
        assert pitch_for(1.0, onset) == MAX_PITCH

    def test_strictly_increasing_inside_window(self):
        onset = pitch_onset_fraction(90, 20)
        steps = 100
        samples = [
            pitch_for(onset + (1 - onset) * i / steps, onset)
            for i in range(1, steps + 1)
        ]
        assert all(b > a for a, b in zip(samples, samples[1:]))
        assert samples[0] > NEUTRAL_PITCH

    def test_ramp_from_start_when_window_covers_duration(self):
        onset = pitch_onset_fraction(60, 60)
        assert onset == 0.0
        assert pitch_for(0.5, onset) == pytest.approx(2.0)

    def test_zero_width_window_jumps_only_past_end(self):
        assert pitch_for(0.999, 1.0) == NEUTRAL_PITCH
        assert pitch_for(1.2, 1.0) == MAX_PITCH


class TestParseDurationText:

    @pytest.mark.parametrize("text, expected", [
        ("90", 90.0),
        (" 12.5 ", 12.5),
        ("1e2", 100.0),
        ("-4", -4.0),
        ("abc", 0.0),
        ("", 0.0),
        (None, 0.0),
        ("nan", 0.0),
        ("12 seconds", 0.0),
    ])
    def test_parse(self, text, expected):
        assert parse_duration_text(text) == expected

    def test_infinity_passes_through_for_clamping(self):
        assert math.isinf(parse_duration_text("inf"))


class TestFormatSeconds:

    @pytest.mark.parametrize("seconds, expected", [
        (90, "90"),
        (7.5, "8"),
        (7.49, "7"),
        (0.4, "0"),
        (-0.2, "0"),
        (999, "999"),
        (1234, "1,234"),
    ])
    def test_format(self, seconds, expected):
        assert format_seconds(seconds) == expected
