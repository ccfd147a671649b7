import pytest

from toneroll.envelope import LEVEL, fade, render, render_plain, sample_count
from toneroll.waves import organ


def constant(t: float) -> float:
    return 1.0


def test_sample_count_rounds() -> None:
    assert sample_count(1.0, 44100) == 44100
    assert sample_count(0.5, 44100) == 22050
    assert sample_count(0.00001, 44100) == 0
    assert sample_count(0.0001, 44100) == 4


def test_fade_endpoints_and_sustain() -> None:
    duration = 2.0
    assert fade(0.0, duration, 0.02) == 0.0
    assert fade(duration, duration, 0.02) == 0.0
    assert fade(duration / 2, duration, 0.02) == 1.0


def test_fade_is_linear_ramp() -> None:
    # ramps are 2 * 0.1 * 1.0 = 0.2 seconds long
    assert fade(0.05, 1.0, 0.1) == pytest.approx(0.25)
    assert fade(0.1, 1.0, 0.1) == pytest.approx(0.5)
    assert fade(0.9, 1.0, 0.1) == pytest.approx(0.5)
    assert fade(0.95, 1.0, 0.1) == pytest.approx(0.25)


def test_zero_fade_is_sustain_only() -> None:
    assert fade(0.0, 1.0, 0.0) == 1.0
    assert fade(1.0, 1.0, 0.0) == 1.0
    samples = render(constant, 0.01, 1000, 0.0)
    assert list(samples) == [LEVEL] * 10


def test_zero_duration() -> None:
    assert len(render(constant, 0.0, 44100, 0.02)) == 0
    assert fade(0.0, 0.0, 0.02) == 1.0


def test_render_shapes_wave() -> None:
    samples = render(constant, 1.0, 100, 0.1)
    assert len(samples) == 100
    assert samples[0] == 0.0
    assert samples[10] == pytest.approx(0.5 * LEVEL)
    assert samples[50] == LEVEL
    assert samples[95] == pytest.approx(0.25 * LEVEL)
    assert max(samples) == LEVEL


def test_render_mid_sustain_level() -> None:
    wave = organ(440.0)
    samples = render(wave, 1.0, 8000, 0.02)
    assert samples[4000] == pytest.approx(LEVEL * wave(0.5))


def test_render_plain_has_no_envelope() -> None:
    samples = render_plain(constant, 0.5, 10)
    assert list(samples) == [LEVEL] * 5


def test_sample_count_rounds_halves_to_even() -> None:
    assert sample_count(0.5, 5) == 2
    assert sample_count(0.5, 7) == 4
