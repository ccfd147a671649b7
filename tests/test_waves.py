import math

import pytest

from toneroll.waves import PARTIALS, complex_wave, generate_partials, organ, sine_wave


def test_sine_wave() -> None:
    wave = sine_wave(1.0)
    assert wave(0.0) == 0.0
    assert wave(0.25) == pytest.approx(1.0)
    assert wave(0.75) == pytest.approx(-1.0)


def test_organ_is_weighted_sum_of_octaves() -> None:
    t = 0.0123
    expected = sum(
        math.sin(math.tau * 2 ** k * 220.0 * t) / k / 1.3 ** k for k in range(1, 10)
    )
    assert organ(220.0)(t) == pytest.approx(expected)
    assert organ(220.0)(0.0) == 0.0


def test_partial_table_shape() -> None:
    assert len(PARTIALS) == 40
    assert PARTIALS == generate_partials()
    for ratio, amplitude in PARTIALS:
        assert math.isfinite(ratio)
        assert 0 < amplitude <= 1


def test_partial_table_voices() -> None:
    centers = [(ratio, amp) for ratio, amp in PARTIALS if ratio in (0.0, 2.0, 4.0)]
    assert [ratio for ratio, _ in centers] == [0.0, 2.0, 4.0]
    assert centers[0][1] == pytest.approx(0.7914783671016566)
    assert centers[1][1] == pytest.approx(0.5800207659791673)
    assert centers[2][1] == pytest.approx(0.4758686316592648)
    # voices decay
    assert centers[0][1] > centers[1][1] > centers[2][1]


def test_partial_table_sidebands() -> None:
    assert PARTIALS[1] == pytest.approx((-0.147540984, 0.7914783671016566))
    assert PARTIALS[2] == pytest.approx((0.147540984, 0.7914783671016566))
    assert PARTIALS[14][0] == pytest.approx(0.93442623)
    # the third voice keeps only two lower sidebands
    third_voice = PARTIALS[30:]
    assert len(third_voice) == 10
    assert len([r for r, _ in third_voice if r < 4.0]) == 2
    assert third_voice[-1][0] == pytest.approx(4.93442623)


def test_complex_wave_sums_partials() -> None:
    t = 0.00321
    expected = sum(amp * math.sin(math.tau * r * 330.0 * t) for r, amp in PARTIALS)
    assert complex_wave(330.0)(t) == pytest.approx(expected)


def test_complex_wave_custom_partials() -> None:
    wave = complex_wave(1.0, partials=((1.0, 0.5),))
    assert wave(0.25) == pytest.approx(0.5)
