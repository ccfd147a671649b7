"""Turn endless waves into finite notes."""

from __future__ import annotations

from array import array

from .waves import Wave


LEVEL = 0.5  # headroom for waves that peak above 1.0


def sample_count(duration: float, sample_rate: int) -> int:
    """Return how many samples `duration` seconds take at `sample_rate`.

    Uses Python's `round()`, so exact halves go to the even neighbor: 2.5 samples
    become 2, 3.5 samples become 4.
    """
    return round(duration * sample_rate)


def fade(t: float, duration: float, fade_fraction: float) -> float:
    """Return the trapezoid envelope gain at time `t` of a note lasting `duration`.

    The gain rises linearly from 0.0 over the first `2 * fade_fraction * duration`
    seconds, stays at 1.0, and falls back linearly to 0.0 at `duration`.  With
    a `fade_fraction` of zero there are no ramps at all.
    """
    ramp = 2 * fade_fraction * duration
    if ramp == 0:
        return 1.0

    if t < ramp:
        return t / ramp

    if t < (1 - 2 * fade_fraction) * duration:
        return 1.0

    return (duration - t) / ramp


def render(
    wave: Wave, duration: float, sample_rate: int, fade_fraction: float
) -> array[float]:
    """Return `duration` seconds of `wave` shaped by the fade envelope."""
    samples = array("d")
    for i in range(sample_count(duration, sample_rate)):
        t = i / sample_rate
        samples.append(LEVEL * wave(t) * fade(t, duration, fade_fraction))
    return samples


def render_plain(wave: Wave, duration: float, sample_rate: int) -> array[float]:
    """Like `render()` but without an envelope.  Clicks at both ends."""
    count = sample_count(duration, sample_rate)
    return array("d", [LEVEL * wave(i / sample_rate) for i in range(count)])
