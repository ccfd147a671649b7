#!/usr/bin/env python3
"""A few kinds of waveforms as functions of time."""

from __future__ import annotations
from typing import *

import math


Wave = Callable[[float], float]
Partials = Tuple[Tuple[float, float], ...]  # (frequency ratio, amplitude)


def sine_wave(frequency: float) -> Wave:
    def wave(t: float) -> float:
        return math.sin(math.tau * frequency * t)

    return wave


def organ(frequency: float) -> Wave:
    """Return a sum of nine octave-spaced harmonics of `frequency`.

    Harmonic k sits at 2**k times the fundamental and is attenuated both by k and
    by 1.3**k, which gives a bright, slightly percussive tone.
    """
    harmonics = [
        (math.tau * 2 ** k * frequency, 1 / k / 1.3 ** k) for k in range(1, 10)
    ]

    def wave(t: float) -> float:
        return sum(weight * math.sin(omega * t) for omega, weight in harmonics)

    return wave


def generate_partials() -> Partials:
    """Return the partial table used by `complex_wave`.

    Three voices are centered on ratios 0, 2, and 4.  Each voice contributes its
    center plus seven pairs of sidebands with a widening spacing, all with the same
    amplitude which decays with the voice number.  The lower sidebands of the third
    voice are dropped past the second pair, that asymmetry is tuned by ear.
    """
    decay_constant = 0.19999992
    floor = 0.43407478
    falloff = 0.45959631
    partials: List[Tuple[float, float]] = []
    center = 0.0
    for voice in range(1, 4):
        step = 0.147540984
        max_amplitude = 1.0 - decay_constant * (voice - 1)
        amplitude = math.exp(-falloff * voice) * (max_amplitude - floor) + floor
        partials.append((center, amplitude))
        for sideband in range(1, 8):
            for sign in (-1.0, 1.0):
                if sign == -1.0 and sideband > 2 and voice == 3:
                    continue

                partials.append((center + sign * step, amplitude))
            step += 0.131147541
        center += 2.0
    return tuple(partials)


PARTIALS: Final[Partials] = generate_partials()


def complex_wave(frequency: float, partials: Partials = PARTIALS) -> Wave:
    """Return a glassy, chord-like wave summing `partials` scaled to `frequency`."""
    components = [(math.tau * ratio * frequency, amp) for ratio, amp in partials]

    def wave(t: float) -> float:
        return sum(amp * math.sin(omega * t) for omega, amp in components)

    return wave
