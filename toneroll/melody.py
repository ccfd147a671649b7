"""Sequence tones into a single mono sample buffer."""

from __future__ import annotations
from typing import *

from array import array
import enum
import math

import attr
import structlog

from . import envelope
from .notes import MelodyError, Pitch
from .waves import complex_wave, organ, sine_wave


log = structlog.get_logger()

DEFAULT_SAMPLE_RATE = 44100
DEFAULT_FADE_FRACTION = 0.02


class Mode(enum.Enum):
    SIMPLE = "simple"  # bare sine, no envelope; for debugging
    FADED = "faded"  # organ harmonics with the fade envelope
    COMPLEX = "complex"  # the partial table with the fade envelope


def _check_duration(instance: Tone, attribute: attr.Attribute, value: float) -> None:
    if not math.isfinite(value) or value < 0:
        raise MelodyError(f"tone duration must be finite and non-negative: {value}")


def _check_pitch(instance: Tone, attribute: attr.Attribute, value: Pitch) -> None:
    if not isinstance(value, Pitch):
        raise MelodyError(f"not a pitch: {value!r}")


def _check_mode(instance: Tone, attribute: attr.Attribute, value: Mode) -> None:
    if not isinstance(value, Mode):
        raise MelodyError(f"unknown tone mode: {value!r}")


@attr.dataclass(frozen=True)
class Tone:
    pitch: Pitch = attr.ib(validator=_check_pitch)
    duration: float = attr.ib(converter=float, validator=_check_duration)  # seconds
    mode: Mode = attr.ib(default=Mode.COMPLEX, validator=_check_mode)

    def scaled(self, factor: float) -> Tone:
        return attr.evolve(self, duration=self.duration * factor)

    def render(self, sample_rate: int, fade_fraction: float) -> array[float]:
        freq = self.pitch.frequency
        if self.mode is Mode.SIMPLE:
            return envelope.render_plain(sine_wave(freq), self.duration, sample_rate)

        if self.mode is Mode.FADED:
            wave = organ(freq)
        else:
            wave = complex_wave(freq)

        return envelope.render(wave, self.duration, sample_rate, fade_fraction)


@attr.dataclass(frozen=True)
class Melody:
    tones: Tuple[Tone, ...] = attr.ib(converter=tuple)
    sample_rate: int = DEFAULT_SAMPLE_RATE
    fade_fraction: float = DEFAULT_FADE_FRACTION

    def __attrs_post_init__(self) -> None:
        sr = self.sample_rate
        if isinstance(sr, bool) or not isinstance(sr, int) or sr <= 0:
            raise MelodyError(f"sample rate must be a positive integer: {sr!r}")

        ff = self.fade_fraction
        if not math.isfinite(ff) or not 0 <= ff < 0.5:
            raise MelodyError(f"fade fraction must be within [0, 0.5): {ff!r}")

        for tone in self.tones:
            if not isinstance(tone, Tone):
                raise MelodyError(f"not a tone: {tone!r}")

    @property
    def sample_count(self) -> int:
        return sum(
            envelope.sample_count(tone.duration, self.sample_rate)
            for tone in self.tones
        )

    @property
    def duration(self) -> float:
        """Length of the rendered melody in seconds."""
        return self.sample_count / self.sample_rate

    def render(self) -> array[float]:
        return render_melody(self)


def render_melody(melody: Melody) -> array[float]:
    """Return all tones of `melody` rendered back to back.

    Consecutive tones are not cross-faded.  The same melody always renders to
    the same samples.
    """
    samples = array("d")
    for tone in melody.tones:
        samples.extend(tone.render(melody.sample_rate, melody.fade_fraction))
    log.debug(
        "Melody rendered",
        tones=len(melody.tones),
        samples=len(samples),
        sample_rate=melody.sample_rate,
    )
    return samples


def seconds_per_beat(tempo: float) -> float:
    """Return the length of a beat in seconds given `tempo` in BPM."""
    if not math.isfinite(tempo) or tempo <= 0:
        raise MelodyError(f"tempo must be a positive number of BPM: {tempo!r}")

    return 60 / tempo


def fade_fraction_from_tone_length(tone_length: float) -> float:
    """Convert a "tone length" (the sustained share of a note) to a fade fraction.

    A tone length of 0.98 means a fade fraction of 0.02.
    """
    return 1 - tone_length


def melody_from_beats(
    notes: Iterable[Tuple[Pitch, float]],
    tempo: float,
    mode: Mode = Mode.COMPLEX,
    sample_rate: int = DEFAULT_SAMPLE_RATE,
    fade_fraction: float = DEFAULT_FADE_FRACTION,
) -> Melody:
    """Return a Melody from (pitch, beats) pairs played at `tempo` BPM."""
    beat = seconds_per_beat(tempo)
    return Melody(
        [Tone(pitch, beats, mode).scaled(beat) for pitch, beats in notes],
        sample_rate=sample_rate,
        fade_fraction=fade_fraction,
    )
