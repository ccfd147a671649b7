from __future__ import annotations

import attr


class MelodyError(ValueError):
    """Raised for note data that can't be rendered."""


class InvalidPitch(MelodyError):
    pass


REFERENCE_FREQ = 440.0  # A4
REFERENCE_OCTAVE = 4

# Semitones from A within the same octave.
letter_to_offset: dict[str, int] = {
    "c": -9,
    "d": -7,
    "e": -5,
    "f": -4,
    "g": -2,
    "a": 0,
    "b": 2,
}


def _check_letter(instance: Pitch, attribute: attr.Attribute, value: str) -> None:
    if value not in letter_to_offset:
        raise InvalidPitch(f"invalid note letter: {value!r}")


def _check_octave(instance: Pitch, attribute: attr.Attribute, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidPitch(f"octave must be an integer: {value!r}")


@attr.dataclass(frozen=True)
class Pitch:
    letter: str = attr.ib(converter=str.lower, validator=_check_letter)
    octave: int = attr.ib(default=4, validator=_check_octave)

    @property
    def frequency(self) -> float:
        return frequency(self)

    def __str__(self) -> str:
        return f"{self.letter.upper()}{self.octave}"


def frequency(pitch: Pitch) -> float:
    """Return the equal temperament frequency of `pitch` in Hz."""
    try:
        semitones = letter_to_offset[pitch.letter]
    except KeyError:
        raise InvalidPitch(f"invalid note letter: {pitch.letter!r}") from None
    semitones += 12 * (pitch.octave - REFERENCE_OCTAVE)
    return REFERENCE_FREQ * 2 ** (semitones / 12)


def parse_pitch(name: str) -> Pitch:
    """Return a Pitch from a name like "d5" or "A4"."""
    name = name.strip()
    if len(name) < 2:
        raise InvalidPitch(f"invalid pitch name: {name!r}")

    try:
        octave = int(name[1:])
    except ValueError:
        raise InvalidPitch(f"invalid octave in pitch name: {name!r}") from None
    return Pitch(name[0], octave)
