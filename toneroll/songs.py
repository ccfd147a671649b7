"""Authored melodies as (pitch, beats) pairs."""

from __future__ import annotations
from typing import *

from .notes import Pitch, parse_pitch


Phrase = List[Tuple[Pitch, float]]


def phrase(*notes: Tuple[str, float]) -> Phrase:
    return [(parse_pitch(name), beats) for name, beats in notes]


# fmt: off
RISEN_FIRST = phrase(
    ("d5", 0.5), ("e5", 0.5), ("f5", 1.0), ("f5", 1.0),
    ("e5", 0.25), ("e5", 0.25), ("f5", 0.5),

    ("d5", 1.0), ("c5", 0.5), ("d5", 0.5), ("d5", 0.5),
    ("e5", 0.5), ("c5", 0.5), ("g5", 0.25), ("f5", 0.25),
)

RISEN_SECOND = phrase(
    ("d5", 0.5), ("c5", 0.5), ("d5", 1.0), ("e5", 1.0),
    ("a4", 0.5), ("a4", 0.5),

    ("e5", 0.25), ("e5", 0.25), ("f5", 0.5), ("e5", 0.5),
    ("d5", 0.25), ("g5", 0.25), ("b4", 0.5), ("d5", 0.25),
    ("c5", 0.25), ("f5", 1.0),
)
# fmt: on


def risen() -> Phrase:
    """Both phrases of the hymn, each played twice."""
    return RISEN_FIRST * 2 + RISEN_SECOND * 2


songs: Dict[str, Callable[[], Phrase]] = {
    "risen": risen,
}
