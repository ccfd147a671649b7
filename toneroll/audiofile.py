#!/usr/bin/env python3
from __future__ import annotations

from array import array
from pathlib import Path
from typing import Sequence

import miniaudio
import structlog


# We want this to be symmetrical on the + and the - side.
INT16_MAXVALUE = 32767


log = structlog.get_logger()


def duration_str(duration: float) -> str:
    minutes = int(duration // 60)
    seconds = duration - 60 * minutes
    return f"{minutes}:{seconds:06.3f}"


def quantize(samples: Sequence[float]) -> array[int]:
    """Return float samples as signed 16-bit integers, clipping outside of [-1, 1]."""
    numbers = []
    for sample in samples:
        sample = max(-1.0, min(1.0, sample))
        numbers.append(round(INT16_MAXVALUE * sample))
    return array("h", numbers)


def write_wav(path: Path, samples: Sequence[float], sample_rate: int) -> None:
    """Save mono `samples` as a 16-bit WAV file, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    sound_file = miniaudio.DecodedSoundFile(
        path.name,
        1,
        sample_rate,
        miniaudio.SampleFormat.SIGNED16,
        quantize(samples),
    )
    miniaudio.wav_write_file(str(path), sound_file)
    log.info(
        "WAV file written",
        path=str(path),
        sample_rate=sample_rate,
        duration=duration_str(len(samples) / sample_rate),
    )
