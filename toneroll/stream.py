"""Pull rendered samples one at a time, for real-time playback."""

from __future__ import annotations
from typing import *

from array import array
import datetime

from .melody import Melody


if TYPE_CHECKING:
    Audio = Generator[array[float], int, None]


class MelodySource:
    """A mono, forward-only cursor over a rendered sample buffer.

    Samples come out narrowed to 32-bit float, which is what audio devices want.
    Once the buffer is exhausted the source stays exhausted: `next_sample()`
    keeps returning None and iteration keeps stopping.

    A source is meant for a single consumer, usually an audio callback thread.
    """

    channels = 1
    current_frame_len: Optional[int] = None  # not organized in frames
    total_duration: Optional[datetime.timedelta] = None

    def __init__(self, samples: Sequence[float], sample_rate: int) -> None:
        self.samples = array("f", samples)
        self.sample_rate = sample_rate
        self.position = 0

    @classmethod
    def from_melody(cls, melody: Melody) -> MelodySource:
        return cls(melody.render(), melody.sample_rate)

    def __len__(self) -> int:
        return len(self.samples)

    def is_exhausted(self) -> bool:
        return self.position >= len(self.samples)

    def next_sample(self) -> Optional[float]:
        if self.position >= len(self.samples):
            return None

        sample = self.samples[self.position]
        self.position += 1
        return sample

    def __iter__(self) -> Iterator[float]:
        return self

    def __next__(self) -> float:
        sample = self.next_sample()
        if sample is None:
            raise StopIteration

        return sample


def playback_stream(source: MelodySource) -> Audio:
    """Feed `source` to a miniaudio playback device.

    This follows miniaudio's generator protocol: prime it with `next()`, then the
    device sends the number of frames it wants and gets back that many float32
    samples.  After the source runs out the device gets silence.
    """
    required_frames = yield array("f")
    while True:
        out_buffer = array("f")
        for _ in range(required_frames):
            sample = source.next_sample()
            if sample is None:
                break

            out_buffer.append(sample)
        if len(out_buffer) < required_frames:
            out_buffer.extend([0.0] * (required_frames - len(out_buffer)))
        required_frames = yield out_buffer
