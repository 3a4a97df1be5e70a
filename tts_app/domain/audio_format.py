from __future__ import annotations

from dataclasses import dataclass, field
from threading import Event

import numpy as np

SAMPLE_RATE = 22_050
CHANNELS = 1
BYTES_PER_SAMPLE = 4  # float32 PCM


def playback_buffer_size(sample_count: int, min_buffer_size: int) -> int:
    """Bytes to allocate for the static clip buffer: the device minimum or the whole clip.

    Only StaticBuffer uses this; the stream itself is opened with default latency.
    Padding past the clip is never played.
    """
    return max(min_buffer_size, sample_count * BYTES_PER_SAMPLE)


@dataclass
class StaticBuffer:
    """A clip written once up front and then read out by the device callback."""

    data: np.ndarray
    frames: int
    position: int = 0
    finished: Event = field(default_factory=Event)

    @staticmethod
    def write(samples: np.ndarray, buffer_size: int) -> "StaticBuffer":
        samples = np.asarray(samples, dtype=np.float32).reshape(-1)
        data = np.zeros(max(buffer_size // BYTES_PER_SAMPLE, samples.size), dtype=np.float32)
        data[: samples.size] = samples
        return StaticBuffer(data=data, frames=samples.size)

    @property
    def remaining(self) -> int:
        return self.frames - self.position

    def fill(self, outdata: np.ndarray) -> bool:
        """Copy the next block into ``outdata`` (shape [n, 1]).

        Pads with silence past the end of the clip. Returns False once the
        clip is exhausted.
        """
        n = len(outdata)
        take = min(n, max(self.remaining, 0))

        outdata[:take, 0] = self.data[self.position : self.position + take]
        outdata[take:] = 0.0
        self.position += take

        return self.remaining > 0
