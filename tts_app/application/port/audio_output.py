from __future__ import annotations

from typing import Protocol

import numpy as np

AudioArray = np.ndarray


class AudioOutput(Protocol):
    sample_rate: int

    def play(self, samples: AudioArray) -> None:
        """Replace any current playback with mono float32 ``samples``."""
        ...

    def wait(self, timeout: float | None = None) -> bool:
        """Block until the current clip has played out."""
        ...

    def stop(self) -> None: ...

    def close(self) -> None: ...
