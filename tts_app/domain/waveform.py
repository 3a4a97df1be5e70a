from __future__ import annotations

from typing import Sequence

import numpy as np


def extract_waveform(outputs: Sequence[object]) -> np.ndarray | None:
    """Return ``outputs[0][0]`` as float32 if it is a flat float sequence.

    The waveform is expected in the first output as a [batch, samples] float
    tensor. Anything else (no outputs, wrong rank, integer data) gives None.
    """
    if not outputs:
        return None

    first = outputs[0]
    if not isinstance(first, np.ndarray):
        return None
    if first.ndim != 2 or first.shape[0] == 0:
        return None
    if not np.issubdtype(first.dtype, np.floating):
        return None

    return np.asarray(first[0], dtype=np.float32)


def peak(samples: np.ndarray) -> float:
    if samples.size == 0:
        return 0.0
    return float(np.max(np.abs(samples)))


def normalize(samples: np.ndarray) -> np.ndarray:
    """Scale into [-1, 1] by the peak magnitude, only when it exceeds 1.0."""
    max_value = peak(samples)
    if max_value > 1.0:
        return (samples / max_value).astype(np.float32, copy=False)
    return samples
