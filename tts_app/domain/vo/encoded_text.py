from __future__ import annotations

from dataclasses import dataclass

import numpy as np

INPUT_IDS = "input_ids"
ATTENTION_MASK = "attention_mask"


@dataclass(frozen=True)
class EncodedText:
    """Model-ready encoding of a text: two int64 tensors of shape [1, len(text)]."""

    input_ids: np.ndarray
    attention_mask: np.ndarray

    @property
    def shape(self) -> tuple[int, ...]:
        return tuple(self.input_ids.shape)

    def __len__(self) -> int:
        return int(self.input_ids.shape[-1])

    def as_inputs(self) -> dict[str, np.ndarray]:
        return {
            INPUT_IDS: self.input_ids,
            ATTENTION_MASK: self.attention_mask,
        }
