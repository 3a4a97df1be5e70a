from __future__ import annotations

from typing import Mapping, Protocol, Sequence

import numpy as np


class InferenceSession(Protocol):
    @property
    def input_names(self) -> list[str]: ...

    @property
    def output_names(self) -> list[str]: ...

    def run(self, inputs: Mapping[str, np.ndarray]) -> Sequence[object]:
        """Execute the graph and return the outputs in declaration order."""
        ...

    def close(self) -> None:
        """Release the engine resources held by this session."""
        ...


class SessionFactory(Protocol):
    def create(self, model_bytes: bytes) -> InferenceSession:
        """Parse serialized model bytes into a ready session.

        Raises LoadError when the engine rejects the bytes.
        """
        ...
