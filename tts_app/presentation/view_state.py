from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class Phase(Enum):
    NO_MODEL = "no_model"
    LOADING = "loading"
    MODEL_LOADED = "model_loaded"
    SYNTHESIZING = "synthesizing"


STATUS_NO_MODEL = "No model loaded"
STATUS_LOADING = "Loading model..."
STATUS_LOADED = "Model loaded"
STATUS_LOAD_FAILED = "Error loading model"
STATUS_SYNTHESIZING = "Synthesizing..."
STATUS_SYNTHESIS_FAILED = "Error during synthesis"


@dataclass(frozen=True)
class ViewState:
    """What the window shows; every transition returns a new state."""

    phase: Phase = Phase.NO_MODEL
    status: str = STATUS_NO_MODEL

    @property
    def busy(self) -> bool:
        return self.phase in (Phase.LOADING, Phase.SYNTHESIZING)

    @property
    def load_enabled(self) -> bool:
        return not self.busy

    @property
    def synthesize_enabled(self) -> bool:
        return self.phase is Phase.MODEL_LOADED

    def loading_started(self) -> "ViewState":
        return replace(self, phase=Phase.LOADING, status=STATUS_LOADING)

    def load_succeeded(self) -> "ViewState":
        return replace(self, phase=Phase.MODEL_LOADED, status=STATUS_LOADED)

    def load_failed(self) -> "ViewState":
        # The previous session is released before loading, so nothing is usable now.
        return replace(self, phase=Phase.NO_MODEL, status=STATUS_LOAD_FAILED)

    def synthesis_started(self) -> "ViewState":
        if self.phase is not Phase.MODEL_LOADED:
            raise ValueError(f"Cannot synthesize while {self.phase.value}.")
        return replace(self, phase=Phase.SYNTHESIZING, status=STATUS_SYNTHESIZING)

    def synthesis_finished(self) -> "ViewState":
        return replace(self, phase=Phase.MODEL_LOADED, status=STATUS_LOADED)

    def synthesis_failed(self) -> "ViewState":
        return replace(self, phase=Phase.MODEL_LOADED, status=STATUS_SYNTHESIS_FAILED)
