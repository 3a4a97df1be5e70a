from __future__ import annotations

import numpy as np

from tts_app.application.model_loader import ModelLoader
from tts_app.domain.tokenizer import encode
from tts_app.domain.waveform import extract_waveform, normalize, peak
from tts_app.utils.logger import Logger


class SynthesisPipeline:
    def __init__(
        self,
        loader: ModelLoader,
        *,
        vocab_size: int,
        logger: Logger | None = None,
    ) -> None:
        self.loader = loader
        self.vocab_size = vocab_size
        self.logger = logger

    def synthesize(self, text: str) -> np.ndarray | None:
        """Run the loaded model on ``text``.

        Returns the peak-normalized waveform, or None when there is no session
        or the model produced nothing usable. Never raises for engine failures.
        """
        self._log(f"Starting synthesis for: '{text}'")

        session = self.loader.session
        if session is None:
            self._error("No session available; is a model loaded?")
            return None

        encoded = encode(text, self.vocab_size)
        self._log(f"Tokens: {encoded.input_ids[0].tolist()}")
        self._log(f"Input shape: input_ids={list(encoded.shape)}")

        try:
            outputs = session.run(encoded.as_inputs())
        except Exception as e:
            self._error("Inference failed", e)
            return None

        self._log(f"Inference done, outputs: {len(outputs)}")

        waveform = extract_waveform(outputs)
        if waveform is None:
            self._error(f"Output 0 is not a [1, samples] float tensor ({_describe(outputs)})")
            return None

        self._log(f"Audio generated: {waveform.size} samples, peak={peak(waveform):.4f}")
        return normalize(waveform)

    def _log(self, message: str) -> None:
        if self.logger:
            self.logger.debug(f"[Synth] {message}")

    def _error(self, message: str, exc: BaseException | None = None) -> None:
        if self.logger:
            self.logger.error(f"[Synth] {message}", exc)


def _describe(outputs) -> str:
    if not outputs:
        return "no outputs"
    first = outputs[0]
    if isinstance(first, np.ndarray):
        return f"shape={list(first.shape)}, dtype={first.dtype}"
    return f"type={type(first).__name__}"
