from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import numpy as np

from tts_app.application.errors import SynthesisError
from tts_app.application.model_loader import ModelLoader
from tts_app.application.port.audio_output import AudioOutput
from tts_app.application.synthesis_pipeline import SynthesisPipeline


@dataclass
class TtsService:
    loader: ModelLoader
    pipeline: SynthesisPipeline
    speaker: AudioOutput

    @property
    def is_loaded(self) -> bool:
        return self.loader.is_loaded

    def load_model(self, model_bytes: bytes) -> None:
        self.loader.load(model_bytes)

    def load_model_file(self, path: str | Path) -> None:
        self.loader.load_file(path)

    def load_bundled_model(self) -> None:
        self.loader.load_bundled()

    def synthesize(self, text: str) -> np.ndarray:
        """Synthesize ``text`` or raise SynthesisError when nothing came out."""
        if not text:
            raise ValueError("Text must not be empty.")

        audio = self.pipeline.synthesize(text)
        if audio is None or audio.size == 0:
            raise SynthesisError("No audio data generated.")
        return audio

    def play(self, audio: np.ndarray) -> None:
        self.speaker.play(audio)

    def speak(self, text: str) -> int:
        """Synthesize and start playback; returns the number of samples played."""
        audio = self.synthesize(text)
        self.play(audio)
        return int(audio.size)

    def close(self) -> None:
        try:
            self.speaker.close()
        finally:
            self.loader.close()
