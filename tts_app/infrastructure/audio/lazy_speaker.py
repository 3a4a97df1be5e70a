from __future__ import annotations

import numpy as np

from tts_app.application.errors import PlaybackError
from tts_app.application.port.audio_output import AudioOutput
from tts_app.utils.logger import Logger


def _import_speaker_class() -> type:
    # sounddevice loads the PortAudio shared library at import time.
    from tts_app.infrastructure.audio.speaker import Speaker

    return Speaker


class LazySpeaker:
    """Opens the audio backend on the first clip instead of at startup.

    A missing PortAudio library then surfaces as a PlaybackError for that
    clip, and the rest of the app keeps working.
    """

    def __init__(self, *, sample_rate: int, logger: Logger | None = None):
        self.sample_rate = sample_rate
        self.logger = logger
        self._speaker: AudioOutput | None = None

    def play(self, samples: np.ndarray) -> None:
        self._require_speaker().play(samples)

    def wait(self, timeout: float | None = None) -> bool:
        if self._speaker is None:
            return True
        return self._speaker.wait(timeout)

    def stop(self) -> None:
        if self._speaker is not None:
            self._speaker.stop()

    def close(self) -> None:
        if self._speaker is not None:
            self._speaker.close()

    def _require_speaker(self) -> AudioOutput:
        if self._speaker is None:
            try:
                speaker_class = _import_speaker_class()
            except OSError as e:
                raise PlaybackError(f"Audio backend unavailable: {e}") from e
            self._speaker = speaker_class(sample_rate=self.sample_rate, logger=self.logger)
        return self._speaker
