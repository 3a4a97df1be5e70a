from __future__ import annotations

import math
from threading import Lock

import numpy as np
import sounddevice as sd

from tts_app.application.errors import PlaybackError
from tts_app.domain.audio_format import (
    BYTES_PER_SAMPLE,
    CHANNELS,
    SAMPLE_RATE,
    StaticBuffer,
    playback_buffer_size,
)
from tts_app.utils.logger import Logger

_AUDIO_ERRORS = (sd.PortAudioError, OSError, RuntimeError, ValueError)


class Speaker:
    """Plays one clip at a time from a buffer filled before the stream starts."""

    def __init__(
        self,
        *,
        sample_rate: int = SAMPLE_RATE,
        device: int | str | None = None,
        logger: Logger | None = None,
    ):
        self.sample_rate = sample_rate
        self.device = device
        self.logger = logger

        self._lock = Lock()
        self._stream: sd.OutputStream | None = None
        self._track: StaticBuffer | None = None

    @property
    def is_active(self) -> bool:
        with self._lock:
            return self._stream is not None and bool(self._stream.active)

    def min_buffer_size(self) -> int:
        """Smallest buffer (bytes) the output device accepts at low latency."""
        try:
            info = sd.query_devices(self.device, "output")
        except _AUDIO_ERRORS as e:
            raise PlaybackError(f"No usable audio output device: {e}") from e

        latency = float(info["default_low_output_latency"])
        frames = max(1, math.ceil(latency * self.sample_rate))
        return frames * BYTES_PER_SAMPLE * CHANNELS

    def play(self, samples: np.ndarray) -> None:
        audio = np.asarray(samples, dtype=np.float32).reshape(-1)
        self._log(f"Starting playback: {audio.size} samples")

        self.stop()

        # Sizes the static clip buffer only; PortAudio chooses its own host buffering.
        buffer_size = playback_buffer_size(audio.size, self.min_buffer_size())
        track = StaticBuffer.write(audio, buffer_size)

        def callback(outdata, frames, time, status) -> None:
            if not track.fill(outdata):
                raise sd.CallbackStop

        try:
            stream = sd.OutputStream(
                samplerate=self.sample_rate,
                channels=CHANNELS,
                dtype="float32",
                device=self.device,
                callback=callback,
                finished_callback=track.finished.set,
            )
        except _AUDIO_ERRORS as e:
            raise PlaybackError(f"Could not open audio output: {e}") from e

        try:
            stream.start()
        except _AUDIO_ERRORS as e:
            stream.close()
            raise PlaybackError(f"Could not start audio output: {e}") from e

        with self._lock:
            self._stream = stream
            self._track = track

        self._log(f"Playback started (buffer={buffer_size} bytes)")

    def wait(self, timeout: float | None = None) -> bool:
        """Block until the current clip has played out."""
        with self._lock:
            track = self._track
        if track is None:
            return True
        return track.finished.wait(timeout)

    def stop(self) -> None:
        with self._lock:
            stream, self._stream = self._stream, None
            track, self._track = self._track, None

        if stream is None:
            return

        try:
            stream.abort()
            stream.close()
        except _AUDIO_ERRORS as e:
            # The handle is dropped even when releasing it fails.
            if self.logger:
                self.logger.error("[Speaker] Failed to release audio stream", e)
        finally:
            if track is not None:
                track.finished.set()

    def close(self) -> None:
        self.stop()

    def _log(self, message: str) -> None:
        if self.logger:
            self.logger.debug(f"[Speaker] {message}")
