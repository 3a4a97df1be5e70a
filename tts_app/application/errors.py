from __future__ import annotations


class TtsAppError(RuntimeError):
    """Base class for failures reported to the user (never fatal)."""


class LoadError(TtsAppError):
    """Raised when a model cannot be read or parsed by the inference engine."""


class SynthesisError(TtsAppError):
    """Raised when no usable audio could be produced for a text."""


class PlaybackError(TtsAppError):
    """Raised when the audio device or its buffer cannot be set up."""
