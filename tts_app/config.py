from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_MODEL_PATH = "assets/model.onnx"
DEFAULT_VOCAB_SIZE = 38
DEFAULT_SAMPLE_RATE = 22_050
DEFAULT_PROVIDERS = ("CPUExecutionProvider",)
DEFAULT_LOG_DIR = "logs"


def _env_positive_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default

    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer.") from exc

    if value <= 0:
        raise ValueError(f"{name} must be greater than zero.")
    return value


def _env_list(name: str) -> tuple[str, ...]:
    raw = os.getenv(name, "")
    return tuple(item.strip() for item in raw.split(",") if item.strip())


@dataclass(frozen=True)
class ModelConfig:
    path: Path = Path(DEFAULT_MODEL_PATH)
    vocab_size: int = DEFAULT_VOCAB_SIZE
    providers: tuple[str, ...] = DEFAULT_PROVIDERS


@dataclass(frozen=True)
class AudioConfig:
    sample_rate: int = DEFAULT_SAMPLE_RATE


@dataclass(frozen=True)
class AppConfig:
    model: ModelConfig = field(default_factory=ModelConfig)
    audio: AudioConfig = field(default_factory=AudioConfig)
    log_dir: Path = Path(DEFAULT_LOG_DIR)

    @staticmethod
    def from_env() -> "AppConfig":
        model_path = os.getenv("TTS_APP_MODEL_PATH") or DEFAULT_MODEL_PATH
        vocab_size = _env_positive_int("TTS_APP_VOCAB_SIZE", DEFAULT_VOCAB_SIZE)
        sample_rate = _env_positive_int("TTS_APP_SAMPLE_RATE", DEFAULT_SAMPLE_RATE)
        providers = _env_list("TTS_APP_PROVIDERS") or DEFAULT_PROVIDERS
        log_dir = os.getenv("TTS_APP_LOG_DIR") or DEFAULT_LOG_DIR

        return AppConfig(
            model=ModelConfig(
                path=Path(model_path),
                vocab_size=vocab_size,
                providers=providers,
            ),
            audio=AudioConfig(sample_rate=sample_rate),
            log_dir=Path(log_dir),
        )

    def with_model_path(self, path: str | Path) -> "AppConfig":
        return AppConfig(
            model=ModelConfig(
                path=Path(path),
                vocab_size=self.model.vocab_size,
                providers=self.model.providers,
            ),
            audio=self.audio,
            log_dir=self.log_dir,
        )
