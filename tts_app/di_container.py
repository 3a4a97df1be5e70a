from __future__ import annotations

from dataclasses import dataclass

from tts_app.application.model_loader import ModelLoader
from tts_app.application.port.audio_output import AudioOutput
from tts_app.application.port.inference_session import SessionFactory
from tts_app.application.synthesis_pipeline import SynthesisPipeline
from tts_app.application.tts_service import TtsService
from tts_app.config import AppConfig
from tts_app.infrastructure.audio.lazy_speaker import LazySpeaker
from tts_app.utils.logger import Logger


@dataclass(frozen=True)
class AppContainer:
    config: AppConfig
    logger: Logger
    session_factory: SessionFactory
    loader: ModelLoader
    pipeline: SynthesisPipeline
    speaker: AudioOutput
    tts_service: TtsService


def build_container(
    config: AppConfig,
    *,
    logger: Logger | None = None,
    session_factory: SessionFactory | None = None,
    speaker: AudioOutput | None = None,
) -> AppContainer:
    logger = logger or Logger(log_dir=config.log_dir)

    if session_factory is None:
        from tts_app.infrastructure.onnx.inference_session import OnnxSessionFactory

        session_factory = OnnxSessionFactory(providers=config.model.providers)

    if speaker is None:
        speaker = LazySpeaker(sample_rate=config.audio.sample_rate, logger=logger)

    loader = ModelLoader(
        session_factory,
        bundled_model_path=config.model.path,
        logger=logger,
    )

    pipeline = SynthesisPipeline(
        loader,
        vocab_size=config.model.vocab_size,
        logger=logger,
    )

    tts_service = TtsService(
        loader=loader,
        pipeline=pipeline,
        speaker=speaker,
    )

    return AppContainer(
        config=config,
        logger=logger,
        session_factory=session_factory,
        loader=loader,
        pipeline=pipeline,
        speaker=speaker,
        tts_service=tts_service,
    )
