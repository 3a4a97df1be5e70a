from __future__ import annotations

from pathlib import Path

from PySide6.QtCore import QObject, QThread, Signal

from tts_app.application.errors import TtsAppError
from tts_app.application.tts_service import TtsService
from tts_app.utils.logger import Logger


class LogBridge(QObject):
    """Carries logger lines from worker threads to the GUI thread."""

    message = Signal(str)


class LoadModelWorker(QThread):
    succeeded = Signal()
    failed = Signal(str)

    def __init__(
        self,
        service: TtsService,
        path: str | Path | None = None,
        logger: Logger | None = None,
    ):
        super().__init__()
        self.service = service
        # None means the bundled model.
        self.path = path
        self.logger = logger

    def run(self) -> None:
        try:
            if self.path is None:
                self.service.load_bundled_model()
            else:
                self.service.load_model_file(self.path)
        except TtsAppError as e:
            # Already logged by the loader.
            self.failed.emit(str(e))
        except Exception as e:
            if self.logger:
                self.logger.error("Unexpected error while loading model", e)
            self.failed.emit(f"Unexpected error: {e}")
        else:
            self.succeeded.emit()


class SynthesisWorker(QThread):
    succeeded = Signal(object)
    failed = Signal(str)

    def __init__(self, service: TtsService, text: str, logger: Logger | None = None):
        super().__init__()
        self.service = service
        self.text = text
        self.logger = logger

    def run(self) -> None:
        try:
            audio = self.service.synthesize(self.text)
        except TtsAppError as e:
            # The pipeline has logged the cause.
            self.failed.emit(str(e))
        except Exception as e:
            if self.logger:
                self.logger.error("Unexpected error during synthesis", e)
            self.failed.emit(f"Unexpected error: {e}")
        else:
            self.succeeded.emit(audio)
