from __future__ import annotations

from pathlib import Path

from tts_app.application.errors import LoadError
from tts_app.application.port.inference_session import InferenceSession, SessionFactory
from tts_app.infrastructure.storage.model_file import read_model_bytes
from tts_app.utils.logger import Logger


class ModelLoader:
    """Owns the single live inference session.

    Loading always releases the previous session first. A failed load leaves
    no session at all; the old one is not restored.
    """

    def __init__(
        self,
        session_factory: SessionFactory,
        *,
        bundled_model_path: str | Path | None = None,
        logger: Logger | None = None,
    ) -> None:
        self.session_factory = session_factory
        self.bundled_model_path = Path(bundled_model_path) if bundled_model_path else None
        self.logger = logger
        self._session: InferenceSession | None = None

    @property
    def session(self) -> InferenceSession | None:
        return self._session

    @property
    def is_loaded(self) -> bool:
        return self._session is not None

    def load(self, model_bytes: bytes) -> InferenceSession:
        self._log(f"Model size: {len(model_bytes) // 1024}KB")
        self.close()

        try:
            session = self.session_factory.create(model_bytes)
        except LoadError as e:
            self._error("Failed to load model", e)
            raise

        self._session = session
        self._log(f"Model loaded. Input names: {', '.join(session.input_names)}")
        self._log(f"Output names: {', '.join(session.output_names)}")
        return session

    def load_file(self, path: str | Path) -> InferenceSession:
        self._log(f"Model path: {path}")
        try:
            model_bytes = read_model_bytes(path)
        except LoadError as e:
            # Same outcome as a parse failure: no usable session afterwards.
            self.close()
            self._error("Failed to read model", e)
            raise
        return self.load(model_bytes)

    def load_bundled(self) -> InferenceSession:
        if self.bundled_model_path is None:
            e = LoadError("No bundled model is configured.")
            self._error("Failed to load bundled model", e)
            raise e
        return self.load_file(self.bundled_model_path)

    def close(self) -> None:
        session, self._session = self._session, None
        if session is not None:
            session.close()

    def _log(self, message: str) -> None:
        if self.logger:
            self.logger.debug(f"[Loader] {message}")

    def _error(self, message: str, exc: BaseException) -> None:
        if self.logger:
            self.logger.error(f"[Loader] {message}", exc)
