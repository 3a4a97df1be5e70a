from __future__ import annotations

from typing import Mapping, Sequence

import numpy as np
import onnxruntime as ort

from tts_app.application.errors import LoadError


class OnnxInferenceSession:
    def __init__(self, session: ort.InferenceSession):
        self._session: ort.InferenceSession | None = session

    @property
    def closed(self) -> bool:
        return self._session is None

    @property
    def input_names(self) -> list[str]:
        return [node.name for node in self._require_session().get_inputs()]

    @property
    def output_names(self) -> list[str]:
        return [node.name for node in self._require_session().get_outputs()]

    def run(self, inputs: Mapping[str, np.ndarray]) -> Sequence[object]:
        # None asks onnxruntime for every output, in declaration order.
        return self._require_session().run(None, dict(inputs))

    def close(self) -> None:
        # onnxruntime frees the native session once the last reference is gone.
        self._session = None

    def _require_session(self) -> ort.InferenceSession:
        if self._session is None:
            raise RuntimeError("Inference session is closed.")
        return self._session


class OnnxSessionFactory:
    def __init__(
        self,
        *,
        providers: Sequence[str] = ("CPUExecutionProvider",),
        intra_op_threads: int | None = None,
    ):
        self.providers = list(providers)
        self.intra_op_threads = intra_op_threads

    def create(self, model_bytes: bytes) -> OnnxInferenceSession:
        if not model_bytes:
            raise LoadError("Model file is empty.")

        sess_options = ort.SessionOptions()
        if self.intra_op_threads is not None:
            sess_options.intra_op_num_threads = max(1, self.intra_op_threads)

        try:
            session = ort.InferenceSession(
                bytes(model_bytes),
                sess_options=sess_options,
                providers=self._available_providers(),
            )
        except Exception as e:
            # onnxruntime raises its own pybind exception types for bad graphs.
            raise LoadError(f"onnxruntime could not load the model: {e}") from e

        return OnnxInferenceSession(session)

    def _available_providers(self) -> list[str]:
        available = set(ort.get_available_providers())
        providers = [p for p in self.providers if p in available]
        # Keep CPU as a fallback provider.
        if "CPUExecutionProvider" not in providers:
            providers.append("CPUExecutionProvider")
        return providers
