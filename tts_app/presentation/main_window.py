from __future__ import annotations

import numpy as np
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import (
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QProgressBar,
    QPushButton,
    QTextEdit,
    QVBoxLayout,
    QWidget,
)

from tts_app.application.errors import PlaybackError
from tts_app.application.tts_service import TtsService
from tts_app.presentation.view_state import ViewState
from tts_app.presentation.workers import LoadModelWorker, LogBridge, SynthesisWorker
from tts_app.utils.logger import Logger

SHORT_NOTICE_MS = 2_000
LONG_NOTICE_MS = 3_500


class MainWindow(QMainWindow):
    def __init__(self, service: TtsService, logger: Logger):
        super().__init__()
        self.service = service
        self.logger = logger
        self.state = ViewState()

        self._load_worker: LoadModelWorker | None = None
        self._synthesis_worker: SynthesisWorker | None = None

        self.setWindowTitle("TTS App")
        self.resize(600, 400)

        self._setup_widgets()

        self._log_bridge = LogBridge()
        self._log_bridge.message.connect(self.append_log)
        self.logger.on_emit = self._log_bridge.message.emit

        self.render()

    def _setup_widgets(self) -> None:
        self.load_model_button = QPushButton("Load model")
        self.load_model_button.clicked.connect(self.open_model_chooser)

        self.model_status = QLabel()

        self.progress_bar = QProgressBar()
        # min == max == 0 shows the busy indicator.
        self.progress_bar.setRange(0, 0)

        self.input_text = QLineEdit()
        self.input_text.setPlaceholderText("Text to speak")
        self.input_text.returnPressed.connect(self.synthesize_text)

        self.synthesize_button = QPushButton("Synthesize")
        self.synthesize_button.clicked.connect(self.synthesize_text)

        self.log_view = QTextEdit()
        self.log_view.setReadOnly(True)

        model_row = QHBoxLayout()
        model_row.addWidget(self.load_model_button)
        model_row.addWidget(self.model_status, stretch=1)

        text_row = QHBoxLayout()
        text_row.addWidget(self.input_text, stretch=1)
        text_row.addWidget(self.synthesize_button)

        layout = QVBoxLayout()
        layout.addLayout(model_row)
        layout.addLayout(text_row)
        layout.addWidget(self.progress_bar)
        layout.addWidget(self.log_view, stretch=1)

        central = QWidget()
        central.setLayout(layout)
        self.setCentralWidget(central)

    def render(self) -> None:
        self.model_status.setText(self.state.status)
        self.load_model_button.setEnabled(self.state.load_enabled)
        self.synthesize_button.setEnabled(self.state.synthesize_enabled)
        self.progress_bar.setVisible(self.state.busy)

    def notify(self, message: str, *, long: bool = False) -> None:
        self.statusBar().showMessage(message, LONG_NOTICE_MS if long else SHORT_NOTICE_MS)

    def append_log(self, text: str) -> None:
        self.log_view.append(text)

    def load_bundled_model(self) -> None:
        self._start_load(None)

    def open_model_chooser(self) -> None:
        path, _ = QFileDialog.getOpenFileName(
            self,
            "Select model",
            "",
            "ONNX models (*.onnx);;All files (*)",
        )
        if path:
            self._start_load(path)

    def _start_load(self, path: str | None) -> None:
        if self.state.busy:
            return

        self.state = self.state.loading_started()
        self.render()

        worker = LoadModelWorker(self.service, path, logger=self.logger)
        worker.succeeded.connect(self.on_load_succeeded)
        if path is None:
            worker.failed.connect(self.on_bundled_load_failed)
        else:
            worker.failed.connect(self.on_load_failed)
        self._load_worker = worker
        worker.start()

    def on_load_succeeded(self) -> None:
        self.state = self.state.load_succeeded()
        self.render()
        self.notify("Model loaded successfully")

    def on_load_failed(self, message: str) -> None:
        self.state = self.state.load_failed()
        self.render()
        self.notify(f"Error while loading: {message}", long=True)

    def on_bundled_load_failed(self, message: str) -> None:
        self.state = self.state.load_failed()
        self.render()
        self.notify("No bundled model found, please load one manually", long=True)

    def synthesize_text(self) -> None:
        text = self.input_text.text()
        if not text:
            self.notify("Please enter some text")
            return
        if not self.state.synthesize_enabled:
            return

        self.state = self.state.synthesis_started()
        self.render()

        worker = SynthesisWorker(self.service, text, logger=self.logger)
        worker.succeeded.connect(self.on_synthesis_succeeded)
        worker.failed.connect(self.on_synthesis_failed)
        self._synthesis_worker = worker
        worker.start()

    def on_synthesis_succeeded(self, audio: np.ndarray) -> None:
        try:
            self.service.play(audio)
        except PlaybackError as e:
            self.logger.error("[Speaker] Playback failed", e)
            self.on_synthesis_failed(str(e))
            return

        self.state = self.state.synthesis_finished()
        self.render()
        self.notify("Speaking text")

    def on_synthesis_failed(self, message: str) -> None:
        self.state = self.state.synthesis_failed()
        self.render()
        self.notify(f"Error during synthesis: {message}", long=True)

    def closeEvent(self, event: QCloseEvent) -> None:
        for worker in (self._load_worker, self._synthesis_worker):
            if worker is not None:
                # No cancellation: an in-flight load or synthesis runs to completion.
                worker.wait()
        self.logger.on_emit = None
        self.service.close()
        super().closeEvent(event)
