"""Unit tests for ModelLoader."""
from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest.mock import MagicMock

from tts_app.application.errors import LoadError
from tts_app.application.model_loader import ModelLoader
from tts_app.utils.logger import Logger


def _make_session() -> MagicMock:
    session = MagicMock()
    session.input_names = ["input_ids", "attention_mask"]
    session.output_names = ["waveform"]
    return session


class TestModelLoader(unittest.TestCase):
    """Test cases for ModelLoader."""

    def setUp(self):
        """Set up test fixtures."""
        self.factory = MagicMock()
        self.factory.create.side_effect = lambda _bytes: _make_session()
        self.logger = Logger()
        self.loader = ModelLoader(self.factory, logger=self.logger)

    def test_load_creates_session_from_bytes(self):
        """Test that load hands the bytes to the engine and keeps the session."""
        session = self.loader.load(b"model")

        self.factory.create.assert_called_once_with(b"model")
        self.assertIs(self.loader.session, session)
        self.assertTrue(self.loader.is_loaded)

    def test_second_load_closes_first_session(self):
        """Test that reloading leaves exactly one live session."""
        first = self.loader.load(b"one")
        second = self.loader.load(b"two")

        first.close.assert_called_once()
        second.close.assert_not_called()
        self.assertIs(self.loader.session, second)

    def test_failed_load_leaves_no_session(self):
        """Test that a parse failure drops the previous session too."""
        first = self.loader.load(b"one")
        self.factory.create.side_effect = LoadError("bad graph")

        with self.assertRaises(LoadError):
            self.loader.load(b"garbage")

        first.close.assert_called_once()
        self.assertIsNone(self.loader.session)
        self.assertFalse(self.loader.is_loaded)

    def test_load_logs_input_and_output_names(self):
        """Test that the session's tensor names are logged."""
        self.loader.load(b"model")

        joined = "\n".join(self.logger.lines)
        self.assertIn("input_ids, attention_mask", joined)
        self.assertIn("waveform", joined)

    def test_load_file_reads_bytes(self):
        """Test loading a user-selected file."""
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "voice.onnx"
            path.write_bytes(b"\x08\x07onnx")

            self.loader.load_file(path)

        self.factory.create.assert_called_once_with(b"\x08\x07onnx")

    def test_load_missing_file_raises_and_drops_session(self):
        """Test that an unreadable file is a load error."""
        first = self.loader.load(b"one")

        with self.assertRaises(LoadError):
            self.loader.load_file("/nonexistent/model.onnx")

        first.close.assert_called_once()
        self.assertIsNone(self.loader.session)

    def test_load_bundled_uses_configured_path(self):
        """Test the startup path through the bundled resource."""
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "model.onnx"
            path.write_bytes(b"bundled")
            loader = ModelLoader(self.factory, bundled_model_path=path)

            loader.load_bundled()

        self.factory.create.assert_called_once_with(b"bundled")
        self.assertTrue(loader.is_loaded)

    def test_load_bundled_without_path_raises(self):
        """Test that no bundled path is a load error."""
        with self.assertRaises(LoadError):
            self.loader.load_bundled()

    def test_close_releases_session(self):
        """Test that close releases and forgets the session."""
        session = self.loader.load(b"model")

        self.loader.close()
        self.loader.close()

        session.close.assert_called_once()
        self.assertIsNone(self.loader.session)


if __name__ == "__main__":
    unittest.main()
