"""Unit tests for SynthesisPipeline."""
from __future__ import annotations

import unittest
from unittest.mock import MagicMock

import numpy as np

from tts_app.application.model_loader import ModelLoader
from tts_app.application.synthesis_pipeline import SynthesisPipeline
from tts_app.utils.logger import Logger


class TestSynthesisPipeline(unittest.TestCase):
    """Test cases for SynthesisPipeline."""

    def setUp(self):
        """Set up test fixtures."""
        self.session = MagicMock()
        self.session.input_names = ["input_ids", "attention_mask"]
        self.session.output_names = ["waveform"]

        factory = MagicMock()
        factory.create.return_value = self.session

        self.logger = Logger()
        self.loader = ModelLoader(factory, logger=self.logger)
        self.pipeline = SynthesisPipeline(self.loader, vocab_size=38, logger=self.logger)

    def test_no_session_returns_none(self):
        """Test that synthesis without a loaded model yields no output."""
        self.assertIsNone(self.pipeline.synthesize("Hi"))
        self.session.run.assert_not_called()

    def test_feeds_encoded_text_to_session(self):
        """Test the tensors handed to the engine."""
        self.loader.load(b"model")
        self.session.run.return_value = [np.array([[0.1, 0.2]], dtype=np.float32)]

        self.pipeline.synthesize("Hi")

        inputs = self.session.run.call_args.args[0]
        self.assertEqual(inputs["input_ids"].tolist(), [[34, 29]])
        self.assertEqual(inputs["attention_mask"].tolist(), [[1, 1]])
        self.assertEqual(inputs["input_ids"].dtype, np.int64)

    def test_returns_normalized_waveform(self):
        """Test that the first row of output 0 is normalized."""
        self.loader.load(b"model")
        self.session.run.return_value = [np.array([[0.2, -1.5, 0.9]], dtype=np.float32)]

        audio = self.pipeline.synthesize("Hi")

        np.testing.assert_allclose(audio, [0.2 / 1.5, -1.0, 0.6], rtol=1e-6)

    def test_quiet_waveform_unchanged(self):
        """Test that a waveform within [-1, 1] is not rescaled."""
        self.loader.load(b"model")
        self.session.run.return_value = [np.array([[0.2, -0.5]], dtype=np.float32)]

        audio = self.pipeline.synthesize("Hi")

        np.testing.assert_allclose(audio, [0.2, -0.5])

    def test_wrong_rank_output_returns_none(self):
        """Test that a malformed output tensor gives no output and logs an error."""
        self.loader.load(b"model")
        self.session.run.return_value = [np.zeros((1, 1, 4), dtype=np.float32)]

        self.assertIsNone(self.pipeline.synthesize("Hi"))
        self.assertTrue(any("[ERROR]" in line for line in self.logger.lines))

    def test_engine_failure_returns_none(self):
        """Test that an exception from the engine gives no output."""
        self.loader.load(b"model")
        self.session.run.side_effect = RuntimeError("kernel failed")

        self.assertIsNone(self.pipeline.synthesize("Hi"))

    def test_pipeline_usable_after_failure(self):
        """Test that a failed run does not affect the next one."""
        self.loader.load(b"model")
        self.session.run.side_effect = [
            RuntimeError("kernel failed"),
            [np.array([[0.5]], dtype=np.float32)],
        ]

        self.assertIsNone(self.pipeline.synthesize("Hi"))
        np.testing.assert_allclose(self.pipeline.synthesize("Hi"), [0.5])


if __name__ == "__main__":
    unittest.main()
