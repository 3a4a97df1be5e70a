"""Unit tests for the window's view state transitions."""
from __future__ import annotations

import unittest

from tts_app.presentation.view_state import (
    STATUS_LOAD_FAILED,
    STATUS_LOADED,
    STATUS_NO_MODEL,
    STATUS_SYNTHESIS_FAILED,
    Phase,
    ViewState,
)


class TestViewState(unittest.TestCase):
    """Test cases for ViewState."""

    def test_initial_state_disables_synthesis(self):
        """Test that nothing can be synthesized before a model is loaded."""
        state = ViewState()

        self.assertIs(state.phase, Phase.NO_MODEL)
        self.assertEqual(state.status, STATUS_NO_MODEL)
        self.assertFalse(state.synthesize_enabled)
        self.assertTrue(state.load_enabled)
        self.assertFalse(state.busy)

    def test_loading_disables_both_buttons(self):
        """Test that a load in flight blocks another load."""
        state = ViewState().loading_started()

        self.assertTrue(state.busy)
        self.assertFalse(state.load_enabled)
        self.assertFalse(state.synthesize_enabled)

    def test_successful_load_enables_synthesis(self):
        """Test NoModel -> Loading -> ModelLoaded."""
        state = ViewState().loading_started().load_succeeded()

        self.assertIs(state.phase, Phase.MODEL_LOADED)
        self.assertEqual(state.status, STATUS_LOADED)
        self.assertTrue(state.synthesize_enabled)

    def test_failed_reload_drops_back_to_no_model(self):
        """Test that a failed reload leaves nothing usable."""
        state = ViewState().loading_started().load_succeeded()

        state = state.loading_started().load_failed()

        self.assertIs(state.phase, Phase.NO_MODEL)
        self.assertEqual(state.status, STATUS_LOAD_FAILED)
        self.assertFalse(state.synthesize_enabled)
        self.assertTrue(state.load_enabled)

    def test_synthesis_disables_trigger_until_done(self):
        """Test ModelLoaded -> Synthesizing -> ModelLoaded."""
        loaded = ViewState().loading_started().load_succeeded()

        running = loaded.synthesis_started()
        self.assertIs(running.phase, Phase.SYNTHESIZING)
        self.assertFalse(running.synthesize_enabled)
        self.assertTrue(running.busy)

        done = running.synthesis_finished()
        self.assertIs(done.phase, Phase.MODEL_LOADED)
        self.assertTrue(done.synthesize_enabled)

    def test_synthesis_failure_keeps_app_usable(self):
        """Test that a failed synthesis shows an error but allows a retry."""
        state = ViewState().loading_started().load_succeeded().synthesis_started()

        state = state.synthesis_failed()

        self.assertEqual(state.status, STATUS_SYNTHESIS_FAILED)
        self.assertTrue(state.synthesize_enabled)
        self.assertTrue(state.load_enabled)

    def test_synthesis_without_model_rejected(self):
        """Test that synthesis cannot start before a model is loaded."""
        with self.assertRaises(ValueError):
            ViewState().synthesis_started()


if __name__ == "__main__":
    unittest.main()
