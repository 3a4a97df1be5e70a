from __future__ import annotations

import argparse


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Load an ONNX speech model and speak text through the default output device.",
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to .env file (default: .env). Use empty to disable.",
    )
    parser.add_argument(
        "--model",
        default=None,
        help="Model file to load at startup (overrides TTS_APP_MODEL_PATH).",
    )

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--say",
        metavar="TEXT",
        default=None,
        help="Speak TEXT without opening the window, then exit.",
    )
    mode.add_argument(
        "--inspect",
        action="store_true",
        help="Print the model's input and output names, then exit.",
    )
    return parser.parse_args(argv)
