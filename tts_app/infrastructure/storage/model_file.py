from __future__ import annotations

from pathlib import Path

from tts_app.application.errors import LoadError


def read_model_bytes(path: str | Path) -> bytes:
    """Read a whole model file into memory."""
    path = Path(path)
    try:
        with path.open("rb") as f:
            return f.read()
    except FileNotFoundError as e:
        raise LoadError(f"Model file not found: {path}") from e
    except OSError as e:
        raise LoadError(f"Could not read model file {path}: {e}") from e
