from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv as dotenv_load_dotenv


def load_dotenv(env_file: str | None) -> bool:
    """Load environment variables from a dotenv file if present.

    Existing environment variables win over values from the file. Returns
    whether a file was actually read.
    """

    if not env_file:
        return False
    if not Path(env_file).is_file():
        return False

    return dotenv_load_dotenv(env_file, override=False)
