"""File utility functions for DevSketch."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Optional

from ..core.logger import log


def ensure_directory(directory_path: str) -> str:
    """Ensure a directory exists, creating it if necessary.

    Args:
        directory_path: Path to the directory.

    Returns:
        Absolute path to the directory.
    """
    path = Path(directory_path).resolve()
    path.mkdir(parents=True, exist_ok=True)
    return str(path)


def load_json(filepath: str) -> Optional[Any]:
    """Load data from a JSON file.

    Args:
        filepath: Path to the JSON file.

    Returns:
        Loaded data or None if failed.
    """
    try:
        if not os.path.exists(filepath):
            log.warning(f"JSON file not found: {filepath}")
            return None

        with open(filepath, 'r', encoding='utf-8') as f:
            data = json.load(f)

        log.debug(f"Data loaded from {filepath}")
        return data

    except (OSError, ValueError) as e:
        log.error(f"Failed to load JSON from {filepath}: {e}")
        return None


def save_text(text: str, filepath: str) -> bool:
    """Write generated source to a file, with a trailing newline.

    Args:
        text: Text to write.
        filepath: Destination path.

    Returns:
        True if save successful, False otherwise.
    """
    try:
        directory = os.path.dirname(filepath)
        if directory:
            ensure_directory(directory)

        with open(filepath, 'w', encoding='utf-8') as f:
            f.write(text if text.endswith("\n") else text + "\n")

        log.debug(f"Source saved to {filepath}")
        return True

    except OSError as e:
        log.error(f"Failed to save source to {filepath}: {e}")
        return False
