"""Utility functions for DevSketch."""

from .file_utils import ensure_directory, load_json, save_text

__all__ = [
    "ensure_directory",
    "load_json",
    "save_text",
]
