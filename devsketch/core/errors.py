"""Exceptions raised at the DevSketch input boundary."""

from __future__ import annotations


class DevSketchError(RuntimeError):
    """Base exception for DevSketch errors."""


class PayloadError(DevSketchError):
    """Raised when a detection document cannot be read or validated."""

    def __init__(self, message: str, source: str | None = None) -> None:
        self.source = source
        if source:
            message = f"{source}: {message}"
        super().__init__(message)
