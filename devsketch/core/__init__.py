"""Core components of the DevSketch code generator."""

from .config import Config, config
from .errors import DevSketchError, PayloadError
from .logger import Logger, log

__all__ = [
    "Config",
    "DevSketchError",
    "Logger",
    "PayloadError",
    "config",
    "log",
]
