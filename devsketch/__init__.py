"""DevSketch: turn detected UI elements into Flutter page source.

The pipeline orders detections, groups them into rows, builds a column/row
layout tree and expands a Material 3 widget template for every element.
"""

from .codegen import CodeGenerator, GenerationResult, generate_code, generate_preview
from .layout import RowStrategy
from .vision import Detection, ElementKind, NormalizedRect, classify

__version__ = "1.0.0"

__all__ = [
    "CodeGenerator",
    "Detection",
    "ElementKind",
    "GenerationResult",
    "NormalizedRect",
    "RowStrategy",
    "classify",
    "generate_code",
    "generate_preview",
]
