"""Detection models for DevSketch.

This sub-package describes what the upstream detector hands over: element
kinds, normalized bounding boxes, the label taxonomy and the JSON document
schema.
"""

from .models import Detection, ElementKind, NormalizedRect
from .schemas import DetectionDocument, DetectionRecord, parse_document
from .taxonomy import COCO_DEMO_TAXONOMY, DEFAULT_TAXONOMY, Taxonomy, classify

__all__ = [
    "COCO_DEMO_TAXONOMY",
    "DEFAULT_TAXONOMY",
    "Detection",
    "DetectionDocument",
    "DetectionRecord",
    "ElementKind",
    "NormalizedRect",
    "Taxonomy",
    "classify",
    "parse_document",
]
