"""Pydantic models for detection documents handed over by the detector."""

from __future__ import annotations

from typing import Any, List, Literal, Optional

from pydantic import BaseModel, Field, ValidationError, model_validator

from ..core.errors import PayloadError
from ..core.logger import log
from .models import Detection, ElementKind, NormalizedRect
from .taxonomy import get_taxonomy

BBoxFormat = Literal["normalized_xywh", "normalized_xyxy", "pixel_xyxy"]
Origin = Literal["top_left", "bottom_left"]


class DetectionRecord(BaseModel):
    """One detected element as serialized by the detector."""

    kind: Optional[str] = None
    class_name: Optional[str] = None
    label: Optional[str] = None
    confidence: float = Field(default=1.0, ge=0.0, le=1.0)
    bbox: List[float] = Field(min_length=4, max_length=4)
    bbox_format: BBoxFormat = "normalized_xywh"
    origin: Origin = "top_left"

    def resolve_kind(self, taxonomy_name: str = "ui") -> ElementKind:
        """Use the explicit kind when it names one, otherwise classify the raw labels."""
        if self.kind:
            explicit = ElementKind.from_name(self.kind)
            if explicit is not None:
                return explicit
        raw = self.class_name or self.kind or self.label or ""
        return get_taxonomy(taxonomy_name).classify(raw)

    def to_rect(self, image_width: Optional[float] = None, image_height: Optional[float] = None) -> NormalizedRect:
        """Convert the stored bbox to a top-left normalized rectangle."""
        a, b, c, d = self.bbox
        if self.bbox_format == "normalized_xyxy":
            rect = NormalizedRect.from_xyxy(a, b, c, d)
        elif self.bbox_format == "pixel_xyxy":
            if not image_width or not image_height:
                raise ValueError("pixel_xyxy boxes need image_width and image_height")
            rect = NormalizedRect.from_pixel_box(a, b, c, d, image_width, image_height)
        else:
            rect = NormalizedRect(x=a, y=b, width=c, height=d)

        if self.origin == "bottom_left":
            rect = rect.flipped()
        return rect


class DetectionDocument(BaseModel):
    """A full detection run: the elements plus optional page metadata."""

    page_name: Optional[str] = None
    image_width: Optional[float] = Field(default=None, gt=0)
    image_height: Optional[float] = Field(default=None, gt=0)
    taxonomy: str = "ui"
    detections: List[DetectionRecord] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _accept_bare_list(cls, data: Any) -> Any:
        if isinstance(data, list):
            return {"detections": data}
        return data

    @model_validator(mode="after")
    def _check_pixel_boxes(self) -> DetectionDocument:
        needs_size = any(record.bbox_format == "pixel_xyxy" for record in self.detections)
        if needs_size and (self.image_width is None or self.image_height is None):
            raise ValueError("pixel_xyxy detections require image_width and image_height")
        return self

    def to_detections(self, min_confidence: float = 0.0) -> list[Detection]:
        """Build :class:`Detection` objects, dropping low-confidence records."""
        detections: list[Detection] = []
        dropped = 0
        for record in self.detections:
            if record.confidence < min_confidence:
                dropped += 1
                continue
            detections.append(
                Detection(
                    kind=record.resolve_kind(self.taxonomy),
                    bounding_box=record.to_rect(self.image_width, self.image_height),
                    confidence=record.confidence,
                    label=record.label,
                )
            )
        if dropped:
            log.debug(f"Dropped {dropped} detections below confidence {min_confidence:.2f}")
        return detections


def parse_document(data: Any, source: Optional[str] = None) -> DetectionDocument:
    """Validate raw JSON data as a :class:`DetectionDocument`.

    Raises:
        PayloadError: If the data does not describe a detection document.
    """
    try:
        return DetectionDocument.model_validate(data)
    except ValidationError as e:
        raise PayloadError(f"invalid detection document ({e.error_count()} errors): {e}", source) from e
