"""Data models for detected UI elements."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ElementKind(Enum):
    """Closed set of semantic UI element categories."""

    BUTTON = "button"
    TEXT_FIELD = "text_field"
    TEXT = "text"
    CONTAINER = "container"
    IMAGE = "image"
    ICON = "icon"
    CHECKBOX = "checkbox"
    SWITCH = "switch"
    DRAWER = "drawer"
    MODAL = "modal"
    PAGE_INDICATOR = "page_indicator"
    STATUS_BAR = "status_bar"
    UNKNOWN = "unknown"

    @property
    def display_name(self) -> str:
        """Human readable name, e.g. ``"text field"`` for ``TEXT_FIELD``."""
        return self.value.replace("_", " ")

    @classmethod
    def from_name(cls, name: str) -> Optional[ElementKind]:
        """Look up a kind by value or member name, ignoring case."""
        key = name.strip().lower().replace("-", "_").replace(" ", "_")
        for kind in cls:
            if kind.value == key:
                return kind
        return None


@dataclass(frozen=True, slots=True)
class NormalizedRect:
    """Axis-aligned rectangle in normalized ``[0, 1]`` coordinates, top-left origin.

    Values are not range-checked: upstream detectors occasionally report boxes
    that spill past the image edge and the layout pipeline tolerates them.
    """

    x: float
    y: float
    width: float
    height: float

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @classmethod
    def from_xyxy(cls, x1: float, y1: float, x2: float, y2: float) -> NormalizedRect:
        """Build from normalized ``(x_min, y_min, x_max, y_max)`` corners."""
        return cls(x=x1, y=y1, width=x2 - x1, height=y2 - y1)

    @classmethod
    def from_pixel_box(
        cls,
        left: float,
        top: float,
        right: float,
        bottom: float,
        image_width: float,
        image_height: float,
    ) -> NormalizedRect:
        """Normalize a pixel ``(left, top, right, bottom)`` box against the image size."""
        if image_width <= 0 or image_height <= 0:
            raise ValueError("Image dimensions must be positive")
        return cls(
            x=left / image_width,
            y=top / image_height,
            width=(right - left) / image_width,
            height=(bottom - top) / image_height,
        )

    def flipped(self) -> NormalizedRect:
        """Convert between bottom-left and top-left origin conventions."""
        return NormalizedRect(x=self.x, y=1.0 - self.y - self.height, width=self.width, height=self.height)

    def as_tuple(self) -> tuple[float, float, float, float]:
        """Return rectangle as ``(x, y, width, height)`` tuple."""
        return self.x, self.y, self.width, self.height


@dataclass(frozen=True, slots=True)
class Detection:
    """A classified UI element produced by the upstream object detector."""

    kind: ElementKind
    bounding_box: NormalizedRect
    confidence: float = 1.0
    label: Optional[str] = None

    @property
    def display_text(self) -> str:
        """Text shown by the generated widget: the label, else the kind's title-cased name."""
        if self.label is not None and self.label.strip():
            return self.label.strip()
        return self.kind.display_name.title()
