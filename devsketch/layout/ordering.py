"""Reading order and row segmentation for detected elements.

Sorting and row grouping share one scan so they can never disagree: the
reading order *is* the concatenation of the rows, each row read left to
right. The scan walks detections top to bottom and starts a new row whenever
the vertical distance to the reference ``y`` reaches ``row_threshold``.

With :attr:`RowStrategy.DRIFTING` the reference is the previous detection's
``y``, so a dense diagonal run can chain into one row even when its ends are
further apart than the threshold. :attr:`RowStrategy.ANCHORED` compares
against the first ``y`` of the current row instead.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Iterable, Optional, Tuple, Union

from ..core.config import config
from ..vision.models import Detection

Row = Tuple[Detection, ...]


class RowStrategy(Enum):
    """Which ``y`` a detection is compared against when grouping rows."""

    DRIFTING = "drifting"
    ANCHORED = "anchored"

    @classmethod
    def parse(cls, value: Union[str, RowStrategy, None]) -> RowStrategy:
        if value is None:
            value = config.row_strategy
        if isinstance(value, RowStrategy):
            return value
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown row strategy: {value!r}") from None


def _finite(value: float) -> float:
    return value if math.isfinite(value) else 0.0


def _tie_break(detection: Detection) -> tuple:
    box = detection.bounding_box
    return (
        _finite(box.height),
        _finite(box.width),
        detection.kind.value,
        detection.label or "",
        _finite(detection.confidence),
    )


def vertical_key(detection: Detection) -> tuple:
    """Top-to-bottom sort key; remaining attributes break positional ties."""
    box = detection.bounding_box
    return (_finite(box.y), _finite(box.x)) + _tie_break(detection)


def horizontal_key(detection: Detection) -> tuple:
    """Left-to-right sort key used inside a row."""
    box = detection.bounding_box
    return (_finite(box.x), _finite(box.y)) + _tie_break(detection)


def same_row(y: float, reference: float, row_threshold: float) -> bool:
    """True when ``y`` is close enough to ``reference`` to share a row."""
    return abs(_finite(y) - _finite(reference)) < row_threshold


def segment_rows(
    detections: Iterable[Detection],
    row_threshold: Optional[float] = None,
    strategy: Union[str, RowStrategy, None] = None,
) -> list[Row]:
    """Group detections into rows, top to bottom, each row ordered left to right."""
    threshold = config.row_threshold if row_threshold is None else row_threshold
    mode = RowStrategy.parse(strategy)

    rows: list[Row] = []
    current: list[Detection] = []
    reference: Optional[float] = None

    for detection in sorted(detections, key=vertical_key):
        y = detection.bounding_box.y
        if reference is None or same_row(y, reference, threshold):
            current.append(detection)
            if mode is RowStrategy.DRIFTING or reference is None:
                reference = y
        else:
            rows.append(tuple(sorted(current, key=horizontal_key)))
            current = [detection]
            reference = y

    if current:
        rows.append(tuple(sorted(current, key=horizontal_key)))
    return rows


def sort_reading_order(
    detections: Iterable[Detection],
    row_threshold: Optional[float] = None,
    strategy: Union[str, RowStrategy, None] = None,
) -> list[Detection]:
    """Order detections top to bottom, then left to right within each row."""
    return [detection for row in segment_rows(detections, row_threshold, strategy) for detection in row]
