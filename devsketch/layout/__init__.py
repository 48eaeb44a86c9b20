"""Layout inference: reading order, row segmentation and the layout tree."""

from .ordering import Row, RowStrategy, segment_rows, sort_reading_order
from .tree import ColumnContainer, LayoutNode, Leaf, RowContainer, build_layout_tree

__all__ = [
    "ColumnContainer",
    "LayoutNode",
    "Leaf",
    "Row",
    "RowContainer",
    "RowStrategy",
    "build_layout_tree",
    "segment_rows",
    "sort_reading_order",
]
