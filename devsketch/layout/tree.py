"""Layout tree built from segmented rows."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple, Union

from ..core.config import config
from ..vision.models import Detection
from .ordering import Row


@dataclass(frozen=True, slots=True)
class Leaf:
    """A single detected element."""

    detection: Detection


@dataclass(frozen=True, slots=True)
class RowContainer:
    """Horizontal group; children share the width equally, space-between."""

    children: Tuple[LayoutNode, ...]


@dataclass(frozen=True, slots=True)
class ColumnContainer:
    """Vertical stack with a ``gap`` spacer after each child."""

    children: Tuple[LayoutNode, ...]
    gap: int = 16
    trailing_gap: bool = True


LayoutNode = Union[Leaf, RowContainer, ColumnContainer]


def row_to_node(row: Row) -> LayoutNode:
    """Single-element rows unwrap to their leaf; wider rows become a RowContainer."""
    if len(row) == 1:
        return Leaf(row[0])
    return RowContainer(children=tuple(Leaf(detection) for detection in row))


def build_layout_tree(rows: Iterable[Row], gap: Optional[int] = None) -> ColumnContainer:
    """Turn ordered rows into the page's root column."""
    children = tuple(row_to_node(row) for row in rows if row)
    return ColumnContainer(
        children=children,
        gap=config.column_gap if gap is None else gap,
        # Every row, the last included, is followed by a spacer.
        trailing_gap=True,
    )


def iter_leaves(node: LayoutNode) -> Iterable[Detection]:
    """Yield the detections of ``node`` in document order."""
    if isinstance(node, Leaf):
        yield node.detection
        return
    for child in node.children:
        yield from iter_leaves(child)
