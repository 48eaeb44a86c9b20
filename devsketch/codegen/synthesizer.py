"""Turns a layout tree into Flutter widget source."""

from __future__ import annotations

from typing import Mapping, Optional

from ..core.config import config
from ..layout.tree import ColumnContainer, LayoutNode, Leaf, RowContainer
from ..vision.models import Detection, ElementKind
from .dart import indent, list_items
from .templates import TEMPLATES, GeneratedFragment, Template, WidgetContext, check_templates, pixel_size


class WidgetSynthesizer:
    """Render layout nodes with the per-kind template table.

    The synthesizer keeps no state between calls; the same tree always yields
    the same source.
    """

    def __init__(
        self,
        reference_width: Optional[float] = None,
        reference_height: Optional[float] = None,
        templates: Optional[Mapping[ElementKind, Template]] = None,
    ) -> None:
        self.reference_width = config.reference_width if reference_width is None else reference_width
        self.reference_height = config.reference_height if reference_height is None else reference_height
        self.templates = TEMPLATES if templates is None else templates
        check_templates(self.templates)

    def synthesize_leaf(self, detection: Detection) -> GeneratedFragment:
        """Expand the template for a single detection."""
        width, height = pixel_size(detection.bounding_box, self.reference_width, self.reference_height)
        ctx = WidgetContext(text=detection.display_text, width=width, height=height)
        return GeneratedFragment(code=self.templates[detection.kind](ctx), width=width, height=height)

    def synthesize(self, node: LayoutNode) -> str:
        """Render ``node`` and its subtree; empty output means nothing to show."""
        if isinstance(node, Leaf):
            return self.synthesize_leaf(node.detection).code
        if isinstance(node, RowContainer):
            return self._row(node)
        if isinstance(node, ColumnContainer):
            return self._column(node)
        raise TypeError(f"Not a layout node: {node!r}")

    def _row(self, node: RowContainer) -> str:
        children = [code for code in (self.synthesize(child) for child in node.children) if code]
        if not children:
            return ""
        expanded = [f"Expanded(\n{indent('child: ' + code)},\n)" for code in children]
        return (
            "Row(\n"
            "  mainAxisAlignment: MainAxisAlignment.spaceBetween,\n"
            "  children: [\n"
            f"{list_items(expanded, 2)}\n"
            "  ],\n"
            ")"
        )

    def _column(self, node: ColumnContainer) -> str:
        children = [code for code in (self.synthesize(child) for child in node.children) if code]
        spacer = f"const SizedBox(height: {node.gap})"

        items: list[str] = []
        for index, code in enumerate(children):
            items.append(code)
            if node.trailing_gap or index < len(children) - 1:
                items.append(spacer)

        if not items:
            return (
                "Column(\n"
                "  crossAxisAlignment: CrossAxisAlignment.stretch,\n"
                "  children: [],\n"
                ")"
            )
        return (
            "Column(\n"
            "  crossAxisAlignment: CrossAxisAlignment.stretch,\n"
            "  children: [\n"
            f"{list_items(items, 2)}\n"
            "  ],\n"
            ")"
        )
