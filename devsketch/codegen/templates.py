"""Material 3 widget templates, one per :class:`ElementKind`.

Each template is a pure function of a :class:`WidgetContext` and returns a
self-contained Flutter widget expression. The only outside reference a
template may use is ``context``, which the page scaffold's ``build`` method
provides.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Dict, Mapping

from ..vision.models import ElementKind, NormalizedRect
from .dart import dart_string

BUTTON_MIN_HEIGHT = 48
ICON_MIN_SIZE = 24
PAGE_INDICATOR_DOTS = 3
MAX_PIXELS = 2**31 - 1


@dataclass(frozen=True, slots=True)
class WidgetContext:
    """Template inputs for one detection."""

    text: str
    width: int
    height: int


@dataclass(frozen=True, slots=True)
class GeneratedFragment:
    """Widget source for one detection and the pixel size it was rendered at."""

    code: str
    width: int
    height: int

    @property
    def is_empty(self) -> bool:
        return not self.code


Template = Callable[[WidgetContext], str]


def to_pixels(value: float, reference: float) -> int:
    """Scale a normalized length onto the reference canvas.

    The result is clamped to ``[0, MAX_PIXELS]`` so it always fits a Dart
    int literal, including on web targets.
    """
    scaled = value * reference
    if not math.isfinite(scaled) or scaled <= 0:
        return 0
    return min(int(round(scaled)), MAX_PIXELS)


def pixel_size(rect: NormalizedRect, reference_width: float, reference_height: float) -> tuple[int, int]:
    """Pixel ``(width, height)`` of ``rect`` on the reference canvas."""
    return to_pixels(rect.width, reference_width), to_pixels(rect.height, reference_height)


def button(ctx: WidgetContext) -> str:
    return f"""ElevatedButton(
  onPressed: () {{}},
  style: ElevatedButton.styleFrom(
    minimumSize: Size({ctx.width}, {max(ctx.height, BUTTON_MIN_HEIGHT)}),
    shape: RoundedRectangleBorder(
      borderRadius: BorderRadius.circular(12),
    ),
  ),
  child: Text({dart_string(ctx.text)}),
)"""


def text_field(ctx: WidgetContext) -> str:
    return f"""TextField(
  decoration: InputDecoration(
    labelText: {dart_string(ctx.text)},
    hintText: {dart_string("Enter " + ctx.text.lower())},
    border: OutlineInputBorder(
      borderRadius: BorderRadius.circular(12),
    ),
    filled: true,
  ),
)"""


def text(ctx: WidgetContext) -> str:
    return f"""Text(
  {dart_string(ctx.text)},
  style: Theme.of(context).textTheme.bodyLarge,
)"""


def container(ctx: WidgetContext) -> str:
    return f"""Container(
  width: {ctx.width},
  height: {ctx.height},
  decoration: BoxDecoration(
    color: Theme.of(context).colorScheme.surface,
    borderRadius: BorderRadius.circular(12),
    border: Border.all(
      color: Theme.of(context).colorScheme.outline,
    ),
  ),
)"""


def image(ctx: WidgetContext) -> str:
    return f"""Container(
  width: {ctx.width},
  height: {ctx.height},
  decoration: BoxDecoration(
    color: Theme.of(context).colorScheme.surfaceContainerHighest,
    borderRadius: BorderRadius.circular(12),
  ),
  child: Icon(
    Icons.image,
    size: 48,
    color: Theme.of(context).colorScheme.onSurfaceVariant,
  ),
)"""


def icon(ctx: WidgetContext) -> str:
    return f"""Icon(
  Icons.star,
  size: {max(ctx.height, ICON_MIN_SIZE)},
  color: Theme.of(context).colorScheme.primary,
)"""


def checkbox(ctx: WidgetContext) -> str:
    return f"""CheckboxListTile(
  value: false,
  onChanged: (value) {{}},
  title: Text({dart_string(ctx.text)}),
  controlAffinity: ListTileControlAffinity.leading,
)"""


def switch(ctx: WidgetContext) -> str:
    return f"""SwitchListTile(
  value: false,
  onChanged: (value) {{}},
  title: Text({dart_string(ctx.text)}),
)"""


def page_indicator(ctx: WidgetContext) -> str:
    return f"""Row(
  mainAxisAlignment: MainAxisAlignment.center,
  children: [
    for (var i = 0; i < {PAGE_INDICATOR_DOTS}; i++)
      Container(
        width: 8,
        height: 8,
        margin: const EdgeInsets.symmetric(horizontal: 4),
        decoration: BoxDecoration(
          shape: BoxShape.circle,
          color: i == 0
              ? Theme.of(context).colorScheme.primary
              : Theme.of(context).colorScheme.outlineVariant,
        ),
      ),
  ],
)"""


def omitted(ctx: WidgetContext) -> str:
    """Kinds the page scaffold already provides render nothing."""
    return ""


TEMPLATES: Dict[ElementKind, Template] = {
    ElementKind.BUTTON: button,
    ElementKind.TEXT_FIELD: text_field,
    ElementKind.TEXT: text,
    ElementKind.CONTAINER: container,
    ElementKind.IMAGE: image,
    ElementKind.ICON: icon,
    ElementKind.CHECKBOX: checkbox,
    ElementKind.SWITCH: switch,
    ElementKind.DRAWER: container,
    ElementKind.MODAL: container,
    ElementKind.PAGE_INDICATOR: page_indicator,
    ElementKind.STATUS_BAR: omitted,
    ElementKind.UNKNOWN: container,
}


def missing_kinds(table: Mapping[ElementKind, Template]) -> list[ElementKind]:
    """Kinds without a template in ``table``."""
    return [kind for kind in ElementKind if kind not in table]


def check_templates(table: Mapping[ElementKind, Template]) -> None:
    """Raise if ``table`` leaves any kind without a template."""
    missing = missing_kinds(table)
    if missing:
        names = ", ".join(kind.name for kind in missing)
        raise RuntimeError(f"No widget template registered for: {names}")


check_templates(TEMPLATES)
