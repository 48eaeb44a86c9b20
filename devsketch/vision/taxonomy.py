"""Mapping of raw detector labels onto the closed :class:`ElementKind` set.

Detectors name their classes freely ("TextButton", "EditText", "cell phone"),
so classification normalizes the label and looks it up in an alias table:
an exact alias match wins, otherwise the longest alias contained in the
label decides. Anything unmatched degrades to the taxonomy's default kind.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, Mapping, Tuple

from .models import ElementKind

_SEPARATORS = re.compile(r"[\s_\-]+")


def normalize_label(raw_label: str) -> str:
    """Lower-case a label and collapse separator runs to single spaces."""
    return _SEPARATORS.sub(" ", raw_label.strip().lower()).strip()


@dataclass(frozen=True, eq=False)
class Taxonomy:
    """A named alias table mapping raw labels to element kinds."""

    name: str
    aliases: Mapping[str, ElementKind]
    default: ElementKind = ElementKind.UNKNOWN
    _by_length: Tuple[Tuple[str, ElementKind], ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        normalized: Dict[str, ElementKind] = {}
        for alias, kind in self.aliases.items():
            key = normalize_label(alias)
            if key:
                normalized[key] = kind
        object.__setattr__(self, "aliases", normalized)
        # Longest alias first, alphabetical among equals
        ordered = sorted(normalized.items(), key=lambda item: (-len(item[0]), item[0]))
        object.__setattr__(self, "_by_length", tuple(ordered))

    def classify(self, raw_label: str) -> ElementKind:
        """Return the kind for ``raw_label``; never raises."""
        label = normalize_label(raw_label or "")
        if not label:
            return self.default

        exact = self.aliases.get(label)
        if exact is not None:
            return exact

        for alias, kind in self._by_length:
            if alias in label:
                return kind
        return self.default

    def labels_for(self, kind: ElementKind) -> list[str]:
        """All aliases that resolve to ``kind``, sorted."""
        return sorted(alias for alias, mapped in self.aliases.items() if mapped is kind)

    def extended(self, name: str, extra: Mapping[str, ElementKind]) -> Taxonomy:
        """Copy of this taxonomy with additional or overriding aliases."""
        merged = dict(self.aliases)
        merged.update(extra)
        return Taxonomy(name=name, aliases=merged, default=self.default)


def _table(entries: Iterable[Tuple[ElementKind, Iterable[str]]]) -> Dict[str, ElementKind]:
    table: Dict[str, ElementKind] = {}
    for kind, aliases in entries:
        for alias in aliases:
            table[alias] = kind
    return table


DEFAULT_TAXONOMY = Taxonomy(
    name="ui",
    aliases=_table([
        (ElementKind.BUTTON, ["button", "btn", "text button", "textbutton", "image button", "fab"]),
        (ElementKind.TEXT_FIELD, ["text field", "textfield", "input", "edit text", "edittext", "search bar", "text input"]),
        (ElementKind.TEXT, ["text", "label", "text view", "textview", "heading", "title", "paragraph"]),
        (ElementKind.CONTAINER, ["container", "box", "rectangle", "card", "view", "panel", "list item"]),
        (ElementKind.IMAGE, ["image", "picture", "photo", "image view", "imageview", "avatar"]),
        (ElementKind.ICON, ["icon", "glyph"]),
        (ElementKind.CHECKBOX, ["checkbox", "check box", "checked text view", "checkedtextview", "radio button", "radiobutton"]),
        (ElementKind.SWITCH, ["switch", "toggle", "on off switch"]),
        (ElementKind.DRAWER, ["drawer", "navigation drawer", "side menu"]),
        (ElementKind.MODAL, ["modal", "dialog", "popup", "bottom sheet", "alert"]),
        (ElementKind.PAGE_INDICATOR, ["page indicator", "pageindicator", "pager indicator", "dots"]),
        (ElementKind.STATUS_BAR, ["status bar", "statusbar", "upper task bar", "uppertaskbar"]),
    ]),
)

# Stand-in mapping for general-purpose COCO detectors used in demos.
COCO_DEMO_TAXONOMY = Taxonomy(
    name="coco-demo",
    aliases=_table([
        (ElementKind.BUTTON, ["button", "remote", "cell phone"]),
        (ElementKind.TEXT_FIELD, ["textfield", "input", "keyboard"]),
        (ElementKind.TEXT, ["text", "label", "book"]),
        (ElementKind.CONTAINER, ["container", "box", "rectangle", "tv", "laptop"]),
        (ElementKind.IMAGE, ["image", "picture", "person", "frisbee"]),
        (ElementKind.ICON, ["icon", "clock", "stop sign"]),
    ]),
)

TAXONOMIES: Dict[str, Taxonomy] = {
    DEFAULT_TAXONOMY.name: DEFAULT_TAXONOMY,
    COCO_DEMO_TAXONOMY.name: COCO_DEMO_TAXONOMY,
}


def classify(raw_label: str, taxonomy: Taxonomy = DEFAULT_TAXONOMY) -> ElementKind:
    """Map a raw detector label to an :class:`ElementKind`."""
    return taxonomy.classify(raw_label)


def get_taxonomy(name: str) -> Taxonomy:
    """Look up a registered taxonomy by name, falling back to the default one."""
    return TAXONOMIES.get(name, DEFAULT_TAXONOMY)
