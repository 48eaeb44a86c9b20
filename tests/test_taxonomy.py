from __future__ import annotations

import pytest

from devsketch.vision.models import ElementKind
from devsketch.vision.taxonomy import (
    COCO_DEMO_TAXONOMY,
    DEFAULT_TAXONOMY,
    Taxonomy,
    classify,
    get_taxonomy,
    normalize_label,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Button", ElementKind.BUTTON),
        ("TextButton", ElementKind.BUTTON),
        ("EditText", ElementKind.TEXT_FIELD),
        ("text_field", ElementKind.TEXT_FIELD),
        ("CheckedTextView", ElementKind.CHECKBOX),
        ("UpperTaskBar", ElementKind.STATUS_BAR),
        ("page-indicator", ElementKind.PAGE_INDICATOR),
        ("Toggle", ElementKind.SWITCH),
        ("RadioButton", ElementKind.CHECKBOX),
        ("  LABEL  ", ElementKind.TEXT),
    ],
)
def test_exact_aliases_are_case_and_separator_insensitive(raw: str, expected: ElementKind) -> None:
    assert classify(raw) is expected


def test_substring_match_prefers_longest_alias() -> None:
    # "check box" (9 chars) beats "box" (3 chars)
    assert classify("big check box") is ElementKind.CHECKBOX
    assert classify("Primary Button Large") is ElementKind.BUTTON
    assert classify("password input") is ElementKind.TEXT_FIELD


def test_unmapped_and_empty_labels_degrade_to_unknown() -> None:
    assert classify("hamburger") is ElementKind.UNKNOWN
    assert classify("") is ElementKind.UNKNOWN
    assert classify("   ") is ElementKind.UNKNOWN


def test_mapping_is_many_to_one() -> None:
    aliases = DEFAULT_TAXONOMY.labels_for(ElementKind.BUTTON)
    assert "button" in aliases
    assert "btn" in aliases
    assert all(classify(alias) is ElementKind.BUTTON for alias in aliases)


def test_coco_demo_taxonomy_maps_household_objects() -> None:
    assert classify("cell phone", COCO_DEMO_TAXONOMY) is ElementKind.BUTTON
    assert classify("keyboard", COCO_DEMO_TAXONOMY) is ElementKind.TEXT_FIELD
    assert classify("stop sign", COCO_DEMO_TAXONOMY) is ElementKind.ICON
    assert classify("laptop", COCO_DEMO_TAXONOMY) is ElementKind.CONTAINER
    assert classify("giraffe", COCO_DEMO_TAXONOMY) is ElementKind.UNKNOWN


def test_custom_taxonomy_can_replace_the_default() -> None:
    taxonomy = Taxonomy(
        name="wireframe",
        aliases={"cta": ElementKind.BUTTON, "hero": ElementKind.IMAGE},
        default=ElementKind.CONTAINER,
    )
    assert taxonomy.classify("CTA") is ElementKind.BUTTON
    assert taxonomy.classify("hero banner") is ElementKind.IMAGE
    assert taxonomy.classify("button") is ElementKind.CONTAINER


def test_extended_taxonomy_overrides_aliases() -> None:
    extended = DEFAULT_TAXONOMY.extended("ui-plus", {"chip": ElementKind.BUTTON, "label": ElementKind.ICON})
    assert extended.classify("chip") is ElementKind.BUTTON
    assert extended.classify("label") is ElementKind.ICON
    assert DEFAULT_TAXONOMY.classify("label") is ElementKind.TEXT


def test_get_taxonomy_falls_back_to_default() -> None:
    assert get_taxonomy("coco-demo") is COCO_DEMO_TAXONOMY
    assert get_taxonomy("missing") is DEFAULT_TAXONOMY


def test_normalize_label_collapses_separators() -> None:
    assert normalize_label("  Page__Indicator - Dots ") == "page indicator dots"
