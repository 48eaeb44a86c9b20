from __future__ import annotations

import pytest

from devsketch.codegen.synthesizer import WidgetSynthesizer
from devsketch.codegen.templates import TEMPLATES
from devsketch.layout.tree import ColumnContainer, Leaf, RowContainer
from devsketch.vision.models import ElementKind

TEXT_HI = """Text(
  'Hi',
  style: Theme.of(context).textTheme.bodyLarge,
)"""


@pytest.fixture
def synthesizer() -> WidgetSynthesizer:
    return WidgetSynthesizer(reference_width=375, reference_height=812)


def test_leaf_dispatches_on_kind(synthesizer, det) -> None:
    assert synthesizer.synthesize(Leaf(det(label="Hi"))) == TEXT_HI
    assert synthesizer.synthesize(Leaf(det(kind=ElementKind.BUTTON, label="Go"))).startswith("ElevatedButton(")
    assert synthesizer.synthesize(Leaf(det(kind=ElementKind.UNKNOWN))).startswith("Container(")


def test_leaf_fragment_carries_pixel_size(synthesizer, det) -> None:
    fragment = synthesizer.synthesize_leaf(det(kind=ElementKind.CONTAINER, width=0.4, height=0.25))
    assert (fragment.width, fragment.height) == (150, 203)
    assert "width: 150," in fragment.code


def test_column_layout(synthesizer, det) -> None:
    column = ColumnContainer(children=(Leaf(det(label="Hi")),), gap=8)
    assert synthesizer.synthesize(column) == """Column(
  crossAxisAlignment: CrossAxisAlignment.stretch,
  children: [
    Text(
      'Hi',
      style: Theme.of(context).textTheme.bodyLarge,
    ),
    const SizedBox(height: 8),
  ],
)"""


def test_column_without_trailing_gap(synthesizer, det) -> None:
    column = ColumnContainer(children=(Leaf(det(label="A")), Leaf(det(label="B"))), gap=8, trailing_gap=False)
    assert synthesizer.synthesize(column).count("const SizedBox(height: 8)") == 1


def test_row_wraps_children_in_expanded(synthesizer, det) -> None:
    row = RowContainer(children=(Leaf(det(label="Hi")), Leaf(det(label="Hi"))))
    code = synthesizer.synthesize(row)
    assert code.startswith("Row(\n  mainAxisAlignment: MainAxisAlignment.spaceBetween,\n  children: [\n")
    assert code.count("Expanded(") == 2
    assert """    Expanded(
      child: Text(
        'Hi',
        style: Theme.of(context).textTheme.bodyLarge,
      ),
    ),""" in code


def test_empty_column_has_empty_children(synthesizer) -> None:
    assert "children: []," in synthesizer.synthesize(ColumnContainer(children=()))


def test_omitted_kinds_leave_no_gaps(synthesizer, det) -> None:
    status = Leaf(det(kind=ElementKind.STATUS_BAR))
    column = ColumnContainer(
        children=(status, RowContainer(children=(status, Leaf(det(label="Hi"))))),
        gap=16,
    )
    code = synthesizer.synthesize(column)
    assert code.count("Expanded(") == 1
    assert code.count("const SizedBox(height: 16)") == 1
    assert ",\n    ," not in code


def test_row_of_omitted_kinds_disappears(synthesizer, det) -> None:
    status = Leaf(det(kind=ElementKind.STATUS_BAR))
    assert synthesizer.synthesize(RowContainer(children=(status, status))) == ""


def test_rejects_non_nodes(synthesizer) -> None:
    with pytest.raises(TypeError):
        synthesizer.synthesize("Column()")  # type: ignore[arg-type]


def test_incomplete_template_table_is_rejected() -> None:
    partial = dict(TEMPLATES)
    del partial[ElementKind.ICON]
    with pytest.raises(RuntimeError):
        WidgetSynthesizer(375, 812, templates=partial)


def test_synthesis_is_repeatable(synthesizer, det) -> None:
    column = ColumnContainer(children=(Leaf(det(kind=ElementKind.IMAGE)), Leaf(det(kind=ElementKind.SWITCH))))
    assert synthesizer.synthesize(column) == synthesizer.synthesize(column)
