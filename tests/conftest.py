from __future__ import annotations

from typing import Callable, Optional

import pytest

from devsketch.codegen.generator import CodeGenerator
from devsketch.vision.models import Detection, ElementKind, NormalizedRect

DetectionFactory = Callable[..., Detection]


def make_detection(
    kind: ElementKind = ElementKind.TEXT,
    x: float = 0.1,
    y: float = 0.1,
    width: float = 0.2,
    height: float = 0.05,
    label: Optional[str] = None,
    confidence: float = 0.9,
) -> Detection:
    return Detection(
        kind=kind,
        bounding_box=NormalizedRect(x=x, y=y, width=width, height=height),
        confidence=confidence,
        label=label,
    )


@pytest.fixture
def det() -> DetectionFactory:
    return make_detection


@pytest.fixture
def generator() -> CodeGenerator:
    # Pinned so a local .env or DEVSKETCH_* variables cannot change results.
    return CodeGenerator(
        reference_width=375,
        reference_height=812,
        row_threshold=0.08,
        row_strategy="drifting",
        column_gap=16,
        preview_limit=5,
        default_page_name="GeneratedPage",
    )
