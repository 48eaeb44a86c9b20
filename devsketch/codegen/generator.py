"""Detection-to-code pipeline facade."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Iterable, Optional, Union

from ..core.config import config
from ..core.logger import log
from ..layout.ordering import RowStrategy, segment_rows
from ..layout.tree import build_layout_tree
from ..vision.models import Detection
from .page import DEFAULT_PAGE_NAME, assemble_page, count_lines, sanitize_page_name
from .synthesizer import WidgetSynthesizer


@dataclass(frozen=True)
class GenerationResult:
    """Generated page source plus the counts shown alongside it."""

    page_name: str
    source: str
    detection_count: int
    row_count: int

    @property
    def line_count(self) -> int:
        return count_lines(self.source)


class CodeGenerator:
    """Convert detections into a Flutter page.

    Settings default to the global :data:`config`; pass explicit values to
    pin them (tests do). Instances hold settings only, so one generator can
    serve any number of calls, concurrently or not.
    """

    def __init__(
        self,
        reference_width: Optional[float] = None,
        reference_height: Optional[float] = None,
        row_threshold: Optional[float] = None,
        row_strategy: Union[str, RowStrategy, None] = None,
        column_gap: Optional[int] = None,
        preview_limit: Optional[int] = None,
        default_page_name: Optional[str] = None,
    ) -> None:
        self.row_threshold = config.row_threshold if row_threshold is None else row_threshold
        self.row_strategy = RowStrategy.parse(row_strategy)
        self.column_gap = config.column_gap if column_gap is None else column_gap
        self.preview_limit = config.preview_limit if preview_limit is None else preview_limit
        self.default_page_name = sanitize_page_name(
            config.default_page_name if default_page_name is None else default_page_name,
            DEFAULT_PAGE_NAME,
        )
        self.synthesizer = WidgetSynthesizer(reference_width, reference_height)

    def generate(self, detections: Iterable[Detection], page_name: Optional[str] = None) -> GenerationResult:
        """Run the full pipeline and return the page with its statistics."""
        started = time.perf_counter()
        items = list(detections)

        rows = segment_rows(items, self.row_threshold, self.row_strategy)
        tree = build_layout_tree(rows, self.column_gap)
        body = self.synthesizer.synthesize(tree)

        name = sanitize_page_name(page_name or self.default_page_name, self.default_page_name)
        source = assemble_page(name, body, self.default_page_name)
        result = GenerationResult(page_name=name, source=source, detection_count=len(items), row_count=len(rows))

        log.log_generation(name, result.detection_count, result.row_count, result.line_count)
        log.log_performance("generate", (time.perf_counter() - started) * 1000)
        return result

    def generate_code(self, detections: Iterable[Detection], page_name: Optional[str] = None) -> str:
        """Full page source for ``detections``."""
        return self.generate(detections, page_name).source

    def generate_preview(self, detections: Iterable[Detection], limit: Optional[int] = None) -> str:
        """Widgets for the first few detections in input order, no layout or scaffold."""
        cap = self.preview_limit if limit is None else limit
        head = list(detections)[:max(cap, 0)]
        fragments = (self.synthesizer.synthesize_leaf(detection) for detection in head)
        return "\n\n".join(fragment.code for fragment in fragments if not fragment.is_empty)


def generate_code(detections: Iterable[Detection], page_name: Optional[str] = None) -> str:
    """Generate a page with the globally configured settings."""
    return CodeGenerator().generate_code(detections, page_name)


def generate_preview(detections: Iterable[Detection], limit: Optional[int] = None) -> str:
    """Preview widgets with the globally configured settings."""
    return CodeGenerator().generate_preview(detections, limit)
