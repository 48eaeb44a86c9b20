"""Command line entry point: detection JSON in, Flutter source out."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from .codegen.generator import CodeGenerator
from .core.config import config
from .core.errors import DevSketchError, PayloadError
from .core.logger import log
from .utils.file_utils import load_json, save_text
from .vision.models import Detection
from .vision.samples import login_form_sample
from .vision.schemas import parse_document


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="devsketch", description="Generate Flutter pages from UI detections")
    parser.add_argument("--strategy", choices=["drifting", "anchored"], default=None, help="Row grouping strategy")
    parser.add_argument("--row-threshold", type=float, default=None, help="Normalized Y distance for one row")
    sub = parser.add_subparsers(dest="command", required=True)

    generate = sub.add_parser("generate", help="Generate a full page from a detection JSON file")
    generate.add_argument("input", help="Detection document (JSON)")
    generate.add_argument("--page-name", default=None, help="Widget class name for the page")
    generate.add_argument("--output", "-o", default=None, help="Write source here instead of stdout")

    preview = sub.add_parser("preview", help="Print widgets for the first few detections")
    preview.add_argument("input", help="Detection document (JSON)")
    preview.add_argument("--limit", type=int, default=None, help="Number of detections to render")

    demo = sub.add_parser("demo", help="Generate the built-in login form sample")
    demo.add_argument("--page-name", default="LoginPage", help="Widget class name for the page")
    demo.add_argument("--output", "-o", default=None, help="Write source here instead of stdout")
    return parser


def _read_detections(path: str) -> tuple[list[Detection], Optional[str]]:
    data = load_json(path)
    if data is None:
        raise PayloadError("could not read detection document", path)
    document = parse_document(data, source=path)
    return document.to_detections(config.min_confidence), document.page_name


def _emit(source: str, output: Optional[str]) -> int:
    if output is None:
        sys.stdout.write(source + "\n")
        return 0
    if not save_text(source, output):
        return 1
    log.success(f"Wrote {output}")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        generator = CodeGenerator(row_threshold=args.row_threshold, row_strategy=args.strategy)
        if args.command == "demo":
            result = generator.generate(login_form_sample(), args.page_name)
            return _emit(result.source, args.output)

        detections, document_page_name = _read_detections(args.input)
        if args.command == "preview":
            return _emit(generator.generate_preview(detections, args.limit), None)

        result = generator.generate(detections, args.page_name or document_page_name)
        log.info(f"Generated {result.page_name}: {result.detection_count} widgets, {result.line_count} lines")
        return _emit(result.source, args.output)

    except (DevSketchError, ValueError) as e:
        log.error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
