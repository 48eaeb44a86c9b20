"""Full-file page scaffold around a synthesized widget tree."""

from __future__ import annotations

import re
from typing import Optional

from .dart import DART_RESERVED, FLUTTER_IDENTIFIERS, SCAFFOLD_ANNOTATIONS, dart_string, inline_child

DEFAULT_PAGE_NAME = "GeneratedPage"

_NON_ALNUM = re.compile(r"[^A-Za-z0-9]")
_UNUSABLE_NAMES = DART_RESERVED | FLUTTER_IDENTIFIERS | SCAFFOLD_ANNOTATIONS

_PAGE_TEMPLATE = """import 'package:flutter/material.dart';

class {name} extends StatefulWidget {{
  const {name}({{super.key}});

  @override
  State<{name}> createState() => _{name}State();
}}

class _{name}State extends State<{name}> {{
  @override
  Widget build(BuildContext context) {{
    return Scaffold(
      appBar: AppBar(
        title: const Text({title}),
        centerTitle: true,
      ),
      body: SafeArea(
        child: SingleChildScrollView(
          padding: const EdgeInsets.all(16),
          child: {body},
        ),
      ),
    );
  }}
}}"""

# Column of ``child: `` inside the scroll view.
_BODY_INDENT_LEVELS = 5


def sanitize_page_name(name: Optional[str], fallback: str = DEFAULT_PAGE_NAME) -> str:
    """Reduce ``name`` to a usable Dart class name.

    Characters outside ``[A-Za-z0-9]`` are dropped. If nothing is left, the
    result starts with a digit, or it collides with a Dart keyword, a
    Flutter class the page uses or the ``override`` annotation, the
    ``fallback`` name is used instead.
    """
    cleaned = _NON_ALNUM.sub("", name or "")
    if not cleaned or not cleaned[0].isalpha() or cleaned in _UNUSABLE_NAMES:
        return fallback
    return cleaned


def assemble_page(page_name: Optional[str], body: str, fallback: str = DEFAULT_PAGE_NAME) -> str:
    """Wrap ``body`` in a complete StatefulWidget page file."""
    name = sanitize_page_name(page_name, fallback)
    content = body or "const SizedBox.shrink()"
    return _PAGE_TEMPLATE.format(
        name=name,
        title=dart_string(name),
        body=inline_child(content, _BODY_INDENT_LEVELS),
    )


def count_lines(source: str) -> int:
    """Number of lines in generated source, as shown next to the code."""
    return len(source.split("\n"))
