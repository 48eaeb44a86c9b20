"""Small helpers for emitting Dart source text."""

from __future__ import annotations

import textwrap
from typing import Iterable

INDENT = "  "

# Reserved words and built-in identifiers that cannot name a Dart class.
DART_RESERVED = frozenset({
    "abstract", "as", "assert", "async", "await", "base", "break", "case", "catch",
    "class", "const", "continue", "covariant", "default", "deferred", "do", "dynamic",
    "else", "enum", "export", "extends", "extension", "external", "factory", "false",
    "final", "finally", "for", "Function", "get", "hide", "if", "implements", "import",
    "in", "interface", "is", "late", "library", "mixin", "new", "null", "of", "on",
    "operator", "part", "required", "rethrow", "return", "sealed", "set", "show",
    "static", "super", "switch", "sync", "this", "throw", "true", "try", "type",
    "typedef", "var", "void", "when", "while", "with", "yield",
})

# Flutter names the page scaffold and templates refer to; a page class with
# one of these names would shadow it.
FLUTTER_IDENTIFIERS = frozenset({
    "AppBar", "Border", "BorderRadius", "BoxDecoration", "BoxShape", "BuildContext",
    "CheckboxListTile", "Column", "Container", "CrossAxisAlignment", "EdgeInsets",
    "ElevatedButton", "Expanded", "Icon", "Icons", "InputDecoration",
    "ListTileControlAffinity", "MainAxisAlignment", "OutlineInputBorder",
    "RoundedRectangleBorder", "Row", "SafeArea", "Scaffold", "SingleChildScrollView",
    "Size", "SizedBox", "State", "StatefulWidget", "SwitchListTile", "Text",
    "TextField", "Theme", "Widget",
})

# Annotations the page scaffold emits.
SCAFFOLD_ANNOTATIONS = frozenset({"override"})

_ESCAPES = {
    "\\": "\\\\",
    "'": "\\'",
    "$": "\\$",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def _escape(char: str) -> str:
    escaped = _ESCAPES.get(char)
    if escaped is not None:
        return escaped
    # Lone surrogates cannot be encoded as UTF-8
    if "\ud800" <= char <= "\udfff":
        return f"\\u{{{ord(char):X}}}"
    return char


def dart_string(text: str) -> str:
    """Quote ``text`` as a single-quoted Dart string literal."""
    return "'" + "".join(_escape(char) for char in text) + "'"


def indent(code: str, levels: int = 1) -> str:
    """Indent every non-blank line of ``code`` by ``levels`` Dart indents."""
    return textwrap.indent(code, INDENT * levels)


def list_items(items: Iterable[str], levels: int) -> str:
    """Render widgets as trailing-comma list entries, one per line."""
    return "\n".join(indent(item, levels) + "," for item in items)


def inline_child(code: str, levels: int) -> str:
    """Indent all but the first line so ``code`` can follow ``child: ``."""
    first, _, rest = code.partition("\n")
    if not rest:
        return first
    return first + "\n" + indent(rest, levels)
