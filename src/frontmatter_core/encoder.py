"""Encoder: Document → frontmatter markup text."""

from __future__ import annotations

from collections.abc import Mapping

from .document import Document
from .scalars import render_scalar
from .values import Value, VList, VMapping

_ITEM_PREFIX = "  - "
_CONTINUATION_INDENT = "    "
_ENTRY_INDENT = "  "


def encode(document: Document | Mapping[str, object]) -> str:
    """Serialize *document*, one top-level entry per line, in iteration order.

    Plain mappings are accepted and converted with ``Document.from_python``.
    The output decodes back to equivalent data for scalars, lists of
    scalars and lists of flat objects; layout and comments are not kept.
    """
    if not isinstance(document, Document):
        document = Document.from_python(document)

    lines: list[str] = []
    for key, value in document.items():
        lines.extend(_encode_entry(key, value))
    return "\n".join(lines)


def _encode_entry(key: str, value: Value) -> list[str]:
    if isinstance(value, VList):
        lines = [f"{key}:"]
        for item in value.items:
            lines.extend(_encode_item(item))
        return lines
    if isinstance(value, VMapping):
        lines = [f"{key}:"]
        for k, v in value.entries.items():
            lines.append(f"{_ENTRY_INDENT}{k}: {render_scalar(v)}")
        return lines
    return [f"{key}: {render_scalar(value)}"]


def _encode_item(item: Value) -> list[str]:
    if not isinstance(item, VMapping):
        return [f"{_ITEM_PREFIX}{render_scalar(item)}"]
    if not item.entries:
        return [_ITEM_PREFIX.rstrip()]
    pairs = [f"{k}: {render_scalar(v)}" for k, v in item.entries.items()]
    return [_ITEM_PREFIX + pairs[0]] + [_CONTINUATION_INDENT + p for p in pairs[1:]]
