"""Decoder: frontmatter markup text → Document.

A single forward pass over the physical lines.  The only state carried
between lines is the key of the most recently opened block-list header,
kept in an explicit ``DecodeState`` so each transition can be exercised
on its own.

Malformed input is skipped, never rejected, unless ``strict=True``.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from .document import Document
from .errors import DecodeError
from .scalars import coerce_scalar
from .values import Value, VList, VMapping

logger = logging.getLogger(__name__)

_LINE_BREAK_RE = re.compile(r"\r?\n")
_INLINE_OBJECT_RE = re.compile(r"^([^\s:]+):\s*(.+)$")


# ---------------------------------------------------------------------------
# Line scanning
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class SourceLine:
    number: int   # 1-based
    indent: int
    content: str  # stripped
    raw: str

    @property
    def skippable(self) -> bool:
        """Blank and whole-line comment lines carry no data."""
        return not self.content or self.content.startswith("#")


def scan_lines(text: str) -> list[SourceLine]:
    """Split *text* on ``\\n`` / ``\\r\\n`` and measure each line."""
    lines: list[SourceLine] = []
    for number, raw in enumerate(_LINE_BREAK_RE.split(text), 1):
        content = raw.strip()
        indent = len(raw) - len(raw.lstrip()) if content else len(raw)
        lines.append(SourceLine(number, indent, content, raw))
    return lines


def split_pair(content: str) -> tuple[str, str] | None:
    """Split ``key: value`` on the first colon; None when there is no colon."""
    key, sep, value = content.partition(":")
    if not sep:
        return None
    return key.strip(), value.strip()


# ---------------------------------------------------------------------------
# Scanner state
# ---------------------------------------------------------------------------

@dataclass
class DecodeState:
    entries: dict[str, Value] = field(default_factory=dict)
    current_key: str | None = None

    def open_list(self, key: str) -> None:
        self.entries[key] = VList([])
        self.current_key = key

    def set_scalar(self, key: str, value: Value) -> None:
        self.entries[key] = value
        self.current_key = None

    def append_item(self, item: Value) -> bool:
        """Append to the open list.  Returns False for an orphan item."""
        if self.current_key is None:
            return False
        target = self.entries.get(self.current_key)
        if not isinstance(target, VList):
            return False
        target.items.append(item)
        return True


def _reject(strict: bool, line: SourceLine, message: str) -> None:
    if strict:
        raise DecodeError(message, line.number, line.raw)
    logger.debug("skipping line %d (%s): %r", line.number, message, line.raw)


# ---------------------------------------------------------------------------
# Transitions
# ---------------------------------------------------------------------------

def step(state: DecodeState, lines: list[SourceLine], index: int, strict: bool = False) -> int:
    """Consume the entry starting at ``lines[index]``; return the next cursor."""
    line = lines[index]
    if line.skippable:
        return index + 1
    if line.content.startswith("-"):
        return _step_item(state, lines, index, strict)
    _step_pair(state, line, strict)
    return index + 1


def _step_pair(state: DecodeState, line: SourceLine, strict: bool) -> None:
    pair = split_pair(line.content)
    if pair is None:
        _reject(strict, line, "expected 'key: value'")
        return
    key, value = pair
    if not key:
        _reject(strict, line, "empty key")
        return
    if value == "":
        state.open_list(key)
    else:
        state.set_scalar(key, coerce_scalar(value))


def _step_item(state: DecodeState, lines: list[SourceLine], index: int, strict: bool) -> int:
    marker = lines[index]
    body = marker.content[1:].strip()
    match = _INLINE_OBJECT_RE.match(body)

    if match and "{" not in body and "[" not in body:
        obj: dict[str, Value] = {match.group(1): coerce_scalar(match.group(2))}
        nxt = index + 1
        while nxt < len(lines) and lines[nxt].indent > marker.indent:
            _read_continuation(obj, lines[nxt], strict)
            nxt += 1
        item: Value = VMapping(obj)
    else:
        nxt = index + 1
        item = coerce_scalar(body)

    if not state.append_item(item):
        _reject(strict, marker, "list item without a list header")
    return nxt


def _read_continuation(obj: dict[str, Value], line: SourceLine, strict: bool) -> None:
    if line.skippable:
        return
    pair = split_pair(line.content)
    if pair is None or not pair[0]:
        _reject(strict, line, "expected 'key: value' inside list item")
        return
    key, value = pair
    obj[key] = coerce_scalar(value)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def decode(text: str, strict: bool = False) -> Document:
    """Parse frontmatter markup into a Document.

    Lenient by default: lines that cannot be read are skipped and list
    items with no open header are dropped.  With ``strict=True`` those
    cases raise ``DecodeError`` instead.
    """
    state = DecodeState()
    lines = scan_lines(text)
    i = 0
    while i < len(lines):
        i = step(state, lines, i, strict)
    return Document(state.entries)
