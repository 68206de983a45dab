"""Validation and extraction helpers for note frontmatter."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from .config import DEFAULT_SCHEMA, NoteSchema
from .document import Document
from .values import Value, VList, VMapping, VText, _Empty, _Null, Empty, from_value, is_scalar, to_value


@dataclass
class Performer:
    name: str
    image: str


def is_valid(document: Document, schema: NoteSchema = DEFAULT_SCHEMA) -> bool:
    """True when the title is text, the video image key is present and
    performers is a list."""
    return (
        isinstance(document.get(schema.title), VText)
        and schema.video_image in document
        and isinstance(document.get(schema.performers), VList)
    )


def get_performers(document: Document, schema: NoteSchema = DEFAULT_SCHEMA) -> list[Performer]:
    """Return performers in order; an absent or non-list field gives ``[]``."""
    value = document.get(schema.performers)
    if not isinstance(value, VList):
        return []
    performers: list[Performer] = []
    for item in value.items:
        entries = item.entries if isinstance(item, VMapping) else {}
        performers.append(Performer(
            name=_text_or_blank(entries.get(schema.performer_name)),
            image=_text_or_blank(entries.get(schema.performer_image)),
        ))
    return performers


def _text_or_blank(value: Value | None) -> str:
    """Literal text of a scalar sub-field; missing and falsy values give ``""``."""
    if value is None or not is_scalar(value) or not from_value(value):
        return ""
    return str(value)


def get_video_image(document: Document, schema: NoteSchema = DEFAULT_SCHEMA) -> str | _Empty:
    """Return the video image as text, or Empty when absent, null or not a scalar."""
    value = document.get(schema.video_image)
    if isinstance(value, (_Empty, _Null)) or not is_scalar(value):
        return Empty
    return str(value)


def patch(document: Document, changes: Mapping[str, object]) -> Document:
    """Return a new Document with *changes* laid over *document*.

    Shallow: each changed key is replaced wholesale.  Plain Python values
    in *changes* are converted with ``to_value``.  *document* is untouched.
    """
    entries = dict(document.entries)
    for key, value in changes.items():
        entries[key] = to_value(value)
    return Document(entries)
