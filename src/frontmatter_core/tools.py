"""FrontmatterTools: the codec and field helpers bound to one schema.

Host integrations hold a single instance::

    tools = FrontmatterTools()
    doc, body = tools.read_note(text)
    if tools.is_valid(doc):
        for p in tools.get_performers(doc):
            ...
    text = tools.write_note(tools.update(doc, {"title": "New"}), body)
"""

from __future__ import annotations

from collections.abc import Mapping

from .config import DEFAULT_SCHEMA, NoteSchema
from .decoder import decode
from .document import Document
from .encoder import encode
from .fields import Performer, get_performers, get_video_image, is_valid, patch
from .note import join_note, split_note
from .values import _Empty


class FrontmatterTools:
    def __init__(self, schema: NoteSchema = DEFAULT_SCHEMA, strict: bool = False) -> None:
        self.schema = schema
        self.strict = strict

    # -- Codec ------------------------------------------------------------

    def parse(self, raw: str) -> Document:
        return decode(raw, strict=self.strict)

    def stringify(self, document: Document | Mapping[str, object]) -> str:
        return encode(document)

    # -- Field helpers ----------------------------------------------------

    def is_valid(self, document: Document) -> bool:
        return is_valid(document, self.schema)

    def get_performers(self, document: Document) -> list[Performer]:
        return get_performers(document, self.schema)

    def get_video_image(self, document: Document) -> str | _Empty:
        return get_video_image(document, self.schema)

    def update(self, document: Document, changes: Mapping[str, object]) -> Document:
        return patch(document, changes)

    # -- Whole notes ------------------------------------------------------

    def read_note(self, text: str) -> tuple[Document, str]:
        """Decode a note's frontmatter.  A note without one gives an empty Document."""
        frontmatter, body = split_note(text)
        if frontmatter is None:
            return Document(), body
        return self.parse(frontmatter), body

    def write_note(self, document: Document | Mapping[str, object], body: str) -> str:
        return join_note(self.stringify(document), body)
