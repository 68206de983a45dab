"""Frontmatter Core: codec for the key/value markup at the top of a note."""

import logging

from .config import DEFAULT_SCHEMA, NoteSchema
from .decoder import decode
from .document import Document
from .encoder import encode
from .errors import DecodeError, FrontmatterError
from .fields import Performer, get_performers, get_video_image, is_valid, patch
from .note import join_note, split_note
from .scalars import coerce_scalar
from .tools import FrontmatterTools
from .values import (
    Empty,
    Null,
    Scalar,
    Value,
    VBool,
    VList,
    VMapping,
    VNumber,
    VText,
    from_value,
    to_value,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "decode",
    "encode",
    "is_valid",
    "get_performers",
    "get_video_image",
    "patch",
    "coerce_scalar",
    "split_note",
    "join_note",
    "Document",
    "Performer",
    "FrontmatterTools",
    "NoteSchema",
    "DEFAULT_SCHEMA",
    "Empty",
    "Null",
    "Scalar",
    "Value",
    "VBool",
    "VList",
    "VMapping",
    "VNumber",
    "VText",
    "to_value",
    "from_value",
    "FrontmatterError",
    "DecodeError",
]
