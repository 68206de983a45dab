"""Value types for frontmatter documents."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Union


@dataclass
class VText:
    value: str

    def __str__(self) -> str:
        return self.value


# int <-> str conversion is capped at 4300 digits by default; longer
# integers go through in chunks.
_DIGIT_CHUNK = 4000
_CHUNK_BASE = 10 ** _DIGIT_CHUNK

INFINITY = "Infinity"


def int_to_text(v: int) -> str:
    """Decimal text of *v*, whatever its length."""
    if -_CHUNK_BASE < v < _CHUNK_BASE:
        return str(v)
    sign = "-" if v < 0 else ""
    v = abs(v)
    chunks: list[str] = []
    while v >= _CHUNK_BASE:
        v, rest = divmod(v, _CHUNK_BASE)
        chunks.append(str(rest).zfill(_DIGIT_CHUNK))
    chunks.append(str(v))
    return sign + "".join(reversed(chunks))


def text_to_int(digits: str) -> int:
    """Inverse of ``int_to_text`` for an optionally signed digit string."""
    if len(digits) <= _DIGIT_CHUNK:
        return int(digits)
    sign = -1 if digits[0] == "-" else 1
    body = digits.lstrip("+-")
    v = 0
    for start in range(0, len(body), _DIGIT_CHUNK):
        chunk = body[start:start + _DIGIT_CHUNK]
        v = v * 10 ** len(chunk) + int(chunk)
    return sign * v


@dataclass
class VNumber:
    value: int | float

    def __str__(self) -> str:
        v = self.value
        if isinstance(v, float):
            if math.isinf(v):
                return INFINITY if v > 0 else "-" + INFINITY
            if math.isfinite(v) and v == int(v):
                return str(int(v))
            return str(v)
        return int_to_text(v)


@dataclass
class VBool:
    value: bool

    def __str__(self) -> str:
        return str(self.value).lower()


class _Null:
    """Singleton for the ``null`` literal."""

    _instance: "_Null | None" = None

    def __new__(cls) -> "_Null":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Null"

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return "null"


Null = _Null()


@dataclass
class VList:
    items: list["Value"] = field(default_factory=list)

    def __str__(self) -> str:
        return "[" + ", ".join(str(v) for v in self.items) + "]"


@dataclass
class VMapping:
    """Flat key/value object; appears as an inline-object list item."""

    entries: dict[str, "Value"] = field(default_factory=dict)

    def __str__(self) -> str:
        return "{" + ", ".join(f"{k}: {v}" for k, v in self.entries.items()) + "}"


class _Empty:
    """Singleton for absent fields."""

    _instance: "_Empty | None" = None

    def __new__(cls) -> "_Empty":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Empty"

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return "Empty"


Empty = _Empty()

Scalar = Union[VText, VNumber, VBool, _Null]
Value = Union[VText, VNumber, VBool, _Null, VList, VMapping]

_VALUE_TYPES = (VText, VNumber, VBool, _Null, VList, VMapping)


def is_scalar(value: object) -> bool:
    return isinstance(value, (VText, VNumber, VBool, _Null))


def to_value(obj: object) -> Value:
    """Convert a plain Python object to a Value.

    ``None`` → Null, ``bool`` → VBool, ``int``/``float`` → VNumber,
    ``str`` → VText, mappings → VMapping, lists/tuples → VList.
    Values pass through unchanged.
    """
    if isinstance(obj, _VALUE_TYPES):
        return obj
    if obj is None:
        return Null
    # bool before int: bool is an int subclass
    if isinstance(obj, bool):
        return VBool(obj)
    if isinstance(obj, (int, float)):
        return VNumber(obj)
    if isinstance(obj, str):
        return VText(obj)
    if isinstance(obj, Mapping):
        return VMapping({str(k): to_value(v) for k, v in obj.items()})
    if isinstance(obj, (list, tuple)):
        return VList([to_value(v) for v in obj])
    raise TypeError(f"cannot convert {type(obj).__name__} to a frontmatter value")


def from_value(value: Value) -> object:
    """Convert a Value back to plain Python."""
    if isinstance(value, _Null):
        return None
    if isinstance(value, (VText, VNumber, VBool)):
        return value.value
    if isinstance(value, VList):
        return [from_value(v) for v in value.items]
    if isinstance(value, VMapping):
        return {k: from_value(v) for k, v in value.entries.items()}
    raise TypeError(f"not a frontmatter value: {value!r}")
