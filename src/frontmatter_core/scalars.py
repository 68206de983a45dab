"""Scalar coercion: bare token → typed Value."""

from __future__ import annotations

import re

from .values import INFINITY, Scalar, Value, VBool, VNumber, VText, Null, text_to_int

_INT_RE = re.compile(r"^[+-]?\d+$")
_NUMBER_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")
_INFINITY_RE = re.compile(rf"^[+-]?{INFINITY}$")


def coerce_scalar(token: str) -> Scalar:
    """Convert a trimmed token to a Scalar.

    First match wins:
        ``true`` / ``false``  → VBool
        ``null``              → Null
        decimal literal       → VNumber (int for integer literals)
        ``[+-]Infinity``      → VNumber (float)
        anything else         → VText, unmodified

    ``"true"`` therefore never survives as text; callers rely on this.
    """
    if token == "true":
        return VBool(True)
    if token == "false":
        return VBool(False)
    if token == "null":
        return Null
    if _INT_RE.match(token):
        return VNumber(text_to_int(token))
    if _NUMBER_RE.match(token) or _INFINITY_RE.match(token):
        # float() never raises on these; overflow gives inf
        return VNumber(float(token))
    return VText(token)


def render_scalar(value: Value) -> str:
    """Literal textual form of a value as written in the markup."""
    return str(value)
