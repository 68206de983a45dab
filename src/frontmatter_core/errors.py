"""Exceptions raised by frontmatter_core."""

from __future__ import annotations


class FrontmatterError(Exception):
    """Base class for all frontmatter_core errors."""


class DecodeError(FrontmatterError):
    """Raised by ``decode(..., strict=True)`` on input the lenient decoder would skip."""

    def __init__(self, message: str, line_number: int, line: str) -> None:
        super().__init__(f"line {line_number}: {message}: {line!r}")
        self.line_number = line_number
        self.line = line
