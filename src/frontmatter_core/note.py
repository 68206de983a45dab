"""Note framing: the ``---`` fenced frontmatter block at the top of a note."""

from __future__ import annotations

import re

FENCE = "---"

_FRONTMATTER_RE = re.compile(r"\A---[ \t]*\r?\n(.*?)^---[ \t]*$(\r?\n)?", re.MULTILINE | re.DOTALL)
_TRAILING_BREAK_RE = re.compile(r"\r?\n\Z")


def split_note(text: str) -> tuple[str | None, str]:
    """Split a note into ``(frontmatter, body)``.

    *frontmatter* is None when the note does not open with a fence or the
    fence is never closed; the body is then the whole text.
    """
    match = _FRONTMATTER_RE.match(text)
    if match is None:
        return None, text
    frontmatter = _TRAILING_BREAK_RE.sub("", match.group(1))
    return frontmatter, text[match.end():]


def join_note(frontmatter: str | None, body: str) -> str:
    """Inverse of ``split_note``."""
    if frontmatter is None:
        return body
    if frontmatter:
        return f"{FENCE}\n{frontmatter}\n{FENCE}\n{body}"
    return f"{FENCE}\n{FENCE}\n{body}"
