"""Document: the decoded form of a frontmatter block."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field

from .values import Value, _Empty, Empty, from_value, to_value


@dataclass
class Document:
    """Ordered mapping of key → Value.

    Read-only from the caller's side: build a changed copy with
    ``fields.patch()`` instead of assigning into ``entries``.
    """

    entries: dict[str, Value] = field(default_factory=dict)

    @classmethod
    def from_python(cls, data: Mapping[str, object]) -> Document:
        """Build a Document from plain Python values (see ``to_value``)."""
        return cls({str(k): to_value(v) for k, v in data.items()})

    def to_python(self) -> dict[str, object]:
        return {k: from_value(v) for k, v in self.entries.items()}

    # -- Mapping-style access -------------------------------------------

    def __getitem__(self, key: str) -> Value:
        return self.entries[key]

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def get(self, key: str) -> Value | _Empty:
        """Return the value for *key*, or Empty when absent."""
        return self.entries.get(key, Empty)

    def keys(self):
        return self.entries.keys()

    def items(self):
        return self.entries.items()
