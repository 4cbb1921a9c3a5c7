from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

DEFAULT_SEPARATOR = "."


@dataclass(frozen=True)
class YamlPath:
    """Ordered sequence of names locating a node inside a document.

    Segments are kept verbatim. A path is a free-standing lookup key and can
    be queried against any number of documents.
    """

    needles: Tuple[str, ...] = ()

    @classmethod
    def of(cls, *needles: str) -> "YamlPath":
        return cls(tuple(needles))

    @classmethod
    def parse(cls, text: str, separator: str = DEFAULT_SEPARATOR) -> "YamlPath":
        """Split ``text`` such as ``database.port`` into a path."""

        if not text:
            return cls()

        return cls(tuple(text.split(separator)))

    def segments(self) -> Tuple[str, ...]:
        return self.needles

    def append(self, needle: str) -> "YamlPath":
        return YamlPath((*self.needles, needle))

    def __len__(self) -> int:
        return len(self.needles)

    def __str__(self) -> str:
        return DEFAULT_SEPARATOR.join(self.needles)
