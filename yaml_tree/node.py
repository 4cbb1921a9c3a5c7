from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .base import Composite


@dataclass(eq=False)
class TreeNode(Composite):
    """A key or list element read from one line of input.

    ``indentation`` is the leading whitespace that introduced the node and is
    only meaningful while parsing. ``value`` is ignored once children exist.
    """

    name: str
    value: Optional[str] = None
    indentation: str = ""
    _children: List["TreeNode"] = field(default_factory=list, repr=False)

    @property
    def children(self) -> List["TreeNode"]:
        return self._children

    def scalar_value(self) -> Optional[str]:
        """Return ``value`` for scalar nodes and ``None`` for composites."""

        if self.is_composite():
            return None

        return self.value
