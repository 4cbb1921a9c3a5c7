from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Iterator, List

from errors import EmptyTreeError

if TYPE_CHECKING:  # pragma: no cover - import for annotations only
    from .node import TreeNode


class Composite(ABC):
    """Shared behaviour of everything that owns an ordered list of nodes.

    Both the document root and nested nodes implement this interface so the
    parser resolves attachment points the same way at every depth.
    """

    @property
    @abstractmethod
    def children(self) -> List["TreeNode"]:  # pragma: no cover - interface only
        """Children in insertion order."""

    def add_child(self, node: "TreeNode") -> "TreeNode":
        self.children.append(node)
        return node

    def child_count(self) -> int:
        return len(self.children)

    def last_child(self) -> "TreeNode":
        """Return the most recently appended child.

        Raises :class:`EmptyTreeError` when nothing has been appended yet.
        """

        if not self.children:
            raise EmptyTreeError(f"{self!r} has no children")

        return self.children[-1]

    def iter_children(self) -> Iterator["TreeNode"]:
        return iter(self.children)

    def find_child(self, name: str) -> "TreeNode | None":
        # First match wins; sibling collisions are not reported.
        for child in self.children:
            if child.name == name:
                return child

        return None

    def is_composite(self) -> bool:
        return bool(self.children)

    def is_scalar(self) -> bool:
        return not self.children
