from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from yaml_path import YamlPath

from .base import Composite
from .node import TreeNode


class Document(Composite):
    """Root of a parsed YAML file holding the top-level nodes.

    Documents are populated by the parser and must be treated as read-only
    once returned. Lookups walk one path segment per level, selecting the
    first child whose name matches.
    """

    def __init__(self) -> None:
        self._children: List[TreeNode] = []

    @classmethod
    def create(cls) -> "Document":
        return cls()

    @property
    def children(self) -> List[TreeNode]:
        return self._children

    def find_node(self, path: YamlPath) -> Optional[Composite]:
        """Return the node at ``path``, the document itself for the empty path."""

        current: Composite = self
        for needle in path.segments():
            match = current.find_child(needle)
            if match is None:
                return None
            current = match

        return current

    def find_value(self, path: YamlPath) -> Optional[str]:
        """Return the scalar value at ``path``.

        ``None`` is returned when a segment is missing, when the node found is
        a composite, or when the scalar carries no value.
        """

        node = self.find_node(path)
        if not isinstance(node, TreeNode):
            return None

        return node.scalar_value()

    def exists(self, path: YamlPath) -> bool:
        return isinstance(self.find_node(path), TreeNode)

    def count_elements(self, path: YamlPath) -> int:
        node = self.find_node(path)
        if node is None:
            return 0

        return node.child_count()

    def iter_scalars(self) -> Iterator[Tuple[YamlPath, Optional[str]]]:
        """Yield ``(path, value)`` for every scalar leaf in document order."""

        stack: List[Tuple[YamlPath, TreeNode]] = [
            (YamlPath.of(child.name), child) for child in reversed(self._children)
        ]
        while stack:
            path, node = stack.pop()
            if node.is_scalar():
                yield path, node.value
                continue

            stack.extend(
                (path.append(child.name), child) for child in reversed(node.children)
            )

    def __repr__(self) -> str:
        return f"Document(children={len(self._children)})"
