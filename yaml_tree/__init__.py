from .base import Composite
from .document import Document
from .node import TreeNode

__all__ = ["Composite", "Document", "TreeNode"]
