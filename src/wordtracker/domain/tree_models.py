from __future__ import annotations

"""
Ordered Tree Structure Data Models.

Provides the node type and traversal order selector used by the
ordered tree container that backs the word index.
"""

from enum import Enum
from typing import Generic, Optional, TypeVar

E = TypeVar("E")

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

class TreeNode(Generic[E]):
    """
    A single vertex of the ordered tree.

    Child slots are explicit optionals: ``None`` means the subtree is absent.
    Nodes are created and linked exclusively by the owning tree.

    Attributes:
        element: The stored value.
        left: Subtree holding elements strictly less than ``element``.
        right: Subtree holding elements strictly greater than ``element``.
    """

    __slots__ = ("element", "left", "right")

    def __init__(
            self,
            element: E,
            left: Optional[TreeNode[E]] = None,
            right: Optional[TreeNode[E]] = None,
    ) -> None:
        self.element = element
        self.left = left
        self.right = right

    def __repr__(self) -> str:
        return f"TreeNode({self.element!r})"


class TraversalOrder(Enum):
    """Visiting order for tree iterators."""
    PREORDER = "preorder"
    INORDER = "inorder"
    POSTORDER = "postorder"
