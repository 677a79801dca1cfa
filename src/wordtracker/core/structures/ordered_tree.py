from __future__ import annotations

"""
Ordered Binary Search Tree.

Generic container keyed by the natural ordering of its elements. Keeps one
element per key (equal inserts are rejected), supports removal of the
minimum and maximum, and exposes snapshot iterators in preorder, inorder
and postorder.

The tree is not self-balancing. Sorted input produces a list-shaped tree
whose depth equals its size, so every walk here is iterative rather than
recursive to stay clear of the interpreter recursion limit.
"""

from typing import Any, Dict, Generic, Iterator, List, Optional, Tuple, TypeVar

from wordtracker.domain.tree_models import TraversalOrder, TreeNode

E = TypeVar("E")

# -----------------------------------------------------------------------------
# ITERATION
# -----------------------------------------------------------------------------

class TreeIterator(Iterator[E]):
    """
    One-shot iterator over a snapshot of the tree elements.

    The visiting sequence is materialized when the iterator is created, so
    later mutation of the tree is never observed. Once exhausted it stays
    exhausted.
    """

    def __init__(self, elements: List[E]) -> None:
        self._elements = elements
        self._index = 0

    def has_next(self) -> bool:
        return self._index < len(self._elements)

    def __iter__(self) -> TreeIterator[E]:
        return self

    def __next__(self) -> E:
        if not self.has_next():
            raise StopIteration
        element = self._elements[self._index]
        self._index += 1
        return element

    def __length_hint__(self) -> int:
        return len(self._elements) - self._index


# -----------------------------------------------------------------------------
# CONTAINER
# -----------------------------------------------------------------------------

class OrderedTree(Generic[E]):
    """
    Unbalanced binary search tree owning its nodes.

    Invariant: ``size()`` equals the number of nodes reachable from the root,
    and the root is ``None`` exactly when the tree is empty. Each instance
    owns its own root and count.
    """

    def __init__(self) -> None:
        self._root: Optional[TreeNode[E]] = None
        self._size = 0

    # -------------------------------------------------------------------------
    # INSPECTION
    # -------------------------------------------------------------------------

    @property
    def root(self) -> TreeNode[E]:
        """
        Root node of the tree.

        Raises:
            LookupError: If the tree is empty.
        """
        if self._root is None:
            raise LookupError("Tree is empty, no root node.")
        return self._root

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def height(self) -> int:
        """
        Number of nodes on the longest root-to-leaf path.

        Returns:
            int: 0 for an empty tree, 1 for a single node.
        """
        if self._root is None:
            return 0

        height = 0
        level: List[TreeNode[E]] = [self._root]
        while level:
            height += 1
            next_level: List[TreeNode[E]] = []
            for node in level:
                if node.left is not None:
                    next_level.append(node.left)
                if node.right is not None:
                    next_level.append(node.right)
            level = next_level
        return height

    # -------------------------------------------------------------------------
    # LOOKUP
    # -------------------------------------------------------------------------

    def search(self, key: E) -> Optional[TreeNode[E]]:
        """
        Locate the node holding an element equal to ``key``.

        Args:
            key: Probe value compared against stored elements.

        Returns:
            Optional[TreeNode[E]]: The matching node, or None if absent.

        Raises:
            ValueError: If ``key`` is None.
        """
        _require_key(key)
        node = self._root
        while node is not None:
            if key < node.element:
                node = node.left
            elif node.element < key:
                node = node.right
            else:
                return node
        return None

    def contains(self, key: E) -> bool:
        return self.search(key) is not None

    # -------------------------------------------------------------------------
    # MUTATION
    # -------------------------------------------------------------------------

    def insert(self, key: E) -> bool:
        """
        Insert ``key`` as a new leaf unless an equal element already exists.

        Args:
            key: Element to store.

        Returns:
            bool: True if inserted, False if an equal element was present
                  (the tree is left unchanged).

        Raises:
            ValueError: If ``key`` is None.
        """
        _require_key(key)
        _, inserted = self._find_or_attach(key)
        return inserted

    def get_or_insert(self, key: E) -> E:
        """
        Return the stored element equal to ``key``, inserting ``key`` if absent.

        Single traversal find-or-insert: the returned object is the instance
        held by the tree, so mutating it updates the index in place.

        Raises:
            ValueError: If ``key`` is None.
        """
        _require_key(key)
        node, _ = self._find_or_attach(key)
        return node.element

    def remove_min(self) -> Optional[TreeNode[E]]:
        """
        Detach and return the node holding the smallest element.

        Returns:
            Optional[TreeNode[E]]: The removed node, or None if the tree is empty.
        """
        if self._root is None:
            return None

        parent: Optional[TreeNode[E]] = None
        node = self._root
        while node.left is not None:
            parent = node
            node = node.left

        # The minimum has no left child; its right subtree takes its place.
        if parent is None:
            self._root = node.right
        else:
            parent.left = node.right

        self._size -= 1
        node.right = None
        return node

    def remove_max(self) -> Optional[TreeNode[E]]:
        """
        Detach and return the node holding the largest element.

        Returns:
            Optional[TreeNode[E]]: The removed node, or None if the tree is empty.
        """
        if self._root is None:
            return None

        parent: Optional[TreeNode[E]] = None
        node = self._root
        while node.right is not None:
            parent = node
            node = node.right

        if parent is None:
            self._root = node.left
        else:
            parent.right = node.left

        self._size -= 1
        node.left = None
        return node

    def clear(self) -> None:
        self._root = None
        self._size = 0

    # -------------------------------------------------------------------------
    # TRAVERSAL
    # -------------------------------------------------------------------------

    def inorder(self) -> TreeIterator[E]:
        """Snapshot iterator in ascending order."""
        return TreeIterator(self._collect(TraversalOrder.INORDER))

    def preorder(self) -> TreeIterator[E]:
        """Snapshot iterator visiting each node before its subtrees."""
        return TreeIterator(self._collect(TraversalOrder.PREORDER))

    def postorder(self) -> TreeIterator[E]:
        """Snapshot iterator visiting each node after its subtrees."""
        return TreeIterator(self._collect(TraversalOrder.POSTORDER))

    # -------------------------------------------------------------------------
    # PYTHON PROTOCOLS
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[E]:
        return self.inorder()

    def __contains__(self, key: object) -> bool:
        return self.contains(key)  # type: ignore[arg-type]

    def __bool__(self) -> bool:
        return self._size > 0

    def __repr__(self) -> str:
        return f"OrderedTree(size={self._size}, height={self.height()})"

    def __getstate__(self) -> Dict[str, Any]:
        # Nodes are not pickled directly: a deep chain would exceed the
        # pickler recursion limit. The preorder sequence fixes the shape.
        return {"elements": self._collect(TraversalOrder.PREORDER)}

    def __setstate__(self, state: Dict[str, Any]) -> None:
        self._root = None
        self._size = 0
        self._link_preorder(state.get("elements", []))

    # -------------------------------------------------------------------------
    # PRIVATE HELPERS
    # -------------------------------------------------------------------------

    def _find_or_attach(self, key: E) -> Tuple[TreeNode[E], bool]:
        """Walk to ``key``; attach a new leaf there if no equal element exists."""
        if self._root is None:
            self._root = TreeNode(key)
            self._size += 1
            return self._root, True

        node = self._root
        while True:
            if key < node.element:
                if node.left is None:
                    node.left = TreeNode(key)
                    self._size += 1
                    return node.left, True
                node = node.left
            elif node.element < key:
                if node.right is None:
                    node.right = TreeNode(key)
                    self._size += 1
                    return node.right, True
                node = node.right
            else:
                return node, False

    def _link_preorder(self, elements: List[E]) -> None:
        """
        Rebuild the tree from its preorder sequence in one linear pass.

        The stack holds the open right spine: an element greater than the top
        pops every smaller ancestor and becomes the right child of the last
        one popped, otherwise it is the left child of the top.
        """
        stack: List[TreeNode[E]] = []
        for element in elements:
            node = TreeNode(element)
            if not stack:
                self._root = node
            else:
                parent: Optional[TreeNode[E]] = None
                while stack and stack[-1].element < element:
                    parent = stack.pop()
                if parent is not None:
                    parent.right = node
                else:
                    stack[-1].left = node
            stack.append(node)
            self._size += 1

    def _collect(self, order: TraversalOrder) -> List[E]:
        out: List[E] = []
        if self._root is None:
            return out

        if order is TraversalOrder.PREORDER:
            stack = [self._root]
            while stack:
                node = stack.pop()
                out.append(node.element)
                if node.right is not None:
                    stack.append(node.right)
                if node.left is not None:
                    stack.append(node.left)

        elif order is TraversalOrder.INORDER:
            stack = []
            current: Optional[TreeNode[E]] = self._root
            while stack or current is not None:
                while current is not None:
                    stack.append(current)
                    current = current.left
                node = stack.pop()
                out.append(node.element)
                current = node.right

        elif order is TraversalOrder.POSTORDER:
            # Reverse of a root-right-left walk.
            stack = [self._root]
            while stack:
                node = stack.pop()
                out.append(node.element)
                if node.left is not None:
                    stack.append(node.left)
                if node.right is not None:
                    stack.append(node.right)
            out.reverse()

        else:
            raise ValueError(f"Unknown traversal order: {order!r}")

        return out


def _require_key(key: Any) -> None:
    if key is None:
        raise ValueError("Entry is None")
