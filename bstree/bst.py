"""A binary search tree of integer keys whose nodes know their parent."""

from __future__ import annotations

from typing import Optional


class BstNode:
    """A binary search tree node with an integer key, a parent and up to two children."""

    __slots__ = ("key", "parent", "left", "right")

    def __init__(self, key: int, parent: Optional[BstNode] = None) -> None:
        self.key = key
        self.parent = parent
        self.left: Optional[BstNode] = None
        self.right: Optional[BstNode] = None

    def __repr__(self) -> str:
        def show(node: Optional[BstNode]) -> str:
            return "None" if node is None else str(node.key)

        return (
            f"BstNode(key={self.key}, parent={show(self.parent)}, "
            f"left={show(self.left)}, right={show(self.right)})"
        )

    def label(self) -> str:
        """Text used for this node when the tree is drawn."""
        return str(self.key)

    def add_left_child(self, key: int) -> BstNode:
        """Attach a new left child with ``key``, replacing any existing one."""
        self.left = BstNode(key, self)
        return self.left

    def add_right_child(self, key: int) -> BstNode:
        """Attach a new right child with ``key``, replacing any existing one."""
        self.right = BstNode(key, self)
        return self.right

    def copy(self) -> BstNode:
        """A new node with the same key, parent and children (children are shared)."""
        twin = BstNode(self.key, self.parent)
        twin.left = self.left
        twin.right = self.right
        return twin

    def search(self, key: int) -> Optional[BstNode]:
        """Return a copy of the node holding ``key``, or None.

        A smaller key descends left when there is a left child; otherwise the
        search continues to the right child if there is one.
        """
        node: BstNode = self
        while True:
            if node.key == key:
                return node.copy()
            if key < node.key and node.left is not None:
                node = node.left
            elif node.right is not None:
                node = node.right
            else:
                return None

    def minimum(self) -> BstNode:
        """A copy of the leftmost node of this subtree."""
        node = self
        while node.left is not None:
            node = node.left
        return node.copy()

    def maximum(self) -> BstNode:
        """A copy of the rightmost node of this subtree."""
        node = self
        while node.right is not None:
            node = node.right
        return node.copy()

    def root(self) -> BstNode:
        """The topmost ancestor of this node, or the node itself if it has no parent."""
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    def successor(self) -> Optional[BstNode]:
        """The node with the next larger key, or None if this holds the largest key."""
        if self.right is not None:
            return self.right.minimum()
        node: BstNode = self
        ancestor = node.parent
        while ancestor is not None:
            if ancestor.left is not None and ancestor.left.key == node.key:
                return ancestor
            node, ancestor = ancestor, ancestor.parent
        return None

    def successor_simpler(self) -> Optional[BstNode]:
        """Successor search that treats any node lacking a parent or a child as nil.

        Raises ValueError when the walk needs the parent of a node that has none.
        """
        right = self.right
        if not _is_nil(right):
            assert right is not None
            return right.minimum()

        parent = self.parent
        if parent is None:
            raise ValueError(f"node {self.key} has no parent")
        parent_right = parent.right
        node: BstNode = self
        ancestor: BstNode = parent
        while _is_nil(ancestor) and _same_key(node, parent_right):
            if ancestor.parent is None:
                raise ValueError(f"node {ancestor.key} has no parent")
            node, ancestor = ancestor, ancestor.parent

        if _same_key(ancestor, node.root()):
            return None
        return ancestor


def tree_insert(node: Optional[BstNode], key: int) -> BstNode:
    """Insert ``key`` below ``node`` and return the root of the tree.

    Keys not greater than a node's key go to its left. With no node, a new
    single-node tree is returned.
    """
    if node is None:
        return BstNode(key)
    current = node
    while True:
        if current.key < key:
            if current.right is None:
                current.add_right_child(key)
                break
            current = current.right
        else:
            if current.left is None:
                current.add_left_child(key)
                break
            current = current.left
    return node.root()


def tree_delete(node: BstNode) -> BstNode:
    """Remove ``node`` from its tree and return the node that takes its place.

    Raises ValueError when the node has neither a right nor a left child.
    """
    if node.right is None:
        if node.left is None:
            raise ValueError(f"node {node.key} has no child to take its place")
        return _transplant(node, node.left)
    if node.left is None:
        return _transplant(node, node.right)

    min_node = node.right.minimum()
    min_parent = min_node.parent
    if not _same_key(min_parent, node):
        if min_node.right is not None:
            min_node = _transplant(min_node, min_node.right)
        else:
            assert min_parent is not None
            min_parent.left = None
        node.right.parent = min_node
        min_node.right = node.right

    replacement = _transplant(node, min_node)
    node.left.parent = replacement
    replacement.left = node.left
    node.right.parent = replacement
    replacement.right = node.right
    return replacement


def _transplant(old: BstNode, new: BstNode) -> BstNode:
    """Hang ``new`` from ``old``'s parent in ``old``'s place and return ``new``."""
    parent = old.parent
    if parent is not None:
        if parent.left is None:
            raise ValueError(f"parent {parent.key} of node {old.key} has no left child")
        if parent.left.key == old.key:
            parent.left = new
        else:
            parent.right = new
        new.parent = parent
    return new


def _is_nil(node: Optional[BstNode]) -> bool:
    """True for a missing node or one lacking its parent or either child."""
    if node is None:
        return True
    return node.parent is None or node.left is None or node.right is None


def _same_key(first: Optional[BstNode], second: Optional[BstNode]) -> bool:
    if first is None:
        return second is None
    return second is not None and second.key == first.key