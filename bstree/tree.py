"""A plain binary tree whose nodes carry integer values and know their parent."""

from __future__ import annotations

from typing import Optional


class Node:
    """A binary tree node holding a value, an optional parent and up to two children."""

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: Optional[Node] = None) -> None:
        self.value = value
        self.parent = parent
        self.left: Optional[Node] = None
        self.right: Optional[Node] = None

    def __repr__(self) -> str:
        def show(node: Optional[Node]) -> str:
            return "None" if node is None else str(node.value)

        return (
            f"Node(value={self.value}, parent={show(self.parent)}, "
            f"left={show(self.left)}, right={show(self.right)})"
        )

    def label(self) -> str:
        """Text used for this node when the tree is drawn."""
        return str(self.value)

    def add_left_child(self, value: int) -> Node:
        """Attach a new left child with ``value``, replacing any existing one."""
        self.left = Node(value, self)
        return self.left

    def add_right_child(self, value: int) -> Node:
        """Attach a new right child with ``value``, replacing any existing one."""
        self.right = Node(value, self)
        return self.right

    def copy(self) -> Node:
        """A new node with the same value, parent and children (children are shared)."""
        twin = Node(self.value, self.parent)
        twin.left = self.left
        twin.right = self.right
        return twin

    def find_by_value(self, value: int) -> Optional[Node]:
        """Return a copy of the node holding ``value``.

        The search descends into the left child whenever there is one and only
        turns right when a node has no left child.
        """
        node: Optional[Node] = self
        while node is not None:
            if node.value == value:
                return node.copy()
            node = node.left if node.left is not None else node.right
        return None

    def find_by_full_property(self, node: Node) -> Optional[Node]:
        """Return a copy of the node whose value, parent and children's values match ``node``.

        Like :meth:`find_by_value`, only the left branch is followed when it exists.
        """
        current: Optional[Node] = self
        while current is not None:
            if (
                current.value == node.value
                and _same_value(node.parent, current.parent)
                and _same_value(node.left, current.left)
                and _same_value(node.right, current.right)
            ):
                return current.copy()
            current = current.left if current.left is not None else current.right
        return None

    def discard_by_value(self, value: int) -> bool:
        """Cut away the node holding ``value`` together with its subtree.

        Every node on the path walked is severed from the child it descended
        into, whether or not the value was found. Returns whether it was found.
        """
        if self.value == value:
            self.parent = None
            return True
        if self.left is not None:
            found = self.left.discard_by_value(value)
            self.left = None
            return found
        if self.right is not None:
            found = self.right.discard_by_value(value)
            self.right = None
            return found
        return False

    def count_nodes(self) -> int:
        """Number of nodes in the subtree rooted here, this node included."""
        return count_nodes_from(self, 0)

    def depth(self) -> int:
        """Number of edges on the longest path from this node down to a leaf."""
        left_depth = self.left.depth() + 1 if self.left is not None else 0
        right_depth = self.right.depth() + 1 if self.right is not None else 0
        return max(left_depth, right_depth)

    def sibling(self) -> Optional[Node]:
        """The other child of this node's parent, or None for a root."""
        parent = self.parent
        if parent is None:
            return None
        if parent.left is not None and parent.left.value == self.value:
            return parent.right
        return parent.left


def count_nodes_from(node: Node, count: int) -> int:
    """Count the subtree under ``node``, adding ``count`` at every node visited."""
    left_count = count_nodes_from(node.left, count) if node.left is not None else 0
    right_count = count_nodes_from(node.right, count) if node.right is not None else 0
    return count + left_count + right_count + 1


def _same_value(first: Optional[Node], second: Optional[Node]) -> bool:
    if first is None:
        return second is None
    return second is not None and second.value == first.value