"""Command that builds sample trees, queries them and draws them as dot files."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import Optional, Sequence, TextIO, Union

from bstree.bst import BstNode, tree_delete, tree_insert
from bstree.dot import write_dotfile
from bstree.tree import Node, count_nodes_from

SEARCH_KEYS = (15, 9, 22)
SUCCESSOR_KEYS = (2, 20, 15, 13, 9, 7, 22)
INSERT_KEYS = (6, 18, 3, 7, 17, 20, 2, 4, 13, 9)

_PathLike = Union[str, os.PathLike]


def _some(key: int) -> str:
    return f"Some({key})"


def build_sample_bst() -> BstNode:
    """Build the sample search tree rooted at 15 by attaching children by hand."""
    root = BstNode(15)
    left = root.add_left_child(6)
    right = root.add_right_child(18)

    right.add_left_child(17)
    right.add_right_child(20)

    three = left.add_left_child(3)
    seven = left.add_right_child(7)
    three.add_left_child(2)
    three.add_right_child(4)
    seven.add_right_child(13).add_left_child(9)
    return root


def demo_binary_search_tree(output_dir: _PathLike = ".", out: Optional[TextIO] = None) -> None:
    """Search, walk, rebuild and delete on the sample tree, writing dot files to ``output_dir``."""
    out = sys.stdout if out is None else out
    directory = Path(output_dir)

    root = build_sample_bst()
    write_dotfile(root, directory / "bst_graph.dot")

    for key in SEARCH_KEYS:
        found = root.search(key)
        result = f"found -> {_some(found.key)}" if found is not None else "not found"
        print(f"tree search result of key {key} is {result}", file=out)

    print(f"minimum result {_some(root.minimum().key)}", file=out)
    max_node = root.maximum()
    print(f"maximum result {_some(max_node.key)}", file=out)
    print(f"root node {_some(max_node.root().key)}", file=out)

    for key in SUCCESSOR_KEYS:
        node = root.search(key)
        if node is None:
            print(f"node with key of {key} does not exist, failed to get successor", file=out)
            continue
        successor = node.successor_simpler()
        result = _some(successor.key) if successor is not None else "not found"
        print(f"successor of node ({key}) is {result}", file=out)

    rebuilt = tree_insert(None, 15)
    for key in INSERT_KEYS:
        rebuilt = tree_insert(rebuilt, key)
    write_dotfile(rebuilt, directory / "bst.dot")

    replacement = tree_delete(rebuilt)
    write_dotfile(replacement, directory / "bst_delete_root.dot")


def demo_binary_tree(output_dir: _PathLike = ".", out: Optional[TextIO] = None) -> None:
    """Grow, measure, search and prune a plain binary tree, writing dot files to ``output_dir``."""
    out = sys.stdout if out is None else out
    directory = Path(output_dir)

    root = Node(5)
    left = root.add_left_child(3)
    right = root.add_right_child(7)
    write_dotfile(root, directory / "prime.dot")

    left.add_left_child(2)
    left.add_right_child(4)
    right.add_right_child(10)
    write_dotfile(root, directory / "prime_t2.dot")

    print(f"Current tree depth: {root.depth()}", file=out)
    print(f"Amount of nodes in current tree: {root.count_nodes()}", file=out)
    print(f"Amount of nodes in current subtree: {count_nodes_from(right, 0)}", file=out)

    left.sibling()

    found = root.find_by_value(3)
    print(f"left subtree seek by value {found!r}", file=out)
    if found is None:
        raise LookupError("node 3 is missing from the sample tree")
    again = root.find_by_full_property(found)
    print(f"left subtree seek by full property {again!r}", file=out)

    pruned = root.copy()
    flag = pruned.discard_by_value(3)
    print(f"status of node deletion: {str(flag).lower()}", file=out)
    write_dotfile(pruned, directory / "prime_t3.dot")

    print(f"Depth after discard {pruned.depth()}", file=out)
    print(f"Count nodes after discard {pruned.count_nodes()}", file=out)

    write_dotfile(root, directory / "prime_t4.dot")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the search tree demonstration, and optionally the plain tree one first."""
    parser = argparse.ArgumentParser(
        prog="bstree", description="Build sample trees and write them as Graphviz dot files."
    )
    parser.add_argument(
        "--output-dir", default=".", help="directory that receives the dot files"
    )
    parser.add_argument(
        "--binary-tree",
        action="store_true",
        help="also run the plain binary tree demonstration",
    )
    args = parser.parse_args(argv)

    if args.binary_tree:
        demo_binary_tree(args.output_dir)
    demo_binary_search_tree(args.output_dir)
    return 0


if __name__ == "__main__":
    sys.exit(main())