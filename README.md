# bstree

Binary trees whose nodes keep a link to their parent, a binary search tree
built the same way, and a writer for Graphviz `dot` files. No third-party
packages are needed.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `bstree.tree`

`Node(value, parent=None)` is a plain binary tree node with `value`,
`parent`, `left` and `right` attributes.

- `add_left_child(value)` / `add_right_child(value)` attach a new child
  (replacing any existing one) and return it.
- `copy()` returns a new node with the same value, parent and children; the
  children are shared, not copied.
- `find_by_value(value)` returns a copy of the matching node. The walk takes
  the left child whenever there is one and turns right only when a node has
  no left child, so it does not visit every node.
- `find_by_full_property(node)` walks the same way, looking for a node whose
  value and whose parent's and children's values all match `node`.
- `discard_by_value(value)` cuts off the matching node and its subtree.
  Every node on the path walked loses the child it descended into, whether
  or not the value was found; it returns whether it was found.
- `count_nodes()` counts the nodes of the subtree, this node included.
- `depth()` is the number of edges on the longest path down to a leaf.
- `sibling()` returns the other child of the parent, or `None` for a root.
- `label()` is the text used for the node in a drawing.

`count_nodes_from(node, count)` counts the subtree under `node`, adding
`count` at every node visited.

### `bstree.bst`

`BstNode(key, parent=None)` is a binary search tree node with `key`,
`parent`, `left` and `right` attributes.

- `add_left_child(key)` / `add_right_child(key)` attach a child by hand and
  return it.
- `search(key)`, `minimum()` and `maximum()` return a *copy* of the found
  node (`search` returns `None` when the key is absent).
- `root()` returns the topmost ancestor.
- `successor()` returns the node with the next larger key, or `None`.
- `successor_simpler()` is a second successor search that treats any node
  lacking a parent or either child as nil; it raises `ValueError` when it
  needs the parent of a node that has none.
- `copy()` and `label()` behave as for `Node`.

Module functions:

- `tree_insert(node, key)` inserts `key` below `node` (keys not greater than
  a node's key go left) and returns the root. With `node=None` it returns a
  new single-node tree.
- `tree_delete(node)` removes `node` and returns the node that takes its
  place. It raises `ValueError` for a node with no children.

### `bstree.dot`

- `dot_text(root)` renders the tree under `root` (a `Node` or `BstNode`) as
  an undirected Graphviz graph named `tree`, one `parent--child;` line per
  edge; a node's own edges come before those of its children.
- `write_dotfile(root, output_path)` writes that text to a file.

### `bstree.cli`

- `build_sample_bst()` builds the sample search tree rooted at 15.
- `demo_binary_search_tree(output_dir=".", out=None)` and
  `demo_binary_tree(output_dir=".", out=None)` run the demonstrations,
  printing to `out` (standard output by default).
- `main(argv=None)` is the entry point of the `bstree` command.

## Example

```python
from bstree.bst import tree_insert
from bstree.dot import dot_text

root = None
for key in (15, 6, 18, 3, 7, 17, 20, 2, 4, 13, 9):
    root = tree_insert(root, key)

print(root.search(9).label())   # 9
print(root.minimum().label())   # 2
print(root.maximum().label())   # 20
print(dot_text(root))
```

## Command line

```
bstree [--output-dir DIR] [--binary-tree]
```

The command builds the sample search tree and prints the results of key
searches (for example `tree search result of key 15 is found -> Some(15)`),
the minimum, maximum and root, and successor queries. It then rebuilds the
tree with `tree_insert` and deletes its root. It writes `bst_graph.dot`,
`bst.dot` and `bst_delete_root.dot` to the output directory (the current
directory by default), overwriting any files of those names.

With `--binary-tree` it first runs the plain binary tree demonstration,
printing depths and node counts and writing `prime.dot`, `prime_t2.dot`,
`prime_t3.dot` and `prime_t4.dot`.

Render any of the written files with Graphviz, for example
`dot -Tpng bst.dot -o bst.png`.

## What it does not do

- The search tree is not self-balancing; there are no rotations.
- `tree_delete` cannot remove a leaf, and there is no function to delete a
  node by key.
- Nothing is rendered to images; only `dot` text is produced.