import pytest

from bstree.bst import BstNode, tree_insert
from bstree.dot import dot_text, write_dotfile
from bstree.tree import Node


def _bst(keys):
    root = None
    for key in keys:
        root = tree_insert(root, key)
    return root


def _edge_lines(text):
    body = text[len("graph tree{\n"):-1]
    return [line for line in body.split("\n") if line]


def test_single_node_has_no_edges():
    assert dot_text(Node(1)) == "graph tree{\n}"


def test_single_edge_format():
    root = Node(1)
    root.add_left_child(2)
    assert dot_text(root) == "graph tree{\n\t1--2;\n}"


def test_document_frame():
    text = dot_text(_bst([5, 3, 8]))
    assert text.startswith("graph tree{\n")
    assert text.endswith("}")


def test_edge_count_matches_node_count():
    root = Node(5)
    left = root.add_left_child(3)
    root.add_right_child(7).add_right_child(10)
    left.add_left_child(2)
    left.add_right_child(4)
    assert len(_edge_lines(dot_text(root))) == root.count_nodes() - 1


def test_own_edges_before_children_edges():
    root = _bst([15, 6, 18, 3, 7])
    lines = _edge_lines(dot_text(root))
    assert lines == ["\t15--6;", "\t15--18;", "\t6--3;", "\t6--7;"]


def test_left_subtree_drawn_before_right():
    root = _bst([10, 5, 20, 1, 30])
    lines = _edge_lines(dot_text(root))
    assert lines.index("\t5--1;") < lines.index("\t20--30;")


def test_bst_node_uses_key_label():
    root = BstNode(4)
    root.add_right_child(9)
    assert "\t4--9;" in _edge_lines(dot_text(root))


def test_write_dotfile_round_trip(tmp_path):
    root = _bst([15, 6, 18, 3, 7, 17, 20])
    path = tmp_path / "graph.dot"
    write_dotfile(root, path)
    assert path.read_text(encoding="utf-8") == dot_text(root)


def test_write_dotfile_accepts_str_path(tmp_path):
    root = Node(1)
    root.add_right_child(2)
    path = tmp_path / "graph.dot"
    write_dotfile(root, str(path))
    assert path.read_bytes() == dot_text(root).encode("utf-8")


def test_write_dotfile_missing_directory(tmp_path):
    with pytest.raises(OSError):
        write_dotfile(Node(1), tmp_path / "missing" / "graph.dot")