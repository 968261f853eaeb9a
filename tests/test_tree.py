import pytest

from bstree.tree import Node, count_nodes_from

SAMPLE_VALUES = [5, 3, 7, 2, 4, 10]


@pytest.fixture
def sample():
    root = Node(5)
    left = root.add_left_child(3)
    right = root.add_right_child(7)
    left.add_left_child(2)
    left.add_right_child(4)
    right.add_right_child(10)
    return root


def _chain(values):
    root = Node(values[0])
    node = root
    for value in values[1:]:
        node = node.add_left_child(value)
    return root


def test_add_children_links_parent(sample):
    assert sample.left.value == 3
    assert sample.right.value == 7
    assert sample.left.parent is sample
    assert sample.right.right.parent is sample.right


def test_add_child_replaces_existing():
    root = Node(1)
    root.add_left_child(2)
    replacement = root.add_left_child(9)
    assert root.left is replacement
    assert root.left.value == 9


def test_label_is_value_text():
    assert Node(42).label() == "42"


def test_copy_shares_children(sample):
    twin = sample.copy()
    assert twin is not sample
    assert twin.value == sample.value
    assert twin.left is sample.left
    assert twin.right is sample.right


def test_find_by_value_root_returns_copy(sample):
    found = sample.find_by_value(5)
    assert found is not sample
    assert found.value == 5
    assert found.left is sample.left


def test_find_by_value_only_follows_left_branch(sample):
    assert sample.find_by_value(10) is None


def test_find_by_value_turns_right_without_left():
    root = Node(1)
    root.add_right_child(8)
    assert root.find_by_value(8).value == 8


def test_find_by_full_property_matches(sample):
    found = sample.find_by_full_property(sample.left)
    assert found.value == 3
    assert found.left.value == 2
    assert found.right.value == 4
    assert found.parent is sample


def test_find_by_full_property_root(sample):
    found = sample.find_by_full_property(sample)
    assert found.value == 5
    assert found.parent is None


def test_find_by_full_property_mismatch_children(sample):
    probe = Node(3, sample)
    assert sample.find_by_full_property(probe) is None


def test_discard_by_value_on_copy(sample):
    before = sample.count_nodes()
    left_size = sample.left.count_nodes()
    twin = sample.copy()
    assert twin.discard_by_value(3) is True
    assert twin.left is None
    assert sample.left is not None
    assert sample.left.parent is None
    assert twin.count_nodes() == before - left_size


def test_discard_missing_value_returns_false(sample):
    twin = sample.copy()
    assert twin.discard_by_value(99) is False
    assert twin.left is None


def test_discard_self_cuts_parent(sample):
    left = sample.left
    assert left.discard_by_value(3) is True
    assert left.parent is None


def test_count_nodes(sample):
    assert sample.count_nodes() == len(SAMPLE_VALUES)


def test_count_nodes_from_subtree(sample):
    assert count_nodes_from(sample.right, 0) == len([7, 10])
    assert count_nodes_from(sample, 0) == sample.count_nodes()


@pytest.mark.parametrize("values", [[1], [1, 2], [4, 3, 2, 1, 0]])
def test_depth_of_chain(values):
    assert _chain(values).depth() == len(values) - 1


def test_depth_takes_longest_path(sample):
    assert sample.depth() == sample.left.depth() + 1
    assert sample.depth() == sample.right.depth() + 1


def test_sibling(sample):
    assert sample.left.sibling() is sample.right
    assert sample.right.sibling() is sample.left
    assert sample.sibling() is None


def test_sibling_missing():
    root = Node(1)
    child = root.add_left_child(2)
    assert child.sibling() is None
    only_right = Node(1).add_right_child(3)
    assert only_right.sibling() is None