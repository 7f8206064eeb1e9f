import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.nodes import TreeNode, tree_from_level_order, tree_to_level_order
from algokit.trees import (
    generate_trees,
    inorder_traversal,
    is_same_tree,
    is_symmetric,
    is_valid_bst,
    level_order,
    num_trees,
    recover_tree,
)

distinct_values = st.lists(st.integers(-1000, 1000), unique=True, max_size=40)


def _bst(values):
    root = None
    for value in values:
        if root is None:
            root = TreeNode(value)
            continue
        node = root
        while True:
            side = "left" if value < node.val else "right"
            child = getattr(node, side)
            if child is None:
                setattr(node, side, TreeNode(value))
                break
            node = child
    return root


def _mirror(root):
    if root is None:
        return None
    return TreeNode(root.val, _mirror(root.right), _mirror(root.left))


def _nodes(root):
    if root is None:
        return []
    return [root] + _nodes(root.left) + _nodes(root.right)


@given(distinct_values)
def test_inorder_of_bst_is_sorted(values):
    assert inorder_traversal(_bst(values)) == sorted(values)


def test_inorder_of_empty_tree():
    assert inorder_traversal(None) == []


def test_inorder_example():
    assert inorder_traversal(tree_from_level_order([1, None, 2, 3])) == [1, 3, 2]


def test_num_trees_example():
    assert num_trees(3) == 5


def test_num_trees_rejects_negative():
    with pytest.raises(ValueError):
        num_trees(-1)


@pytest.mark.parametrize("n", range(1, 7))
def test_generate_trees_are_distinct_valid_bsts(n):
    trees = generate_trees(n)
    assert len(trees) == num_trees(n)
    for tree in trees:
        assert is_valid_bst(tree)
        assert inorder_traversal(tree) == list(range(1, n + 1))
    shapes = {tuple(tree_to_level_order(tree)) for tree in trees}
    assert len(shapes) == len(trees)


def test_generate_trees_zero_gives_single_empty_tree():
    assert generate_trees(0) == [None]


@given(distinct_values)
def test_built_bst_is_valid(values):
    assert is_valid_bst(_bst(values))


@given(st.lists(st.integers(-1000, 1000), unique=True, min_size=2, max_size=40), st.data())
def test_swapped_values_break_and_recover_restores(values, data):
    root = _bst(values)
    original = tree_to_level_order(root)
    nodes = _nodes(root)
    i, j = data.draw(
        st.lists(st.integers(0, len(nodes) - 1), unique=True, min_size=2, max_size=2)
    )
    nodes[i].val, nodes[j].val = nodes[j].val, nodes[i].val
    assert not is_valid_bst(root)
    recover_tree(root)
    assert is_valid_bst(root)
    assert tree_to_level_order(root) == original


def test_equal_values_are_not_a_valid_bst():
    assert not is_valid_bst(tree_from_level_order([2, 2]))


@given(distinct_values)
def test_same_tree_against_rebuilt_copy(values):
    root = _bst(values)
    copy = tree_from_level_order(tree_to_level_order(root))
    assert is_same_tree(root, copy)


@given(st.lists(st.integers(-1000, 1000), unique=True, min_size=1, max_size=40))
def test_changed_value_is_not_same_tree(values):
    root = _bst(values)
    copy = tree_from_level_order(tree_to_level_order(root))
    copy.val += 1
    assert not is_same_tree(root, copy)
    assert not is_same_tree(root, None)


@given(distinct_values, st.integers())
def test_tree_joined_with_its_mirror_is_symmetric(values, top):
    side = _bst(values)
    assert is_symmetric(TreeNode(top, side, _mirror(side)))


@given(st.lists(st.integers(-1000, 1000), unique=True, min_size=2, max_size=40))
def test_tree_joined_with_itself_is_not_symmetric_when_lopsided(values):
    side = _bst(values)
    assert is_symmetric(TreeNode(0, side, side)) == is_same_tree(side, _mirror(side))


def test_empty_tree_is_symmetric():
    assert is_symmetric(None)


@given(st.lists(st.integers(), min_size=1, max_size=63))
def test_level_order_of_complete_tree(values):
    levels = level_order(tree_from_level_order(values))
    assert [v for level in levels for v in level] == values
    assert [len(level) for level in levels[:-1]] == [2**d for d in range(len(levels) - 1)]


@given(distinct_values)
def test_level_order_keeps_every_value(values):
    root = _bst(values)
    levels = level_order(root)
    assert sorted(v for level in levels for v in level) == sorted(values)
    expected = [v for v in tree_to_level_order(root) if v is not None]
    assert [v for level in levels for v in level] == expected


def test_level_order_of_empty_tree():
    assert level_order(None) == []