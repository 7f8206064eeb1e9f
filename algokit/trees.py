"""Operations on binary trees and binary search trees."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from itertools import pairwise
from typing import Optional

from algokit.nodes import TreeNode


def _inorder_nodes(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def inorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Return the node values in in-order sequence."""
    return [node.val for node in _inorder_nodes(root)]


def _generate(start: int, end: int) -> list[Optional[TreeNode]]:
    if start > end:
        return [None]
    trees: list[Optional[TreeNode]] = []
    for value in range(start, end + 1):
        lefts = _generate(start, value - 1)
        rights = _generate(value + 1, end)
        trees.extend(TreeNode(value, left, right) for left in lefts for right in rights)
    return trees


def generate_trees(n: int) -> list[Optional[TreeNode]]:
    """Return every structurally distinct BST holding the values 1..n.

    Subtrees may be shared between the returned trees.
    """
    return _generate(1, n)


def num_trees(n: int) -> int:
    """Count the structurally distinct BSTs holding the values 1..n."""
    if n < 0:
        raise ValueError("n must not be negative")
    counts = [1]
    for size in range(1, n + 1):
        counts.append(sum(counts[root - 1] * counts[size - root] for root in range(1, size + 1)))
    return counts[n]


def is_valid_bst(root: Optional[TreeNode]) -> bool:
    """Tell whether the tree is a BST with strictly increasing in-order values."""
    return all(a.val < b.val for a, b in pairwise(_inorder_nodes(root)))


def recover_tree(root: Optional[TreeNode]) -> None:
    """Swap back, in place, the values of the two nodes of a BST that were exchanged."""
    first: Optional[TreeNode] = None
    second: Optional[TreeNode] = None
    for prev, node in pairwise(_inorder_nodes(root)):
        if prev.val >= node.val:
            if first is None:
                first = prev
            second = node
    if first is not None and second is not None:
        first.val, second.val = second.val, first.val


def is_same_tree(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    """Tell whether two trees have the same shape and values."""
    if p is None or q is None:
        return p is q
    return p.val == q.val and is_same_tree(p.left, q.left) and is_same_tree(p.right, q.right)


def _mirrors(a: Optional[TreeNode], b: Optional[TreeNode]) -> bool:
    if a is None or b is None:
        return a is b
    return a.val == b.val and _mirrors(a.left, b.right) and _mirrors(a.right, b.left)


def is_symmetric(root: Optional[TreeNode]) -> bool:
    """Tell whether the tree is a mirror image of itself."""
    return root is None or _mirrors(root.left, root.right)


def level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Return the node values grouped by depth, top to bottom, left to right."""
    levels: list[list[int]] = []
    queue = deque([root] if root is not None else [])
    while queue:
        level = []
        for _ in range(len(queue)):
            node = queue.popleft()
            level.append(node.val)
            queue.extend(child for child in (node.left, node.right) if child is not None)
        levels.append(level)
    return levels