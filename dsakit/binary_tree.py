"""Binary tree construction, traversals and queries."""

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

__all__ = [
    "Node",
    "NULL_MARKER",
    "build_tree",
    "preorder",
    "inorder",
    "postorder",
    "inorder_iterative",
    "preorder_iterative",
    "count_nodes",
    "sum_nodes",
    "height",
    "is_balanced",
    "find_path",
    "lowest_common_ancestor",
    "left_view",
    "sum_replace",
]

NULL_MARKER = -1


@dataclass(eq=False)
class Node:
    """A binary tree node."""

    data: Any
    left: Optional["Node"] = None
    right: Optional["Node"] = None


def build_tree(values: Iterable) -> Optional[Node]:
    """Build a tree from values in preorder, ``-1`` marking an empty subtree.

    Raises ValueError if the values end before the tree is complete.
    """
    stream = iter(values)

    def build() -> Optional[Node]:
        try:
            value = next(stream)
        except StopIteration:
            raise ValueError("values ended before the tree was complete") from None
        if value == NULL_MARKER:
            return None
        node = Node(value)
        node.left = build()
        node.right = build()
        return node

    return build()


def _preorder(root: Optional[Node]) -> Iterator[Any]:
    if root is not None:
        yield root.data
        yield from _preorder(root.left)
        yield from _preorder(root.right)


def _inorder(root: Optional[Node]) -> Iterator[Any]:
    if root is not None:
        yield from _inorder(root.left)
        yield root.data
        yield from _inorder(root.right)


def _postorder(root: Optional[Node]) -> Iterator[Any]:
    if root is not None:
        yield from _postorder(root.left)
        yield from _postorder(root.right)
        yield root.data


def preorder(root: Optional[Node]) -> list:
    """Return node values root, left, right."""
    return list(_preorder(root))


def inorder(root: Optional[Node]) -> list:
    """Return node values left, root, right."""
    return list(_inorder(root))


def postorder(root: Optional[Node]) -> list:
    """Return node values left, right, root."""
    return list(_postorder(root))


def inorder_iterative(root: Optional[Node]) -> list:
    """Inorder traversal driven by an explicit stack."""
    result = []
    stack: list[Node] = []
    node = root
    while node is not None or stack:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.data)
        node = node.right
    return result


def preorder_iterative(root: Optional[Node]) -> list:
    """Preorder traversal that stacks right children while walking left."""
    result = []
    stack: list[Node] = []
    node = root
    while node is not None or stack:
        while node is not None:
            result.append(node.data)
            if node.right is not None:
                stack.append(node.right)
            node = node.left
        if stack:
            node = stack.pop()
    return result


def count_nodes(root: Optional[Node]) -> int:
    """Return the number of nodes."""
    if root is None:
        return 0
    return count_nodes(root.left) + count_nodes(root.right) + 1


def sum_nodes(root: Optional[Node]) -> Any:
    """Return the sum of all node values."""
    if root is None:
        return 0
    return sum_nodes(root.left) + sum_nodes(root.right) + root.data


def height(root: Optional[Node]) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return max(height(root.left), height(root.right)) + 1


def is_balanced(root: Optional[Node]) -> bool:
    """Tell whether every node's subtrees differ in height by at most one."""

    def checked_height(node: Optional[Node]) -> Optional[int]:
        if node is None:
            return 0
        left = checked_height(node.left)
        if left is None:
            return None
        right = checked_height(node.right)
        if right is None or abs(left - right) > 1:
            return None
        return max(left, right) + 1

    return checked_height(root) is not None


def find_path(root: Optional[Node], key: Any) -> Optional[list]:
    """Return the values from the root down to ``key``, or None if absent."""
    if root is None:
        return None
    if root.data == key:
        return [root.data]
    for child in (root.left, root.right):
        path = find_path(child, key)
        if path is not None:
            return [root.data, *path]
    return None


def lowest_common_ancestor(root: Optional[Node], first: Any, second: Any) -> Any:
    """Return the value of the deepest node above both keys, or None.

    None is returned when either key is not in the tree.
    """
    first_path = find_path(root, first)
    second_path = find_path(root, second)
    if first_path is None or second_path is None:
        return None
    common = None
    for a, b in zip(first_path, second_path):
        if a != b:
            break
        common = a
    return common


def left_view(root: Optional[Node]) -> list:
    """Return the first value of every level, top to bottom."""
    if root is None:
        return []
    view = []
    level = deque([root])
    while level:
        view.append(level[0].data)
        for _ in range(len(level)):
            node = level.popleft()
            if node.left is not None:
                level.append(node.left)
            if node.right is not None:
                level.append(node.right)
    return view


def sum_replace(root: Optional[Node]) -> None:
    """Replace every value, in place, by the sum of its subtree."""
    if root is None:
        return
    sum_replace(root.left)
    sum_replace(root.right)
    if root.left is not None:
        root.data += root.left.data
    if root.right is not None:
        root.data += root.right.data