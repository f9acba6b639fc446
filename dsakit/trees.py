"""Binary tree node and iterative traversals."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class TreeNode:
    """A binary tree node holding an integer value."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def inorder(root: TreeNode | None) -> list[int]:
    """Return the values of the tree in left, root, right order."""
    result: list[int] = []
    stack: list[TreeNode] = []
    node = root
    while node is not None or stack:
        if node is not None:
            stack.append(node)
            node = node.left
        else:
            parent = stack.pop()
            result.append(parent.val)
            node = parent.right
    return result


def preorder(root: TreeNode | None) -> list[int]:
    """Return the values of the tree in root, left, right order."""
    result: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.val)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def all_traversals(
    root: TreeNode | None,
) -> tuple[list[int], list[int], list[int]]:
    """Return the inorder, preorder and postorder values in a single pass."""
    pre: list[int] = []
    ino: list[int] = []
    post: list[int] = []
    if root is None:
        return ino, pre, post

    stack: list[tuple[TreeNode, int]] = [(root, 1)]
    while stack:
        node, state = stack.pop()
        if state == 1:
            pre.append(node.val)
            stack.append((node, 2))
            if node.left is not None:
                stack.append((node.left, 1))
        elif state == 2:
            ino.append(node.val)
            stack.append((node, 3))
            if node.right is not None:
                stack.append((node.right, 1))
        else:
            post.append(node.val)
    return ino, pre, post