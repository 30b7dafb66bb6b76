"""Binary trees: construction from tokens and depth-first traversals."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

NULL_TOKEN = "null"
_DIGITS = frozenset("0123456789")


@dataclass
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def inorder(root: TreeNode | None) -> list[int]:
    """Return values left, root, right, using an explicit stack."""
    stack: list[TreeNode] = []
    result: list[int] = []
    node = root
    while node is not None or stack:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.val)
        node = node.right
    return result


def preorder(root: TreeNode | None) -> list[int]:
    """Return values root, left, right, using an explicit stack."""
    stack: list[TreeNode] = []
    result: list[int] = []
    node = root
    while node is not None or stack:
        while node is not None:
            stack.append(node)
            result.append(node.val)
            node = node.left
        node = stack.pop().right
    return result


def postorder(root: TreeNode | None) -> list[int]:
    """Return values left, right, root, using an explicit stack."""
    stack: list[TreeNode] = []
    result: list[int] = []
    node = root
    previous: TreeNode | None = None
    while node is not None or stack:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        if node.right is None or node.right is previous:
            result.append(node.val)
            previous = node
            node = None
        else:
            stack.append(node)
            node = node.right
    return result


def inorder_recursive(root: TreeNode | None) -> list[int]:
    """Return values left, root, right, by recursion."""
    if root is None:
        return []
    return [*inorder_recursive(root.left), root.val, *inorder_recursive(root.right)]


def preorder_recursive(root: TreeNode | None) -> list[int]:
    """Return values root, left, right, by recursion."""
    if root is None:
        return []
    return [root.val, *preorder_recursive(root.left), *preorder_recursive(root.right)]


def postorder_recursive(root: TreeNode | None) -> list[int]:
    """Return values left, right, root, by recursion."""
    if root is None:
        return []
    return [*postorder_recursive(root.left), *postorder_recursive(root.right), root.val]


def parse_value(token: str) -> int:
    """Convert a token of decimal digits into a node value."""
    if not token or not set(token) <= _DIGITS:
        raise ValueError(f"invalid node value: {token!r}")
    return int(token)


def _next_token(stream: Iterator[str]) -> str:
    try:
        return next(stream)
    except StopIteration:
        raise ValueError("unexpected end of tree tokens") from None


def _read_node(stream: Iterator[str]) -> TreeNode | None:
    token = _next_token(stream)
    if token == NULL_TOKEN:
        return None
    return TreeNode(parse_value(token))


def build_preorder(tokens: Iterable[str]) -> TreeNode | None:
    """Build a tree from tokens in preorder, with ``null`` for missing children."""
    stream = iter(tokens)

    def build() -> TreeNode | None:
        node = _read_node(stream)
        if node is not None:
            node.left = build()
            node.right = build()
        return node

    return build()


def build_level_order(tokens: Iterable[str]) -> TreeNode | None:
    """Build a tree from tokens in level order, with ``null`` for missing children."""
    stream = iter(tokens)
    root = _read_node(stream)
    queue = deque([root] if root is not None else [])
    while queue:
        node = queue.popleft()
        node.left = _read_node(stream)
        node.right = _read_node(stream)
        queue.extend(child for child in (node.left, node.right) if child is not None)
    return root


def main(argv: list[str] | None = None) -> int:
    """Read tree tokens from standard input and print the preorder traversal."""
    parser = argparse.ArgumentParser(
        description="Build a binary tree from tokens on standard input "
        "and print its values in preorder, one per line."
    )
    parser.add_argument(
        "--preorder",
        action="store_true",
        help="read the tokens in preorder instead of level order",
    )
    args = parser.parse_args(argv)
    build = build_preorder if args.preorder else build_level_order
    try:
        root = build(sys.stdin.read().split())
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    for value in preorder(root):
        print(value)
    return 0