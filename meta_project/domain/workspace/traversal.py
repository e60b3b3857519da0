"""Pure tree traversal combinators.

All functions in this module are pure - no I/O, no side effects.
They take a list of root nodes and walk it depth-first in declaration order.
"""

from collections.abc import Callable
from typing import TypeVar

from .models import TreeNode

T = TypeVar("T")


def fold_nodes(
    nodes: list[TreeNode],
    initial: T,
    f: Callable[[T, TreeNode, int], T],
) -> T:
    """Fold over every node with its nesting depth.

    This is the fundamental operation from which the others derive.
    Top-level nodes have depth 0.

    Args:
        nodes: Root-level nodes
        initial: Starting accumulator value
        f: Function (accumulator, node, depth) -> new_accumulator

    Returns:
        Final accumulated value after visiting all nodes
    """

    def fold_node(acc: T, node: TreeNode, depth: int) -> T:
        acc = f(acc, node, depth)
        for child in node.children:
            acc = fold_node(acc, child, depth + 1)
        return acc

    result = initial
    for node in nodes:
        result = fold_node(result, node, 0)
    return result


def count_nodes(nodes: list[TreeNode]) -> int:
    """Count every node in the tree."""
    return fold_nodes(nodes, 0, lambda acc, _node, _depth: acc + 1)


def meta_paths(nodes: list[TreeNode], max_depth: int | None = None) -> list[str]:
    """Paths of nested workspaces, parents before their descendants.

    With ``max_depth``, only workspaces whose own manifest was within the
    walk budget (node depth below ``max_depth``) are returned.
    """

    def collect(acc: list[str], node: TreeNode, depth: int) -> list[str]:
        if node.is_meta and (max_depth is None or depth < max_depth):
            acc.append(node.path)
        return acc

    return fold_nodes(nodes, [], collect)
