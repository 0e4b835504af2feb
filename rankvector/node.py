"""Tree nodes for the rank-indexed AVL vector, and the local operations on them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

__all__ = [
    "Node",
    "height_of",
    "set_height",
    "update_size",
    "balance_of",
    "rotate_left_left",
    "rotate_right_right",
    "rotate_left_right",
    "rotate_right_left",
]


@dataclass(eq=False, slots=True)
class Node:
    """A tree node holding one element plus its subtree bookkeeping.

    ``height`` counts edges on the longest downward path (a leaf has 0),
    ``size`` is the number of nodes in the subtree, and ``num_left`` is the
    size of the left subtree, which gives the node's rank within it.
    """

    value: int
    height: int = 0
    size: int = 1
    num_left: int = 0
    left: Optional[Node] = None
    right: Optional[Node] = None
    parent: Optional[Node] = field(default=None, repr=False)


def height_of(node: Optional[Node]) -> int:
    """Return the stored height of ``node``; an absent subtree counts as -1."""
    return -1 if node is None else node.height


def set_height(node: Optional[Node]) -> None:
    """Recompute ``node.height`` from the heights of its children."""
    if node is not None:
        node.height = 1 + max(height_of(node.left), height_of(node.right))


def update_size(node: Optional[Node]) -> None:
    """Recompute ``node.size`` and ``node.num_left`` from its children."""
    if node is None:
        return
    left_size = node.left.size if node.left is not None else 0
    right_size = node.right.size if node.right is not None else 0
    node.size = left_size + right_size + 1
    node.num_left = left_size


def balance_of(node: Optional[Node]) -> int:
    """Return left height minus right height; zero for an absent node."""
    if node is None:
        return 0
    return height_of(node.left) - height_of(node.right)


def _replace_child(parent: Optional[Node], old: Node, new: Node) -> None:
    if parent is None:
        return
    if parent.left is old:
        parent.left = new
    else:
        parent.right = new


def _refresh(*nodes: Node) -> None:
    """Refresh size and height of the given nodes, listed bottom-up."""
    for node in nodes:
        update_size(node)
    for node in nodes:
        set_height(node)


def rotate_left_left(node: Node) -> Node:
    """Single right rotation fixing a left-left imbalance; return the new subtree root."""
    pivot = node.left
    if pivot is None:
        raise ValueError("left-left rotation needs a left child")

    pivot.parent = node.parent
    node.parent = pivot

    node.left = pivot.right
    if node.left is not None:
        node.left.parent = node
    pivot.right = node

    _replace_child(pivot.parent, node, pivot)
    _refresh(node, pivot)
    return pivot


def rotate_right_right(node: Node) -> Node:
    """Single left rotation fixing a right-right imbalance; return the new subtree root."""
    pivot = node.right
    if pivot is None:
        raise ValueError("right-right rotation needs a right child")

    pivot.parent = node.parent
    node.parent = pivot

    node.right = pivot.left
    if node.right is not None:
        node.right.parent = node
    pivot.left = node

    _replace_child(pivot.parent, node, pivot)
    _refresh(node, pivot)
    return pivot


def rotate_left_right(node: Node) -> Node:
    """Double rotation fixing a left-right imbalance; return the new subtree root."""
    child = node.left
    if child is None or child.right is None:
        raise ValueError("left-right rotation needs a left child with a right child")
    pivot = child.right

    pivot.parent = node.parent
    child.parent = pivot
    node.parent = pivot

    child.right = pivot.left
    if child.right is not None:
        child.right.parent = child
    node.left = pivot.right
    if node.left is not None:
        node.left.parent = node

    pivot.left = child
    pivot.right = node

    _replace_child(pivot.parent, node, pivot)
    _refresh(node, child, pivot)
    return pivot


def rotate_right_left(node: Node) -> Node:
    """Double rotation fixing a right-left imbalance; return the new subtree root."""
    child = node.right
    if child is None or child.left is None:
        raise ValueError("right-left rotation needs a right child with a left child")
    pivot = child.left

    pivot.parent = node.parent
    child.parent = pivot
    node.parent = pivot

    child.left = pivot.right
    if child.left is not None:
        child.left.parent = child
    node.right = pivot.left
    if node.right is not None:
        node.right.parent = node

    pivot.right = child
    pivot.left = node

    _replace_child(pivot.parent, node, pivot)
    _refresh(node, child, pivot)
    return pivot