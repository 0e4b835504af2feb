"""A sequence addressed by 1-based rank, stored as a size-augmented AVL tree."""

from __future__ import annotations

import sys
from typing import Iterator, Optional, TextIO

from .node import (
    Node,
    balance_of,
    height_of,
    rotate_left_left,
    rotate_left_right,
    rotate_right_left,
    rotate_right_right,
    set_height,
    update_size,
)

__all__ = ["AVLVector"]

_OUT_OF_BOUNDS = "Rank is out of bounds!"
_NOT_FOUND = "Error: Element not found!"


class AVLVector:
    """Vector of integers with O(log n) access, insertion and removal by rank.

    Ranks are 1-based: rank 1 is the first element and rank ``len(v)`` the last.
    """

    def __init__(self) -> None:
        self._root: Optional[Node] = None

    def __len__(self) -> int:
        return 0 if self._root is None else self._root.size

    def __iter__(self) -> Iterator[int]:
        stack: list[Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    # ------------------------------------------------------------------ queries

    def element_at_rank(self, rank: int) -> int:
        """Return the element stored at ``rank``."""
        return self._node_at(rank, "Tree is empty, cannot access any elements!").value

    def rank_of(self, element: int) -> int:
        """Return the rank of the first occurrence of ``element``."""
        for rank, value in self.ranked_items():
            if value == element:
                return rank
        raise ValueError(_NOT_FOUND)

    def ranked_items(self) -> Iterator[tuple[int, int]]:
        """Yield ``(rank, element)`` pairs in rank order."""
        return enumerate(self, start=1)

    def root_value(self) -> Optional[int]:
        """Return the element held at the root of the tree, or None when empty."""
        return None if self._root is None else self._root.value

    def print_all(self, out: Optional[TextIO] = None) -> None:
        """Write every element with its rank, one per line, then a blank line."""
        stream = sys.stdout if out is None else out
        for rank, value in self.ranked_items():
            stream.write(f"Rank: {rank} | Element: {value}\n")
        stream.write("\n")

    # ---------------------------------------------------------------- mutations

    def replace_at_rank(self, rank: int, element: int) -> None:
        """Overwrite the element stored at ``rank``."""
        self._node_at(rank, "Tree is empty, cannot replace any elements!").value = element

    def insert_at_rank(self, rank: int, element: int) -> None:
        """Insert ``element`` so that it ends up at ``rank`` (1 to ``len + 1``)."""
        if rank <= 0 or rank > len(self) + 1:
            raise IndexError(_OUT_OF_BOUNDS)
        self._root = self._insert(self._root, 0, element, rank)
        self._root.parent = None

    def remove_at_rank(self, rank: int) -> int:
        """Remove the element at ``rank`` and return it."""
        target = self._node_at(rank, "Tree is empty, cannot remove any elements!")
        removed = target.value

        if target.left is None:
            parent = target.parent
            if parent is None:
                self._root = target.right
                if self._root is not None:
                    self._root.parent = None
                return removed
            if parent.left is target:
                parent.left = target.right
            else:
                parent.right = target.right
            if target.right is not None:
                target.right.parent = parent
            set_height(parent)
            start = parent
        else:
            predecessor = target.left
            while predecessor.right is not None:
                predecessor = predecessor.right
            target.value = predecessor.value
            start = predecessor.parent
            assert start is not None
            if start.left is predecessor:
                start.left = predecessor.left
            else:
                start.right = predecessor.left
            if predecessor.left is not None:
                predecessor.left.parent = start
            set_height(start)

        walker: Optional[Node] = start
        while walker is not None:
            update_size(walker)
            walker = walker.parent

        self._rebalance_upward(start)
        if self._root is not None:
            self._root.parent = None
        return removed

    # ------------------------------------------------------------------ helpers

    def _node_at(self, rank: int, empty_message: str) -> Node:
        if self._root is None:
            raise IndexError(empty_message)
        if rank <= 0 or rank > self._root.size:
            raise IndexError(_OUT_OF_BOUNDS)
        node: Optional[Node] = self._root
        prior = 0
        while node is not None:
            current = prior + node.num_left + 1
            if rank == current:
                return node
            if rank < current:
                node = node.left
            else:
                prior = current
                node = node.right
        raise IndexError(_OUT_OF_BOUNDS)

    def _insert(self, node: Optional[Node], prior: int, value: int, rank: int) -> Node:
        if node is None:
            return Node(value)
        current = prior + node.num_left + 1
        if rank <= current:
            node.left = self._insert(node.left, prior, value, rank)
            node.left.parent = node
        else:
            node.right = self._insert(node.right, current, value, rank)
            node.right.parent = node

        update_size(node)
        set_height(node)

        balance = balance_of(node)
        if balance > 1:
            if balance_of(node.left) >= 0:
                return rotate_left_left(node)
            return rotate_left_right(node)
        if balance < -1:
            if balance_of(node.right) <= 0:
                return rotate_right_right(node)
            return rotate_right_left(node)
        return node

    def _rebalance_upward(self, node: Optional[Node]) -> None:
        """Restore the AVL property on the path from ``node`` to the root."""
        while node is not None:
            balance = balance_of(node)
            new_top: Optional[Node] = None
            if balance > 1:
                left = node.left
                assert left is not None
                if height_of(left.left) >= height_of(left.right):
                    new_top = rotate_left_left(node)
                else:
                    new_top = rotate_left_right(node)
            elif balance < -1:
                right = node.right
                assert right is not None
                if height_of(right.right) >= height_of(right.left):
                    new_top = rotate_right_right(node)
                else:
                    new_top = rotate_right_left(node)
            if new_top is not None and new_top.parent is None:
                self._root = new_top
            node = node.parent
            set_height(node)