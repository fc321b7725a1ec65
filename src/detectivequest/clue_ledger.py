"""Ordered, duplicate-free storage for the clues a detective has found."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator

logger = logging.getLogger(__name__)


@dataclass
class ClueNode:
    """A node of the clue search tree.

    Every key in ``left`` compares lower than ``text`` and every key in
    ``right`` compares higher. Equal keys are never stored twice.
    """

    text: str
    left: "ClueNode | None" = None
    right: "ClueNode | None" = None


def insert_clue(root: ClueNode | None, text: str) -> ClueNode:
    """Insert ``text`` below ``root`` and return the root to keep using.

    The returned node is a new root when ``root`` is ``None``; otherwise it
    is ``root`` itself. Inserting text that is already present leaves the
    tree untouched. Keys are compared with plain ``str`` ordering.
    """

    if root is None:
        return ClueNode(text)

    node = root
    while True:
        if text < node.text:
            if node.left is None:
                node.left = ClueNode(text)
                return root
            node = node.left
        elif text > node.text:
            if node.right is None:
                node.right = ClueNode(text)
                return root
            node = node.right
        else:
            return root


def contains_clue(root: ClueNode | None, text: str) -> bool:
    """Return ``True`` when ``text`` is stored below ``root``."""

    node = root
    while node is not None:
        if text < node.text:
            node = node.left
        elif text > node.text:
            node = node.right
        else:
            return True
    return False


def iter_clues(root: ClueNode | None) -> Iterator[str]:
    """Lazily yield the stored clues in ascending order."""

    stack: list[ClueNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.text
        node = node.right


class ClueLedger:
    """The detective's notebook of collected clues.

    The ledger owns the current root and always replaces it with whatever
    :func:`insert_clue` hands back.
    """

    def __init__(self) -> None:
        self._root: ClueNode | None = None
        self._size = 0

    @property
    def root(self) -> ClueNode | None:
        return self._root

    def add(self, text: str) -> bool:
        """Store ``text`` and return ``True`` if it was not already present."""

        if contains_clue(self._root, text):
            return False

        self._root = insert_clue(self._root, text)
        self._size += 1
        logger.debug("Recorded clue %r (%d in ledger)", text, self._size)
        return True

    def __contains__(self, text: object) -> bool:
        return isinstance(text, str) and contains_clue(self._root, text)

    def __iter__(self) -> Iterator[str]:
        return iter_clues(self._root)

    def __len__(self) -> int:
        return self._size


__all__ = ["ClueLedger", "ClueNode", "contains_clue", "insert_clue", "iter_clues"]
