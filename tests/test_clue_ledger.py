"""Unit tests for the :mod:`detectivequest.clue_ledger` module."""

from __future__ import annotations

from itertools import permutations

import pytest

from detectivequest.clue_ledger import (
    ClueLedger,
    ClueNode,
    contains_clue,
    insert_clue,
    iter_clues,
)

CLUES = ("Muddy footprints", "Forced safe", "Rare wine bottle", "Bloodstained knife")


def _build(clues) -> ClueNode | None:
    root = None
    for clue in clues:
        root = insert_clue(root, clue)
    return root


def test_insert_into_empty_tree_creates_root() -> None:
    root = insert_clue(None, "Threatening letter")

    assert root.text == "Threatening letter"
    assert root.left is None and root.right is None


def test_insert_returns_existing_root() -> None:
    root = insert_clue(None, "m")

    assert insert_clue(root, "a") is root
    assert insert_clue(root, "z") is root
    assert root.left is not None and root.left.text == "a"
    assert root.right is not None and root.right.text == "z"


@pytest.mark.parametrize("order", list(permutations(CLUES)))
def test_in_order_traversal_is_sorted_for_any_insertion_order(order) -> None:
    assert list(iter_clues(_build(order))) == sorted(CLUES)


def test_duplicate_insert_leaves_tree_unchanged() -> None:
    once = _build(["b", "a", "c"])
    twice = _build(["b", "a", "c", "a", "b", "c"])

    assert list(iter_clues(once)) == list(iter_clues(twice)) == ["a", "b", "c"]


def test_comparison_is_ordinal_and_case_sensitive() -> None:
    root = _build(["apple", "Zebra", "Apple", "apple"])

    assert list(iter_clues(root)) == ["Apple", "Zebra", "apple"]


def test_traversal_of_empty_tree_yields_nothing() -> None:
    assert list(iter_clues(None)) == []


def test_traversal_is_lazy_and_restartable() -> None:
    root = _build(["b", "a", "c"])

    iterator = iter_clues(root)
    assert next(iterator) == "a"
    assert list(iter_clues(root)) == ["a", "b", "c"]
    assert list(iterator) == ["b", "c"]


def test_contains_clue() -> None:
    root = _build(["b", "a"])

    assert contains_clue(root, "a")
    assert not contains_clue(root, "c")
    assert not contains_clue(None, "a")


def test_degenerate_chain_does_not_hit_recursion_limit() -> None:
    clues = [f"clue-{index:05d}" for index in range(5000)]

    root = _build(clues)

    assert list(iter_clues(root)) == clues


def test_ledger_reports_new_and_repeated_clues() -> None:
    ledger = ClueLedger()

    assert ledger.add("Forced safe") is True
    assert ledger.add("Forced safe") is False
    assert ledger.add("Bloodstained knife") is True

    assert len(ledger) == 2
    assert "Forced safe" in ledger
    assert "Muddy footprints" not in ledger
    assert list(ledger) == ["Bloodstained knife", "Forced safe"]
    assert ledger.root is not None and ledger.root.text == "Forced safe"


def test_empty_ledger() -> None:
    ledger = ClueLedger()

    assert len(ledger) == 0
    assert list(ledger) == []
    assert ledger.root is None
