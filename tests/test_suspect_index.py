"""Unit tests for the :mod:`detectivequest.suspect_index` module."""

from __future__ import annotations

import pytest

from detectivequest.suspect_index import DEFAULT_BUCKET_COUNT, SuspectIndex

EVIDENCE = {
    "Muddy footprints": "Colonel Mustard",
    "Open book of poisons": "Professor Plum",
    "Bloodstained knife": "Lady Scarlet",
    "Threatening letter": "Mrs. White",
    "Forced safe": "Colonel Mustard",
}


@pytest.fixture()
def index() -> SuspectIndex:
    table = SuspectIndex()
    for clue, suspect in EVIDENCE.items():
        table.insert(clue, suspect)
    return table


def test_default_bucket_count() -> None:
    assert SuspectIndex().bucket_count == DEFAULT_BUCKET_COUNT == 10


def test_hash_is_code_point_sum_modulo_bucket_count() -> None:
    table = SuspectIndex(7)

    assert table.hash_of("") == 0
    assert table.hash_of("ab") == (97 + 98) % 7
    assert table.hash_of("ab") == table.hash_of("ba")


def test_lookup_returns_inserted_values(index: SuspectIndex) -> None:
    for clue, suspect in EVIDENCE.items():
        assert index.lookup(clue) == suspect
    assert len(index) == len(EVIDENCE)


def test_lookup_miss_returns_none(index: SuspectIndex) -> None:
    assert index.lookup("Broken window") is None
    assert index.lookup("muddy footprints") is None
    assert SuspectIndex().lookup("anything") is None
    assert SuspectIndex().lookup("") is None


def test_collisions_share_a_chain() -> None:
    table = SuspectIndex(1)
    table.insert("ab", "First")
    table.insert("ba", "Second")
    table.insert("c", "Third")

    assert table.bucket_sizes() == (3,)
    assert table.lookup("ab") == "First"
    assert table.lookup("ba") == "Second"
    assert table.lookup("c") == "Third"


def test_anagrams_collide_but_resolve_independently() -> None:
    table = SuspectIndex()
    table.insert("listen", "Lady Scarlet")
    table.insert("silent", "Mrs. White")

    assert table.hash_of("listen") == table.hash_of("silent")
    assert table.lookup("listen") == "Lady Scarlet"
    assert table.lookup("silent") == "Mrs. White"


def test_reinserting_a_key_shadows_the_older_value() -> None:
    table = SuspectIndex()
    table.insert("Forced safe", "Colonel Mustard")
    table.insert("Forced safe", "Professor Plum")

    assert table.lookup("Forced safe") == "Professor Plum"
    assert len(table) == 2
    assert sum(table.bucket_sizes()) == 2


def test_suspects_are_listed_once(index: SuspectIndex) -> None:
    suspects = index.suspects()

    assert sorted(suspects) == [
        "Colonel Mustard",
        "Lady Scarlet",
        "Mrs. White",
        "Professor Plum",
    ]


def test_membership(index: SuspectIndex) -> None:
    assert "Forced safe" in index
    assert "Broken window" not in index
    assert 42 not in index


@pytest.mark.parametrize("bucket_count", [0, -3])
def test_bucket_count_must_be_positive(bucket_count: int) -> None:
    with pytest.raises(ValueError):
        SuspectIndex(bucket_count)


def test_bucket_count_must_be_an_int() -> None:
    with pytest.raises(TypeError):
        SuspectIndex("10")  # type: ignore[arg-type]
