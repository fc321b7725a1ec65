"""Hash table resolving each clue to the suspect it implicates."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator

logger = logging.getLogger(__name__)

DEFAULT_BUCKET_COUNT = 10


@dataclass
class _SuspectEntry:
    """One link in a bucket chain."""

    clue: str
    suspect: str
    next: "_SuspectEntry | None" = None


class SuspectIndex:
    """Map clue text to suspect names using separately chained buckets.

    Keys are hashed by summing their Unicode code points and taking the
    remainder by the bucket count. Collisions share a singly linked chain
    and new entries are prepended, so when a key is inserted twice the most
    recent value shadows the older one.
    """

    def __init__(self, bucket_count: int = DEFAULT_BUCKET_COUNT) -> None:
        if not isinstance(bucket_count, int) or isinstance(bucket_count, bool):
            raise TypeError(
                f"bucket_count must be an int, got {type(bucket_count)!r}"
            )
        if bucket_count < 1:
            raise ValueError("bucket_count must be a positive integer")

        self._bucket_count = bucket_count
        self._buckets: list[_SuspectEntry | None] = [None] * bucket_count
        self._size = 0

    @property
    def bucket_count(self) -> int:
        return self._bucket_count

    def hash_of(self, key: str) -> int:
        """Return the bucket index for ``key``."""

        return sum(ord(char) for char in key) % self._bucket_count

    def insert(self, clue: str, suspect: str) -> None:
        """Prepend ``clue -> suspect`` to its bucket chain."""

        index = self.hash_of(clue)
        self._buckets[index] = _SuspectEntry(clue, suspect, self._buckets[index])
        self._size += 1
        logger.debug("Indexed clue %r -> %r in bucket %d", clue, suspect, index)

    def lookup(self, clue: str) -> str | None:
        """Return the suspect linked to ``clue`` or ``None`` when unknown."""

        entry = self._buckets[self.hash_of(clue)]
        while entry is not None:
            if entry.clue == clue:
                return entry.suspect
            entry = entry.next
        return None

    def suspects(self) -> tuple[str, ...]:
        """Return each distinct suspect once, in bucket order."""

        seen: dict[str, None] = {}
        for _, suspect in self._iter_entries():
            seen.setdefault(suspect, None)
        return tuple(seen)

    def bucket_sizes(self) -> tuple[int, ...]:
        """Return the chain length of every bucket."""

        sizes: list[int] = []
        for head in self._buckets:
            length = 0
            entry = head
            while entry is not None:
                length += 1
                entry = entry.next
            sizes.append(length)
        return tuple(sizes)

    def _iter_entries(self) -> Iterator[tuple[str, str]]:
        for head in self._buckets:
            entry = head
            while entry is not None:
                yield entry.clue, entry.suspect
                entry = entry.next

    def __contains__(self, clue: object) -> bool:
        return isinstance(clue, str) and self.lookup(clue) is not None

    def __len__(self) -> int:
        return self._size


__all__ = ["DEFAULT_BUCKET_COUNT", "SuspectIndex"]
