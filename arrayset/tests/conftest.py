from __future__ import annotations

import functools

import pytest

from arrayset import ArraySortedSet, Ordering


@functools.total_ordering
class Entry:
    """An element ordered by `key` but compared for equality by `key` and `payload`."""

    __slots__ = "key", "payload"

    def __init__(self, key: int, payload: str) -> None:
        self.key = key
        self.payload = payload

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entry):
            return NotImplemented
        return (self.key, self.payload) == (other.key, other.payload)

    def __hash__(self) -> int:
        return hash((self.key, self.payload))

    def __lt__(self, other: Entry) -> bool:
        return self.key < other.key

    def __repr__(self) -> str:
        return f"Entry({self.key!r}, {self.payload!r})"


def by_key(left: Entry, right: Entry) -> int:
    return (left.key > right.key) - (left.key < right.key)


@pytest.fixture
def empty() -> ArraySortedSet[int]:
    return ArraySortedSet(comparator=Ordering.NATURAL)


@pytest.fixture
def numbers() -> ArraySortedSet[int]:
    return ArraySortedSet([5, 1, 3], comparator=Ordering.NATURAL)


@pytest.fixture
def entries() -> ArraySortedSet[Entry]:
    return ArraySortedSet(
        [Entry(2, "b"), Entry(1, "a"), Entry(3, "c")], comparator=by_key
    )
