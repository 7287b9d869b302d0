import importlib

import pytest

import arrayset
from arrayset import Ordering, natural, neutral, reverse, sort_key


@pytest.mark.parametrize(
    ("left", "right", "expected"), [(1, 2, -1), (2, 2, 0), (3, 2, 1)]
)
def test_natural(left, right, expected):
    assert Ordering.NATURAL(left, right) == expected


@pytest.mark.parametrize(
    ("left", "right", "expected"), [(1, 2, 1), (2, 2, 0), (3, 2, -1)]
)
def test_reverse(left, right, expected):
    assert Ordering.REVERSE(left, right) == expected


@pytest.mark.parametrize(("left", "right"), [(1, 2), (2, 2), (3, 2)])
def test_neutral_never_matches(left, right):
    assert Ordering.NEUTRAL(left, right) == 1


def test_natural_strings():
    assert Ordering.NATURAL("a", "b") < 0
    assert Ordering.REVERSE("a", "b") > 0


def test_aliases():
    assert natural is Ordering.NATURAL
    assert neutral is Ordering.NEUTRAL
    assert reverse is Ordering.REVERSE


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("natural", Ordering.NATURAL),
        ("NEUTRAL", Ordering.NEUTRAL),
        ("Reverse", Ordering.REVERSE),
    ],
)
def test_ordering_by_name(name, expected):
    assert Ordering.from_name(name) is expected


def test_ordering_unknown_name():
    with pytest.raises(ValueError, match="unknown ordering 'sideways'"):
        Ordering.from_name("sideways")


def test_repr():
    assert repr(Ordering.REVERSE) == "Ordering.REVERSE"


def test_sort_key():
    assert sorted([3, 1, 2], key=sort_key(Ordering.REVERSE)) == [3, 2, 1]
    key = sort_key(Ordering.NATURAL)
    assert key(1) == key(1)
    assert key(1) != key(2)
    key = sort_key(Ordering.NEUTRAL)
    assert key(1) != key(1)


def test_ordering_submodule_is_reachable():
    module = importlib.import_module("arrayset.ordering")
    assert arrayset.ordering is module
    assert module.Ordering is Ordering
    assert module.sort_key is sort_key
