"""Ordering strategies for :class:`~arrayset.core.ArraySortedSet`.

A comparator is any callable ``(left, right) -> int``. Three canonical ones
ship with the package as members of :class:`Ordering`:

``NATURAL``
    The elements' own order, through ``<`` and ``>``.
``NEUTRAL``
    Never reports two elements as equal or smaller. Sorting with it keeps
    insertion order and never deduplicates.
``REVERSE``
    The natural order, backwards.

"""

from __future__ import annotations

import enum
import functools
from typing import Any, Callable

from public import public

from .protocols import Comparable, Comparator


def _natural(left: Comparable, right: Comparable) -> int:
    return (left > right) - (left < right)


@public
@enum.unique
class Ordering(enum.Enum):
    """The built-in comparators.

    Members are callables, so they can be passed anywhere a comparator is
    expected.

    Examples
    --------
    >>> Ordering.NATURAL(1, 2)
    -1
    >>> Ordering.REVERSE(1, 2)
    1
    >>> Ordering.NEUTRAL(2, 2)
    1

    """

    NATURAL = "natural"
    NEUTRAL = "neutral"
    REVERSE = "reverse"

    def __call__(self, left: Any, right: Any) -> int:
        if self is Ordering.NATURAL:
            return _natural(left, right)
        if self is Ordering.REVERSE:
            return _natural(right, left)
        return 1

    def __repr__(self) -> str:
        return f"{type(self).__name__}.{self.name}"

    @classmethod
    def from_name(cls, name: str) -> Ordering:
        """Return the built-in comparator called `name`.

        Parameters
        ----------
        name
            One of ``"natural"``, ``"neutral"`` or ``"reverse"``, in any case.

        Raises
        ------
        ValueError
            If `name` does not name a built-in comparator

        """
        try:
            return cls(name.lower())
        except ValueError:
            choices = ", ".join(repr(member.value) for member in cls)
            raise ValueError(
                f"unknown ordering {name!r}, expected one of {choices}"
            ) from None


public(natural=Ordering.NATURAL)
public(neutral=Ordering.NEUTRAL)
public(reverse=Ordering.REVERSE)


@public
def sort_key(comparator: Comparator[Any]) -> Callable[[Any], Any]:
    """Turn `comparator` into a key function.

    Two keys compare equal exactly when `comparator` returns zero for their
    elements, so the keys can also be used to group order-equal runs.
    """
    return functools.cmp_to_key(comparator)
