"""An immutable sorted set stored in a flat tuple.

:class:`ArraySortedSet` is a value type: every operation that would change
the set returns a new instance and leaves the receiver alone. Instances can
therefore be shared freely, including between threads.

The backing tuple is kept strictly increasing under the set's comparator.
Order-equality (the comparator returning zero) drives sorting and
deduplication, while membership (``in``) uses plain ``==``. The two agree
for the natural order but need not agree for other comparators:

>>> s = ArraySortedSet([1, 1, 1], comparator=Ordering.NEUTRAL)
>>> len(s)
3

"""

from __future__ import annotations

import logging
import typing
from typing import (
    TYPE_CHECKING,
    AbstractSet,
    Any,
    Iterable,
    Iterator,
    Sequence,
    TypeVar,
)

import toolz
from sortedcontainers import SortedKeyList

from .exceptions import NoSuchElementError, PreconditionError
from .ordering import Ordering, sort_key
from .protocols import Comparator

if TYPE_CHECKING:
    from .adapters import ReadOnlyMutableSet

logger = logging.getLogger(__name__)

T = TypeVar("T")


def arrange(
    values: Iterable[T], comparator: Comparator[T], *, keep_last: bool = False
) -> tuple[T, ...]:
    """Sort `values` with `comparator` and drop order-equal duplicates.

    Parameters
    ----------
    values
        The elements to arrange, in insertion order.
    comparator
        The ordering strategy.
    keep_last
        Whether the last of a run of order-equal elements survives instead
        of the first.

    """
    key = sort_key(comparator)
    # the buffer sorts stably, so each run keeps its insertion order
    buffer = SortedKeyList(values, key=key)
    pick = toolz.last if keep_last else toolz.first
    return tuple(map(pick, toolz.partitionby(key, buffer)))


class ArraySortedSet(AbstractSet[T]):
    """An immutable sorted set on top of a tuple.

    Parameters
    ----------
    values
        Any iterable. When it is itself an :class:`ArraySortedSet` its
        backing tuple is adopted as is; the caller is responsible for it
        being ordered compatibly with `comparator`.
    comparator
        The ordering strategy, :attr:`Ordering.NATURAL` by default.

    Raises
    ------
    PreconditionError
        If `values` is ``None`` or `comparator` is not callable

    """

    __slots__ = "_values", "_comparator"

    def __init__(
        self,
        values: Iterable[T] = (),
        comparator: Comparator[T] = Ordering.NATURAL,
    ) -> None:
        if values is None:
            raise PreconditionError("values must not be None")
        if not isinstance(comparator, Comparator):
            raise PreconditionError(
                f"comparator must be callable, got {comparator!r}"
            )
        self._comparator = comparator
        if isinstance(values, ArraySortedSet):
            self._values: tuple[T, ...] = values._values
        else:
            self._values = arrange(values, comparator)

    @classmethod
    def _adopt(
        cls, values: tuple[T, ...], comparator: Comparator[T]
    ) -> ArraySortedSet[T]:
        """Wrap an already arranged tuple without sorting it again."""
        result = cls.__new__(cls)
        result._values = values
        result._comparator = comparator
        return result

    def _from_iterable(self, values: Iterable[T]) -> ArraySortedSet[T]:
        # set algebra from collections.abc.Set keeps our ordering strategy
        return type(self)(values, self._comparator)

    def _derive(
        self, operation: str, values: tuple[T, ...]
    ) -> ArraySortedSet[T]:
        result = self._adopt(values, self._comparator)
        logger.debug(
            "%s: %d -> %d elements", operation, len(self), len(result)
        )
        return result

    @property
    def comparator(self) -> Comparator[T]:
        """Return the ordering strategy of this set."""
        return self._comparator

    def with_(self, value: T) -> ArraySortedSet[T]:
        """Return a new set with `value` in it.

        An element that compares equal to `value` is replaced by `value`.

        Raises
        ------
        PreconditionError
            If `value` is ``None``

        """
        if value is None:
            raise PreconditionError("value must not be None")
        return self._derive("with_", self._insert((value,)))

    def with_all(self, values: Iterable[T]) -> ArraySortedSet[T]:
        """Return a new set with every element of `values` in it.

        Elements of this set that compare equal to any of `values` are
        removed first. Among `values` that compare equal to each other the
        last one wins.

        Raises
        ------
        PreconditionError
            If `values` is ``None``

        """
        if values is None:
            raise PreconditionError("values must not be None")
        return self._derive("with_all", self._insert(tuple(values)))

    def without(self, value: T) -> ArraySortedSet[T]:
        """Return a new set without any element comparing equal to `value`.

        Raises
        ------
        PreconditionError
            If `value` is ``None``

        """
        if value is None:
            raise PreconditionError("value must not be None")
        comparator = self._comparator
        return self._derive(
            "without",
            tuple(
                element
                for element in self._values
                if comparator(value, element) != 0
            ),
        )

    def _insert(self, values: tuple[T, ...]) -> tuple[T, ...]:
        # incoming values sort after the order-equal element they replace
        return arrange(
            toolz.concat((self._values, values)), self._comparator, keep_last=True
        )

    def __len__(self) -> int:
        return len(self._values)

    def is_empty(self) -> bool:
        """Return whether this set has no elements."""
        return not self._values

    def __contains__(self, value: Any) -> bool:
        """Check whether some element is ``==`` to `value`.

        This is a linear scan and ignores the comparator.
        """
        return value in self._values

    def contains_all(self, values: Iterable[Any]) -> bool:
        """Check whether every element of `values` is in this set."""
        if values is None:
            raise PreconditionError("values must not be None")
        return all(value in self._values for value in values)

    def __iter__(self) -> Iterator[T]:
        return iter(self._values)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._values)

    @typing.overload
    def __getitem__(self, index: int) -> T:
        ...

    @typing.overload
    def __getitem__(self, index: slice) -> Sequence[T]:
        ...

    def __getitem__(self, index: Any) -> Any:
        return self._values[index]

    def first(self) -> T:
        """Return the smallest element.

        Raises
        ------
        NoSuchElementError
            If the set is empty

        """
        if not self._values:
            raise NoSuchElementError("first() called on an empty set")
        return self._values[0]

    def last(self) -> T:
        """Return the largest element.

        Raises
        ------
        NoSuchElementError
            If the set is empty

        """
        if not self._values:
            raise NoSuchElementError("last() called on an empty set")
        return self._values[-1]

    def to_list(self) -> list[T]:
        """Return the elements in ascending order as a new list."""
        return list(self._values)

    def to_tuple(self) -> tuple[T, ...]:
        """Return the elements in ascending order as a tuple."""
        return self._values

    def _split(self, bound: T) -> tuple[SortedKeyList, int]:
        if bound is None:
            raise PreconditionError("bound must not be None")
        key = sort_key(self._comparator)
        ordered = SortedKeyList(self._values, key=key)
        return ordered, ordered.bisect_key_left(key(bound))

    def head(self, bound: T) -> ArraySortedSet[T]:
        """Return the elements strictly before `bound` as a new set."""
        ordered, index = self._split(bound)
        return self._derive("head", tuple(ordered[:index]))

    def tail(self, bound: T) -> ArraySortedSet[T]:
        """Return the elements at or after `bound` as a new set."""
        ordered, index = self._split(bound)
        return self._derive("tail", tuple(ordered[index:]))

    def sub(self, start: T, stop: T) -> ArraySortedSet[T]:
        """Range views between two bounds are not supported."""
        raise NotImplementedError(
            f"{type(self).__name__} does not support sub({start!r}, {stop!r}), "
            "combine head() and tail() instead"
        )

    def as_mutable_set(self) -> ReadOnlyMutableSet[T]:
        """Return a :class:`typing.MutableSet` view that rejects writes."""
        from .adapters import ReadOnlyMutableSet

        return ReadOnlyMutableSet(self)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ArraySortedSet):
            return NotImplemented
        return self._values == other._values

    def __ne__(self, other: Any) -> bool:
        return not (self == other)

    def __hash__(self) -> int:
        return hash(self._values)

    def __str__(self) -> str:
        return ", ".join(map(str, self._values))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({list(self._values)!r}, "
            f"comparator={self._comparator!r})"
        )
