"""Adapt :class:`~arrayset.core.ArraySortedSet` to :class:`typing.MutableSet`.

Code that expects a mutable set can be handed a
:class:`ReadOnlyMutableSet`. Reads go to the wrapped set; every write raises
:class:`~arrayset.exceptions.UnsupportedOperationError` and leaves the set
untouched.
"""

from __future__ import annotations

from typing import AbstractSet, Any, Iterable, Iterator, MutableSet, NoReturn, TypeVar

from public import public

from .core import ArraySortedSet
from .exceptions import UnsupportedOperationError
from .protocols import Comparator

T = TypeVar("T")


@public
class ReadOnlyMutableSet(MutableSet[T]):
    """A :class:`typing.MutableSet` over an :class:`ArraySortedSet`.

    Writes raise :class:`~arrayset.exceptions.UnsupportedOperationError`.
    """

    __slots__ = ("wrapped",)

    def __init__(self, wrapped: ArraySortedSet[T]) -> None:
        self.wrapped = wrapped

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.wrapped!r})"

    def __contains__(self, value: Any) -> bool:
        return value in self.wrapped

    def __iter__(self) -> Iterator[T]:
        return iter(self.wrapped)

    def __len__(self) -> int:
        return len(self.wrapped)

    def _from_iterable(self, values: Iterable[T]) -> ArraySortedSet[T]:
        return self.wrapped._from_iterable(values)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, ReadOnlyMutableSet):
            other = other.wrapped
        if not isinstance(other, ArraySortedSet):
            return NotImplemented
        return self.wrapped == other

    __hash__ = None  # type: ignore[assignment]

    @property
    def comparator(self) -> Comparator[T]:
        return self.wrapped.comparator

    def first(self) -> T:
        return self.wrapped.first()

    def last(self) -> T:
        return self.wrapped.last()

    def contains_all(self, values: Iterable[Any]) -> bool:
        return self.wrapped.contains_all(values)

    def _reject(self, operation: str) -> NoReturn:
        raise UnsupportedOperationError(
            f"{operation}() is not supported, "
            f"{type(self.wrapped).__name__} is immutable"
        )

    def add(self, value: T) -> None:
        self._reject("add")

    def discard(self, value: T) -> None:
        self._reject("discard")

    def remove(self, value: T) -> None:
        self._reject("remove")

    def pop(self) -> T:
        self._reject("pop")

    def clear(self) -> None:
        self._reject("clear")

    def add_all(self, values: Iterable[T]) -> bool:
        self._reject("add_all")

    def remove_all(self, values: Iterable[Any]) -> bool:
        self._reject("remove_all")

    def retain_all(self, values: Iterable[Any]) -> bool:
        self._reject("retain_all")

    def __ior__(self, other: AbstractSet[T]) -> NoReturn:  # type: ignore[misc]
        self._reject("__ior__")

    def __iand__(self, other: AbstractSet[Any]) -> NoReturn:
        self._reject("__iand__")

    def __ixor__(self, other: AbstractSet[T]) -> NoReturn:  # type: ignore[misc]
        self._reject("__ixor__")

    def __isub__(self, other: AbstractSet[Any]) -> NoReturn:
        self._reject("__isub__")
