"""Protocol classes describing what arrayset needs from its inputs."""

from typing import Any, TypeVar

from typing_extensions import Protocol, runtime_checkable


class Comparable(Protocol):
    """An element that the natural order can compare.

    Only ``<`` and ``>`` are needed. Equality is never consulted for
    ordering, so two elements that are neither smaller nor greater than one
    another are order-equal even when ``==`` says otherwise.
    """

    def __lt__(self, other: Any) -> bool:
        ...

    def __gt__(self, other: Any) -> bool:
        ...


T = TypeVar("T", contravariant=True)


@runtime_checkable
class Comparator(Protocol[T]):
    """A total-order comparison function.

    Returns a negative number, zero or a positive number when `left` sorts
    before, together with, or after `right`.
    """

    def __call__(self, left: T, right: T) -> int:
        ...
