"""Exceptions raised by arrayset."""

from public import public


@public
class ArraySetError(Exception):
    """Base class for every error raised by arrayset."""


@public
class PreconditionError(ArraySetError, ValueError):
    """An argument that must be present was ``None`` or otherwise invalid."""


@public
class NoSuchElementError(ArraySetError, IndexError):
    """An element was requested from an empty set."""


@public
class UnsupportedOperationError(ArraySetError, TypeError):
    """A write was attempted on an immutable set."""
