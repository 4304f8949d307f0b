"""Small functional helpers used to combine unit lists and conversion factors."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Any, TypeVar

T = TypeVar("T")
U = TypeVar("U")

_BLOCK_SIZES = (16, 8, 4)


def accumulate(operation: Callable[[Any, Any], Any], items: Iterable[Any]) -> Any:
    """Fold ``items`` from the left with a binary ``operation``.

    A single item is returned unchanged. An empty sequence is an error.
    """
    iterator = iter(items)
    try:
        result = next(iterator)
    except StopIteration:
        raise ValueError("accumulate() needs at least one item") from None
    for item in iterator:
        result = operation(result, item)
    return result


def _fold_right(operation: Callable[[Any, Any], Any], values: Sequence[Any]) -> Any:
    result = values[-1]
    for value in reversed(values[:-1]):
        result = operation(value, result)
    return result


def accumulate_value(operation: Callable[[Any, Any], Any], values: Iterable[Any]) -> Any:
    """Combine ``values`` with ``operation``, nesting calls to the right.

    Runs of up to four values are folded from the right; longer sequences are
    split into a leading block of 16, 8 or 4 values and the remainder, and the
    two partial results are combined with ``operation``.
    """
    values = list(values)
    if not values:
        raise ValueError("accumulate_value() needs at least one value")
    return _accumulate_value(operation, values)


def _accumulate_value(operation: Callable[[Any, Any], Any], values: list[Any]) -> Any:
    count = len(values)
    if count <= 4 or count in (8, 16):
        return _fold_right(operation, values)
    block = next(size for size in _BLOCK_SIZES if count > size)
    return operation(
        _fold_right(operation, values[:block]),
        _accumulate_value(operation, values[block:]),
    )


def conditional(flag: bool, success: T, other: U) -> T | U:
    """Return ``success`` when ``flag`` is true, otherwise ``other``."""
    return success if flag else other


def transform(function: Callable[[T], U], items: Iterable[T]) -> list[U]:
    """Apply ``function`` to every item and return the results as a list."""
    return [function(item) for item in items]


def pop_front(items: Iterable[T]) -> list[T]:
    """Return the items without the first one; an empty input gives an empty list."""
    return list(items)[1:]


def count_if(predicate: Callable[[T], Any], items: Iterable[T]) -> int:
    """Count the items for which ``predicate`` is true."""
    return sum(1 for item in items if predicate(item))


def add(a: Any, b: Any) -> Any:
    """Return ``a + b``."""
    return a + b


def subtract(a: Any, b: Any) -> Any:
    """Return ``a - b``."""
    return a - b


def multiply(a: Any, b: Any) -> Any:
    """Return ``a * b``."""
    return a * b


def multiply_all(*args: Any) -> Any:
    """Return the product of all arguments; ``1`` when there are none."""
    if not args:
        return 1
    result = args[0]
    for value in args[1:]:
        result = result * value
    return result


def logical_and(a: Any, b: Any) -> bool:
    """Return the boolean conjunction of ``a`` and ``b``."""
    return bool(a and b)


def logical_or(a: Any, b: Any) -> bool:
    """Return the boolean disjunction of ``a`` and ``b``."""
    return bool(a or b)