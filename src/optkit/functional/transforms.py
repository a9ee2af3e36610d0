"""Collection transforms.

Small, stateless helpers over sequences and mappings. Every function returns a
new object and leaves its input untouched. Exceptions raised by a user callable
propagate straight out of the transform; no partial result is returned.
"""

from functools import reduce
from typing import Callable, Iterable, List, Mapping, Sequence, TypeVar

__all__ = [
    "map_items",
    "filter_items",
    "reduce_items",
    "map_keys",
    "first_or_default",
]

T = TypeVar("T")
U = TypeVar("U")
K = TypeVar("K")
V = TypeVar("V")
Acc = TypeVar("Acc")


def map_items(items: Sequence[T], f: Callable[[T], U]) -> List[U]:
    """Apply ``f`` to every element, keeping order and length.

    Args:
        items: Input sequence.
        f: Function applied to each element.

    Returns:
        A new list with ``len(items)`` results.

    Example:
        >>> map_items([1, 2, 3], lambda x: x * 2)
        [2, 4, 6]
    """
    return [f(item) for item in items]


def filter_items(items: Sequence[T], pred: Callable[[T], bool]) -> List[T]:
    """Keep the elements for which ``pred`` is truthy, in their original order.

    Example:
        >>> filter_items([1, 2, 3, 4, 5], lambda x: x % 2 == 0)
        [2, 4]
    """
    return [item for item in items if pred(item)]


def reduce_items(
    items: Iterable[T], f: Callable[[Acc, T], Acc], initial: Acc
) -> Acc:
    """Left fold ``items`` into an accumulator starting from ``initial``.

    Args:
        items: Elements to fold, consumed in order.
        f: Combining function called as ``f(acc, item)``.
        initial: Starting accumulator, returned unchanged for empty input.

    Returns:
        The final accumulator.

    Example:
        >>> reduce_items([1, 2, 3, 4], lambda acc, x: acc + x, 0)
        10
    """
    return reduce(f, items, initial)


def map_keys(mapping: Mapping[K, V]) -> List[K]:
    # Key order follows the mapping's iteration order, callers must not rely on it
    return list(mapping.keys())


def first_or_default(items: Iterable[T], default: T) -> T:
    """Return the first element of ``items``, or ``default`` when it is empty.

    Any iterable is accepted; at most one element is consumed.
    """
    return next(iter(items), default)
