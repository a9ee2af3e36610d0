"""Optional value construction and inspection.

Helpers for building ``Some`` optionals from plain values and for reading them
back with a fallback. An absent optional is ``None`` throughout.

Example:
    Read an optional setting with a fallback::

        timeout = value_or_default(wrap_if(user_timeout > 0, user_timeout), 30)

Note:
    ``non_zero_value_or_default`` treats a present zero value (``0``, ``""``,
    ``False``, an empty container) exactly like an absent optional. This is
    intentional and callers relying on a stored zero must use
    ``value_or_default`` instead.
"""

from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional, Sequence, TypeVar

from optkit.core.optional import Some
from optkit.core.zero import is_zero
from optkit.logger.logger import logger

__all__ = [
    "wrap",
    "wrap_str",
    "wrap_int",
    "wrap_bool",
    "wrap_float",
    "wrap_timestamp",
    "wrap_sequence",
    "wrap_mapping",
    "wrap_if",
    "from_nullable",
    "to_nullable",
    "is_absent",
    "value_or_default",
    "non_zero_value_or_default",
    "equal",
]

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")

# =============================================================================
# Construction
# =============================================================================


def wrap(value: T) -> Some[T]:
    """Wrap ``value`` in a present optional.

    Args:
        value: Any value, ``None`` included.

    Returns:
        A ``Some`` holding ``value``.
    """
    return Some(value=value)


def wrap_str(value: str) -> Some[str]:
    return Some[str](value=value)


def wrap_int(value: int) -> Some[int]:
    return Some[int](value=value)


def wrap_bool(value: bool) -> Some[bool]:
    return Some[bool](value=value)


def wrap_float(value: float) -> Some[float]:
    return Some[float](value=value)


def wrap_timestamp(value: datetime) -> Some[datetime]:
    return Some[datetime](value=value)


def wrap_sequence(value: Sequence[T]) -> Some[List[T]]:
    """Wrap a sequence in a present optional as a list.

    The optional owns a shallow copy, so appending to ``value`` afterwards
    does not change the wrapped list.

    Raises:
        TypeError: If ``value`` is a ``str``, ``bytes`` or ``bytearray``; use
            ``wrap_str`` or ``wrap`` for those.
    """
    if isinstance(value, (str, bytes, bytearray)):
        raise TypeError(
            f"wrap_sequence expects a sequence of items, got {type(value).__name__}."
        )
    return Some[List[Any]](value=list(value))


def wrap_mapping(value: Mapping[K, V]) -> Some[Dict[K, V]]:
    """Wrap a dict in a present optional, owning a shallow copy of it."""
    return Some[Dict[Any, Any]](value=dict(value))


def wrap_if(condition: bool, value: T) -> Optional[Some[T]]:
    """Wrap ``value`` when ``condition`` holds, otherwise return an absent optional.

    Args:
        condition: Whether the result should be present.
        value: The value to wrap.

    Returns:
        ``Some(value)`` if ``condition`` is truthy, else ``None``.
    """
    if condition:
        return wrap(value)
    return None


def from_nullable(value: Optional[T]) -> Optional[Some[T]]:
    """Convert a nullable value into an optional, mapping ``None`` to absent."""
    return None if value is None else wrap(value)


def to_nullable(opt: Optional[Some[T]]) -> Optional[T]:
    """Convert an optional back into a nullable value."""
    return None if opt is None else opt.value


# =============================================================================
# Inspection
# =============================================================================


def is_absent(opt: Optional[Some[T]]) -> bool:
    return opt is None


def value_or_default(opt: Optional[Some[T]], default: T) -> T:
    """Return the contained value, or ``default`` if ``opt`` is absent.

    Args:
        opt: The optional to read. Never modified.
        default: Fallback for an absent optional.

    Returns:
        The contained value or ``default``.
    """
    if opt is not None:
        return opt.value
    return default


def non_zero_value_or_default(opt: Optional[Some[T]], default: T) -> T:
    """Return the contained value unless it is absent or the zero value of its type.

    A present optional holding ``0``, ``""``, ``False``, an empty container or
    another registered zero value yields ``default``, the same as an absent one.

    Args:
        opt: The optional to read.
        default: Fallback for an absent optional or a zero value.

    Returns:
        The contained value or ``default``.

    Raises:
        TypeError: If the contained value's type has no zero value.
    """
    if opt is None:
        return default
    if is_zero(opt.value):
        logger.debug(
            f"Present zero value {opt.value!r} replaced by default {default!r}"
        )
        return default
    return opt.value


def equal(a: Optional[Some[T]], b: Optional[Some[T]]) -> bool:
    """Compare two optionals.

    Two absent optionals are equal, an absent and a present one are not, and
    two present optionals are equal when their values are.
    """
    if a is None and b is None:
        return True
    if a is None or b is None:
        return False
    return bool(a.value == b.value)
