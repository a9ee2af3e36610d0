"""Zero values of Python types.

The zero value of a type is its natural empty value: ``0`` for numbers, ``""``
for strings, ``False`` for booleans, an empty container for containers. Plain
value types produce it from a no-argument constructor call. Types that need
arguments (``datetime`` and friends) get an explicit factory from the registry
below, and callers can register their own.

Arbitrary classes are never instantiated to discover a zero value; they need a
registered factory.
"""

import dataclasses
import numbers
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Any, Callable, Dict

from pydantic import BaseModel

__all__ = [
    "zero_value",
    "is_zero",
    "register_zero_value",
]

_ZERO_FACTORIES: Dict[type, Callable[[], Any]] = {
    datetime: lambda: datetime.min,
    date: lambda: date.min,
    time: time,
    timedelta: timedelta,
}

# Types whose no-argument constructor is known to build the empty value
_VALUE_TYPES = (
    numbers.Number,
    Decimal,
    str,
    bytes,
    bytearray,
    type(None),
    list,
    dict,
    tuple,
    set,
    frozenset,
)


def register_zero_value(cls: type, factory: Callable[[], Any]) -> None:
    """Register the zero value factory for ``cls`` and its subclasses.

    Args:
        cls: The class the factory applies to.
        factory: Zero-argument callable returning the zero value.

    Raises:
        TypeError: If ``cls`` is not a class or ``factory`` is not callable.
    """
    if not isinstance(cls, type):
        raise TypeError(f"Expected a class, got {cls!r}.")
    if not callable(factory):
        raise TypeError(f"Zero value factory for {cls.__name__} must be callable.")
    _ZERO_FACTORIES[cls] = factory


def _has_default_fields(cls: type) -> bool:
    """Check whether a dataclass or pydantic model can be built with no arguments."""
    if dataclasses.is_dataclass(cls):
        return all(
            field.default is not dataclasses.MISSING
            or field.default_factory is not dataclasses.MISSING
            for field in dataclasses.fields(cls)
            if field.init
        )
    if issubclass(cls, BaseModel):
        return not any(field.is_required() for field in cls.model_fields.values())
    return False


def zero_value(value: Any) -> Any:
    """Return the zero value of ``type(value)``.

    Args:
        value: Any instance of the type whose zero value is wanted.

    Returns:
        The zero value of the type.

    Raises:
        TypeError: If the type has no registered factory and is neither a plain
            value type nor a dataclass or pydantic model with all-default fields.
    """
    cls = type(value)
    for base in cls.__mro__:
        factory = _ZERO_FACTORIES.get(base)
        if factory is not None:
            return factory()

    if issubclass(cls, _VALUE_TYPES) or _has_default_fields(cls):
        try:
            return cls()
        except (TypeError, ValueError) as e:
            raise TypeError(f"Type {cls.__name__} has no zero value.") from e

    raise TypeError(
        f"Type {cls.__name__} has no zero value; "
        f"use register_zero_value to define one."
    )


def is_zero(value: Any) -> bool:
    """Check whether ``value`` equals the zero value of its type."""
    return bool(value == zero_value(value))
