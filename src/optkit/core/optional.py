"""Optional value model.

A present optional is a ``Some`` instance holding exactly one value; an absent
optional is plain ``None``. Keeping presence in a wrapper means ``Some(value=None)``
is still present, so absence never aliases a stored ``None``.

Typed parametrisations such as ``Some[int]`` validate in strict mode, while the
bare ``Some`` accepts any value, including classes pydantic knows nothing about.

Example:
    >>> Some(value=3)
    Some(value=3)
    >>> Some[int](value=3) == Some(value=3)
    True
"""

from typing import Generic, Optional, TypeVar
from pydantic import BaseModel, ConfigDict

__all__ = [
    "Some",
    "Maybe",
]

T = TypeVar("T")


class Some(BaseModel, Generic[T]):
    """A present optional value.

    Attributes:
        value: The contained value. May itself be ``None``.
    """

    value: T

    model_config = ConfigDict(frozen=True, strict=True, arbitrary_types_allowed=True)


# Absent optionals are represented by None. Not generic: Some[T] is Some itself,
# so typed signatures spell out Optional[Some[T]].
Maybe = Optional[Some]
