"""Functional primitives for optkit.

Optional value helpers and collection transforms. Utilities are stateless and
side-effect-free so they can be composed freely.
"""

from optkit.functional.pointers import (
    wrap,
    wrap_str,
    wrap_int,
    wrap_bool,
    wrap_float,
    wrap_timestamp,
    wrap_sequence,
    wrap_mapping,
    wrap_if,
    from_nullable,
    to_nullable,
    is_absent,
    value_or_default,
    non_zero_value_or_default,
    equal,
)
from optkit.functional.transforms import (
    map_items,
    filter_items,
    reduce_items,
    map_keys,
    first_or_default,
)

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
    "map_items",
    "filter_items",
    "reduce_items",
    "map_keys",
    "first_or_default",
]
