"""Core data model: optional values, zero values and settings."""

from optkit.core.optional import Some, Maybe
from optkit.core.zero import zero_value, is_zero, register_zero_value
from optkit.core.config import Settings, settings

__all__ = [
    "Some",
    "Maybe",
    "zero_value",
    "is_zero",
    "register_zero_value",
    "Settings",
    "settings",
]
