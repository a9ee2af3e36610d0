import pytest
from pydantic import ValidationError
from typing import get_args

from optkit.core.optional import Maybe, Some


def test_some_holds_value():
    opt = Some(value=42)
    assert opt.value == 42


def test_some_can_hold_none():
    opt = Some(value=None)
    assert opt is not None
    assert opt.value is None


def test_some_is_frozen():
    opt = Some(value=1)
    with pytest.raises(ValidationError):
        opt.value = 2


def test_some_equality():
    assert Some(value=1) == Some(value=1)
    assert Some(value=1) != Some(value=2)
    # Parametrised and bare models compare by origin class
    assert Some[int](value=1) == Some(value=1)


def test_some_accepts_arbitrary_objects():
    class Opaque:
        pass

    obj = Opaque()
    assert Some(value=obj).value is obj


def test_typed_some_is_strict():
    with pytest.raises(ValidationError):
        Some[int](value="1")
    with pytest.raises(ValidationError):
        Some[str](value=1)


def test_maybe_alias_covers_some_and_none():
    assert set(get_args(Maybe)) == {Some, type(None)}
