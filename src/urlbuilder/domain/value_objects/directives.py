"""
Override values with a meaning beyond "set this parameter".

AddToSet and Pull edit an array-valued query parameter in place of replacing
it. REMOVE deletes a parameter, the same as None or an empty string.
"""

from dataclasses import dataclass
from collections.abc import Mapping
from typing import Any

from src.core.constants import ADD_TO_SET_KEYS, PULL_KEYS


@dataclass(frozen=True)
class AddToSet:
    """Add `value` to the parameter's list of values if not already present."""

    value: Any


@dataclass(frozen=True)
class Pull:
    """Remove `value` from the parameter's list of values."""

    value: Any


class Remove:
    """Marker for removing a parameter."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "REMOVE"


REMOVE = Remove()


def is_empty(value: Any) -> bool:
    """True for the values that mean "remove this key". Zero is not one of them."""
    return value is None or value is REMOVE or (isinstance(value, str) and value == "")


def coerce_directive(value: Any) -> Any:
    """
    Turn a mapping shaped like `{"addToSet": v}` or `{"$pull": v}` into the
    matching directive. Anything else is returned untouched.
    """
    if not isinstance(value, Mapping) or len(value) != 1:
        return value
    key, operand = next(iter(value.items()))
    if key in ADD_TO_SET_KEYS:
        return AddToSet(operand)
    if key in PULL_KEYS:
        return Pull(operand)
    return value


def coerce_overrides(data: Mapping[str, Any]) -> dict:
    """Apply `coerce_directive` to every value of an override object."""
    return {key: coerce_directive(value) for key, value in data.items()}
