"""Argument checks shared by the engine entry points."""

from __future__ import annotations

from collections.abc import Sequence
from numbers import Integral
from typing import Any

from true_roll.core.errors import InvalidInputError


def is_integer(value: Any) -> bool:
    """True for real integers (including numpy integer scalars), False for bools."""
    return isinstance(value, Integral) and not isinstance(value, bool)


def require_integer(value: Any, name: str) -> int:
    """Return *value* as a plain ``int`` or raise :class:`InvalidInputError`."""
    if not is_integer(value):
        raise InvalidInputError(f"{name} must be an integer, got {value!r}")
    return int(value)


def require_sequence(value: Any, name: str) -> Sequence[Any]:
    """Ensure *value* is a non-empty, non-string sequence."""
    if not isinstance(value, Sequence) or isinstance(value, (str, bytes, bytearray)):
        raise InvalidInputError(
            f"{name} must be a sequence of integers, got {type(value).__name__}"
        )
    if len(value) == 0:
        raise InvalidInputError(f"{name} must not be empty")
    return value
