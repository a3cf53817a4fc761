"""Checks on D-Bus type codes."""

from __future__ import annotations

_BASIC_TYPE_CODES = frozenset("ybnqiuxtdhsog")


class InvalidTypeError(ValueError):
    """Raised when a type code is not a valid basic type."""


def is_valid_basic_type(code: str) -> bool:
    """Return whether ``code`` is a single basic D-Bus type code."""
    return len(code) == 1 and code in _BASIC_TYPE_CODES


def check_basic_type(code: str) -> None:
    """Raise :class:`InvalidTypeError` unless ``code`` is a single basic type code."""
    if not is_valid_basic_type(code):
        raise InvalidTypeError(f"Invalid basic type: {code}")