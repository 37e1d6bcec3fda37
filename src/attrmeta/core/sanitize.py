"""Boolean coercion for submitted form values."""

from __future__ import annotations

from typing import Any

_TRUTHY_TOKENS = frozenset({"1", "true", "yes", "on"})


def sanitize_boolean(value: Any) -> bool:
    """Convert an arbitrary value into a strict boolean.

    Recognized truthy forms are True, the number 1 and the strings
    "1", "true", "yes", "on" (case-insensitive, whitespace ignored).
    Anything else, including values that cannot be read as a boolean,
    is False.

    Example:
        >>> sanitize_boolean("Yes ")
        True
        >>> sanitize_boolean("2")
        False
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value == 1
    if isinstance(value, bytes):
        value = value.decode("utf-8", errors="replace")
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY_TOKENS
    return False
