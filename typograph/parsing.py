"""Shared parsing helpers for configuration and CLI value normalization."""

from __future__ import annotations

from .models.datatypes import OutputMode

_TRUE_BOOLEAN_TOKENS = frozenset({"1", "true", "yes", "on"})
_FALSE_BOOLEAN_TOKENS = frozenset({"0", "false", "no", "off"})


def normalize_optional_string(value: object) -> str | None:
    """Normalize an optional value to a stripped non-empty string.

    Args:
        value: Arbitrary input value.

    Returns:
        Stripped string value, or `None` when the value is empty after trimming.
    """

    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    return text


def parse_permissive_boolean(value: object) -> bool | None:
    """Parse a permissive boolean token and return `None` for invalid values."""

    if isinstance(value, bool):
        return value

    normalized = normalize_optional_string(value)
    if normalized is None:
        return None

    token = normalized.lower()
    if token in _TRUE_BOOLEAN_TOKENS:
        return True
    if token in _FALSE_BOOLEAN_TOKENS:
        return False
    return None


def parse_output_mode(value: object, field_name: str) -> OutputMode:
    """Parse an output mode token case-insensitively.

    Raises:
        ValueError: If the token is blank or not a known mode.
    """

    normalized = normalize_optional_string(value)
    if normalized is not None:
        for mode in OutputMode:
            if mode.value == normalized.lower():
                return mode

    choices = "`, `".join(mode.value for mode in OutputMode)
    raise ValueError(f"`{field_name}` must be one of `{choices}`.")
