"""Shared parsing helpers for configuration, CLI, and budget file values."""

from __future__ import annotations

import math


_TRUE_BOOLEAN_TOKENS = frozenset({"1", "true", "yes", "on", "oui"})
_FALSE_BOOLEAN_TOKENS = frozenset({"0", "false", "no", "off", "non"})
SUPPORTED_LANGUAGES = frozenset({"fr", "en"})


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


def parse_language_code(value: object, field_name: str) -> str:
    """Parse a display language code, accepting regional tags like `fr-CA`.

    Args:
        value: Raw language token.
        field_name: Field name for an actionable validation error message.

    Raises:
        ValueError: If the token is blank or names an unsupported language.
    """

    normalized = normalize_optional_string(value)
    if normalized is None:
        raise ValueError(f"`{field_name}` must be a non-empty language code.")

    primary = normalized.replace("_", "-").split("-", 1)[0].lower()
    if primary not in SUPPORTED_LANGUAGES:
        supported = ", ".join(sorted(SUPPORTED_LANGUAGES))
        raise ValueError(
            f"Unsupported `{field_name}` value `{normalized}`; supported: {supported}."
        )
    return primary


def parse_cost(value: object, field_name: str) -> int | float:
    """Parse a monetary amount from a JSON number or numeric string.

    JSON numbers are returned unchanged so integer costs keep their exact
    value. Strings use `,` or `.` as decimal separator and may group digits
    with spaces; they parse to `int` when they carry no fractional part.

    Raises:
        ValueError: If the value is not a finite number.
    """

    if isinstance(value, bool):
        raise ValueError(f"`{field_name}` must be a number.")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        parsed: int | float = value
    elif isinstance(value, str):
        normalized = normalize_optional_string(value)
        if normalized is None:
            raise ValueError(f"`{field_name}` must be a number.")
        text = "".join(normalized.split()).replace(",", ".")
        try:
            parsed = int(text)
        except ValueError:
            try:
                parsed = float(text)
            except ValueError as exc:
                raise ValueError(f"`{field_name}` must be a number.") from exc
    else:
        raise ValueError(f"`{field_name}` must be a number.")

    if isinstance(parsed, float) and not math.isfinite(parsed):
        raise ValueError(f"`{field_name}` must be a finite number.")
    return parsed
