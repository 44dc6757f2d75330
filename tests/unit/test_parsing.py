"""Unit tests for shared parsing helpers."""

from __future__ import annotations

import math

import pytest

from chantier.parsing import (
    normalize_optional_string,
    parse_cost,
    parse_language_code,
    parse_permissive_boolean,
)


def test_normalize_optional_string_trims_and_drops_blank_values() -> None:
    """Blank or missing values should become `None`, others are stripped."""

    assert normalize_optional_string(None) is None
    assert normalize_optional_string("   ") is None
    assert normalize_optional_string(" en ") == "en"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [(True, True), ("yes", True), (" OUI ", True), ("0", False), ("non", False), ("maybe", None)],
)
def test_parse_permissive_boolean_tokens(raw: object, expected: bool | None) -> None:
    """Boolean parsing should accept English and French tokens and reject others."""

    assert parse_permissive_boolean(raw) is expected


def test_parse_language_code_accepts_regional_tags() -> None:
    """Regional tags should reduce to their supported primary language."""

    assert parse_language_code("fr-CA", "language") == "fr"
    assert parse_language_code(" EN_us ", "language") == "en"


def test_parse_language_code_rejects_unsupported_and_blank_values() -> None:
    """Unsupported or blank codes should raise with the field name in the message."""

    with pytest.raises(ValueError, match="`language`"):
        parse_language_code("de", "language")
    with pytest.raises(ValueError, match="non-empty"):
        parse_language_code("  ", "language")


def test_parse_cost_accepts_numbers_and_numeric_strings() -> None:
    """Costs should parse from JSON numbers and French-formatted strings."""

    assert parse_cost(1200, "cost") == 1200
    assert isinstance(parse_cost(1200, "cost"), int)
    assert parse_cost(12.5, "cost") == 12.5
    assert parse_cost("1 234,50", "cost") == pytest.approx(1234.5)
    assert parse_cost("30 267", "cost") == 30267
    assert isinstance(parse_cost("30 267", "cost"), int)


def test_parse_cost_keeps_large_integers_exact() -> None:
    """Integers beyond float precision should come back unchanged."""

    assert parse_cost(12345678901234567, "cost") == 12345678901234567
    assert parse_cost("12345678901234567", "cost") == 12345678901234567


@pytest.mark.parametrize("raw", [True, None, "abc", math.inf, "nan", [12]])
def test_parse_cost_rejects_non_numeric_values(raw: object) -> None:
    """Booleans, blanks, text, and non-finite values are not valid costs."""

    with pytest.raises(ValueError, match="`cost`"):
        parse_cost(raw, "cost")
