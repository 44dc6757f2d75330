"""Unit tests for diacritic- and whitespace-insensitive key normalization."""

from __future__ import annotations

import pytest

from chantier.text.normalizer import contains_any, normalize_key


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("  Électricité  ", "electricite"),
        ("Drain   Français", "drain francais"),
        ("Coulée\tde\ndalle", "coulee de dalle"),
        ("Plomberie", "plomberie"),
        ("", ""),
    ],
)
def test_normalize_key_strips_accents_case_and_whitespace(raw: str, expected: str) -> None:
    """Normalization should lowercase, drop combining marks, and collapse whitespace."""

    assert normalize_key(raw) == expected


def test_normalize_key_maps_none_and_non_strings_to_empty() -> None:
    """Absent and non-string values should normalize to an empty string."""

    assert normalize_key(None) == ""
    assert normalize_key(42) == ""


def test_normalize_key_is_idempotent() -> None:
    """Normalizing an already-normalized key should leave it unchanged."""

    once = normalize_key(" Béton  25 MPA ")
    assert normalize_key(once) == once


def test_normalize_key_equates_precomposed_and_decomposed_forms() -> None:
    """Precomposed and combining-mark spellings should compare equal."""

    assert normalize_key("\u00e9lectricit\u00e9") == normalize_key("e\u0301lectricite\u0301")


def test_contains_any_matches_substrings() -> None:
    """Marker matching should be plain substring search on normalized input."""

    assert contains_any("drain francais 4 po", ("puisard", "drain"))
    assert not contains_any("coffrage", ("dalle",))
