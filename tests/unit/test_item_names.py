"""Unit tests for budget item name rendering."""

from __future__ import annotations

from chantier.i18n.item_names import (
    is_french_locale,
    translate_budget_item_name,
    translate_no_items_message,
)


def test_french_locale_keeps_item_names_verbatim(fr_catalog) -> None:
    """French display should never rewrite stored item names."""

    assert is_french_locale(fr_catalog)
    assert translate_budget_item_name(fr_catalog, "Solives de plancher") == "Solives de plancher"


def test_english_locale_replaces_known_terms(en_catalog) -> None:
    """English display should replace whole words and keep the leading capital."""

    assert not is_french_locale(en_catalog)
    assert translate_budget_item_name(en_catalog, "Solives de plancher") == "Joists of floor"
    assert translate_budget_item_name(en_catalog, "Béton 25 MPa") == "Concrete 25 MPa"


def test_english_locale_prefers_longest_terms(en_catalog) -> None:
    """Multi-word terms should win over their single-word parts."""

    assert translate_budget_item_name(en_catalog, "Tirage de joints") == "Taping and mudding"


def test_english_locale_keeps_partial_word_matches(en_catalog) -> None:
    """Terms embedded inside longer words should not be replaced."""

    assert translate_budget_item_name(en_catalog, "Murale") == "Wall"
    assert translate_budget_item_name(en_catalog, "Xmurx") == "Xmurx"


def test_empty_item_name_is_returned_as_is(en_catalog) -> None:
    """Empty names should pass through untouched."""

    assert translate_budget_item_name(en_catalog, "") == ""


def test_no_items_message_translation(en_catalog, fr_catalog) -> None:
    """Known empty-state phrasings should be translated outside French."""

    message = "Aucun élément associé à cette tâche"

    assert translate_no_items_message(en_catalog, message) == "No items associated"
    assert translate_no_items_message(fr_catalog, message) == message
    assert translate_no_items_message(en_catalog, "Autre message") == "Autre message"
