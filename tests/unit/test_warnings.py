"""Unit tests for budget-analysis warning and recommendation display."""

from __future__ import annotations

import pytest

from chantier.i18n.warnings import (
    AMBIGUITIES,
    CONTENT_RESOLVERS,
    FULL_MESSAGES,
    FULL_WARNINGS,
    INCONSISTENCIES,
    MISSING_ELEMENTS,
    PREFIXES,
    WARNING_PREFIXES,
    translate_recommendation,
    translate_recommendations,
    translate_warning,
    translate_warnings,
    warning_kind,
)

SITE_PREPARATION_FR = (
    "\U0001f3d7\ufe0f PRÉPARATION DU SITE: Vérifier les coûts d'excavation, "
    "nivellement, et accès chantier"
)
SITE_PREPARATION_EN = (
    "\U0001f3d7\ufe0f SITE PREPARATION: Verify excavation, grading, and site access costs"
)


def test_full_message_is_replaced_as_a_whole(en_catalog, fr_catalog) -> None:
    """Known complete messages should swap to the catalog's complete sentence."""

    assert translate_warning(en_catalog, SITE_PREPARATION_FR) == SITE_PREPARATION_EN
    assert translate_warning(fr_catalog, SITE_PREPARATION_EN) == SITE_PREPARATION_FR


def test_prefix_and_known_body_are_translated(en_catalog) -> None:
    """Prefixed warnings should translate both the prefix and a known body."""

    assert (
        translate_warning(en_catalog, "❓ Ambiguïté: Superficie exacte non visible")
        == "❓ Ambiguity: Exact area not visible"
    )
    assert (
        translate_warning(en_catalog, "\u26a0\ufe0f Élément manquant: Comptoirs")
        == "\u26a0\ufe0f Missing element: Countertops"
    )
    assert (
        translate_warning(en_catalog, "⚡ Incohérence:   Aucune incohérence majeure détectée")
        == "⚡ Inconsistency: No major inconsistency detected"
    )


def test_prefix_with_unknown_body_keeps_the_body(en_catalog) -> None:
    """Unknown bodies and bodies of non-content kinds should stay as received."""

    assert (
        translate_warning(en_catalog, "\u26a0\ufe0f Élément manquant: Cabanon de jardin")
        == "\u26a0\ufe0f Missing element: Cabanon de jardin"
    )
    assert (
        translate_warning(en_catalog, "🔥 COUPE-FEU: Porte du garage à vérifier")
        == "🔥 FIRE SEPARATION: Porte du garage à vérifier"
    )


def test_english_warnings_render_in_french(fr_catalog) -> None:
    """English-prefixed warnings should get the French prefix back."""

    assert (
        translate_warning(fr_catalog, "⚡ Inconsistency: Dimensions incohérentes entre les plans")
        == "⚡ Incohérence: Dimensions incohérentes entre les plans"
    )


def test_unknown_warnings_are_returned_unchanged(en_catalog) -> None:
    """Warnings without a known prefix should display verbatim."""

    assert translate_warning(en_catalog, "Vérifier la pente du terrain") == (
        "Vérifier la pente du terrain"
    )
    assert translate_warning(en_catalog, "") == ""


def test_missing_catalog_entries_fall_back_to_the_received_warning(make_translator) -> None:
    """Without prefix or full entries the warning should stay unchanged."""

    t = make_translator({})

    assert translate_warning(t, SITE_PREPARATION_FR) == SITE_PREPARATION_FR
    assert translate_warning(t, "❓ Ambiguïté: Superficie exacte non visible") == (
        "❓ Ambiguïté: Superficie exacte non visible"
    )
    assert t.calls == [
        "budgetWarnings.full.sitePreparation",
        "budgetWarnings.prefixes.sitePreparation",
        "budgetWarnings.prefixes.ambiguity",
    ]


def test_missing_full_entry_falls_back_to_prefix_translation(make_translator) -> None:
    """A known full message without its entry should still translate the prefix."""

    t = make_translator({"budgetWarnings.prefixes.sitePreparation": "SITE:"})

    assert translate_warning(t, SITE_PREPARATION_FR) == (
        "SITE: Vérifier les coûts d'excavation, nivellement, et accès chantier"
    )


def test_translate_warnings_keeps_order(en_catalog) -> None:
    """List translation should map each warning in place."""

    assert translate_warnings(
        en_catalog, ["❓ Ambiguïté: Superficie exacte non visible", "Note libre"]
    ) == ["❓ Ambiguity: Exact area not visible", "Note libre"]
    assert translate_warnings(en_catalog, []) == []


def test_warning_kind_reads_the_prefix() -> None:
    """Kinds should come from the first matching prefix."""

    assert warning_kind("🔌 PLUMBING CONNECTION: Raccord") == "plumbingConnection"
    assert warning_kind("⚡ RACCORDEMENT ÉLECTRIQUE: Panneau") == "electricalConnection"
    assert warning_kind("Sans préfixe") is None


@pytest.mark.parametrize(
    ("recommendation", "expected"),
    [
        (
            "Analyse multi-lots: 3 lot(s) fusionnés pour 12 plan(s) total.",
            "Multi-lot analysis: 3 lot(s) merged for 12 plan(s) total.",
        ),
        (
            "ANALYSE MULTI-LOTS:2 lot(s) fusionnés pour 4 plan(s) total.",
            "Multi-lot analysis: 2 lot(s) merged for 4 plan(s) total.",
        ),
        ("Prévoir une contingence de 10 %.", "Prévoir une contingence de 10 %."),
    ],
)
def test_translate_recommendation_fills_known_patterns(
    en_catalog, recommendation: str, expected: str
) -> None:
    """The multi-lot summary should be re-rendered with its counts."""

    assert translate_recommendation(en_catalog, recommendation) == expected


def test_translate_recommendation_keeps_text_without_catalog_entry(make_translator) -> None:
    """A missing template entry should leave the recommendation as received."""

    recommendation = "Analyse multi-lots: 3 lot(s) fusionnés pour 12 plan(s) total."

    assert translate_recommendation(make_translator({}), recommendation) == recommendation
    assert translate_recommendations(
        make_translator({"budgetWarnings.multiLotAnalysis": "{{lots}}/{{plans}}"}),
        [recommendation, "Autre"],
    ) == ["3/12", "Autre"]


def test_packaged_english_catalog_covers_every_table_entry(en_catalog) -> None:
    """Each prefix, full message, and body segment should have an English entry."""

    kinds = {kind for _, kind in WARNING_PREFIXES}
    assert all(PREFIXES.lookup(en_catalog, kind) for kind in kinds)
    assert all(FULL_MESSAGES.lookup(en_catalog, message) for message in FULL_WARNINGS)

    tables = {
        "missingElement": MISSING_ELEMENTS,
        "ambiguity": AMBIGUITIES,
        "inconsistency": INCONSISTENCIES,
    }
    for kind, table in tables.items():
        resolver = CONTENT_RESOLVERS[kind]
        assert all(resolver.lookup(en_catalog, body) for body in table), kind
