"""Unit tests for the file-backed translation catalog."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from chantier.errors import CatalogLoadError
from chantier.i18n.catalog import DEFAULT_LOCALES_DIR, TranslationCatalog, load_default_catalog


def _catalog(language: str = "en") -> TranslationCatalog:
    return TranslationCatalog(
        {
            "fr": {"greeting": "Bonjour {{name}}", "only": {"fr": "Seulement"}},
            "en": {"greeting": "Hello {{name}}", "list": ["a", "b"], "empty": ""},
        },
        language=language,
        fallback_language="fr",
    )


def test_translate_walks_dotted_keys_with_fallback_language() -> None:
    """Keys missing in the display language should be read from the fallback."""

    catalog = _catalog()

    assert catalog("greeting", name="Alex") == "Hello Alex"
    assert catalog("only.fr") == "Seulement"
    assert catalog.with_language("fr")("greeting") == "Bonjour {{name}}"


def test_translate_returns_key_for_missing_or_non_string_entries() -> None:
    """Missing entries and objects without `return_objects` should echo the key."""

    catalog = _catalog()

    assert catalog("missing.key") == "missing.key"
    assert catalog("list") == "list"
    assert catalog("only") == "only"
    assert catalog("list", return_objects=True) == ["a", "b"]
    assert catalog("missing.key", return_objects=True) == "missing.key"


def test_translate_keeps_empty_strings() -> None:
    """An empty catalog value is still a string entry."""

    assert _catalog()("empty") == ""
    assert _catalog().has_key("empty")
    assert not _catalog().has_key("greeting.deeper")


def test_catalog_rejects_unsupported_language() -> None:
    """Catalog construction should validate the display language."""

    with pytest.raises(ValueError, match="Unsupported"):
        TranslationCatalog({}, language="de")


def test_from_directory_loads_every_resource(tmp_path: Path) -> None:
    """Each `<lang>.json` file should become one language resource."""

    (tmp_path / "fr.json").write_text(json.dumps({"a": "A-fr"}), encoding="utf-8")
    (tmp_path / "en.json").write_text(json.dumps({"a": "A-en"}), encoding="utf-8")

    catalog = TranslationCatalog.from_directory(tmp_path, language="en")

    assert catalog.languages == ("en", "fr")
    assert catalog("a") == "A-en"


def test_from_directory_reports_invalid_resources(tmp_path: Path) -> None:
    """Broken JSON, non-object roots, and empty directories raise load errors."""

    with pytest.raises(CatalogLoadError, match="no `<lang>.json`"):
        TranslationCatalog.from_directory(tmp_path)

    (tmp_path / "fr.json").write_text("{", encoding="utf-8")
    with pytest.raises(CatalogLoadError, match="invalid JSON"):
        TranslationCatalog.from_directory(tmp_path)

    (tmp_path / "fr.json").write_text("[]", encoding="utf-8")
    with pytest.raises(CatalogLoadError, match="top-level object"):
        TranslationCatalog.from_directory(tmp_path)

    with pytest.raises(CatalogLoadError, match="does not exist"):
        TranslationCatalog.from_directory(tmp_path / "missing")


def test_load_default_catalog_is_cached_per_language() -> None:
    """Packaged catalogs should be loaded once per language pair."""

    first = load_default_catalog(language="en")
    second = load_default_catalog(language="en-CA", locales_dir=DEFAULT_LOCALES_DIR)

    assert first is second
    assert first("common.locale") == "en-CA"
    assert load_default_catalog(language="fr") is not first


def test_packaged_english_and_french_resources_share_top_level_sections() -> None:
    """French display falls back to the stored names for task titles only."""

    en = json.loads((DEFAULT_LOCALES_DIR / "en.json").read_text(encoding="utf-8"))
    fr = json.loads((DEFAULT_LOCALES_DIR / "fr.json").read_text(encoding="utf-8"))

    assert set(en) - set(fr) == {"construction"}
    assert set(en["categories"]) == set(fr["categories"])
    assert set(en["steps"]) == set(fr["steps"])
