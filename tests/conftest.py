"""Shared pytest fixtures for the full Chantier test suite."""

from __future__ import annotations

from typing import Any, Mapping

import pytest

from chantier.i18n.catalog import TranslationCatalog, load_default_catalog


class DictTranslator:
    """Flat-key translation function backed by a plain mapping."""

    def __init__(self, entries: Mapping[str, Any]) -> None:
        self.entries = dict(entries)
        self.calls: list[str] = []

    def __call__(self, key: str, *, return_objects: bool = False, **values: object) -> Any:
        self.calls.append(key)
        value = self.entries.get(key)
        if isinstance(value, str):
            for name, replacement in values.items():
                value = value.replace("{{" + name + "}}", str(replacement))
            return value
        if return_objects and isinstance(value, list | dict):
            return value
        return key


@pytest.fixture
def make_translator():
    """Build a `DictTranslator` over the given flat key/value entries."""

    return DictTranslator


@pytest.fixture
def en_catalog() -> TranslationCatalog:
    """Provide the packaged catalog displaying English."""

    return load_default_catalog(language="en", fallback_language="fr")


@pytest.fixture
def fr_catalog() -> TranslationCatalog:
    """Provide the packaged catalog displaying French."""

    return load_default_catalog(language="fr", fallback_language="fr")
