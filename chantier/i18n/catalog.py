"""File-backed translation catalog.

Responsibilities:
- Define the `TranslationFunction` protocol every resolver consumes.
- Resolve dotted keys against nested per-language JSON resources with a
  fallback language, returning the key itself when no entry exists.

Key types:
- `TranslationFunction`: callable contract
  `t(key, *, return_objects=False, **values)`.
- `TranslationCatalog`: JSON-backed implementation of that contract.
"""

from __future__ import annotations

import json
import re
import threading
from pathlib import Path
from typing import Any, Mapping, Protocol

from ..errors import CatalogLoadError
from ..parsing import parse_language_code

DEFAULT_LOCALES_DIR = Path(__file__).resolve().parent.parent / "data" / "locales"

_INTERPOLATION = re.compile(r"\{\{\s*(\w+)\s*\}\}")
_MISSING = object()


class TranslationFunction(Protocol):
    """Translation lookup contract.

    Missing string entries return `key` unchanged. In `return_objects` mode a
    missing entry returns a non-list value. Keyword `values` fill `{{name}}`
    placeholders of the found entry.
    """

    def __call__(self, key: str, *, return_objects: bool = False, **values: object) -> Any:
        """Return the translation for `key`."""


class TranslationCatalog:
    """Nested-key translation lookup over per-language resources."""

    def __init__(
        self,
        resources: Mapping[str, Mapping[str, Any]],
        language: str = "fr",
        fallback_language: str = "fr",
    ) -> None:
        """Initialize the catalog for one display language."""

        self.language = parse_language_code(language, "language")
        self.fallback_language = parse_language_code(fallback_language, "fallback_language")
        self._resources = dict(resources)

    @classmethod
    def from_directory(
        cls,
        locales_dir: Path,
        language: str = "fr",
        fallback_language: str = "fr",
    ) -> TranslationCatalog:
        """Load every `<lang>.json` resource found in `locales_dir`."""

        if not locales_dir.is_dir():
            raise CatalogLoadError(locales_dir, "locales directory does not exist.")

        resources: dict[str, Mapping[str, Any]] = {}
        for resource_path in sorted(locales_dir.glob("*.json")):
            resources[resource_path.stem] = _read_resource(resource_path)
        if not resources:
            raise CatalogLoadError(locales_dir, "no `<lang>.json` resources found.")
        return cls(resources, language=language, fallback_language=fallback_language)

    @property
    def languages(self) -> tuple[str, ...]:
        """Return the languages that have a loaded resource."""

        return tuple(sorted(self._resources))

    def with_language(self, language: str) -> TranslationCatalog:
        """Return a catalog sharing these resources for another display language."""

        return TranslationCatalog(
            self._resources, language=language, fallback_language=self.fallback_language
        )

    def has_key(self, key: str) -> bool:
        """Return whether `key` resolves in the display or fallback language."""

        return self._lookup(key) is not _MISSING

    def translate(self, key: str, *, return_objects: bool = False, **values: object) -> Any:
        """Return the translation for `key`, or `key` itself when missing."""

        found = self._lookup(key)
        if isinstance(found, str):
            return _interpolate(found, values)
        if return_objects and isinstance(found, list | dict):
            return found
        return key

    __call__ = translate

    def _lookup(self, key: str) -> Any:
        """Find `key` in the display language first, then the fallback language."""

        for language in dict.fromkeys((self.language, self.fallback_language)):
            node: Any = self._resources.get(language, _MISSING)
            for segment in key.split("."):
                if not isinstance(node, Mapping) or segment not in node:
                    node = _MISSING
                    break
                node = node[segment]
            if node is not _MISSING:
                return node
        return _MISSING


def _interpolate(template: str, values: Mapping[str, object]) -> str:
    """Replace `{{name}}` placeholders; unknown placeholders stay verbatim."""

    if not values:
        return template
    return _INTERPOLATION.sub(
        lambda match: str(values[match.group(1)]) if match.group(1) in values else match.group(0),
        template,
    )


def _read_resource(path: Path) -> Mapping[str, Any]:
    """Read one JSON locale resource and enforce an object root."""

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise CatalogLoadError(path, f"cannot read locale resource ({exc.strerror}).") from exc
    except json.JSONDecodeError as exc:
        raise CatalogLoadError(path, f"invalid JSON at line {exc.lineno}.") from exc
    if not isinstance(payload, dict):
        raise CatalogLoadError(path, "locale resource must contain a top-level object.")
    return payload


_DEFAULT_CATALOGS: dict[tuple[Path, str, str], TranslationCatalog] = {}
_DEFAULT_CATALOGS_LOCK = threading.Lock()


def load_default_catalog(
    language: str = "fr",
    fallback_language: str = "fr",
    locales_dir: Path | None = None,
) -> TranslationCatalog:
    """Return a cached catalog over `locales_dir` (packaged locales by default)."""

    resolved_dir = (locales_dir or DEFAULT_LOCALES_DIR).resolve()
    cache_key = (
        resolved_dir,
        parse_language_code(language, "language"),
        parse_language_code(fallback_language, "fallback_language"),
    )
    with _DEFAULT_CATALOGS_LOCK:
        catalog = _DEFAULT_CATALOGS.get(cache_key)
        if catalog is None:
            catalog = TranslationCatalog.from_directory(
                resolved_dir, language=cache_key[1], fallback_language=cache_key[2]
            )
            _DEFAULT_CATALOGS[cache_key] = catalog
    return catalog
