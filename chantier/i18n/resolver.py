"""Canonical-name to localized-label resolution.

Responsibilities:
- Map a canonical (French) name to a localization key through a fixed table
  or by identity, and query a `TranslationFunction` for it.
- Degrade to the canonical name (or a caller fallback) whenever the table or
  the catalog has no entry. Resolution never raises.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping, Sequence

from .catalog import TranslationFunction


def frozen_table(entries: Mapping[str, str]) -> Mapping[str, str]:
    """Return a read-only copy of a canonical-name lookup table."""

    return MappingProxyType(dict(entries))


@dataclass(frozen=True, slots=True)
class CanonicalKeyResolver:
    """One key namespace of the translation catalog.

    Attributes:
        prefix: Key namespace, e.g. `categories.` or `schedule.trades.`.
        keys: Exact canonical name to key segment table, or `None` to use the
            canonical name itself as the segment.
        suffix: Optional trailing key segment, e.g. `.title`.
    """

    prefix: str
    keys: Mapping[str, str] | None = None
    suffix: str = ""

    def segment_for(self, canonical_name: str) -> str | None:
        """Return the key segment for `canonical_name`, or `None` when unknown."""

        if self.keys is None:
            return canonical_name if isinstance(canonical_name, str) and canonical_name else None
        return self.keys.get(canonical_name)

    def key_for(self, canonical_name: str) -> str | None:
        """Return the full localization key for `canonical_name`, if any."""

        segment = self.segment_for(canonical_name)
        if segment is None:
            return None
        return f"{self.prefix}{segment}{self.suffix}"

    def lookup(self, t: TranslationFunction, canonical_name: str) -> str | None:
        """Return the catalog translation, or `None` when table or catalog misses."""

        full_key = self.key_for(canonical_name)
        if full_key is None:
            return None
        translated = t(full_key)
        if not isinstance(translated, str) or not translated or translated == full_key:
            return None
        return translated

    def resolve(
        self, t: TranslationFunction, canonical_name: str, fallback: str | None = None
    ) -> str:
        """Return the translated label, else `fallback`, else `canonical_name`."""

        translated = self.lookup(t, canonical_name)
        if translated is not None:
            return translated
        return canonical_name if fallback is None else fallback

    def resolve_list(
        self, t: TranslationFunction, canonical_name: str, fallback: Sequence[str]
    ) -> list[str]:
        """Return a translated string list, or `fallback` unless fully translated."""

        full_key = self.key_for(canonical_name)
        if full_key is not None:
            translated: Any = t(full_key, return_objects=True)
            if isinstance(translated, list) and translated and isinstance(translated[0], str):
                return list(translated)
        return list(fallback)
