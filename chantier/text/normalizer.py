"""Key normalization for diacritic- and whitespace-insensitive matching.

Responsibilities:
- Turn arbitrary values into a canonical comparison form.
- Serve as the single equality basis for lookup keys and name heuristics.
"""

from __future__ import annotations

import re
import unicodedata

_COMBINING_MARKS = re.compile("[\u0300-\u036f]")
_WHITESPACE_RUN = re.compile(r"\s+")


def normalize_key(value: object) -> str:
    """Return a lower-cased, accent-free, whitespace-collapsed form of `value`.

    `None` and other non-string values become an empty string. Both sides of any
    comparison must go through this function.
    """

    text = value if isinstance(value, str) else ""
    decomposed = unicodedata.normalize("NFD", text.lower())
    stripped = _COMBINING_MARKS.sub("", decomposed)
    return _WHITESPACE_RUN.sub(" ", stripped).strip()


def contains_any(normalized: str, needles: tuple[str, ...]) -> bool:
    """Return whether a normalized string contains any of the given markers."""

    return any(needle in normalized for needle in needles)
