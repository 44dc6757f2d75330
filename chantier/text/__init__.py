"""Text normalization primitives.

Every heuristic match and lookup key in Chantier goes through `normalize_key`.
"""

from .normalizer import contains_any, normalize_key

__all__ = ["contains_any", "normalize_key"]
