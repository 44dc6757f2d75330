"""Top-level package for Chantier.

This package resolves canonical (French) construction-project data to
localized display strings and reclassifies misfiled budget items. The main
entry points are `reroute_foundation_items` and the `chantier.i18n` helpers.
"""

from .budget.reroute import reroute_foundation_items
from .i18n.catalog import TranslationCatalog

__all__ = ["TranslationCatalog", "reroute_foundation_items", "__version__"]

__version__ = "0.1.0"
