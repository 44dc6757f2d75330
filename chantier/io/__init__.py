"""File input/output for budget payloads."""

from .budget_json import (
    categories_from_payload,
    categories_to_payload,
    dump_categories,
    load_categories,
)

__all__ = [
    "categories_from_payload",
    "categories_to_payload",
    "dump_categories",
    "load_categories",
]
