"""Reclassification of misfiled foundation budget items.

Plan analysis tends to file drain/backfill and basement slab items under
"Fondation". `reroute_foundation_items` moves them to "Excavation" and
"Coulage de dalle du sous-sol" without touching any monetary value.
"""

from __future__ import annotations

from typing import Sequence

from ..models.datatypes import BudgetCategory, BudgetItem
from ..text.normalizer import contains_any, normalize_key

FOUNDATION = "Fondation"
EXCAVATION = "Excavation"
BASEMENT_SLAB = "Coulage de dalle du sous-sol"

_DRAIN_MARKERS = ("drain", "remblai", "puisard", "drain francais")
_SLAB_MARKERS = ("dalle", "plancher beton")
_FOUR_INCH_MARKERS = ("4 pouces", '4"', "4 po")
_BASEMENT_MARKERS = ("sous-sol", "sous sol")
_FORM_AND_FINISH_MARKERS = ("coffrage et finition",)
_MPA25_MARKERS = ("25 mpa", "beton 25")


def is_drain_or_backfill(name: str) -> bool:
    """Return whether an item name describes drains, backfill, or a sump."""

    return contains_any(normalize_key(name), _DRAIN_MARKERS)


def is_slab(name: str) -> bool:
    """Return whether an item name describes basement slab work.

    A 25 MPa grade alone is not enough: foundation walls use the same grade.
    """

    normalized = normalize_key(name)
    has_slab = contains_any(normalized, _SLAB_MARKERS)
    has_four_inch = contains_any(normalized, _FOUR_INCH_MARKERS)
    has_basement = contains_any(normalized, _BASEMENT_MARKERS)
    has_form_and_finish = contains_any(normalized, _FORM_AND_FINISH_MARKERS)
    has_mpa25 = contains_any(normalized, _MPA25_MARKERS)
    return (
        has_slab
        or has_four_inch
        or has_form_and_finish
        or (has_mpa25 and (has_slab or has_four_inch or has_basement))
    )


def reroute_foundation_items(
    categories: Sequence[BudgetCategory],
) -> Sequence[BudgetCategory]:
    """Return categories with drain and slab items moved out of "Fondation".

    The input is returned as-is when "Fondation" is missing or empty, or when
    either destination category is missing. Otherwise a new list is returned;
    rerouted items are appended to their destination in source order.
    """

    by_name = _first_by_name(categories)
    foundation = by_name.get(FOUNDATION)
    if foundation is None or not foundation.items:
        return categories
    if EXCAVATION not in by_name or BASEMENT_SLAB not in by_name:
        return categories

    to_excavation: list[BudgetItem] = []
    to_slab: list[BudgetItem] = []
    kept: list[BudgetItem] = []
    for item in foundation.items:
        if is_drain_or_backfill(item.name):
            to_excavation.append(item)
        elif is_slab(item.name):
            to_slab.append(item)
        else:
            kept.append(item)

    replacements = {
        FOUNDATION: foundation.with_items(kept),
        EXCAVATION: by_name[EXCAVATION].with_items((*by_name[EXCAVATION].items, *to_excavation)),
        BASEMENT_SLAB: by_name[BASEMENT_SLAB].with_items(
            (*by_name[BASEMENT_SLAB].items, *to_slab)
        ),
    }

    rerouted: list[BudgetCategory] = []
    for category in categories:
        if by_name.get(category.name) is category and category.name in replacements:
            rerouted.append(replacements[category.name])
        else:
            rerouted.append(category)
    return rerouted


def count_moved_items(
    before: Sequence[BudgetCategory], after: Sequence[BudgetCategory]
) -> dict[str, int]:
    """Return how many items each destination gained between two category lists."""

    before_counts = _item_counts(before)
    after_counts = _item_counts(after)
    return {
        name: after_counts.get(name, 0) - before_counts.get(name, 0)
        for name in (EXCAVATION, BASEMENT_SLAB)
    }


def _first_by_name(categories: Sequence[BudgetCategory]) -> dict[str, BudgetCategory]:
    by_name: dict[str, BudgetCategory] = {}
    for category in categories:
        by_name.setdefault(category.name, category)
    return by_name


def _item_counts(categories: Sequence[BudgetCategory]) -> dict[str, int]:
    return {name: len(category.items) for name, category in _first_by_name(categories).items()}
