"""Budget category transformations.

This package reclassifies misfiled budget items and groups category items
under construction-guide tasks. Monetary values are never recomputed here.
"""

from .reroute import (
    BASEMENT_SLAB,
    EXCAVATION,
    FOUNDATION,
    count_moved_items,
    is_drain_or_backfill,
    is_slab,
    reroute_foundation_items,
)
from .task_grouping import (
    CATEGORY_TASK_MAPPINGS,
    get_tasks_for_category,
    group_items_by_task,
    match_task,
)

__all__ = [
    "BASEMENT_SLAB",
    "CATEGORY_TASK_MAPPINGS",
    "EXCAVATION",
    "FOUNDATION",
    "count_moved_items",
    "get_tasks_for_category",
    "group_items_by_task",
    "is_drain_or_backfill",
    "is_slab",
    "match_task",
    "reroute_foundation_items",
]
