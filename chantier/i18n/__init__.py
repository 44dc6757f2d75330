"""Localized display of canonical (French) domain data.

This package maps canonical names to translation-catalog keys and degrades
to the canonical name whenever no translation exists.
"""

from .catalog import TranslationCatalog, TranslationFunction, load_default_catalog
from .item_names import translate_budget_item_name, translate_no_items_message
from .labels import (
    get_category_label,
    get_plan_tier_key,
    get_translated_plan_description,
    get_translated_plan_features,
    get_translated_plan_name,
    get_translated_step_name,
    get_translated_trade_name,
)
from .resolver import CanonicalKeyResolver
from .task_titles import TaskIdIndex, default_task_index, translate_budget_task_title
from .warnings import (
    translate_recommendation,
    translate_recommendations,
    translate_warning,
    translate_warnings,
)

__all__ = [
    "CanonicalKeyResolver",
    "TaskIdIndex",
    "TranslationCatalog",
    "TranslationFunction",
    "default_task_index",
    "get_category_label",
    "get_plan_tier_key",
    "get_translated_plan_description",
    "get_translated_plan_features",
    "get_translated_plan_name",
    "get_translated_step_name",
    "get_translated_trade_name",
    "load_default_catalog",
    "translate_budget_item_name",
    "translate_budget_task_title",
    "translate_no_items_message",
    "translate_recommendation",
    "translate_recommendations",
    "translate_warning",
    "translate_warnings",
]
