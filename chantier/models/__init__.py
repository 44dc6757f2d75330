"""Shared typed data models for Chantier.

This package contains dataclasses used across modules to avoid cross-module
coupling and circular imports.
"""

from .datatypes import (
    BudgetCategory,
    BudgetItem,
    ConstructionStep,
    ConstructionTask,
    TaskKeywordMapping,
)

__all__ = [
    "BudgetCategory",
    "BudgetItem",
    "ConstructionStep",
    "ConstructionTask",
    "TaskKeywordMapping",
]
