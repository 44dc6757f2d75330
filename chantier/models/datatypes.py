"""Core datatypes shared across Chantier modules.

Responsibilities:
- Represent immutable budget and construction-guide records.
- Keep canonical (French) names as the identity of every record.

Key types:
- `BudgetItem`, `BudgetCategory`, `ConstructionTask`, `ConstructionStep`,
  and `TaskKeywordMapping`.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable


@dataclass(frozen=True, slots=True)
class BudgetItem:
    """One budget line item as entered by a user or imported from a submission.

    Attributes:
        name: Free-form item name; the only field read by classification.
        cost: Monetary amount, copied verbatim by every transformation.
        quantity: Quantity as displayed (free text).
        unit: Unit label as displayed (free text).
    """

    name: str
    cost: int | float
    quantity: str = ""
    unit: str = ""


@dataclass(frozen=True, slots=True)
class BudgetCategory:
    """A named budget category holding an ordered sequence of items.

    Attributes:
        name: Canonical French category name; identity of the category.
        items: Ordered line items.
    """

    name: str
    items: tuple[BudgetItem, ...] = field(default_factory=tuple)

    def with_items(self, items: Iterable[BudgetItem]) -> BudgetCategory:
        """Return a copy of this category holding `items` instead."""

        return replace(self, items=tuple(items))

    @property
    def total_cost(self) -> int | float:
        """Return the sum of item costs in this category."""

        return sum(item.cost for item in self.items)


@dataclass(frozen=True, slots=True)
class ConstructionTask:
    """A task of a construction-guide step."""

    id: str
    title: str


@dataclass(frozen=True, slots=True)
class ConstructionStep:
    """A construction-guide step.

    Attributes:
        id: Stable step identifier (e.g. `plomberie-roughin`).
        phase: Phase tag (`pre-construction`, `gros-oeuvre`, `second-oeuvre`,
            `finitions`, ...).
        title: Canonical French step title.
        tasks: Ordered tasks of the step.
    """

    id: str
    phase: str
    title: str
    tasks: tuple[ConstructionTask, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class TaskKeywordMapping:
    """Keywords that attach budget items to one guide task title."""

    task_title: str
    keywords: tuple[str, ...]
