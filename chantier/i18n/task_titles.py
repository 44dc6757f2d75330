"""Display titles for budget task groups.

Budget items are grouped under French guide task titles. Those titles stay
internal identifiers; the displayed title comes from the task id found in the
construction steps catalog and its `construction.tasks.<id>.title` entry.

Key types:
- `TaskIdIndex`: lazily built `(category, task title) -> task id` lookup.
"""

from __future__ import annotations

import threading
from types import MappingProxyType
from typing import Callable, Iterable, Mapping

from ..catalog.steps import load_steps
from ..models.datatypes import ConstructionStep
from ..text.normalizer import normalize_key
from .catalog import TranslationFunction
from .resolver import CanonicalKeyResolver, frozen_table

OTHER_ITEMS_FR = "Autres éléments"
OTHER_ITEMS_KEY = "budget.otherItems"

PHYSICAL_WORK_PHASES = frozenset({"gros-oeuvre", "second-oeuvre", "finitions"})
EXCLUDED_STEP_IDS = frozenset({"inspections-finales"})

# Rough-in and finishing steps of a trade share one budget category.
CATEGORY_MERGE_BY_STEP_ID = frozen_table(
    {
        "plomberie-roughin": "Plomberie",
        "plomberie-finition": "Plomberie",
        "electricite-roughin": "Électricité",
        "electricite-finition": "Électricité",
    }
)

TASK_TITLES = CanonicalKeyResolver(prefix="construction.tasks.", suffix=".title")

StepsLoader = Callable[[], Iterable[ConstructionStep]]


def task_index_key(category_name: object, task_title: object) -> str:
    """Return the composite lookup key shared by index build and lookup."""

    return f"{normalize_key(category_name)}__{normalize_key(task_title)}"


class TaskIdIndex:
    """Task ids keyed by normalized budget category and task title.

    The index is built from `steps_loader` on first use, exactly once even
    under concurrent first use, and is read-only afterwards.
    """

    def __init__(self, steps_loader: StepsLoader = load_steps) -> None:
        """Initialize an unbuilt index over a steps catalog source."""

        self._steps_loader = steps_loader
        self._lock = threading.Lock()
        self._entries: Mapping[str, str] | None = None
        self.build_count = 0

    @property
    def is_built(self) -> bool:
        """Return whether the index has been constructed."""

        return self._entries is not None

    def build(self) -> Mapping[str, str]:
        """Construct the index if needed and return its entries."""

        entries = self._entries
        if entries is not None:
            return entries
        with self._lock:
            if self._entries is None:
                self._entries = MappingProxyType(_index_steps(self._steps_loader()))
                self.build_count += 1
            return self._entries

    def lookup(self, category_name: str, task_title: str) -> str | None:
        """Return the task id for a category and task title, if indexed."""

        return self.build().get(task_index_key(category_name, task_title))

    def __len__(self) -> int:
        return len(self.build())


def _index_steps(steps: Iterable[ConstructionStep]) -> dict[str, str]:
    entries: dict[str, str] = {}
    for step in steps:
        if step.phase not in PHYSICAL_WORK_PHASES or step.id in EXCLUDED_STEP_IDS:
            continue
        category_name = CATEGORY_MERGE_BY_STEP_ID.get(step.id, step.title)
        for task in step.tasks:
            entries[task_index_key(category_name, task.title)] = task.id
    return entries


_DEFAULT_INDEX = TaskIdIndex()


def default_task_index() -> TaskIdIndex:
    """Return the process-wide index over the packaged steps catalog."""

    return _DEFAULT_INDEX


def translate_budget_task_title(
    t: TranslationFunction,
    category_name: str,
    task_title: str,
    index: TaskIdIndex | None = None,
) -> str:
    """Return the display title of a budget task group.

    The "other items" bucket maps straight to its own catalog entry. Unknown
    titles, and task ids without a catalog entry, keep the stored title.
    """

    if normalize_key(task_title) == normalize_key(OTHER_ITEMS_FR):
        return t(OTHER_ITEMS_KEY)

    resolved_index = index if index is not None else _DEFAULT_INDEX
    task_id = resolved_index.lookup(category_name, task_title)
    if task_id is None:
        return task_title

    return TASK_TITLES.resolve(t, task_id, fallback=task_title)
