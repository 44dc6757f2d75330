"""Budget JSON reading and writing.

Responsibilities:
- Convert `[{name, items: [{name, cost, quantity, unit}]}]` payloads into
  `BudgetCategory` records and back.
- Reject structurally invalid payloads with `BudgetFileError`.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Sequence

from ..errors import BudgetFileError
from ..models.datatypes import BudgetCategory, BudgetItem
from ..parsing import parse_cost


def load_categories(path: Path) -> list[BudgetCategory]:
    """Read a budget JSON file and return its categories in file order."""

    raw_text = path.read_text(encoding="utf-8")
    try:
        payload = json.loads(raw_text)
    except json.JSONDecodeError as exc:
        raise BudgetFileError(f"Budget file `{path}` is not valid JSON (line {exc.lineno}).") from exc
    return categories_from_payload(payload)


def dump_categories(categories: Sequence[BudgetCategory], path: Path) -> Path:
    """Write categories as pretty-printed UTF-8 JSON and return the path."""

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(categories_to_payload(categories), ensure_ascii=False, indent=2) + "\n",
        encoding="utf-8",
    )
    return path


def categories_from_payload(payload: Any) -> list[BudgetCategory]:
    """Build categories from a decoded JSON payload.

    A top-level `{"categories": [...]}` wrapper is accepted as well as a bare list.
    """

    if isinstance(payload, dict) and "categories" in payload:
        payload = payload["categories"]
    if not isinstance(payload, list):
        raise BudgetFileError("Budget payload must be a list of categories.")

    categories: list[BudgetCategory] = []
    for position, raw_category in enumerate(payload):
        if not isinstance(raw_category, dict):
            raise BudgetFileError(f"Category #{position} must be an object.")
        name = raw_category.get("name")
        if not isinstance(name, str) or not name.strip():
            raise BudgetFileError(f"Category #{position} requires a non-empty `name`.")

        raw_items = raw_category.get("items")
        if raw_items is None:
            raw_items = []
        if not isinstance(raw_items, list):
            raise BudgetFileError(f"Category `{name}` field `items` must be a list.")

        categories.append(
            BudgetCategory(
                name=name,
                items=tuple(
                    _item_from_payload(raw_item, f"{name}[{item_position}]")
                    for item_position, raw_item in enumerate(raw_items)
                ),
            )
        )
    return categories


def categories_to_payload(categories: Sequence[BudgetCategory]) -> list[dict[str, Any]]:
    """Return a JSON-serializable payload for categories."""

    return [
        {
            "name": category.name,
            "items": [
                {
                    "name": item.name,
                    "cost": item.cost,
                    "quantity": item.quantity,
                    "unit": item.unit,
                }
                for item in category.items
            ],
        }
        for category in categories
    ]


def _item_from_payload(raw_item: Any, label: str) -> BudgetItem:
    if not isinstance(raw_item, dict):
        raise BudgetFileError(f"Item `{label}` must be an object.")
    name = raw_item.get("name")
    if not isinstance(name, str):
        raise BudgetFileError(f"Item `{label}` requires a string `name`.")
    try:
        cost = parse_cost(raw_item.get("cost"), f"{label}.cost")
    except ValueError as exc:
        raise BudgetFileError(f"Item `{label}`: {exc}") from exc
    return BudgetItem(
        name=name,
        cost=cost,
        quantity=_optional_text(raw_item.get("quantity")),
        unit=_optional_text(raw_item.get("unit")),
    )


def _optional_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)
