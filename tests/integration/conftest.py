"""Integration-test fixtures for deterministic CLI environments."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

_CHANTIER_ENV_VARS = (
    "CHANTIER_LANGUAGE",
    "CHANTIER_FALLBACK_LANGUAGE",
    "CHANTIER_LOCALES_DIR",
    "CHANTIER_STEPS_CATALOG",
    "CHANTIER_VERBOSE",
)

SAMPLE_BUDGET = [
    {"name": "Excavation", "items": [{"name": "Creusage", "cost": 8000}]},
    {
        "name": "Fondation",
        "items": [
            {"name": "Semelle de fondation", "cost": 5200},
            {"name": "Drain français", "cost": 2400, "quantity": "60", "unit": "pi lin."},
            {"name": "Béton 25 MPa murs", "cost": 14000},
            {"name": "Dalle sous-sol 4 pouces", "cost": 6800},
            {"name": "Remblai", "cost": 1900},
        ],
    },
    {"name": "Coulage de dalle du sous-sol", "items": []},
    {"name": "Plomberie", "items": [{"name": "Robinet cuisine", "cost": 450}]},
]


@pytest.fixture(autouse=True)
def _isolate_chantier_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear `CHANTIER_*` variables so host settings never leak into CLI runs."""

    for name in _CHANTIER_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def budget_path(tmp_path: Path) -> Path:
    """Write the sample budget JSON and return its path."""

    path = tmp_path / "budget.json"
    path.write_text(json.dumps(SAMPLE_BUDGET, ensure_ascii=False), encoding="utf-8")
    return path
