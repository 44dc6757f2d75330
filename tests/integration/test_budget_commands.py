"""Reroute and group command integration tests."""

import json
from pathlib import Path

from typer.testing import CliRunner

from chantier.cli import app


def test_reroute_command_writes_rerouted_budget(budget_path: Path, tmp_path: Path) -> None:
    """Reroute should move drain and slab items and report moved counts."""

    out_path = tmp_path / "out" / "rerouted.json"
    runner = CliRunner()
    result = runner.invoke(
        app, ["reroute", str(budget_path), "--out", str(out_path), "--lang", "en"]
    )

    assert result.exit_code == 0, result.output
    assert "Moved to Basement slab pour: 1" in result.output
    assert "Moved to Excavation: 2" in result.output
    assert f"Budget written: {out_path}" in result.output
    assert "[stage] level=INFO stage=reroute event=complete" in result.output

    payload = json.loads(out_path.read_text(encoding="utf-8"))
    by_name = {category["name"]: category for category in payload}
    assert [item["name"] for item in by_name["Excavation"]["items"]] == [
        "Creusage",
        "Drain français",
        "Remblai",
    ]
    assert [item["name"] for item in by_name["Coulage de dalle du sous-sol"]["items"]] == [
        "Dalle sous-sol 4 pouces"
    ]
    assert [item["name"] for item in by_name["Fondation"]["items"]] == [
        "Semelle de fondation",
        "Béton 25 MPa murs",
    ]
    assert by_name["Excavation"]["items"][1] == {
        "name": "Drain français",
        "cost": 2400,
        "quantity": "60",
        "unit": "pi lin.",
    }
    assert sum(item["cost"] for category in payload for item in category["items"]) == 38750
    assert '"cost": 2400,' in out_path.read_text(encoding="utf-8")


def test_reroute_command_prints_json_without_out(budget_path: Path) -> None:
    """Without `--out` the rerouted budget should be printed."""

    runner = CliRunner()
    result = runner.invoke(app, ["reroute", str(budget_path)])

    assert result.exit_code == 0, result.output
    assert "Moved to Excavation: 2" in result.output
    assert '"name": "Drain français"' in result.output


def test_reroute_command_reports_missing_budget(tmp_path: Path) -> None:
    """Missing budget files should fail at the budget stage with a hint."""

    runner = CliRunner()
    result = runner.invoke(app, ["reroute", str(tmp_path / "missing.json")])

    assert result.exit_code == 1
    assert "reroute failed at stage `budget`" in result.output
    assert "Hint: Pass a JSON file" in result.output


def test_reroute_command_reports_invalid_budget(tmp_path: Path) -> None:
    """Structurally invalid budgets should fail at the budget stage."""

    budget_path = tmp_path / "budget.json"
    budget_path.write_text('[{"name": "Fondation", "items": [{"name": "x"}]}]', encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["reroute", str(budget_path)])

    assert result.exit_code == 1
    assert "reroute failed at stage `budget`" in result.output
    assert "must be a number" in result.output


def test_group_command_prints_translated_task_groups(budget_path: Path) -> None:
    """Group should print translated category, task titles, and item names."""

    runner = CliRunner()
    result = runner.invoke(app, ["group", str(budget_path), "Fondation", "--lang", "en"])

    assert result.exit_code == 0, result.output
    assert result.output.strip().splitlines() == [
        "Foundation: 19 200,00 $",
        "Pouring the foundations (19 200,00 $)",
        "  - Footing of foundation: 5 200,00 $",
        "  - Concrete 25 MPa walls: 14 000,00 $",
    ]


def test_group_command_puts_unmatched_items_under_other_items(budget_path: Path) -> None:
    """Rerouted drain items in excavation fall under the other-items bucket."""

    runner = CliRunner()
    result = runner.invoke(app, ["group", str(budget_path), "Excavation", "--lang", "en"])

    assert result.exit_code == 0, result.output
    lines = result.output.strip().splitlines()
    assert lines[0] == "Excavation: 12 300,00 $"
    assert "Digging and excavation (8 000,00 $)" in lines
    assert "Other items (4 300,00 $)" in lines


def test_group_command_without_reroute_keeps_foundation_items(budget_path: Path) -> None:
    """`--no-reroute` should group the budget exactly as stored."""

    runner = CliRunner()
    result = runner.invoke(app, ["group", str(budget_path), "Fondation", "--no-reroute"])

    assert result.exit_code == 0, result.output
    lines = result.output.strip().splitlines()
    assert lines[0] == "Fondation: 30 300,00 $"
    assert "Drain et remblai (4 300,00 $)" in lines


def test_group_command_reports_unknown_category(budget_path: Path) -> None:
    """Unknown categories should fail at the budget stage."""

    runner = CliRunner()
    result = runner.invoke(app, ["group", str(budget_path), "Toiture"])

    assert result.exit_code == 1
    assert "group failed at stage `budget`" in result.output
    assert "Category `Toiture` not found" in result.output
