"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics,
reroute summaries, and grouped budget views.
"""

from __future__ import annotations

from typing import Mapping, NoReturn, Sequence

import typer

from .errors import CommandStageError


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, CommandStageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def format_currency(amount: float) -> str:
    """Format an amount as `30 267,00 $` (space thousands, comma decimals)."""

    grouped = f"{round(amount, 2):,.2f}"
    return grouped.replace(",", " ").replace(".", ",") + " $"


def echo_moved_counts(moved: Mapping[str, int], labels: Mapping[str, str]) -> None:
    """Print how many items each destination category received."""

    for name in sorted(moved):
        typer.echo(f"Moved to {labels.get(name, name)}: {moved[name]}")


def echo_task_group(title: str, rows: Sequence[tuple[str, float]]) -> None:
    """Print one task group with its item rows and subtotal."""

    subtotal = sum(cost for _, cost in rows)
    typer.echo(f"{title} ({format_currency(subtotal)})")
    for name, cost in rows:
        typer.echo(f"  - {name}: {format_currency(cost)}")


def echo_features(features: Sequence[str]) -> None:
    """Print plan features as a bullet list."""

    for feature in features:
        typer.echo(f"- {feature}")
