"""Command-line interface for Chantier.

Responsibilities:
- Expose label resolution, task-title display, budget reclassification, task
  grouping, and analysis-message translation as user-facing commands.
- Convert CLI arguments and config files into `ChantierConfig` and catalogs.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Sequence

import typer

from .budget.reroute import (
    BASEMENT_SLAB,
    EXCAVATION,
    count_moved_items,
    reroute_foundation_items,
)
from .budget.task_grouping import group_items_by_task
from .catalog.steps import load_steps
from .cli_rendering import (
    echo_features,
    echo_moved_counts,
    echo_task_group,
    exit_with_command_error,
    format_currency,
)
from .config import ChantierConfig, ConfigLoader
from .errors import BudgetFileError, CatalogLoadError, CommandStageError
from .i18n.catalog import TranslationCatalog, load_default_catalog
from .i18n.item_names import translate_budget_item_name
from .i18n.labels import (
    get_category_label,
    get_plan_tier_key,
    get_translated_plan_description,
    get_translated_plan_features,
    get_translated_plan_name,
    get_translated_step_name,
    get_translated_trade_name,
)
from .i18n.task_titles import TaskIdIndex, default_task_index, translate_budget_task_title
from .i18n.warnings import translate_recommendations, translate_warnings
from .io.budget_json import categories_to_payload, dump_categories, load_categories
from .models.datatypes import BudgetCategory
from .telemetry.logger import RunLogger

app = typer.Typer(
    name="chantier",
    no_args_is_help=True,
    help="Chantier CLI: localized labels and budget reclassification.",
)

_LABEL_KINDS = ("category", "trade", "step", "plan")

LanguageOption = Annotated[
    str | None,
    typer.Option("--lang", help="Display language (`fr` or `en`); overrides config."),
]
ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="Path to YAML config file with command defaults."),
]
LocalesDirOption = Annotated[
    Path | None,
    typer.Option("--locales-dir", help="Directory holding `<lang>.json` catalogs."),
]
StepsOption = Annotated[
    Path | None,
    typer.Option("--steps", help="Construction steps catalog JSON (defaults to packaged)."),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", help="Log fallback lookups at debug level."),
]


def _resolve_config(
    config_file: Path | None,
    language: str | None,
    locales_dir: Path | None = None,
    steps_catalog: Path | None = None,
    verbose: bool = False,
) -> ChantierConfig:
    """Resolve effective config from YAML/env defaults and explicit CLI overrides."""

    try:
        base = ConfigLoader.from_env() if config_file is None else ConfigLoader.from_yaml(config_file)
        return base.with_overrides(
            language=language,
            locales_dir=locales_dir,
            steps_catalog=steps_catalog,
            verbose=True if verbose else None,
        )
    except FileNotFoundError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Config file not found: `{config_file}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Invalid configuration: {exc}",
            hint="Supported languages are `fr` and `en`.",
        ) from exc
    except Exception as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Failed to load config file `{config_file}`: {exc}",
            hint="Verify YAML syntax and file permissions.",
        ) from exc


def _load_catalog(config: ChantierConfig) -> TranslationCatalog:
    """Load the translation catalog for the configured language."""

    try:
        return load_default_catalog(
            language=config.language,
            fallback_language=config.fallback_language,
            locales_dir=config.locales_dir,
        )
    except CatalogLoadError as exc:
        raise CommandStageError(
            stage="catalog",
            detail=f"Failed to load translation catalog: {exc}",
            hint="Point `--locales-dir` at a directory with `fr.json`/`en.json`.",
        ) from exc


def _task_index(config: ChantierConfig) -> TaskIdIndex:
    """Return a built task index for the configured steps catalog."""

    if config.steps_catalog is None:
        index = default_task_index()
    else:
        steps_path = config.steps_catalog
        index = TaskIdIndex(lambda: load_steps(steps_path))
    try:
        index.build()
    except CatalogLoadError as exc:
        raise CommandStageError(
            stage="steps",
            detail=f"Failed to load construction steps: {exc}",
            hint="Check the `--steps` JSON against the `[{id, phase, title, tasks}]` layout.",
        ) from exc
    return index


def _load_budget(budget_file: Path) -> list[BudgetCategory]:
    """Read a budget JSON file and map failures to stage errors."""

    try:
        return load_categories(budget_file)
    except FileNotFoundError as exc:
        raise CommandStageError(
            stage="budget",
            detail=f"Budget file not found: `{budget_file}`.",
            hint="Pass a JSON file holding a list of `{name, items}` categories.",
        ) from exc
    except BudgetFileError as exc:
        raise CommandStageError(
            stage="budget",
            detail=str(exc),
            hint="Each item needs `name` and numeric `cost`; `quantity`/`unit` are optional.",
        ) from exc


def _run_logger(config: ChantierConfig) -> RunLogger:
    return RunLogger(level="DEBUG" if config.verbose else "INFO")


@app.command("label")
def label_command(
    kind: Annotated[str, typer.Argument(help="One of `category`, `trade`, `step`, `plan`.")],
    name: Annotated[str, typer.Argument(help="Canonical (French) name or internal id.")],
    fallback: Annotated[
        str | None,
        typer.Option("--fallback", help="Fallback label for steps without a translation."),
    ] = None,
    language: LanguageOption = None,
    config_file: ConfigOption = None,
    locales_dir: LocalesDirOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Print the display label of a canonical name."""

    try:
        if kind not in _LABEL_KINDS:
            raise CommandStageError(
                stage="arguments",
                detail=f"Unknown label kind `{kind}`.",
                hint=f"Use one of: {', '.join(_LABEL_KINDS)}.",
            )
        config = _resolve_config(
            config_file, language, locales_dir=locales_dir, verbose=verbose
        )
        logger = _run_logger(config)
        t = _load_catalog(config)
        if kind == "category":
            label = get_category_label(t, name)
        elif kind == "trade":
            label = get_translated_trade_name(t, name)
        elif kind == "step":
            label = get_translated_step_name(t, name, fallback)
        else:
            label = get_translated_plan_name(t, name)
        if label == name:
            logger.log_stage_fallback("label", kind=kind, language=config.language)
    except Exception as exc:
        exit_with_command_error("label", exc)

    typer.echo(label)


@app.command("plan")
def plan_command(
    name: Annotated[str, typer.Argument(help="Plan name as stored (e.g. `Essentiel`).")],
    description: Annotated[
        str | None,
        typer.Option("--description", help="Stored description used when untranslated."),
    ] = None,
    features: Annotated[
        list[str] | None,
        typer.Option("--feature", help="Stored feature (repeatable) used when untranslated."),
    ] = None,
    language: LanguageOption = None,
    config_file: ConfigOption = None,
    locales_dir: LocalesDirOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Print the translated name, description, and features of a plan tier."""

    try:
        config = _resolve_config(
            config_file, language, locales_dir=locales_dir, verbose=verbose
        )
        logger = _run_logger(config)
        t = _load_catalog(config)
        if get_plan_tier_key(name) is None:
            logger.log_stage_fallback("plan", language=config.language)
        plan_name = get_translated_plan_name(t, name)
        plan_description = get_translated_plan_description(t, name, description)
        plan_features = get_translated_plan_features(t, name, features or [])
    except Exception as exc:
        exit_with_command_error("plan", exc)

    typer.echo(plan_name)
    if plan_description:
        typer.echo(plan_description)
    echo_features(plan_features)


@app.command("task-title")
def task_title_command(
    category: Annotated[str, typer.Argument(help="Canonical budget category name.")],
    title: Annotated[str, typer.Argument(help="Stored (French) task title.")],
    language: LanguageOption = None,
    config_file: ConfigOption = None,
    locales_dir: LocalesDirOption = None,
    steps_catalog: StepsOption = None,
) -> None:
    """Print the display title of a budget task group."""

    try:
        config = _resolve_config(
            config_file, language, locales_dir=locales_dir, steps_catalog=steps_catalog
        )
        t = _load_catalog(config)
        index = _task_index(config)
        display_title = translate_budget_task_title(t, category, title, index=index)
    except Exception as exc:
        exit_with_command_error("task-title", exc)

    typer.echo(display_title)


@app.command("reroute")
def reroute_command(
    budget_file: Annotated[Path, typer.Argument(help="Budget JSON (list of categories).")],
    out: Annotated[
        Path | None,
        typer.Option("--out", help="Write rerouted budget JSON here instead of stdout."),
    ] = None,
    language: LanguageOption = None,
    config_file: ConfigOption = None,
    locales_dir: LocalesDirOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Move drain/backfill and slab items out of "Fondation"."""

    try:
        config = _resolve_config(
            config_file, language, locales_dir=locales_dir, verbose=verbose
        )
        logger = _run_logger(config)
        logger.log_stage_start("reroute")
        categories = _load_budget(budget_file)
        rerouted = reroute_foundation_items(categories)
        moved = count_moved_items(categories, rerouted)
        logger.log_stage_complete(
            "reroute",
            unchanged=rerouted is categories,
            moved_excavation=moved[EXCAVATION],
            moved_basement_slab=moved[BASEMENT_SLAB],
        )
        t = _load_catalog(config)
        if out is not None:
            dump_categories(rerouted, out)
    except Exception as exc:
        exit_with_command_error("reroute", exc)

    echo_moved_counts(moved, {name: get_category_label(t, name) for name in moved})
    if out is None:
        typer.echo(json.dumps(categories_to_payload(rerouted), ensure_ascii=False, indent=2))
    else:
        typer.echo(f"Budget written: {out}")


@app.command("group")
def group_command(
    budget_file: Annotated[Path, typer.Argument(help="Budget JSON (list of categories).")],
    category: Annotated[str, typer.Argument(help="Canonical category name to display.")],
    reroute: Annotated[
        bool,
        typer.Option("--reroute/--no-reroute", help="Reclassify foundation items first."),
    ] = True,
    language: LanguageOption = None,
    config_file: ConfigOption = None,
    locales_dir: LocalesDirOption = None,
    steps_catalog: StepsOption = None,
) -> None:
    """Print a category's items grouped under translated task titles."""

    try:
        config = _resolve_config(
            config_file, language, locales_dir=locales_dir, steps_catalog=steps_catalog
        )
        t = _load_catalog(config)
        index = _task_index(config)
        categories: Sequence[BudgetCategory] = _load_budget(budget_file)
        if reroute:
            categories = reroute_foundation_items(categories)
        selected = next((entry for entry in categories if entry.name == category), None)
        if selected is None:
            raise CommandStageError(
                stage="budget",
                detail=f"Category `{category}` not found in `{budget_file}`.",
                hint="Category names are the canonical French names stored in the budget.",
            )
        groups = group_items_by_task(selected.name, selected.items)
    except Exception as exc:
        exit_with_command_error("group", exc)

    typer.echo(f"{get_category_label(t, selected.name)}: {format_currency(selected.total_cost)}")
    for task_title, items in groups.items():
        echo_task_group(
            translate_budget_task_title(t, selected.name, task_title, index=index),
            [(translate_budget_item_name(t, item.name), item.cost) for item in items],
        )


@app.command("translate-item")
def translate_item_command(
    name: Annotated[str, typer.Argument(help="Free-form budget item name (French).")],
    language: LanguageOption = None,
    config_file: ConfigOption = None,
    locales_dir: LocalesDirOption = None,
) -> None:
    """Print a budget item name rendered for the display language."""

    try:
        config = _resolve_config(config_file, language, locales_dir=locales_dir)
        t = _load_catalog(config)
        rendered = translate_budget_item_name(t, name)
    except Exception as exc:
        exit_with_command_error("translate-item", exc)

    typer.echo(rendered)


@app.command("translate-warning")
def translate_warning_command(
    messages: Annotated[
        list[str], typer.Argument(help="Budget-analysis warnings (or recommendations).")
    ],
    recommendation: Annotated[
        bool,
        typer.Option(
            "--recommendation",
            help="Treat messages as analysis recommendations instead of warnings.",
        ),
    ] = False,
    language: LanguageOption = None,
    config_file: ConfigOption = None,
    locales_dir: LocalesDirOption = None,
) -> None:
    """Print budget-analysis messages rendered for the display language, one per line."""

    try:
        config = _resolve_config(config_file, language, locales_dir=locales_dir)
        t = _load_catalog(config)
        if recommendation:
            rendered = translate_recommendations(t, messages)
        else:
            rendered = translate_warnings(t, messages)
    except Exception as exc:
        exit_with_command_error("translate-warning", exc)

    for line in rendered:
        typer.echo(line)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
