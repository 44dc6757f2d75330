"""Construction-guide steps catalog loader.

Responsibilities:
- Parse steps JSON (`[{id, phase, title, tasks: [{id, title}]}]`) into typed records.
- Cache parsed catalogs per resolved path for the lifetime of the process.
"""

from __future__ import annotations

import json
import threading
from pathlib import Path
from typing import Any

from ..errors import CatalogLoadError
from ..models.datatypes import ConstructionStep, ConstructionTask

DATA_DIR = Path(__file__).resolve().parent.parent / "data"
DEFAULT_STEPS_PATH = DATA_DIR / "construction_steps.json"

_STEPS_CACHE: dict[Path, tuple[ConstructionStep, ...]] = {}
_STEPS_LOCK = threading.Lock()


def load_steps(path: Path | None = None) -> tuple[ConstructionStep, ...]:
    """Return the steps catalog at `path`, or the packaged catalog when omitted."""

    resolved = (path or DEFAULT_STEPS_PATH).resolve()
    with _STEPS_LOCK:
        cached = _STEPS_CACHE.get(resolved)
        if cached is None:
            cached = _read_steps_from_disk(resolved)
            _STEPS_CACHE[resolved] = cached
    return cached


def reload_steps(path: Path | None = None) -> tuple[ConstructionStep, ...]:
    """Force cache invalidation for all paths and re-read the requested catalog."""

    with _STEPS_LOCK:
        _STEPS_CACHE.clear()
    return load_steps(path)


def steps_from_payload(payload: Any, source: object = "<payload>") -> tuple[ConstructionStep, ...]:
    """Validate a decoded JSON payload and build immutable step records."""

    if not isinstance(payload, list):
        raise CatalogLoadError(source, "steps catalog must be a JSON array.")

    steps: list[ConstructionStep] = []
    for position, raw_step in enumerate(payload):
        if not isinstance(raw_step, dict):
            raise CatalogLoadError(source, f"step #{position} must be an object.")
        step_id = _required_text(raw_step, "id", source, f"step #{position}")
        raw_tasks = raw_step.get("tasks", [])
        if not isinstance(raw_tasks, list):
            raise CatalogLoadError(source, f"step `{step_id}` field `tasks` must be an array.")

        tasks = []
        for task_position, raw_task in enumerate(raw_tasks):
            label = f"step `{step_id}` task #{task_position}"
            if not isinstance(raw_task, dict):
                raise CatalogLoadError(source, f"{label} must be an object.")
            tasks.append(
                ConstructionTask(
                    id=_required_text(raw_task, "id", source, label),
                    title=_required_text(raw_task, "title", source, label),
                )
            )

        steps.append(
            ConstructionStep(
                id=step_id,
                phase=_required_text(raw_step, "phase", source, f"step `{step_id}`"),
                title=_required_text(raw_step, "title", source, f"step `{step_id}`"),
                tasks=tuple(tasks),
            )
        )
    return tuple(steps)


def _read_steps_from_disk(path: Path) -> tuple[ConstructionStep, ...]:
    """Read and validate one steps catalog file."""

    try:
        raw_text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise CatalogLoadError(path, f"cannot read steps catalog ({exc.strerror}).") from exc
    try:
        payload = json.loads(raw_text)
    except json.JSONDecodeError as exc:
        raise CatalogLoadError(path, f"invalid JSON at line {exc.lineno}.") from exc
    return steps_from_payload(payload, source=path)


def _required_text(record: dict[str, Any], key: str, source: object, label: str) -> str:
    """Return a non-empty string field or raise a descriptive load error."""

    value = record.get(key)
    if not isinstance(value, str) or not value.strip():
        raise CatalogLoadError(source, f"{label} requires non-empty string `{key}`.")
    return value
