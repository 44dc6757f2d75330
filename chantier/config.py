"""Configuration model and loaders for Chantier.

Responsibilities:
- Define display/catalog settings as a typed dataclass.
- Provide loader entry points for YAML- and environment-based configuration.
- Merge CLI overrides on top of loaded values.

Key types:
- `ChantierConfig`: normalized settings for one CLI invocation.
- `ConfigLoader`: static construction helpers for `ChantierConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .parsing import normalize_optional_string, parse_language_code, parse_permissive_boolean

_DEFAULT_LANGUAGE = "fr"
_DEFAULT_FALLBACK_LANGUAGE = "fr"


@dataclass(frozen=True, slots=True)
class ChantierConfig:
    """Settings for catalog loading and display language.

    Attributes:
        language: Display language code (`fr` or `en`).
        fallback_language: Language consulted when the display language misses a key.
        locales_dir: Optional directory of `<lang>.json` resources; packaged
            locales are used when unset.
        steps_catalog: Optional construction steps JSON; the packaged catalog
            is used when unset.
        verbose: Whether fallback lookups are logged at debug level.
    """

    language: str = _DEFAULT_LANGUAGE
    fallback_language: str = _DEFAULT_FALLBACK_LANGUAGE
    locales_dir: Path | None = None
    steps_catalog: Path | None = None
    verbose: bool = False

    def validate(self) -> None:
        """Validate settings before catalogs are loaded."""

        parse_language_code(self.language, "language")
        parse_language_code(self.fallback_language, "fallback_language")
        if self.locales_dir is not None and not isinstance(self.locales_dir, Path):
            raise ValueError("`locales_dir` must be a filesystem path.")
        if self.steps_catalog is not None and not isinstance(self.steps_catalog, Path):
            raise ValueError("`steps_catalog` must be a filesystem path.")

    def with_overrides(
        self,
        *,
        language: str | None = None,
        locales_dir: Path | None = None,
        steps_catalog: Path | None = None,
        verbose: bool | None = None,
    ) -> ChantierConfig:
        """Return a validated copy with explicit CLI values taking precedence."""

        updated = replace(
            self,
            language=parse_language_code(language, "language")
            if language is not None
            else self.language,
            locales_dir=locales_dir if locales_dir is not None else self.locales_dir,
            steps_catalog=steps_catalog if steps_catalog is not None else self.steps_catalog,
            verbose=verbose if verbose is not None else self.verbose,
        )
        updated.validate()
        return updated


class ConfigLoader:
    """Factory methods for creating `ChantierConfig` from external sources."""

    _SUPPORTED_YAML_KEYS = frozenset(
        {"language", "fallback_language", "locales_dir", "steps_catalog", "verbose"}
    )

    @staticmethod
    def from_yaml(path: Path, env: Mapping[str, str] | None = None) -> ChantierConfig:
        """Create a validated config from a YAML file over environment defaults.

        Relative paths in the file resolve against the file's directory.
        """

        payload = yaml.safe_load(path.read_text(encoding="utf-8"))
        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")

        source_label = f"YAML `{path}`"
        unknown = sorted(set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS))
        if unknown:
            raise ValueError(f"{source_label} includes unsupported key(s): {', '.join(unknown)}.")

        base = ConfigLoader.from_env(env)
        base_dir = path.parent
        language = ConfigLoader._optional_language(payload, "language", source_label)
        fallback_language = ConfigLoader._optional_language(
            payload, "fallback_language", source_label
        )
        locales_dir = ConfigLoader._optional_path(payload, "locales_dir", base_dir)
        steps_catalog = ConfigLoader._optional_path(payload, "steps_catalog", base_dir)
        verbose = ConfigLoader._optional_boolean(payload, "verbose", source_label)

        config = ChantierConfig(
            language=language or base.language,
            fallback_language=fallback_language or base.fallback_language,
            locales_dir=locales_dir or base.locales_dir,
            steps_catalog=steps_catalog or base.steps_catalog,
            verbose=base.verbose if verbose is None else verbose,
        )
        config.validate()
        return config

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> ChantierConfig:
        """Create a validated config from `CHANTIER_*` environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env

        language = ConfigLoader._optional_env_string(env_map, "CHANTIER_LANGUAGE")
        fallback_language = ConfigLoader._optional_env_string(
            env_map, "CHANTIER_FALLBACK_LANGUAGE"
        )
        locales_dir = ConfigLoader._optional_env_string(env_map, "CHANTIER_LOCALES_DIR")
        steps_catalog = ConfigLoader._optional_env_string(env_map, "CHANTIER_STEPS_CATALOG")
        verbose = ConfigLoader._optional_env_boolean(env_map, "CHANTIER_VERBOSE")

        config = ChantierConfig(
            language=parse_language_code(language, "CHANTIER_LANGUAGE")
            if language is not None
            else _DEFAULT_LANGUAGE,
            fallback_language=parse_language_code(
                fallback_language, "CHANTIER_FALLBACK_LANGUAGE"
            )
            if fallback_language is not None
            else _DEFAULT_FALLBACK_LANGUAGE,
            locales_dir=Path(locales_dir) if locales_dir is not None else None,
            steps_catalog=Path(steps_catalog) if steps_catalog is not None else None,
            verbose=bool(verbose),
        )
        config.validate()
        return config

    @staticmethod
    def _optional_language(
        payload: Mapping[str, Any], key: str, source_label: str
    ) -> str | None:
        """Read an optional language code field."""

        value = normalize_optional_string(payload.get(key))
        if value is None:
            return None
        try:
            return parse_language_code(value, key)
        except ValueError as exc:
            raise ValueError(f"{source_label}: {exc}") from exc

    @staticmethod
    def _optional_path(payload: Mapping[str, Any], key: str, base_dir: Path) -> Path | None:
        """Read an optional path field, resolving relative paths against `base_dir`."""

        value = normalize_optional_string(payload.get(key))
        if value is None:
            return None
        candidate = Path(value)
        return candidate if candidate.is_absolute() else base_dir / candidate

    @staticmethod
    def _optional_env_string(env: Mapping[str, str], key: str) -> str | None:
        """Read and normalize optional string environment variable values."""

        if key not in env:
            return None
        return normalize_optional_string(env.get(key))

    @staticmethod
    def _optional_boolean(
        payload: Mapping[str, Any], key: str, source_label: str
    ) -> bool | None:
        """Read an optional boolean field from a payload."""

        if key not in payload or payload[key] is None:
            return None
        parsed = parse_permissive_boolean(payload[key])
        if parsed is None:
            raise ValueError(
                f"{source_label} field `{key}` must be a boolean value "
                "(`true`/`false`, `1`/`0`, `yes`/`no`)."
            )
        return parsed

    @staticmethod
    def _optional_env_boolean(env: Mapping[str, str], key: str) -> bool | None:
        """Read an optional boolean from environment mapping."""

        raw_value = ConfigLoader._optional_env_string(env, key)
        if raw_value is None:
            return None
        parsed = parse_permissive_boolean(raw_value)
        if parsed is None:
            raise ValueError(
                f"Environment variable `{key}` must be a boolean value "
                "(`true`/`false`, `1`/`0`, `yes`/`no`)."
            )
        return parsed
