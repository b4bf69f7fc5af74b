"""Config loading entry points for shacore."""

from __future__ import annotations

import json
import os
import tomllib
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import ValidationError

from .models import ShaCoreConfig

ENV_LOG_LEVEL = "SHACORE_LOG_LEVEL"


class ConfigError(RuntimeError):
    """Raised when configuration files cannot be loaded or validated."""


def load_config(
    path: Path | None = None,
    *,
    overrides: Mapping[str, Any] | None = None,
) -> ShaCoreConfig:
    """Load the configuration: defaults, then ``path``, environment, ``overrides``."""

    merged: dict[str, Any] = ShaCoreConfig().model_dump(mode="json")

    if path:
        merged = _deep_merge(merged, _expect_mapping(_read_structured_file(path), path))

    env_level = os.getenv(ENV_LOG_LEVEL)
    if env_level:
        merged = _deep_merge(merged, {"runtime": {"log_level": env_level.strip().upper()}})

    if overrides:
        merged = _deep_merge(merged, _expand_override_keys(overrides))

    try:
        return ShaCoreConfig.model_validate(merged)
    except ValidationError as exc:
        source = path or "defaults"
        raise ConfigError(f"Invalid configuration from {source}: {exc}") from exc


def dump_example_config(dest: Path) -> None:
    """Write the default configuration to ``dest``."""

    dest.parent.mkdir(parents=True, exist_ok=True)

    defaults = ShaCoreConfig().model_dump(mode="json")
    suffix = dest.suffix.lower()
    if suffix == ".toml":
        raise ConfigError("TOML export is not supported yet; use a YAML destination.")
    if suffix == ".json":
        dest.write_text(json.dumps(defaults, indent=2), encoding="utf-8")
        return
    dest.write_text(
        yaml.safe_dump(defaults, sort_keys=False),
        encoding="utf-8",
    )


def _expect_mapping(payload: Any, source: Path) -> dict[str, Any]:
    if payload is None:
        return {}
    if not isinstance(payload, Mapping):
        raise ConfigError(f"Expected mapping data in {source}, got {type(payload)!r}.")
    return dict(payload)


def _read_structured_file(path: Path) -> Any:
    """Return the parsed contents of a YAML/TOML/JSON file."""

    if not path.exists():
        raise ConfigError(f"Config file {path} does not exist.")

    suffix = path.suffix.lower()

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Could not read {path}: {exc}") from exc

    try:
        if suffix in {".yaml", ".yml"}:
            return yaml.safe_load(text) or {}
        if suffix == ".toml":
            return tomllib.loads(text)
        if suffix == ".json":
            return json.loads(text)
    except (yaml.YAMLError, tomllib.TOMLDecodeError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Could not parse {path}: {exc}") from exc

    raise ConfigError(f"Unsupported config format for {path}")


def _deep_merge(base: Mapping[str, Any], extra: Mapping[str, Any]) -> dict[str, Any]:
    """Recursively merge two mappings returning a new dictionary."""

    result: dict[str, Any] = {key: value for key, value in base.items()}
    for key, value in extra.items():
        if (
            key in result
            and isinstance(result[key], Mapping)
            and isinstance(value, Mapping)
        ):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _expand_override_keys(overrides: Mapping[str, Any]) -> dict[str, Any]:
    """Support dotted-notation overrides like ``runtime.fail_fast``."""

    result: dict[str, Any] = {}
    for key, value in overrides.items():
        result = _deep_merge(result, _expand_single_override(key, value))
    return result


def _expand_single_override(key: Any, value: Any) -> dict[str, Any]:
    if isinstance(key, str) and "." in key:
        parts = key.split(".")
        root: dict[str, Any] = {}
        cursor = root
        for segment in parts[:-1]:
            cursor[segment] = {}
            cursor = cursor[segment]
        cursor[parts[-1]] = value
        return root
    return {key: value}


__all__ = [
    "ConfigError",
    "ENV_LOG_LEVEL",
    "dump_example_config",
    "load_config",
]
