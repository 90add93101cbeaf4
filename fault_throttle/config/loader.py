from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .settings import Settings

CONFIG_ENV_VAR = "FAULT_THROTTLE_CONFIG"


@dataclass(frozen=True)
class LoadedSettings:
    settings: Settings
    config_path: Path | None


def merge_overrides(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively overlay `override` on `base`; nested tables merge, scalars replace."""
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(value, dict) and isinstance(current, dict):
            merged[key] = merge_overrides(current, value)
        else:
            merged[key] = value
    return merged


def resolve_config_path(project_root: Path, explicit: Path | None) -> Path | None:
    """Pick the YAML file to load.

    Priority:
    1) explicit path (CLI)
    2) $FAULT_THROTTLE_CONFIG
    3) ./config.yaml, then ./config/config.yaml under project_root
    """

    if explicit is not None:
        return explicit.expanduser()

    from_env = os.environ.get(CONFIG_ENV_VAR)
    if from_env:
        return Path(from_env).expanduser()

    for candidate in (project_root / "config.yaml", project_root / "config" / "config.yaml"):
        if candidate.is_file():
            return candidate
    return None


def _read_yaml(path: Path) -> dict[str, Any]:
    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ValueError(f"{path}: top-level YAML must be a mapping, got {type(raw).__name__}")
    return raw


def load_settings(
    *,
    project_root: Path,
    config_path: Path | None = None,
    cli_overrides: dict[str, Any] | None = None,
) -> LoadedSettings:
    resolved = resolve_config_path(project_root, config_path)
    if resolved is not None and not resolved.is_file():
        raise FileNotFoundError(f"config file not found: {resolved}")

    file_data = _read_yaml(resolved) if resolved is not None else {}
    settings = Settings.model_validate(merge_overrides(file_data, cli_overrides or {}))
    return LoadedSettings(settings=settings, config_path=resolved)
