"""Layered settings: CLI options, ADVENT_SOLVERS_* variables, a YAML/JSON file, defaults."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Tuple

import yaml

from .input_reader import STDIN_MARKER

ENV_PREFIX = "ADVENT_SOLVERS_"

PATH_KEYS = ("input", "log_file", "out_report")


def _read_config_file(config_path: Path | None) -> Dict[str, Any]:
    if not config_path:
        return {}
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    suffix = config_path.suffix.lower()
    text = config_path.read_text(encoding="utf-8")
    if suffix in (".yaml", ".yml"):
        data = yaml.safe_load(text) or {}
        if not isinstance(data, dict):
            raise ValueError("Top-level YAML config must be a mapping")
        return data
    if suffix == ".json":
        data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError("Top-level JSON config must be a mapping")
        return data
    raise ValueError(f"Unsupported config extension: {suffix}")


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _collect_env_vars(env: Mapping[str, str]) -> Dict[str, Any]:
    """Map ENV variables with ADVENT_SOLVERS_ prefix to config keys.

    Keys not present in the map are ignored.
    """
    mapping: Dict[str, str] = {
        f"{ENV_PREFIX}INPUT": "input",
        f"{ENV_PREFIX}OUTPUT_FORMAT": "output_format",
        f"{ENV_PREFIX}OUT_REPORT": "out_report",
        f"{ENV_PREFIX}FORCE": "force",
        f"{ENV_PREFIX}LOG_LEVEL": "log_level",
        f"{ENV_PREFIX}LOG_FORMAT": "log_format",
        f"{ENV_PREFIX}LOG_FILE": "log_file",
    }

    result: Dict[str, Any] = {}
    for env_key, cfg_key in mapping.items():
        if env_key not in env:
            continue
        raw = env[env_key]
        if cfg_key == "force":
            result[cfg_key] = _parse_bool(raw)
        else:
            result[cfg_key] = raw
    return result


def _apply_overrides(base: Dict[str, Any], overrides: Mapping[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in overrides.items():
        merged[key] = value
    return merged


def resolve_paths(
    resolved: Dict[str, Any],
    config_file: Path | None,
    from_config: set[str],
) -> Dict[str, Any]:
    """Normalize paths per policy.

    - Paths from config file: resolve relative to config directory
    - Paths from CLI or ENV: resolve relative to CWD
    - ``input`` of ``-`` stays as is and means stdin
    """
    cwd = Path.cwd()
    cfg_dir = config_file.parent if config_file else None

    def normalize(path_value: str, in_config: bool) -> str | None:
        if path_value == "":
            return None
        if path_value == STDIN_MARKER:
            return path_value
        p = Path(path_value)
        if p.is_absolute():
            return str(p)
        base = (cfg_dir or cwd) if in_config else cwd
        return str((base / p).resolve())

    result = dict(resolved)
    for key in PATH_KEYS:
        value = resolved.get(key)
        if value is None:
            continue
        result[key] = normalize(str(value), key in from_config)
    return result


def resolve_parameters(
    *,
    config_path_str: str | None,
    cli_overrides: Dict[str, Any],
    env: Mapping[str, str] | None = None,
) -> Tuple[Dict[str, Any], Path | None]:
    """Resolve parameters with precedence CLI > ENV > config > defaults.

    Returns (resolved_params, config_path)
    """
    config_path = Path(config_path_str).resolve() if config_path_str else None
    file_cfg = _read_config_file(config_path) if config_path else {}
    env_map = _collect_env_vars(os.environ if env is None else env)

    defaults: Dict[str, Any] = {
        "input": None,
        "output_format": "text",
        "out_report": None,
        "force": False,
        "log_level": "WARNING",
        "log_format": "text",
        "log_file": None,
    }

    merged = _apply_overrides(defaults, file_cfg)
    merged = _apply_overrides(merged, env_map)
    merged = _apply_overrides(merged, cli_overrides)
    if isinstance(merged.get("force"), str):
        merged["force"] = _parse_bool(merged["force"])

    # Paths keep the config file directory as base only when the file supplied the final value
    from_config = {
        key
        for key in PATH_KEYS
        if key in file_cfg and key not in env_map and key not in cli_overrides
    }
    merged = resolve_paths(merged, config_path, from_config)
    return merged, config_path
