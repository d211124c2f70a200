from __future__ import annotations

import hashlib
import json
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Set, Tuple

import yaml

ENV_PREFIX = "BINGO_SIM_"

PATH_KEYS = ("boards", "draws", "log_file", "out_report")

DEFAULTS: Dict[str, Any] = {
    "boards": "input_data.txt",
    "draws": None,
    "winner": "last",
    "log_level": "INFO",
    "log_file": None,
    "out_report": None,
}


def _read_config_file(config_path: Path | None) -> Dict[str, Any]:
    if not config_path:
        return {}
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    suffix = config_path.suffix.lower()
    text = config_path.read_text(encoding="utf-8")
    if suffix in (".yaml", ".yml"):
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {config_path}: {exc}") from None
        if not isinstance(data, dict):
            raise ValueError("Top-level YAML config must be a mapping")
        return data
    if suffix == ".json":
        data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError("Top-level JSON config must be a mapping")
        return data
    raise ValueError(f"Unsupported config extension: {suffix}")


def _collect_env_vars(env: Mapping[str, str]) -> Dict[str, Any]:
    """Map BINGO_SIM_* variables to config keys; anything else is ignored."""
    result: Dict[str, Any] = {}
    for key in DEFAULTS:
        env_key = f"{ENV_PREFIX}{key.upper()}"
        if env_key in env:
            result[key] = env[env_key]
    return result


def _apply_overrides(base: Dict[str, Any], overrides: Mapping[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in overrides.items():
        if value is None:
            continue
        merged[key] = value
    return merged


def canonical_json_dumps(data: Any) -> str:
    return json.dumps(data, ensure_ascii=True, sort_keys=True, separators=(",", ":"))


def compute_params_hash(resolved: Mapping[str, Any]) -> str:
    contract = {key: resolved.get(key) for key in ("boards", "draws", "winner")}
    digest = hashlib.sha256(canonical_json_dumps(contract).encode("utf-8")).hexdigest()
    return f"sha256:{digest}"


def resolve_paths(
    resolved: Dict[str, Any],
    config_file: Path | None,
    file_keys: Set[str],
) -> Dict[str, Any]:
    """Make path values absolute.

    - Paths from the config file resolve against the config directory
    - Paths from CLI, ENV or defaults resolve against CWD
    """
    cwd = Path.cwd()
    cfg_dir = config_file.parent if config_file else None
    result = dict(resolved)
    for key in PATH_KEYS:
        value = resolved.get(key)
        if value is None or value == "":
            result[key] = None
            continue
        p = Path(str(value))
        if p.is_absolute():
            result[key] = str(p)
            continue
        base = cfg_dir if (key in file_keys and cfg_dir is not None) else cwd
        result[key] = str((base / p).resolve())
    return result


def resolve_parameters(
    *,
    config_path_str: str | None,
    cli_overrides: Mapping[str, Any],
    env: Mapping[str, str] | None = None,
) -> Tuple[Dict[str, Any], str, Path | None]:
    """Resolve parameters with precedence CLI > ENV > config > defaults.

    Returns (resolved_params, params_hash, config_path)
    """
    config_path = Path(config_path_str).resolve() if config_path_str else None
    file_cfg = _read_config_file(config_path)
    env_map = _collect_env_vars(os.environ if env is None else env)

    # keys whose final value came from the config file
    file_keys = set(file_cfg) - set(env_map) - {k for k, v in cli_overrides.items() if v is not None}

    merged = _apply_overrides(DEFAULTS, file_cfg)
    merged = _apply_overrides(merged, env_map)
    merged = _apply_overrides(merged, cli_overrides)

    merged = resolve_paths(merged, config_path, file_keys)

    params_hash = compute_params_hash(merged)
    return merged, params_hash, config_path
