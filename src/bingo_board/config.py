from __future__ import annotations

import hashlib
import json
import os
from pathlib import Path
from typing import Any, Dict, List, Mapping, Tuple

try:
    import yaml  # type: ignore
except ImportError:  # pragma: no cover - loader fallback
    yaml = None


ENV_PREFIX = "BINGO_BOARD_"


def _read_config_file(config_path: Path | None) -> Dict[str, Any]:
    if not config_path:
        return {}
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    suffix = config_path.suffix.lower()
    text = config_path.read_text(encoding="utf-8")
    if suffix in (".yaml", ".yml"):
        if yaml is None:
            raise RuntimeError("PyYAML is required to read YAML config files")
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


def _parse_list(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def _collect_env_vars(env: Mapping[str, str]) -> Dict[str, Any]:
    """Map ENV variables with BINGO_BOARD_ prefix to config keys."""
    mapping: Dict[str, str] = {
        f"{ENV_PREFIX}LABELS": "labels",
        f"{ENV_PREFIX}LABELS_FILE": "labels_file",
        f"{ENV_PREFIX}FREE_INDEX": "free_index",
        f"{ENV_PREFIX}SIZE": "size",
        f"{ENV_PREFIX}FREE_CELL": "free_cell",
        f"{ENV_PREFIX}SEED_VALUE": "seed.value",
        f"{ENV_PREFIX}SEED_ENGINE": "seed.engine",
        f"{ENV_PREFIX}COLORS": "colors",
        f"{ENV_PREFIX}LOG_LEVEL": "log_level",
        f"{ENV_PREFIX}LOG_FILE": "log_file",
    }

    result: Dict[str, Any] = {}
    for env_key, cfg_key in mapping.items():
        if env_key not in env:
            continue
        raw = env[env_key]
        if cfg_key in {"size", "free_index", "seed.value"}:
            try:
                result[cfg_key] = int(raw)
            except ValueError:
                result[cfg_key] = raw
        elif cfg_key == "labels":
            result[cfg_key] = _parse_list(raw)
        else:
            result[cfg_key] = raw

    return result


def _set_nested(config: Dict[str, Any], dotted_key: str, value: Any) -> None:
    parts = dotted_key.split(".")
    cursor = config
    for part in parts[:-1]:
        if part not in cursor or not isinstance(cursor[part], dict):
            cursor[part] = {}
        cursor = cursor[part]
    cursor[parts[-1]] = value


def _apply_overrides(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    merged: Dict[str, Any] = json.loads(json.dumps(base))  # deep copy via JSON
    for key, value in overrides.items():
        if "." in key:
            _set_nested(merged, key, value)
        elif isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = {**merged[key], **value}
        else:
            merged[key] = value
    return merged


def canonical_json_dumps(data: Any) -> str:
    return json.dumps(data, ensure_ascii=True, sort_keys=True, separators=(",", ":"))


def compute_params_hash(resolved: Mapping[str, Any]) -> str:
    """Hash the keys that shape a board; logging and output options are left out."""
    include = {"labels", "free_index", "size", "free_cell", "seed.engine", "seed.value"}

    def extract(path: str, source: Mapping[str, Any]) -> Any:
        cur: Any = source
        for part in path.split("."):
            if not isinstance(cur, Mapping) or part not in cur:
                return None
            cur = cur[part]
        return cur

    contract: Dict[str, Any] = {}
    for item in include:
        value = extract(item, resolved)
        if value is not None:
            contract[item] = value

    digest = hashlib.sha256(canonical_json_dumps(contract).encode("utf-8")).hexdigest()
    return f"sha256:{digest}"


def read_labels_file(path: Path) -> List[str]:
    """One label per line; blank lines are skipped."""
    lines = path.read_text(encoding="utf-8").splitlines()
    return [line.strip() for line in lines if line.strip()]


def _load_labels_file(layer: Dict[str, Any], base: Path) -> Dict[str, Any]:
    """Read a layer's ``labels_file`` into its ``labels``.

    Explicit ``labels`` in the same layer win over the file.
    """
    path_value = layer.get("labels_file")
    if not path_value or "labels" in layer:
        return layer
    p = Path(str(path_value))
    if not p.is_absolute():
        p = base / p
    return {**layer, "labels": read_labels_file(p.resolve())}


def coerce_labels(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return _parse_list(value)
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value]
    raise ValueError(f"labels must be a list or a comma-separated string, got {type(value).__name__}")


def resolve_paths(
    resolved: Dict[str, Any],
    config_file: Path | None,
    cli_overrides: Dict[str, Any],
) -> Dict[str, Any]:
    """Normalize paths per policy.

    - Paths from config file: resolve relative to config directory
    - Paths from CLI: resolve relative to CWD
    """
    cwd = Path.cwd()
    cfg_dir = config_file.parent if config_file else None

    def normalize(path_value: str | None, is_cli: bool) -> str | None:
        if path_value is None or path_value == "":
            return None
        p = Path(path_value)
        if p.is_absolute():
            return str(p)
        base = cwd if is_cli else (cfg_dir or cwd)
        return str((base / p).resolve())

    result = dict(resolved)
    for key in ("labels_file", "log_file"):
        value = resolved.get(key)
        if value is None:
            continue
        result[key] = normalize(str(value), key in cli_overrides)

    return result


def resolve_parameters(
    *,
    config_path_str: str | None,
    cli_overrides: Dict[str, Any],
    env: Mapping[str, str] | None = None,
) -> Tuple[Dict[str, Any], str, Path | None]:
    """Resolve parameters with precedence CLI > ENV > config > defaults.

    Each source's ``labels_file`` is read into that source's ``labels`` before
    merging, so a file only wins over labels from lower-precedence sources.

    Returns (resolved_params, params_hash, config_path)
    """
    config_path = Path(config_path_str).resolve() if config_path_str else None
    file_cfg = _read_config_file(config_path) if config_path else {}
    env_map = _collect_env_vars(os.environ if env is None else env)

    defaults: Dict[str, Any] = {
        "labels": [],
        "free_index": None,
        "size": 5,
        "free_cell": "center",
        "seed": {"engine": "py_random", "value": None},
        "colors": "auto",
        "log_level": "INFO",
    }

    cwd = Path.cwd()
    cfg_base = config_path.parent if config_path else cwd
    file_cfg = _load_labels_file(file_cfg, cfg_base)
    env_map = _load_labels_file(env_map, cfg_base)
    cli_overrides = _load_labels_file(cli_overrides, cwd)

    # Merge: config > defaults, then ENV, then CLI
    merged = _apply_overrides(defaults, file_cfg)
    merged = _apply_overrides(merged, env_map)
    merged = _apply_overrides(merged, cli_overrides)

    merged = resolve_paths(merged, config_path, cli_overrides)

    merged["labels"] = coerce_labels(merged.get("labels"))

    params_hash = compute_params_hash(merged)
    return merged, params_hash, config_path
