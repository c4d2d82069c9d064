"""Benchmark config file I/O.

Config files are YAML (``.yaml``/``.yml``) or JSON (``.json``) documents
whose top level is a mapping of sections (``benchmark``, ``workload``,
``logging``). Anything else is rejected with ConfigError.
"""

import json
from pathlib import Path
from typing import Any, Union

import yaml

from trialbench.utils.errors import ConfigError

PathLike = Union[str, Path]

YAML_SUFFIXES = (".yaml", ".yml")
JSON_SUFFIXES = (".json",)


def _config_format(path: Path) -> str:
    suffix = path.suffix.lower()
    if suffix in YAML_SUFFIXES:
        return "yaml"
    if suffix in JSON_SUFFIXES:
        return "json"
    raise ConfigError(f"Unsupported config file type: {path}")


def _require_mapping(data: Any, path: Path) -> dict[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"Config file {path} must contain a mapping of sections, got {type(data).__name__}"
        )
    return data


def load_config_file(filepath: PathLike) -> dict[str, Any]:
    """Load a YAML or JSON config file into a dictionary.

    Args:
        filepath: Path to a .yaml/.yml/.json file

    Returns:
        Loaded sections as dict; empty dict if the file is empty

    Raises:
        ConfigError: If the file is missing, unparsable, of an unknown
            type, or its top level is not a mapping
    """
    path = Path(filepath)
    fmt = _config_format(path)
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")
    text = path.read_text(encoding="utf-8")
    try:
        if fmt == "yaml":
            data = yaml.safe_load(text)
        else:
            data = json.loads(text) if text.strip() else None
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Could not parse config file {path}: {exc}") from exc
    return _require_mapping(data, path)


def save_config_file(filepath: PathLike, data: dict[str, Any]) -> None:
    """Write config sections to YAML or JSON, chosen by file suffix."""
    path = Path(filepath)
    fmt = _config_format(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        if fmt == "yaml":
            yaml.safe_dump(data, handle, default_flow_style=False, sort_keys=False)
        else:
            json.dump(data, handle, indent=2)
