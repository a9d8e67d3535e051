from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from .errors import ConfigError
from .paths import parse_exclusion_patterns
from .threshold import Metric

CONFIG_FILE = "goverreport.yml"
CONFIG_KEYS = ("root", "exclusions", "threshold", "thresholdType")


@dataclass(frozen=True)
class Configuration:
    root: str = ""
    exclusions: tuple[str, ...] = field(default_factory=tuple)
    threshold: float = 0.0
    metric: str = Metric.BLOCK.value


def parse_string_list_field(payload: dict[str, object], key: str) -> list[str]:
    """Read an optional string-list field from YAML object with strict type checks."""
    value = payload.get(key, [])
    if value is None:
        return []
    if not isinstance(value, list) or any(not isinstance(item, str) for item in value):
        raise ConfigError(f"YAML field '{key}' must be a string array")
    return value


def parse_threshold_field(payload: dict[str, object]) -> float:
    value = payload.get("threshold")
    if value is None:
        return 0.0
    # bool is an int subclass, reject it explicitly.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError("YAML field 'threshold' must be a number")
    return float(value)


def load_yaml(yaml_path: Path) -> object:
    """Load configuration payload from YAML text; None when the file is absent."""
    try:
        raw_text = yaml_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except OSError as exc:
        raise ConfigError(f"Failed to read config file {yaml_path}: {exc}") from exc

    try:
        return yaml.safe_load(raw_text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {yaml_path}: {exc}") from exc


def parse_configuration(payload: object) -> Configuration:
    if payload is None:
        return Configuration()
    if not isinstance(payload, dict):
        raise ConfigError("Configuration must be an object with keys: " + ", ".join(CONFIG_KEYS))

    unknown_keys = sorted(str(key) for key in payload if key not in CONFIG_KEYS)
    if unknown_keys:
        raise ConfigError("Unsupported key(s) in configuration: " + ", ".join(unknown_keys))

    root = payload.get("root")
    if root is None:
        root = ""
    if not isinstance(root, str):
        raise ConfigError("YAML field 'root' must be a string")

    metric = payload.get("thresholdType")
    if metric is None:
        metric = Metric.BLOCK.value
    if not isinstance(metric, str):
        raise ConfigError("YAML field 'thresholdType' must be a string")

    return Configuration(
        root=root,
        exclusions=tuple(parse_exclusion_patterns(parse_string_list_field(payload, "exclusions"))),
        threshold=parse_threshold_field(payload),
        metric=metric,
    )


def load_config(config_path: Path) -> Configuration:
    """Load goverreport.yml; a missing file yields the default configuration."""
    return parse_configuration(load_yaml(config_path))
