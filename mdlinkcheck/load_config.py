"""Logic for loading, merging and validating configuration files."""

import copy
import logging
import re
from pathlib import Path
from typing import Any

import yaml

from mdlinkcheck.config_error import ConfigError
from mdlinkcheck.deep_merge import deep_merge
from mdlinkcheck.header_slug import SLUG_STYLES

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".mdlinkcheck.yml"

DEFAULT_CONFIG: dict[str, Any] = {
    "slugger": "github",
    "extensions": [".md", ".markdown"],
    "exclude": [
        ".git/**",
        "node_modules/**",
        ".venv/**",
    ],
    "ignore_patterns": [],
    "anchors": {
        "case_insensitive": True,
    },
    "duplicates": {
        "exact_threshold": 0.98,
        "diverged_threshold": 0.75,
    },
    "jobs": 1,
}


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"Cannot read config {path}: {exc}"
        raise ConfigError(msg) from exc
    except yaml.YAMLError as exc:
        msg = f"Invalid YAML in config {path}: {exc}"
        raise ConfigError(msg) from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        msg = f"Config {path} must be a mapping, got {type(data).__name__}"
        raise ConfigError(msg)
    return data


def _string_list(config: dict[str, Any], key: str) -> None:
    value = config[key]
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        msg = f"'{key}' must be a list of strings"
        raise ConfigError(msg)


def validate_config(config: dict[str, Any]) -> None:
    """Raise ConfigError if any configured value is unusable."""
    unknown = sorted(set(config) - set(DEFAULT_CONFIG))
    if unknown:
        logger.warning("Ignoring unknown config keys: %s", ", ".join(unknown))
    if config["slugger"] not in SLUG_STYLES:
        msg = f"'slugger' must be one of {', '.join(SLUG_STYLES)}"
        raise ConfigError(msg)
    for key in ("extensions", "exclude", "ignore_patterns"):
        _string_list(config, key)
    for pattern in config["ignore_patterns"]:
        try:
            re.compile(pattern)
        except re.error as exc:
            msg = f"Invalid ignore pattern {pattern!r}: {exc}"
            raise ConfigError(msg) from exc

    for section in ("anchors", "duplicates"):
        if not isinstance(config[section], dict):
            msg = f"'{section}' must be a mapping"
            raise ConfigError(msg)
    if not isinstance(config["anchors"].get("case_insensitive"), bool):
        msg = "'anchors.case_insensitive' must be true or false"
        raise ConfigError(msg)

    dup = config["duplicates"]
    exact = dup.get("exact_threshold")
    diverged = dup.get("diverged_threshold")
    for name, value in (("exact_threshold", exact), ("diverged_threshold", diverged)):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            msg = f"'duplicates.{name}' must be a number"
            raise ConfigError(msg)
        if not 0.0 <= value <= 1.0:
            msg = f"'duplicates.{name}' must be between 0 and 1"
            raise ConfigError(msg)
    if diverged > exact:
        msg = "'duplicates.diverged_threshold' cannot exceed 'exact_threshold'"
        raise ConfigError(msg)

    jobs = config["jobs"]
    if isinstance(jobs, bool) or not isinstance(jobs, int) or jobs < 1:
        msg = "'jobs' must be a positive integer"
        raise ConfigError(msg)


def load_config(path: str | None = None, root: Path | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults.

    An explicit ``path`` must exist. Without one, ``.mdlinkcheck.yml`` in
    ``root`` is used when present.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if not p.is_file():
            msg = f"Config file not found: {path}"
            raise ConfigError(msg)
    elif root is not None and (root / CONFIG_FILENAME).is_file():
        p = root / CONFIG_FILENAME
    else:
        return config

    logger.info("Loading config from %s", p)
    config = deep_merge(config, _read_yaml(p))
    validate_config(config)
    return config
