"""Checks file loading for the CLI.

A checks file pairs conditions with the versions to test against them::

    checks:
      - condition: "^1.2.3"
        versions: ["1.2.3", "1.9.0", "2.0.0"]
      - condition: ">=2 <3 || 4"
        versions: ["2.5.1"]

YAML (``.yaml``/``.yml``) and JSON (``.json``) are both accepted.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from typing import Any, List

import yaml

from .constants import Constants

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when a checks file is missing or malformed."""


@dataclass
class CheckSpec:
    """One condition and the versions to evaluate against it."""
    condition: str
    versions: List[str] = field(default_factory=list)


def _read_document(config_path: str) -> Any:
    with open(config_path, "r", encoding="utf-8") as f:
        if config_path.lower().endswith(Constants.CONFIG_JSON_SUFFIXES):
            return json.load(f)
        return yaml.safe_load(f)


def _to_check(entry: Any, position: int) -> CheckSpec:
    if not isinstance(entry, dict):
        raise ConfigError(f"check #{position} must be a mapping")
    condition = entry.get("condition")
    if not isinstance(condition, str) or not condition.strip():
        raise ConfigError(f"check #{position} is missing a 'condition' string")
    versions = entry.get("versions") or []
    if isinstance(versions, str):
        versions = [versions]
    if not isinstance(versions, list):
        raise ConfigError(f"check #{position} 'versions' must be a list")
    return CheckSpec(condition=condition, versions=[str(v) for v in versions])


def load_checks_config(config_path: str) -> List[CheckSpec]:
    """Load checks from a YAML or JSON file.

    Args:
        config_path: Path to the checks file.

    Returns:
        List of CheckSpec in file order.

    Raises:
        ConfigError: If the file cannot be read or does not hold a checks list.
    """
    if not os.path.isfile(config_path):
        raise ConfigError(f"Config file not found: {config_path}")

    try:
        data = _read_document(config_path)
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to load config {config_path}: {e}") from e

    if isinstance(data, dict):
        data = data.get(Constants.CONFIG_CHECKS_KEY)
    if not isinstance(data, list):
        raise ConfigError(f"Config {config_path} has no '{Constants.CONFIG_CHECKS_KEY}' list")

    checks = [_to_check(entry, i) for i, entry in enumerate(data, start=1)]
    logger.debug("Loaded %d check(s) from %s", len(checks), config_path)
    return checks
