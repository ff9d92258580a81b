"""
Expansion Pack Loader
=====================

Load the expansion pack config.yaml and team YAML files into typed
models.
"""

import logging
from pathlib import Path
from typing import Any

import yaml

from .models import ConfigFormatError, ExpansionConfig, TeamConfig

logger = logging.getLogger(__name__)


def read_yaml(path: Path) -> Any:
    """Read and parse a YAML file.

    Bytes that are not valid UTF-8 are read as U+FFFD.

    Raises:
        FileNotFoundError: If the file does not exist.
        yaml.YAMLError: If the YAML is malformed.
    """
    if not path.exists():
        raise FileNotFoundError(f"YAML file not found: {path}")

    raw = path.read_text(encoding="utf-8", errors="replace")
    return yaml.safe_load(raw)


def load_yaml_mapping(path: Path) -> dict[str, Any]:
    """Read a YAML file whose top level must be a mapping.

    Raises:
        FileNotFoundError: If the file does not exist.
        yaml.YAMLError: If the YAML is malformed.
        ConfigFormatError: If the document is empty or not a mapping.
    """
    data = read_yaml(path)

    if not isinstance(data, dict):
        kind = "empty document" if data is None else type(data).__name__
        raise ConfigFormatError(f"expected a mapping at the top level of {path.name}, got {kind}")

    logger.debug("Loaded %d top-level keys from %s", len(data), path)
    return data


def load_config(config_file: Path) -> ExpansionConfig:
    """Load and parse an expansion pack config.yaml."""
    return ExpansionConfig.from_mapping(load_yaml_mapping(config_file))


def load_team(team_file: Path) -> TeamConfig:
    """Load a team file and return its agent list.

    A list or scalar document has no agents and yields an empty team;
    only an empty document is rejected.
    """
    data = read_yaml(team_file)

    if data is None:
        raise ConfigFormatError(
            f"expected a mapping at the top level of {team_file.name}, got empty document"
        )
    if not isinstance(data, dict):
        logger.debug("Team file %s is a %s, no agents listed", team_file, type(data).__name__)
        return TeamConfig()

    return TeamConfig.from_mapping(data)
