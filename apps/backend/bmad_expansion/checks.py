"""
Configuration Checks
====================

Independent checks run against a parsed expansion pack config. Each
check appends its findings to a shared ValidationResult and never
raises for a validation failure.
"""

import logging

import yaml

from .config import (
    DEFAULT_GAME_DIMENSION,
    DOCUMENT_VERSION_FIELDS,
    REQUIRED_DIRS,
    REQUIRED_FIELDS,
    TEAM_FILE,
    VALID_GAME_DIMENSIONS,
    ValidatorPaths,
)
from .loader import load_team
from .models import ConfigFormatError, ExpansionConfig, IssueKind, ValidationResult

logger = logging.getLogger(__name__)


def check_required_fields(config: ExpansionConfig, result: ValidationResult) -> None:
    """Record one error per required field that is absent or empty."""
    for field_name in REQUIRED_FIELDS:
        if not config.field_value(field_name):
            result.add_error(f"Missing required field: {field_name}", IssueKind.MISSING_FIELD)


def check_game_settings(config: ExpansionConfig, result: ValidationResult) -> None:
    """Validate gameDimension and flag devLoadAlwaysFiles entries.

    The devLoadAlwaysFiles paths are relative to the user's project docs,
    not the expansion pack, so they are only listed as warnings.
    """
    dimension = config.game_dimension
    if dimension:
        if dimension not in VALID_GAME_DIMENSIONS:
            allowed = " or ".join(f"'{d}'" for d in VALID_GAME_DIMENSIONS)
            result.add_error(
                f"Invalid gameDimension: {dimension}. Must be {allowed}",
                IssueKind.INVALID_VALUE,
            )
    else:
        result.add_warning(
            f"gameDimension not specified, will default to {DEFAULT_GAME_DIMENSION.value}"
        )

    for file_path in config.dev_load_always_files:
        result.add_warning(
            f"devLoadAlwaysFiles references: {file_path} - ensure this exists in your project"
        )


def check_document_versions(config: ExpansionConfig, result: ValidationResult) -> None:
    """Warn about document sections that do not declare a version."""
    for section_key, (version_key, label) in DOCUMENT_VERSION_FIELDS.items():
        section = config.section(section_key)
        if not section:
            continue
        if not isinstance(section, dict) or not section.get(version_key):
            result.add_warning(f"{label} version not specified")


def check_agent_team(paths: ValidatorPaths, result: ValidationResult) -> None:
    """Check that every agent listed in the team file has a definition.

    An agent resolves if <name>.md exists in either the expansion agents
    directory or the core agents directory. A missing team file is only
    a warning.
    """
    team_file = paths.team_file
    if not team_file.exists():
        result.add_warning(
            f"{TEAM_FILE.name} not found - team functionality may not work",
            IssueKind.MISSING_FILE,
        )
        return

    try:
        team = load_team(team_file)
    except (yaml.YAMLError, ConfigFormatError, OSError) as exc:
        result.add_error(
            f"Failed to validate agent team file: {exc}", IssueKind.PARSE
        )
        return

    logger.debug("Team file lists %d agents", len(team.agents))
    for agent_name in team.agents:
        expansion_file, core_file = paths.agent_candidates(agent_name)
        if expansion_file.exists() or core_file.exists():
            continue
        result.add_error(
            f"Agent team references missing agent: {agent_name} "
            f"(not found in {expansion_file} or {core_file})",
            IssueKind.MISSING_REFERENCE,
        )


def check_directory_structure(paths: ValidatorPaths, result: ValidationResult) -> None:
    """Record one error per required subdirectory missing from the pack."""
    for dir_name in REQUIRED_DIRS:
        if not (paths.expansion_dir / dir_name).exists():
            result.add_error(
                f"Missing required directory: {dir_name}", IssueKind.MISSING_DIRECTORY
            )
