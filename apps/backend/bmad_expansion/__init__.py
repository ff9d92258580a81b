"""
BMAD Expansion Pack Validation
==============================

Checks that a BMAD expansion pack's config.yaml, team file and
directory layout are sound before tooling or agents rely on them.

Main Components:
- config: File names, required fields, enums, path resolution
- models: Typed config/team views and the validation result
- loader: YAML loading for config and team files
- checks: Individual configuration checks
- validator: Ordered stage runner
- report: Console report rendering
"""

from .checks import (
    check_agent_team,
    check_directory_structure,
    check_document_versions,
    check_game_settings,
    check_required_fields,
)
from .config import (
    CONFIG_FILENAME,
    REQUIRED_DIRS,
    REQUIRED_FIELDS,
    TEAM_FILE,
    GameDimension,
    ValidatorPaths,
)
from .loader import load_config, load_team
from .models import (
    ConfigFormatError,
    ExpansionConfig,
    Issue,
    IssueKind,
    TeamConfig,
    ValidationResult,
)
from .report import format_report
from .validator import ConfigValidator, validate_expansion

__all__ = [
    # Config
    "CONFIG_FILENAME",
    "REQUIRED_DIRS",
    "REQUIRED_FIELDS",
    "TEAM_FILE",
    "GameDimension",
    "ValidatorPaths",
    # Models
    "ConfigFormatError",
    "ExpansionConfig",
    "Issue",
    "IssueKind",
    "TeamConfig",
    "ValidationResult",
    # Loading
    "load_config",
    "load_team",
    # Checks
    "check_required_fields",
    "check_game_settings",
    "check_document_versions",
    "check_agent_team",
    "check_directory_structure",
    # Validation
    "ConfigValidator",
    "validate_expansion",
    "format_report",
]
