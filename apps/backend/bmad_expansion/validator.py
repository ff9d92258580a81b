"""
Expansion Pack Validator
========================

Runs the configuration checks for a BMAD expansion pack in order and
collects their findings into a ValidationResult.

Stages:
1. config.yaml exists            (stops the run on failure)
2. config.yaml parses to a map   (stops the run on failure)
3. required fields
4. game settings (gameDimension, devLoadAlwaysFiles)
5. document versions (prd, architecture, gdd)
6. agent team references
7. directory structure
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import yaml

from .checks import (
    check_agent_team,
    check_directory_structure,
    check_document_versions,
    check_game_settings,
    check_required_fields,
)
from .config import CONFIG_FILENAME, ValidatorPaths
from .loader import load_config
from .models import ConfigFormatError, ExpansionConfig, IssueKind, ValidationResult
from .report import print_header, print_report

if TYPE_CHECKING:
    from collections.abc import Callable

    ConfigCheck = Callable[[ExpansionConfig, ValidationResult], None]
    PathCheck = Callable[[ValidatorPaths, ValidationResult], None]

logger = logging.getLogger(__name__)

CONFIG_CHECKS: tuple[ConfigCheck, ...] = (
    check_required_fields,
    check_game_settings,
    check_document_versions,
)

PATH_CHECKS: tuple[PathCheck, ...] = (
    check_agent_team,
    check_directory_structure,
)


class ConfigValidator:
    """Validate one expansion pack directory.

    A validator owns a fresh ValidationResult per call to validate(), so
    repeated runs over the same files give the same result.
    """

    def __init__(
        self, expansion_dir: Path | None = None, core_agents_dir: Path | None = None
    ) -> None:
        self.paths = ValidatorPaths.for_expansion(expansion_dir, core_agents_dir)
        self.config: ExpansionConfig | None = None

    def validate(self) -> ValidationResult:
        """Run all stages and return the collected result. Prints nothing."""
        result = ValidationResult()
        self.config = None

        logger.debug("Validating expansion pack at %s", self.paths.expansion_dir)

        if not self._check_config_exists(result):
            return result

        config = self._parse_config(result)
        if config is None:
            return result
        self.config = config

        for check in CONFIG_CHECKS:
            logger.debug("Running %s", check.__name__)
            check(config, result)

        for check in PATH_CHECKS:
            logger.debug("Running %s", check.__name__)
            check(self.paths, result)

        logger.info(
            "Validation of %s finished: %d errors, %d warnings",
            self.paths.config_file,
            len(result.errors),
            len(result.warnings),
        )
        return result

    def run(self) -> bool:
        """Validate and print the console report. Returns success."""
        print_header()
        result = self.validate()
        print_report(result)
        return result.success

    def _check_config_exists(self, result: ValidationResult) -> bool:
        if self.paths.config_file.exists():
            return True
        result.add_error(f"{CONFIG_FILENAME} file not found", IssueKind.MISSING_FILE)
        return False

    def _parse_config(self, result: ValidationResult) -> ExpansionConfig | None:
        try:
            return load_config(self.paths.config_file)
        except (yaml.YAMLError, ConfigFormatError, OSError) as exc:
            result.add_error(f"Invalid YAML structure: {exc}", IssueKind.PARSE)
            return None


def validate_expansion(
    expansion_dir: Path | None = None, core_agents_dir: Path | None = None
) -> ValidationResult:
    """Validate an expansion pack and return the result without printing."""
    return ConfigValidator(expansion_dir, core_agents_dir).validate()
