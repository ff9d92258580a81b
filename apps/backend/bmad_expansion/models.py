"""
Validation Models
=================

Typed views of the expansion pack config and team file, and the
accumulated result of a validation run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ConfigFormatError(ValueError):
    """A YAML document parsed but does not have the expected shape."""


class Severity(str, Enum):
    """Whether an issue fails the run or is advisory."""

    ERROR = "error"
    WARNING = "warning"


class IssueKind(str, Enum):
    """Category of a reported issue."""

    MISSING_FILE = "missing_file"
    PARSE = "parse"
    MISSING_FIELD = "missing_field"
    INVALID_VALUE = "invalid_value"
    MISSING_REFERENCE = "missing_reference"
    MISSING_DIRECTORY = "missing_directory"
    ADVISORY = "advisory"


@dataclass(frozen=True)
class Issue:
    """One reported finding with its category and severity."""

    message: str
    kind: IssueKind
    severity: Severity

    def __str__(self) -> str:
        return self.message


@dataclass
class ValidationResult:
    """Errors and warnings collected over a single validation run.

    The run succeeds if and only if no errors were recorded; warnings are
    advisory and never change the outcome.
    """

    errors: list[Issue] = field(default_factory=list)
    warnings: list[Issue] = field(default_factory=list)

    def add_error(self, message: str, kind: IssueKind) -> None:
        self.errors.append(Issue(message, kind, Severity.ERROR))

    def add_warning(self, message: str, kind: IssueKind = IssueKind.ADVISORY) -> None:
        self.warnings.append(Issue(message, kind, Severity.WARNING))

    @property
    def success(self) -> bool:
        return not self.errors

    @property
    def exit_code(self) -> int:
        return 0 if self.success else 1

    @property
    def error_messages(self) -> list[str]:
        return [issue.message for issue in self.errors]

    @property
    def warning_messages(self) -> list[str]:
        return [issue.message for issue in self.warnings]

    def errors_of(self, kind: IssueKind) -> list[Issue]:
        return [issue for issue in self.errors if issue.kind == kind]


# YAML key -> ExpansionConfig attribute
_FIELD_ATTRS: dict[str, str] = {
    "name": "name",
    "version": "version",
    "short-title": "short_title",
    "description": "description",
    "author": "author",
    "slashPrefix": "slash_prefix",
    "gameDimension": "game_dimension",
    "prd": "prd",
    "architecture": "architecture",
    "gdd": "gdd",
}


@dataclass(frozen=True)
class ExpansionConfig:
    """Tolerant, typed view of a parsed config.yaml mapping.

    Absent optional fields default to None (scalars, sub-sections) or an
    empty list (devLoadAlwaysFiles). Fields are looked up by
    YAML key name through field_value(); ``raw`` keeps the full mapping.
    """

    raw: dict[str, Any]
    name: Any = None
    version: Any = None
    short_title: Any = None
    description: Any = None
    author: Any = None
    slash_prefix: Any = None
    game_dimension: Any = None
    dev_load_always_files: list[Any] = field(default_factory=list)
    prd: Any = None
    architecture: Any = None
    gdd: Any = None

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> ExpansionConfig:
        always_files = data.get("devLoadAlwaysFiles")
        if not isinstance(always_files, list):
            always_files = []

        return cls(
            raw=data,
            name=data.get("name"),
            version=data.get("version"),
            short_title=data.get("short-title"),
            description=data.get("description"),
            author=data.get("author"),
            slash_prefix=data.get("slashPrefix"),
            game_dimension=data.get("gameDimension"),
            dev_load_always_files=list(always_files),
            prd=data.get("prd"),
            architecture=data.get("architecture"),
            gdd=data.get("gdd"),
        )

    def field_value(self, key: str) -> Any:
        """Return a top-level field by its YAML key name."""
        attr = _FIELD_ATTRS.get(key)
        if attr is not None:
            return getattr(self, attr)
        return self.raw.get(key)

    def section(self, key: str) -> Any:
        """Return an optional document section (prd, architecture, gdd)."""
        return self.field_value(key)


@dataclass(frozen=True)
class TeamConfig:
    """Agent names listed in a team file."""

    agents: list[str] = field(default_factory=list)

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> TeamConfig:
        agents = data.get("agents")
        if not isinstance(agents, list):
            return cls()
        return cls(agents=[str(name) for name in agents])
