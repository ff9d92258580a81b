"""
Expansion Pack Configuration
============================

File names, required fields, enumerations, and directory layout for
validating a BMAD expansion pack.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class GameDimension(str, Enum):
    """Game dimensions accepted in an expansion pack config."""

    TWO_D = "2D"
    THREE_D = "3D"


VALID_GAME_DIMENSIONS: tuple[str, ...] = tuple(d.value for d in GameDimension)

# Downstream tooling assumes this when gameDimension is absent
DEFAULT_GAME_DIMENSION = GameDimension.TWO_D


# --- File layout ---

CONFIG_FILENAME = "config.yaml"

# Team file, relative to the expansion directory
TEAM_FILE = Path("agent-teams") / "unity-game-team.yaml"

# Agent definitions are markdown files named <agent>.md
AGENT_SUFFIX = ".md"

EXPANSION_AGENTS_SUBDIR = "agents"

# Shared core agents, relative to the expansion directory
# (expansion-packs/<pack>/ -> bmad-core/agents/)
CORE_AGENTS_RELPATH = Path("..") / ".." / "bmad-core" / "agents"

REQUIRED_DIRS: tuple[str, ...] = (
    "agents",
    "agent-teams",
    "templates",
    "tasks",
    "workflows",
    "checklists",
)


# --- Config fields ---

REQUIRED_FIELDS: tuple[str, ...] = (
    "name",
    "version",
    "short-title",
    "description",
    "author",
    "slashPrefix",
)

# Optional document sections: section key -> (version key, display label)
DOCUMENT_VERSION_FIELDS: dict[str, tuple[str, str]] = {
    "prd": ("prdVersion", "PRD"),
    "architecture": ("architectureVersion", "Architecture"),
    "gdd": ("gddVersion", "GDD"),
}


@dataclass(frozen=True)
class ValidatorPaths:
    """Resolved filesystem locations for one validation run."""

    expansion_dir: Path
    core_agents_dir: Path

    @classmethod
    def for_expansion(
        cls, expansion_dir: Path | None = None, core_agents_dir: Path | None = None
    ) -> "ValidatorPaths":
        """Resolve paths for an expansion pack.

        Args:
            expansion_dir: Directory holding config.yaml. Defaults to the
                           current working directory.
            core_agents_dir: Shared core agents directory. Defaults to
                             CORE_AGENTS_RELPATH under expansion_dir.
        """
        base = Path(expansion_dir) if expansion_dir is not None else Path.cwd()
        core = Path(core_agents_dir) if core_agents_dir is not None else base / CORE_AGENTS_RELPATH
        return cls(expansion_dir=base, core_agents_dir=core)

    @property
    def config_file(self) -> Path:
        return self.expansion_dir / CONFIG_FILENAME

    @property
    def team_file(self) -> Path:
        return self.expansion_dir / TEAM_FILE

    @property
    def expansion_agents_dir(self) -> Path:
        return self.expansion_dir / EXPANSION_AGENTS_SUBDIR

    def agent_candidates(self, agent_name: str) -> tuple[Path, Path]:
        """Return the (expansion, core) locations checked for an agent."""
        filename = f"{agent_name}{AGENT_SUFFIX}"
        return self.expansion_agents_dir / filename, self.core_agents_dir / filename
