"""Fixtures for expansion pack validation tests."""

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
import yaml
from click.testing import CliRunner

from bmad_expansion.config import REQUIRED_DIRS

VALID_CONFIG: dict[str, Any] = {
    "name": "bmad-unity-game-dev",
    "version": "1.0.0",
    "short-title": "Unity Game Dev",
    "description": "Unity game development expansion pack",
    "author": "BMAD",
    "slashPrefix": "bmadUnity",
    "gameDimension": "2D",
    "prd": {"prdVersion": "v2"},
    "architecture": {"architectureVersion": "v2"},
    "gdd": {"gddVersion": "v1"},
}


def write_yaml(path: Path, data: Any) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
    return path


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def make_pack(tmp_path: Path) -> Callable[..., Path]:
    """Build an expansion pack under tmp_path/expansion-packs/<name>.

    The returned factory accepts:
        config: Mapping written to config.yaml, or None to omit the file.
        agents: Team agent names, or None to omit the team file.
        expansion_agents: Agent stems created in the pack's agents/ dir.
        core_agents: Agent stems created in bmad-core/agents/.
        skip_dirs: Required directories to leave out.
    """

    def _make(
        config: dict[str, Any] | None = None,
        agents: list[str] | None = None,
        expansion_agents: tuple[str, ...] = (),
        core_agents: tuple[str, ...] = (),
        skip_dirs: tuple[str, ...] = (),
        name: str = "bmad-unity-game-dev",
    ) -> Path:
        pack = tmp_path / "expansion-packs" / name
        pack.mkdir(parents=True, exist_ok=True)

        for dir_name in REQUIRED_DIRS:
            if dir_name not in skip_dirs:
                (pack / dir_name).mkdir(exist_ok=True)

        if config is not None:
            write_yaml(pack / "config.yaml", config)

        if agents is not None:
            write_yaml(pack / "agent-teams" / "unity-game-team.yaml", {"agents": agents})

        for stem in expansion_agents:
            agent_file = pack / "agents" / f"{stem}.md"
            agent_file.parent.mkdir(parents=True, exist_ok=True)
            agent_file.write_text(f"# {stem}\n", encoding="utf-8")

        core_dir = tmp_path / "bmad-core" / "agents"
        for stem in core_agents:
            core_dir.mkdir(parents=True, exist_ok=True)
            (core_dir / f"{stem}.md").write_text(f"# {stem}\n", encoding="utf-8")

        return pack

    return _make


@pytest.fixture
def valid_config() -> dict[str, Any]:
    return dict(VALID_CONFIG)
