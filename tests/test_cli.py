"""Tests for the bmad-validate-config command."""

from bmad_expansion.cli import main


def test_cli_passes_for_valid_pack(cli_runner, make_pack, valid_config):
    pack = make_pack(config=valid_config, agents=[])

    result = cli_runner.invoke(main, ["--expansion-dir", str(pack)])

    assert result.exit_code == 0
    assert "🔍 Validating Unity Expansion Pack Configuration..." in result.output
    assert "✅ Configuration validation passed!" in result.output


def test_cli_fails_with_exit_code_one(cli_runner, make_pack, valid_config):
    del valid_config["name"]
    pack = make_pack(config=valid_config, agents=[])

    result = cli_runner.invoke(main, ["--expansion-dir", str(pack)])

    assert result.exit_code == 1
    assert "   • Missing required field: name" in result.output
    assert "❌ Configuration validation failed!" in result.output


def test_cli_without_arguments_uses_working_directory(
    cli_runner, make_pack, valid_config, monkeypatch
):
    pack = make_pack(config=valid_config, agents=[])
    monkeypatch.chdir(pack)

    result = cli_runner.invoke(main, [])

    assert result.exit_code == 0


def test_cli_missing_config(cli_runner, tmp_path):
    result = cli_runner.invoke(main, ["--expansion-dir", str(tmp_path)])

    assert result.exit_code == 1
    assert "config.yaml file not found" in result.output


def test_cli_warnings_do_not_change_exit_code(cli_runner, make_pack, valid_config):
    del valid_config["gameDimension"]
    pack = make_pack(config=valid_config)

    result = cli_runner.invoke(main, ["--expansion-dir", str(pack)])

    assert result.exit_code == 0
    assert "CONFIGURATION WARNINGS" in result.output


def test_cli_core_agents_dir_option(cli_runner, make_pack, valid_config, tmp_path):
    pack = make_pack(config=valid_config, agents=["game-designer"])
    shared = tmp_path / "shared-agents"
    shared.mkdir()
    (shared / "game-designer.md").write_text("# game-designer\n", encoding="utf-8")

    failed = cli_runner.invoke(main, ["--expansion-dir", str(pack)])
    passed = cli_runner.invoke(
        main, ["--expansion-dir", str(pack), "--core-agents-dir", str(shared)]
    )

    assert failed.exit_code == 1
    assert passed.exit_code == 0
