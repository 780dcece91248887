from typer.testing import CliRunner

from shiftreg.cli import app

runner = CliRunner()

SCENARIO = """
name: cli-demo
description: Trim to three
defaults:
  max_size: 3
cycles:
  - in_value: 1
  - in_value: 2
  - in_value: 3
  - in_value: 4
  - in_value: 5
"""


def test_replay_prints_final_values(tmp_path):
    path = tmp_path / "demo.yaml"
    path.write_text(SCENARIO)

    result = runner.invoke(app, ["replay", str(path), "--counters"])

    assert result.exit_code == 0, result.output
    assert "cli-demo" in result.output
    assert "[5, 4, 3]" in result.output
    assert "'Count': 3" in result.output


def test_inspect_lists_resolved_cycles(tmp_path):
    path = tmp_path / "demo.yaml"
    path.write_text(SCENARIO)

    result = runner.invoke(app, ["inspect", str(path)])

    assert result.exit_code == 0, result.output
    assert "Trim to three" in result.output
    assert "5: in_value=5, max_size=3, infinite=False, clear=False" in result.output


def test_invalid_scenario_exits_with_error(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("cycles: []\n")

    result = runner.invoke(app, ["replay", str(path)])

    assert result.exit_code == 1
    assert "Invalid scenario" in result.output


def test_mistyped_input_exits_with_error(tmp_path):
    path = tmp_path / "typed.yaml"
    path.write_text("cycles:\n  - {in_value: 1, max_size: three}\n")

    result = runner.invoke(app, ["replay", str(path)])

    assert result.exit_code == 1
    assert "Invalid input" in result.output


def test_non_mapping_defaults_exits_with_error(tmp_path):
    path = tmp_path / "defaults.yaml"
    path.write_text("defaults: [max_size]\ncycles:\n  - in_value: 1\n")

    result = runner.invoke(app, ["replay", str(path)])

    assert result.exit_code == 1
    assert "defaults" in result.output


def test_unknown_log_level_exits_with_error(tmp_path):
    path = tmp_path / "demo.yaml"
    path.write_text(SCENARIO)

    result = runner.invoke(app, ["replay", str(path), "--log-level", "loud"])

    assert result.exit_code == 1
    assert "Invalid log level" in result.output
