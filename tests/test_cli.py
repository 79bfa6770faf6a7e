"""Tests for the pascaline command line."""

import pytest
import yaml
from click.testing import CliRunner

from pascaline.cli import cli


def _invoke(tmp_path, args, input=None):
    config_path = tmp_path / "config.yaml"
    runner = CliRunner()
    return runner.invoke(cli, ["--config", str(config_path), *args], input=input)


def test_add_prints_total(tmp_path):
    result = _invoke(tmp_path, ["add", "3", "3", "0", "--no-animate"])
    assert result.exit_code == 0, result.output
    assert "2,001" in result.output


def test_add_with_amount(tmp_path):
    result = _invoke(tmp_path, ["add", "4", "--amount", "3", "--no-animate"])
    assert result.exit_code == 0, result.output
    assert "30,000" in result.output


def test_add_carries(tmp_path):
    result = _invoke(tmp_path, ["add", *(["2"] * 10), "--no-animate"])
    assert result.exit_code == 0, result.output
    assert "1,000" in result.output


def test_add_rejects_missing_wheel(tmp_path):
    result = _invoke(tmp_path, ["add", "0", "9"])
    assert result.exit_code != 0
    assert "Wheel 9 does not exist" in result.output


def test_add_requires_indexes(tmp_path):
    result = _invoke(tmp_path, ["add"])
    assert result.exit_code != 0


def test_wheels_table(tmp_path):
    result = _invoke(tmp_path, ["wheels"])
    assert result.exit_code == 0, result.output
    assert "+0,001 (thousandths)" in result.output
    assert "+100 (hundreds)" in result.output


def test_config_command(tmp_path):
    result = _invoke(tmp_path, ["config"])
    assert result.exit_code == 0, result.output
    assert "Wheels: 6" in result.output
    assert "0,000" in result.output


def test_config_file_changes_machine(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(yaml.dump({
        "machine": {"wheels": 4, "split_index": 2},
        "display": {"decimal_separator": "."},
    }))
    result = _invoke(tmp_path, ["add", "2", "0", "--no-animate"])
    assert result.exit_code == 0, result.output
    assert "1.01" in result.output


def test_invalid_config_is_reported(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(yaml.dump({"machine": {"wheels": 0}}))
    result = _invoke(tmp_path, ["wheels"])
    assert result.exit_code != 0
    assert "Invalid config" in result.output


def test_repl_session(tmp_path):
    result = _invoke(tmp_path, ["repl"], input="3 0\n9\nx\nreset\n3\nquit\n")
    assert result.exit_code == 0, result.output
    assert "1,001" in result.output
    assert "does not exist" in result.output
    assert "Not a wheel number" in result.output
    assert "Final total: 1,000" in result.output


def test_repl_ends_on_eof(tmp_path):
    result = _invoke(tmp_path, ["repl"], input="2\n")
    assert result.exit_code == 0, result.output
    assert "Final total: 0,100" in result.output


def test_no_animate_leaves_no_carry_flag(tmp_path):
    result = _invoke(tmp_path, ["add", *(["2"] * 10), "--no-animate"])
    assert result.exit_code == 0, result.output
    assert "CARRY" not in result.output


@pytest.mark.parametrize("ui", [
    "ui:\n  fps: fast\n",
    "ui:\n  fps: 0\n",
    "ui: 5\n",
])
def test_invalid_ui_config_is_reported(tmp_path, ui):
    (tmp_path / "config.yaml").write_text(ui)
    result = _invoke(tmp_path, ["wheels"])
    assert result.exit_code == 1
    assert "Invalid config" in result.output
    assert not isinstance(result.exception, (TypeError, ValueError))
