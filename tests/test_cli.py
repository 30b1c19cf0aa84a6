"""Tests for the cron-builder CLI."""

import json
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from loguru import logger
from typer.testing import CliRunner

from cron_builder.cli.commands import app

runner = CliRunner()


@pytest.fixture
def mock_config():
    """Fixture to provide a mocked config."""
    mock_cfg = MagicMock()
    mock_cfg.defaults.expression = "0 9 * * 1,3,5"
    mock_cfg.defaults.time = "00:00"
    mock_cfg.output.as_json = False
    mock_cfg.log_level = "WARNING"
    return mock_cfg


@pytest.fixture(autouse=True)
def patched_config(mock_config):
    with patch("cron_builder.cli.commands.load_config", return_value=mock_config):
        yield
    logger.remove()


def test_cli_parse_json():
    result = runner.invoke(app, ["parse", "30 14 * * 1,3,5", "--json"])
    assert result.exit_code == 0
    assert json.loads(result.stdout) == {"kind": "weekly", "time": "14:30", "weekdays": [1, 3, 5]}


def test_cli_parse_json_from_config(mock_config):
    """Test the configured output mode applies without the flag."""
    mock_config.output.as_json = True
    result = runner.invoke(app, ["parse", "0 0 15 * *"])
    assert result.exit_code == 0
    assert json.loads(result.stdout) == {"kind": "monthly", "time": "00:00", "day_of_month": 15}


def test_cli_parse_table():
    result = runner.invoke(app, ["parse", "*/5 * * * *"])
    assert result.exit_code == 0
    assert "custom" in result.stdout
    assert "*/5 * * * *" in result.stdout


def test_cli_parse_invalid():
    result = runner.invoke(app, ["parse", "not a cron"])
    assert result.exit_code == 1
    assert "Invalid cron expression" in result.stdout


@pytest.mark.parametrize(
    "args, expected",
    [
        (["--kind", "daily", "--time", "9:30"], "30 9 * * *"),
        (["--kind", "weekly", "--time", "09:00", "-w", "1", "-w", "3", "-w", "5"], "0 9 * * 1,3,5"),
        (["--kind", "monthly", "--day", "15"], "0 0 15 * *"),
        (["--kind", "custom", "--expression", "*/5 * * * *"], "*/5 * * * *"),
        (["--kind", "custom"], "0 0 * * *"),
        (["--kind", "Weekly", "--time", "08:00"], "0 8 * * *"),
    ],
)
def test_cli_generate(args, expected):
    result = runner.invoke(app, ["generate", *args])
    assert result.exit_code == 0
    assert result.stdout.strip() == expected


def test_cli_generate_unknown_kind():
    result = runner.invoke(app, ["generate", "--kind", "hourly"])
    assert result.exit_code == 1
    assert "Unknown schedule kind" in result.stdout


def test_cli_generate_invalid_time():
    result = runner.invoke(app, ["generate", "--kind", "daily", "--time", "25:00"])
    assert result.exit_code == 1
    assert "Invalid time" in result.stdout


def test_cli_describe():
    result = runner.invoke(app, ["describe", "0 9 * * 1,3,5"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "Weekly on Monday, Wednesday, Friday at 09:00"

    result = runner.invoke(app, ["describe", "not a cron"])
    assert result.stdout.strip() == "Invalid cron expression"


def test_cli_presets():
    result = runner.invoke(app, ["presets"])
    assert result.exit_code == 0
    assert "30 14 * * 1,3,5" in result.stdout
    assert "0 0 15 * *" in result.stdout


def test_cli_edit_session():
    """Test the interactive editor applies commands and reports errors."""
    result = runner.invoke(app, ["edit"], input="kind monthly\nday 40\nday 10\ntime 7:15\nexit\n")
    assert result.exit_code == 0
    assert "Invalid day of month" in result.stdout
    assert result.stdout.strip().splitlines()[-1] == "15 7 10 * *"


def test_cli_edit_uses_configured_default():
    result = runner.invoke(app, ["edit"], input="toggle 3\n")
    assert result.exit_code == 0
    assert result.stdout.strip().splitlines()[-1] == "0 9 * * 1,5"


@patch("cron_builder.cli.commands.save_default_config")
def test_cli_onboard(mock_save, tmp_path: Path):
    mock_save.return_value = tmp_path / "config.json"
    result = runner.invoke(app, ["onboard"])
    assert result.exit_code == 0
    assert "Config created at:" in result.stdout


def test_cli_status():
    result = runner.invoke(app, ["status"])
    assert result.exit_code == 0
    assert "cron-builder Status" in result.stdout
    assert "0 9 * * 1,3,5" in result.stdout


def test_cli_generate_custom_ignores_time():
    """Test time is only checked for kinds that use it."""
    result = runner.invoke(app, ["generate", "--kind", "custom", "-e", "*/5 * * * *", "-t", "bad"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "*/5 * * * *"


def test_cli_generate_reports_invalid_default_time(mock_config):
    mock_config.defaults.time = "25:99"
    result = runner.invoke(app, ["generate", "--kind", "daily"])
    assert result.exit_code == 1
    assert "Invalid time: '25:99'" in result.stdout


@pytest.mark.parametrize(
    "args, message",
    [
        (["--kind", "weekly", "-w", "1", "-w", "9"], "Invalid weekday: 9"),
        (["--kind", "monthly", "--day", "40"], "Invalid day of month: 40"),
        (["--kind", "monthly", "--day", "0"], "Invalid day of month: 0"),
    ],
)
def test_cli_generate_out_of_range_fields(args, message):
    result = runner.invoke(app, ["generate", *args])
    assert result.exit_code == 1
    assert message in result.stdout


def test_cli_default_level_hides_debug_logs():
    """Test parser debug lines stay off stderr at the default level."""
    for command in (["describe", "not a cron"], ["describe", "*/5 * * * *"], ["presets"], ["status"]):
        result = runner.invoke(app, command)
        assert result.exit_code == 0
        assert "DEBUG" not in result.output
        assert "Treating cron expression as custom" not in result.output
        assert "Not a five-field cron expression" not in result.output


def test_cli_debug_level_shows_parser_logs(mock_config):
    mock_config.log_level = "DEBUG"
    result = runner.invoke(app, ["describe", "*/5 * * * *"])
    assert result.exit_code == 0
    assert "Treating cron expression as custom" in result.output
