"""Tests for configuration loading."""

import json
from pathlib import Path

from loguru import logger
from typer.testing import CliRunner

from cron_builder.cli.commands import app
from cron_builder.config.loader import load_config, save_default_config
from cron_builder.config.schema import Config


def test_load_config_missing_file(tmp_path: Path):
    """Test defaults are used when no file exists."""
    config = load_config(tmp_path / "missing.json")
    assert config.defaults.expression == "0 0 * * *"
    assert config.defaults.time == "00:00"
    assert config.output.as_json is False
    assert config.log_level == "WARNING"


def test_load_config_from_file(tmp_path: Path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"defaults": {"expression": "0 9 * * 1"}, "output": {"as_json": True}}))

    config = load_config(path)
    assert config.defaults.expression == "0 9 * * 1"
    assert config.defaults.time == "00:00"
    assert config.output.as_json is True


def test_load_config_invalid_file(tmp_path: Path):
    """Test a broken file falls back to defaults."""
    path = tmp_path / "config.json"
    path.write_text("{not json")
    assert load_config(path).defaults.expression == "0 0 * * *"


def test_env_override(monkeypatch):
    monkeypatch.setenv("CRON_BUILDER_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("CRON_BUILDER_DEFAULTS__TIME", "08:30")
    config = Config()
    assert config.log_level == "DEBUG"
    assert config.defaults.time == "08:30"


def test_save_default_config(tmp_path: Path):
    path = save_default_config(tmp_path / "nested" / "config.json")
    assert path.exists()

    data = json.loads(path.read_text())
    assert data["defaults"]["expression"] == "0 0 * * *"
    assert data["output"]["as_json"] is False
    assert load_config(path).log_level == "WARNING"


def test_load_config_invalid_log_level_in_file(tmp_path: Path):
    """Test an unknown level in the file falls back to defaults."""
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"log_level": "verbose", "defaults": {"time": "08:00"}}))

    config = load_config(path)
    assert config.log_level == "WARNING"
    assert config.defaults.time == "00:00"


def test_load_config_invalid_log_level_in_env(tmp_path: Path, monkeypatch):
    """Test an unknown level in the environment falls back to defaults."""
    monkeypatch.setenv("CRON_BUILDER_LOG_LEVEL", "verbose")
    config = load_config(tmp_path / "missing.json")
    assert config.log_level == "WARNING"
    assert config.defaults.expression == "0 0 * * *"


def test_log_level_is_case_insensitive(tmp_path: Path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"log_level": "debug"}))
    assert load_config(path).log_level == "DEBUG"


def test_cli_survives_invalid_env_log_level(tmp_path: Path, monkeypatch):
    """Test the CLI warns and keeps working with a bad level in the environment."""
    monkeypatch.setenv("CRON_BUILDER_LOG_LEVEL", "verbose")
    result = CliRunner().invoke(
        app, ["parse", "0 9 * * *", "--json", "--config", str(tmp_path / "missing.json")]
    )
    logger.remove()

    assert result.exit_code == 0
    assert '"kind": "daily"' in result.output
    assert "using defaults" in result.output
