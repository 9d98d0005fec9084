"""Tests for config loader with JSON and YAML support."""

import json
import logging
from pathlib import Path

from pydantic import ValidationError
import pytest
import yaml

import animasies.core.config.loader as config_loader
from animasies.core.config.models import AppConfig, CurveSettings, LoggingConfig
from animasies.core.curves.defaults import DEFAULT_MAX_STEPS


@pytest.fixture
def sample_config_data():
    """Sample configuration data for testing."""
    return {
        "curves": {"max_steps": 5000},
        "logging": {"level": "DEBUG", "format": "%(message)s"},
    }


@pytest.fixture
def in_tmp_cwd(tmp_path, monkeypatch):
    """Run a test from an empty working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_detect_format_json():
    """Test format detection for JSON files."""
    assert config_loader.detect_format("animasies.json") == "json"
    assert config_loader.detect_format(Path("animasies.JSON")) == "json"


def test_detect_format_yaml():
    """Test format detection for YAML files."""
    assert config_loader.detect_format("animasies.yaml") == "yaml"
    assert config_loader.detect_format(Path("animasies.yml")) == "yaml"


def test_detect_format_invalid():
    """Test format detection for invalid extensions."""
    with pytest.raises(ValueError) as exc_info:
        config_loader.detect_format("animasies.toml")

    assert "Unsupported config format" in str(exc_info.value)


def test_load_config_json(tmp_path, sample_config_data):
    """Test loading JSON config."""
    config_file = tmp_path / "animasies.json"
    config_file.write_text(json.dumps(sample_config_data))

    config = config_loader.load_config(config_file)

    assert config == sample_config_data


def test_load_config_yaml(tmp_path, sample_config_data):
    """Test loading YAML config."""
    config_file = tmp_path / "animasies.yaml"
    config_file.write_text(yaml.dump(sample_config_data))

    config = config_loader.load_config(config_file)

    assert config["curves"]["max_steps"] == 5000
    assert config["logging"]["level"] == "DEBUG"


def test_load_config_yaml_with_comments(tmp_path):
    """Test loading YAML with comments."""
    config_file = tmp_path / "animasies.yml"
    config_file.write_text(
        """
# Curve generation limits
curves:
  max_steps: 2000  # abort runaway simulations

logging:
  level: WARNING
"""
    )

    config = config_loader.load_config(config_file)

    assert config["curves"]["max_steps"] == 2000
    assert config["logging"]["level"] == "WARNING"


def test_load_config_empty_yaml(tmp_path):
    """Test that an empty YAML file loads as an empty mapping."""
    config_file = tmp_path / "empty.yaml"
    config_file.write_text("")

    assert config_loader.load_config(config_file) == {}


def test_load_config_file_not_found():
    """Test loading non-existent config file."""
    with pytest.raises(FileNotFoundError) as exc_info:
        config_loader.load_config("nonexistent.json")

    assert "Config file does not exist" in str(exc_info.value)


def test_load_config_invalid_json(tmp_path):
    """Test loading invalid JSON."""
    config_file = tmp_path / "invalid.json"
    config_file.write_text("{ invalid json }")

    with pytest.raises(ValueError) as exc_info:
        config_loader.load_config(config_file)

    assert "Invalid JSON" in str(exc_info.value)


def test_load_config_invalid_yaml(tmp_path):
    """Test loading invalid YAML."""
    config_file = tmp_path / "invalid.yaml"
    config_file.write_text("invalid: yaml: content: [")

    with pytest.raises(ValueError) as exc_info:
        config_loader.load_config(config_file)

    assert "Invalid YAML" in str(exc_info.value)


def test_load_config_non_mapping_root(tmp_path):
    """Test that a list at the root is rejected."""
    config_file = tmp_path / "list.json"
    config_file.write_text("[1, 2, 3]")

    with pytest.raises(ValueError) as exc_info:
        config_loader.load_config(config_file)

    assert "must be a mapping" in str(exc_info.value)


class TestLoadAppConfig:
    """Tests for validated application config loading."""

    def test_defaults_without_config_file(self, in_tmp_cwd):
        """Missing default config file falls back to model defaults."""
        config = config_loader.load_app_config()

        assert config == AppConfig()
        assert config.curves.max_steps == DEFAULT_MAX_STEPS
        assert config.logging.level == "INFO"
        assert config.logging.structured is False

    def test_load_from_explicit_path(self, tmp_path, sample_config_data):
        """Explicit paths are loaded and validated."""
        config_file = tmp_path / "custom.yaml"
        config_file.write_text(yaml.dump(sample_config_data))

        config = config_loader.load_app_config(config_file)

        assert config.curves.max_steps == 5000
        assert config.logging.level == "DEBUG"

    def test_default_path_is_cached(self, in_tmp_cwd):
        """Default config is loaded once until the cache is cleared."""
        first = config_loader.load_app_config()
        (in_tmp_cwd / "animasies.json").write_text(json.dumps({"curves": {"max_steps": 7}}))

        assert config_loader.load_app_config() is first

        config_loader.clear_app_config_cache()
        assert config_loader.load_app_config().curves.max_steps == 7

    def test_unknown_keys_rejected(self, tmp_path):
        """Typos in config keys fail validation."""
        config_file = tmp_path / "typo.json"
        config_file.write_text(json.dumps({"curves": {"max_step": 10}}))

        with pytest.raises(ValidationError):
            config_loader.load_app_config(config_file)

    def test_non_positive_max_steps_rejected(self, tmp_path):
        """max_steps must be positive."""
        config_file = tmp_path / "zero.json"
        config_file.write_text(json.dumps({"curves": {"max_steps": 0}}))

        with pytest.raises(ValidationError):
            config_loader.load_app_config(config_file)

    def test_env_overrides_file(self, tmp_path, monkeypatch, sample_config_data):
        """Environment variables take precedence over file values."""
        config_file = tmp_path / "animasies.json"
        config_file.write_text(json.dumps(sample_config_data))
        monkeypatch.setenv(config_loader.ENV_MAX_STEPS, "42")
        monkeypatch.setenv(config_loader.ENV_LOG_LEVEL, "warning")

        config = config_loader.load_app_config(config_file)

        assert config.curves.max_steps == 42
        assert config.logging.level == "WARNING"

    def test_invalid_env_level_rejected(self, in_tmp_cwd, monkeypatch):
        """Unknown log levels fail validation."""
        monkeypatch.setenv(config_loader.ENV_LOG_LEVEL, "loud")

        with pytest.raises(ValidationError):
            config_loader.load_app_config()


class TestConfigureLogging:
    """Tests for configuring logging from app config."""

    def test_applies_level(self, restore_root_logger):
        """Root logger level follows config."""
        config = AppConfig(logging=LoggingConfig(level="ERROR"))

        config_loader.configure_logging(config)

        assert restore_root_logger.level == logging.ERROR

    def test_structured_output_to_file(self, tmp_path, restore_root_logger):
        """Structured logging writes JSON lines to the configured file."""
        log_file = tmp_path / "curves.jsonl"
        config = AppConfig(
            curves=CurveSettings(max_steps=10),
            logging=LoggingConfig(level="INFO", structured=True, filename=str(log_file)),
        )

        config_loader.configure_logging(config)
        logging.getLogger("animasies.test").info("sampled", extra={"curve": "bell"})
        for handler in logging.getLogger().handlers:
            handler.flush()

        entry = json.loads(log_file.read_text().strip().splitlines()[-1])
        assert entry["message"] == "sampled"
        assert entry["context"]["curve"] == "bell"

    def test_loads_default_config(self, in_tmp_cwd, monkeypatch, restore_root_logger):
        """Without an explicit config the default file and env are used."""
        monkeypatch.setenv(config_loader.ENV_LOG_LEVEL, "DEBUG")

        config_loader.configure_logging()

        assert restore_root_logger.level == logging.DEBUG
