"""Tests for logging configuration and setup."""

import logging
from pathlib import Path

import pytest

from waivern_property_extractor.logging import (
    LoggingError,
    apply_level_override,
    get_default_config_path,
    load_config,
    setup_logging,
)

# =============================================================================
# Configuration Loading
# =============================================================================


class TestLoggingConfiguration:
    """Test logging configuration loading."""

    def test_default_config_is_packaged(self) -> None:
        """The default configuration ships with the package."""
        config_path = get_default_config_path()

        assert config_path.name == "logging.yaml"
        assert config_path.exists()

    def test_load_default_config(self) -> None:
        """The packaged configuration is a dictConfig mapping."""
        config = load_config(get_default_config_path())

        assert config["version"] == 1
        assert "handlers" in config
        assert "waivern_property_extractor" in config["loggers"]

    def test_load_config_invalid_yaml_raises_error(self, tmp_path: Path) -> None:
        """Broken YAML raises LoggingError."""
        config_file = tmp_path / "logging.yaml"
        config_file.write_text("invalid: yaml: content: [")

        with pytest.raises(LoggingError, match="Failed to parse YAML config"):
            load_config(config_file)

    def test_load_config_non_mapping_raises_error(self, tmp_path: Path) -> None:
        """A YAML document that is not a mapping raises LoggingError."""
        config_file = tmp_path / "logging.yaml"
        config_file.write_text("- just\n- a list\n")

        with pytest.raises(LoggingError, match="Invalid configuration format"):
            load_config(config_file)

    def test_load_config_missing_file_raises_error(self, tmp_path: Path) -> None:
        """A missing file raises LoggingError."""
        with pytest.raises(LoggingError, match="Failed to read config file"):
            load_config(tmp_path / "missing.yaml")


# =============================================================================
# Level Overrides
# =============================================================================


class TestLevelOverride:
    """Test log level overrides."""

    def test_override_updates_loggers_root_and_handlers(self) -> None:
        """Loggers and root take the level, handlers are only lowered."""
        config = {
            "loggers": {"a": {"level": "WARNING"}},
            "root": {"level": "WARNING"},
            "handlers": {
                "console": {"level": "WARNING"},
                "file": {"level": "DEBUG"},
            },
        }

        apply_level_override(config, "info")

        assert config["loggers"]["a"]["level"] == "INFO"
        assert config["root"]["level"] == "INFO"
        assert config["handlers"]["console"]["level"] == "INFO"
        assert config["handlers"]["file"]["level"] == "DEBUG"

    def test_invalid_level_raises_error(self) -> None:
        """Unknown level names raise LoggingError."""
        with pytest.raises(LoggingError, match="Invalid log level"):
            apply_level_override({}, "LOUD")


# =============================================================================
# Setup
# =============================================================================


class TestSetupLogging:
    """Test logging setup."""

    def test_setup_with_default_config_and_level(self) -> None:
        """The packaged configuration is applied with the level override."""
        setup_logging(level="DEBUG")

        assert logging.getLogger("waivern_property_extractor").level == logging.DEBUG

    def test_setup_falls_back_to_basic_logging(self, tmp_path: Path) -> None:
        """A missing configuration file falls back to basic logging."""
        setup_logging(config_path=tmp_path / "missing.yaml", level="ERROR")

        assert logging.getLogger().level == logging.ERROR

    def test_setup_invalid_level_falls_back(self) -> None:
        """An invalid level falls back to basic logging at INFO."""
        setup_logging(level="LOUD")

        assert logging.getLogger().level == logging.INFO

    def test_force_basic(self) -> None:
        """force_basic skips file configuration."""
        setup_logging(level="WARNING", force_basic=True)

        assert logging.getLogger().level == logging.WARNING
