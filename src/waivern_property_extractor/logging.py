"""Python-standard logging configuration for the property extractor.

Logging is set up with logging.config.dictConfig() from a YAML file. The
packaged default lives in waivern_property_extractor/resources/logging.yaml.
"""

from __future__ import annotations

import logging
import logging.config
import sys
from importlib.resources import files
from pathlib import Path
from typing import Any, cast

import yaml

_DEFAULT_CONFIG_NAME = "logging.yaml"


class LoggingError(Exception):
    """Exception raised for logging configuration errors."""

    pass


def get_default_config_path() -> Path:
    """Return the path of the packaged logging configuration.

    Raises:
        LoggingError: If the packaged configuration is missing

    """
    config_path = Path(str(files(__package__) / "resources" / _DEFAULT_CONFIG_NAME))
    if not config_path.exists():
        raise LoggingError(
            f"No logging configuration found. Expected at: {config_path}"
        )
    return config_path


def load_config(config_path: Path) -> dict[str, Any]:
    """Load logging configuration from YAML file.

    Args:
        config_path: Path to the YAML configuration file

    Returns:
        Logging configuration dictionary

    Raises:
        LoggingError: If configuration cannot be loaded or parsed

    """
    try:
        with open(config_path, encoding="utf-8") as f:
            config = yaml.safe_load(f)

        if not isinstance(config, dict):
            raise LoggingError(f"Invalid configuration format in {config_path}")

        return cast(dict[str, Any], config)

    except yaml.YAMLError as e:
        raise LoggingError(f"Failed to parse YAML config {config_path}: {e}") from e
    except OSError as e:
        raise LoggingError(f"Failed to read config file {config_path}: {e}") from e


def apply_level_override(config: dict[str, Any], level: str) -> None:
    """Apply a log level to every logger, the root and more verbose handlers.

    Args:
        config: Logging configuration dictionary (modified in place)
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Raises:
        LoggingError: If the level name is unknown

    """
    level = level.upper()
    numeric_level = logging.getLevelNamesMapping().get(level)
    if numeric_level is None:
        raise LoggingError(f"Invalid log level: {level}")

    for logger_config in config.get("loggers", {}).values():
        logger_config["level"] = level

    if "root" in config:
        config["root"]["level"] = level

    # Handlers filter below their own level, so only ever lower them
    for handler_config in config.get("handlers", {}).values():
        if isinstance(handler_config, dict) and "level" in handler_config:
            handler_level = logging.getLevelNamesMapping().get(
                str(handler_config["level"]).upper(), logging.INFO
            )
            if numeric_level < handler_level:
                handler_config["level"] = level


def setup_logging(
    config_path: Path | str | None = None,
    level: str | None = None,
    force_basic: bool = False,
) -> None:
    """Configure logging using Python standard dictConfig.

    Falls back to basic console logging if the configuration cannot be
    applied.

    Args:
        config_path: Path to logging configuration file (packaged default if None)
        level: Override log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        force_basic: Force basic console logging (fallback mode)

    """
    if force_basic:
        _setup_basic_logging(level or "INFO")
        return

    try:
        if isinstance(config_path, str):
            config_path = Path(config_path)
        elif config_path is None:
            config_path = get_default_config_path()

        config = load_config(config_path)
        if level:
            apply_level_override(config, level)

        logging.config.dictConfig(config)

        logging.getLogger(__name__).debug("Logging configured from: %s", config_path)

    except (LoggingError, KeyError, ValueError, TypeError) as e:
        fallback_level = level or "INFO"
        _setup_basic_logging(fallback_level)

        logging.getLogger(__name__).warning(
            "Failed to configure logging from file (%s), using basic console logging at %s level",
            e,
            fallback_level,
        )


def _setup_basic_logging(level: str) -> None:
    """Set up basic console logging as fallback.

    Args:
        level: Logging level string

    """
    numeric_level = logging.getLevelNamesMapping().get(level.upper(), logging.INFO)

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,
    )
