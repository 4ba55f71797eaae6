"""Configuration for PropertyExtractor."""

from pathlib import Path
from typing import Any, Self

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from waivern_property_extractor.errors import ExtractorConfigError
from waivern_property_extractor.models import DEFAULT_PSEUDO_TYPES


class PropertyExtractorConfig(BaseModel):
    """Configuration for PropertyExtractor with Pydantic validation.

    Immutable once created; unknown keys are rejected.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    pseudo_types: frozenset[str] = Field(
        default=DEFAULT_PSEUDO_TYPES,
        description="Declared types that never produce a type hint",
    )

    @field_validator("pseudo_types")
    @classmethod
    def validate_pseudo_types(cls, v: frozenset[str]) -> frozenset[str]:
        """Strip entries and reject blank ones."""
        normalised = frozenset(entry.strip() for entry in v)
        if "" in normalised:
            raise ValueError("Pseudo-types must be non-empty strings")
        return normalised

    @classmethod
    def from_properties(cls, properties: dict[str, Any]) -> Self:
        """Create configuration from a properties mapping.

        Args:
            properties: Raw properties containing:
                - pseudo_types (list[str], optional): Types without a type hint.

        Returns:
            Validated configuration object

        Raises:
            ExtractorConfigError: If validation fails

        """
        try:
            return cls.model_validate(properties)
        except ValidationError as e:
            raise ExtractorConfigError(
                f"Invalid property extractor configuration: {e}"
            ) from e
        except ValueError as e:
            raise ExtractorConfigError(
                f"Invalid property extractor configuration: {e}"
            ) from e

    @classmethod
    def from_yaml_file(cls, config_path: Path) -> Self:
        """Load configuration from a YAML file.

        An empty file yields the default configuration.

        Args:
            config_path: Path to the YAML configuration file

        Returns:
            Validated configuration object

        Raises:
            ExtractorConfigError: If the file cannot be read, parsed or validated

        """
        try:
            with open(config_path, encoding="utf-8") as f:
                properties = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ExtractorConfigError(
                f"Failed to parse YAML config {config_path}: {e}"
            ) from e
        except OSError as e:
            raise ExtractorConfigError(
                f"Failed to read config file {config_path}: {e}"
            ) from e

        if properties is None:
            return cls()
        if not isinstance(properties, dict):
            raise ExtractorConfigError(f"Invalid configuration format in {config_path}")
        return cls.from_properties(properties)
