"""Shared setup for property extractor commands."""

from pathlib import Path

from waivern_property_extractor.config import PropertyExtractorConfig
from waivern_property_extractor.extractor import PropertyExtractor


def build_extractor(config_path: Path | None) -> PropertyExtractor:
    """Create an extractor, configured from a YAML file when one is given."""
    if config_path is None:
        return PropertyExtractor()
    return PropertyExtractor(PropertyExtractorConfig.from_yaml_file(config_path))
