"""CLI command implementations for the property extractor."""

from waivern_property_extractor.cli.errors import CLIError, cli_error_handler
from waivern_property_extractor.cli.extract import extract_property_command
from waivern_property_extractor.cli.scan import scan_properties_command

__all__ = [
    "CLIError",
    "cli_error_handler",
    "extract_property_command",
    "scan_properties_command",
]
