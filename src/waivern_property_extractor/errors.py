"""Error classes for the property extractor.

This module provides:
- PropertyExtractorError: Base exception class for all extractor errors
- NoPropertyFoundError: Raised when no property can be resolved at a position
- ExtractorConfigError: Raised when extractor configuration is invalid
"""

NO_PROPERTY_FOUND_MESSAGE = (
    "No property found. Please select a property to use this extension."
)


class PropertyExtractorError(Exception):
    """Base exception for all property extractor errors."""

    pass


class NoPropertyFoundError(PropertyExtractorError):
    """Raised when no `$`-prefixed identifier exists at or near a position."""

    def __init__(self, message: str = NO_PROPERTY_FOUND_MESSAGE) -> None:
        """Initialise with the user-facing message."""
        super().__init__(message)


class ExtractorConfigError(PropertyExtractorError):
    """Raised when extractor configuration is invalid."""

    pass
