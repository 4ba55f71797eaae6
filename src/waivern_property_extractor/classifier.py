"""Property declaration line classification."""

import re

VISIBILITY_KEYWORDS = frozenset({"private", "public", "protected"})

PROPERTY_SIGIL = "$"

# `$`-prefixed identifier as it appears in a declaration or on any line
PROPERTY_TOKEN_PATTERN = re.compile(r"\$[a-zA-Z_][a-zA-Z_0-9]*")

_DECLARATION_PATTERN = re.compile(
    r"^\s*(private|public|protected)\b\s" + PROPERTY_TOKEN_PATTERN.pattern
)


def is_property_declaration(text: str) -> bool:
    """Check whether a line declares a class property.

    A declaration is optional indentation, a visibility keyword, a single
    whitespace character and a `$`-prefixed identifier.

    Args:
        text: Text of a single line

    Returns:
        True if the line declares a property

    Example:
        >>> is_property_declaration("    private $name;")
        True
        >>> is_property_declaration("    private static $name;")
        False

    """
    return _DECLARATION_PATTERN.match(text) is not None
