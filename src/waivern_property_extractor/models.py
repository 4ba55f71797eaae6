"""Data model for extracted properties."""

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_PSEUDO_TYPES = frozenset(
    {"mixed", "number", "callback", "array|object", "void", "null", "integer"}
)

_ARRAY_SUFFIX = "[]"
_ARRAY_TYPE_HINT = "array"
_UNION_SEPARATOR = "|"
_BOOLEAN_TYPE = "bool"


def resolve_type_hint(
    declared_type: str | None,
    pseudo_types: frozenset[str] = DEFAULT_PSEUDO_TYPES,
) -> str | None:
    """Derive a usable type hint from a declared type.

    `Foo[]` collapses to `array`. Union types and pseudo-types have no hint.

    Args:
        declared_type: Raw declared type (None if absent)
        pseudo_types: Types that are never valid hints

    Returns:
        The type hint, or None if the type is absent or unusable

    Example:
        >>> resolve_type_hint("string[]")
        'array'
        >>> resolve_type_hint("int|string") is None
        True

    """
    if declared_type is None:
        return None

    type_hint = declared_type
    if declared_type.find(_ARRAY_SUFFIX) > 0:
        type_hint = _ARRAY_TYPE_HINT

    if _UNION_SEPARATOR in type_hint or type_hint in pseudo_types:
        return None
    return type_hint


class PropertyRecord(BaseModel):
    """A property declaration with its documented metadata.

    Built once per extraction and never modified afterwards. The accessor
    name and description helpers feed getter/setter generation.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    type: str | None = None
    type_hint: str | None = None
    description: str | None = None
    indentation: str = ""

    def getter_name(self) -> str:
        """Name of the getter (`is` prefix for booleans)."""
        prefix = "is" if self.type == _BOOLEAN_TYPE else "get"
        return self._method_name(prefix)

    def setter_name(self) -> str:
        """Name of the setter."""
        return self._method_name("set")

    def getter_description(self) -> str:
        """One-line description for the getter."""
        return self._method_description("Get ")

    def setter_description(self) -> str:
        """One-line description for the setter."""
        return self._method_description("Set ")

    def to_summary(self) -> dict[str, str | None]:
        """Serialise fields together with the derived accessor strings."""
        return {
            **self.model_dump(),
            "getter_name": self.getter_name(),
            "setter_name": self.setter_name(),
            "getter_description": self.getter_description(),
            "setter_description": self.setter_description(),
        }

    def _method_name(self, prefix: str) -> str:
        words = (part[:1].upper() + part[1:] for part in self.name.split("_"))
        return prefix + "".join(words)

    def _method_description(self, prefix: str) -> str:
        if self.description:
            return prefix + self.description[:1].lower() + self.description[1:]
        return prefix + "the value of " + self.name
