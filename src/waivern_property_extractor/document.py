"""Host document abstraction consumed by the property extractor.

The extractor never reads files itself. It works against anything that
satisfies the TextDocument protocol: random-access line lookup, word-range
lookup at a position and text retrieval for a range. SourceDocument is the
in-memory implementation used by the command-line host and the tests.
"""

import re
from pathlib import Path
from typing import Protocol, Self, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

_DEFAULT_ENCODING = "utf-8"

# Editor word pattern for PHP: `$` is part of a word so `$name` is one token
_WORD_PATTERN = re.compile(r"[^\s\-`~!@#%^&*()=+\[{\]}\\|;:'\",.<>/?]+")

_LEADING_WHITESPACE = re.compile(r"\s*")


class Position(BaseModel):
    """A zero-based line and character offset."""

    model_config = ConfigDict(frozen=True)

    line: int = Field(ge=0)
    character: int = Field(ge=0)


class Range(BaseModel):
    """A span between two positions on the same line (end exclusive)."""

    model_config = ConfigDict(frozen=True)

    start: Position
    end: Position


class Selection(BaseModel):
    """An editor selection; `active` is where the cursor sits."""

    model_config = ConfigDict(frozen=True)

    anchor: Position
    active: Position

    @classmethod
    def at(cls, position: Position) -> Self:
        """Create an empty selection (a bare cursor) at a position."""
        return cls(anchor=position, active=position)


class TextLine(BaseModel):
    """A single line of a document."""

    model_config = ConfigDict(frozen=True)

    line_number: int = Field(ge=0)
    text: str

    @property
    def first_non_whitespace_character_index(self) -> int:
        """Offset of the first non-whitespace character (or the line length)."""
        match = _LEADING_WHITESPACE.match(self.text)
        return match.end() if match else 0

    @property
    def is_empty_or_whitespace(self) -> bool:
        """Whether the line holds nothing but whitespace."""
        return self.first_non_whitespace_character_index == len(self.text)


@runtime_checkable
class TextDocument(Protocol):
    """Protocol for the document supplied by the host editor.

    Each implementation must provide:
    - The number of lines
    - Line lookup by zero-based index
    - Word-range lookup at a position (host-defined word boundaries)
    - Text retrieval for a range
    """

    @property
    def line_count(self) -> int:
        """Number of lines in the document."""
        ...

    def line_at(self, line: int) -> TextLine:
        """Return the line at a zero-based index.

        Raises:
            IndexError: If the index is outside the document

        """
        ...

    def get_word_range_at_position(self, position: Position) -> Range | None:
        """Return the range of the word at (or ending at) a position, if any."""
        ...

    def get_text(self, text_range: Range) -> str:
        """Return the text covered by a single-line range."""
        ...


class SourceDocument:
    """In-memory TextDocument over a source string."""

    def __init__(self, text: str) -> None:
        """Initialise from source text.

        Args:
            text: Full document text; `\\n`, `\\r\\n` and `\\r` all end a line

        """
        self._lines = text.splitlines() or [""]
        if text.endswith(("\n", "\r")):
            self._lines.append("")

    @classmethod
    def from_path(cls, path: Path) -> Self:
        """Read a document from a file."""
        return cls(path.read_text(encoding=_DEFAULT_ENCODING))

    @property
    def line_count(self) -> int:
        """Number of lines in the document."""
        return len(self._lines)

    def line_at(self, line: int) -> TextLine:
        """Return the line at a zero-based index."""
        if not 0 <= line < len(self._lines):
            raise IndexError(
                f"Line {line} is out of range (document has {len(self._lines)} lines)"
            )
        return TextLine(line_number=line, text=self._lines[line])

    def get_word_range_at_position(self, position: Position) -> Range | None:
        """Return the word touching the position, end position included."""
        text = self.line_at(position.line).text
        for match in _WORD_PATTERN.finditer(text):
            if match.start() <= position.character <= match.end():
                return Range(
                    start=Position(line=position.line, character=match.start()),
                    end=Position(line=position.line, character=match.end()),
                )
            if match.start() > position.character:
                break
        return None

    def get_text(self, text_range: Range) -> str:
        """Return the text covered by a single-line range."""
        text = self.line_at(text_range.start.line).text
        return text[text_range.start.character : text_range.end.character]
