"""Property extraction from a host document."""

import logging

from waivern_property_extractor.classifier import (
    PROPERTY_SIGIL,
    PROPERTY_TOKEN_PATTERN,
    VISIBILITY_KEYWORDS,
    is_property_declaration,
)
from waivern_property_extractor.config import PropertyExtractorConfig
from waivern_property_extractor.doc_block import scan_doc_block
from waivern_property_extractor.document import (
    Position,
    Selection,
    TextDocument,
    TextLine,
)
from waivern_property_extractor.errors import NoPropertyFoundError
from waivern_property_extractor.models import PropertyRecord, resolve_type_hint

logger = logging.getLogger(__name__)

_TOKEN_SEPARATOR = " "


class PropertyExtractor:
    """Recognises property declarations and extracts their metadata.

    Stateless apart from its configuration: every call reads the document
    afresh and returns a new PropertyRecord.
    """

    def __init__(self, config: PropertyExtractorConfig | None = None) -> None:
        """Initialise the extractor.

        Args:
            config: Extractor configuration (defaults apply if None)

        """
        self._config = config or PropertyExtractorConfig()

    @property
    def config(self) -> PropertyExtractorConfig:
        """Active configuration."""
        return self._config

    @staticmethod
    def is_property_declaration(line: TextLine | str) -> bool:
        """Check whether a line declares a property."""
        text = line.text if isinstance(line, TextLine) else line
        return is_property_declaration(text)

    def from_line(
        self, document: TextDocument, line: TextLine | int
    ) -> PropertyRecord | None:
        """Extract the property declared on a line.

        Resolution happens at the last character of the line (the statement
        terminator).

        Args:
            document: Host document
            line: The line, or its zero-based index

        Returns:
            PropertyRecord, or None if the line is not a property declaration

        Raises:
            NoPropertyFoundError: If no property token can be resolved

        """
        if isinstance(line, int):
            line = document.line_at(line)

        if not is_property_declaration(line.text):
            return None

        position = Position(
            line=line.line_number, character=max(len(line.text) - 1, 0)
        )
        return self.from_position(document, position)

    def from_selection(
        self, document: TextDocument, selection: Selection
    ) -> PropertyRecord:
        """Extract the property at the active end of a selection."""
        return self.from_position(document, selection.active)

    def from_position(
        self, document: TextDocument, position: Position
    ) -> PropertyRecord:
        """Extract the property whose identifier sits at or near a position.

        Args:
            document: Host document
            position: Cursor position

        Returns:
            Populated PropertyRecord

        Raises:
            NoPropertyFoundError: If no `$`-prefixed identifier is found

        """
        declaration = document.line_at(position.line)
        token = self._resolve_token(document, position, declaration)

        inline_type = self._parse_inline_type(declaration.text, token)
        findings = scan_doc_block(
            lambda index: document.line_at(index).text,
            declaration.line_number,
            known_type=inline_type,
        )

        # A documented type always replaces the inline one
        declared_type = findings.type if findings.type is not None else inline_type

        record = PropertyRecord(
            name=token.removeprefix(PROPERTY_SIGIL),
            type=declared_type,
            type_hint=resolve_type_hint(declared_type, self._config.pseudo_types),
            description=findings.description,
            indentation=declaration.text[
                : declaration.first_non_whitespace_character_index
            ],
        )
        logger.debug(
            "Extracted property %r at line %d (type=%r)",
            record.name,
            declaration.line_number,
            record.type,
        )
        return record

    def extract_all(self, document: TextDocument) -> list[PropertyRecord]:
        """Extract every property declared in a document, in order."""
        records: list[PropertyRecord] = []
        for index in range(document.line_count):
            line = document.line_at(index)
            if line.is_empty_or_whitespace:
                continue

            record = self.from_line(document, line)
            if record is not None:
                records.append(record)

        logger.debug("Found %d properties", len(records))
        return records

    def _resolve_token(
        self, document: TextDocument, position: Position, line: TextLine
    ) -> str:
        """Resolve the `$`-prefixed token at a position.

        The word under the cursor is used when it is a property token,
        otherwise the first property token on the line.
        """
        word_range = document.get_word_range_at_position(position)
        if word_range is not None:
            word = document.get_text(word_range)
            if PROPERTY_TOKEN_PATTERN.fullmatch(word):
                return word
            logger.debug("Word %r at %s is not a property token", word, position)

        match = PROPERTY_TOKEN_PATTERN.search(line.text)
        if match is None:
            raise NoPropertyFoundError()
        return match.group(0)

    def _parse_inline_type(self, text: str, token: str) -> str | None:
        """Return the token right before the identifier, unless it is a keyword."""
        tokens = text[:-1].lstrip().split(_TOKEN_SEPARATOR)
        if token not in tokens:
            return None

        position = tokens.index(token)
        if position == 0:
            return None

        candidate = tokens[position - 1]
        if not candidate or candidate in VISIBILITY_KEYWORDS:
            return None
        return candidate
