"""CLI command implementation for extracting a single property."""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.json import JSON

from waivern_property_extractor.cli.errors import CLIError, cli_error_handler
from waivern_property_extractor.cli.infrastructure import build_extractor
from waivern_property_extractor.document import Position, SourceDocument
from waivern_property_extractor.logging import setup_logging

logger = logging.getLogger(__name__)
console = Console()

# CLI positions are 1-based, documents are 0-based
_POSITION_INDEX_OFFSET = 1


def extract_property_command(
    source_file: Path,
    line: int,
    column: int | None,
    config_path: Path | None,
    log_level: str,
) -> None:
    """Print the property at a 1-based line/column as JSON.

    Without a column the whole line is treated as a declaration.
    """
    setup_logging(level=log_level)

    with cli_error_handler("extract", "Property extraction failed"):
        extractor = build_extractor(config_path)
        document = SourceDocument.from_path(source_file)
        line_index = line - _POSITION_INDEX_OFFSET
        if not 0 <= line_index < document.line_count:
            raise CLIError(
                f"Line {line} is outside {source_file} "
                f"({document.line_count} lines)",
                command="extract",
            )

        if column is None:
            record = extractor.from_line(document, line_index)
            if record is None:
                raise CLIError(
                    f"Line {line} is not a property declaration", command="extract"
                )
        else:
            position = Position(
                line=line_index,
                character=max(column - _POSITION_INDEX_OFFSET, 0),
            )
            record = extractor.from_position(document, position)

        logger.debug("Extracted %r from %s", record.name, source_file)
        console.print(JSON.from_data(record.to_summary()), soft_wrap=True)
