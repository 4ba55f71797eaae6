"""CLI command implementation for listing every property in a file."""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.json import JSON
from rich.markup import escape
from rich.table import Table

from waivern_property_extractor.cli.errors import cli_error_handler
from waivern_property_extractor.cli.infrastructure import build_extractor
from waivern_property_extractor.document import SourceDocument
from waivern_property_extractor.logging import setup_logging
from waivern_property_extractor.models import PropertyRecord

logger = logging.getLogger(__name__)
console = Console()

_ABSENT = "[dim]-[/dim]"


def scan_properties_command(
    source_file: Path,
    config_path: Path | None,
    log_level: str,
    as_json: bool,
) -> None:
    """List every property declared in a file."""
    setup_logging(level=log_level)

    with cli_error_handler("scan", "Property scan failed"):
        extractor = build_extractor(config_path)
        records = extractor.extract_all(SourceDocument.from_path(source_file))

        if as_json:
            console.print(
                JSON.from_data([record.to_summary() for record in records]),
                soft_wrap=True,
            )
            return

        if not records:
            console.print(f"[yellow]No properties found in {source_file}[/yellow]")
            return

        console.print(_format_records(records, source_file))


def _format_records(records: list[PropertyRecord], source_file: Path) -> Table:
    table = Table(title=f"Properties in {source_file}", show_header=True)
    table.add_column("Property", style="cyan")
    table.add_column("Type")
    table.add_column("Type hint")
    table.add_column("Getter", style="green")
    table.add_column("Setter", style="green")
    table.add_column("Description")

    for record in records:
        table.add_row(
            f"${record.name}",
            escape(record.type) if record.type else _ABSENT,
            escape(record.type_hint) if record.type_hint else _ABSENT,
            record.getter_name(),
            record.setter_name(),
            escape(record.description) if record.description else _ABSENT,
        )
    return table
