"""Main entry point for the property extractor CLI.

Commands:
- extract: show the property at a line/column of a PHP file
- scan: list every property declared in a PHP file
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv

from waivern_property_extractor.cli import (
    extract_property_command,
    scan_properties_command,
)

# Environment variables (e.g. PROPERTY_EXTRACTOR_LOG_LEVEL) from a local .env
load_dotenv()

app = typer.Typer(name="property-extractor", no_args_is_help=True)

SourceFile = Annotated[
    Path,
    typer.Argument(
        help="Path to the PHP source file",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
]
ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="YAML file with extractor configuration",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
]
LogLevelOption = Annotated[
    str,
    typer.Option(
        "--log-level",
        help="Set logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        envvar="PROPERTY_EXTRACTOR_LOG_LEVEL",
        case_sensitive=False,
    ),
]


@app.command()
def extract(
    source_file: SourceFile,
    line: Annotated[
        int, typer.Option("--line", "-l", help="1-based line number", min=1)
    ],
    column: Annotated[
        int | None,
        typer.Option(
            "--column",
            help="1-based column of the cursor (defaults to the end of the line)",
            min=1,
        ),
    ] = None,
    config: ConfigOption = None,
    log_level: LogLevelOption = "WARNING",
) -> None:
    """Show the property at a position as JSON.

    Example:
        property-extractor extract src/User.php --line 12 --column 14

    """
    extract_property_command(source_file, line, column, config, log_level)


@app.command()
def scan(
    source_file: SourceFile,
    config: ConfigOption = None,
    log_level: LogLevelOption = "WARNING",
    as_json: Annotated[
        bool, typer.Option("--json", help="Print the properties as JSON")
    ] = False,
) -> None:
    """List every property declared in a file with its accessor names.

    Example:
        property-extractor scan src/User.php --json

    """
    scan_properties_command(source_file, config, log_level, as_json)


if __name__ == "__main__":
    app()
