"""Tests for CLI error handling."""

import pytest
import typer

from waivern_property_extractor.cli import CLIError, cli_error_handler


class TestCLIError:
    """Test CLIError formatting."""

    def test_message_includes_command(self) -> None:
        """The failing command prefixes the message."""
        error = CLIError("Line 3 is not a property declaration", command="extract")

        assert str(error) == (
            "CLI command 'extract' failed: Line 3 is not a property declaration"
        )

    def test_message_without_command(self) -> None:
        """Without a command the message is unchanged."""
        assert str(CLIError("boom")) == "boom"


class TestCLIErrorHandler:
    """Test the error handling context manager."""

    def test_cli_error_exits_with_status_one(self) -> None:
        """CLIError inside the block becomes exit status 1."""
        with pytest.raises(typer.Exit) as exc_info:
            with cli_error_handler("scan", "Property scan failed"):
                raise CLIError("bad input", command="scan")

        assert exc_info.value.exit_code == 1

    def test_other_errors_are_wrapped(self) -> None:
        """Other exceptions are wrapped in a CLIError for the command."""
        original = ValueError("unreadable")

        with pytest.raises(typer.Exit) as exc_info:
            with cli_error_handler("extract", "Property extraction failed"):
                raise original

        cause = exc_info.value.__cause__
        assert isinstance(cause, CLIError)
        assert cause.command == "extract"
        assert cause.original_error is original

    def test_success_passes_through(self) -> None:
        """Nothing happens when the block succeeds."""
        with cli_error_handler("scan", "Property scan failed"):
            value = 1

        assert value == 1
