"""Tests for CLI output helpers and error handling."""

from pathlib import Path

import pytest
import typer

from gloveflash.cli.decorators import handle_errors
from gloveflash.cli.helpers import (
    print_error_message,
    print_flash_result,
    print_success_message,
)
from gloveflash.cli.helpers.theme import Icons
from gloveflash.core.errors import ConfigError, PayloadNotFoundError
from gloveflash.models.results import FlashResult


class TestIcons:
    def test_emoji_and_text_modes(self):
        assert Icons.get_icon("SUCCESS") == "✅"
        assert Icons.get_icon("SUCCESS", use_emoji=False) == "[OK]"
        assert Icons.get_icon("UNKNOWN") == ""

    def test_format_without_icon(self):
        assert Icons.format_with_icon("UNKNOWN", "hello") == "hello"


class TestOutputHelpers:
    def test_success_goes_to_stdout(self, capsys):
        print_success_message("done", use_emoji=False)

        captured = capsys.readouterr()
        assert captured.out.strip() == "[OK] done"
        assert captured.err == ""

    def test_error_goes_to_stderr_line_by_line(self, capsys):
        print_error_message("first problem\nsecond problem", use_emoji=False)

        captured = capsys.readouterr()
        lines = captured.err.strip().splitlines()
        assert lines[0] == "[ERROR] first problem"
        assert lines[1].strip() == "- second problem"
        assert captured.out == ""

    def test_brackets_are_printed_verbatim(self, capsys):
        print_success_message("found [bold]glove80.uf2[/bold]", use_emoji=False)

        assert "[bold]glove80.uf2[/bold]" in capsys.readouterr().out

    def test_flash_result_success(self, capsys):
        result = FlashResult(
            success=True,
            artifact_id=42,
            artifact_name="glove80",
            devices_flashed=[Path("/Volumes/GLV80LHBOOT/glove80.uf2")],
        )

        print_flash_result(result, use_emoji=False)

        out = capsys.readouterr().out
        assert "Flashed artifact glove80 to 1 device(s)" in out
        assert "/Volumes/GLV80LHBOOT/glove80.uf2" in out


class TestHandleErrors:
    def test_passes_return_value_through(self):
        @handle_errors
        def command() -> str:
            return "ok"

        assert command() == "ok"

    def test_known_error_exits_with_one(self, capsys):
        @handle_errors
        def command() -> None:
            raise ConfigError("missing required environment variables: OWNER")

        with pytest.raises(typer.Exit) as exc_info:
            command()

        assert exc_info.value.exit_code == 1
        assert "missing required environment variables: OWNER" in capsys.readouterr().err

    def test_artifact_error_message(self, capsys):
        @handle_errors
        def command() -> None:
            raise PayloadNotFoundError("glove80.uf2", ["other.uf2"])

        with pytest.raises(typer.Exit):
            command()

        assert "found: other.uf2" in capsys.readouterr().err

    def test_unexpected_error_is_labelled(self, capsys):
        @handle_errors
        def command() -> None:
            raise KeyError("artifacts")

        with pytest.raises(typer.Exit) as exc_info:
            command()

        assert exc_info.value.exit_code == 1
        assert "Unexpected error" in capsys.readouterr().err

    def test_exit_is_not_intercepted(self):
        @handle_errors
        def command() -> None:
            raise typer.Exit(3)

        with pytest.raises(typer.Exit) as exc_info:
            command()

        assert exc_info.value.exit_code == 3
