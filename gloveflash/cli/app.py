"""Main CLI application for Gloveflash."""

import sys
from pathlib import Path
from typing import Annotated

import typer

from gloveflash._version import __version__
from gloveflash.cli.decorators.error_handling import handle_errors
from gloveflash.cli.helpers.output import print_flash_result, print_info_message
from gloveflash.config.models import DEFAULT_MOUNT_DIRECTORY, FlashConfig
from gloveflash.config.settings import load_settings
from gloveflash.core.logging import level_from_flags, setup_logging
from gloveflash.core.structlog_logger import get_struct_logger
from gloveflash.flash.service import create_flash_service


__all__ = ["app", "main", "__version__"]

logger = get_struct_logger(__name__)


def _version_callback(value: bool) -> None:
    if value:
        print(f"Gloveflash v{__version__}")
        raise typer.Exit()


app = typer.Typer(
    name="gloveflash",
    help=f"""Gloveflash v{__version__}

Download the latest firmware artifact built by GitHub Actions and copy it
to both keyboard halves mounted in bootloader mode.

Required environment (or .env file): OWNER, REPO, GITHUB_PAT""",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.command()
@handle_errors
def flash(
    directory: Annotated[
        Path,
        typer.Option(
            "--directory",
            "-d",
            help="Directory under which the bootloader volumes are mounted",
        ),
    ] = DEFAULT_MOUNT_DIRECTORY,
    verbose: Annotated[
        int,
        typer.Option(
            "-v",
            "--verbose",
            count=True,
            help="Increase verbosity (-v=INFO, -vv=DEBUG)",
        ),
    ] = 0,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable debug logging (equivalent to -vv)"),
    ] = False,
    log_file: Annotated[
        Path | None, typer.Option("--log-file", help="Also write JSON logs to file")
    ] = None,
    json_logs: Annotated[
        bool,
        typer.Option("--json-logs", help="Render console logs as JSON lines"),
    ] = False,
    no_emoji: Annotated[
        bool,
        typer.Option("--no-emoji", help="Disable emoji icons in output"),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            help="Show version and exit",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """Flash the latest workflow artifact to both keyboard halves.

    Reads OWNER, REPO and GITHUB_PAT from the environment or a .env file.
    """
    setup_logging(
        level=level_from_flags(verbose, debug),
        log_file=log_file,
        json_logs=json_logs,
    )

    settings = load_settings()
    config = FlashConfig.from_settings(settings, directory=directory)
    logger.info(
        "flash_started",
        repository=config.repository,
        directory=str(config.directory),
    )

    print_info_message(
        f"Flashing latest artifact of {config.repository}", use_emoji=not no_emoji
    )
    service = create_flash_service(
        config,
        token=settings.github_pat.get_secret_value(),
        api_url=settings.github_api_url,
    )
    result = service.run()
    print_flash_result(result, use_emoji=not no_emoji)


def main() -> int:
    """Main CLI entry point."""
    try:
        app()
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 0
    return 0


if __name__ == "__main__":
    sys.exit(main())
