"""Error handling decorators for CLI commands."""

import logging
import sys
import traceback
from collections.abc import Callable
from functools import wraps
from typing import Any

import typer

from gloveflash.cli.helpers.output import print_error_message
from gloveflash.core.errors import (
    ArtifactError,
    ConfigError,
    DeviceNotMountedError,
    FileSystemError,
    FlashError,
)
from gloveflash.core.structlog_logger import get_struct_logger
from gloveflash.github.models import AuthenticationError, GitHubAPIError, NetworkError


__all__ = ["handle_errors", "print_stack_trace_if_verbose"]

logger = get_struct_logger(__name__)

# Checked in order, so subclasses come before their bases
_ERROR_EVENTS: list[tuple[type[Exception], str]] = [
    (ConfigError, "configuration_error"),
    (DeviceNotMountedError, "device_not_mounted"),
    (ArtifactError, "artifact_error"),
    (FlashError, "flash_error"),
    (AuthenticationError, "github_authentication_error"),
    (NetworkError, "github_network_error"),
    (GitHubAPIError, "github_api_error"),
    (FileSystemError, "file_system_error"),
]


def handle_errors(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator to handle common exceptions in CLI commands.

    This decorator catches common exceptions and provides appropriate
    error messages to the user before exiting with a non-zero status code.

    Args:
        func: The function to decorate

    Returns:
        Decorated function with error handling
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (typer.Exit, typer.Abort):
            raise
        except Exception as e:
            event = next(
                (name for cls, name in _ERROR_EVENTS if isinstance(e, cls)),
                "unexpected_error",
            )
            exc_info = logging.getLogger().isEnabledFor(logging.DEBUG)
            logger.error(
                event,
                error=str(e),
                error_type=e.__class__.__name__,
                exc_info=exc_info,
            )
            message = str(e)
            if event == "unexpected_error":
                message = f"Unexpected error: {e}"
            print_error_message(message)
            print_stack_trace_if_verbose()
            raise typer.Exit(1) from e

    return wrapper


def print_stack_trace_if_verbose() -> None:
    """Print stack trace if verbose/debug mode is enabled."""
    if any(arg in sys.argv for arg in ["-v", "-vv", "--verbose", "--debug"]):
        print("\nStack trace:", file=sys.stderr)
        traceback.print_exc(file=sys.stderr)
