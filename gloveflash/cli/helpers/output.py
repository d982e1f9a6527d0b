"""Helper functions for CLI output formatting with Rich integration."""

from gloveflash.cli.helpers.theme import get_themed_console
from gloveflash.models.results import FlashResult


def print_success_message(message: str, use_emoji: bool = True) -> None:
    """Print a success message with a checkmark."""
    get_themed_console(use_emoji=use_emoji).print_success(message)


def print_error_message(message: str, use_emoji: bool = True) -> None:
    """Print an error message to stderr.

    The first line carries the error icon; any further lines are printed
    as list items below it.
    """
    console = get_themed_console(use_emoji=use_emoji, stderr=True)
    first, *rest = message.splitlines() or [""]
    console.print_error(first)
    for line in rest:
        console.print_list_item(line)


def print_info_message(message: str, use_emoji: bool = True) -> None:
    """Print an info message with icon."""
    get_themed_console(use_emoji=use_emoji).print_info(message)


def print_list_item(item: str, indent: int = 1, use_emoji: bool = True) -> None:
    """Print a list item with bullet and indentation."""
    get_themed_console(use_emoji=use_emoji).print_list_item(item, indent)


def print_flash_result(result: FlashResult, use_emoji: bool = True) -> None:
    """Print the summary of a completed flash run.

    Args:
        result: The flash result
        use_emoji: Whether to use emoji icons
    """
    print_success_message(
        f"Flashed artifact {result.artifact_name or result.artifact_id} "
        f"to {len(result.devices_flashed)} device(s)",
        use_emoji=use_emoji,
    )
    for device in result.devices_flashed:
        print_list_item(str(device), use_emoji=use_emoji)
