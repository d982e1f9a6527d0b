"""CLI helper functions."""

from .output import (
    print_error_message,
    print_flash_result,
    print_info_message,
    print_list_item,
    print_success_message,
)


__all__ = [
    "print_error_message",
    "print_flash_result",
    "print_info_message",
    "print_list_item",
    "print_success_message",
]
