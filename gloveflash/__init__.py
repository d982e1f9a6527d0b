"""Gloveflash - flash the latest CI firmware build to a split keyboard."""

from ._version import __version__
from .models.results import FlashResult


__all__ = [
    "FlashResult",
    "__version__",
]

# Import CLI after setting __version__ to avoid circular imports
from .cli import app, main


__all__ += ["app", "main"]
