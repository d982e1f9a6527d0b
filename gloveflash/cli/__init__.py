"""Command line interface for Gloveflash."""

from .app import app, main


__all__ = ["app", "main"]
