"""Adapters for external systems."""

from .file_adapter import FileAdapter, FileAdapterProtocol, create_file_adapter


__all__ = ["FileAdapter", "FileAdapterProtocol", "create_file_adapter"]
