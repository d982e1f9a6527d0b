"""File adapter for abstracting file system operations."""

import logging
import shutil
import zipfile
from pathlib import Path
from typing import Protocol, runtime_checkable

from gloveflash.core.errors import FileSystemError, create_file_error


logger = logging.getLogger(__name__)


@runtime_checkable
class FileAdapterProtocol(Protocol):
    """Protocol for file system operations."""

    def exists(self, path: Path) -> bool:
        """Check if a path exists.

        Args:
            path: Path to check

        Returns:
            True if path exists, False otherwise

        Raises:
            FileSystemError: If the path cannot be inspected
        """
        ...

    def copy_file(self, src: Path, dst: Path) -> None:
        """Copy a file's bytes from source to destination.

        Args:
            src: Source file path
            dst: Destination file path

        Raises:
            FileSystemError: If file cannot be copied
        """
        ...

    def remove_file(self, path: Path) -> None:
        """Remove a file.

        Args:
            path: Path to the file to remove

        Raises:
            FileSystemError: If file cannot be removed due to permissions or
                other errors (but not if file not found).
        """
        ...

    def list_archive(self, archive: Path) -> list[str]:
        """List the member names of a ZIP archive.

        Args:
            archive: Path to the ZIP archive

        Returns:
            Member names in archive order

        Raises:
            FileSystemError: If the archive cannot be read
        """
        ...

    def extract_member(self, archive: Path, member: str, dest_dir: Path) -> Path:
        """Extract a single member of a ZIP archive.

        Args:
            archive: Path to the ZIP archive
            member: Name of the member to extract
            dest_dir: Directory to extract into

        Returns:
            Path of the extracted file

        Raises:
            FileSystemError: If the member cannot be extracted
        """
        ...


class FileAdapter:
    """File system adapter implementation."""

    def exists(self, path: Path) -> bool:
        """Check if a path exists."""
        try:
            path.stat()
        except FileNotFoundError:
            return False
        except NotADirectoryError:
            return False
        except OSError as e:
            error = create_file_error(path, "exists", e)
            logger.error("Error inspecting path %s: %s", path, e)
            raise error from e
        return True

    def copy_file(self, src: Path, dst: Path) -> None:
        """Copy a file from source to destination."""
        try:
            logger.debug("Copying file: %s -> %s", src, dst)
            shutil.copyfile(src, dst)
            logger.debug("Successfully copied file: %s -> %s", src, dst)
        except FileNotFoundError as e:
            error = create_file_error(
                src, "copy_file", e, {"source": str(src), "destination": str(dst)}
            )
            logger.error("Source or destination not found: %s -> %s", src, dst)
            raise error from e
        except PermissionError as e:
            error = create_file_error(
                src, "copy_file", e, {"source": str(src), "destination": str(dst)}
            )
            logger.error("Permission denied copying file: %s -> %s", src, dst)
            raise error from e
        except OSError as e:
            error = create_file_error(
                src, "copy_file", e, {"source": str(src), "destination": str(dst)}
            )
            logger.error("Error copying file %s to %s: %s", src, dst, e)
            raise error from e

    def remove_file(self, path: Path) -> None:
        """Remove a file. Does not raise error if file not found."""
        try:
            logger.debug("Removing file: %s", path)
            path.unlink(missing_ok=True)
            logger.debug("Successfully removed file (or it didn't exist): %s", path)
        except PermissionError as e:
            error = create_file_error(path, "remove_file", e)
            logger.error("Permission denied removing file: %s", path)
            raise error from e
        except OSError as e:
            # IsADirectoryError and friends
            error = create_file_error(path, "remove_file", e)
            logger.error("Error removing file %s: %s", path, e)
            raise error from e

    def list_archive(self, archive: Path) -> list[str]:
        """List the member names of a ZIP archive."""
        try:
            with zipfile.ZipFile(archive) as zf:
                names = [info.filename for info in zf.infolist() if not info.is_dir()]
            logger.debug("Archive %s contains %d files", archive, len(names))
            return names
        except (zipfile.BadZipFile, OSError) as e:
            error = create_file_error(archive, "list_archive", e)
            logger.error("Cannot read archive %s: %s", archive, e)
            raise error from e

    def extract_member(self, archive: Path, member: str, dest_dir: Path) -> Path:
        """Extract a single member of a ZIP archive.

        ``zipfile`` recreates parent directories and strips absolute or
        parent-relative components from the member name.
        """
        try:
            with zipfile.ZipFile(archive) as zf:
                extracted = Path(zf.extract(member, path=dest_dir))
            logger.debug("Extracted %s from %s to %s", member, archive, extracted)
            return extracted
        except KeyError as e:
            error = create_file_error(
                archive, "extract_member", e, {"member": member}
            )
            logger.error("Member %s not found in archive %s", member, archive)
            raise error from e
        except (zipfile.BadZipFile, OSError) as e:
            error = create_file_error(
                archive, "extract_member", e, {"member": member}
            )
            logger.error("Error extracting %s from %s: %s", member, archive, e)
            raise error from e


def create_file_adapter() -> FileAdapterProtocol:
    """Create a file adapter with default implementation."""
    return FileAdapter()


__all__ = [
    "FileAdapter",
    "FileAdapterProtocol",
    "FileSystemError",
    "create_file_adapter",
]
