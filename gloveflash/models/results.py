"""Result models returned by Gloveflash operations."""

from datetime import datetime
from pathlib import Path

from pydantic import Field

from gloveflash.core.structlog_logger import get_struct_logger
from gloveflash.models.base import GloveflashBaseModel


logger = get_struct_logger(__name__)


class BaseResult(GloveflashBaseModel):
    """Base class for all operation results."""

    success: bool
    timestamp: datetime = Field(default_factory=datetime.now)
    messages: list[str] = Field(default_factory=list)

    def add_message(self, message: str) -> None:
        """Add an informational message."""
        self.messages.append(message)
        logger.debug("result_message_added", message=message)


class FlashResult(BaseResult):
    """Outcome of a download-and-flash run."""

    artifact_id: int | None = None
    artifact_name: str | None = None
    firmware_filename: str | None = None
    devices_flashed: list[Path] = Field(default_factory=list)

    def add_flashed_device(self, destination: Path) -> None:
        self.devices_flashed.append(destination)
        self.add_message(f"Copied firmware to {destination}")
