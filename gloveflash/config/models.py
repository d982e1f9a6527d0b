"""Immutable run configuration for the flash pipeline."""

from pathlib import Path

from pydantic import ConfigDict, Field

from gloveflash.config.settings import FlashSettings
from gloveflash.models.base import GloveflashBaseModel


DEFAULT_MOUNT_DIRECTORY = Path("/Volumes")
DEFAULT_LEFT_VOLUME = "GLV80LHBOOT"
DEFAULT_RIGHT_VOLUME = "GLV80RHBOOT"
DEFAULT_FIRMWARE_FILENAME = "glove80.uf2"
DEFAULT_ARCHIVE_FILENAME = "temp.zip"


class FlashConfig(GloveflashBaseModel):
    """Everything a single flash run needs to know.

    Built once per invocation and never mutated afterwards.
    """

    model_config = ConfigDict(frozen=True)

    owner: str
    repo: str
    directory: Path = DEFAULT_MOUNT_DIRECTORY
    left_volume: str = DEFAULT_LEFT_VOLUME
    right_volume: str = DEFAULT_RIGHT_VOLUME
    firmware_filename: str = DEFAULT_FIRMWARE_FILENAME
    archive_filename: str = DEFAULT_ARCHIVE_FILENAME
    work_dir: Path = Field(default_factory=Path.cwd)

    @property
    def repository(self) -> str:
        return f"{self.owner}/{self.repo}"

    @property
    def mount_paths(self) -> dict[str, Path]:
        """Expected mount path of each keyboard half, left first."""
        return {
            "left": self.directory / self.left_volume,
            "right": self.directory / self.right_volume,
        }

    @property
    def archive_path(self) -> Path:
        return self.work_dir / self.archive_filename

    @property
    def payload_path(self) -> Path:
        return self.work_dir / self.firmware_filename

    @classmethod
    def from_settings(
        cls,
        settings: FlashSettings,
        directory: Path | None = None,
        work_dir: Path | None = None,
    ) -> "FlashConfig":
        """Create a config from environment settings and CLI values.

        Args:
            settings: Loaded environment settings
            directory: Parent directory of the mounted volumes
            work_dir: Directory receiving the temporary files

        Returns:
            Frozen FlashConfig
        """
        values: dict[str, object] = {
            "owner": settings.owner,
            "repo": settings.repo,
        }
        if directory is not None:
            values["directory"] = directory
        if work_dir is not None:
            values["work_dir"] = work_dir
        return cls(**values)  # type: ignore[arg-type]
