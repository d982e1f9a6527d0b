"""Download-and-flash pipeline."""

from contextlib import ExitStack
from pathlib import Path

from gloveflash.adapters.file_adapter import FileAdapterProtocol, create_file_adapter
from gloveflash.config.models import FlashConfig
from gloveflash.config.settings import DEFAULT_API_URL
from gloveflash.core.errors import FileSystemError, PayloadNotFoundError
from gloveflash.core.structlog_logger import get_struct_logger
from gloveflash.github.client import GitHubClient, create_github_client
from gloveflash.github.models import Artifact
from gloveflash.models.results import FlashResult

from .mounts import check_mounts
from .selection import select_latest_artifact


logger = get_struct_logger(__name__)


class FlashService:
    """Flashes the newest workflow artifact to both keyboard halves.

    One call to :meth:`run` performs the whole pipeline: check the mounted
    volumes, pick the newest artifact, download and unzip it, copy the
    firmware to every half, and remove the temporary files.
    """

    def __init__(
        self,
        config: FlashConfig,
        github_client: GitHubClient,
        file_adapter: FileAdapterProtocol | None = None,
    ):
        """Initialize flash service with dependencies.

        Args:
            config: Run configuration
            github_client: Client used to list and download artifacts
            file_adapter: File adapter for file operations
        """
        self.config = config
        self.github_client = github_client
        self.file_adapter = file_adapter or create_file_adapter()

    def run(self) -> FlashResult:
        """Run the pipeline once.

        Returns:
            Successful FlashResult listing the flashed destinations

        Raises:
            GloveflashError: On the first failing step; temporary files are
                removed before the error propagates
        """
        config = self.config
        log = logger.bind(repository=config.repository)

        mount_paths = check_mounts(config.mount_paths, self.file_adapter)

        artifacts = self.github_client.list_artifacts(config.owner, config.repo)
        artifact = select_latest_artifact(artifacts)

        result = FlashResult(
            success=True,
            artifact_id=artifact.id,
            artifact_name=artifact.name,
            firmware_filename=config.firmware_filename,
        )

        with ExitStack() as cleanup:
            payload = self._retrieve(artifact, cleanup)
            self._distribute(payload, mount_paths, result)

        log.info(
            "flash_completed",
            artifact_id=artifact.id,
            devices=len(result.devices_flashed),
        )
        return result

    def _retrieve(self, artifact: Artifact, cleanup: ExitStack) -> Path:
        """Download the artifact archive and extract the firmware file."""
        config = self.config

        url = self.github_client.get_artifact_download_url(
            config.owner, config.repo, artifact.id
        )

        # Registered before writing so partial downloads are removed too
        cleanup.callback(self._discard, config.archive_path)
        self.github_client.download(url, config.archive_path)

        members = self.file_adapter.list_archive(config.archive_path)
        if config.firmware_filename not in members:
            raise PayloadNotFoundError(config.firmware_filename, members)

        cleanup.callback(self._discard, config.payload_path)
        return self.file_adapter.extract_member(
            config.archive_path, config.firmware_filename, config.work_dir
        )

    def _distribute(
        self, payload: Path, mount_paths: dict[str, Path], result: FlashResult
    ) -> None:
        """Copy the firmware to each half in order, stopping at the first failure."""
        for side, mount_path in mount_paths.items():
            destination = mount_path / self.config.firmware_filename
            self.file_adapter.copy_file(payload, destination)
            logger.info("firmware_copied", side=side, destination=str(destination))
            result.add_flashed_device(destination)

    def _discard(self, path: Path) -> None:
        """Remove a temporary file, logging instead of raising on failure."""
        try:
            self.file_adapter.remove_file(path)
        except FileSystemError as e:
            logger.warning("cleanup_failed", path=str(path), error=str(e))


def create_flash_service(
    config: FlashConfig,
    token: str,
    api_url: str = DEFAULT_API_URL,
    file_adapter: FileAdapterProtocol | None = None,
) -> FlashService:
    """Create a FlashService with the default GitHub client.

    Args:
        config: Run configuration
        token: GitHub personal access token
        api_url: Base URL of the GitHub REST API
        file_adapter: Optional file adapter override

    Returns:
        Configured FlashService instance
    """
    return FlashService(
        config=config,
        github_client=create_github_client(token, base_url=api_url),
        file_adapter=file_adapter,
    )
