"""Selection of the artifact to flash."""

from collections.abc import Sequence

from gloveflash.core.errors import ArtifactExpiredError, NoArtifactsError
from gloveflash.core.structlog_logger import get_struct_logger
from gloveflash.github.models import Artifact


logger = get_struct_logger(__name__)


def select_latest_artifact(artifacts: Sequence[Artifact]) -> Artifact:
    """Pick the most recently created artifact.

    Raises:
        NoArtifactsError: If the listing is empty
        ArtifactExpiredError: If the newest artifact has expired
    """
    if not artifacts:
        raise NoArtifactsError("no artifacts to flash")

    latest = max(artifacts, key=lambda artifact: artifact.created_at)
    if latest.expired:
        raise ArtifactExpiredError(
            f"latest artifact {latest.id} ({latest.name}) has expired",
            context={"artifact_id": latest.id, "created_at": str(latest.created_at)},
        )

    logger.info(
        "artifact_selected",
        artifact_id=latest.id,
        name=latest.name,
        created_at=latest.created_at.isoformat(),
    )
    return latest
