"""Models and errors for the GitHub Actions artifacts API."""

from datetime import datetime
from typing import Any

from pydantic import Field

from gloveflash.core.errors import GloveflashError
from gloveflash.models.base import GloveflashBaseModel


class Artifact(GloveflashBaseModel):
    """A workflow run artifact as returned by the GitHub REST API."""

    id: int
    name: str = ""
    size_in_bytes: int = 0
    archive_download_url: str | None = None
    expired: bool = False
    created_at: datetime
    expires_at: datetime | None = None
    updated_at: datetime | None = None


class ArtifactList(GloveflashBaseModel):
    """One page of the repository artifact listing."""

    total_count: int = 0
    artifacts: list[Artifact] = Field(default_factory=list)


class GitHubAPIError(GloveflashError):
    """Raised when the GitHub API answers with an error."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_data: Any = None,
    ):
        super().__init__(message, context={"status_code": status_code})
        self.status_code = status_code
        self.response_data = response_data


class AuthenticationError(GitHubAPIError):
    """Raised when the token is rejected or lacks the required scopes."""


class NotFoundError(GitHubAPIError):
    """Raised when the repository or artifact does not exist."""


class NetworkError(GitHubAPIError):
    """Raised when GitHub cannot be reached."""
