"""GitHub Actions artifacts client."""

from .client import GitHubClient, create_github_client
from .models import (
    Artifact,
    ArtifactList,
    AuthenticationError,
    GitHubAPIError,
    NetworkError,
    NotFoundError,
)


__all__ = [
    "GitHubClient",
    "create_github_client",
    "Artifact",
    "ArtifactList",
    "GitHubAPIError",
    "AuthenticationError",
    "NotFoundError",
    "NetworkError",
]
