"""GitHub REST API client for workflow artifacts."""

from pathlib import Path
from typing import Any
from urllib.parse import urljoin

import requests
from pydantic import ValidationError

from gloveflash._version import __version__
from gloveflash.config.settings import DEFAULT_API_URL
from gloveflash.core.errors import create_file_error
from gloveflash.core.structlog_logger import get_struct_logger

from .models import (
    Artifact,
    ArtifactList,
    AuthenticationError,
    GitHubAPIError,
    NetworkError,
    NotFoundError,
)


logger = get_struct_logger(__name__)

API_VERSION = "2022-11-28"
DOWNLOAD_CHUNK_SIZE = 64 * 1024
# (connect, read) seconds; a hung socket fails instead of blocking forever
DEFAULT_TIMEOUT = (10.0, 60.0)


class GitHubClient:
    """Client for the GitHub Actions artifacts endpoints."""

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_API_URL,
        session: requests.Session | None = None,
        timeout: tuple[float, float] = DEFAULT_TIMEOUT,
    ):
        # urljoin drops the last path segment unless the base ends with "/"
        self.base_url = base_url.rstrip("/") + "/"
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": API_VERSION,
                "User-Agent": f"gloveflash/{__version__}",
                "Authorization": f"Bearer {token}",
            }
        )

    def _get_full_url(self, endpoint: str) -> str:
        """Get full URL for API endpoint."""
        return urljoin(self.base_url, endpoint.lstrip("/"))

    def _raise_for_status(self, response: requests.Response) -> None:
        """Raise the matching GitHubAPIError for an unsuccessful response."""
        try:
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:

            def safe_json_parse(resp: requests.Response) -> Any:
                """Safely parse JSON response, returning None if parsing fails."""
                if not resp.content:
                    return None
                try:
                    return resp.json()
                except (ValueError, TypeError):
                    return None

            data = safe_json_parse(response)
            detail = data.get("message") if isinstance(data, dict) else None
            detail = detail or response.reason or str(e)

            if response.status_code in (401, 403):
                raise AuthenticationError(
                    f"GitHub rejected the access token: {detail}",
                    status_code=response.status_code,
                    response_data=data,
                ) from e
            elif response.status_code == 404:
                raise NotFoundError(
                    f"GitHub resource not found: {response.url}",
                    status_code=response.status_code,
                    response_data=data,
                ) from e
            else:
                raise GitHubAPIError(
                    f"GitHub API request failed ({response.status_code}): {detail}",
                    status_code=response.status_code,
                    response_data=data,
                ) from e

    def _handle_response(self, response: requests.Response) -> Any:
        """Handle API response and return its JSON body."""
        self._raise_for_status(response)
        try:
            return response.json()
        except ValueError as json_error:
            content_preview = response.text[:200] if response.text else "(empty)"
            raise GitHubAPIError(
                f"GitHub returned invalid JSON response. Status: {response.status_code}, "
                f"Content-Type: {response.headers.get('content-type', 'unknown')}, "
                f"Content preview: {content_preview}",
                status_code=response.status_code,
            ) from json_error

    def list_artifacts(self, owner: str, repo: str) -> list[Artifact]:
        """List the workflow artifacts of a repository.

        Only the first page of results is requested.

        Args:
            owner: Repository owner
            repo: Repository name

        Returns:
            Artifacts in the order GitHub returned them
        """
        endpoint = f"repos/{owner}/{repo}/actions/artifacts"
        try:
            response = self.session.get(
                self._get_full_url(endpoint), timeout=self.timeout
            )
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"Network error: {e}") from e

        data = self._handle_response(response)
        try:
            listing = ArtifactList.model_validate(data)
        except ValidationError as e:
            raise GitHubAPIError(
                f"GitHub returned an unexpected artifact listing: {e}",
                status_code=response.status_code,
                response_data=data,
            ) from e
        logger.info(
            "artifacts_listed",
            repository=f"{owner}/{repo}",
            total_count=listing.total_count,
            returned=len(listing.artifacts),
        )
        return listing.artifacts

    def get_artifact_download_url(
        self, owner: str, repo: str, artifact_id: int
    ) -> str:
        """Resolve the short-lived download URL of an artifact archive.

        GitHub answers the zip endpoint with a redirect to signed storage;
        the redirect is not followed so the token never leaves GitHub.
        """
        endpoint = f"repos/{owner}/{repo}/actions/artifacts/{artifact_id}/zip"
        try:
            response = self.session.get(
                self._get_full_url(endpoint),
                allow_redirects=False,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"Network error: {e}") from e

        self._raise_for_status(response)
        location = response.headers.get("Location")
        if not response.is_redirect or not location:
            raise GitHubAPIError(
                f"Expected a redirect for artifact {artifact_id}, "
                f"got status {response.status_code}",
                status_code=response.status_code,
            )

        logger.debug("artifact_url_resolved", artifact_id=artifact_id)
        return location

    def download(self, url: str, destination: Path) -> Path:
        """Stream a file to disk.

        Args:
            url: Signed download URL
            destination: File to write, replaced if it exists

        Returns:
            The destination path
        """
        try:
            # A None value drops the session-level Authorization header
            with self.session.get(
                url,
                stream=True,
                headers={"Authorization": None},
                timeout=self.timeout,
            ) as response:
                self._raise_for_status(response)
                written = 0
                try:
                    with destination.open("wb") as f:
                        for chunk in response.iter_content(
                            chunk_size=DOWNLOAD_CHUNK_SIZE
                        ):
                            if chunk:
                                f.write(chunk)
                                written += len(chunk)
                except OSError as e:
                    raise create_file_error(destination, "download", e) from e
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"Network error: {e}") from e

        logger.info("artifact_downloaded", path=str(destination), bytes=written)
        return destination


def create_github_client(
    token: str,
    base_url: str = DEFAULT_API_URL,
    session: requests.Session | None = None,
) -> GitHubClient:
    """Create a GitHubClient instance."""
    return GitHubClient(token=token, base_url=base_url, session=session)
