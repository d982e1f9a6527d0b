"""Core test fixtures for the gloveflash project."""

import io
import logging
import zipfile
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest
import structlog
from typer.testing import CliRunner

from gloveflash.config.models import FlashConfig
from gloveflash.github.models import Artifact


ENV_VARS = ["OWNER", "REPO", "GITHUB_PAT", "GITHUB_API_URL"]


# ---- Base Fixtures ----


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def restore_logging() -> Generator[None, None, None]:
    """Undo global logging changes made by setup_logging."""
    root_logger = logging.getLogger()
    level = root_logger.level
    yield
    # pytest's own capture handlers are subclasses and stay untouched
    for handler in list(root_logger.handlers):
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)
    structlog.reset_defaults()


# ---- Test Isolation Fixtures ----


@pytest.fixture
def clean_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[Path, None, None]:
    """Run in an empty working directory without any gloveflash variables.

    The working directory matters: settings read ``.env`` from it and the
    pipeline writes its temporary files there.
    """
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    work_dir = tmp_path / "work"
    work_dir.mkdir()
    monkeypatch.chdir(work_dir)
    yield work_dir


@pytest.fixture
def flash_env(clean_environment: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Environment with all required variables set."""
    monkeypatch.setenv("OWNER", "octo")
    monkeypatch.setenv("REPO", "zmk-config")
    monkeypatch.setenv("GITHUB_PAT", "ghp_test_token")
    return clean_environment


# ---- Device Fixtures ----


@pytest.fixture
def mount_dir(tmp_path: Path) -> Path:
    """Directory with both bootloader volumes mounted."""
    volumes = tmp_path / "Volumes"
    (volumes / "GLV80LHBOOT").mkdir(parents=True)
    (volumes / "GLV80RHBOOT").mkdir(parents=True)
    return volumes


@pytest.fixture
def work_dir(tmp_path: Path) -> Path:
    path = tmp_path / "scratch"
    path.mkdir()
    return path


@pytest.fixture
def flash_config(mount_dir: Path, work_dir: Path) -> FlashConfig:
    return FlashConfig(
        owner="octo", repo="zmk-config", directory=mount_dir, work_dir=work_dir
    )


# ---- Artifact Fixtures ----


@pytest.fixture
def artifact_data() -> Callable[..., dict[str, Any]]:
    """Factory for artifact payloads shaped like the GitHub API."""

    def _make(
        artifact_id: int = 1,
        created_at: str = "2024-05-01T10:00:00Z",
        expired: bool = False,
        name: str = "glove80",
    ) -> dict[str, Any]:
        return {
            "id": artifact_id,
            "node_id": f"MDg6QXJ0aWZhY3Q{artifact_id}",
            "name": name,
            "size_in_bytes": 1024,
            "url": f"https://api.github.com/repos/octo/zmk-config/actions/artifacts/{artifact_id}",
            "archive_download_url": f"https://api.github.com/repos/octo/zmk-config/actions/artifacts/{artifact_id}/zip",
            "expired": expired,
            "created_at": created_at,
            "expires_at": "2024-08-01T10:00:00Z",
            "updated_at": created_at,
        }

    return _make


@pytest.fixture
def make_artifact(
    artifact_data: Callable[..., dict[str, Any]],
) -> Callable[..., Artifact]:
    """Factory for Artifact models."""

    def _make(**kwargs: Any) -> Artifact:
        return Artifact.model_validate(artifact_data(**kwargs))

    return _make


@pytest.fixture
def firmware_bytes() -> bytes:
    return b"UF2\nWQ]\x9e" + bytes(range(256)) * 4


@pytest.fixture
def zip_bytes() -> Callable[[dict[str, bytes]], bytes]:
    """Factory building an in-memory ZIP archive from name -> content."""

    def _make(members: dict[str, bytes]) -> bytes:
        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, "w") as zf:
            for name, content in members.items():
                zf.writestr(name, content)
        return buffer.getvalue()

    return _make
