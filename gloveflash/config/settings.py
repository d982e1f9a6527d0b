"""Environment backed settings for Gloveflash."""

from typing import Any

from pydantic import Field, SecretStr, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from gloveflash.core.errors import ConfigError
from gloveflash.core.structlog_logger import get_struct_logger


logger = get_struct_logger(__name__)

DEFAULT_API_URL = "https://api.github.com"


class FlashSettings(BaseSettings):
    """Settings read from the process environment and a local .env file.

    Precedence order (highest to lowest):
    1. Constructor arguments
    2. Environment variables
    3. .env file
    4. Default values (lowest)
    """

    model_config = SettingsConfigDict(
        env_prefix="",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
    )

    owner: str = Field(description="Owner of the repository building the firmware")
    repo: str = Field(description="Repository whose workflow artifacts are flashed")
    github_pat: SecretStr = Field(
        description="GitHub personal access token with actions:read access"
    )
    github_api_url: str = Field(
        default=DEFAULT_API_URL,
        description="Base URL of the GitHub REST API",
    )


ENV_NAMES = {
    "owner": "OWNER",
    "repo": "REPO",
    "github_pat": "GITHUB_PAT",
    "github_api_url": "GITHUB_API_URL",
}


def load_settings(**overrides: Any) -> FlashSettings:
    """Load settings, turning validation failures into a ConfigError.

    Args:
        **overrides: Explicit values taking precedence over the environment

    Returns:
        Validated FlashSettings

    Raises:
        ConfigError: If a required variable is missing or a value is invalid
    """
    try:
        settings = FlashSettings(**overrides)
    except ValidationError as e:
        missing = []
        invalid = []
        for error in e.errors():
            field = str(error["loc"][0]) if error["loc"] else ""
            name = ENV_NAMES.get(field, field.upper())
            if error["type"] == "missing":
                missing.append(name)
            else:
                invalid.append(f"{name} ({error['msg']})")

        parts = []
        if missing:
            parts.append(
                "missing required environment variables: " + ", ".join(missing)
            )
        if invalid:
            parts.append("invalid environment variables: " + ", ".join(invalid))
        raise ConfigError(
            "; ".join(parts), context={"missing": missing, "invalid": invalid}
        ) from e

    logger.debug(
        "settings_loaded",
        owner=settings.owner,
        repo=settings.repo,
        api_url=settings.github_api_url,
    )
    return settings
