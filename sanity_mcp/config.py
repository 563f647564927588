"""Server configuration loaded from the environment.

Environment variables:
    SANITY_PROJECT_ID: Project that owns the dataset
    SANITY_DATASET: Dataset to operate on
    SANITY_API_TOKEN: Token with write access to the dataset
    SANITY_API_HOST: API host (default https://api.sanity.io)
    SANITY_API_VERSION: Dated API version (default 2025-02-19)
    MAX_BULK_ITEMS: Upper bound on items accepted by bulk tools

Values are read once at import from the process environment and an optional
.env file in the working directory.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Worst-case concurrent fan-out against the content store per bulk call
DEFAULT_MAX_BULK_ITEMS = 10


class Settings(BaseSettings):
    """Settings for the MCP server and its content-store client."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # Sanity resource
    sanity_project_id: str = ""
    sanity_dataset: str = ""
    sanity_api_token: str = ""
    sanity_api_host: str = "https://api.sanity.io"
    sanity_api_version: str = "2025-02-19"

    # Client behaviour
    request_timeout_seconds: float = Field(default=30.0, gt=0)
    max_bulk_items: int = Field(default=DEFAULT_MAX_BULK_ITEMS, ge=1, le=100)

    # HTTP server
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    log_level: str = "INFO"


settings = Settings()
