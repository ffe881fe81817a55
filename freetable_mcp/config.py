from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_BASE = "https://free-table.gyurmatag.workers.dev"


class Settings(BaseSettings):
    """Application configuration loaded from environment variables and .env file.

    The backend base URL is fixed for the lifetime of the process; every tool
    call goes to the same FreeTable deployment.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # FreeTable backend
    freetable_api_base: str = DEFAULT_API_BASE
    http_timeout: float = 30.0

    # Transport and bind address ("stdio" or "http")
    mcp_transport: str = "stdio"
    mcp_host: str = "0.0.0.0"
    mcp_port: int = 8000

    # Paths & logging: default is <project_root>/data so it works
    # regardless of the process working directory.
    data_dir: Path = Path(__file__).resolve().parent.parent / "data"
    log_level: str = "INFO"

    @field_validator("freetable_api_base")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @property
    def uses_http(self) -> bool:
        """Return True when the server should listen on HTTP instead of stdio."""
        return self.mcp_transport.lower() in {"http", "streamable-http"}


_settings: Settings | None = None


def get_settings() -> Settings:
    """Return the cached Settings singleton. Created on first call."""
    global _settings  # noqa: PLW0603
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Clear the cached settings. Used in tests."""
    global _settings  # noqa: PLW0603
    _settings = None
