"""Application configuration from environment variables."""

from pathlib import Path
from pydantic_settings import BaseSettings


PROJECT_ROOT = Path(__file__).parent.parent


def _resolve_env_file() -> Path:
    """Find .env in the project root."""
    return PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # Branding
    SITE_NAME: str = "Go Web Server Tutorial"

    # Listener
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    LOG_LEVEL: str = "info"
    TIMEOUT_KEEP_ALIVE: int = 10

    # Paths
    STATIC_DIR: Path = PROJECT_ROOT / "static"
    EXAMPLES_DIR: Path = PROJECT_ROOT / "static" / "examples"

    # Write downloadable example files on startup
    MATERIALIZE_EXAMPLES: bool = True

    class Config:
        env_file = str(_resolve_env_file())
        env_file_encoding = "utf-8"


settings = Settings()
