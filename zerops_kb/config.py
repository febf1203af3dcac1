"""Application settings loaded from environment variables and `.env`."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    """Runtime configuration for the knowledge base API."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- server ---
    host: str = "0.0.0.0"
    port: int = 8080
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"
    public_base_url: str = "http://localhost:8080"

    # --- knowledge source ---
    # Resource paths are built as <knowledge_base_path>/<type>/<name>.json
    # relative to knowledge_root.
    knowledge_root: Path = PACKAGE_DIR
    knowledge_base_path: str = "knowledge/data"

    # --- search ---
    default_search_limit: int = 10
    max_search_limit: int = 20
    summary_max_chars: int = 200

    # --- cors / error tracking ---
    cors_allowed_origins: str = "*"
    sentry_dsn: str | None = None

    @property
    def cors_origins_list(self) -> list[str]:
        """Comma-separated CORS origins as a list."""
        return [origin.strip() for origin in self.cors_allowed_origins.split(",") if origin.strip()]


settings = Settings()
