"""Application configuration using pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_JWT_SECRET = "your-super-secret-key-change-in-production"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # App
    app_env: str = "development"
    app_debug: bool = False
    app_port: int = 8000
    api_prefix: str = "/api/v1"
    api_version: str = "v1"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]
    cors_credentials: bool = False

    # Database - individual components
    db_host: str = "localhost"
    db_port: int = 5432
    db_user: str = "postgres"
    db_password: str = "postgres"
    db_name: str = "catalog_db"
    # Full URL override, e.g. sqlite+aiosqlite:///./catalog.db
    db_url: str = ""
    db_echo: bool = False
    db_create_all: bool = False

    @property
    def database_url(self) -> str:
        """Construct async database URL from components."""
        if self.db_url:
            return self.db_url
        return f"postgresql+psycopg_async://{self.db_user}:{self.db_password}@{self.db_host}:{self.db_port}/{self.db_name}"

    # JWT Settings
    jwt_secret_key: str = DEFAULT_JWT_SECRET
    jwt_algorithm: str = "HS256"

    # Rate limiting
    rate_limit_enabled: bool = True
    rate_limit_window_seconds: int = 900
    rate_limit_max_requests: int = 100

    # Logging
    log_level: str = "INFO"

    health_check_enabled: bool = True

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.app_env == "development"

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"

    def validate_for_production(self) -> None:
        """Refuse to start outside development with the default JWT secret."""
        if not self.is_development and self.jwt_secret_key == DEFAULT_JWT_SECRET:
            raise RuntimeError(
                "JWT_SECRET_KEY must be set to a non-default value outside development"
            )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
