"""Application configuration using pydantic-settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Database
    database_url: str = "mysql+aiomysql://root:@localhost:3306/catalogo_peliculas"
    db_pool_size: int = 5
    db_max_overflow: int = 10
    db_echo: bool = False

    # API settings
    api_host: str = "0.0.0.0"
    api_port: int = 5000
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]
    log_level: str = "INFO"

    # Client settings
    api_base_url: str = "http://localhost:5000"
    client_timeout: float = 10.0


# Global settings instance
settings = Settings()
