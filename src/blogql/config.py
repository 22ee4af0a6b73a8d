"""
Configuration management for the blogql server
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 4000
    api_reload: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]

    # GraphQL
    graphiql: bool = True  # Serve the GraphiQL IDE on GET /graphql

    # Seed data
    seed_path: str | None = None  # JSON fixture; built-in seed when unset
    validate_references: bool = True  # Reject posts with dangling author ids at startup

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = True
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "BLOGQL_"
        case_sensitive = False


# Global settings instance
settings = Settings()
