"""
Configuration management for the Registrar API
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="REGISTRAR_",
        case_sensitive=False,
        extra="ignore",
    )

    # Seed data (None means the JSON files bundled with the package)
    data_dir: str | None = None
    courses_file: str = "courses.json"
    students_file: str = "students.json"
    grades_file: str = "grades.json"

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 3000
    api_reload: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]

    # GraphiQL IDE served from GET /graphql
    graphiql: bool = True

    # Logging
    debug: bool = True
    log_level: str = "INFO"


# Global settings instance
settings = Settings()
