from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application configuration loaded from environment variables / .env file."""

    app_name: str = "Vendor Registry"
    app_env: str = "development"
    app_port: int = 8000
    frontend_url: str = "http://localhost:3000"
    log_level: str | None = Field(default=None, alias="LOG_LEVEL")

    # Storage: "sql" persists pages through SQLAlchemy, "vector" keeps them in RAM
    memory_backend: Literal["sql", "vector"] = Field(default="sql", alias="MEMORY_BACKEND")
    database_url: str = Field(
        default="sqlite:///./vendor_registry.db",
        alias="DATABASE_URL",
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "populate_by_name": True,
    }

    @property
    def effective_log_level(self) -> str:
        """Explicit LOG_LEVEL wins; otherwise DEBUG in development, INFO elsewhere."""
        if self.log_level:
            return self.log_level.upper()
        return "DEBUG" if self.app_env == "development" else "INFO"

settings = Settings()
