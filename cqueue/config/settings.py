from typing import Literal

from fastapi import Depends
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="cqueue", description="Application name")
    version: str = Field(default="0.1.0", description="Application version")
    environment: str = Field(default="development", description="Environment")
    debug: bool = Field(default=True, description="Debug mode")

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Logging level"
    )

    # Server
    host: str = Field(default="localhost", description="Server host")
    port: int = Field(default=3000, description="Server port")
    workers: int = Field(default=1, description="Number of workers")

    def model_post_init(self, __context) -> None:
        """Validate settings after initialization."""
        # Job state lives in process memory, so every worker process would
        # own a separate queue.
        if self.workers != 1:
            raise ValueError(
                f"WORKERS={self.workers} is not supported. "
                "The job queue is held in memory and requires WORKERS=1."
            )


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Dependency injection function for settings."""
    return settings


# Convenience type alias for dependency injection
SettingsDep = Depends(get_settings)
