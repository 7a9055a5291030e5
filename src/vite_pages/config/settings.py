"""Application settings using Pydantic Settings."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="VITE_PAGES_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # General
    log_level: str = "INFO"

    # Scaffolding
    default_project_name: str = "learning_react"
    vite_template: str = "react"
    npm_executable: str = "npm"

    # Git
    git_executable: str = "git"
    default_branch: str = "main"
    commit_message: str = "initial commit"
    mark_safe_directory: bool = True

    # Deployment
    dist_dir: str = "dist"

    # What to do when vite.config.js has no base and no defineConfig({ line
    on_missing_anchor: Literal["warn", "fail", "template"] = "warn"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
