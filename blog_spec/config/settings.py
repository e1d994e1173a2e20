"""Centralized configuration for blog-spec.

Settings come from ``BLOG_SPEC_*`` environment variables and an optional
``.env`` file. Paths are resolved against ``site_root``.
"""

from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field
from pydantic import field_validator
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict


class Settings(BaseSettings):
    """Settings for validating a site."""

    # === Site Layout ===
    site_root: str = Field(default=".", description="Root directory of the site")
    posts_dir: str = Field(default="_posts", description="Posts directory, relative to site_root")
    posts_pattern: str = Field(default="**/*.md", description="Glob selecting post files")
    config_file: str = Field(default="_config.yml", description="Site configuration file, relative to site_root")

    # === Expected Values ===
    expected_author: str = Field(default="jlordiales", description="Author every post must declare")
    expected_permalink: str = Field(default="/:year/:month/:day/:title", description="Site permalink format")
    expected_url: str = Field(default="http://jlordiales.me", description="Site url")

    # === Logging Configuration ===
    log_level: str = Field(default="INFO", description="Logging level")
    structured_logging: bool = Field(default=False, description="Emit JSON log lines")

    model_config = SettingsConfigDict(
        env_prefix="BLOG_SPEC_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level '{value}'")
        return level

    @property
    def site_root_path(self) -> Path:
        return Path(self.site_root)

    @property
    def posts_path(self) -> Path:
        """Get the posts directory as a Path object."""
        return self.site_root_path / self.posts_dir

    @property
    def config_path(self) -> Path:
        """Get the site configuration file as a Path object."""
        return self.site_root_path / self.config_file


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global settings instance (singleton pattern)."""
    global _settings
    if _settings is None:
        load_dotenv()  # Load .env file
        _settings = Settings()
    return _settings


def reset_settings():
    """Reset the global settings instance (primarily for testing)."""
    global _settings
    _settings = None
