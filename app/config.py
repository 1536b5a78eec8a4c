# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import settings
#   print(settings.IMAGES_BUCKET)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
# =============================================================================

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses pydantic-settings to:
    - Automatically load from .env file
    - Validate types and constraints
    - Provide sensible defaults for development

    All settings are accessed via the global `settings` instance.
    """

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging, auto-reload)"
    )

    API_HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the API server to"
    )

    API_PORT: int = Field(
        default=8000,
        ge=1,
        le=65535,
        description="Port for the API server"
    )

    # CORS origins (comma-separated string that gets parsed)
    CORS_ORIGINS: str = Field(
        default="*",
        description="Allowed CORS origins (comma-separated)"
    )

    # -------------------------------------------------------------------------
    # Storage Backends
    # -------------------------------------------------------------------------
    # "supabase" uses a table for settings and a Storage bucket for images.
    # "memory" keeps everything in-process (development and tests).

    STORAGE_BACKEND: Literal["supabase", "memory"] = Field(
        default="supabase",
        description="Backend for the key-value and object stores"
    )

    SUPABASE_URL: str | None = Field(
        default=None,
        description="Supabase project URL (e.g., https://xxx.supabase.co)"
    )

    SUPABASE_SERVICE_KEY: str | None = Field(
        default=None,
        description="Supabase service_role key (bypasses RLS)"
    )

    SETTINGS_TABLE: str = Field(
        default="kv_store",
        description="Table backing the key-value store"
    )

    SETTINGS_KEY: str = Field(
        default="website_settings",
        min_length=1,
        description="Key under which the single settings document is stored"
    )

    IMAGES_BUCKET: str = Field(
        default="images",
        description="Storage bucket for uploaded images"
    )

    # -------------------------------------------------------------------------
    # Image Upload Settings
    # -------------------------------------------------------------------------

    MAX_IMAGE_SIZE_BYTES: int = Field(
        default=5 * 1024 * 1024,
        ge=1,
        description="Maximum image upload size in bytes"
    )

    ALLOWED_IMAGE_TYPES: str = Field(
        default="image/jpeg,image/png,image/gif,image/webp",
        description="Allowed image MIME types (comma-separated)"
    )

    IMAGE_KEY_PREFIX: str = Field(
        default="products",
        description="Key prefix for uploaded images"
    )

    IMAGE_CACHE_CONTROL: str = Field(
        default="public, max-age=31536000",
        description="Cache-Control header for served images"
    )

    # -------------------------------------------------------------------------
    # Pages
    # -------------------------------------------------------------------------

    SITE_TITLE_SUFFIX: str = Field(
        default="B2B Product Exhibition",
        description="Appended to page titles as ' - <suffix>'"
    )

    DEFAULT_META_DESCRIPTION: str = Field(
        default="B2B Product Exhibition - High-quality industrial products and solutions",
        description="Meta description used when a page doesn't set its own"
    )

    STATIC_IMAGES_DIR: str = Field(
        default="static/images",
        description="Directory served under /images/"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        # Load from .env file in project root
        env_file=".env",
        env_file_encoding="utf-8",
        # Treat empty values as unset
        env_ignore_empty=True,
        # Case-sensitive environment variable names
        case_sensitive=True,
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def cors_origins_list(self) -> list[str]:
        """
        Parse CORS_ORIGINS string into a list.

        Example: "http://localhost:3000, https://myapp.com" -> ["http://localhost:3000", "https://myapp.com"]
        """
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def allowed_image_types_list(self) -> list[str]:
        """
        Parse ALLOWED_IMAGE_TYPES string into a list.

        Example: "image/png, image/gif" -> ["image/png", "image/gif"]
        """
        return [t.strip().lower() for t in self.ALLOWED_IMAGE_TYPES.split(",") if t.strip()]

    @property
    def max_image_size_mb(self) -> float:
        """Upload ceiling in MB, for error messages."""
        return self.MAX_IMAGE_SIZE_BYTES / (1024 * 1024)

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once,
    not on every access.

    Returns:
        Settings: The application settings instance
    """
    return Settings()


# Global settings instance for easy importing
# Usage: from app.config import settings
settings = get_settings()
