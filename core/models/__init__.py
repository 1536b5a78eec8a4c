# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - site_settings.py: the single site settings document
# - image.py: uploaded image responses
#
# These models define the "contract" between API and clients.
# =============================================================================

from .site_settings import (
    DEFAULT_SETTINGS,
    DEFAULT_SITE_NAME,
    SETTINGS_FIELDS,
    SiteSettings,
)
from .image import ImageUploadResult

__all__ = [
    # Settings
    "DEFAULT_SETTINGS",
    "DEFAULT_SITE_NAME",
    "SETTINGS_FIELDS",
    "SiteSettings",
    # Images
    "ImageUploadResult",
]
