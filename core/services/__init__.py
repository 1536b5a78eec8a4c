# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .settings_service import (
    KeyValueSettingsRepository,
    SettingsRepository,
    SettingsService,
)
from .image_service import ImageService

__all__ = [
    "KeyValueSettingsRepository",
    "SettingsRepository",
    "SettingsService",
    "ImageService",
]
